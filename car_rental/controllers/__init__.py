from .shell import Shell

__all__ = [
    "Shell",
]
