"""Tagged diagnostic lines, kept on stderr so they never mix with the menu."""
import click

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = bool(enabled)


def info(tag: str, message: str) -> None:
    """Emit `[tag] message` only when verbose output is on."""
    if _verbose:
        click.echo(f"[{tag}] {message}", err=True)


def warn(tag: str, message: str) -> None:
    """Warnings are always shown."""
    click.echo(f"[{tag}] WARNING: {message}", err=True)
