"""Rich-based display of builder errors.

Provides a table renderer for the errors returned by ``finalize()`` and an
observer that prints errors to a Rich console as they are recorded.

Requires the 'rich' package: pip install fluent-embed[rich]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from fluent_embed.events import BuilderEvent, BuilderEventType, BuilderObserver

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

    from fluent_embed.errors import BuildError

__all__ = ["RichErrorObserver", "print_errors", "render_errors"]


def render_errors(errors: Iterable[BuildError] | None, title: str = "Embed errors") -> Table:
    """Build a table listing ``errors`` in the order they were recorded.

    Args:
        errors: Errors as returned by ``finalize()``; None is treated as empty.
        title: Table title.

    Returns:
        Rich Table with one row per error.
    """
    from rich.table import Table

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", width=4)
    table.add_column("Error", style="cyan")
    table.add_column("Message", style="yellow")

    rows = list(errors or ())
    for i, error in enumerate(rows, start=1):
        # Truncate long messages
        msg = error.message
        display_msg = msg[:120] + "..." if len(msg) > 120 else msg
        table.add_row(str(i), type(error).__name__, display_msg)

    if not rows:
        table.add_row("-", "-", "No errors")

    return table


def print_errors(
    errors: Iterable[BuildError] | None,
    console: Console | None = None,
    title: str = "Embed errors",
) -> None:
    """Print ``render_errors(errors)`` to ``console`` (a new Console if None)."""
    from rich.console import Console

    (console or Console()).print(render_errors(errors, title=title))


class RichErrorObserver(BuilderObserver):
    """Prints builder errors to a Rich console as they happen.

    Example:
        observer = RichErrorObserver()
        embed = Embed()
        embed.add_observer(observer)
        embed.set_color(-5)  # prints "✗ embed: embed color must be between ..."

    Requires:
        pip install rich
    """

    def __init__(self, console: Console | None = None, show_finalize: bool = False) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            show_finalize: Also print a summary line when a builder is finalized.
        """
        from rich.console import Console

        self._console = console or Console()
        self._show_finalize = show_finalize
        self._error_count = 0

    @property
    def error_count(self) -> int:
        """Number of errors printed so far."""
        return self._error_count

    def on_event(self, event: BuilderEvent) -> None:
        """Handle builder events by printing the errors they carry.

        Args:
            event: The builder event to handle.
        """
        source = getattr(event.source, "kind", type(event.source).__name__)

        if event.event_type == BuilderEventType.ERROR_ADDED:
            self._print_error(source, event.data["error"])

        elif event.event_type == BuilderEventType.ERRORS_ABSORBED:
            for error in event.data.get("errors", []):
                self._print_error(source, error)

        elif event.event_type == BuilderEventType.FINALIZED and self._show_finalize:
            count = event.data.get("error_count", 0)
            style = "red" if count else "green"
            self._console.print(f"[{style}]{source} finalized with {count} error(s)[/]")

    def _print_error(self, source: str, error: BuildError) -> None:
        from rich.markup import escape

        self._error_count += 1
        self._console.print(f"[red]✗[/] [bold]{escape(source)}[/]: {escape(error.message)}")
