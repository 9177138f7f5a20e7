from __future__ import annotations

from typing import Optional, Protocol, Sequence

import typer


class DisplaySink(Protocol):
    def text(self, slot: str, value: str) -> None:
        ...

    def rows(self, slot: str, rows: Sequence[Sequence[str]], highlight: Optional[int] = None) -> None:
        ...


class ConsoleDisplay(DisplaySink):
    """Writes page slots to the terminal; the countdown slot is redrawn in place."""

    LIVE_SLOTS = frozenset({"countdown"})

    def __init__(self) -> None:
        self._live_open = False

    def text(self, slot: str, value: str) -> None:
        if slot in self.LIVE_SLOTS:
            typer.echo(f"\r{slot}: {value}", nl=False)
            self._live_open = True
            return
        self._close_live()
        typer.echo(f"{slot}: {value}")

    def rows(self, slot: str, rows: Sequence[Sequence[str]], highlight: Optional[int] = None) -> None:
        self._close_live()
        typer.echo(f"{slot}:")
        for idx, row in enumerate(rows):
            marker = ">" if idx == highlight else " "
            typer.echo(f"{marker} " + "\t".join(row))

    def _close_live(self) -> None:
        if self._live_open:
            typer.echo("")
            self._live_open = False
