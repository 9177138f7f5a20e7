from __future__ import annotations

from salat.services.tasbeeh import MemoryCounterStore, TasbeehCounter

from .context import PageContext, warn

PAGE = "tasbeeh"


def open_counter(ctx: PageContext) -> TasbeehCounter:
    store = ctx.counter_store if ctx.counter_store is not None else MemoryCounterStore()
    return TasbeehCounter(store)


def apply_action(counter: TasbeehCounter, action: str) -> None:
    """Apply "reset", "increment" or "increment:N" to the counter."""
    name, _, arg = action.partition(":")
    if name == "reset" and not arg:
        counter.reset()
        return
    if name == "increment":
        try:
            by = int(arg) if arg else 1
            counter.increment(by)
        except ValueError:
            warn(PAGE, f"ignoring action {action!r}: increment needs a positive integer")
        return
    warn(PAGE, f"ignoring unknown action {action!r}")


async def init_tasbeeh(ctx: PageContext) -> None:
    counter = open_counter(ctx)
    for action in ctx.actions:
        apply_action(counter, action)
    ctx.display.text("tasbeeh-count", str(counter.count))
