from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from salat.pages.context import PageContext

PageInitializer = Callable[["PageContext"], Awaitable[None]]


class PageRegistry:
    """Page identifier to async initializer, in registration order."""

    def __init__(self) -> None:
        self._pages: Dict[str, PageInitializer] = {}

    def register(self, name: str, initializer: PageInitializer) -> None:
        if not name or name != name.strip().lower():
            raise ValueError(f"Page id must be a lowercase word, got {name!r}")
        if name in self._pages:
            raise ValueError(f"Page '{name}' already registered")
        if not inspect.iscoroutinefunction(initializer):
            raise TypeError(f"Initializer for page '{name}' must be an async function")
        self._pages[name] = initializer

    def get(self, name: str) -> PageInitializer:
        try:
            return self._pages[name]
        except KeyError as exc:
            raise KeyError(f"Page '{name}' is not registered; choose from {', '.join(self.names())}") from exc

    def names(self) -> List[str]:
        return list(self._pages)

    def __contains__(self, name: object) -> bool:
        return name in self._pages
