from __future__ import annotations

import math
from typing import Generic, List, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import PageNavigation

T = TypeVar("T")


class Paginator(Generic[T]):
    """Page state over a fixed list.

    The list itself is never modified; navigation only moves the page index.
    """

    def __init__(self, items: Sequence[T], page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be greater than 0")
        self._items = items
        self._page_size = page_size
        self._page_index = 0

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def page_number(self) -> int:
        return self._page_index + 1

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(len(self._items) / self._page_size))

    @property
    def has_previous(self) -> bool:
        return self._page_index > 0

    @property
    def has_next(self) -> bool:
        return self._page_index < self.page_count - 1

    def current_page(self) -> List[T]:
        start = self._page_index * self._page_size
        return list(self._items[start:start + self._page_size])

    def header(self) -> str:
        return f"Page {self.page_number} of {self.page_count} (showing {len(self.current_page())} of {len(self._items)})"

    def choices(self) -> List[PageNavigation]:
        choices = []
        if self.has_previous:
            choices.append(PageNavigation.PREVIOUS)
        choices.append(PageNavigation.EXIT)
        if self.has_next:
            choices.append(PageNavigation.NEXT)
        return choices

    def navigate(self, choice) -> bool:
        """Apply a navigation choice; return False once the user exits.

        Raises ``ValueError`` for anything not currently offered, leaving the
        page unchanged.
        """
        try:
            choice = PageNavigation(choice)
        except ValueError:
            raise ValueError(f"Unknown navigation choice: {choice!r}")
        if choice not in self.choices():
            raise ValueError(f"{choice.value} is not available on page {self.page_number}")

        if choice is PageNavigation.EXIT:
            return False
        if choice is PageNavigation.NEXT:
            self._page_index += 1
        else:
            self._page_index -= 1
        return True
