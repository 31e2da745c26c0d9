"""Paged response container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Items of one page plus the continuation token for the next one.

    An empty ``next_page_token`` means there is no further page.
    """

    items: tuple[T, ...] = field(default_factory=tuple)
    next_page_token: bytes = b""

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_token)
