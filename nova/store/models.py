"""The config record entity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConfigRecord:
    """A stored configuration file.

    ``filename`` and ``shorthand`` are both unique across the store.  Only
    ``content`` ever changes, and only through :meth:`with_content`.
    """

    filename: str
    shorthand: str
    content: str = ""

    @property
    def content_length(self) -> int:
        return len(self.content)

    def with_content(self, content: str) -> "ConfigRecord":
        """Return a copy carrying *content*."""
        return dataclasses.replace(self, content=content)
