from __future__ import annotations

from typing import Protocol


class AliasProvider(Protocol):
    def search_terms(self, keyword: str) -> tuple[str, ...]:
        """Return every lowercase form a keyword may appear as, the keyword itself included."""
