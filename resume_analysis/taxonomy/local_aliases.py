from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .provider import AliasProvider


class LocalAliasTable(AliasProvider):
    def __init__(self, aliases_path: str | Path | None = None) -> None:
        path = Path(aliases_path) if aliases_path else Path(__file__).with_name("aliases.json")
        self._lookup = self._build_lookup(self._load_aliases(path))

    @staticmethod
    def _load_aliases(path: Path) -> dict[str, list[str]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return {str(key): [str(alias) for alias in value] for key, value in raw.items()}

    @staticmethod
    def _build_lookup(aliases: dict[str, list[str]]) -> Mapping[str, tuple[str, ...]]:
        groups: dict[str, list[str]] = {}
        for canonical, variants in aliases.items():
            forms = [canonical.lower(), *(variant.lower() for variant in variants)]
            for form in forms:
                existing = groups.setdefault(form, [])
                for item in forms:
                    if item not in existing:
                        existing.append(item)
        return MappingProxyType({form: tuple(items) for form, items in groups.items()})

    def search_terms(self, keyword: str) -> tuple[str, ...]:
        normalized = keyword.lower()
        return self._lookup.get(normalized, (normalized,))
