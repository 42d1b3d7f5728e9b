
from functools import lru_cache

from .local_aliases import LocalAliasTable
from .provider import AliasProvider


@lru_cache(maxsize=1)
def get_default_alias_provider() -> AliasProvider:
    return LocalAliasTable()


__all__ = ["AliasProvider", "LocalAliasTable", "get_default_alias_provider"]
