"""Merging of global type names into user keyword lists."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .filetypes import Filetype


class SymbolIndex(Protocol):
    """Provider of global type/class names per filetype."""

    def type_names(self, filetype: Filetype) -> Optional[Sequence[str]]:
        ...


class StaticSymbolIndex:
    """Dict-backed SymbolIndex, e.g. filled from a tags file."""

    def __init__(self, names: Optional[Mapping[Filetype, Sequence[str]]] = None):
        self._names: dict[Filetype, list[str]] = {
            Filetype(ft): list(values) for ft, values in (names or {}).items()
        }

    def add(self, filetype: Filetype, *names: str) -> None:
        bucket = self._names.setdefault(Filetype(filetype), [])
        for name in names:
            if name not in bucket:
                bucket.append(name)

    def type_names(self, filetype: Filetype) -> Optional[Sequence[str]]:
        names = self._names.get(Filetype(filetype))
        return tuple(names) if names else None


def merge_keywords(global_names: Optional[Sequence[str]], user_keywords: str) -> str:
    """Prepend global names to ``user_keywords``, space separated.

    Names keep the order they were supplied in. With no user keywords the
    result is just the joined names, without a dangling delimiter.
    """
    if not global_names:
        return user_keywords
    joined = " ".join(global_names)
    if not user_keywords:
        return joined
    return f"{joined} {user_keywords}"
