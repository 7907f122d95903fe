"""Declarative per-language default catalogs.

A LanguageCatalog is pure data: the named style slots with their compiled
defaults, the keyword classes, and the tables that map slots and keyword
classes onto the renderer's own numbering. One generic initializer and one
generic applier consume every catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .filetypes import Filetype
from .model import StyleAttribute

WHITE = 0xFFFFFF


@dataclass(frozen=True)
class StyleSlot:
    """A named entry in a language's style table."""

    name: str
    default: StyleAttribute


@dataclass(frozen=True)
class KeywordClass:
    """A keyword list read from ``[keywords] <key>``."""

    key: str
    default: str = ""


@dataclass(frozen=True)
class StyleBinding:
    """Renderer style id fed from a slot.

    ``source`` names the filetype whose table holds the slot; None means
    the catalog's own filetype.
    """

    style_id: int
    slot: int
    source: Optional[Filetype] = None


@dataclass(frozen=True)
class KeywordBinding:
    """Renderer keyword class fed from a keyword list index.

    ``merge_global`` prepends global type names from the symbol index.
    """

    class_id: int
    index: int
    merge_global: bool = False
    source: Optional[Filetype] = None


@dataclass(frozen=True)
class FlagSetting:
    """Two-integer [styling] setting that switches a lexer property on.

    When the first resolved value equals 1, ``property_name`` is set to "1".
    """

    key: str
    defaults: tuple[int, int]
    property_name: Optional[str] = None


@dataclass(frozen=True)
class LanguageCatalog:
    filetype: Filetype
    lexer: str
    styles: tuple[StyleSlot, ...] = ()
    keywords: tuple[KeywordClass, ...] = ()
    style_map: tuple[StyleBinding, ...] = ()
    keyword_map: tuple[KeywordBinding, ...] = ()
    flags: tuple[FlagSetting, ...] = ()
    properties: tuple[tuple[str, str], ...] = ()
    embeds: tuple[Filetype, ...] = ()

    @property
    def config_name(self) -> str:
        return self.filetype.config_name

    @property
    def is_pass_through(self) -> bool:
        """True when the catalog owns no styles and borrows another table."""
        return not self.styles

    def slot_index(self, name: str) -> Optional[int]:
        for index, slot in enumerate(self.styles):
            if slot.name == name:
                return index
        return None

    def sources(self) -> set[Filetype]:
        """Filetypes whose entities must exist before this one is applied."""
        found = {b.source for b in self.style_map if b.source is not None}
        found.update(b.source for b in self.keyword_map if b.source is not None)
        found.update(self.embeds)
        found.discard(self.filetype)
        return found


def style(fg: int, bg: int = WHITE, bold: bool = False, italic: bool = False) -> StyleAttribute:
    return StyleAttribute(fg, bg, bold, italic)


def slots(*entries: tuple[str, StyleAttribute]) -> tuple[StyleSlot, ...]:
    return tuple(StyleSlot(name, default) for name, default in entries)


def bindings(
    pairs: Iterable[tuple[int, int]],
    source: Optional[Filetype] = None,
) -> tuple[StyleBinding, ...]:
    """``(style_id, slot)`` pairs to StyleBindings."""
    return tuple(StyleBinding(style_id, slot, source) for style_id, slot in pairs)


def sequential_bindings(count: int, source: Optional[Filetype] = None) -> tuple[StyleBinding, ...]:
    """Bindings for lexers whose style ids equal the slot index."""
    return bindings(((index, index) for index in range(count)), source)


def keyword_bindings(
    *class_ids: int,
    merge_global: Iterable[int] = (),
    source: Optional[Filetype] = None,
) -> tuple[KeywordBinding, ...]:
    """Bind keyword list index N to renderer class ``class_ids[N]``."""
    merged = set(merge_global)
    return tuple(
        KeywordBinding(class_id, index, index in merged, source)
        for index, class_id in enumerate(class_ids)
    )
