"""Resolved style data model.

Everything here is immutable once built. The registry owns the instances
and hands the same frozen objects to every caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class StyleAttribute:
    """Foreground/background (0xRRGGBB) plus weight and slant."""

    foreground: int
    background: int
    bold: bool = False
    italic: bool = False


class CommonStyle(IntEnum):
    """Editor chrome slots in the common style set."""

    DEFAULT = 0
    SELECTION = 1
    BRACE_GOOD = 2
    BRACE_BAD = 3
    MARGIN_LINENUMBER = 4
    MARGIN_FOLDING = 5
    CURRENT_LINE = 6
    CARET = 7
    INDENT_GUIDE = 8
    WHITE_SPACE = 9
    MARKER_LINE = 10
    MARKER_SEARCH = 11

    @property
    def key(self) -> str:
        """Settings key under [styling]."""
        return self.name.lower()


class FoldMarker(Enum):
    BOX = 1
    CIRCLE = 2

    @classmethod
    def from_code(cls, code: int) -> "FoldMarker":
        return cls.CIRCLE if code == 2 else cls.BOX


class FoldConnector(Enum):
    STRAIGHT = 1
    CURVED = 2

    @classmethod
    def from_code(cls, code: int) -> "FoldConnector":
        return cls.CURVED if code == 2 else cls.STRAIGHT


class FoldLine(Enum):
    """Horizontal line drawn where text is folded."""

    NONE = 0
    ABOVE = 1
    BELOW = 2

    @classmethod
    def from_code(cls, code: int) -> "FoldLine":
        try:
            return cls(code)
        except ValueError:
            return cls.BELOW

    @property
    def fold_flags(self) -> int:
        """Renderer fold flag bits for this mode."""
        return {FoldLine.NONE: 0, FoldLine.ABOVE: 4, FoldLine.BELOW: 16}[self]


@dataclass(frozen=True)
class FoldingStyle:
    marker: FoldMarker = FoldMarker.BOX
    connector: FoldConnector = FoldConnector.STRAIGHT
    fold_line: FoldLine = FoldLine.BELOW


@dataclass(frozen=True)
class CommonStyleSet:
    """Filetype independent chrome styling, built once per registry."""

    styles: tuple[StyleAttribute, ...]
    folding: FoldingStyle
    invert_all: bool
    word_chars: str
    whitespace_chars: str
    caret_width: int = 1
    wrap_visual_flags: int = 3
    wrap_visual_location: int = 0
    wrap_start_indent: int = 0
    caret_line_alpha: int = 256
    selection_alpha: int = 256
    marker_line_alpha: int = 256
    marker_search_alpha: int = 256

    def __getitem__(self, slot: CommonStyle) -> StyleAttribute:
        return self.styles[slot]

    def style(self, slot: int) -> Optional[StyleAttribute]:
        if 0 <= slot < len(self.styles):
            return self.styles[slot]
        return None


@dataclass(frozen=True)
class StyleEntity:
    """Resolved styling for one filetype.

    ``styles`` is empty for pass-through filetypes that borrow another
    filetype's table.
    """

    filetype: int
    styles: tuple[StyleAttribute, ...]
    keywords: tuple[str, ...]
    word_chars: str
    settings: Mapping[str, tuple[int, int]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def style(self, slot: int) -> Optional[StyleAttribute]:
        if 0 <= slot < len(self.styles):
            return self.styles[slot]
        return None

    def keyword(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.keywords):
            return self.keywords[index]
        return None

    def setting(self, name: str) -> Optional[tuple[int, int]]:
        return self.settings.get(name)
