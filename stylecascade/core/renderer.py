"""Interface to the component that paints highlighted text.

Subclasses must implement the four style/keyword/charset calls. The chrome
hooks default to no-ops so renderers without carets, markers or folding can
ignore them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .model import FoldingStyle

# Renderer-wide style ids shared by every lexer
STYLE_DEFAULT = 32
STYLE_LINENUMBER = 33
STYLE_BRACELIGHT = 34
STYLE_BRACEBAD = 35
STYLE_INDENTGUIDE = 37

# Marker numbers
MARKER_LINE = 0
MARKER_SEARCH = 1

NULL_LEXER = "null"


class MarkerSymbol(Enum):
    SHORT_ARROW = "short_arrow"
    PLUS = "plus"


class StyleRenderer(ABC):
    """Receives resolved styling.

    Colours arrive in 0xRRGGBB order unless ``bgr`` is True, in which case
    the caller rotates them to 0xBBGGRR first.
    """

    bgr: bool = False

    @abstractmethod
    def set_style(self, style_id: int, foreground: int, background: int,
                  bold: bool, italic: bool) -> None:
        ...

    @abstractmethod
    def set_keywords(self, class_id: int, words: str) -> None:
        ...

    @abstractmethod
    def set_word_chars(self, chars: str) -> None:
        ...

    @abstractmethod
    def set_whitespace_chars(self, chars: str) -> None:
        ...

    def clear_styles(self) -> None:
        pass

    def set_lexer(self, lexer: str) -> None:
        pass

    def set_property(self, name: str, value: str) -> None:
        pass

    def set_caret(self, color: int, width: int, block: bool) -> None:
        pass

    def set_current_line(self, background: int, visible: bool, alpha: int) -> None:
        pass

    def set_selection(self, foreground: Optional[int], background: Optional[int],
                      alpha: int) -> None:
        """None for a colour keeps the renderer's own selection colour."""

    def set_whitespace_colors(self, foreground: Optional[int],
                              background: Optional[int]) -> None:
        """None for a colour keeps the renderer's default."""

    def set_wrap_visuals(self, flags: int, location: int, start_indent: int) -> None:
        pass

    def define_marker(self, number: int, symbol: MarkerSymbol, foreground: int,
                      background: int, alpha: int) -> None:
        pass

    def set_folding(self, style: FoldingStyle, fold_flags: int, margin_color: int) -> None:
        pass
