"""StyleRenderer that collects QTextCharFormats for Qt text widgets."""

from typing import Dict, Optional

from PyQt6.QtGui import QColor, QFont, QTextCharFormat

from ..core.model import FoldingStyle
from ..core.renderer import STYLE_DEFAULT, MarkerSymbol, StyleRenderer
from ..logging import get_logger

logger = get_logger(__name__)


def to_qcolor(color: int) -> QColor:
    """0xRRGGBB int to QColor."""
    return QColor((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


class QtStyleTable(StyleRenderer):
    """Style table for QSyntaxHighlighter based views.

    Keeps one QTextCharFormat per renderer style id plus the keyword lists,
    word characters and chrome colours for highlighters and editors to read.
    """

    def __init__(self):
        self._formats: Dict[int, QTextCharFormat] = {}
        self.keywords: Dict[int, frozenset] = {}
        self.word_chars = ""
        self.whitespace_chars = ""
        self.lexer = ""
        self.properties: Dict[str, str] = {}
        self.caret_color: Optional[QColor] = None
        self.caret_width = 1
        self.block_caret = False
        self.current_line_color: Optional[QColor] = None
        self.current_line_visible = False
        self.selection_foreground: Optional[QColor] = None
        self.selection_background: Optional[QColor] = None
        self.markers: Dict[int, tuple] = {}
        self.folding: Optional[FoldingStyle] = None
        self.fold_margin_color: Optional[QColor] = None

    # -- StyleRenderer ----------------------------------------------------

    def clear_styles(self) -> None:
        self._formats.clear()
        self.keywords.clear()
        self.properties.clear()

    def set_style(self, style_id: int, foreground: int, background: int,
                  bold: bool, italic: bool) -> None:
        fmt = QTextCharFormat()
        fmt.setForeground(to_qcolor(foreground))
        fmt.setBackground(to_qcolor(background))
        fmt.setFontWeight(QFont.Weight.Bold if bold else QFont.Weight.Normal)
        fmt.setFontItalic(italic)
        self._formats[style_id] = fmt

    def set_keywords(self, class_id: int, words: str) -> None:
        self.keywords[class_id] = frozenset(words.split())

    def set_word_chars(self, chars: str) -> None:
        self.word_chars = chars

    def set_whitespace_chars(self, chars: str) -> None:
        self.whitespace_chars = chars

    def set_lexer(self, lexer: str) -> None:
        logger.debug(f"Style table lexer: {lexer}")
        self.lexer = lexer

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def set_caret(self, color: int, width: int, block: bool) -> None:
        self.caret_color = to_qcolor(color)
        self.caret_width = width
        self.block_caret = block

    def set_current_line(self, background: int, visible: bool, alpha: int) -> None:
        self.current_line_color = to_qcolor(background)
        if alpha < 256:
            self.current_line_color.setAlpha(alpha)
        self.current_line_visible = visible

    def set_selection(self, foreground: Optional[int], background: Optional[int],
                      alpha: int) -> None:
        self.selection_foreground = to_qcolor(foreground) if foreground is not None else None
        self.selection_background = to_qcolor(background) if background is not None else None
        if self.selection_background is not None and alpha < 256:
            self.selection_background.setAlpha(alpha)

    def define_marker(self, number: int, symbol: MarkerSymbol, foreground: int,
                      background: int, alpha: int) -> None:
        self.markers[number] = (symbol, to_qcolor(foreground), to_qcolor(background), alpha)

    def set_folding(self, style: FoldingStyle, fold_flags: int, margin_color: int) -> None:
        self.folding = style
        self.fold_margin_color = to_qcolor(margin_color)

    # -- lookups ------------------------------------------------------------

    def has_format(self, style_id: int) -> bool:
        return style_id in self._formats

    def format_for(self, style_id: int) -> QTextCharFormat:
        """Format for a style id, falling back to STYLE_DEFAULT."""
        fmt = self._formats.get(style_id)
        if fmt is None:
            fmt = self._formats.get(STYLE_DEFAULT)
        return QTextCharFormat(fmt) if fmt is not None else QTextCharFormat()

    def keyword_class_of(self, word: str) -> Optional[int]:
        """Lowest keyword class containing ``word``."""
        for class_id in sorted(self.keywords):
            if word in self.keywords[class_id]:
                return class_id
        return None
