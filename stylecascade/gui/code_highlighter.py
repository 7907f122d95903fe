"""
Keyword highlighter driven by a resolved QtStyleTable.

Words are runs of the table's word characters. A word found in keyword
class K is painted with the format of the style id mapped to K; all other
text gets the STYLE_DEFAULT format.
"""

import re
from typing import Dict, List, Optional, Tuple

from PyQt6.QtGui import QSyntaxHighlighter, QTextCharFormat, QTextDocument

from ..core.common import DEFAULT_WORD_CHARS
from ..core.renderer import STYLE_DEFAULT
from .qt_renderer import QtStyleTable


class KeywordHighlighter(QSyntaxHighlighter):
    """Syntax highlighter that colours keyword-class words.

    Args:
        document: Document to highlight
        table: Style table filled by StyleRegistry.apply_to
        keyword_styles: Map of keyword class id -> renderer style id
    """

    def __init__(self, document: QTextDocument, table: QtStyleTable,
                 keyword_styles: Optional[Dict[int, int]] = None):
        super().__init__(document)
        self._table = table
        self._keyword_styles: Dict[int, int] = dict(keyword_styles or {})
        self._word_pattern = self._build_word_pattern()
        self._formats: Dict[int, QTextCharFormat] = self._create_formats()

    def _build_word_pattern(self) -> re.Pattern:
        chars = self._table.word_chars or DEFAULT_WORD_CHARS
        return re.compile('[' + re.escape(chars) + ']+')

    def _create_formats(self) -> Dict[int, QTextCharFormat]:
        """Keyword class id -> text format."""
        return {
            class_id: self._table.format_for(style_id)
            for class_id, style_id in self._keyword_styles.items()
        }

    @property
    def table(self) -> QtStyleTable:
        return self._table

    def set_table(self, table: QtStyleTable,
                  keyword_styles: Optional[Dict[int, int]] = None) -> None:
        """Swap in a new style table and re-highlight the document."""
        self._table = table
        if keyword_styles is not None:
            self._keyword_styles = dict(keyword_styles)
        self._word_pattern = self._build_word_pattern()
        self._formats = self._create_formats()
        self.rehighlight()

    def keyword_spans(self, text: str) -> List[Tuple[int, int, int]]:
        """(start, length, keyword class) for every keyword in ``text``."""
        spans = []
        for match in self._word_pattern.finditer(text):
            class_id = self._table.keyword_class_of(match.group())
            if class_id is not None and class_id in self._formats:
                spans.append((match.start(), match.end() - match.start(), class_id))
        return spans

    def highlightBlock(self, text: str) -> None:
        """Apply keyword highlighting to a block of text."""
        if text:
            self.setFormat(0, len(text), self._table.format_for(STYLE_DEFAULT))
        for start, length, class_id in self.keyword_spans(text):
            self.setFormat(start, length, self._formats[class_id])
