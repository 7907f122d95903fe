"""Qt adapters for resolved styles."""

from .code_highlighter import KeywordHighlighter
from .qt_renderer import QtStyleTable

__all__ = ["KeywordHighlighter", "QtStyleTable"]
