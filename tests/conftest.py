"""Shared test fixtures for the stylecascade test suite.

Provides a centralized QApplication, settings store factories and a
RecordingRenderer that captures everything StyleRegistry.apply_to pushes.
"""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from stylecascade.core.registry import StyleRegistry
from stylecascade.core.renderer import StyleRenderer
from stylecascade.core.settings import MappingStore, StaticConfigSource


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication: shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def reset_registry():
    """Reset singleton between tests to avoid cross-test contamination."""
    StyleRegistry._instance = None
    yield
    StyleRegistry._instance = None


class RecordingRenderer(StyleRenderer):
    """StyleRenderer that records every call for later inspection."""

    def __init__(self, bgr=False):
        self.bgr = bgr
        self.calls = []
        self.styles = {}
        self.keywords = {}
        self.properties = {}
        self.word_chars = None
        self.whitespace_chars = None
        self.lexer = None
        self.caret = None
        self.current_line = None
        self.selection = None
        self.whitespace_colors = None
        self.wrap_visuals = None
        self.markers = {}
        self.folding = None

    def clear_styles(self):
        self.calls.append(("clear_styles",))
        self.styles.clear()
        self.keywords.clear()
        self.properties.clear()

    def set_style(self, style_id, foreground, background, bold, italic):
        self.calls.append(("set_style", style_id))
        self.styles[style_id] = (foreground, background, bold, italic)

    def set_keywords(self, class_id, words):
        self.calls.append(("set_keywords", class_id))
        self.keywords[class_id] = words

    def set_word_chars(self, chars):
        self.word_chars = chars

    def set_whitespace_chars(self, chars):
        self.whitespace_chars = chars

    def set_lexer(self, lexer):
        self.calls.append(("set_lexer", lexer))
        self.lexer = lexer

    def set_property(self, name, value):
        self.properties[name] = value

    def set_caret(self, color, width, block):
        self.caret = (color, width, block)

    def set_current_line(self, background, visible, alpha):
        self.current_line = (background, visible, alpha)

    def set_selection(self, foreground, background, alpha):
        self.selection = (foreground, background, alpha)

    def set_whitespace_colors(self, foreground, background):
        self.whitespace_colors = (foreground, background)

    def set_wrap_visuals(self, flags, location, start_indent):
        self.wrap_visuals = (flags, location, start_indent)

    def define_marker(self, number, symbol, foreground, background, alpha):
        self.markers[number] = (symbol, foreground, background, alpha)

    def set_folding(self, style, fold_flags, margin_color):
        self.folding = (style, fold_flags, margin_color)

    def snapshot(self):
        """Everything observable, for comparing two applications."""
        return (
            dict(self.styles), dict(self.keywords), dict(self.properties),
            self.word_chars, self.whitespace_chars, self.lexer, self.caret,
            self.current_line, self.selection, self.whitespace_colors,
            self.wrap_visuals, dict(self.markers), self.folding,
        )


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def store():
    """Factory fixture: build a MappingStore from keyword sections."""
    def _make(**sections):
        return MappingStore(sections)
    return _make


@pytest.fixture
def config_factory():
    """Factory fixture: StaticConfigSource from {config_name: sections} dicts."""
    def _make(base=None, override=None, has_user_dir=True):
        return StaticConfigSource(
            base={name: MappingStore(data) for name, data in (base or {}).items()},
            override={name: MappingStore(data) for name, data in (override or {}).items()},
            has_user_dir=has_user_dir,
        )
    return _make


@pytest.fixture
def registry_factory(config_factory):
    """Factory fixture: StyleRegistry over in-memory configuration."""
    def _make(base=None, override=None, has_user_dir=True, **kwargs):
        config = config_factory(base, override, has_user_dir)
        return StyleRegistry(config=config, **kwargs)
    return _make


@pytest.fixture
def renderer_factory():
    """Factory fixture: RecordingRenderer, optionally in BGR mode."""
    def _make(bgr=False):
        return RecordingRenderer(bgr=bgr)
    return _make
