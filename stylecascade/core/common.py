"""Builder for the filetype independent chrome style set."""

from __future__ import annotations

from typing import Optional

from ..logging import get_logger
from .fallback import resolve_int_pair, resolve_string, resolve_style
from .model import (
    CommonStyle,
    CommonStyleSet,
    FoldConnector,
    FoldingStyle,
    FoldLine,
    FoldMarker,
    StyleAttribute,
)
from .settings import SettingsStore

logger = get_logger(__name__)


DEFAULT_WORD_CHARS = (
    "_abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
DEFAULT_WHITESPACE_CHARS = " \t!\"#$%&'()*+,-./:;<=>?@[\\]^`{|}~"

COMMON_STYLE_DEFAULTS: dict[CommonStyle, StyleAttribute] = {
    CommonStyle.DEFAULT: StyleAttribute(0x000000, 0xFFFFFF, False),
    CommonStyle.SELECTION: StyleAttribute(0xC0C0C0, 0x7F0000, False),
    CommonStyle.BRACE_GOOD: StyleAttribute(0x000000, 0xFFFFFF, False),
    CommonStyle.BRACE_BAD: StyleAttribute(0xFF0000, 0xFFFFFF, False),
    CommonStyle.MARGIN_LINENUMBER: StyleAttribute(0x000000, 0xD0D0D0, False),
    CommonStyle.MARGIN_FOLDING: StyleAttribute(0x000000, 0xDFDFDF, False),
    CommonStyle.CURRENT_LINE: StyleAttribute(0x000000, 0xE5E5E5, True),
    CommonStyle.CARET: StyleAttribute(0x000000, 0x000000, False),
    CommonStyle.INDENT_GUIDE: StyleAttribute(0xC0C0C0, 0xFFFFFF, False),
    CommonStyle.WHITE_SPACE: StyleAttribute(0xC0C0C0, 0xFFFFFF, True),
    CommonStyle.MARKER_LINE: StyleAttribute(0x000000, 0xFFFF00, False),
    CommonStyle.MARKER_SEARCH: StyleAttribute(0x000000, 0xB8F4B8, False),
}

# [styling] integer pairs and their defaults
COMMON_INT_DEFAULTS: dict[str, tuple[int, int]] = {
    "folding_style": (1, 1),
    "invert_all": (0, 0),
    "folding_horiz_line": (2, 0),
    "caret_width": (1, 0),
    "line_wrap_visuals": (3, 0),
    "line_wrap_indent": (0, 0),
    "translucency": (256, 256),
    "marker_translucency": (256, 256),
}


def init_common(
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
) -> CommonStyleSet:
    """Resolve the common style set from ``filetypes.common`` stores."""
    styles = tuple(
        resolve_style(slot.key, override, base, COMMON_STYLE_DEFAULTS[slot])
        for slot in CommonStyle
    )

    ints = {
        key: resolve_int_pair(key, override, base, defaults)
        for key, defaults in COMMON_INT_DEFAULTS.items()
    }

    marker_code, connector_code = ints["folding_style"]
    folding = FoldingStyle(
        marker=FoldMarker.from_code(marker_code),
        connector=FoldConnector.from_code(connector_code),
        fold_line=FoldLine.from_code(ints["folding_horiz_line"][0]),
    )

    word_chars = resolve_string("settings", "wordchars", override, base, DEFAULT_WORD_CHARS)
    whitespace_chars = resolve_string(
        "settings", "whitespace_chars", override, base, DEFAULT_WHITESPACE_CHARS
    )

    common = CommonStyleSet(
        styles=styles,
        folding=folding,
        invert_all=ints["invert_all"][0] != 0,
        word_chars=word_chars,
        whitespace_chars=whitespace_chars,
        caret_width=ints["caret_width"][0],
        wrap_visual_flags=ints["line_wrap_visuals"][0],
        wrap_visual_location=ints["line_wrap_visuals"][1],
        wrap_start_indent=ints["line_wrap_indent"][0],
        caret_line_alpha=ints["translucency"][0],
        selection_alpha=ints["translucency"][1],
        marker_line_alpha=ints["marker_translucency"][0],
        marker_search_alpha=ints["marker_translucency"][1],
    )
    logger.debug(
        f"Common styles resolved: folding={folding}, invert_all={common.invert_all}"
    )
    return common
