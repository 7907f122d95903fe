"""Generic per-filetype initializer.

Every language goes through ``init_filetype``; languages differ only in
the LanguageCatalog passed in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from ..logging import get_logger
from .catalog import LanguageCatalog
from .common import DEFAULT_WORD_CHARS
from .fallback import resolve_int_pair, resolve_string, resolve_style
from .model import StyleEntity
from .settings import SettingsStore

logger = get_logger(__name__)


def init_filetype(
    catalog: LanguageCatalog,
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
    word_chars_default: str = DEFAULT_WORD_CHARS,
) -> StyleEntity:
    """Resolve one filetype's styles, keywords, word chars and flags."""
    styles = tuple(
        resolve_style(slot.name, override, base, slot.default)
        for slot in catalog.styles
    )
    keywords = tuple(
        resolve_string("keywords", kw.key, override, base, kw.default)
        for kw in catalog.keywords
    )
    word_chars = resolve_string("settings", "wordchars", override, base, word_chars_default)
    settings = {
        flag.key: resolve_int_pair(flag.key, override, base, flag.defaults)
        for flag in catalog.flags
    }

    logger.debug(
        f"Initialized {catalog.filetype.name}: {len(styles)} styles, "
        f"{len(keywords)} keyword lists"
    )
    return StyleEntity(
        filetype=catalog.filetype,
        styles=styles,
        keywords=keywords,
        word_chars=word_chars,
        settings=MappingProxyType(settings),
    )
