"""Style registry: lazy initialization and application of style tables."""

from __future__ import annotations

import threading
from typing import Mapping, Optional, Union

from ..logging import get_logger
from .catalog import LanguageCatalog
from .colors import invert, rotate
from .common import init_common
from .filetypes import Filetype
from .initializer import init_filetype
from .keywords import SymbolIndex, merge_keywords
from .model import CommonStyle, CommonStyleSet, StyleAttribute, StyleEntity
from .renderer import (
    MARKER_LINE,
    MARKER_SEARCH,
    NULL_LEXER,
    STYLE_BRACEBAD,
    STYLE_BRACELIGHT,
    STYLE_DEFAULT,
    STYLE_INDENTGUIDE,
    STYLE_LINENUMBER,
    MarkerSymbol,
    StyleRenderer,
)
from .settings import ConfigSource, FiletypeConfigLoader

logger = get_logger(__name__)

FiletypeLike = Union[Filetype, int]

# Lexer properties every filetype gets
FOLD_PROPERTIES = (
    ("fold", "1"),
    ("fold.compact", "0"),
    ("fold.comment", "1"),
    ("fold.preprocessor", "1"),
    ("fold.at.else", "1"),
)

_CHROME_STYLES = (
    (STYLE_LINENUMBER, CommonStyle.MARGIN_LINENUMBER),
    (STYLE_BRACELIGHT, CommonStyle.BRACE_GOOD),
    (STYLE_BRACEBAD, CommonStyle.BRACE_BAD),
    (STYLE_INDENTGUIDE, CommonStyle.INDENT_GUIDE),
)


class StyleRegistry:
    """Owns the common style set and every per-filetype StyleEntity.

    Entities are built on first use and cached for the registry's lifetime.
    The common set and each entity are guarded by their own lock so
    concurrent first use builds each exactly once.

    Use StyleRegistry.instance() for the application-wide registry, or
    construct one directly to inject configuration.
    """

    _instance: Optional['StyleRegistry'] = None
    _instance_lock = threading.Lock()

    @classmethod
    def instance(cls) -> 'StyleRegistry':
        """Get or create the application-wide registry."""
        registry = cls._instance
        if registry is not None:
            return registry
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def __init__(
        self,
        config: Optional[ConfigSource] = None,
        catalogs: Optional[Mapping[Filetype, LanguageCatalog]] = None,
        symbols: Optional[SymbolIndex] = None,
    ):
        if catalogs is None:
            # Import here to avoid circular imports
            from ..languages import CATALOGS
            catalogs = CATALOGS

        self._config: ConfigSource = config or FiletypeConfigLoader()
        self._catalogs: dict[Filetype, LanguageCatalog] = dict(catalogs)
        self.symbols = symbols

        self._common: Optional[CommonStyleSet] = None
        self._common_lock = threading.Lock()
        self._entities: dict[Filetype, StyleEntity] = {}
        self._entity_locks = {ft: threading.Lock() for ft in self._catalogs}

    # -- initialization ---------------------------------------------------

    def common(self) -> CommonStyleSet:
        """Get or build the common style set."""
        common = self._common
        if common is not None:
            return common
        with self._common_lock:
            if self._common is None:
                override, base = self._config.stores_for(Filetype.NONE.config_name)
                self._common = init_common(override, base)
                logger.debug("Common style set initialized")
            return self._common

    def catalog(self, filetype: FiletypeLike) -> Optional[LanguageCatalog]:
        try:
            return self._catalogs.get(Filetype(filetype))
        except ValueError:
            return None

    @property
    def filetypes(self) -> list[Filetype]:
        return sorted(self._catalogs)

    def is_initialized(self, filetype: FiletypeLike) -> bool:
        try:
            ft = Filetype(filetype)
        except ValueError:
            return False
        if ft.is_common:
            return self._common is not None
        return ft in self._entities

    def ensure_initialized(self, filetype: FiletypeLike) -> Optional[StyleEntity]:
        """Build the common set and the filetype's entity if not done yet.

        Filetypes this one borrows from are built first. Returns None for
        the common sentinel.

        Raises:
            ValueError: for a filetype with no catalog
        """
        ft = Filetype(filetype)
        common = self.common()
        if ft.is_common:
            return None

        entity = self._entities.get(ft)
        if entity is not None:
            return entity

        catalog = self._catalogs.get(ft)
        if catalog is None:
            raise ValueError(f"No catalog for filetype {ft.name}")

        for source in sorted(catalog.sources()):
            self.ensure_initialized(source)

        with self._entity_locks[ft]:
            entity = self._entities.get(ft)
            if entity is None:
                override, base = self._config.stores_for(catalog.config_name)
                entity = init_filetype(catalog, override, base, common.word_chars)
                self._entities[ft] = entity
        return entity

    # -- queries ----------------------------------------------------------

    def get_entity(self, filetype: FiletypeLike) -> Optional[StyleEntity]:
        try:
            return self.ensure_initialized(filetype)
        except ValueError as e:
            logger.debug(f"get_entity({filetype!r}): {e}")
            return None

    def get_style(self, filetype: FiletypeLike, slot: int) -> Optional[StyleAttribute]:
        """Resolved style of ``slot`` in the filetype's table.

        ``Filetype.NONE`` reads the common set. Unknown filetypes and
        out-of-range slots return None.
        """
        try:
            ft = Filetype(filetype)
        except ValueError:
            logger.debug(f"get_style: invalid filetype {filetype!r}")
            return None

        if ft.is_common:
            return self.common().style(slot)

        entity = self.get_entity(ft)
        if entity is None:
            return None
        style = entity.style(slot)
        if style is None:
            logger.debug(f"get_style: no slot {slot} for {ft.name}")
        return style

    # -- application ------------------------------------------------------

    def apply_to(self, renderer: StyleRenderer, filetype: FiletypeLike) -> None:
        """Push the filetype's resolved styling into ``renderer``.

        Filetypes without a catalog get the plain common styling.
        """
        try:
            ft = Filetype(filetype)
        except ValueError:
            ft = Filetype.NONE

        catalog = self._catalogs.get(ft)
        if catalog is None:
            ft = Filetype.NONE
        entity = self.ensure_initialized(ft)
        common = self.common()

        renderer.clear_styles()
        self._apply_common(renderer, common)

        if entity is None or catalog is None:
            self._apply_none(renderer, common)
            return

        renderer.set_lexer(catalog.lexer)
        renderer.set_word_chars(entity.word_chars)
        renderer.set_whitespace_chars(common.whitespace_chars)

        for binding in catalog.keyword_map:
            source = self._entities[binding.source] if binding.source else entity
            words = source.keyword(binding.index) or ""
            if binding.merge_global:
                names = self.symbols.type_names(ft) if self.symbols is not None else None
                words = merge_keywords(names, words)
            renderer.set_keywords(binding.class_id, words)

        for binding in catalog.style_map:
            source = self._entities[binding.source] if binding.source else entity
            style = source.style(binding.slot)
            if style is None:
                logger.warning(f"{ft.name}: style id {binding.style_id} has no slot {binding.slot}")
                continue
            self._set_style(renderer, common, binding.style_id, style)

        for flag in catalog.flags:
            value = entity.setting(flag.key)
            if flag.property_name and value is not None and value[0] == 1:
                renderer.set_property(flag.property_name, "1")
        for name, value in catalog.properties:
            renderer.set_property(name, value)

        logger.debug(f"Applied {ft.name} styling to {type(renderer).__name__}")

    def _color(self, renderer: StyleRenderer, common: CommonStyleSet, color: int) -> int:
        color = invert(color, common.invert_all)
        return rotate(color) if renderer.bgr else color

    def _set_style(self, renderer: StyleRenderer, common: CommonStyleSet,
                   style_id: int, style: StyleAttribute) -> None:
        renderer.set_style(
            style_id,
            self._color(renderer, common, style.foreground),
            self._color(renderer, common, style.background),
            style.bold,
            style.italic,
        )

    def _apply_common(self, renderer: StyleRenderer, common: CommonStyleSet) -> None:
        def color(value: int) -> int:
            return self._color(renderer, common, value)

        caret = common[CommonStyle.CARET]
        renderer.set_caret(color(caret.foreground), common.caret_width, caret.bold)

        # bold toggles the current line highlight
        current = common[CommonStyle.CURRENT_LINE]
        renderer.set_current_line(color(current.background), current.bold,
                                  common.caret_line_alpha)

        renderer.set_wrap_visuals(common.wrap_visual_flags, common.wrap_visual_location,
                                  common.wrap_start_indent)

        line = common[CommonStyle.MARKER_LINE]
        renderer.define_marker(MARKER_LINE, MarkerSymbol.SHORT_ARROW,
                               color(line.foreground), color(line.background),
                               common.marker_line_alpha)
        search = common[CommonStyle.MARKER_SEARCH]
        renderer.define_marker(MARKER_SEARCH, MarkerSymbol.PLUS,
                               color(search.foreground), color(search.background),
                               common.marker_search_alpha)

        renderer.set_folding(common.folding, common.folding.fold_line.fold_flags,
                             color(common[CommonStyle.MARGIN_FOLDING].background))
        for name, value in FOLD_PROPERTIES:
            renderer.set_property(name, value)

        # bold/italic select whether fore/back override the renderer default
        selection = common[CommonStyle.SELECTION]
        renderer.set_selection(
            color(selection.foreground) if selection.bold else None,
            color(selection.background) if selection.italic else None,
            common.selection_alpha,
        )

        for style_id, slot in _CHROME_STYLES:
            self._set_style(renderer, common, style_id, common[slot])

        white_space = common[CommonStyle.WHITE_SPACE]
        renderer.set_whitespace_colors(
            color(white_space.foreground) if white_space.bold else None,
            color(white_space.background) if white_space.italic else None,
        )

    def _apply_none(self, renderer: StyleRenderer, common: CommonStyleSet) -> None:
        renderer.set_lexer(NULL_LEXER)
        self._set_style(renderer, common, STYLE_DEFAULT, common[CommonStyle.DEFAULT])
        renderer.set_word_chars(common.word_chars)
        renderer.set_whitespace_chars(common.whitespace_chars)
