"""Common chrome style set."""

import threading

from stylecascade.core.common import (
    COMMON_STYLE_DEFAULTS,
    DEFAULT_WHITESPACE_CHARS,
    DEFAULT_WORD_CHARS,
    init_common,
)
from stylecascade.core.filetypes import Filetype
from stylecascade.core.model import (
    CommonStyle,
    FoldConnector,
    FoldingStyle,
    FoldLine,
    FoldMarker,
    StyleAttribute,
)


class TestDefaults:
    def test_all_slots_from_defaults(self, store) -> None:
        common = init_common(store(), store())
        assert len(common.styles) == len(CommonStyle) == 12
        for slot in CommonStyle:
            assert common[slot] == COMMON_STYLE_DEFAULTS[slot]

    def test_folding_defaults(self, store) -> None:
        """No folding_style anywhere gives box markers, straight connectors."""
        common = init_common(store(), store())
        assert common.folding == FoldingStyle(
            FoldMarker.BOX, FoldConnector.STRAIGHT, FoldLine.BELOW
        )

    def test_scalar_defaults(self, store) -> None:
        common = init_common(store(), store())
        assert common.invert_all is False
        assert common.word_chars == DEFAULT_WORD_CHARS
        assert common.whitespace_chars == DEFAULT_WHITESPACE_CHARS
        assert common.caret_width == 1
        assert common.selection_alpha == 256

    def test_no_user_config(self, store) -> None:
        """Absent override ignores base entirely."""
        base = store(styling={"default": "0x111111,0x222222", "invert_all": "1"})
        common = init_common(None, base)
        assert common[CommonStyle.DEFAULT] == COMMON_STYLE_DEFAULTS[CommonStyle.DEFAULT]
        assert common.invert_all is False


class TestOverrides:
    def test_style_from_override(self, store) -> None:
        override = store(styling={"brace_bad": "0x00ff00,0x000000,true,false"})
        common = init_common(override, store())
        assert common[CommonStyle.BRACE_BAD] == StyleAttribute(0x00FF00, 0x000000, True, False)

    def test_folding_codes(self, store) -> None:
        override = store(styling={"folding_style": "2,2", "folding_horiz_line": "1"})
        common = init_common(override, store())
        assert common.folding.marker is FoldMarker.CIRCLE
        assert common.folding.connector is FoldConnector.CURVED
        assert common.folding.fold_line is FoldLine.ABOVE
        assert common.folding.fold_line.fold_flags == 4

    def test_unknown_folding_codes_fall_back(self, store) -> None:
        override = store(styling={"folding_style": "7,9", "folding_horiz_line": "5"})
        common = init_common(override, store())
        assert common.folding == FoldingStyle()

    def test_invert_all_and_wordchars(self, store) -> None:
        override = store(styling={"invert_all": "1"}, settings={"wordchars": "abc_"})
        common = init_common(override, store())
        assert common.invert_all is True
        assert common.word_chars == "abc_"

    def test_translucency_and_wrap(self, store) -> None:
        base = store(styling={
            "translucency": "120,60",
            "marker_translucency": "200",
            "line_wrap_visuals": "1,2",
            "line_wrap_indent": "4",
            "caret_width": "3",
        })
        common = init_common(store(), base)
        assert (common.caret_line_alpha, common.selection_alpha) == (120, 60)
        assert (common.marker_line_alpha, common.marker_search_alpha) == (200, 256)
        assert (common.wrap_visual_flags, common.wrap_visual_location) == (1, 2)
        assert common.wrap_start_indent == 4
        assert common.caret_width == 3


class TestOnceOnly:
    def test_registry_builds_common_once(self, registry_factory) -> None:
        """Repeated and concurrent requests return the same object."""
        registry = registry_factory()
        results = []

        def worker():
            results.append(registry.common())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)
        assert registry.is_initialized(Filetype.NONE)

    def test_later_config_changes_ignored(self, registry_factory) -> None:
        registry = registry_factory(override={"common": {"styling": {"invert_all": "1"}}})
        first = registry.common()
        registry._config = None
        assert registry.common() is first
        assert first.invert_all is True
