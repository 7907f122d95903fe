"""Generic per-filetype initializer."""

from stylecascade.core.catalog import (
    FlagSetting,
    KeywordClass,
    LanguageCatalog,
    sequential_bindings,
    slots,
    style,
)
from stylecascade.core.common import DEFAULT_WORD_CHARS
from stylecascade.core.filetypes import Filetype
from stylecascade.core.initializer import init_filetype
from stylecascade.core.model import StyleAttribute

TOY = LanguageCatalog(
    filetype=Filetype.DIFF,
    lexer="diff",
    styles=slots(
        ("default", style(0x000000)),
        ("comment", style(0x808080)),
        ("added", style(0x34B034)),
    ),
    keywords=(KeywordClass("primary", "if else"), KeywordClass("secondary")),
    style_map=sequential_bindings(3),
    flags=(FlagSetting("styling_within_preprocessor", (1, 0), "styling.within.preprocessor"),),
)


class TestInitFiletype:
    def test_defaults(self, store) -> None:
        entity = init_filetype(TOY, store(), store())
        assert entity.filetype == Filetype.DIFF
        assert entity.styles == tuple(slot.default for slot in TOY.styles)
        assert entity.keywords == ("if else", "")
        assert entity.word_chars == DEFAULT_WORD_CHARS
        assert entity.setting("styling_within_preprocessor") == (1, 0)

    def test_slot_count_matches_catalog(self, store) -> None:
        entity = init_filetype(TOY, store(), store())
        assert len(entity.styles) == len(TOY.styles)
        assert entity.style(len(TOY.styles)) is None
        assert entity.style(-1) is None

    def test_override_and_base_mix(self, store) -> None:
        """Each slot resolves independently through the cascade."""
        override = store(styling={"comment": "0x112233,0xaabbcc,false,true"})
        base = store(
            styling={"comment": "0xff0000", "added": "0x00ff00,0x000000,true"},
            keywords={"primary": "while"},
        )
        entity = init_filetype(TOY, override, base)
        assert entity.style(1) == StyleAttribute(0x112233, 0xAABBCC, False, True)
        assert entity.style(2) == StyleAttribute(0x00FF00, 0x000000, True, False)
        assert entity.keyword(0) == "while"
        assert entity.keyword(1) == ""

    def test_word_chars_default_passed_in(self, store) -> None:
        entity = init_filetype(TOY, store(), store(), word_chars_default="abc")
        assert entity.word_chars == "abc"

    def test_word_chars_from_settings(self, store) -> None:
        override = store(settings={"wordchars": "xyz_"})
        assert init_filetype(TOY, override, store()).word_chars == "xyz_"

    def test_flag_from_override(self, store) -> None:
        override = store(styling={"styling_within_preprocessor": "0"})
        entity = init_filetype(TOY, override, store())
        assert entity.setting("styling_within_preprocessor") == (0, 0)

    def test_no_user_config(self, store) -> None:
        base = store(keywords={"primary": "while"})
        assert init_filetype(TOY, None, base).keyword(0) == "if else"

    def test_pass_through_has_no_styles(self, store) -> None:
        catalog = LanguageCatalog(filetype=Filetype.HTML, lexer="hypertext")
        entity = init_filetype(catalog, store(), store())
        assert entity.styles == ()
        assert entity.keywords == ()
