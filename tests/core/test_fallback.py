"""Override -> base -> default resolution."""

from stylecascade.core.colors import parse_int
from stylecascade.core.fallback import (
    lookup_list,
    lookup_string,
    resolve,
    resolve_elements,
    resolve_int_pair,
    resolve_style,
)
from stylecascade.core.model import StyleAttribute
from stylecascade.core.settings import MappingStore

DEFAULT = StyleAttribute(0x000000, 0xFFFFFF, False, False)


class TestLookup:
    def test_override_wins(self, store) -> None:
        override = store(styling={"k": "o"})
        base = store(styling={"k": "b"})
        assert lookup_string("styling", "k", override, base) == "o"

    def test_base_when_override_lacks_key(self, store) -> None:
        assert lookup_string("styling", "k", store(), store(styling={"k": "b"})) == "b"

    def test_missing_everywhere(self, store) -> None:
        assert lookup_string("styling", "k", store(), store()) is None

    def test_no_override_store_skips_base(self, store) -> None:
        """Without a user configuration, base is not consulted."""
        assert lookup_string("styling", "k", None, store(styling={"k": "b"})) is None
        assert lookup_list("styling", "k", None, store(styling={"k": "1,2"})) is None

    def test_first_list_wins(self, store) -> None:
        override = store(styling={"k": "a"})
        base = store(styling={"k": "x,y,z"})
        assert lookup_list("styling", "k", override, base) == ["a"]


class TestResolve:
    def test_parse_failure_uses_default(self, store) -> None:
        """A malformed override value falls to the default, not to base."""
        override = store(styling={"n": "abc"})
        base = store(styling={"n": "7"})
        assert resolve("styling", "n", override, base, 3, parse_int) == 3

    def test_unparsed_text(self, store) -> None:
        assert resolve("settings", "wordchars", store(settings={"wordchars": "abc"}),
                       store(), "xyz") == "abc"


class TestResolveElements:
    def test_short_list_keeps_tail_defaults(self) -> None:
        assert resolve_elements(["5"], [1, 2], [parse_int, parse_int]) == [5, 2]

    def test_bad_element_only_loses_itself(self) -> None:
        assert resolve_elements(["x", "9"], [1, 2], [parse_int, parse_int]) == [1, 9]

    def test_none_gives_defaults(self) -> None:
        assert resolve_elements(None, [1, 2], [parse_int, parse_int]) == [1, 2]


class TestResolveStyle:
    def test_override_full_style(self, store) -> None:
        """Override entry wins over base and the compiled default."""
        override = store(styling={"comment": "0x112233,0xAABBCC,false,true"})
        base = store(styling={"comment": "0xFF0000,0x00FF00,true,false"})
        default = StyleAttribute(0xD00000, 0xFFFFFF, False, False)
        assert resolve_style("comment", override, base, default) == StyleAttribute(
            0x112233, 0xAABBCC, False, True
        )

    def test_partial_list(self, store) -> None:
        """Missing trailing elements keep their defaults."""
        override = store(styling={"comment": "0x112233;0x445566"})
        result = resolve_style("comment", override, store(), DEFAULT)
        assert result == StyleAttribute(0x112233, 0x445566, False, False)

    def test_malformed_element(self, store) -> None:
        override = store(styling={"comment": "nonsense,0x445566,true"})
        result = resolve_style("comment", override, store(), DEFAULT)
        assert result == StyleAttribute(0x000000, 0x445566, True, False)

    def test_base_used_when_override_empty(self, store) -> None:
        base = store(styling={"comment": "0x010203,0x040506,true,true"})
        result = resolve_style("comment", store(), base, DEFAULT)
        assert result == StyleAttribute(0x010203, 0x040506, True, True)

    def test_absent_user_config(self, store) -> None:
        base = store(styling={"comment": "0x010203,0x040506,true,true"})
        assert resolve_style("comment", None, base, DEFAULT) == DEFAULT

    def test_array_values(self) -> None:
        override = MappingStore({"styling": {"comment": ["#fff", "#000", "yes"]}})
        result = resolve_style("comment", override, MappingStore(), DEFAULT)
        assert result == StyleAttribute(0xFFFFFF, 0x000000, True, False)


class TestResolveIntPair:
    def test_defaults(self, store) -> None:
        assert resolve_int_pair("folding_style", store(), store(), (1, 1)) == (1, 1)

    def test_single_value(self, store) -> None:
        override = store(styling={"folding_style": "2"})
        assert resolve_int_pair("folding_style", override, store(), (1, 1)) == (2, 1)

    def test_from_base(self, store) -> None:
        base = store(styling={"translucency": "100,50"})
        assert resolve_int_pair("translucency", store(), base, (256, 256)) == (100, 50)
