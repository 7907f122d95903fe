"""Global symbol names merged into keyword lists."""

from stylecascade.core.filetypes import Filetype
from stylecascade.core.keywords import StaticSymbolIndex, merge_keywords


class TestMergeKeywords:
    def test_prepends_names(self) -> None:
        assert merge_keywords(["Foo", "Bar"], "int char") == "Foo Bar int char"

    def test_no_names(self) -> None:
        assert merge_keywords(None, "int char") == "int char"
        assert merge_keywords([], "int char") == "int char"

    def test_empty_user_keywords(self) -> None:
        """No dangling space when the user list is empty."""
        assert merge_keywords(["Foo"], "") == "Foo"

    def test_both_empty(self) -> None:
        assert merge_keywords(None, "") == ""


class TestStaticSymbolIndex:
    def test_lookup(self) -> None:
        index = StaticSymbolIndex({Filetype.C: ["my_t", "Node"]})
        assert index.type_names(Filetype.C) == ("my_t", "Node")
        assert index.type_names(Filetype.CPP) is None

    def test_add_keeps_order_without_duplicates(self) -> None:
        index = StaticSymbolIndex()
        index.add(Filetype.CPP, "A", "B")
        index.add(Filetype.CPP, "A", "C")
        assert index.type_names(Filetype.CPP) == ("A", "B", "C")

    def test_accepts_ints(self) -> None:
        index = StaticSymbolIndex({1: ["x"]})
        assert index.type_names(Filetype.C) == ("x",)
