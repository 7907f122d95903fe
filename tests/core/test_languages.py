"""Compiled-in catalogs and filetype naming."""

import pytest

from stylecascade.core.errors import UnknownFiletypeError
from stylecascade.core.filetypes import Filetype
from stylecascade.core.renderer import STYLE_DEFAULT
from stylecascade.languages import CATALOGS
from stylecascade.languages.c_family import C_LIKE_STYLES
from stylecascade.languages.markup import MARKUP_STYLE_MAP, MARKUP_STYLES
from stylecascade.languages.scripting import OMS, SH


class TestFiletype:
    def test_config_names(self) -> None:
        assert Filetype.NONE.config_name == "common"
        assert Filetype.JS.config_name == "javascript"
        assert Filetype.MAKE.config_name == "makefile"
        assert Filetype.CPP.config_name == "cpp"

    @pytest.mark.parametrize("name, expected", [
        ("python", Filetype.PYTHON),
        ("PYTHON", Filetype.PYTHON),
        ("javascript", Filetype.JS),
        ("js", Filetype.JS),
        ("common", Filetype.NONE),
        (5, Filetype.JS),
        (Filetype.CSS, Filetype.CSS),
        ("perl", Filetype.PERL),
        ("Basic", Filetype.BASIC),
        (32, Filetype.VHDL),
    ])
    def test_from_name(self, name, expected) -> None:
        assert Filetype.from_name(name) is expected

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownFiletypeError) as excinfo:
            Filetype.from_name("cobol")
        assert excinfo.value.name == "cobol"
        assert isinstance(excinfo.value, ValueError)

    def test_unknown_number(self) -> None:
        with pytest.raises(UnknownFiletypeError):
            Filetype.from_name(999)


class TestCatalogs:
    def test_every_filetype_has_a_catalog(self) -> None:
        assert set(CATALOGS) == set(Filetype) - {Filetype.NONE}

    @pytest.mark.parametrize("filetype", sorted(set(Filetype) - {Filetype.NONE}))
    def test_bindings_in_range(self, filetype) -> None:
        """Every binding points at a slot that exists in its source table."""
        catalog = CATALOGS[filetype]
        for binding in catalog.style_map:
            source = CATALOGS[binding.source] if binding.source else catalog
            assert 0 <= binding.slot < len(source.styles), binding
        for binding in catalog.keyword_map:
            source = CATALOGS[binding.source] if binding.source else catalog
            assert 0 <= binding.index < len(source.keywords), binding

    @pytest.mark.parametrize("filetype", sorted(set(Filetype) - {Filetype.NONE}))
    def test_style_default_bound(self, filetype) -> None:
        catalog = CATALOGS[filetype]
        assert STYLE_DEFAULT in {b.style_id for b in catalog.style_map}

    @pytest.mark.parametrize("filetype", sorted(set(Filetype) - {Filetype.NONE}))
    def test_slot_names_unique(self, filetype) -> None:
        names = [slot.name for slot in CATALOGS[filetype].styles]
        assert len(names) == len(set(names))

    def test_c_like_share_one_table(self) -> None:
        for ft in (Filetype.C, Filetype.CPP, Filetype.CS, Filetype.JAVA,
                   Filetype.JS, Filetype.FERITE, Filetype.HAXE):
            assert CATALOGS[ft].styles is C_LIKE_STYLES
            assert len(CATALOGS[ft].styles) == 20
            assert CATALOGS[ft].lexer == "cpp"

    def test_pass_through(self) -> None:
        assert CATALOGS[Filetype.HTML].is_pass_through
        assert CATALOGS[Filetype.PHP].is_pass_through
        assert not CATALOGS[Filetype.XML].is_pass_through
        assert CATALOGS[Filetype.HTML].sources() == {Filetype.XML, Filetype.PYTHON}

    def test_markup_table(self) -> None:
        assert len(MARKUP_STYLES) == 55
        ids = [b.style_id for b in MARKUP_STYLE_MAP]
        assert len(ids) == len(set(ids))

    def test_slot_index(self) -> None:
        assert CATALOGS[Filetype.C].slot_index("globalclass") == 19
        assert CATALOGS[Filetype.C].slot_index("nope") is None

    def test_docbook_owns_its_table(self) -> None:
        docbook = CATALOGS[Filetype.DOCBOOK]
        assert not docbook.is_pass_through
        assert docbook.lexer == "xml"
        assert len(docbook.styles) == 29
        assert docbook.sources() == set()

    def test_oms_uses_shell_style_ids(self) -> None:
        shell_ids = [(b.style_id, b.slot) for b in SH.style_map]
        assert [(b.style_id, b.slot) for b in OMS.style_map] == shell_ids
        assert OMS.lexer == "oms"

    @pytest.mark.parametrize("filetype", sorted(set(Filetype) - {Filetype.NONE}))
    def test_style_ids_bound_once(self, filetype) -> None:
        ids = [b.style_id for b in CATALOGS[filetype].style_map]
        assert len(ids) == len(set(ids))
