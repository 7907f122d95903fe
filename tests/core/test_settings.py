"""Settings stores and on-disk loaders."""

import json

from stylecascade.core.filetypes import Filetype
from stylecascade.core.registry import StyleRegistry
from stylecascade.core.settings import (
    ConfigPaths,
    FiletypeConfigLoader,
    MappingStore,
    StaticConfigSource,
    load_json,
    load_keyfile,
    load_store,
    split_list,
)


class TestSplitList:
    def test_semicolons(self) -> None:
        assert split_list("0x000000;0xffffff;true;false") == [
            "0x000000", "0xffffff", "true", "false"
        ]

    def test_commas_and_spaces(self) -> None:
        assert split_list("1, 2") == ["1", "2"]

    def test_trailing_separator(self) -> None:
        assert split_list("a;b;") == ["a", "b"]

    def test_single(self) -> None:
        assert split_list("only") == ["only"]


class TestMappingStore:
    def test_string_and_list(self) -> None:
        s = MappingStore({"styling": {"k": "1;2", "arr": ["a", "b"]}})
        assert s.get_string("styling", "k") == "1;2"
        assert s.get_string_list("styling", "k") == ["1", "2"]
        assert s.get_string("styling", "arr") == "a b"
        assert s.get_string_list("styling", "arr") == ["a", "b"]

    def test_missing(self) -> None:
        s = MappingStore({"styling": {}})
        assert s.get_string("styling", "k") is None
        assert s.get_string_list("nope", "k") is None
        assert s.is_empty()

    def test_non_mapping_sections_ignored(self) -> None:
        s = MappingStore({"styling": "oops", "keywords": {"primary": "if"}})
        assert s.sections() == ["keywords"]


class TestLoadKeyfile:
    def test_reads_groups(self, tmp_path) -> None:
        path = tmp_path / "filetypes.c"
        path.write_text(
            "[styling]\n"
            "comment=0x112233;0xffffff;false;true\n"
            "\n"
            "[keywords]\n"
            "primary=if else while\n"
            "docComment=TODO\n"
        )
        s = load_keyfile(path)
        assert s.get_string_list("styling", "comment") == ["0x112233", "0xffffff", "false", "true"]
        assert s.get_string("keywords", "primary") == "if else while"
        # key case is preserved
        assert s.get_string("keywords", "docComment") == "TODO"

    def test_missing_file(self, tmp_path) -> None:
        assert load_keyfile(tmp_path / "nope").is_empty()

    def test_broken_file_gives_empty_store(self, tmp_path) -> None:
        path = tmp_path / "filetypes.c"
        path.write_text("no section header here\n")
        assert load_keyfile(path).is_empty()


class TestLoadJson:
    def test_reads_groups(self, tmp_path) -> None:
        path = tmp_path / "filetypes.python.json"
        path.write_text(json.dumps({
            "styling": {"comment": ["#808080", "#ffffff", False, True]},
            "keywords": {"primary": "def class"},
        }))
        s = load_json(path)
        assert s.get_string_list("styling", "comment") == ["#808080", "#ffffff", "False", "True"]
        assert s.get_string("keywords", "primary") == "def class"

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "filetypes.python.json"
        path.write_text("{not json")
        assert load_json(path).is_empty()

    def test_top_level_not_object(self, tmp_path) -> None:
        path = tmp_path / "filetypes.python.json"
        path.write_text("[1, 2, 3]")
        assert load_json(path).is_empty()

    def test_load_store_picks_by_suffix(self, tmp_path) -> None:
        path = tmp_path / "filetypes.sh.json"
        path.write_text('{"settings": {"wordchars": "abc"}}')
        assert load_store(path).get_string("settings", "wordchars") == "abc"


class TestFiletypeConfigLoader:
    def test_no_user_dir_gives_none_override(self, tmp_path) -> None:
        system = tmp_path / "system"
        system.mkdir()
        (system / "filetypes.c").write_text("[keywords]\nprimary=if\n")
        loader = FiletypeConfigLoader(ConfigPaths(system, tmp_path / "missing"))
        override, base = loader.stores_for("c")
        assert override is None
        assert base.get_string("keywords", "primary") == "if"

    def test_user_dir_present(self, tmp_path) -> None:
        system = tmp_path / "system"
        user = tmp_path / "user"
        system.mkdir()
        user.mkdir()
        (user / "filetypes.c").write_text("[keywords]\nprimary=while\n")
        override, base = FiletypeConfigLoader(ConfigPaths(system, user)).stores_for("c")
        assert override.get_string("keywords", "primary") == "while"
        assert base.is_empty()

    def test_json_preferred_over_keyfile(self, tmp_path) -> None:
        user = tmp_path / "user"
        user.mkdir()
        (user / "filetypes.c").write_text("[keywords]\nprimary=keyfile\n")
        (user / "filetypes.c.json").write_text('{"keywords": {"primary": "json"}}')
        override, _ = FiletypeConfigLoader(ConfigPaths(tmp_path, user)).stores_for("c")
        assert override.get_string("keywords", "primary") == "json"

    def test_config_paths_filenames(self) -> None:
        assert ConfigPaths().filenames("common") == ["filetypes.common.json", "filetypes.common"]


class TestStaticConfigSource:
    def test_unknown_name_gives_empty_stores(self) -> None:
        override, base = StaticConfigSource().stores_for("c")
        assert override.is_empty()
        assert base.is_empty()

    def test_without_user_dir(self) -> None:
        override, _ = StaticConfigSource(has_user_dir=False).stores_for("c")
        assert override is None


class TestJsonKeywordArrays:
    def test_array_keywords_reach_renderer(self, tmp_path, renderer) -> None:
        """A JSON keyword array becomes a space separated keyword list."""
        user = tmp_path / "user"
        user.mkdir()
        (user / "filetypes.python.json").write_text(
            json.dumps({"keywords": {"primary": ["def", "class"]}})
        )
        registry = StyleRegistry(config=FiletypeConfigLoader(ConfigPaths(tmp_path, user)))
        registry.apply_to(renderer, Filetype.PYTHON)
        assert renderer.keywords[0].split() == ["def", "class"]
