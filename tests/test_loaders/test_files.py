"""Tests for glob detection, expansion and file resolution."""

import os

import pytest

from basedata.loaders.files import (
    expand_braces,
    extname,
    file_stem,
    has_glob,
    has_separator,
    read_file,
    resolve_files,
    resolve_path,
)


class TestHasGlob:
    @pytest.mark.parametrize("pattern", ["*.json", "a?.json", "[ab].json", "*.{yml,yaml}"])
    def test_glob_patterns(self, pattern):
        assert has_glob(pattern)

    @pytest.mark.parametrize("pattern", ["a.json", "fixtures/a.json", "a.b.c"])
    def test_plain_strings(self, pattern):
        assert not has_glob(pattern)


class TestPathParts:
    def test_has_separator(self):
        assert has_separator("fixtures/a.json")
        assert not has_separator("a.json")

    def test_file_stem(self):
        assert file_stem("fixtures/a.json") == "a"
        assert file_stem("data.yml") == "data"

    def test_extname(self):
        assert extname("fixtures/a.json") == ".json"
        assert extname("noext") == ""

    def test_resolve_path(self):
        assert resolve_path("a.json", "fixtures") == os.path.join("fixtures", "a.json")
        assert resolve_path("a.json") == "a.json"


class TestExpandBraces:
    def test_no_braces(self):
        assert expand_braces("*.json") == ["*.json"]

    def test_single_group(self):
        assert expand_braces("*.{yml,yaml}") == ["*.yml", "*.yaml"]

    def test_multiple_groups(self):
        assert expand_braces("{a,b}/{c,d}") == ["a/c", "a/d", "b/c", "b/d"]

    def test_group_without_comma_left_alone(self):
        assert expand_braces("{a}.json") == ["{a}.json"]


class TestResolveFiles:
    def test_matches_relative_to_cwd(self, workdir):
        files = resolve_files("fixtures/*.json")
        assert files == [
            os.path.join("fixtures", "a.json"),
            os.path.join("fixtures", "data.json"),
        ]

    def test_cwd_option(self, workdir):
        files = resolve_files("*.json", cwd="fixtures")
        assert os.path.join("fixtures", "a.json") in files

    def test_braces(self, workdir):
        files = resolve_files("fixtures/*.{yml,yaml}")
        assert [os.path.basename(f) for f in files] == ["c.yml", "data.yaml", "data.yml"]

    def test_recursive(self, workdir):
        files = resolve_files("fixtures/**/index.json")
        assert len(files) == 3

    def test_no_matches(self, workdir):
        assert resolve_files("fixtures/*.toml") == []

    def test_directories_excluded(self, workdir):
        files = resolve_files("fixtures/*")
        assert os.path.join("fixtures", "one") not in files

    def test_ignore(self, workdir):
        files = resolve_files("fixtures/*.json", ignore=["*data.json"])
        assert files == [os.path.join("fixtures", "a.json")]

    def test_hidden_files(self, workdir):
        (workdir / "fixtures" / ".hidden.json").write_text("{}")
        assert os.path.join("fixtures", ".hidden.json") not in resolve_files("fixtures/*.json")
        assert os.path.join("fixtures", ".hidden.json") in resolve_files(
            "fixtures/*.json", dot=True
        )


class TestReadFile:
    def test_reads_text(self, workdir):
        assert read_file("fixtures/a.json") == '{"a": "b"}'

    def test_missing_raises_oserror(self, workdir):
        with pytest.raises(OSError):
            read_file("fixtures/missing.json")
