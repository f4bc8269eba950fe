"""Tests for candidate files and their enumeration."""

from pathlib import Path

import pytest

from eshinf.files import CandidateFile, has_extension, iter_candidate_files

pytestmark = pytest.mark.short


class TestCandidateFile:
    def test_path_parts(self):
        file = CandidateFile(Path("/src/ESH-INF/thing/Thermostat.xml"), "<a/>")

        assert file.name == "Thermostat.xml"
        assert file.extension == "xml"
        assert file.parent_directory_name == "thing"
        assert file.grandparent_directory_name == "ESH-INF"

    def test_missing_grandparent(self):
        file = CandidateFile(Path("thing.xml"), "<a/>")

        assert file.parent_directory_name == ""
        assert file.grandparent_directory_name == ""

    @pytest.mark.parametrize(
        "text, empty",
        [("", True), ("\n\n", True), (" \t\n  ", True), ("<a/>", False), ("\n<a/>\n", False)],
    )
    def test_is_empty(self, text, empty):
        assert CandidateFile(Path("a.xml"), text).is_empty is empty

    def test_from_path(self, tmp_path):
        path = tmp_path / "a.xml"
        path.write_text("<a/>\n<b/>\n", encoding="utf-8")

        file = CandidateFile.from_path(path)

        assert file.path == path
        assert file.text == "<a/>\n<b/>\n"
        assert file.lines == ["<a/>", "<b/>"]

    def test_from_path_with_charset(self, tmp_path):
        path = tmp_path / "a.xml"
        path.write_bytes("<a>Temp\xe9rature</a>".encode("latin-1"))

        assert "Temp\xe9rature" in CandidateFile.from_path(path, "latin-1").text


class TestIterCandidateFiles:
    def test_filters_by_extension(self, binding_tree):
        paths = list(iter_candidate_files(binding_tree, ["xml"]))

        assert [p.name for p in paths] == [
            "binding.xml",
            "config.xml",
            "strings.xml",
            "Thermostat.xml",
        ]

    def test_single_file_root(self, binding_tree):
        path = binding_tree / "ESH-INF" / "thing" / "Thermostat.xml"

        assert list(iter_candidate_files(path, ["xml"])) == [path]
        assert list(iter_candidate_files(path, ["properties"])) == []

    def test_has_extension(self):
        assert has_extension(Path("a.xml"), ["xml"])
        assert not has_extension(Path("a.XML"), ["xml"])
        assert not has_extension(Path("xml"), ["xml"])
