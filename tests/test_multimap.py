"""Tests for assetpack._internal.multimap — the ordered FileList container."""

from pathlib import Path

import pytest

from assetpack._internal.multimap import FileList, MultiValueMapping


@pytest.fixture
def files() -> FileList:
    return FileList(
        [
            ("/js/vendor/jquery.js", Path("/srv/js/vendor/jquery.js")),
            ("/js/app.js", Path("/srv/js/app.js")),
            ("/js/vendor/jquery.js", Path("/srv/js/vendor/jquery.js")),
        ]
    )


class TestFileList:
    def test_satisfies_protocol(self, files) -> None:
        assert isinstance(files, MultiValueMapping)

    def test_iteration_keeps_duplicates(self, files) -> None:
        assert list(files) == ["/js/vendor/jquery.js", "/js/app.js", "/js/vendor/jquery.js"]

    def test_len_counts_pairs(self, files) -> None:
        assert len(files) == 3

    def test_getitem_first_value(self, files) -> None:
        assert files["/js/app.js"] == Path("/srv/js/app.js")

    def test_getitem_missing(self, files) -> None:
        with pytest.raises(KeyError):
            files["/js/missing.js"]

    def test_get_default(self, files) -> None:
        assert files.get("/js/missing.js") is None

    def test_get_list(self, files) -> None:
        assert files.get_list("/js/vendor/jquery.js") == [Path("/srv/js/vendor/jquery.js")] * 2

    def test_contains(self, files) -> None:
        assert "/js/app.js" in files
        assert "/js/other.js" not in files
        assert 42 not in files

    def test_values_in_order(self, files) -> None:
        assert files.values()[1] == Path("/srv/js/app.js")

    def test_equality(self, files) -> None:
        assert files == FileList(files.items())
        assert files != FileList()

    def test_repr(self) -> None:
        assert repr(FileList([("/a.js", Path("/srv/a.js"))])) == "FileList(['/a.js': '/srv/a.js'])"
