"""Tests for the exception hierarchy."""

from patchsorter.exceptions import (
    BootstrapError,
    CatalogError,
    PatchSorterError,
    TagSaveError,
)


class TestExceptionHierarchy:
    def test_all_derive_from_base(self):
        for exc in (BootstrapError, CatalogError, TagSaveError):
            assert issubclass(exc, PatchSorterError)

    def test_base_is_exception(self):
        assert issubclass(PatchSorterError, Exception)


class TestTagSaveError:
    def test_attrs(self):
        err = TagSaveError("/tmp/tags.csv", "disk full")
        assert err.path == "/tmp/tags.csv"
        assert err.reason == "disk full"
        assert str(err) == "Failed to save tags to /tmp/tags.csv: disk full"
