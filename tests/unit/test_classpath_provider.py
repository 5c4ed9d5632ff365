"""
Unit tests for ClasspathResourceProvider.

Every behavior is checked for both deployment shapes: a package installed
as a plain directory and the same package zipped into an archive on
sys.path.
"""

import importlib
import os
import zipfile
from pathlib import Path

import pytest

import couchette
from couchette.core.exceptions import ResourceNotFoundError, ResourceProviderError
from couchette.resources.classpath import (
    LINE_SEP,
    ArchiveRoot,
    ClasspathResourceProvider,
    DirectoryRoot,
)

DOCS = {
    "docs/a.js": "function a() {}\n",
    "docs/b.js": "function b() {}\n",
    "docs/sub/c.js": "function c() {}\n",
    "docs/sub/deeper/d.js": "function d() {}\n",
    "other/e.txt": "e\n",
}


@pytest.fixture(params=[False, True], ids=["directory", "archive"])
def archive(request):
    return request.param


class TestResolveRoot:
    """Tests for resolving the anchor to a resource root."""

    def test_directory_package(self, make_package):
        name = make_package(DOCS, archive=False)

        root = ClasspathResourceProvider(name).resolve_root()

        assert isinstance(root, DirectoryRoot)
        assert root.directory.name == name

    def test_archive_package(self, make_package):
        name = make_package(DOCS, archive=True)

        root = ClasspathResourceProvider(name).resolve_root()

        assert isinstance(root, ArchiveRoot)
        assert root.archive.suffix == ".zip"
        assert root.prefix == f"{name}/"

    def test_unknown_anchor(self):
        assert ClasspathResourceProvider("no_such_package_xyz").resolve_root() is None

    def test_invalid_anchor_is_wrapped(self):
        with pytest.raises(ResourceProviderError):
            ClasspathResourceProvider(".relative").resolve_root()

    def test_failing_parent_import_is_wrapped(self, make_package):
        """Locating a subpackage runs the parent's __init__, which may raise anything."""
        name = make_package({"__init__.py": "raise RuntimeError('broken package')"})

        with pytest.raises(ResourceProviderError) as exc_info:
            ClasspathResourceProvider(f"{name}.sub").resolve_root()

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_default_anchor_is_couchette_package(self):
        root = ClasspathResourceProvider().resolve_root()

        assert isinstance(root, DirectoryRoot)
        assert root.directory.resolve() == Path(couchette.__file__).parent.resolve()


class TestListResources:
    """Tests for list_resources()."""

    def test_lists_immediate_children(self, make_package, archive):
        """Nested entries collapse into their first path segment."""
        name = make_package(DOCS, archive=archive)

        result = ClasspathResourceProvider(name).list_resources("docs/")

        assert result == {"a.js", "b.js", "sub"}

    def test_lists_nested_folder(self, make_package, archive):
        name = make_package(DOCS, archive=archive)

        result = ClasspathResourceProvider(name).list_resources("docs/sub/")

        assert result == {"c.js", "deeper"}

    def test_both_shapes_agree(self, make_package):
        dir_name = make_package(DOCS, archive=False)
        zip_name = make_package(DOCS, archive=True)

        for path in ("docs/", "docs/sub/", "other/"):
            assert ClasspathResourceProvider(dir_name).list_resources(path) == (
                ClasspathResourceProvider(zip_name).list_resources(path)
            )

    def test_unresolvable_path_is_empty(self, make_package, archive):
        name = make_package(DOCS, archive=archive)

        assert ClasspathResourceProvider(name).list_resources("missing/") == set()

    def test_unknown_anchor_is_empty(self):
        assert ClasspathResourceProvider("no_such_package_xyz").list_resources("docs/") == set()

    def test_module_anchor(self, make_package, archive):
        name = make_package(DOCS, archive=archive)
        module = importlib.import_module(name)

        result = ClasspathResourceProvider(module).list_resources("docs/")

        assert result == {"a.js", "b.js", "sub"}

    def test_corrupt_archive_is_wrapped(self, make_package, monkeypatch):
        name = make_package(DOCS, archive=True)
        provider = ClasspathResourceProvider(name)
        root = provider.resolve_root()
        monkeypatch.setattr(provider, "resolve_root", lambda: root)
        root.archive.write_bytes(b"PK\x03\x04 definitely not a zip")

        with pytest.raises(ResourceProviderError) as exc_info:
            provider.list_resources("docs/")

        assert isinstance(exc_info.value.__cause__, (zipfile.BadZipFile, OSError))


class TestReadFile:
    """Tests for read_file()."""

    def test_appends_separator_after_every_line(self, make_package, archive):
        """A missing trailing newline is added on read."""
        name = make_package({"docs/two.txt": "line1\nline2"}, archive=archive)

        content = ClasspathResourceProvider(name).read_file("docs/two.txt")

        assert content == "line1" + LINE_SEP + "line2" + LINE_SEP

    def test_trailing_newline_not_doubled(self, make_package, archive):
        name = make_package({"docs/one.txt": "only\n"}, archive=archive)

        assert ClasspathResourceProvider(name).read_file("docs/one.txt") == "only" + LINE_SEP

    def test_crlf_lines(self, make_package, archive):
        name = make_package({"docs/win.txt": b"a\r\nb\r\n"}, archive=archive)

        assert ClasspathResourceProvider(name).read_file("docs/win.txt") == (
            "a" + LINE_SEP + "b" + LINE_SEP
        )

    def test_empty_file(self, make_package, archive):
        name = make_package({"docs/empty.txt": ""}, archive=archive)

        assert ClasspathResourceProvider(name).read_file("docs/empty.txt") == ""

    def test_utf8_content(self, make_package, archive):
        name = make_package({"docs/u.js": "emit('café');"}, archive=archive)

        assert ClasspathResourceProvider(name).read_file("docs/u.js") == "emit('café');" + LINE_SEP

    def test_missing_file(self, make_package, archive):
        name = make_package(DOCS, archive=archive)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            ClasspathResourceProvider(name).read_file("docs/missing.js")

        assert exc_info.value.context["path"] == "docs/missing.js"

    def test_unknown_anchor(self):
        with pytest.raises(ResourceNotFoundError):
            ClasspathResourceProvider("no_such_package_xyz").read_file("docs/a.js")

    def test_not_found_is_a_provider_error(self, make_package):
        name = make_package(DOCS)

        with pytest.raises(ResourceProviderError):
            ClasspathResourceProvider(name).read_file("nope.txt")

    def test_invalid_utf8_is_wrapped(self, make_package, archive):
        name = make_package({"docs/bin.dat": b"\xff\xfe\x00"}, archive=archive)

        with pytest.raises(ResourceProviderError) as exc_info:
            ClasspathResourceProvider(name).read_file("docs/bin.dat")

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_line_separator_is_platform_default():
    assert LINE_SEP == os.linesep
