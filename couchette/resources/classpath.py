"""
Resource provider that resolves paths relative to an importable package.

A package can be deployed as a plain directory or zipped inside an archive
on ``sys.path`` (zipapp, egg, zipped wheel). Both deployment shapes are
handled the same way by callers:

    provider = ClasspathResourceProvider("myapp")
    provider.list_resources("design-docs/")   # {"users", "orders"}
    provider.read_file("design-docs/users/views/by_name/map.js")
"""

from __future__ import annotations

import importlib.util
import io
import os
import zipfile
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import IO, Union

from ..core.exceptions import ResourceNotFoundError, ResourceProviderError
from ..core.interfaces.resources import IResourceProvider
from ..utils.couch import released

LINE_SEP = os.linesep
ARCHIVE_SEP = "/"
DEFAULT_ANCHOR = "couchette"


@dataclass(frozen=True)
class DirectoryRoot:
    """Resources backed by a directory on disk."""

    directory: Path


@dataclass(frozen=True)
class ArchiveRoot:
    """Resources backed by entries of a zip archive, below ``prefix``."""

    archive: Path
    prefix: str


ResourceRoot = Union[DirectoryRoot, ArchiveRoot]


def _read_lines(stream: IO[bytes]) -> str:
    """Decode stream as UTF-8 and terminate every line with LINE_SEP."""
    text = io.TextIOWrapper(stream, encoding="utf-8")
    with released(text):
        return "".join(line.rstrip("\n") + LINE_SEP for line in text)


def _find_archive(location: Path) -> ArchiveRoot | None:
    """Walk up from a path inside an archive to the archive file itself."""
    inner: list[str] = []
    candidate = location
    while not candidate.exists():
        if candidate.parent == candidate:
            return None
        inner.append(candidate.name)
        candidate = candidate.parent

    if not candidate.is_file() or not zipfile.is_zipfile(candidate):
        return None

    prefix = ARCHIVE_SEP.join(reversed(inner))
    if prefix:
        prefix += ARCHIVE_SEP
    return ArchiveRoot(archive=candidate, prefix=prefix)


class ClasspathResourceProvider(IResourceProvider):
    """Resolve resources relative to the location of an anchor package.

    Paths resolve inside the anchor package, not across all of
    ``sys.path``. The default anchor is couchette itself, so applications
    shipping their own ``design-docs/`` pass their package as the anchor,
    either directly or by registering a provider for IResourceProvider.
    """

    def __init__(self, anchor: str | ModuleType = DEFAULT_ANCHOR):
        """
        Args:
            anchor: Any package (name or module object) that lives in the
                same place as the resources you want.
        """
        self.anchor = anchor

    @property
    def anchor_name(self) -> str:
        if isinstance(self.anchor, ModuleType):
            return self.anchor.__name__
        return self.anchor

    def _anchor_location(self) -> Path | None:
        """Directory (possibly virtual, inside an archive) holding the anchor."""
        if isinstance(self.anchor, ModuleType) and self.anchor.__spec__ is not None:
            spec = self.anchor.__spec__
        else:
            spec = importlib.util.find_spec(self.anchor_name)
        if spec is None:
            return None

        if spec.submodule_search_locations:
            return Path(next(iter(spec.submodule_search_locations)))
        if spec.origin and spec.has_location:
            return Path(spec.origin).parent
        return None

    def resolve_root(self) -> ResourceRoot | None:
        """Resolve the anchor to the directory or archive backing it.

        Returns:
            The resource root, or None if the anchor cannot be located

        Raises:
            ResourceProviderError: If resolving the anchor fails
        """
        try:
            location = self._anchor_location()
            if location is None:
                return None
            if location.is_dir():
                return DirectoryRoot(directory=location)
            return _find_archive(location)
        except Exception as e:
            raise ResourceProviderError(
                f"Unable to resolve resource anchor '{self.anchor_name}'",
                cause=e,
            ) from e

    def list_resources(self, path: str) -> set[str]:
        """
        List directory contents for a resource folder. Not recursive.

        Works for plain directories and for archives.

        Args:
            path: Should end with "/", but not start with one.

        Returns:
            Just the name of each member item, not the full paths. Empty
            when the path does not resolve to anything.
        """
        root = self.resolve_root()
        if root is None:
            return set()

        try:
            if isinstance(root, DirectoryRoot):
                return self._list_directory(root, path)
            return self._list_archive(root, path)
        except (OSError, zipfile.BadZipFile) as e:
            raise ResourceProviderError(
                "Unable to list resources", path=path, cause=e
            ) from e

    def _list_directory(self, root: DirectoryRoot, path: str) -> set[str]:
        target = root.directory / path
        if not target.is_dir():
            return set()
        return {entry.name for entry in target.iterdir()}

    def _list_archive(self, root: ArchiveRoot, path: str) -> set[str]:
        full_path = root.prefix + path
        result: set[str] = set()
        # Scans every entry; archives need not contain directory entries
        with zipfile.ZipFile(root.archive) as archive:
            for name in archive.namelist():
                if not name.startswith(full_path):
                    continue
                entry = name[len(full_path) :]
                sub_dir = entry.find(ARCHIVE_SEP)
                if sub_dir >= 0:
                    entry = entry[:sub_dir]
                if entry:
                    result.add(entry)
        return result

    def read_file(self, path: str) -> str:
        """
        Read a resource as text, every line terminated by ``os.linesep``.

        Raises:
            ResourceNotFoundError: If the resource cannot be opened
            ResourceProviderError: If reading or decoding fails
        """
        root = self.resolve_root()
        if root is None:
            raise ResourceNotFoundError(
                f"Resource anchor '{self.anchor_name}' not found", path=path
            )

        try:
            if isinstance(root, DirectoryRoot):
                return self._read_directory_file(root, path)
            return self._read_archive_file(root, path)
        except ResourceProviderError:
            raise
        except (OSError, zipfile.BadZipFile, UnicodeDecodeError) as e:
            raise ResourceProviderError("Unable to read resource", path=path, cause=e) from e

    def _read_directory_file(self, root: DirectoryRoot, path: str) -> str:
        try:
            stream = open(root.directory / path, "rb")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise ResourceNotFoundError("Resource not found", path=path, cause=e) from e
        with released(stream):
            return _read_lines(stream)

    def _read_archive_file(self, root: ArchiveRoot, path: str) -> str:
        with zipfile.ZipFile(root.archive) as archive:
            try:
                stream = archive.open(root.prefix + path)
            except KeyError as e:
                raise ResourceNotFoundError(
                    "Resource not found in archive",
                    path=path,
                    context={"archive": str(root.archive)},
                    cause=e,
                ) from e
            with released(stream):
                return _read_lines(stream)
