"""Packaged resource providers."""

from .classpath import ArchiveRoot, ClasspathResourceProvider, DirectoryRoot, ResourceRoot

__all__ = ["ArchiveRoot", "ClasspathResourceProvider", "DirectoryRoot", "ResourceRoot"]
