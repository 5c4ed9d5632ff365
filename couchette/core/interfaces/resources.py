"""
Resource provider interface.

A resource provider locates and reads artifacts (design documents, seed
data) that ship alongside the client code, without callers knowing whether
they live in a plain directory or inside an archive.
"""

from abc import ABC, abstractmethod


class IResourceProvider(ABC):
    """Interface for enumerating and reading packaged resources."""

    @abstractmethod
    def list_resources(self, path: str) -> set[str]:
        """
        List the immediate entries below a resource folder. Not recursive.

        Args:
            path: Folder path. Should end with "/", but not start with one.

        Returns:
            Bare names of each member file or sub-folder, not full paths.
            An empty set when the path does not resolve to anything.
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> str:
        """
        Read the full text of a resource.

        Every line, including the last one, is terminated by ``os.linesep``.

        Raises:
            ResourceNotFoundError: If no stream can be opened for the path
        """
        pass
