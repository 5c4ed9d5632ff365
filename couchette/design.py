"""
Load design documents packaged with application code.

Expected layout below the root folder (default ``design-docs/``)::

    design-docs/
        users/
            views/
                by_name/
                    map.js
                    reduce.js
            lists/      *.js
            shows/      *.js
            filters/    *.js
            updates/    *.js
            validate_doc_update/
                validate.js
            rewrites/
                rewrites.json
"""

from __future__ import annotations

import json
from typing import Any

from .core.exceptions import ResourceProviderError
from .core.interfaces.resources import IResourceProvider
from .utils.couch import remove_extension

DESIGN_PREFIX = "_design/"
FUNCTION_SECTIONS = ("lists", "shows", "filters", "updates")


class DesignDocumentLoader:
    """Build design document bodies from files exposed by a resource provider."""

    def __init__(self, provider: IResourceProvider, root: str = "design-docs/"):
        if not root.endswith("/"):
            root += "/"
        self.provider = provider
        self.root = root

    def list_design_documents(self) -> list[str]:
        """Names of all design documents under the root, sorted."""
        return sorted(self.provider.list_resources(self.root))

    def load(self, name: str) -> dict[str, Any]:
        """
        Assemble the design document ``_design/<name>``.

        Sections with no files are left out.

        Raises:
            ResourceProviderError: If a file cannot be read or a rewrites
                file is not valid JSON
        """
        base = f"{self.root}{name}/"
        members = self.provider.list_resources(base)
        document: dict[str, Any] = {"_id": DESIGN_PREFIX + name, "language": "javascript"}

        if "views" in members:
            views = self._load_views(base + "views/")
            if views:
                document["views"] = views

        for section in FUNCTION_SECTIONS:
            if section in members:
                functions = self._load_functions(f"{base}{section}/")
                if functions:
                    document[section] = functions

        if "validate_doc_update" in members:
            files = sorted(self.provider.list_resources(base + "validate_doc_update/"))
            if files:
                document["validate_doc_update"] = self.provider.read_file(
                    f"{base}validate_doc_update/{files[0]}"
                )

        if "rewrites" in members:
            rewrites = self._load_rewrites(base + "rewrites/")
            if rewrites:
                document["rewrites"] = rewrites

        return document

    def load_all(self) -> list[dict[str, Any]]:
        return [self.load(name) for name in self.list_design_documents()]

    def _load_views(self, path: str) -> dict[str, dict[str, str]]:
        views: dict[str, dict[str, str]] = {}
        for view in sorted(self.provider.list_resources(path)):
            view_path = f"{path}{view}/"
            view_def: dict[str, str] = {}
            for file_name in sorted(self.provider.list_resources(view_path)):
                # map.js -> "map", reduce.js -> "reduce"
                view_def[remove_extension(file_name)] = self.provider.read_file(
                    view_path + file_name
                )
            if view_def:
                views[view] = view_def
        return views

    def _load_functions(self, path: str) -> dict[str, str]:
        return {
            remove_extension(file_name): self.provider.read_file(path + file_name)
            for file_name in sorted(self.provider.list_resources(path))
        }

    def _load_rewrites(self, path: str) -> list[Any]:
        rewrites: list[Any] = []
        for file_name in sorted(self.provider.list_resources(path)):
            content = self.provider.read_file(path + file_name)
            try:
                parsed = json.loads(content)
            except json.JSONDecodeError as e:
                raise ResourceProviderError(
                    "Invalid JSON in rewrites file", path=path + file_name, cause=e
                ) from e
            if isinstance(parsed, list):
                rewrites.extend(parsed)
            else:
                rewrites.append(parsed)
        return rewrites
