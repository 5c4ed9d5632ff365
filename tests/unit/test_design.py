"""Tests for DesignDocumentLoader."""

import pytest

from couchette.core.exceptions import ResourceProviderError
from couchette.design import DesignDocumentLoader
from couchette.resources.classpath import LINE_SEP, ClasspathResourceProvider

FILES = {
    "design-docs/users/views/by_name/map.js": "function(doc) { emit(doc.name); }",
    "design-docs/users/views/by_name/reduce.js": "_count",
    "design-docs/users/views/by_age/map.js": "function(doc) { emit(doc.age); }",
    "design-docs/users/shows/profile.js": "function(doc, req) {}",
    "design-docs/users/validate_doc_update/validate.js": "function(n, o) {}",
    "design-docs/users/rewrites/rewrites.json": '[{"from": "/a", "to": "/b"}]',
    "design-docs/orders/filters/open.js": "function(doc) { return !doc.closed; }",
}


@pytest.fixture
def loader(make_package):
    return DesignDocumentLoader(ClasspathResourceProvider(make_package(FILES)))


class TestDesignDocumentLoader:
    def test_lists_design_documents(self, loader):
        assert loader.list_design_documents() == ["orders", "users"]

    def test_load_views(self, loader):
        doc = loader.load("users")

        assert doc["_id"] == "_design/users"
        assert doc["language"] == "javascript"
        assert set(doc["views"]) == {"by_name", "by_age"}
        assert doc["views"]["by_name"] == {
            "map": "function(doc) { emit(doc.name); }" + LINE_SEP,
            "reduce": "_count" + LINE_SEP,
        }

    def test_load_functions_and_validation(self, loader):
        doc = loader.load("users")

        assert doc["shows"] == {"profile": "function(doc, req) {}" + LINE_SEP}
        assert doc["validate_doc_update"] == "function(n, o) {}" + LINE_SEP
        assert doc["rewrites"] == [{"from": "/a", "to": "/b"}]

    def test_empty_sections_are_omitted(self, loader):
        doc = loader.load("orders")

        assert set(doc) == {"_id", "language", "filters"}

    def test_load_all(self, loader):
        assert [doc["_id"] for doc in loader.load_all()] == ["_design/orders", "_design/users"]

    def test_custom_root_without_slash(self, make_package):
        name = make_package({"ddocs/x/lists/l.js": "function() {}"})

        loader = DesignDocumentLoader(ClasspathResourceProvider(name), root="ddocs")

        assert loader.load("x")["lists"] == {"l": "function() {}" + LINE_SEP}

    def test_invalid_rewrites(self, make_package):
        name = make_package({"design-docs/bad/rewrites/r.json": "{not json"})
        loader = DesignDocumentLoader(ClasspathResourceProvider(name))

        with pytest.raises(ResourceProviderError):
            loader.load("bad")

    def test_missing_root(self, make_package):
        loader = DesignDocumentLoader(ClasspathResourceProvider(make_package({})))

        assert loader.list_design_documents() == []
