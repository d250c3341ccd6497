"""Tests for the test helpers."""

import pytest

from pathbind.binding import EagerBinding
from pathbind.config import BinderConfig
from pathbind.exceptions import ValidationError
from pathbind.repository import FileResource, InMemoryResourceRepository
from pathbind.testing import create_binder, create_test_resources
from pathbind.types import BindingParameter, BindingType


class TestCreateTestResources:
    """Test create_test_resources."""

    def test_adds_resources(self, empty_repo):
        """Test that one resource is added per path."""
        resources = create_test_resources(empty_repo, ["/a", "/b"])

        assert [r.path for r in resources] == ["/a", "/b"]
        assert empty_repo.get("/a") is resources[0]
        assert len(empty_repo) == 2


class TestCreateBinder:
    """Test create_binder."""

    def test_reproduces_bindings(self, empty_repo):
        """Test that types, resources and bindings are recreated."""
        type1 = BindingType("type1")
        type2 = BindingType("type2", [BindingParameter("param", default="x")])
        file1 = FileResource("/file1")
        file2 = FileResource("/file2")

        binder = create_binder(empty_repo, [
            EagerBinding("/file1", [file1], type1),
            EagerBinding("/file1", [file1], type2, {"param": "y"}),
            EagerBinding("/file2", [file2], type1),
        ])

        assert empty_repo.get("/file1") is file1
        assert binder.is_defined("type1")
        assert binder.get_defined_type("type2") is type2
        assert binder.find("type1") == [file1, file2]
        assert binder.get_bindings("/file1", "type2")[0].parameters == {"param": "y"}
        assert len(binder) == 3

    def test_selector_bindings(self, empty_repo):
        """Test reproducing a binding made for a selector."""
        resources = [FileResource("/file1"), FileResource("/file2")]

        binder = create_binder(empty_repo, [EagerBinding("/file*", resources, BindingType("type"))])

        assert binder.find("type") == resources
        assert len(binder.get_bindings("/file*")) == 1

    def test_keeps_existing_resources(self, repo):
        """Test that identical resources are not added again."""
        existing = repo.get("/file1")

        create_binder(repo, [EagerBinding("/file1", [existing], BindingType("type"))])

        assert repo.get("/file1") is existing
        assert len(repo) == 2

    def test_uses_config(self, empty_repo):
        """Test passing binder settings."""
        binder = create_binder(empty_repo, [], BinderConfig(name="fixture"))

        assert binder.name == "fixture"
        assert len(binder) == 0

    def test_resource_without_path_fails(self, empty_repo):
        """Test that resources must have a path."""
        with pytest.raises(ValidationError):
            create_binder(empty_repo, [EagerBinding("/x", [FileResource()], BindingType("type"))])
