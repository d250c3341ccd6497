"""Pytest configuration and fixtures for pathbind tests."""

import pytest

from pathbind.binder import ResourceBinder
from pathbind.repository import FileResource, InMemoryResourceRepository


@pytest.fixture
def repo():
    """Repository holding two files."""
    repo = InMemoryResourceRepository()
    repo.add("/file1", FileResource(body="one"))
    repo.add("/file2", FileResource(body="two"))
    return repo


@pytest.fixture
def empty_repo():
    """Repository without resources."""
    return InMemoryResourceRepository()


@pytest.fixture
def binder(repo):
    """Binder over the two-file repository with types type1 and type2."""
    binder = ResourceBinder(repo)
    binder.define("type1")
    binder.define("type2")
    return binder
