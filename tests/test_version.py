"""Test package basics."""

import pathbind


def test_version():
    """Test that version is defined."""
    assert hasattr(pathbind, "__version__")
    assert isinstance(pathbind.__version__, str)
    assert pathbind.__version__ == "1.0.0"


def test_public_api():
    """Test that the public names are exported."""
    for name in pathbind.__all__:
        assert hasattr(pathbind, name)
