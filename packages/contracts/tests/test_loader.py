"""Tests for dotted-path class loading."""

from collections import OrderedDict

import pytest

from dataknobs_contracts.loader import load_class


class TestLoadClass:
    """Test class resolution and its failure modes."""

    def test_dotted_path(self):
        """Test that a module attribute class is returned."""
        assert load_class("collections.OrderedDict") is OrderedDict

    @pytest.mark.parametrize(
        "path",
        ["OrderedDict", ".OrderedDict", "collections.", "no_such_module_xyz.Thing",
         "collections.NoSuchThing", "collections.abc", 5],
    )
    def test_failures_are_import_errors(self, path):
        """Test that every failure mode surfaces as ImportError."""
        with pytest.raises(ImportError):
            load_class(path)
