"""Test contracts package basics."""

import dataknobs_contracts


def test_version():
    """Test that version is defined."""
    assert hasattr(dataknobs_contracts, "__version__")
    assert isinstance(dataknobs_contracts.__version__, str)
    assert dataknobs_contracts.__version__ == "0.1.0"
