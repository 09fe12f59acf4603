"""Tests for the mediaquery package."""


def test_package_imports():
    """Test that the package can be imported successfully."""
    import mediaquery

    assert mediaquery is not None


def test_package_version():
    """Test that the package has a version string."""
    from mediaquery import __version__

    assert __version__ == "1.0.0"


def test_public_api_round_trip(tablet_context):
    """Top-level exports are enough to parse and evaluate a query."""
    from mediaquery import evaluate, parse_condition

    condition = parse_condition("(width >= 600vp)")
    assert condition is not None
    assert evaluate(condition, tablet_context) is True
