"""Basic test to verify test infrastructure is working."""


def test_project_structure():
    """Verify that the project structure is set up correctly."""
    import sunpos

    assert hasattr(sunpos, "__version__")
    assert sunpos.__version__ == "0.1.0"


def test_public_names():
    from sunpos import Location, Sun, TimeOfInterest

    assert Sun.body.name == "Sun"
    assert Location(0.0, 0.0).elevation == 0.0
    assert TimeOfInterest(2451545.0).T == 0.0
