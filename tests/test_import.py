"""Verify package imports work correctly."""


def test_import_lexemas() -> None:
    """Test that lexemas can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import lexemas

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert lexemas.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from lexemas import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import lexemas

    for name in lexemas.__all__:
        assert hasattr(lexemas, name), name


def test_engine_does_not_import_dfa() -> None:
    """The automaton module is optional machinery, not an engine dependency."""
    import lexemas.lexer.core as core

    assert "dfa" not in vars(core)
    assert not any(
        getattr(value, "__module__", "") == "lexemas.lexer.dfa" for value in vars(core).values()
    )
