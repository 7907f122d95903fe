"""Smoke tests that verify the installed package contains all expected modules."""

import importlib


def test_all_subpackages_importable():
    """Every stylecascade subpackage must be importable."""
    subpackages = [
        "stylecascade",
        "stylecascade.core",
        "stylecascade.gui",
        "stylecascade.languages",
    ]
    for pkg in subpackages:
        importlib.import_module(pkg)


def test_console_entry_point_resolves():
    """The console script target exists."""
    from stylecascade.__main__ import main

    assert callable(main)


def test_version():
    import stylecascade

    assert stylecascade.__version__.count(".") == 2
