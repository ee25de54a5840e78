"""
Import tests for all grunge modules and subpackages.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main grunge package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main grunge package can be imported."""
        import grunge
        assert hasattr(grunge, '__version__')
        assert hasattr(grunge, '__all__')

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import grunge.constants as cte
        assert cte.MIN_OCTAVES == 2
        assert cte.MAX_OCTAVES == 30

    @pytest.mark.importtest
    def test_top_level_exports(self):
        """Test that the public names re-exported at top level resolve."""
        import grunge
        for name in grunge.__all__:
            assert hasattr(grunge, name), name


class TestSubpackageImports:
    """Test imports for grunge subpackages."""

    @pytest.mark.importtest
    @pytest.mark.parametrize("name", ["primitives", "modules", "modifiers", "misc", "cli"])
    def test_subpackage_import(self, name):
        """Test that each subpackage can be imported."""
        import importlib
        mod = importlib.import_module(f"grunge.{name}")
        assert mod.__all__

    @pytest.mark.importtest
    def test_cli_lazy_attribute(self):
        """Test that CLI commands resolve lazily."""
        import grunge.cli
        assert callable(grunge.cli.sample)

    @pytest.mark.importtest
    def test_cli_unknown_attribute(self):
        """Test that unknown CLI attributes raise AttributeError."""
        import grunge.cli
        with pytest.raises(AttributeError):
            grunge.cli.does_not_exist
