"""Tests for the package's public import surface."""

from __future__ import annotations

import importlib

import pytest

import phrasesync


class TestPublicApi:
    """Everything in __all__ is importable."""

    @pytest.mark.parametrize(
        "module_name",
        ["phrasesync", "phrasesync.formats", "phrasesync.sync"],
    )
    def test_all_names_resolve(self, module_name: str) -> None:
        """Each exported name exists on its module."""
        module = importlib.import_module(module_name)
        for name in module.__all__:
            assert hasattr(module, name), f"{module_name}.{name}"

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(phrasesync.__version__, str)
        assert phrasesync.__version__

    def test_exception_hierarchy(self) -> None:
        """Every package error derives from PhraseSyncError."""
        for error in (
            phrasesync.ConfigurationError,
            phrasesync.SelectionError,
            phrasesync.ServiceError,
            phrasesync.EncodingError,
        ):
            assert issubclass(error, phrasesync.PhraseSyncError)
