"""Tests for resolver options."""

import pytest
from pydantic import ValidationError

from scriptree.config import ResolverOptions


class TestResolverOptions:
    """Tests for ResolverOptions."""

    def test_defaults(self) -> None:
        options = ResolverOptions()
        assert options.alpha is False
        assert options.prune is False
        assert options.max_depth is None

    def test_unknown_options_ignored(self) -> None:
        options = ResolverOptions.model_validate({"alpha": True, "colour": "always"})
        assert options.alpha is True
        assert not hasattr(options, "colour")

    def test_short_alias(self) -> None:
        """The short flag name 'a' is accepted for alpha."""
        assert ResolverOptions.model_validate({"a": True}).alpha is True

    def test_invalid_depth(self) -> None:
        with pytest.raises(ValidationError):
            ResolverOptions(max_depth=0)


class TestFromEnv:
    """Tests for environment defaults."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIPTREE_ALPHA", "yes")
        monkeypatch.setenv("SCRIPTREE_PRUNE", "1")
        monkeypatch.setenv("SCRIPTREE_MAX_DEPTH", "3")
        options = ResolverOptions.from_env()
        assert options.alpha is True
        assert options.prune is True
        assert options.max_depth == 3

    def test_falsy_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIPTREE_ALPHA", "0")
        assert ResolverOptions.from_env().alpha is False

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIPTREE_PRUNE", "false")
        assert ResolverOptions.from_env(prune=True).prune is True

    def test_none_overrides_do_not_mask_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIPTREE_ALPHA", "true")
        assert ResolverOptions.from_env(alpha=None).alpha is True
