"""Tests for routebook.config — RouterConfig frozen dataclass."""

import pytest

from routebook.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.default_requirement == r"[^/]+"
        assert cfg.strict_requirements is True
        assert cfg.file_suffixes == (".yaml", ".yml")

    def test_override(self) -> None:
        cfg = RouterConfig(default_requirement=r"\w+", strict_requirements=False)

        assert cfg.default_requirement == r"\w+"
        assert cfg.strict_requirements is False

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.strict_requirements = False  # type: ignore[misc]


class TestLazyExports:
    def test_public_names(self) -> None:
        import routebook

        for name in routebook.__all__:
            assert getattr(routebook, name) is not None

    def test_unknown_name(self) -> None:
        import routebook

        with pytest.raises(AttributeError):
            routebook.DoesNotExist  # noqa: B018
