"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import dataclasses

import pytest

from kswitch.core.models import (
    Favorite,
    Scope,
    Selection,
    favorite_context_key,
    favorite_namespace_key,
)


class TestSelection:
    def test_fields_accessible(self) -> None:
        s = Selection("dev", "team-a")
        assert s.context == "dev"
        assert s.namespace == "team-a"

    def test_frozen(self) -> None:
        s = Selection("dev", "team-a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.context = "prod"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Selection("dev", "a") == Selection("dev", "a")
        assert Selection("dev", "a") != Selection("dev", "b")

    def test_str(self) -> None:
        assert str(Selection("dev", "team-a")) == "dev/team-a"


class TestFavorite:
    def test_fields_accessible(self) -> None:
        f = Favorite("a", "ctx", "ns")
        assert (f.name, f.context, f.namespace) == ("a", "ctx", "ns")


class TestKeys:
    def test_favorite_keys(self) -> None:
        assert favorite_context_key("work") == "favorite_context_work"
        assert favorite_namespace_key("work") == "favorite_namespace_work"


class TestScope:
    @pytest.mark.parametrize(
        ("scope", "context", "namespace"),
        [
            (Scope.CONTEXT_ONLY, True, False),
            (Scope.CONTEXT_THEN_NAMESPACE, True, True),
            (Scope.NAMESPACE_ONLY, False, True),
        ],
    )
    def test_steps(self, scope: Scope, context: bool, namespace: bool) -> None:
        assert scope.picks_context is context
        assert scope.picks_namespace is namespace
