"""Shared pytest fixtures and configuration for the kswitch test suite.

Guidelines
----------
* No network access in any test; the Kubernetes client is mocked or
  replaced by :class:`FakeNamespaces`.
* No terminal interaction; pickers are replaced by :class:`ScriptedPicker`.
* Real files only under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest
import yaml

from kswitch.core.presenter import Presenter
from kswitch.core.resolver import SelectionResolver
from kswitch.infra.file_store import FileKeyValueStore
from kswitch.infra.kubeconfig import KubeconfigGateway
from kswitch.settings import Settings


def kubeconfig_document(
    *,
    current: str = "dev",
    namespaces: dict[str, str | None] | None = None,
) -> dict[str, Any]:
    """Build a kubeconfig mapping with one cluster/user per context."""
    if namespaces is None:
        namespaces = {"dev": "team-a", "prod": "default"}

    contexts: list[dict[str, Any]] = []
    for name, namespace in namespaces.items():
        body: dict[str, Any] = {"cluster": f"{name}-cluster", "user": f"{name}-user"}
        if namespace is not None:
            body["namespace"] = namespace
        contexts.append({"name": name, "context": body})

    return {
        "apiVersion": "v1",
        "kind": "Config",
        "preferences": {},
        "clusters": [
            {"name": f"{name}-cluster", "cluster": {"server": f"https://{name}.example:6443"}}
            for name in namespaces
        ],
        "users": [
            {"name": f"{name}-user", "user": {"token": f"{name}-token"}}
            for name in namespaces
        ],
        "contexts": contexts,
        "current-context": current,
    }


def write_kubeconfig(path: Path, document: dict[str, Any]) -> Path:
    path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
    return path


def read_kubeconfig(path: Path) -> dict[str, Any]:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


class ScriptedPicker:
    """Picker returning queued answers and recording what it was shown."""

    def __init__(self, *answers: str | None) -> None:
        self._answers: list[str | None] = list(answers)
        self.calls: list[tuple[list[str], str]] = []

    def __call__(self, candidates: Sequence[str], *, kind: str) -> str | None:
        self.calls.append((list(candidates), kind))
        return self._answers.pop(0)


class FakeNamespaces:
    """Namespace provider backed by a plain mapping."""

    def __init__(self, by_context: dict[str, list[str]]) -> None:
        self._by_context = by_context
        self.requested: list[str] = []

    def list_namespaces(self, context: str) -> list[str]:
        self.requested.append(context)
        return list(self._by_context.get(context, []))


@pytest.fixture()
def kubeconfig_path(tmp_path: Path) -> Path:
    return write_kubeconfig(tmp_path / "config", kubeconfig_document())


@pytest.fixture()
def store(tmp_path: Path) -> FileKeyValueStore:
    kv = FileKeyValueStore(tmp_path / "state")
    kv.ensure_directory()
    return kv


@pytest.fixture()
def gateway(kubeconfig_path: Path) -> KubeconfigGateway:
    return KubeconfigGateway(kubeconfig_path)


@pytest.fixture()
def settings(tmp_path: Path, kubeconfig_path: Path) -> Settings:
    return Settings(kubeconfig_path=kubeconfig_path, state_dir=tmp_path / "state")


@pytest.fixture()
def make_resolver(store: FileKeyValueStore, gateway: KubeconfigGateway):  # type: ignore[no-untyped-def]
    """Factory building a resolver around real files and fake collaborators."""

    def _make(
        *answers: str | None,
        namespaces: dict[str, list[str]] | None = None,
    ) -> tuple[SelectionResolver, ScriptedPicker, FakeNamespaces]:
        picker = ScriptedPicker(*answers)
        fake_namespaces = FakeNamespaces(namespaces or {})
        resolver = SelectionResolver(
            store=store,
            gateway=gateway,
            presenter=Presenter(picker),
            namespaces=fake_namespaces,
        )
        return resolver, picker, fake_namespaces

    return _make
