"""Tests for KubernetesNamespaceProvider (infra/cluster.py).

The ``kubernetes`` package is mocked at the import boundary — no API
server, no network.
"""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from kswitch.exceptions import ClusterError, EnvironmentError
from kswitch.infra.cluster import KubernetesNamespaceProvider


class _FakeConfigException(Exception):
    pass


class _FakeApiException(Exception):
    def __init__(self, status: int, reason: str) -> None:
        super().__init__(reason)
        self.status = status
        self.reason = reason


def _fake_kubernetes(
    names: list[str] | None = None,
    *,
    config_error: Exception | None = None,
    list_error: Exception | None = None,
) -> tuple[MagicMock, MagicMock]:
    client_mod = MagicMock()
    client_mod.ApiException = _FakeApiException
    config_mod = MagicMock()
    config_mod.ConfigException = _FakeConfigException

    if config_error is not None:
        config_mod.new_client_from_config.side_effect = config_error

    core = client_mod.CoreV1Api.return_value
    if list_error is not None:
        core.list_namespace.side_effect = list_error
    else:
        core.list_namespace.return_value = SimpleNamespace(
            items=[SimpleNamespace(metadata=SimpleNamespace(name=n)) for n in names or []],
        )
    return client_mod, config_mod


class TestListNamespaces:
    def test_returns_names(self) -> None:
        fake = _fake_kubernetes(["default", "kube-system"])
        provider = KubernetesNamespaceProvider(Path("/tmp/kubeconfig"))
        with patch("kswitch.infra.cluster._import_kubernetes", return_value=fake):
            assert provider.list_namespaces("prod") == ["default", "kube-system"]

    def test_client_built_for_explicit_context(self) -> None:
        client_mod, config_mod = _fake_kubernetes(["default"])
        provider = KubernetesNamespaceProvider(Path("/tmp/kubeconfig"), timeout=3.0)
        with patch(
            "kswitch.infra.cluster._import_kubernetes",
            return_value=(client_mod, config_mod),
        ):
            provider.list_namespaces("prod")

        config_mod.new_client_from_config.assert_called_once_with(
            config_file="/tmp/kubeconfig",
            context="prod",
        )
        client_mod.CoreV1Api.return_value.list_namespace.assert_called_once_with(
            _request_timeout=3.0,
        )
        config_mod.new_client_from_config.return_value.close.assert_called_once()

    def test_config_exception_mapped(self) -> None:
        fake = _fake_kubernetes(config_error=_FakeConfigException("no such context"))
        provider = KubernetesNamespaceProvider(Path("/tmp/kubeconfig"))
        with patch("kswitch.infra.cluster._import_kubernetes", return_value=fake):
            with pytest.raises(ClusterError, match="Couldn't configure a client"):
                provider.list_namespaces("prod")

    def test_api_exception_mapped(self) -> None:
        fake = _fake_kubernetes(list_error=_FakeApiException(403, "Forbidden"))
        provider = KubernetesNamespaceProvider(Path("/tmp/kubeconfig"))
        with patch("kswitch.infra.cluster._import_kubernetes", return_value=fake):
            with pytest.raises(ClusterError, match="403 Forbidden") as exc_info:
                provider.list_namespaces("prod")
        assert exc_info.value.hint is not None

    def test_transport_error_mapped(self) -> None:
        fake = _fake_kubernetes(list_error=ConnectionRefusedError("refused"))
        provider = KubernetesNamespaceProvider(Path("/tmp/kubeconfig"))
        with patch("kswitch.infra.cluster._import_kubernetes", return_value=fake):
            with pytest.raises(ClusterError, match="Couldn't reach the cluster"):
                provider.list_namespaces("prod")

    def test_missing_package(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "kubernetes", None)
        provider = KubernetesNamespaceProvider(Path("/tmp/kubeconfig"))
        with pytest.raises(EnvironmentError, match="kubernetes is not installed"):
            provider.list_namespaces("prod")
