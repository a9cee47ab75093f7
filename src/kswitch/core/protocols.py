"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so the resolver is testable without real files, a
real cluster, or a terminal.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from kswitch.core.models import ClusterConfig, Selection


class KeyValueStore(Protocol):
    """Durable string-to-string mapping.

    Implementations must raise :class:`~kswitch.exceptions.StorageError`
    for every failure other than a missing key.
    """

    def ensure_directory(self) -> None:
        """Make the backing location available; idempotent."""
        ...  # pragma: no cover

    def read(self, key: str) -> str:
        """Return the stored value, or ``""`` when *key* was never written."""
        ...  # pragma: no cover

    def write(self, key: str, value: str) -> None:
        """Create or overwrite *key*."""
        ...  # pragma: no cover

    def list_keys(self, prefix: str) -> list[str]:
        """Return stored keys starting with *prefix*."""
        ...  # pragma: no cover


class ConfigGateway(Protocol):
    """Access to the kubeconfig document.

    Implementations must raise :class:`~kswitch.exceptions.ConfigError`
    on load, apply, and persist failures.
    """

    def load(self) -> ClusterConfig:
        ...  # pragma: no cover

    def current_selection(self, cfg: ClusterConfig) -> Selection | None:
        """Return the active selection, or ``None`` if no context is set."""
        ...  # pragma: no cover

    def context_names(self, cfg: ClusterConfig) -> list[str]:
        ...  # pragma: no cover

    def apply(self, cfg: ClusterConfig, selection: Selection) -> None:
        """Make *selection* current inside *cfg* (in memory only)."""
        ...  # pragma: no cover

    def persist(self, cfg: ClusterConfig) -> None:
        """Write *cfg* back to its source."""
        ...  # pragma: no cover


class NamespaceProvider(Protocol):
    """Lists namespaces visible through a kubeconfig context.

    Implementations must raise :class:`~kswitch.exceptions.ClusterError`
    on any client, auth, or transport failure.  No retries.
    """

    def list_namespaces(self, context: str) -> list[str]:
        ...  # pragma: no cover


class Picker(Protocol):
    """Interactive single-choice picker.

    Returns the entered string, or ``None`` when the user cancelled.
    The returned string is not guaranteed to be one of *candidates*.
    """

    def __call__(self, candidates: Sequence[str], *, kind: str) -> str | None:
        ...  # pragma: no cover
