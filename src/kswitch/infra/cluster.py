"""Kubernetes-backed implementation of :class:`~kswitch.core.protocols.NamespaceProvider`.

This module is the **only** place in the codebase that imports
``kubernetes``.  All client exceptions are caught here and re-raised
as :class:`~kswitch.exceptions.ClusterError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from kswitch.exceptions import ClusterError, EnvironmentError

logger = logging.getLogger(__name__)


def _import_kubernetes() -> tuple[Any, Any]:
    """Return the ``(client, config)`` modules of the kubernetes package."""
    try:
        from kubernetes import client, config
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "kubernetes is not installed. Install with: pip install kubernetes",
        ) from exc
    return client, config


class KubernetesNamespaceProvider:
    """Lists namespaces through the API server of a kubeconfig context.

    The client is built from the same kubeconfig file the tool edits,
    for an explicit context, so the listing does not depend on what is
    currently written to disk.
    """

    def __init__(self, kubeconfig_path: Path, *, timeout: float = 10.0) -> None:
        self._kubeconfig_path: Path = kubeconfig_path
        self._timeout: float = timeout

    def list_namespaces(self, context: str) -> list[str]:
        """Return namespace names visible through *context*.

        Raises
        ------
        ClusterError
            When the client cannot be configured or the request fails.
        """
        client, config = _import_kubernetes()

        try:
            api_client = config.new_client_from_config(
                config_file=str(self._kubeconfig_path),
                context=context,
            )
        except config.ConfigException as exc:
            raise ClusterError(
                f"Couldn't configure a client for context '{context}': {exc}",
            ) from exc

        try:
            response = client.CoreV1Api(api_client).list_namespace(
                _request_timeout=self._timeout,
            )
        except client.ApiException as exc:
            raise ClusterError(
                f"Listing namespaces failed for context '{context}': "
                f"{exc.status} {exc.reason}",
                hint="Check that your credentials for this context are valid.",
            ) from exc
        except Exception as exc:
            raise ClusterError(
                f"Couldn't reach the cluster for context '{context}': {exc}",
            ) from exc
        finally:
            api_client.close()

        names = [item.metadata.name for item in response.items]
        logger.debug("Context %r has %d namespaces", context, len(names))
        return names
