"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, the kubeconfig
file, the Kubernetes API, and the terminal.  Every raw third-party or
OS exception must be caught here and re-raised as a
:class:`~kswitch.exceptions.KswitchError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from kswitch.infra.cluster import KubernetesNamespaceProvider
from kswitch.infra.file_store import FileKeyValueStore
from kswitch.infra.kubeconfig import KubeconfigGateway
from kswitch.infra.terminal import TerminalState

__all__: list[str] = [
    "FileKeyValueStore",
    "KubeconfigGateway",
    "KubernetesNamespaceProvider",
    "TerminalState",
]
