"""Custom exception hierarchy for kswitch.

All exceptions that cross layer boundaries must inherit from
:class:`KswitchError`.  Raw third-party exceptions (``OSError``,
``yaml.YAMLError``, ``kubernetes`` API errors) must NEVER propagate
beyond the infrastructure layer — they are caught there and re-raised
as a typed subclass defined here.

Hierarchy
---------
KswitchError
├── StorageError
├── ConfigError
├── SelectionError
├── UsageError
├── ClusterError
└── EnvironmentError
"""

from __future__ import annotations


class KswitchError(Exception):
    """Base exception for all kswitch errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- State directory -------------------------------------------------------

class StorageError(KswitchError):
    """Raised when the state directory or a state file cannot be accessed."""


# --- Kubeconfig ------------------------------------------------------------

class ConfigError(KswitchError):
    """Raised when the kubeconfig cannot be loaded, mutated, or written."""


# --- Selection -------------------------------------------------------------

class SelectionError(KswitchError):
    """Raised for a non-candidate pick or a structurally missing selection."""


# --- Command line ----------------------------------------------------------

class UsageError(KswitchError):
    """Raised when conflicting command-line options are combined."""


# --- Cluster API -----------------------------------------------------------

class ClusterError(KswitchError):
    """Raised when namespaces cannot be listed from the cluster."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(KswitchError):
    """Raised when a required runtime dependency is not available."""
