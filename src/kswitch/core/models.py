"""Domain models for kswitch.

Value objects are **frozen** dataclasses with no behaviour beyond data
access.  :class:`ClusterConfig` is the one mutable model: it wraps the
parsed kubeconfig document that the gateway mutates in place before
writing it back.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Stored keys
# ---------------------------------------------------------------------------

PREVIOUS_CONTEXT_KEY: str = "previous_context"
PREVIOUS_NAMESPACE_KEY: str = "previous_namespace"
FAVORITE_CONTEXT_PREFIX: str = "favorite_context_"
FAVORITE_NAMESPACE_PREFIX: str = "favorite_namespace_"


def favorite_context_key(name: str) -> str:
    return f"{FAVORITE_CONTEXT_PREFIX}{name}"


def favorite_namespace_key(name: str) -> str:
    return f"{FAVORITE_NAMESPACE_PREFIX}{name}"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Selection:
    """An active (context, namespace) pair."""

    context: str
    """Kubeconfig context name."""

    namespace: str
    """Namespace within :attr:`context`.  ``""`` when none is recorded."""

    def __str__(self) -> str:
        return f"{self.context}/{self.namespace}"


@dataclass(frozen=True, slots=True)
class Favorite:
    """A user-named, stored selection.

    A favorite with only one stored half is reported with both fields
    empty rather than omitted.
    """

    name: str
    context: str
    namespace: str


# ---------------------------------------------------------------------------
# Kubeconfig document
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ClusterConfig:
    """Parsed kubeconfig document.

    Only ``current-context`` and ``contexts[].context.namespace`` are
    ever touched; every other field round-trips untouched.
    """

    document: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Operation modes
# ---------------------------------------------------------------------------

class Mode(enum.Enum):
    """Top-level operation, exactly one per invocation."""

    PRINT_CURRENT = "print-current"
    LOAD_FAVORITE = "load-favorite"
    STORE_FAVORITE = "store-favorite"
    SWITCH_PREVIOUS = "switch-previous"
    LIST_FAVORITES = "list-favorites"
    INTERACTIVE = "interactive"


class Scope(enum.Enum):
    """Which interactive steps an :attr:`Mode.INTERACTIVE` run performs."""

    CONTEXT_ONLY = "context"
    CONTEXT_THEN_NAMESPACE = "context+namespace"
    NAMESPACE_ONLY = "namespace"

    @property
    def picks_context(self) -> bool:
        return self is not Scope.NAMESPACE_ONLY

    @property
    def picks_namespace(self) -> bool:
        return self is not Scope.CONTEXT_ONLY
