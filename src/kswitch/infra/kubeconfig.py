"""PyYAML-backed implementation of :class:`~kswitch.core.protocols.ConfigGateway`.

This module is the **only** place in the codebase that imports ``yaml``.
The kubeconfig schema belongs to the Kubernetes client ecosystem; this
gateway reads and writes just two things:

* the top-level ``current-context``;
* ``namespace`` inside the ``contexts[].context`` entry of the
  addressed context.

All other fields are written back exactly as they were parsed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from kswitch.core.models import ClusterConfig, Selection
from kswitch.exceptions import ConfigError, EnvironmentError

logger = logging.getLogger(__name__)


def _import_yaml() -> Any:
    """Import PyYAML lazily so ``--help`` works without it."""
    try:
        import yaml
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "PyYAML is not installed. Install with: pip install PyYAML",
        ) from exc
    return yaml


class KubeconfigGateway:
    """Concrete :class:`ConfigGateway` for a single kubeconfig file."""

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    # ------------------------------------------------------------------
    # Load / persist
    # ------------------------------------------------------------------

    def load(self) -> ClusterConfig:
        """Parse the kubeconfig file.

        Raises
        ------
        ConfigError
            When the file is missing, unreadable, not YAML, or not a
            mapping, or when ``contexts`` is present but not a list.
        """
        yaml = _import_yaml()

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(
                f"Couldn't read kubeconfig {self._path}: {exc}",
                hint="Set KUBECONFIG to point at a valid kubeconfig file.",
            ) from exc

        try:
            document: Any = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed kubeconfig {self._path}: {exc}") from exc

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigError(f"Malformed kubeconfig {self._path}: not a mapping")
        contexts = document.get("contexts")
        if contexts is not None and not isinstance(contexts, list):
            raise ConfigError(
                f"Malformed kubeconfig {self._path}: 'contexts' is not a list",
            )

        logger.debug("Loaded kubeconfig %s", self._path)
        return ClusterConfig(document=document)

    def persist(self, cfg: ClusterConfig) -> None:
        yaml = _import_yaml()
        try:
            text = yaml.safe_dump(
                cfg.document,
                default_flow_style=False,
                sort_keys=False,
            )
            self._path.write_text(text, encoding="utf-8")
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Couldn't write kubeconfig {self._path}: {exc}") from exc
        logger.debug("Wrote kubeconfig %s", self._path)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def context_names(self, cfg: ClusterConfig) -> list[str]:
        """Return context names in file order."""
        return [
            str(entry["name"])
            for entry in self._contexts(cfg)
            if entry.get("name")
        ]

    def current_selection(self, cfg: ClusterConfig) -> Selection | None:
        context = cfg.document.get("current-context") or ""
        if not context:
            return None
        entry = self._find_context(cfg, str(context))
        namespace = ""
        if entry is not None:
            namespace = str(entry.get("namespace") or "")
        return Selection(str(context), namespace)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply(self, cfg: ClusterConfig, selection: Selection) -> None:
        """Make *selection* current in memory.

        An empty :attr:`Selection.namespace` leaves the context's
        recorded namespace untouched.

        Raises
        ------
        ConfigError
            If ``selection.context`` is not defined in the kubeconfig.
        """
        named = self._context_entry(cfg, selection.context)
        if named is None:
            raise ConfigError(
                f"Context '{selection.context}' does not exist in {self._path}",
                hint="The context may have been removed since it was stored.",
            )

        cfg.document["current-context"] = selection.context
        if selection.namespace:
            body = named.get("context")
            if not isinstance(body, dict):
                body = {}
                named["context"] = body
            body["namespace"] = selection.namespace

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _contexts(cfg: ClusterConfig) -> list[dict[str, Any]]:
        raw: object = cfg.document.get("contexts")
        if not isinstance(raw, list):
            return []
        # Each element is expected to be a dict; skip malformed entries.
        return [entry for entry in raw if isinstance(entry, dict)]

    @classmethod
    def _context_entry(cls, cfg: ClusterConfig, name: str) -> dict[str, Any] | None:
        """Return the ``{name, context}`` list item for *name*."""
        return next(
            (entry for entry in cls._contexts(cfg) if entry.get("name") == name),
            None,
        )

    @classmethod
    def _find_context(cls, cfg: ClusterConfig, name: str) -> dict[str, Any] | None:
        """Return the inner ``context`` body for *name*."""
        named = cls._context_entry(cfg, name)
        if named is None:
            return None
        body = named.get("context")
        return body if isinstance(body, dict) else None
