"""Selection state machine — current, previous, favorite, interactive.

This is the central service consumed by the CLI layer.  Its
collaborators are injected at construction time, keeping the core free
of any filesystem, network, or terminal imports.

Guarantees
----------
* Every mutating mode captures the current selection *before* touching
  the config and, once :meth:`ConfigGateway.persist` succeeds, records
  it under the ``previous_*`` keys.
* Nothing is persisted when the user cancels a pick.
* Missing previous state or a missing/half-stored favorite is a silent
  no-op, never an error.
"""

from __future__ import annotations

import logging

from kswitch.core.models import (
    FAVORITE_CONTEXT_PREFIX,
    FAVORITE_NAMESPACE_PREFIX,
    PREVIOUS_CONTEXT_KEY,
    PREVIOUS_NAMESPACE_KEY,
    ClusterConfig,
    Favorite,
    Scope,
    Selection,
    favorite_context_key,
    favorite_namespace_key,
)
from kswitch.core.presenter import Presenter
from kswitch.core.protocols import ConfigGateway, KeyValueStore, NamespaceProvider
from kswitch.exceptions import SelectionError

logger = logging.getLogger(__name__)


class SelectionResolver:
    """Resolves and applies one selection per invocation.

    Parameters
    ----------
    store:
        Previous/favorite state.
    gateway:
        Kubeconfig access.
    presenter:
        Interactive picking; only needed by :meth:`interactive_pick`.
    namespaces:
        Namespace listing; only needed when a namespace step runs.
    """

    def __init__(
        self,
        store: KeyValueStore,
        gateway: ConfigGateway,
        presenter: Presenter | None = None,
        namespaces: NamespaceProvider | None = None,
    ) -> None:
        self._store: KeyValueStore = store
        self._gateway: ConfigGateway = gateway
        self._presenter: Presenter | None = presenter
        self._namespaces: NamespaceProvider | None = namespaces

    # ------------------------------------------------------------------
    # Read-only modes
    # ------------------------------------------------------------------

    def current(self) -> Selection | None:
        """Return the active selection, or ``None`` if no context is set."""
        cfg = self._gateway.load()
        return self._gateway.current_selection(cfg)

    def list_favorites(self) -> list[Favorite]:
        """Return every stored favorite, sorted by name.

        Context and namespace halves are paired by the name left after
        stripping their key prefix.  A name with only one half is
        reported with both fields empty.
        """
        contexts = {
            key[len(FAVORITE_CONTEXT_PREFIX):]: self._store.read(key)
            for key in self._store.list_keys(FAVORITE_CONTEXT_PREFIX)
        }
        namespaces = {
            key[len(FAVORITE_NAMESPACE_PREFIX):]: self._store.read(key)
            for key in self._store.list_keys(FAVORITE_NAMESPACE_PREFIX)
        }

        favorites: list[Favorite] = []
        for name in sorted(contexts.keys() | namespaces.keys()):
            if name in contexts and name in namespaces:
                favorites.append(Favorite(name, contexts[name], namespaces[name]))
            else:
                logger.debug("Favorite %r is only half stored", name)
                favorites.append(Favorite(name, "", ""))
        return favorites

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def store_favorite(self, name: str) -> Selection:
        """Store the current selection as favorite *name*.

        Raises
        ------
        SelectionError
            If no context is currently set.
        StorageError
            Propagated from the store.
        """
        selection = self.current()
        if selection is None:
            raise SelectionError(
                "No current context to store as a favorite.",
                hint="Select a context first, then store it.",
            )
        self._store.write(favorite_context_key(name), selection.context)
        self._store.write(favorite_namespace_key(name), selection.namespace)
        logger.debug("Stored favorite %r as %s", name, selection)
        return selection

    def load_favorite(self, name: str) -> Selection | None:
        """Switch to favorite *name*; ``None`` when it is not fully stored."""
        target = self._read_pair(favorite_context_key(name), favorite_namespace_key(name))
        if target is None:
            logger.debug("Favorite %r not found; leaving config unchanged", name)
            return None
        self._switch_to(target)
        return target

    # ------------------------------------------------------------------
    # Previous
    # ------------------------------------------------------------------

    def switch_previous(self) -> Selection | None:
        """Switch back to the previous selection, if one is stored.

        Calling this twice toggles between the two most recent
        selections, since each switch records what it left.
        """
        target = self._read_pair(PREVIOUS_CONTEXT_KEY, PREVIOUS_NAMESPACE_KEY)
        if target is None:
            logger.debug("No previous selection stored")
            return None
        self._switch_to(target)
        return target

    # ------------------------------------------------------------------
    # Interactive
    # ------------------------------------------------------------------

    def interactive_pick(self, scope: Scope) -> Selection | None:
        """Pick a context and/or namespace interactively.

        Returns the applied selection, or ``None`` if the user cancelled
        at any step (nothing is written in that case).

        Raises
        ------
        SelectionError
            If a pick is not a candidate, or a namespace-only pick runs
            without a current context.
        """
        if self._presenter is None:
            raise SelectionError("Interactive selection is not available.")

        cfg = self._gateway.load()
        before = self._gateway.current_selection(cfg)

        if scope.picks_context:
            context = self._presenter.choose(
                self._gateway.context_names(cfg),
                before.context if before else None,
                kind="context",
            )
            if context is None:
                return None
            self._gateway.apply(cfg, Selection(context, ""))
        elif before is None:
            raise SelectionError(
                "No current context is set.",
                hint="Run without -N to pick a context first.",
            )
        else:
            context = before.context

        target = self._gateway.current_selection(cfg) or Selection(context, "")

        if scope.picks_namespace:
            namespace = self._presenter.choose(
                self._list_namespaces(context),
                target.namespace,
                kind="namespace",
            )
            if namespace is None:
                return None
            target = Selection(context, namespace)
            self._gateway.apply(cfg, target)

        self._commit(cfg, before)
        return target

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _list_namespaces(self, context: str) -> list[str]:
        if self._namespaces is None:
            raise SelectionError("Namespace listing is not available.")
        return self._namespaces.list_namespaces(context)

    def _read_pair(self, context_key: str, namespace_key: str) -> Selection | None:
        context = self._store.read(context_key)
        namespace = self._store.read(namespace_key)
        if not context or not namespace:
            return None
        return Selection(context, namespace)

    def _switch_to(self, target: Selection) -> None:
        cfg = self._gateway.load()
        before = self._gateway.current_selection(cfg)
        self._gateway.apply(cfg, target)
        self._commit(cfg, before)

    def _commit(self, cfg: ClusterConfig, before: Selection | None) -> None:
        """Persist *cfg*, then remember *before* as the previous selection."""
        self._gateway.persist(cfg)
        if before is None:
            logger.debug("No prior context; previous selection not recorded")
            return
        self._store.write(PREVIOUS_CONTEXT_KEY, before.context)
        self._store.write(PREVIOUS_NAMESPACE_KEY, before.namespace)
        logger.debug("Recorded previous selection %s", before)
