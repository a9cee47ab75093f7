"""Candidate presentation and validation.

The :class:`Presenter` orders a candidate list, hands it to an injected
:class:`~kswitch.core.protocols.Picker`, and checks that what came back
is one of the candidates.  Pickers with autocompletion accept free
text, so the membership check is not optional.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kswitch.core.ordering import current_first
from kswitch.core.protocols import Picker
from kswitch.exceptions import SelectionError

logger = logging.getLogger(__name__)


class Presenter:
    """Drives one interactive pick.

    Parameters
    ----------
    picker:
        Any callable satisfying the :class:`Picker` protocol.
    """

    def __init__(self, picker: Picker) -> None:
        self._picker: Picker = picker

    @staticmethod
    def order(candidates: Sequence[str], current: str | None) -> list[str]:
        return current_first(candidates, current)

    def present(self, candidates: Sequence[str], *, kind: str = "item") -> str | None:
        """Show *candidates* and return the pick, or ``None`` if cancelled.

        An empty candidate list is treated as a cancellation and the
        picker is never shown.
        """
        if not candidates:
            logger.debug("No %s candidates; treating as cancelled", kind)
            return None
        return self._picker(list(candidates), kind=kind)

    @staticmethod
    def validate(candidates: Sequence[str], chosen: str) -> bool:
        return chosen in candidates

    def choose(
        self,
        candidates: Sequence[str],
        current: str | None,
        *,
        kind: str,
    ) -> str | None:
        """Order, present, and validate in one step.

        Raises
        ------
        SelectionError
            If the picker returned something that is not a candidate.
        """
        ordered = self.order(candidates, current)
        chosen = self.present(ordered, kind=kind)
        if chosen is None:
            return None
        if not self.validate(ordered, chosen):
            raise SelectionError(
                f"'{chosen}' is not a valid {kind} selection",
                hint=f"Pick one of the listed {kind}s.",
            )
        logger.debug("Selected %s %r", kind, chosen)
        return chosen
