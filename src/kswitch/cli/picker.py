"""Interactive picker for the CLI layer.

Wraps ``questionary.autocomplete`` so that it satisfies the
:class:`~kswitch.core.protocols.Picker` protocol: candidates in, the
typed or completed text out, ``None`` on Ctrl+C / Esc.

Autocomplete accepts free text, so callers must validate the result
(see :meth:`~kswitch.core.presenter.Presenter.choose`).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kswitch.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_message(kind: str, count: int) -> str:
    """Build the prompt line, e.g. ``"Select context (3):"``."""
    return f"Select {kind} ({count}):"


def questionary_picker(candidates: Sequence[str], *, kind: str) -> str | None:
    """Prompt for one of *candidates* with fuzzy-ish completion.

    The first candidate (the current value) is offered as the default
    so that pressing Enter keeps the current selection.
    """
    questionary = _import_questionary()

    answer: str | None = questionary.autocomplete(
        _build_message(kind, len(candidates)),
        choices=list(candidates),
        default=candidates[0] if candidates else "",
        match_middle=True,
        ignore_case=True,
        qmark="⎈",
    ).ask()  # Returns None on Ctrl+C / Esc

    if answer is None:
        return None
    return answer.strip()
