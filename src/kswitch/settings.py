"""Runtime settings resolved once at startup.

The resulting :class:`Settings` object is passed explicitly to every
component that needs a path; nothing else in the package reads the
environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

KUBECONFIG_ENV: str = "KUBECONFIG"
"""Standard kubeconfig override honoured by every Kubernetes client."""

STATE_DIR_ENV: str = "KSWITCH_HOME"
"""Override for the directory holding previous/favorite state files."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Filesystem locations used by a single invocation."""

    kubeconfig_path: Path
    """Kubeconfig file read and rewritten by the tool."""

    state_dir: Path
    """Directory holding one plain-text file per stored key."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        ``KUBECONFIG`` may hold a path list; only its first entry is
        used since the tool rewrites exactly one file.
        """
        env = os.environ if environ is None else environ
        home = Path.home()

        kubeconfig_path = home / ".kube" / "config"
        raw_kubeconfig = env.get(KUBECONFIG_ENV, "")
        entries = [entry for entry in raw_kubeconfig.split(os.pathsep) if entry]
        if entries:
            kubeconfig_path = Path(entries[0]).expanduser()

        state_dir = home / ".kswitch"
        raw_state_dir = env.get(STATE_DIR_ENV, "")
        if raw_state_dir:
            state_dir = Path(raw_state_dir).expanduser()

        return cls(kubeconfig_path=kubeconfig_path, state_dir=state_dir)
