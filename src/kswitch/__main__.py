"""Allow ``python -m kswitch`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m kswitch`` behaves identically to the ``kswitch`` console
script.
"""

from __future__ import annotations

from kswitch.cli.app import cli

if __name__ == "__main__":
    cli()
