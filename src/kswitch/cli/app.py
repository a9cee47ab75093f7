"""CLI application entry point and command routing for kswitch.

This module is the **sole error boundary** for the entire application.
It catches :class:`~kswitch.exceptions.KswitchError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~kswitch.core.resolver.SelectionResolver`.
* All work runs inside :class:`~kswitch.infra.terminal.TerminalState`
  so the terminal mode is restored on every exit path.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, NoReturn

from kswitch.cli import exit_codes
from kswitch.cli.console import console, escape
from kswitch.core.models import Mode, Scope
from kswitch.exceptions import KswitchError, UsageError
from kswitch.settings import Settings
from kswitch.version import __version__

if TYPE_CHECKING:
    from kswitch.core.resolver import SelectionResolver

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser reporting bad options as :class:`UsageError`."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Without options the user picks a context interactively.
    """
    parser = _ArgumentParser(
        prog="kswitch",
        description="Switch Kubernetes context and namespace interactively.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--current",
        action="store_true",
        help="Print the currently selected context and namespace.",
    )
    parser.add_argument(
        "-p",
        "--previous",
        action="store_true",
        help=(
            "Switch to the previously used context and namespace. "
            "Has no effect if no previous state is stored."
        ),
    )
    parser.add_argument(
        "-n",
        "--namespace",
        action="store_true",
        help="Select a namespace after selecting the context.",
    )
    parser.add_argument(
        "-N",
        "--namespace-only",
        action="store_true",
        help="Only select a namespace for the current context.",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        dest="list_favorites",
        help="List all stored favorites.",
    )
    parser.add_argument(
        "-f",
        "--favorite",
        metavar="NAME",
        default=None,
        help="Switch to a stored favorite.",
    )
    parser.add_argument(
        "-F",
        "--store-favorite",
        metavar="NAME",
        default=None,
        help="Store the current context and namespace as a favorite.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Mode resolution
# ---------------------------------------------------------------------------

def _resolve_mode(args: argparse.Namespace) -> tuple[Mode, Scope]:
    """Map parsed options onto exactly one mode.

    The scope only matters for :attr:`Mode.INTERACTIVE`.

    Raises
    ------
    UsageError
        If more than one mode is requested, or a favorite name is empty.
    """
    for flag, name in (("-f", args.favorite), ("-F", args.store_favorite)):
        if name is not None and not name.strip():
            raise UsageError(f"{flag} needs a non-empty favorite name")

    if args.favorite is not None and args.store_favorite is not None:
        raise UsageError("Can't use -f and -F at the same time")

    requested: list[tuple[str, Mode]] = [
        (flag, mode)
        for flag, mode, given in (
            ("-c", Mode.PRINT_CURRENT, args.current),
            ("-f", Mode.LOAD_FAVORITE, args.favorite is not None),
            ("-F", Mode.STORE_FAVORITE, args.store_favorite is not None),
            ("-p", Mode.SWITCH_PREVIOUS, args.previous),
            ("-l", Mode.LIST_FAVORITES, args.list_favorites),
        )
        if given
    ]

    if args.namespace and args.namespace_only:
        raise UsageError("Can't use -n and -N at the same time")

    if len(requested) > 1:
        flags = " and ".join(flag for flag, _ in requested)
        raise UsageError(f"Can't use {flags} at the same time")

    if requested:
        flag, mode = requested[0]
        if args.namespace or args.namespace_only:
            raise UsageError(f"-n/-N can't be combined with {flag}")
        return mode, Scope.CONTEXT_ONLY

    if args.namespace_only:
        return Mode.INTERACTIVE, Scope.NAMESPACE_ONLY
    if args.namespace:
        return Mode.INTERACTIVE, Scope.CONTEXT_THEN_NAMESPACE
    return Mode.INTERACTIVE, Scope.CONTEXT_ONLY


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_resolver(settings: Settings) -> SelectionResolver:
    """Instantiate infra adapters and the core resolver."""
    from kswitch.cli.picker import questionary_picker
    from kswitch.core.presenter import Presenter
    from kswitch.core.resolver import SelectionResolver
    from kswitch.infra.cluster import KubernetesNamespaceProvider
    from kswitch.infra.file_store import FileKeyValueStore
    from kswitch.infra.kubeconfig import KubeconfigGateway

    store = FileKeyValueStore(settings.state_dir)
    store.ensure_directory()

    return SelectionResolver(
        store=store,
        gateway=KubeconfigGateway(settings.kubeconfig_path),
        presenter=Presenter(questionary_picker),
        namespaces=KubernetesNamespaceProvider(settings.kubeconfig_path),
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _run(mode: Mode, scope: Scope, args: argparse.Namespace, settings: Settings) -> int:
    from kswitch.cli import render

    resolver = _build_resolver(settings)
    logger.debug("Mode %s (scope %s)", mode.value, scope.value)

    if mode is Mode.PRINT_CURRENT:
        render.print_current(resolver.current())
        return exit_codes.SUCCESS

    if mode is Mode.LIST_FAVORITES:
        render.print_favorites(resolver.list_favorites())
        return exit_codes.SUCCESS

    if mode is Mode.STORE_FAVORITE:
        stored = resolver.store_favorite(args.store_favorite)
        render.print_stored(args.store_favorite, stored)
        return exit_codes.SUCCESS

    if mode is Mode.LOAD_FAVORITE:
        render.print_switched(resolver.load_favorite(args.favorite))
        return exit_codes.SUCCESS

    if mode is Mode.SWITCH_PREVIOUS:
        render.print_switched(resolver.switch_previous())
        return exit_codes.SUCCESS

    selection = resolver.interactive_pick(scope)
    if selection is None:
        render.print_cancelled()
        return exit_codes.CANCELLED
    render.print_switched(selection)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the kswitch CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    settings:
        Resolved paths.  When ``None``, built from the environment.

    Returns
    -------
    int
        OS process exit code.
    """
    from kswitch.cli.console import configure_logging
    from kswitch.infra.terminal import TerminalState

    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    mode, scope = _resolve_mode(args)

    if settings is None:
        settings = Settings.from_env()

    with TerminalState():
        return _run(mode, scope, args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        console.print("[dim]Run 'kswitch --help' for usage.[/dim]")
        sys.exit(exit_codes.USAGE_ERROR)
    except KswitchError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
