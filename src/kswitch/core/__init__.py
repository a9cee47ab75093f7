"""Core / service layer — selection logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network, or terminal I/O.
* No imports from ``cli`` or ``infra``.
"""

from kswitch.core.models import ClusterConfig, Favorite, Mode, Scope, Selection
from kswitch.core.presenter import Presenter
from kswitch.core.protocols import ConfigGateway, KeyValueStore, NamespaceProvider, Picker
from kswitch.core.resolver import SelectionResolver

__all__: list[str] = [
    "ClusterConfig",
    "ConfigGateway",
    "Favorite",
    "KeyValueStore",
    "Mode",
    "NamespaceProvider",
    "Picker",
    "Presenter",
    "Scope",
    "Selection",
    "SelectionResolver",
]
