"""kswitch — interactive Kubernetes context and namespace switcher.

Remembers the previous selection and named favorites in a small
per-user state directory.
"""

from kswitch.version import __version__

__all__: list[str] = ["__version__"]
