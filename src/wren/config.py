"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict_slashes=True)
    """

    # Incoming paths that select the default route
    default_paths: tuple[str, ...] = ("", "/")

    # When False, one trailing "/" on an incoming path is ignored
    strict_slashes: bool = False

    # Percent-decode query keys and values ("+" becomes a space)
    decode_query: bool = True
