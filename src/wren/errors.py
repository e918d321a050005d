"""Wren exception hierarchy.

Shared across the route table, resolver, navigation state and history
reconciler so every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route definition is invalid.

    Always raised at ``define()`` time, never deferred to resolution.
    """


class NavigationError(WrenError):
    """Raised when the router cannot commit or accept navigation.

    Flushing without a current route, flushing before ``start()``,
    or starting a router twice.
    """


class GenerationError(WrenError):
    """Raised when a URL cannot be generated from a pattern and params."""


class MissingParamError(GenerationError, KeyError):
    """A named or splat capture has no value in the params map.

    Signals a route/params mismatch in the caller, not a runtime
    condition worth recovering from.
    """

    def __init__(self, key: str, pattern: str) -> None:
        self.key = key
        self.pattern = pattern
        super().__init__(f"Missing param {key!r} for pattern {pattern!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
