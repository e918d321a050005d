"""Route pattern compilation.

A pattern string is compiled once into a tuple of ``Segment``
descriptors. The same tuple drives both ``match`` (path -> params) and
``generate`` (params -> path), so the two stay inverses of each other.

Pattern syntax::

    "/foos"                  -> literal "foos"
    "/foos/:id"              -> literal "foos", named "id"
    "/search/:query/p:num"   -> ..., named "num" with literal prefix "p"
    "/file/*path"            -> literal "file", splat "path"
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from wren.errors import ConfigurationError, GenerationError, MissingParamError

SegmentKind = Literal["literal", "named", "splat"]

_KEY_RE = re.compile(r"\w+")

# Characters that would end the capture early when the URL is parsed back
_NAMED_RESERVED = frozenset("/?#")
_SPLAT_RESERVED = frozenset("?#")


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-separated slot of a compiled pattern.

    Literal: ``text`` is matched verbatim, ``key`` is None.
    Named:   ``text`` is the (possibly empty) literal prefix, ``key`` the capture.
    Splat:   ``key`` is the capture, ``text`` is always empty.
    """

    kind: SegmentKind
    text: str = ""
    key: str | None = None


@dataclass(frozen=True, slots=True)
class Generated:
    """Result of ``CompiledPattern.generate``."""

    path: str
    consumed_keys: frozenset[str]


def split_path(path: str, *, strict_slashes: bool = False) -> list[str]:
    """Split an incoming path into its segments.

    ``""`` and ``"/"`` have no segments. Unless *strict_slashes* is set,
    one trailing ``/`` is ignored.
    """
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return []
    parts = path.split("/")
    if not strict_slashes and parts[-1] == "":
        parts.pop()
    return parts


def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a pattern string into segment descriptors.

    Raises ``ConfigurationError`` for malformed or duplicate capture
    keys and for a splat glued to a literal prefix.
    """
    segments: list[Segment] = []
    seen: set[str] = set()
    for part in pattern.split("/"):
        if not part:
            continue
        if part.startswith("*"):
            segment = Segment(kind="splat", key=part[1:])
        elif "*" in part:
            msg = (
                f"Pattern {pattern!r}: splat captures cannot share a segment "
                f"with literal text ({part!r})"
            )
            raise ConfigurationError(msg)
        elif ":" in part:
            prefix, _, key = part.partition(":")
            segment = Segment(kind="named", text=prefix, key=key)
        else:
            segment = Segment(kind="literal", text=part)

        if segment.key is not None:
            if not _KEY_RE.fullmatch(segment.key):
                msg = f"Pattern {pattern!r}: invalid capture name in {part!r}"
                raise ConfigurationError(msg)
            if segment.key in seen:
                msg = f"Pattern {pattern!r}: duplicate capture name {segment.key!r}"
                raise ConfigurationError(msg)
            seen.add(segment.key)
        segments.append(segment)
    return tuple(segments)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A bidirectional matcher built from a pattern string.

    Usage::

        compiled = compile_pattern("/foos/:id")
        compiled.match("/foos/42")          # {"id": "42"}
        compiled.generate({"id": 42}).path  # "/foos/42"
    """

    pattern: str
    segments: tuple[Segment, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        """Capture keys in pattern order."""
        return tuple(s.key for s in self.segments if s.key is not None)

    def match(self, path: str, *, strict_slashes: bool = False) -> dict[str, str] | None:
        """Return the captured params for *path*, or None if it does not match."""
        parts = split_path(path, strict_slashes=strict_slashes)
        params: dict[str, str] = {}
        if self._match_from(0, parts, 0, params):
            return params
        return None

    def _match_from(
        self,
        index: int,
        parts: list[str],
        position: int,
        params: dict[str, str],
    ) -> bool:
        """Recursively match segments[index:] against parts[position:]."""
        if index == len(self.segments):
            return position == len(parts)

        segment = self.segments[index]
        key = segment.key or ""

        if segment.kind == "splat":
            # Every later segment needs at least one part; take the longest
            # run first and back off until the rest of the pattern fits.
            last = len(parts) - (len(self.segments) - index - 1)
            for end in range(last, position, -1):
                params[key] = "/".join(parts[position:end])
                if self._match_from(index + 1, parts, end, params):
                    return True
            params.pop(key, None)
            return False

        if position == len(parts):
            return False
        part = parts[position]

        if segment.kind == "literal":
            return part == segment.text and self._match_from(
                index + 1, parts, position + 1, params
            )

        prefix = segment.text
        if len(part) <= len(prefix) or not part.startswith(prefix):
            return False
        params[key] = part[len(prefix) :]
        if self._match_from(index + 1, parts, position + 1, params):
            return True
        del params[key]
        return False

    def generate(self, params: Mapping[str, object]) -> Generated:
        """Build a path from *params*.

        Literal segments are emitted verbatim, captures are substituted
        with ``str(value)``. Splat values are inserted unmodified.
        Raises ``GenerationError`` for an empty value or one holding a
        character the path cannot carry (``/`` in a named value, ``?``
        or ``#`` in any value).
        Raises ``MissingParamError`` when a capture key is absent (or None).
        """
        pieces: list[str] = []
        consumed: set[str] = set()
        for segment in self.segments:
            if segment.key is None:
                pieces.append(segment.text)
                continue
            value = params.get(segment.key)
            if value is None:
                raise MissingParamError(segment.key, self.pattern)
            text = str(value)
            if not text:
                msg = f"Pattern {self.pattern!r}: param {segment.key!r} is empty"
                raise GenerationError(msg)
            reserved = _NAMED_RESERVED if segment.kind == "named" else _SPLAT_RESERVED
            bad = sorted(c for c in reserved if c in text)
            if bad:
                msg = (
                    f"Pattern {self.pattern!r}: {segment.kind} param {segment.key!r} "
                    f"cannot contain {', '.join(repr(c) for c in bad)} ({text!r})"
                )
                raise GenerationError(msg)
            pieces.append(segment.text + text)
            consumed.add(segment.key)
        return Generated(path="/" + "/".join(pieces), consumed_keys=frozenset(consumed))


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile *pattern* into a ``CompiledPattern``.

    Raises ``ConfigurationError`` if the pattern is malformed.
    """
    return CompiledPattern(pattern=pattern, segments=parse_pattern(pattern))
