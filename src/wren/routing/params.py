"""Params map helpers: query-string parsing, merging and encoding.

A params map is a plain ``dict[str, str]``. ``None`` stands for
"undefined": merging a ``None`` value deletes the key.
"""

from collections.abc import Mapping
from urllib.parse import quote, unquote_plus


def parse_search(search: str, *, decode: bool = True) -> dict[str, str]:
    """Parse a query string into a params map.

    Examples::

        "?a=1&b=2"  -> {"a": "1", "b": "2"}
        "flag&x="   -> {"flag": "", "x": ""}
        "a=1&a=2"   -> {"a": "2"}   (last occurrence wins)
    """
    if search.startswith("?"):
        search = search[1:]
    params: dict[str, str] = {}
    for piece in search.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        if decode:
            key, value = unquote_plus(key), unquote_plus(value)
        params[key] = value
    return params


def merge_params(
    current: Mapping[str, str],
    patch: Mapping[str, object | None],
    *,
    replace: bool = False,
) -> dict[str, str]:
    """Return a new params map with *patch* applied to *current*.

    With *replace*, *current* is discarded first. ``None`` values delete
    their key; every other value is stored as ``str(value)``.
    """
    merged: dict[str, str] = {} if replace else dict(current)
    for key, value in patch.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = str(value)
    return merged


def encode_query(
    params: Mapping[str, str],
    exclude: frozenset[str] = frozenset(),
    *,
    encode: bool = True,
) -> str:
    """Serialize *params* as ``k1=v1&k2=v2``, skipping keys in *exclude*.

    With *encode*, keys and values are percent-encoded; without it they
    are written as stored, mirroring ``parse_search(..., decode=False)``.
    Returns ``""`` when nothing is left.
    """
    pairs = ((k, v) for k, v in params.items() if k not in exclude)
    if not encode:
        return "&".join(f"{key}={value}" for key, value in pairs)
    return "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in pairs)

