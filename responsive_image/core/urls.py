"""Default imgix-style URL builder.

The attribute builder treats URL construction as an injected collaborator with
the signature ``build_url(src, options) -> str``. This module provides the
default implementation: options are appended to ``src`` as query parameters,
in insertion order, with imgix short names for the size keys.
"""

from __future__ import annotations

import base64
from typing import Any, Callable, Mapping
from urllib.parse import quote

UrlBuilder = Callable[[str, Mapping[str, Any]], str]

# 1x1 transparent GIF; '//:0' and empty src values are not reliable across browsers
EMPTY_IMAGE_SRC = "data:image/gif;base64,R0lGODlhAQABAAD/ACwAAAAAAQABAAACADs="

PARAM_EXPANSION = {
    "width": "w",
    "height": "h",
}


def format_value(value: Any) -> str:
    """Render a single parameter value as query text (before escaping)."""
    if value is True:
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    return str(value)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple)) and len(value) == 0:
        return True
    return False


def _encode_base64(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def build_url(src: str, options: Mapping[str, Any]) -> str:
    """Append imgix parameters to a source URL.

    Args:
        src: Source URL or path
        options: Parameter map; iterated in insertion order and never mutated

    Returns:
        Final URL, or an empty string when src is empty

    Example:
        >>> build_url("https://assets.imgix.net/a.jpg", {"width": 300, "fit": "crop"})
        'https://assets.imgix.net/a.jpg?w=300&fit=crop'
    """
    if not src:
        return ""

    pairs = []
    for key, value in options.items():
        if _is_empty(value):
            continue
        name = PARAM_EXPANSION.get(key, key)
        text = format_value(value)
        if name.endswith("64"):
            text = _encode_base64(text)
        pairs.append(f"{quote(name, safe='')}={quote(text, safe='')}")

    if not pairs:
        return src
    separator = "&" if "?" in src else "?"
    return src + separator + "&".join(pairs)
