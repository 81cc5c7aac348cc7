"""Parameter value rendering and query-string encoding."""

from collections.abc import Mapping
from typing import TypeAlias
from urllib.parse import urlencode

# Caller-supplied parameters; ``None`` means "no parameters given"
Params: TypeAlias = Mapping[str, object]


def format_value(value: object) -> str:
    """Render a parameter value as path or query text.

    Booleans render lowercase (``true``/``false``), ``None`` renders
    empty, everything else goes through ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(values: Params) -> str:
    """Encode leftover parameters as a canonical query string.

    Keys are sorted so the same parameters always produce the same
    output. Spaces encode as ``+``.

    Example::

        encode_query({"q": "jane doe", "age": 12})  → "age=12&q=jane+doe"

    """
    if not values:
        return ""
    return urlencode(sorted((k, format_value(v)) for k, v in values.items()))
