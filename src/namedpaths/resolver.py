"""Placeholder substitution — turns a template plus parameters into a path.

Pure functions only. No shared state, safe to call from any thread.
"""

from namedpaths.params import Params, encode_query, format_value
from namedpaths.template import parse_template


def replace(template: str, params: Params | None, query: bool) -> str:
    """Substitute *params* into *template*.

    ``params=None`` returns the template untouched. Otherwise each
    placeholder is replaced by its parameter value, or left as its own
    literal text (``:id``) when no value is supplied. With *query* set,
    parameters no placeholder consumed are appended as a query string.

    Examples::

        replace("/dogs/:id", {"id": 123}, query=True)       -> "/dogs/123"
        replace("/dogs/", {"age": 12}, query=True)          -> "/dogs/?age=12"
        replace("/dogs/", {"age": 12}, query=False)         -> "/dogs/"
        replace("/dogs/:id", {}, query=True)                -> "/dogs/:id"
        replace("/dogs/:id", None, query=True)              -> "/dogs/:id"
    """
    if params is None:
        return template

    segments = parse_template(template)

    # Placeholders default to their own text, e.g. :id -> ":id"
    fill: dict[str, object] = {}
    for seg in segments:
        if seg.is_placeholder:
            fill[seg.key] = seg.value
    fill.update(params)

    consumed: dict[str, str] = {}
    parts: list[str] = []
    for seg in segments:
        if not seg.is_placeholder:
            parts.append(seg.value)
            continue
        if seg.key in consumed:
            parts.append(consumed[seg.key])
            continue
        rendered = format_value(fill.pop(seg.key))
        consumed[seg.key] = rendered
        parts.append(rendered)

    base = "/".join(parts)
    if not query or not fill:
        return base
    return f"{base}?{encode_query(fill)}"
