"""Path template parsing.

Templates are ``/``-separated segments. A segment starting with ``:``
is a placeholder; everything else is a literal::

    "/dogs/:id/edit" -> ["", "dogs", ":id", "edit"]
                         literal  literal  placeholder(id)  literal
"""

from dataclasses import dataclass

from namedpaths.errors import InvalidKey

PLACEHOLDER_MARKER = ":"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Literal:      ``dogs``  (is_placeholder=False, key=None)
    Placeholder:  ``:id``   (is_placeholder=True, key="id")
    """

    value: str
    is_placeholder: bool = False
    key: str | None = None


def placeholder_key(segment: str) -> str:
    """Return the placeholder name of *segment*.

    Raises ``InvalidKey`` if the segment is empty or does not start with
    the placeholder marker. A bare ``":"`` is a placeholder with an
    empty name.
    """
    if not segment or not segment.startswith(PLACEHOLDER_MARKER):
        raise InvalidKey(segment)
    return segment[len(PLACEHOLDER_MARKER) :]


def parse_template(template: str) -> list[PathSegment]:
    """Split a template into segments, keeping empty ones.

    Examples::

        "/dogs/"        -> [PathSegment(""), PathSegment("dogs"), PathSegment("")]
        "/dogs/:id"     -> [..., PathSegment(":id", is_placeholder=True, key="id")]
    """
    segments: list[PathSegment] = []
    for part in template.split("/"):
        try:
            key = placeholder_key(part)
        except InvalidKey:
            segments.append(PathSegment(value=part))
            continue
        segments.append(PathSegment(value=part, is_placeholder=True, key=key))
    return segments


def placeholders(template: str) -> tuple[str, ...]:
    """Placeholder names in order of first appearance."""
    seen: dict[str, None] = {}
    for seg in parse_template(template):
        if seg.is_placeholder and seg.key is not None:
            seen.setdefault(seg.key, None)
    return tuple(seen)
