"""namedpaths exception hierarchy.

Shared across the builder, resolver, and template adapter so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class NamedPathError(Exception):
    """Base for all namedpaths errors."""


class ConfigurationError(NamedPathError):
    """Raised when a path registration is invalid.

    Only raised at ``PathBuilder.set()`` time, never during resolution.
    """


@dataclass(frozen=True, slots=True)
class PathNotFound(NamedPathError):  # noqa: N818
    """No path template is registered under *name*.

    Raised by ``PathBuilder.strict_path()``. ``PathBuilder.path()``
    catches it and returns an empty string instead.
    """

    name: str

    def __str__(self) -> str:
        return f"path: no path could be found with the name {self.name!r}"


class InvalidKey(NamedPathError):  # noqa: N818
    """A path segment is not a placeholder.

    Internal control signal for template parsing. Never escapes
    ``path()`` or ``strict_path()``.
    """


class ParamsError(NamedPathError, ValueError):
    """Flattened key/value parameters passed from a template are malformed."""
