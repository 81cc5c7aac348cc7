"""Kida template globals for resolving named paths.

Templates call ``path`` with the path name followed by flattened
key/value pairs, keyword parameters, or both::

    <a href="{{ path("show_dog", "id", dog.id) }}">...</a>
    <a href="{{ path("show_dog", id=dog.id, tab="photos") }}">...</a>

With ``per_name=True`` every registered name becomes its own global::

    <a href="{{ show_dog("id", dog.id) }}">...</a>

Resolution is non-strict: an unknown name renders as an empty string.
"""

import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from namedpaths.builder import PathBuilder
from namedpaths.errors import ParamsError

logger = logging.getLogger("namedpaths")

PathFunc = Callable[..., str]


def pairs_to_params(pairs: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any] | None:
    """Merge flattened ``key, value, ...`` pairs and keywords into params.

    Keywords win over pairs with the same key. Returns ``None`` when
    nothing was passed, so the raw template comes back unchanged.
    Raises ``ParamsError`` for an odd number of pair items or a
    non-string key.
    """
    if not pairs and not kwargs:
        return None
    if len(pairs) % 2:
        msg = f"Expected key/value pairs, got an odd number of arguments: {pairs!r}"
        raise ParamsError(msg)
    params: dict[str, Any] = {}
    for key, value in zip(pairs[::2], pairs[1::2], strict=True):
        if not isinstance(key, str):
            msg = f"Path parameter keys must be strings, got {key!r}"
            raise ParamsError(msg)
        params[key] = value
    params.update(kwargs)
    return params


def path_global(builder: PathBuilder) -> PathFunc:
    """Build the ``path(name, *pairs, **params)`` template global."""

    def path(name: str, *pairs: Any, **params: Any) -> str:
        return builder.path(name, pairs_to_params(pairs, params))

    return path


def named_globals(builder: PathBuilder) -> dict[str, PathFunc]:
    """One global per registered name, taking ``*pairs, **params``."""

    def _bind(name: str) -> PathFunc:
        def resolve(*pairs: Any, **params: Any) -> str:
            return builder.path(name, pairs_to_params(pairs, params))

        resolve.__name__ = name
        return resolve

    return {name: _bind(name) for name in builder.names}


def bind_environment(
    env: Environment,
    builder: PathBuilder,
    *,
    global_name: str = "path",
    per_name: bool = False,
) -> Environment:
    """Register path globals on a kida Environment.

    Per-name globals are a snapshot of the names registered at call time
    and are only added for names that are valid identifiers. The
    ``path`` global always sees the builder's current paths.
    """
    env.add_global(global_name, path_global(builder))
    if per_name:
        for name, func in named_globals(builder).items():
            if not name.isidentifier():
                logger.debug("skipping template global for path %r: not an identifier", name)
                continue
            env.add_global(name, func)
    return env
