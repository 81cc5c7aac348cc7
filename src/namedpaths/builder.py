"""Named path registry.

Paths are registered by name during setup and resolved by name later,
with parameters substituted into their placeholders::

    paths = PathBuilder()
    paths.set("show_dog", "/dogs/:id")
    paths.path("show_dog", {"id": 123})           # "/dogs/123"
    paths.path("show_dog", {"id": 1, "tab": "x"}) # "/dogs/1?tab=x"

Free-threading safety:
    - A single Lock guards every read and write of the name -> template map
    - Resolution runs outside the lock (the resolver holds no state)
    - ``ignore_extra_params`` is read at resolution time, not snapshotted
"""

import logging
import threading
from collections.abc import Iterable, Mapping

from namedpaths.config import PathsConfig
from namedpaths.errors import ConfigurationError, PathNotFound
from namedpaths.params import Params
from namedpaths.resolver import replace
from namedpaths.template import placeholders as _template_placeholders

logger = logging.getLogger("namedpaths")


class PathBuilder:
    """Thread-safe name -> path template registry.

    ``ignore_extra_params`` controls what happens to parameters that no
    placeholder consumes. False (the default) turns them into URL query
    parameters, so ``{"name": "jane doe"}`` against ``/blah`` yields
    ``/blah?name=jane+doe``. True drops them and yields ``/blah``.
    """

    __slots__ = ("_lock", "_paths", "config", "ignore_extra_params")

    def __init__(
        self,
        config: PathsConfig | None = None,
        *,
        ignore_extra_params: bool | None = None,
    ) -> None:
        self.config = config or PathsConfig()
        self.ignore_extra_params = (
            self.config.ignore_extra_params
            if ignore_extra_params is None
            else ignore_extra_params
        )
        self._paths: dict[str, str] = {}
        self._lock = threading.Lock()

    def set(self, name: str, template: str) -> None:
        """Register *template* under *name*, replacing any previous one."""
        self._check(name, template)
        with self._lock:
            previous = self._paths.get(name)
            self._paths[name] = template
        if previous is not None and previous != template:
            logger.debug("overwrote path %r: %r -> %r", name, previous, template)
        else:
            logger.debug("registered path %r -> %r", name, template)

    def update(self, paths: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        """Register many paths at once, under a single lock acquisition."""
        items = list(paths.items() if isinstance(paths, Mapping) else paths)
        for name, template in items:
            self._check(name, template)
        with self._lock:
            self._paths.update(items)
        logger.debug("registered %d paths", len(items))

    def path(self, name: str, params: Params | None = None) -> str:
        """Resolve a named path, or return ``""`` if *name* is unknown.

        For callers that cannot handle an exception, such as inline
        template rendering, where a visibly empty href beats a crash.
        """
        try:
            return self.strict_path(name, params)
        except PathNotFound:
            logger.debug("no path named %r, resolving to empty string", name)
            return ""

    def strict_path(self, name: str, params: Params | None = None) -> str:
        """Resolve a named path.

        Raises ``PathNotFound`` if no template is registered under *name*.
        """
        template = self.template(name)
        return replace(template, params, not self.ignore_extra_params)

    def template(self, name: str) -> str:
        """Return the raw template registered under *name*.

        Raises ``PathNotFound`` if there is none.
        """
        with self._lock:
            try:
                return self._paths[name]
            except KeyError:
                raise PathNotFound(name) from None

    def placeholders(self, name: str) -> tuple[str, ...]:
        """Placeholder names of the template registered under *name*."""
        return _template_placeholders(self.template(name))

    @property
    def names(self) -> tuple[str, ...]:
        """Sorted snapshot of every registered name."""
        with self._lock:
            return tuple(sorted(self._paths))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def __repr__(self) -> str:
        return f"PathBuilder({len(self)} paths, ignore_extra_params={self.ignore_extra_params})"

    def _check(self, name: str, template: str) -> None:
        if self.config.strict_templates and "" in _template_placeholders(template):
            msg = (
                f"Path {name!r} has a placeholder with no name: {template!r}. "
                "Placeholders look like ':id'."
            )
            raise ConfigurationError(msg)


# Process-wide builder for code that wants a single shared registry
default_builder = PathBuilder()


def set_path(name: str, template: str) -> None:
    """Register a path on the default builder."""
    default_builder.set(name, template)


def path(name: str, params: Params | None = None) -> str:
    """Resolve a path on the default builder, ``""`` if unknown."""
    return default_builder.path(name, params)


def strict_path(name: str, params: Params | None = None) -> str:
    """Resolve a path on the default builder, raising ``PathNotFound`` if unknown."""
    return default_builder.strict_path(name, params)
