"""namedpaths — named URL path templates, resolved on demand.

Register a logical name for a path template once, then build concrete
paths from it anywhere. Not a router: no matching, no dispatch.

Basic usage::

    from namedpaths import PathBuilder

    paths = PathBuilder()
    paths.set("edit_dog", "/dogs/:id/edit")

    paths.path("edit_dog", {"id": 7})                 # "/dogs/7/edit"
    paths.path("edit_dog", {"id": 7, "next": "/"})    # "/dogs/7/edit?next=%2F"
    paths.path("missing", {"id": 7})                  # ""
    paths.strict_path("missing", {"id": 7})           # raises PathNotFound

Template globals (kida)::

    from namedpaths.templating import bind_environment
    bind_environment(env, paths)
    # {{ path("edit_dog", "id", dog.id) }}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "NamedPathError",
    "ParamsError",
    "PathBuilder",
    "PathNotFound",
    "PathsConfig",
    "bind_environment",
    "default_builder",
    "path",
    "replace",
    "set_path",
    "strict_path",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "namedpaths.errors",
    "NamedPathError": "namedpaths.errors",
    "ParamsError": "namedpaths.errors",
    "PathNotFound": "namedpaths.errors",
    "PathBuilder": "namedpaths.builder",
    "default_builder": "namedpaths.builder",
    "path": "namedpaths.builder",
    "set_path": "namedpaths.builder",
    "strict_path": "namedpaths.builder",
    "PathsConfig": "namedpaths.config",
    "replace": "namedpaths.resolver",
    "bind_environment": "namedpaths.templating",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import namedpaths`` from pulling in kida unless the template
    adapter is actually used.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    import importlib

    return getattr(importlib.import_module(module_name), name)
