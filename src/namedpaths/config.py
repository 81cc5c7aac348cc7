"""Path builder configuration.

PathsConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Builder configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PathsConfig(ignore_extra_params=True)
        builder = PathBuilder(config)
    """

    # Drop parameters no placeholder consumes instead of turning them
    # into a query string. Copied onto the builder, which may change it later.
    ignore_extra_params: bool = False

    # Reject templates with an empty placeholder name (a lone ":" segment)
    strict_templates: bool = False
