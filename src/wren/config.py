"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(basepath="/app", initial_pathname="/app/home")
    """

    # Routing
    basepath: str = "/"
    reserved_names: tuple[str, ...] = ("uri", "path")

    # Whether this router owns the page (nested routers set this to False)
    primary: bool = True

    # In-memory history
    initial_pathname: str = "/"
