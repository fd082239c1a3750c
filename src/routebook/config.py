"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation and passed
explicitly to the table, router and loader. No module-level state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict_requirements=False)
    """

    # Pattern for placeholders without a requirement: one or more non-slash chars
    default_requirement: str = r"[^/]+"

    # Requirement keys that name no placeholder: error when True, dropped when False
    strict_requirements: bool = True

    # Files read when the loader walks a directory
    file_suffixes: tuple[str, ...] = (".yaml", ".yml")
