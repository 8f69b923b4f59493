"""Registry configuration.

Provides a single frozen dataclass that encapsulates the tunable limits of
a TableRegistry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from cldrtables.constants import MAX_TABLE_CACHE_SIZE, MAX_TABLE_SIZE

__all__ = ["RegistryConfig"]


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Immutable configuration for TableRegistry.

    All fields have sensible defaults; ``RegistryConfig()`` with no
    arguments produces a usable configuration.

    Attributes:
        cache_size: Maximum cached tables before least-recently-used
            eviction (default: 128).
        max_table_bytes: Largest table file accepted by the loader
            (default: 10 MB). Larger files raise TableSchemaError.

    Example:
        >>> from cldrtables.tables import TableRegistry
        >>> registry = TableRegistry(config=RegistryConfig(cache_size=16))
        >>> registry.config.cache_size
        16
    """

    cache_size: int = MAX_TABLE_CACHE_SIZE
    max_table_bytes: int = MAX_TABLE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If cache_size or max_table_bytes is not positive.
        """
        if self.cache_size <= 0:
            msg = "cache_size must be positive"
            raise ValueError(msg)
        if self.max_table_bytes <= 0:
            msg = "max_table_bytes must be positive"
            raise ValueError(msg)
