"""Storage configuration for Inkwell.

Describes which persistence backend an editor should use, in a form that can
come from application settings (dicts loaded from TOML, YAML, ...).

Usage:
    from inkwell.config import StorageConfig, create_strategy

    config = StorageConfig.from_dict({"backend": "file", "path": "out.txt"})
    editor = DocumentEditor(create_strategy(config))

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from inkwell.errors import ConfigError

if TYPE_CHECKING:
    from inkwell.protocols import PersistenceStrategy

Backend = Literal["file", "database", "memory"]

BACKENDS: frozenset[str] = frozenset({"file", "database", "memory"})


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Immutable storage configuration.

    Attributes:
        backend: Which strategy to build ("file", "database" or "memory")
        path: Target file (file backend)
        encoding: Text encoding for the file backend; None = platform default
        url: SQLAlchemy database URL (database backend)
        record: Logical record name (database backend)
        table: Table name (database backend)

    """

    backend: Backend = "memory"
    path: str | None = None
    encoding: str | None = None
    url: str | None = None
    record: str = "default"
    table: str = "documents"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "StorageConfig":
        """Create StorageConfig from dictionary.

        Only includes keys that are valid StorageConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = StorageConfig.from_dict({
            ...     "backend": "database",
            ...     "url": "sqlite:///notes.db",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.record
            'default'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def validate(self) -> None:
        """Check that the selected backend has what it needs.

        Raises:
            ConfigError: On an unknown backend or a missing required setting
        """
        if self.backend not in BACKENDS:
            raise ConfigError(
                f"Unknown backend {self.backend!r}; expected one of {sorted(BACKENDS)}"
            )
        if self.backend == "file" and not self.path:
            raise ConfigError("File backend requires 'path'")
        if self.backend == "database":
            if not self.url:
                raise ConfigError("Database backend requires 'url'")
            if not self.record:
                raise ConfigError("Database backend requires a non-empty 'record'")
            if not self.table:
                raise ConfigError("Database backend requires a non-empty 'table'")


def create_strategy(config: StorageConfig) -> PersistenceStrategy:
    """Build the persistence strategy described by ``config``.

    Raises:
        ConfigError: If the configuration is invalid
    """
    config.validate()
    if config.backend == "file":
        from inkwell.persistence.file import FileStrategy

        return FileStrategy(config.path, encoding=config.encoding)
    if config.backend == "database":
        from inkwell.persistence.database import DatabaseStrategy

        return DatabaseStrategy(config.url, record=config.record, table=config.table)
    from inkwell.persistence.memory import MemoryStrategy

    return MemoryStrategy()


__all__ = ["BACKENDS", "Backend", "StorageConfig", "create_strategy"]
