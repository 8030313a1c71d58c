"""Locating the configuration file, choosing datasources and caching connections."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

_MAX_DEPTH = 2


class DatasourceNotFoundError(LookupError):
    """Raised when no datasource or connection matches the requested name."""


def _walk(directory: Path, depth: int) -> Iterator[Path]:
    """Yield entries below ``directory`` depth first, in name order."""
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError:
        return
    for entry in entries:
        yield entry
        if depth < _MAX_DEPTH and entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry, depth + 1)


def _is_config_file(path: Path) -> bool:
    name = path.name
    return (
        name.startswith("canyon")
        and name.endswith(".toml")
        and path.is_file()
        and not path.is_symlink()
    )


def find_config_file(root: str | os.PathLike[str] = ".") -> Path:
    """Find the first ``canyon*.toml`` file at most two levels below ``root``.

    Raises FileNotFoundError when there is none.
    """
    base = Path(root)
    if _is_config_file(base):
        return base
    for entry in _walk(base, 1):
        if _is_config_file(entry):
            return entry
    raise FileNotFoundError(f"no canyon*.toml configuration file found under {base}")


def get_database_config(datasource_name: str, datasources: Sequence[Any]) -> Any:
    """Return the datasource called ``datasource_name``.

    An empty name selects the first datasource. Each datasource is expected
    to carry a ``name`` attribute.
    """
    if not datasource_name:
        if not datasources:
            raise DatasourceNotFoundError("no datasource is configured")
        return datasources[0]
    for datasource in datasources:
        if datasource.name == datasource_name:
            return datasource
    raise DatasourceNotFoundError(f"datasource not found: {datasource_name}")


class ConnectionCache:
    """Open database connections kept by datasource name, in insertion order.

    Looking up the empty name returns the connection of the default
    datasource: ``default_datasource`` when given, otherwise the first one
    inserted.
    """

    def __init__(self, default_datasource: str | None = None) -> None:
        self.default_datasource = default_datasource
        self._connections: dict[str, Any] = {}

    def insert(self, name: str, connection: Any) -> None:
        """Store ``connection`` under ``name``, replacing any previous one."""
        self._connections[name] = connection

    def get(self, datasource_name: str) -> Any:
        """Return the cached connection for ``datasource_name``."""
        if not datasource_name:
            name = self.default_datasource
            if name is None:
                name = next(iter(self._connections), None)
            if name is None or name not in self._connections:
                raise DatasourceNotFoundError(
                    "no default datasource found, check the canyon.toml file"
                )
            return self._connections[name]
        try:
            return self._connections[datasource_name]
        except KeyError:
            raise DatasourceNotFoundError(
                f"no cached connection for the datasource: {datasource_name}"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._connections

    def __iter__(self) -> Iterator[str]:
        return iter(self._connections)

    def __len__(self) -> int:
        return len(self._connections)