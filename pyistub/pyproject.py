"""Reading the ``[tool.maturin]`` settings of a ``pyproject.toml`` file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class PyProjectError(Exception):
    """Raised when a ``pyproject.toml`` file cannot be used."""


@dataclass(frozen=True)
class Maturin:
    """The ``[tool.maturin]`` table."""

    python_source: str | None = None
    module_name: str | None = None


def _optional_str(table: dict[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise PyProjectError(f"tool.maturin.{key} must be a string")
    return value


def _table(parent: dict[str, Any], key: str, where: str) -> dict[str, Any] | None:
    value = parent.get(key)
    if value is not None and not isinstance(value, dict):
        raise PyProjectError(f"{where} must be a table")
    return value


@dataclass(frozen=True)
class PyProject:
    """The parts of ``pyproject.toml`` needed to place stub files."""

    name: str
    maturin: Maturin | None = None
    toml_path: Path = Path()

    @classmethod
    def parse_toml(cls, path: str | Path) -> PyProject:
        """Read and parse a file that must be named ``pyproject.toml``."""
        path = Path(path)
        if path.name != "pyproject.toml":
            raise PyProjectError(f"{path} is not a pyproject.toml")
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            raise PyProjectError(f"{path}: {exc}") from exc

        project = _table(data, "project", "project")
        if project is None:
            raise PyProjectError(f"{path}: missing [project] table")
        name = project.get("name")
        if not isinstance(name, str):
            raise PyProjectError(f"{path}: project.name must be a string")

        maturin = None
        tool = _table(data, "tool", "tool")
        if tool is not None:
            table = _table(tool, "maturin", "tool.maturin")
            if table is not None:
                maturin = Maturin(
                    python_source=_optional_str(table, "python-source"),
                    module_name=_optional_str(table, "module-name"),
                )
        return cls(name=name, maturin=maturin, toml_path=path)

    def module_name(self) -> str:
        """``tool.maturin.module-name`` if set, else ``project.name``."""
        if self.maturin is not None and self.maturin.module_name is not None:
            return self.maturin.module_name
        return self.name

    def python_source(self) -> Path | None:
        """The Python source directory of a mixed project, relative to the file."""
        if self.maturin is None or self.maturin.python_source is None:
            return None
        return self.toml_path.parent / self.maturin.python_source