"""Stub text for a whole Python (sub-)module: one ``*.pyi`` file."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from ..stub_type import ImportRef, ModuleImport, TypeImport, import_sort_key, module_import
from .classes import ClassDef, EnumDef
from .functions import FunctionDef
from .members import VariableDef, write_docstring

_HEADER = (
    "# This file is automatically generated by pyistub\n"
    "# ruff: noqa: E501, F401\n"
)


@dataclass
class Module:
    """The definitions of one Python module and how to render them as a stub file."""

    doc: str = ""
    classes: dict[Hashable, ClassDef] = field(default_factory=dict)
    enums: dict[Hashable, EnumDef] = field(default_factory=dict)
    functions: dict[str, list[FunctionDef]] = field(default_factory=dict)
    variables: dict[str, VariableDef] = field(default_factory=dict)
    name: str = ""
    default_module_name: str = ""
    submodules: set[str] = field(default_factory=set)

    def imports(self) -> frozenset[ImportRef]:
        """Imports needed by the classes, enums and functions of the module."""
        imports: set[ImportRef] = set()
        for class_def in self.classes.values():
            imports |= class_def.imports()
        for enum_def in self.enums.values():
            imports |= enum_def.imports()
        for overloads in self.functions.values():
            for function in overloads:
                imports |= function.imports()
        return frozenset(imports)

    def _resolve(self, name: str | None) -> str:
        return self.default_module_name if name is None else name

    def _import_lines(self) -> list[str]:
        imports = set(self.imports())
        if any(len(overloads) > 1 for overloads in self.functions.values()):
            imports.add(module_import("typing"))

        lines: list[str] = []
        grouped: dict[str, list[str]] = {}
        for ref in sorted(imports, key=import_sort_key):
            if isinstance(ref, ModuleImport):
                name = self._resolve(ref.module.get())
                if name != self.name:
                    lines.append(f"import {name}\n")
            elif isinstance(ref, TypeImport):
                module_name = self._resolve(ref.type_ref.module.get())
                if module_name != self.name:
                    grouped.setdefault(module_name, []).append(ref.type_ref.name)
        for module_name in sorted(grouped):
            lines.append(f"from {module_name} import {', '.join(sorted(grouped[module_name]))}\n")
        lines.extend(f"from . import {sub}\n" for sub in sorted(self.submodules))
        return lines

    def __str__(self) -> str:
        parts = [_HEADER]
        if self.doc:
            parts.append(write_docstring(self.doc, ""))
        parts.append("\n")
        parts.extend(self._import_lines())
        parts.append("\n")

        parts.extend(f"{self.variables[name]}\n" for name in sorted(self.variables))
        parts.extend(str(c) for c in sorted(self.classes.values(), key=lambda c: c.name))
        parts.extend(str(e) for e in sorted(self.enums.values(), key=lambda e: e.name))
        for name in sorted(self.functions):
            overloads = self.functions[name]
            overloaded = len(overloads) > 1
            for function in overloads:
                if overloaded:
                    parts.append("@typing.overload\n")
                parts.append(str(function))
        return "".join(parts)