"""Stub text for module-level functions and class methods."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..stub_type import ImportRef, TypeInfo, module_import
from ..type_ignore import IgnoreTarget
from ..type_info import DeprecatedInfo, MethodInfo, MethodType, PyFunctionInfo
from .members import INDENT, Arg, write_docstring


def _collect_imports(
    returns: TypeInfo, args: Iterable[Arg], deprecated: DeprecatedInfo | None
) -> frozenset[ImportRef]:
    imports = returns.imports.union(*(arg.imports() for arg in args))
    if deprecated is not None:
        imports |= {module_import("typing_extensions")}
    return imports


def _tail(doc: str, type_ignored: IgnoreTarget | None, doc_indent: str) -> str:
    """What follows the signature: the ignore comment and the body."""
    comment = type_ignored.comment() if type_ignored is not None else ""
    if doc:
        return f"{comment}\n" + write_docstring(doc, doc_indent)
    return f" ...{comment}\n"


@dataclass(frozen=True)
class FunctionDef:
    """A module-level function definition."""

    name: str
    args: tuple[Arg, ...]
    returns: TypeInfo
    doc: str = ""
    is_async: bool = False
    deprecated: DeprecatedInfo | None = None
    type_ignored: IgnoreTarget | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_info(cls, info: PyFunctionInfo) -> FunctionDef:
        return cls(
            name=info.name,
            args=tuple(Arg.from_info(arg) for arg in info.args),
            returns=info.returns,
            doc=info.doc,
            is_async=info.is_async,
            deprecated=info.deprecated,
            type_ignored=info.type_ignored,
        )

    def imports(self) -> frozenset[ImportRef]:
        return _collect_imports(self.returns, self.args, self.deprecated)

    def __str__(self) -> str:
        out = f"{self.deprecated}\n" if self.deprecated is not None else ""
        prefix = "async " if self.is_async else ""
        params = ", ".join(str(arg) for arg in self.args)
        out += f"{prefix}def {self.name}({params}) -> {self.returns}:"
        out += _tail(self.doc, self.type_ignored, INDENT)
        return out + "\n"


@dataclass(frozen=True)
class MethodDef:
    """A method definition inside a class body."""

    name: str
    args: tuple[Arg, ...]
    returns: TypeInfo
    doc: str = ""
    kind: MethodType = MethodType.INSTANCE
    is_async: bool = False
    deprecated: DeprecatedInfo | None = None
    type_ignored: IgnoreTarget | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_info(cls, info: MethodInfo) -> MethodDef:
        return cls(
            name=info.name,
            args=tuple(Arg.from_info(arg) for arg in info.args),
            returns=info.returns,
            doc=info.doc,
            kind=info.kind,
            is_async=info.is_async,
            deprecated=info.deprecated,
            type_ignored=info.type_ignored,
        )

    def imports(self) -> frozenset[ImportRef]:
        return _collect_imports(self.returns, self.args, self.deprecated)

    def __str__(self) -> str:
        out = f"{INDENT}{self.deprecated}\n" if self.deprecated is not None else ""
        match self.kind:
            case MethodType.STATIC:
                out += f"{INDENT}@staticmethod\n"
                params: list[str] = []
            case MethodType.CLASS:
                out += f"{INDENT}@classmethod\n"
                params = ["cls"]
            case MethodType.NEW:
                # __new__ takes cls without a decorator
                params = ["cls"]
            case _:
                params = ["self"]
        params.extend(str(arg) for arg in self.args)
        prefix = "async " if self.is_async else ""
        out += f"{INDENT}{prefix}def {self.name}({', '.join(params)}) -> {self.returns}:"
        return out + _tail(self.doc, self.type_ignored, INDENT * 2)