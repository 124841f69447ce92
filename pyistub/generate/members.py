"""Stub text for docstrings, arguments, class members and module variables."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..stub_type import ImportRef, TypeInfo, module_import
from ..type_info import (
    ArgInfo,
    DeprecatedInfo,
    MemberInfo,
    PyVariableInfo,
    SignatureArg,
    SignatureKind,
)

_log = logging.getLogger(__name__)

INDENT = "    "


def write_docstring(doc: str, indent: str) -> str:
    """A raw docstring block at the given indent, or ``""`` for an empty doc."""
    doc = doc.strip()
    if not doc:
        return ""
    body = "".join(f"{indent}{line.rstrip(chr(13))}\n" for line in doc.split("\n"))
    return f'{indent}r"""\n{body}{indent}"""\n'


@dataclass(frozen=True)
class Arg:
    """An argument in a function or method signature."""

    name: str
    type: TypeInfo
    signature: SignatureArg | None = None

    @classmethod
    def from_info(cls, info: ArgInfo) -> Arg:
        return cls(info.name, info.type, info.signature)

    def imports(self) -> frozenset[ImportRef]:
        return self.type.imports

    def __str__(self) -> str:
        kind = self.signature.kind if self.signature is not None else SignatureKind.IDENT
        match kind:
            case SignatureKind.ASSIGN:
                return f"{self.name}:{self.type}={self.signature.default}"
            case SignatureKind.STAR:
                return "*"
            case SignatureKind.ARGS:
                return f"*{self.name}"
            case SignatureKind.KEYWORDS:
                return f"**{self.name}"
            case _:
                return f"{self.name}:{self.type}"


@dataclass(frozen=True)
class MemberDef:
    """A class attribute, or a property getter or setter."""

    name: str
    type: TypeInfo
    doc: str = ""
    default: str | None = None
    deprecated: DeprecatedInfo | None = None

    @classmethod
    def from_info(cls, info: MemberInfo) -> MemberDef:
        return cls(info.name, info.type, info.doc, info.default, info.deprecated)

    def imports(self) -> frozenset[ImportRef]:
        if self.deprecated is not None:
            return self.type.imports | {module_import("typing_extensions")}
        return self.type.imports

    def __str__(self) -> str:
        if self.deprecated is not None:
            _log.warning(
                "Ignoring #[deprecated] on constant '%s': Python constants cannot "
                "have decorators. Consider using a function instead if deprecation "
                "is needed.",
                self.name,
            )
        line = f"{INDENT}{self.name}: {self.type}"
        if self.default is not None:
            line += f" = {self.default}"
        return f"{line}\n" + write_docstring(self.doc, INDENT)

    def _property_doc(self) -> str:
        if self.default is None or self.default == "...":
            return self.doc
        return f"{self.doc}\n```python\ndefault = {self.default}\n```"

    def _body(self) -> str:
        doc = self._property_doc()
        if doc:
            return "\n" + write_docstring(doc, INDENT * 2)
        return " ...\n"

    def render_getter(self) -> str:
        """The member as a ``@property`` getter."""
        out = ""
        if self.deprecated is not None:
            out += f"{INDENT}{self.deprecated}\n"
        out += f"{INDENT}@property\n{INDENT}def {self.name}(self) -> {self.type}:"
        return out + self._body()

    def render_setter(self) -> str:
        """The member as a property setter."""
        out = f"{INDENT}@{self.name}.setter\n"
        if self.deprecated is not None:
            out += f"{INDENT}{self.deprecated}\n"
        out += f"{INDENT}def {self.name}(self, value: {self.type}) -> None:"
        return out + self._body()


@dataclass(frozen=True)
class VariableDef:
    """A module-level variable declaration."""

    name: str
    type: TypeInfo
    default: str | None = None

    @classmethod
    def from_info(cls, info: PyVariableInfo) -> VariableDef:
        return cls(info.name, info.type, info.default)

    def __str__(self) -> str:
        if self.default is None:
            return f"{self.name}: {self.type}"
        return f"{self.name}: {self.type} = {self.default}"