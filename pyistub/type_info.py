"""Descriptions of the Python classes, functions and values to write stubs for."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .stub_type import StubType, TypeInfo
from .type_ignore import IgnoreTarget


@dataclass(frozen=True)
class DeprecatedInfo:
    """Deprecation details of a definition."""

    since: str | None = None
    note: str | None = None

    def __str__(self) -> str:
        match (self.since, self.note):
            case (str(since), str(note)):
                message = f"[Since {since}] {note}"
            case (str(since), None):
                message = f"[Since {since}]"
            case (None, str(note)):
                message = note
            case _:
                message = ""
        return f'@typing_extensions.deprecated("{message}")'


def compare_op_type_input() -> TypeInfo:
    """The argument type of a rich comparison operator."""
    return TypeInfo.builtin("int")


def no_return_type_output() -> TypeInfo:
    """The return type of a function that returns nothing."""
    return TypeInfo.none()


class SignatureKind(Enum):
    """How an argument appears in a signature."""

    IDENT = "ident"
    ASSIGN = "assign"
    STAR = "star"
    ARGS = "args"
    KEYWORDS = "keywords"


@dataclass(frozen=True)
class SignatureArg:
    """The signature form of an argument; ``default`` is used by ``ASSIGN`` only."""

    kind: SignatureKind
    default: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignatureKind.ASSIGN and self.default is None:
            raise ValueError("an assigned argument needs a default")
        if self.kind is not SignatureKind.ASSIGN and self.default is not None:
            raise ValueError(f"a {self.kind.value} argument takes no default")


@dataclass(frozen=True)
class ArgInfo:
    """An argument of a function or method."""

    name: str
    type: TypeInfo
    signature: SignatureArg | None = None


class MethodType(Enum):
    """The kind of a method."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"
    NEW = "new"


@dataclass(frozen=True)
class MethodInfo:
    """A method of a class."""

    name: str
    args: tuple[ArgInfo, ...]
    returns: TypeInfo
    doc: str = ""
    kind: MethodType = MethodType.INSTANCE
    is_async: bool = False
    deprecated: DeprecatedInfo | None = None
    type_ignored: IgnoreTarget | None = None


@dataclass(frozen=True)
class MemberInfo:
    """An attribute, getter or setter of a class."""

    name: str
    type: TypeInfo
    doc: str = ""
    default: str | None = None
    deprecated: DeprecatedInfo | None = None


@dataclass(frozen=True)
class PyMethodsInfo:
    """Members and methods added to the class identified by ``struct_id``."""

    struct_id: Hashable
    attrs: tuple[MemberInfo, ...] = ()
    getters: tuple[MemberInfo, ...] = ()
    setters: tuple[MemberInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()


@dataclass(frozen=True)
class PyClassInfo:
    """A class exposed to Python."""

    struct_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    getters: tuple[MemberInfo, ...] = ()
    setters: tuple[MemberInfo, ...] = ()
    bases: tuple[TypeInfo, ...] = ()
    has_eq: bool = False
    has_ord: bool = False
    has_hash: bool = False
    has_str: bool = False
    subclass: bool = False


class VariantForm(Enum):
    """The shape of a variant of a structured enum."""

    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"


@dataclass(frozen=True)
class VariantInfo:
    """One variant of a structured enum, exposed as a nested class."""

    pyclass_name: str
    form: VariantForm
    module: str | None = None
    doc: str = ""
    fields: tuple[MemberInfo, ...] = ()
    constr_args: tuple[ArgInfo, ...] = ()


@dataclass(frozen=True)
class PyComplexEnumInfo:
    """A structured enum exposed to Python."""

    enum_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    variants: tuple[VariantInfo, ...] = ()


@dataclass(frozen=True)
class PyEnumInfo:
    """A plain enum exposed to Python; variants are (name, doc) pairs."""

    enum_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    variants: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class PyFunctionInfo:
    """A module-level function."""

    name: str
    args: tuple[ArgInfo, ...]
    returns: TypeInfo
    doc: str = ""
    module: str | None = None
    is_async: bool = False
    deprecated: DeprecatedInfo | None = None
    type_ignored: IgnoreTarget | None = None


@dataclass(frozen=True)
class PyVariableInfo:
    """A module-level variable."""

    name: str
    module: str
    type: TypeInfo
    default: str | None = None


@dataclass(frozen=True)
class ModuleDocInfo:
    """The docstring of a module."""

    module: str
    doc: str


_INFO_KINDS = (
    PyMethodsInfo,
    PyClassInfo,
    PyComplexEnumInfo,
    PyEnumInfo,
    PyFunctionInfo,
    PyVariableInfo,
    ModuleDocInfo,
)


@dataclass
class Registry:
    """Collects submitted descriptions, kept in submission order per kind."""

    _entries: dict[type, list[Any]] = field(default_factory=dict)

    def submit(self, info: Any) -> None:
        """Record a description."""
        kind = type(info)
        if kind not in _INFO_KINDS:
            raise TypeError(f"cannot submit {kind.__name__}")
        self._entries.setdefault(kind, []).append(info)

    def items(self, kind: type) -> list[Any]:
        """All submitted descriptions of the given kind."""
        if kind not in _INFO_KINDS:
            raise TypeError(f"{kind.__name__} is not a description kind")
        return list(self._entries.get(kind, ()))


_BUILTIN_EXCEPTIONS = frozenset(
    {
        "ArithmeticError", "AssertionError", "AttributeError", "BaseException",
        "BlockingIOError", "BrokenPipeError", "BufferError", "BytesWarning",
        "ChildProcessError", "ConnectionAbortedError", "ConnectionError",
        "ConnectionRefusedError", "ConnectionResetError", "DeprecationWarning",
        "EOFError", "EncodingWarning", "EnvironmentError", "Exception",
        "FileExistsError", "FileNotFoundError", "FloatingPointError",
        "FutureWarning", "GeneratorExit", "IOError", "ImportError",
        "ImportWarning", "IndexError", "InterruptedError", "IsADirectoryError",
        "KeyError", "KeyboardInterrupt", "LookupError", "MemoryError",
        "ModuleNotFoundError", "NameError", "NotADirectoryError",
        "NotImplementedError", "OSError", "OverflowError",
        "PendingDeprecationWarning", "PermissionError", "ProcessLookupError",
        "RecursionError", "ReferenceError", "ResourceWarning", "RuntimeError",
        "RuntimeWarning", "StopAsyncIteration", "StopIteration", "SyntaxError",
        "SyntaxWarning", "SystemError", "SystemExit", "TimeoutError",
        "TypeError", "UnboundLocalError", "UnicodeDecodeError",
        "UnicodeEncodeError", "UnicodeError", "UnicodeTranslateError",
        "UnicodeWarning", "UserWarning", "ValueError", "Warning",
        "ZeroDivisionError",
    }
)


def builtin_exception(name: str) -> StubType:
    """The stub type of a built-in exception class, e.g. ``ValueError``."""
    if name not in _BUILTIN_EXCEPTIONS:
        raise ValueError(f"{name!r} is not a built-in exception")
    return StubType.of(TypeInfo.builtin(name))


def create_exception(
    registry: Registry, module: str, name: str, base: StubType, doc: str = ""
) -> StubType:
    """Register a custom exception class and return its stub type."""
    registry.submit(
        PyClassInfo(
            struct_id=(module, name),
            pyclass_name=name,
            module=module,
            doc=doc,
            bases=(base.output,),
            subclass=True,
        )
    )
    return StubType.of(TypeInfo.builtin(name))