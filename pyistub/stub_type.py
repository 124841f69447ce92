"""Python type annotations together with the imports they need."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class ModuleRef:
    """A module a type lives in.

    A ``name`` of None stands for the default module of the project, whose
    name is only known when stub files are generated.
    """

    name: str | None = None

    def get(self) -> str | None:
        """The module name, or None for the default module."""
        return self.name

    @classmethod
    def default(cls) -> ModuleRef:
        """The placeholder for the project's default module."""
        return cls(None)

    def _order_key(self) -> tuple[int, str]:
        # Named modules sort before the default module.
        return (0, self.name) if self.name is not None else (1, "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModuleRef):
            return NotImplemented
        return self._order_key() < other._order_key()


@total_ordering
@dataclass(frozen=True)
class TypeRef:
    """A type to import by name from a module (``from module import name``)."""

    module: ModuleRef
    name: str

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TypeRef):
            return NotImplemented
        return (self.module, self.name) < (other.module, other.name)


@dataclass(frozen=True)
class ModuleImport:
    """Import a whole module (``import module``)."""

    module: ModuleRef


@dataclass(frozen=True)
class TypeImport:
    """Import a single type from a module (``from module import Type``)."""

    type_ref: TypeRef


ImportRef = ModuleImport | TypeImport


def module_import(name: str) -> ModuleImport:
    """An import of the named module."""
    return ModuleImport(ModuleRef(name))


def import_sort_key(ref: ImportRef) -> tuple[int, int, str, str]:
    """Sort key placing type imports before module imports.

    Module imports compare by their optional name (the default module first);
    type imports compare by module, then by type name.
    """
    if isinstance(ref, TypeImport):
        flag, module_name = ref.type_ref.module._order_key()
        return (0, flag, module_name, ref.type_ref.name)
    name = ref.module.get()
    if name is None:
        return (1, 0, "", "")
    return (1, 1, name, "")


def _as_module_ref(module: ModuleRef | str) -> ModuleRef:
    return module if isinstance(module, ModuleRef) else ModuleRef(module)


@dataclass(frozen=True)
class TypeInfo:
    """A Python type name and the imports the stub file needs for it."""

    name: str
    imports: frozenset[ImportRef] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "imports", frozenset(self.imports))

    def __str__(self) -> str:
        return self.name

    def __or__(self, other: TypeInfo) -> TypeInfo:
        if not isinstance(other, TypeInfo):
            return NotImplemented
        return TypeInfo(f"{self.name} | {other.name}", self.imports | other.imports)

    @classmethod
    def none(cls) -> TypeInfo:
        """The ``None`` annotation."""
        return cls("None")

    @classmethod
    def any(cls) -> TypeInfo:
        """The ``typing.Any`` annotation."""
        return cls("typing.Any", {module_import("typing")})

    @classmethod
    def list_of(cls, item: TypeInfo) -> TypeInfo:
        """``builtins.list[item]``."""
        return cls(f"builtins.list[{item.name}]", item.imports | {module_import("builtins")})

    @classmethod
    def set_of(cls, item: TypeInfo) -> TypeInfo:
        """``builtins.set[item]``."""
        return cls(f"builtins.set[{item.name}]", item.imports | {module_import("builtins")})

    @classmethod
    def dict_of(cls, key: TypeInfo, value: TypeInfo) -> TypeInfo:
        """``builtins.dict[key, value]``."""
        return cls(
            f"builtins.dict[{key.name}, {value.name}]",
            key.imports | value.imports | {module_import("builtins")},
        )

    @classmethod
    def builtin(cls, name: str) -> TypeInfo:
        """A type from the ``builtins`` module, such as ``int`` or ``dict[str, str]``."""
        return cls(f"builtins.{name}", {module_import("builtins")})

    @classmethod
    def unqualified(cls, name: str) -> TypeInfo:
        """A bare type name needing no import."""
        return cls(name)

    @classmethod
    def with_module(cls, name: str, module: ModuleRef | str) -> TypeInfo:
        """A module-qualified type, e.g. ``pathlib.Path`` from ``pathlib``."""
        return cls(name, {ModuleImport(_as_module_ref(module))})

    @classmethod
    def locally_defined(cls, type_name: str, module: ModuleRef | str) -> TypeInfo:
        """A type defined in one of the project's own modules.

        Within that module it is used as is; elsewhere it is imported by name.
        """
        return cls(type_name, {TypeImport(TypeRef(_as_module_ref(module), type_name))})


@dataclass(frozen=True)
class StubType:
    """The annotations of a value type as a return value and as an argument."""

    output: TypeInfo
    input: TypeInfo

    @classmethod
    def of(cls, output: TypeInfo) -> StubType:
        """A stub type whose argument annotation equals its return annotation."""
        return cls(output, output)

    def __or__(self, other: StubType) -> StubType:
        if not isinstance(other, StubType):
            return NotImplemented
        return StubType(self.output | other.output, self.input | other.input)