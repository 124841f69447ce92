"""Stub text for classes, structured enums and plain enums."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..stub_type import ImportRef, TypeInfo, module_import
from ..type_info import (
    MethodType,
    PyClassInfo,
    PyComplexEnumInfo,
    PyEnumInfo,
    VariantForm,
    VariantInfo,
)
from .functions import MethodDef
from .members import INDENT, Arg, MemberDef, write_docstring

_ORD_METHODS = ("__lt__", "__le__", "__gt__", "__ge__")

GetterSetter = tuple[MemberDef | None, MemberDef | None]


def variant_methods(
    enum_info: PyComplexEnumInfo, variant: VariantInfo
) -> dict[str, list[MethodDef]]:
    """The constructor and, for tuple variants, the sequence methods of a variant."""
    full_name = f"{enum_info.pyclass_name}.{variant.pyclass_name}"
    methods: dict[str, list[MethodDef]] = {
        "__new__": [
            MethodDef(
                name="__new__",
                args=tuple(Arg.from_info(arg) for arg in variant.constr_args),
                returns=TypeInfo(full_name),
                kind=MethodType.NEW,
            )
        ]
    }
    if variant.form is VariantForm.TUPLE:
        methods["__len__"] = [
            MethodDef(name="__len__", args=(), returns=TypeInfo.builtin("int"))
        ]
        methods["__getitem__"] = [
            MethodDef(
                name="__getitem__",
                args=(Arg("key", TypeInfo.builtin("int")),),
                returns=TypeInfo.any(),
            )
        ]
    return methods


def _dunder(name: str, returns: str, with_other: bool) -> MethodDef:
    args = (Arg("other", TypeInfo.builtin("object")),) if with_other else ()
    return MethodDef(name=name, args=args, returns=TypeInfo.builtin(returns))


@dataclass
class ClassDef:
    """A Python class; members and methods may be merged in after creation."""

    name: str
    doc: str = ""
    attrs: list[MemberDef] = field(default_factory=list)
    getter_setters: dict[str, GetterSetter] = field(default_factory=dict)
    methods: dict[str, list[MethodDef]] = field(default_factory=dict)
    bases: list[TypeInfo] = field(default_factory=list)
    classes: list[ClassDef] = field(default_factory=list)
    match_args: list[str] | None = None
    subclass: bool = False

    @classmethod
    def from_class_info(cls, info: PyClassInfo) -> ClassDef:
        getter_setters: dict[str, GetterSetter] = {
            getter.name: (MemberDef.from_info(getter), None) for getter in info.getters
        }
        for setter in info.setters:
            getter, _ = getter_setters.get(setter.name, (None, None))
            getter_setters[setter.name] = (getter, MemberDef.from_info(setter))
        new = cls(
            name=info.pyclass_name,
            doc=info.doc,
            getter_setters=getter_setters,
            bases=list(info.bases),
            subclass=info.subclass,
        )
        if info.has_eq:
            new._add_method(_dunder("__eq__", "bool", True))
        if info.has_ord:
            for name in _ORD_METHODS:
                new._add_method(_dunder(name, "bool", True))
        if info.has_hash:
            new._add_method(_dunder("__hash__", "int", False))
        if info.has_str:
            new._add_method(_dunder("__str__", "str", False))
        return new

    @classmethod
    def from_complex_enum(cls, info: PyComplexEnumInfo) -> ClassDef:
        return cls(
            name=info.pyclass_name,
            doc=info.doc,
            classes=[cls._from_variant(info, variant) for variant in info.variants],
            subclass=True,
        )

    @classmethod
    def _from_variant(cls, enum_info: PyComplexEnumInfo, variant: VariantInfo) -> ClassDef:
        return cls(
            name=variant.pyclass_name,
            doc=variant.doc,
            getter_setters={f.name: (MemberDef.from_info(f), None) for f in variant.fields},
            methods=variant_methods(enum_info, variant),
            bases=[TypeInfo.unqualified(enum_info.pyclass_name)],
            match_args=[f.name for f in variant.fields],
            subclass=False,
        )

    def _add_method(self, method: MethodDef) -> None:
        self.methods.setdefault(method.name, []).append(method)

    def imports(self) -> frozenset[ImportRef]:
        imports: set[ImportRef] = set()
        if not self.subclass:
            imports.add(module_import("typing"))
        for base in self.bases:
            imports |= base.imports
        for attr in self.attrs:
            imports |= attr.imports()
        for getter, setter in self.getter_setters.values():
            for member in (getter, setter):
                if member is not None:
                    imports |= member.imports()
        for overloads in self.methods.values():
            if len(overloads) > 1:
                imports.add(module_import("typing"))
            for method in overloads:
                imports |= method.imports()
        for nested in self.classes:
            imports |= nested.imports()
        return frozenset(imports)

    def __str__(self) -> str:
        bases = f"({', '.join(base.name for base in self.bases)})" if self.bases else ""
        out = "" if self.subclass else "@typing.final\n"
        out += f"class {self.name}{bases}:\n"
        out += write_docstring(self.doc.strip(), INDENT)
        if self.match_args is not None:
            if self.match_args:
                quoted = ", ".join(f'"{arg}"' for arg in self.match_args)
                out += f"{INDENT}__match_args__ = ({quoted},)\n"
            else:
                out += f"{INDENT}__match_args__ = ()\n"
        out += "".join(str(attr) for attr in self.attrs)
        for getter, setter in self.getter_setters.values():
            if getter is not None:
                out += getter.render_getter()
            if setter is not None:
                out += setter.render_setter()
        for overloads in self.methods.values():
            overloaded = len(overloads) > 1
            for method in overloads:
                if overloaded:
                    out += f"{INDENT}@typing.overload\n"
                out += str(method)
        for nested in self.classes:
            out += "".join(f"{INDENT}{line}\n" for line in str(nested).splitlines())
        if not (self.attrs or self.getter_setters or self.methods):
            out += f"{INDENT}...\n"
        return out + "\n"


@dataclass
class EnumDef:
    """A plain Python enum; members and methods may be merged in after creation."""

    name: str
    doc: str = ""
    variants: tuple[tuple[str, str], ...] = ()
    methods: list[MethodDef] = field(default_factory=list)
    attrs: list[MemberDef] = field(default_factory=list)
    getters: list[MemberDef] = field(default_factory=list)
    setters: list[MemberDef] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: PyEnumInfo) -> EnumDef:
        return cls(name=info.pyclass_name, doc=info.doc, variants=tuple(info.variants))

    def imports(self) -> frozenset[ImportRef]:
        imports: set[ImportRef] = {module_import("typing"), module_import("enum")}
        for method in self.methods:
            imports |= method.imports()
        for member in (*self.attrs, *self.getters, *self.setters):
            imports |= member.imports()
        return frozenset(imports)

    def __str__(self) -> str:
        out = f"@typing.final\nclass {self.name}(enum.Enum):\n"
        out += write_docstring(self.doc, INDENT)
        for variant, variant_doc in self.variants:
            out += f"{INDENT}{variant} = ...\n"
            out += write_docstring(variant_doc, INDENT)
        if self.attrs or self.getters or self.setters or self.methods:
            out += "\n"
            out += "".join(str(attr) for attr in self.attrs)
            out += "".join(getter.render_getter() for getter in self.getters)
            out += "".join(setter.render_setter() for setter in self.setters)
            out += "".join(str(method) for method in self.methods)
        return out + "\n"