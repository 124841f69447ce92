# pyistub

`pyistub` renders the text of Python typing stub files (`*.pyi`). You describe
classes, structured and plain enums, functions, methods, properties and module
variables, together with the type annotations they use. `pyistub` works out
the imports each annotation needs and writes the stub text for a whole module.

It has no dependencies beyond the standard library.

## Install

```
pip install pyistub
```

To run the tests, install the `test` extra and run pytest:

```
pip install "pyistub[test]"
pytest
```

## Type annotations

`pyistub.stub_type.TypeInfo` is an annotation plus the imports it needs:

```python
from pyistub.stub_type import ModuleRef, TypeInfo

TypeInfo.builtin("int")                          # builtins.int, imports builtins
TypeInfo.with_module("pathlib.Path", "pathlib")  # imports pathlib
TypeInfo.locally_defined("A", "pkg.sub")         # from pkg.sub import A (outside pkg.sub)
TypeInfo.list_of(TypeInfo.builtin("str"))        # builtins.list[builtins.str]
TypeInfo.dict_of(TypeInfo.builtin("str"), TypeInfo.any())
TypeInfo.builtin("int") | TypeInfo.none()        # builtins.int | None
```

`ModuleRef.default()` (a `ModuleRef` with no name) stands for the project's
default module; it is resolved when a module is rendered.

`StubType` pairs the annotation used for return values (`output`) with the one
used for arguments (`input`); `StubType.of(t)` uses one annotation for both,
and `|` joins two stub types.

## Describing definitions

`pyistub.type_info` holds frozen records: `PyClassInfo`, `PyMethodsInfo`,
`PyComplexEnumInfo` with its `VariantInfo`s, `PyEnumInfo`, `PyFunctionInfo`,
`MethodInfo`, `MemberInfo`, `ArgInfo` (with an optional `SignatureArg` for
defaults, `*`, `*args` and `**kwargs`), `PyVariableInfo` and `ModuleDocInfo`.
`DeprecatedInfo` renders an `@typing_extensions.deprecated(...)` decorator.

A `Registry` collects records in submission order per kind:
`registry.submit(info)` and `registry.items(PyClassInfo)`.
`create_exception(registry, module, name, base, doc)` registers an exception
class and returns its `StubType`; `builtin_exception("ValueError")` gives the
stub type of a built-in exception.

`pyistub.type_ignore.IgnoreTarget` adds a trailing `# type: ignore` or
`# type: ignore[rule,...]` comment to a function or method. Rule names are
parsed by `pyistub.rule_name.parse_rule_name` into a `RuleName` (MyPy error
codes and Pyright rules) or a `CustomRule`; unknown rules are logged as a
warning.

## Rendering

The `pyistub.generate` sub-package turns records into stub text:

- `generate.members`: `Arg`, `MemberDef` (attribute, `render_getter()`,
  `render_setter()`), `VariableDef` and `write_docstring(doc, indent)`.
- `generate.functions`: `FunctionDef` and `MethodDef`.
- `generate.classes`: `ClassDef` (`from_class_info`, `from_complex_enum`),
  `EnumDef` and `variant_methods`.
- `generate.module`: `Module`, which renders a whole `.pyi` file with its
  header, sorted imports, variables, classes, enums and (overloaded) functions.

```python
from pathlib import Path

from pyistub.generate.classes import ClassDef
from pyistub.generate.functions import FunctionDef
from pyistub.generate.module import Module
from pyistub.stub_type import TypeInfo
from pyistub.type_info import ArgInfo, MemberInfo, PyClassInfo, PyFunctionInfo

cls_info = PyClassInfo(
    struct_id="MyClass",
    pyclass_name="MyClass",
    module="my_module",
    doc="Docstring used in Python",
    getters=(MemberInfo("name", TypeInfo.builtin("str"), doc="Name docstring"),),
)
func_info = PyFunctionInfo(
    name="add",
    args=(ArgInfo("x", TypeInfo.builtin("int")),),
    returns=TypeInfo.builtin("int"),
)

module = Module(name="my_module", default_module_name="my_module")
module.classes[cls_info.struct_id] = ClassDef.from_class_info(cls_info)
module.functions.setdefault(func_info.name, []).append(FunctionDef.from_info(func_info))

Path("my_module.pyi").write_text(str(module))
```

`pyistub.pyproject.PyProject.parse_toml(path)` reads a file named
`pyproject.toml`: `module_name()` gives `tool.maturin.module-name` or
`project.name`, and `python_source()` the `tool.maturin.python-source`
directory relative to the file. Problems raise `PyProjectError`.

## What it does not do

- It does not gather the records in a `Registry` into modules, merge
  `PyMethodsInfo` into their classes, or write files to disk. You build each
  `Module` yourself and write `str(module)` where you want it.
- It has no ready-made stub types for common value types beyond the
  `TypeInfo` constructors above.
- It does not turn Python objects into default-value text; defaults are given
  as strings.
- It has no command-line program.