import pytest

from pyistub.stub_type import (
    ModuleImport,
    ModuleRef,
    StubType,
    TypeImport,
    TypeInfo,
    TypeRef,
    import_sort_key,
    module_import,
)


def test_module_ref_get():
    assert ModuleRef("pathlib").get() == "pathlib"
    assert ModuleRef.default().get() is None
    assert ModuleRef.default() == ModuleRef()


def test_module_import_builds_named_ref():
    assert module_import("typing") == ModuleImport(ModuleRef("typing"))


def test_builtin():
    info = TypeInfo.builtin("int")
    assert info.name == "builtins.int"
    assert info.imports == {module_import("builtins")}
    assert str(info) == "builtins.int"


def test_none_has_no_imports():
    info = TypeInfo.none()
    assert info.name == "None"
    assert info.imports == frozenset()


def test_any():
    info = TypeInfo.any()
    assert info.name == "typing.Any"
    assert info.imports == {module_import("typing")}


def test_unqualified():
    info = TypeInfo.unqualified("Foo")
    assert info.name == "Foo"
    assert len(info.imports) == 0


@pytest.mark.parametrize("module", ["pathlib", ModuleRef("pathlib")])
def test_with_module(module):
    info = TypeInfo.with_module("pathlib.Path", module)
    assert info.name == "pathlib.Path"
    assert info.imports == {ModuleImport(ModuleRef("pathlib"))}


def test_locally_defined():
    info = TypeInfo.locally_defined("A", "submod1")
    assert info.name == "A"
    assert info.imports == {TypeImport(TypeRef(ModuleRef("submod1"), "A"))}


def test_list_set_dict_of():
    int_ = TypeInfo.builtin("int")
    str_ = TypeInfo.builtin("str")
    assert TypeInfo.list_of(int_).name == "builtins.list[builtins.int]"
    assert TypeInfo.set_of(int_).name == "builtins.set[builtins.int]"
    assert TypeInfo.dict_of(int_, str_).name == "builtins.dict[builtins.int, builtins.str]"


def test_list_of_keeps_item_imports():
    item = TypeInfo.any()
    result = TypeInfo.list_of(item)
    assert item.imports <= result.imports
    assert module_import("builtins") in result.imports


def test_or_joins_names_and_imports():
    left = TypeInfo.builtin("str")
    right = TypeInfo.with_module("os.PathLike", "os")
    combined = left | right
    assert combined.name == f"{left.name} | {right.name}"
    assert combined.imports == left.imports | right.imports


def test_type_info_is_hashable_and_equal_by_value():
    infos = {TypeInfo.builtin("int"), TypeInfo.builtin("int")}
    assert len(infos) == 1


def test_imports_accepts_set():
    info = TypeInfo("X", {module_import("a")})
    assert info.imports == frozenset({module_import("a")})


def test_sort_puts_types_before_modules():
    type_ref = TypeImport(TypeRef(ModuleRef("z"), "Z"))
    mod = module_import("a")
    assert sorted([mod, type_ref], key=import_sort_key) == [type_ref, mod]


def test_sort_modules_default_first_then_by_name():
    default = ModuleImport(ModuleRef.default())
    a = module_import("a")
    b = module_import("b")
    assert sorted([b, a, default], key=import_sort_key) == [default, a, b]


def test_sort_types_named_module_before_default():
    named = TypeImport(TypeRef(ModuleRef("m"), "B"))
    default = TypeImport(TypeRef(ModuleRef.default(), "A"))
    other = TypeImport(TypeRef(ModuleRef("m"), "A"))
    assert sorted([default, named, other], key=import_sort_key) == [other, named, default]


def test_type_ref_ordering():
    assert TypeRef(ModuleRef("a"), "Z") < TypeRef(ModuleRef("b"), "A")
    assert TypeRef(ModuleRef("a"), "Z") < TypeRef(ModuleRef.default(), "A")


def test_stub_type_of_uses_same_annotation():
    st = StubType.of(TypeInfo.builtin("int"))
    assert st.input == st.output == TypeInfo.builtin("int")


def test_stub_type_or_combines_both_sides():
    a = StubType(TypeInfo.builtin("int"), TypeInfo.builtin("float"))
    b = StubType.of(TypeInfo.builtin("str"))
    combined = a | b
    assert combined.output == a.output | b.output
    assert combined.input == a.input | b.input