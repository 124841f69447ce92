import pytest

from pyistub.generate.functions import FunctionDef, MethodDef
from pyistub.generate.members import INDENT, Arg
from pyistub.stub_type import TypeInfo, module_import
from pyistub.type_ignore import IgnoreTarget
from pyistub.type_info import (
    ArgInfo,
    DeprecatedInfo,
    MethodInfo,
    MethodType,
    PyFunctionInfo,
    SignatureArg,
    SignatureKind,
)


def _method(**kwargs):
    base = dict(name="foo", args=[], returns=TypeInfo.none())
    base.update(kwargs)
    return MethodDef(**base)


def test_method_doc_example():
    method = MethodDef(
        name="foo",
        args=[Arg("x", TypeInfo.builtin("int"))],
        returns=TypeInfo.builtin("int"),
        doc="This is a foo method.",
        kind=MethodType.INSTANCE,
    )
    expected = '''
    def foo(self, x:builtins.int) -> builtins.int:
        r"""
        This is a foo method.
        """
    '''
    assert str(method).strip() == expected.strip()


def test_instance_method_without_doc_has_ellipsis_body():
    text = str(_method())
    assert text.startswith(f"{INDENT}def foo(self)")
    assert text.endswith(" ...\n")
    assert text.count("\n") == 1


@pytest.mark.parametrize(
    "kind, decorator, first_param",
    [
        (MethodType.STATIC, "@staticmethod", None),
        (MethodType.CLASS, "@classmethod", "cls"),
        (MethodType.NEW, None, "cls"),
        (MethodType.INSTANCE, None, "self"),
    ],
)
def test_method_kinds(kind, decorator, first_param):
    lines = str(_method(kind=kind, args=[Arg("x", TypeInfo.builtin("int"))])).splitlines()
    if decorator is None:
        assert len(lines) == 1
    else:
        assert lines[0] == INDENT + decorator
    signature = lines[-1]
    if first_param is None:
        assert f"def foo({Arg('x', TypeInfo.builtin('int'))})" in signature
    else:
        assert f"def foo({first_param}, x:builtins.int)" in signature


def test_async_method():
    assert f"{INDENT}async def foo(self)" in str(_method(is_async=True))


def test_deprecated_method_decorator_and_import():
    dep = DeprecatedInfo(since="1.0", note="old")
    method = _method(deprecated=dep)
    assert str(method).splitlines()[0] == f"{INDENT}{dep}"
    assert module_import("typing_extensions") in method.imports()
    assert module_import("typing_extensions") not in _method().imports()


def test_type_ignore_all_without_doc():
    text = str(_method(type_ignored=IgnoreTarget.all()))
    assert text.endswith(" ...  # type: ignore\n")


def test_type_ignore_with_doc_goes_on_signature_line():
    text = str(_method(doc="Docs.", type_ignored=IgnoreTarget.all()))
    assert text.splitlines()[0].endswith(":  # type: ignore")
    assert "Docs." in text.splitlines()[2]


def test_type_ignore_specified_rules():
    target = IgnoreTarget.specified(["attr-defined", "union-attr"])
    text = str(_method(type_ignored=target))
    assert "# type: ignore[attr-defined,union-attr]" in text


def test_method_imports_union_of_args_and_return():
    method = _method(
        args=[Arg("p", TypeInfo.with_module("pathlib.Path", "pathlib"))],
        returns=TypeInfo.any(),
    )
    assert method.imports() == {module_import("pathlib"), module_import("typing")}


def test_method_from_info():
    info = MethodInfo(
        name="bar",
        args=(ArgInfo("x", TypeInfo.builtin("int")),),
        returns=TypeInfo.builtin("str"),
        doc="d",
        kind=MethodType.STATIC,
        is_async=True,
    )
    method = MethodDef.from_info(info)
    assert method.name == "bar"
    assert method.args == (Arg("x", TypeInfo.builtin("int")),)
    assert method.kind is MethodType.STATIC
    assert method.is_async is True
    assert method.returns == TypeInfo.builtin("str")


def test_function_args_and_blank_line():
    func = FunctionDef(
        name="f",
        args=[
            Arg("args", TypeInfo.any(), SignatureArg(SignatureKind.ARGS)),
            Arg("kwargs", TypeInfo.any(), SignatureArg(SignatureKind.KEYWORDS)),
        ],
        returns=TypeInfo.none(),
    )
    text = str(func)
    assert text.startswith("def f(*args, **kwargs) -> None:")
    assert text.endswith(" ...\n\n")


def test_function_star_and_default():
    func = FunctionDef(
        name="g",
        args=[
            Arg("x", TypeInfo.builtin("int")),
            Arg("_", TypeInfo.none(), SignatureArg(SignatureKind.STAR)),
            Arg("y", TypeInfo.builtin("str"), SignatureArg(SignatureKind.ASSIGN, "'a'")),
        ],
        returns=TypeInfo.none(),
    )
    assert "(x:builtins.int, *, y:builtins.str='a')" in str(func)


def test_function_with_doc_uses_single_indent():
    text = str(FunctionDef(name="f", args=[], returns=TypeInfo.none(), doc="Hello."))
    lines = text.splitlines()
    assert lines[0] == "def f() -> None:"
    assert lines[1] == f'{INDENT}r"""'
    assert lines[2] == f"{INDENT}Hello."
    assert text.endswith('"""\n\n')


def test_function_deprecated_and_async():
    dep = DeprecatedInfo(note="gone")
    func = FunctionDef(name="f", args=[], returns=TypeInfo.none(), is_async=True, deprecated=dep)
    lines = str(func).splitlines()
    assert lines[0] == str(dep)
    assert lines[1].startswith("async def f(")
    assert module_import("typing_extensions") in func.imports()


def test_function_from_info():
    info = PyFunctionInfo(
        name="h",
        args=(ArgInfo("v", TypeInfo.builtin("float")),),
        returns=TypeInfo.builtin("bool"),
        module="pkg",
        type_ignored=IgnoreTarget.all(),
    )
    func = FunctionDef.from_info(info)
    assert func.args == (Arg("v", TypeInfo.builtin("float")),)
    assert func.type_ignored == IgnoreTarget.all()
    assert func.imports() == {module_import("builtins")}