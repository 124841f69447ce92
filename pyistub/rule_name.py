"""Names of type-checker rules used in ``# type: ignore[...]`` comments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RuleName(StrEnum):
    """Known MyPy error codes and Pyright diagnostic rules."""

    # MyPy error codes
    ATTR_DEFINED = "attr-defined"
    UNION_ATTR = "union-attr"
    NAME_DEFINED = "name-defined"
    USED_BEFORE_DEF = "used-before-def"
    CALL_ARG = "call-arg"
    ARG_TYPE = "arg-type"
    CALL_OVERLOAD = "call-overload"
    VALID_TYPE = "valid-type"
    VAR_ANNOTATED = "var-annotated"
    OVERRIDE = "override"
    RETURN = "return"
    EMPTY_BODY = "empty-body"
    RETURN_VALUE = "return-value"
    ASSIGNMENT = "assignment"
    METHOD_ASSIGN = "method-assign"
    TYPE_VAR = "type-var"
    OPERATOR = "operator"
    INDEX = "index"
    LIST_ITEM = "list-item"
    DICT_ITEM = "dict-item"
    TYPED_DICT_ITEM = "typeddict-item"
    TYPED_DICT_UNKNOWN_KEY = "typeddict-unknown-key"
    HAS_TYPE = "has-type"
    IMPORT = "import"
    IMPORT_NOT_FOUND = "import-not-found"
    IMPORT_UNTYPED = "import-untyped"
    NO_REDEF = "no-redef"
    FUNC_RETURNS_VALUE = "func-returns-value"
    ABSTRACT = "abstract"
    TYPE_ABSTRACT = "type-abstract"
    SAFE_SUPER = "safe-super"
    VALID_NEWTYPE = "valid-newtype"
    EXIT_RETURN = "exit-return"
    NAME_MATCH = "name-match"
    LITERAL_REQUIRED = "literal-required"
    NO_OVERLOAD_IMPL = "no-overload-impl"
    UNUSED_COROUTINE = "unused-coroutine"
    TOP_LEVEL_AWAIT = "top-level-await"
    AWAIT_NOT_ASYNC = "await-not-async"
    ASSERT_TYPE = "assert-type"
    TRUTHY_FUNCTION = "truthy-function"
    STR_FORMAT = "str-format"
    STR_BYTES_SAFE = "str-bytes-safe"
    OVERLOAD_OVERLAP = "overload-overlap"
    OVERLOAD_CANNOT_MATCH = "overload-cannot-match"
    ANNOTATION_UNCHECKED = "annotation-unchecked"
    PROP_DECORATOR = "prop-decorator"
    SYNTAX = "syntax"
    TYPED_DICT_READONLY_MUTATED = "typeddict-readonly-mutated"
    NARROWED_TYPE_NOT_SUBTYPE = "narrowed-type-not-subtype"
    MISC = "misc"

    # MyPy optional error codes
    TYPE_ARG = "type-arg"
    NO_UNTYPED_DEF = "no-untyped-def"
    REDUNDANT_CAST = "redundant-cast"
    REDUNDANT_SELF = "redundant-self"
    COMPARISON_OVERLAP = "comparison-overlap"
    NO_UNTYPED_CALL = "no-untyped-call"
    NO_ANY_RETURN = "no-any-return"
    NO_ANY_UNIMPORTED = "no-any-unimported"
    UNREACHABLE = "unreachable"
    DEPRECATED = "deprecated"
    REDUNDANT_EXPR = "redundant-expr"
    POSSIBLY_UNDEFINED = "possibly-undefined"
    TRUTHY_BOOL = "truthy-bool"
    TRUTHY_ITERABLE = "truthy-iterable"
    IGNORE_WITHOUT_CODE = "ignore-without-code"
    UNUSED_AWAITABLE = "unused-awaitable"
    UNUSED_IGNORE = "unused-ignore"
    EXPLICIT_OVERRIDE = "explicit-override"
    MUTABLE_OVERRIDE = "mutable-override"
    UNIMPORTED_REVEAL = "unimported-reveal"
    EXPLICIT_ANY = "explicit-any"
    EXHAUSTIVE_MATCH = "exhaustive-match"

    # Pyright diagnostic rules
    REPORT_GENERAL_TYPE_ISSUES = "reportGeneralTypeIssues"
    REPORT_PROPERTY_TYPE_MISMATCH = "reportPropertyTypeMismatch"
    REPORT_FUNCTION_MEMBER_ACCESS = "reportFunctionMemberAccess"
    REPORT_MISSING_IMPORTS = "reportMissingImports"
    REPORT_MISSING_MODULE_SOURCE = "reportMissingModuleSource"
    REPORT_INVALID_TYPE_FORM = "reportInvalidTypeForm"
    REPORT_MISSING_TYPE_STUBS = "reportMissingTypeStubs"
    REPORT_IMPORT_CYCLES = "reportImportCycles"
    REPORT_UNUSED_IMPORT = "reportUnusedImport"
    REPORT_UNUSED_CLASS = "reportUnusedClass"
    REPORT_UNUSED_FUNCTION = "reportUnusedFunction"
    REPORT_UNUSED_VARIABLE = "reportUnusedVariable"
    REPORT_DUPLICATE_IMPORT = "reportDuplicateImport"
    REPORT_WILDCARD_IMPORT_FROM_LIBRARY = "reportWildcardImportFromLibrary"
    REPORT_ABSTRACT_USAGE = "reportAbstractUsage"
    REPORT_ARGUMENT_TYPE = "reportArgumentType"
    REPORT_ASSERT_TYPE_FAILURE = "reportAssertTypeFailure"
    REPORT_ASSIGNMENT_TYPE = "reportAssignmentType"
    REPORT_ATTRIBUTE_ACCESS_ISSUE = "reportAttributeAccessIssue"
    REPORT_CALL_ISSUE = "reportCallIssue"
    REPORT_INCONSISTENT_OVERLOAD = "reportInconsistentOverload"
    REPORT_INDEX_ISSUE = "reportIndexIssue"
    REPORT_INVALID_TYPE_ARGUMENTS = "reportInvalidTypeArguments"
    REPORT_INVALID_TYPE_VAR_USE = "reportInvalidTypeVarUse"
    REPORT_MISSING_PARAMETER_TYPE = "reportMissingParameterType"
    REPORT_MISSING_TYPE_ARGUMENT = "reportMissingTypeArgument"
    REPORT_OPERATOR_ISSUE = "reportOperatorIssue"
    REPORT_OPTIONAL_MEMBER_ACCESS = "reportOptionalMemberAccess"
    REPORT_OPTIONAL_SUBSCRIPT = "reportOptionalSubscript"
    REPORT_OPTIONAL_ITERABLE = "reportOptionalIterable"
    REPORT_OPTIONAL_CALL = "reportOptionalCall"
    REPORT_OPTIONAL_OPERAND = "reportOptionalOperand"
    REPORT_OPTIONAL_CONTEXT_MANAGER = "reportOptionalContextManager"
    REPORT_PRIVATE_IMPORT_USAGE = "reportPrivateImportUsage"
    REPORT_PRIVATE_USAGE = "reportPrivateUsage"
    REPORT_REDECLARATION = "reportRedeclaration"
    REPORT_RETURN_TYPE = "reportReturnType"
    REPORT_TYPED_DICT_NOT_REQUIRED_ACCESS = "reportTypedDictNotRequiredAccess"
    REPORT_UNDEFINED_VARIABLE = "reportUndefinedVariable"
    REPORT_UNKNOWN_ARGUMENT_TYPE = "reportUnknownArgumentType"
    REPORT_UNKNOWN_LAMBDA_TYPE = "reportUnknownLambdaType"
    REPORT_UNKNOWN_MEMBER_TYPE = "reportUnknownMemberType"
    REPORT_UNKNOWN_PARAMETER_TYPE = "reportUnknownParameterType"
    REPORT_UNKNOWN_VARIABLE_TYPE = "reportUnknownVariableType"
    REPORT_UNNECESSARY_CAST = "reportUnnecessaryCast"
    REPORT_UNNECESSARY_COMPARISON = "reportUnnecessaryComparison"
    REPORT_UNNECESSARY_CONTAINS = "reportUnnecessaryContains"
    REPORT_UNNECESSARY_IS_INSTANCE = "reportUnnecessaryIsInstance"
    REPORT_UNNECESSARY_TYPE_IGNORE_COMMENT = "reportUnnecessaryTypeIgnoreComment"
    REPORT_UNSUPPORTED_DUNDER_ALL = "reportUnsupportedDunderAll"
    REPORT_UNTYPED_BASE_CLASS = "reportUntypedBaseClass"
    REPORT_UNTYPED_CLASS_DECORATOR = "reportUntypedClassDecorator"
    REPORT_UNTYPED_FUNCTION_DECORATOR = "reportUntypedFunctionDecorator"
    REPORT_UNTYPED_NAMED_TUPLE = "reportUntypedNamedTuple"
    REPORT_INCOMPATIBLE_METHOD_OVERRIDE = "reportIncompatibleMethodOverride"
    REPORT_INCOMPATIBLE_VARIABLE_OVERRIDE = "reportIncompatibleVariableOverride"
    REPORT_INVALID_STRING_ESCAPE_SEQUENCE = "reportInvalidStringEscapeSequence"
    REPORT_MISSING_CALL_ARGUMENT = "reportMissingCallArgument"
    REPORT_UNBOUND_VARIABLE = "reportUnboundVariable"
    REPORT_POSSIBLY_UNBOUND_VARIABLE = "reportPossiblyUnboundVariable"
    REPORT_IMPLICIT_OVERRIDE = "reportImplicitOverride"
    REPORT_INVALID_STUB_STATEMENT = "reportInvalidStubStatement"
    REPORT_INCOMPLETE_STUB = "reportIncompleteStub"
    REPORT_UNUSED_COROUTINE = "reportUnusedCoroutine"
    REPORT_AWAIT_NOT_ASYNC = "reportAwaitNotAsync"
    REPORT_MATCH_NOT_EXHAUSTIVE = "reportMatchNotExhaustive"
    REPORT_SHADOWED_IMPORTS = "reportShadowedImports"
    REPORT_IMPLICIT_STRING_CONCATENATION = "reportImplicitStringConcatenation"
    REPORT_DEPRECATED = "reportDeprecated"
    REPORT_NO_OVERLOAD_IMPLEMENTATION = "reportNoOverloadImplementation"
    REPORT_TYPE_COMMENT_USAGE = "reportTypeCommentUsage"
    REPORT_CONSTANT_REDEFINITION = "reportConstantRedefinition"
    REPORT_INCONSISTENT_CONSTRUCTOR = "reportInconsistentConstructor"
    REPORT_OVERLAPPING_OVERLOAD = "reportOverlappingOverload"
    REPORT_MISSING_SUPER_CALL = "reportMissingSuperCall"
    REPORT_UNINITIALIZED_INSTANCE_VARIABLE = "reportUninitializedInstanceVariable"
    REPORT_CALL_IN_DEFAULT_INITIALIZER = "reportCallInDefaultInitializer"
    REPORT_ASSERT_ALWAYS_TRUE = "reportAssertAlwaysTrue"
    REPORT_SELF_CLS_PARAMETER_NAME = "reportSelfClsParameterName"
    REPORT_UNHASHABLE = "reportUnhashable"
    REPORT_UNUSED_CALL_RESULT = "reportUnusedCallResult"
    REPORT_UNUSED_EXCEPT = "reportUnusedExcept"
    REPORT_UNUSED_EXPRESSION = "reportUnusedExpression"
    REPORT_UNREACHABLE = "reportUnreachable"

    def __str__(self) -> str:
        return self.value

    def is_known(self) -> bool:
        """A member of this enum is always a known rule."""
        return True


@dataclass(frozen=True)
class CustomRule:
    """A rule name that is not among the known rules."""

    name: str

    def __str__(self) -> str:
        return self.name

    def is_known(self) -> bool:
        return False


def parse_rule_name(text: str) -> RuleName | CustomRule:
    """Parse a rule name; unknown names become a :class:`CustomRule`."""
    try:
        return RuleName(text)
    except ValueError:
        return CustomRule(text)