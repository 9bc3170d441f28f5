import pytest

from tagscript.diagnostics import TagScriptError
from tagscript.runtime import Scope, Variable
from tagscript.values import ArrayValue, DataKind, NumberValue, StringValue


def test_declared_variable_starts_unset() -> None:
    scope = Scope()
    variable = scope.declare("x", DataKind.NUMBER)

    assert not variable.is_set
    with pytest.raises(TagScriptError) as excinfo:
        variable.get()
    assert excinfo.value.code == 4016
    assert str(variable) == "number x ?"


def test_assign_then_get_returns_equal_clone() -> None:
    variable = Variable("x", DataKind.NUMBER)
    value = NumberValue(5.0)

    variable.assign(value)

    assert variable.is_set
    assert variable.get() == NumberValue(5.0)
    assert variable.get().format() == value.format()
    assert str(variable) == "number x = 5"


def test_assign_checks_declared_kind() -> None:
    variable = Variable("x", DataKind.NUMBER)

    with pytest.raises(TagScriptError) as excinfo:
        variable.assign(StringValue("5"))

    assert excinfo.value.code == 4002
    assert not variable.is_set


def test_array_assignment_is_a_deep_copy() -> None:
    inner = ArrayValue((NumberValue(1.0),))
    variable = Variable("xs", DataKind.ARRAY)

    variable.assign(ArrayValue((inner,)))
    first, second = variable.get(), variable.get()

    assert first == second
    assert first.items[0] is not second.items[0]  # type: ignore[union-attr]


def test_redeclaration_is_an_error() -> None:
    scope = Scope()
    scope.declare("x", DataKind.NUMBER)

    with pytest.raises(TagScriptError) as excinfo:
        scope.declare("x", DataKind.STRING)

    assert excinfo.value.code == 4006
    assert len(scope) == 1


def test_lookup_is_linear_and_ordered() -> None:
    scope = Scope()
    scope.declare("b", DataKind.STRING)
    scope.declare("a", DataKind.NUMBER)

    assert [variable.name for variable in scope] == ["b", "a"]
    assert scope.lookup("a") is not None
    assert scope.lookup("c") is None
    assert "b" in scope
    assert "c" not in scope


def test_require_missing_variable() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        Scope().require("ghost")

    assert excinfo.value.code == 4007
    assert "ghost" in excinfo.value.diagnostic.info


def test_shared_list_is_visible_to_both_scopes() -> None:
    variables: list[Variable] = []
    outer = Scope(variables)
    inner = Scope(variables)

    inner.declare("x", DataKind.BOOLEAN)

    assert outer.lookup("x") is not None


def test_dump_lists_every_variable() -> None:
    scope = Scope()
    scope.declare("name", DataKind.STRING).assign(StringValue("Ada"))
    scope.declare("age", DataKind.NUMBER)

    assert scope.dump() == "string name = Ada\nnumber age ?"
