import json

import pytest
from elliptic_curves.fields.prime_field import PrimeField

from src.zkgadgets.constraint_system.constraint_system import (
    AssignmentMissing,
    ConstraintSystem,
    Namespace,
    NamespaceError,
    RootConstraintSystem,
    SynthesisError,
    Unsatisfiable,
)
from src.zkgadgets.constraint_system.linear_combination import LinearCombination, Variable, VariableKind
from src.zkgadgets.constraint_system.recording import RecordingConstraintSystem

Fq = PrimeField(13)


def lc(variable):
    return LinearCombination.from_variable(variable, Fq(1))


def test_empty_constraint_system():
    cs = RecordingConstraintSystem(Fq)

    assert cs.num_inputs() == 1
    assert cs.num_aux() == 0
    assert cs.num_constraints() == 0
    assert cs.get("ONE") == Fq(1)
    assert cs.assignment(cs.one()) == Fq(1)
    assert cs.is_satisfied()


def test_alloc_and_enforce():
    cs = RecordingConstraintSystem(Fq)
    x = cs.alloc("x", Fq(3))
    y = cs.alloc_input("y", Fq(4))
    z = cs.alloc("z", Fq(12))
    cs.enforce("x * y == z", lc(x), lc(y), lc(z))

    assert x == Variable(0, VariableKind.AUX)
    assert y == Variable(1, VariableKind.INPUT)
    assert z == Variable(1, VariableKind.AUX)
    assert (cs.num_inputs(), cs.num_aux(), cs.num_constraints()) == (2, 2, 1)
    assert cs.constraint_paths() == ["x * y == z"]
    assert cs.is_satisfied()

    cs.set("z", Fq(11))
    assert cs.which_is_unsatisfied() == "x * y == z"
    with pytest.raises(Unsatisfiable, match="x \\* y == z"):
        cs.check_satisfied()


def test_namespaces_prefix_paths():
    cs = RecordingConstraintSystem(Fq)
    with cs.namespace("outer") as outer:
        outer.alloc("x", Fq(1))
        with outer.namespace("inner") as inner:
            inner.alloc("x", Fq(2))

    assert cs.get("outer/x") == Fq(1)
    assert cs.get("outer/inner/x") == Fq(2)
    assert inner.path == ("outer", "inner")
    assert inner.root is cs


def test_reopened_namespaces_get_fresh_paths():
    cs = RecordingConstraintSystem(Fq)
    for value in range(3):
        with cs.namespace("a") as ns:
            ns.alloc("v", Fq(value))

    assert cs.get("a/v") == Fq(0)
    assert cs.get("a[1]/v") == Fq(1)
    assert cs.get("a[2]/v") == Fq(2)


def test_only_innermost_namespace_is_active():
    cs = RecordingConstraintSystem(Fq)
    with cs.namespace("outer") as outer:
        with outer.namespace("inner") as inner:
            with pytest.raises(NamespaceError):
                outer.alloc("x", Fq(1))
            with pytest.raises(NamespaceError):
                cs.enforce("c", LinearCombination.zero(), LinearCombination.zero(), LinearCombination.zero())
            with pytest.raises(NamespaceError), outer.namespace("sibling"):
                pass
            inner.alloc("x", Fq(1))
        outer.alloc("y", Fq(2))

        # A closed handle is never active again
        with pytest.raises(NamespaceError):
            inner.alloc("z", Fq(3))

    cs.alloc("z", Fq(3))
    assert cs.num_aux() == 3


def test_namespace_is_released_on_exception():
    cs = RecordingConstraintSystem(Fq)
    with pytest.raises(RuntimeError), cs.namespace("failing") as ns:
        ns.alloc("x", Fq(1))
        raise RuntimeError

    cs.alloc("after", Fq(2))
    assert cs.get("failing/x") == Fq(1)
    assert cs.get("after") == Fq(2)


def test_namespace_is_released_on_early_return():
    cs = RecordingConstraintSystem(Fq)

    def alloc_in_namespace(cs):
        with cs.namespace("early") as ns:
            return ns.alloc("x", Fq(1))

    alloc_in_namespace(cs)
    alloc_in_namespace(cs)

    assert cs.get("early[1]/x") == Fq(1)
    cs.alloc("after", Fq(2))


@pytest.mark.parametrize("name", ["", "a/b", "/"])
def test_invalid_namespace_names(name):
    cs = RecordingConstraintSystem(Fq)
    with pytest.raises(NamespaceError), cs.namespace(name):
        pass

    cs.alloc("after", Fq(1))


def test_duplicate_paths_are_rejected():
    cs = RecordingConstraintSystem(Fq)
    x = cs.alloc("x", Fq(1))

    with pytest.raises(SynthesisError, match="already in use"):
        cs.alloc("x", Fq(2))
    with pytest.raises(SynthesisError, match="already in use"):
        cs.enforce("x", lc(x), lc(x), lc(x))
    with pytest.raises(SynthesisError, match="already in use"):
        cs.alloc_input("ONE", Fq(1))


def test_get_and_set_missing_paths():
    cs = RecordingConstraintSystem(Fq)
    x = cs.alloc("x", Fq(1))
    cs.enforce("x * x == x", lc(x), lc(x), lc(x))

    with pytest.raises(AssignmentMissing):
        cs.get("y")
    with pytest.raises(AssignmentMissing):
        cs.get("x * x == x")
    with pytest.raises(AssignmentMissing):
        cs.set("y", Fq(1))
    with pytest.raises(AssignmentMissing):
        cs.set("ONE", Fq(2))


def test_to_json():
    cs = RecordingConstraintSystem(Fq)
    with cs.namespace("square") as ns:
        x = ns.alloc("x", Fq(4))
        y = ns.alloc("y", Fq(3))
        ns.enforce("x * x == y", lc(x), lc(x), lc(y))

    summary = cs.to_json()

    assert summary == {
        "num_inputs": 1,
        "num_aux": 2,
        "num_constraints": 1,
        "constraints": ["square/x * x == y"],
    }
    assert json.loads(json.dumps(summary)) == summary


def test_backend_classes_are_abstract():
    with pytest.raises(TypeError):
        ConstraintSystem()
    with pytest.raises(TypeError):
        RootConstraintSystem()

    assert issubclass(RecordingConstraintSystem, RootConstraintSystem)
    assert not issubclass(Namespace, RootConstraintSystem)
    assert not hasattr(Namespace, "_alloc")
    assert not hasattr(Namespace, "_enforce")


def test_namespace_forwards_to_root():
    cs = RecordingConstraintSystem(Fq)
    with cs.namespace("outer") as outer, outer.namespace("inner") as inner:
        x = inner.alloc("x", Fq(5))

    assert isinstance(inner, ConstraintSystem)
    assert cs.root is cs
    assert outer.root is cs
    assert cs.assignment(x) == Fq(5)
