"""Capabilities shared by the field gadgets.

Higher-level circuits are written against these protocols, never against a concrete gadget class. `FpGadget` and
`Fp2Gadget` satisfy them structurally.
"""

from typing import Any, Protocol, Self, TypeVar, runtime_checkable

from src.zkgadgets.constraint_system.constraint_system import ConstraintSystem

T = TypeVar("T", covariant=True)


@runtime_checkable
class Gadget(Protocol[T]):
    """A value paired with its symbolic representation in a constraint system."""

    def value(self) -> T: ...

    @classmethod
    def alloc(cls, cs: ConstraintSystem, value: Any) -> Self: ...

    @classmethod
    def alloc_input(cls, cs: ConstraintSystem, value: Any) -> Self: ...


@runtime_checkable
class FieldGadget(Gadget[T], Protocol[T]):
    """Field arithmetic over gadgets.

    Linear operations are free. `mul`, `square` and `inverse` allocate their result and constrain it;
    `enforce_mul`, `enforce_square` and `enforce_equal` only constrain. `inverse` returns `None` on zero.
    """

    @classmethod
    def zero(cls) -> Self: ...

    @classmethod
    def one(cls) -> Self: ...

    def add(self, other: Self) -> Self: ...

    def sub(self, other: Self) -> Self: ...

    def negate(self) -> Self: ...

    def double(self) -> Self: ...

    def mul_by_constant(self, constant: Any) -> Self: ...

    def mul(self, cs: ConstraintSystem, other: Self) -> Self: ...

    def square(self, cs: ConstraintSystem) -> Self: ...

    def inverse(self, cs: ConstraintSystem) -> Self | None: ...

    def enforce_mul(self, cs: ConstraintSystem, other: Self, result: Self): ...

    def enforce_square(self, cs: ConstraintSystem, result: Self): ...

    def enforce_equal(self, cs: ConstraintSystem, other: Self): ...


@runtime_checkable
class FieldExtensionGadget(FieldGadget[T], Protocol[T]):
    """Field arithmetic over gadgets for an extension of the base field."""

    def frobenius_map(self, power: int) -> Self: ...

    def mul_by_non_residue(self) -> Self: ...

    def conjugate(self) -> Self: ...
