"""Gadget for elements of the base field F_q of a rank-1 constraint system."""

import logging
from functools import cache
from typing import Any, Self

from src.zkgadgets.constraint_system.constraint_system import ConstraintSystem
from src.zkgadgets.constraint_system.linear_combination import LinearCombination

logger = logging.getLogger(__name__)


class FpGadget:
    """Gadget for an element `x` of F_q.

    The gadget pairs the value of `x` with a linear combination of wires which evaluates to `x` on any assignment
    satisfying the constraint system. Linear operations (`add`, `sub`, `negate`, `double`, `mul_by_constant`,
    `add_constant`) recombine linear combinations and are free. `mul`, `square` and `inverse` allocate one wire and
    emit one constraint. No operation mutates its operands.

    Concrete classes are obtained with `fp_gadget_from_base_field`.

    Attributes:
        FIELD: The scalar field F_q (class attribute).
        value_: The value of the gadget.
        lc (LinearCombination): The linear combination evaluating to `value_`.
    """

    FIELD = None

    def __init__(self, value: Any, lc: LinearCombination):
        """Initialise the gadget.

        Args:
            value: The value of the gadget, an element of `FIELD`.
            lc (LinearCombination): The linear combination evaluating to `value`.
        """
        self.value_ = value
        self.lc = lc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value_}, lc={self.lc})"

    def value(self) -> Any:
        """Return the value of the gadget."""
        return self.value_

    @classmethod
    def alloc(cls, cs: ConstraintSystem, value: Any) -> Self:
        """Allocate a private wire holding `value`."""
        with cs.namespace("Fp allocation") as ns:
            variable = ns.alloc("value", value)
        return cls(value, LinearCombination.from_variable(variable, cls.FIELD.identity()))

    @classmethod
    def alloc_input(cls, cs: ConstraintSystem, value: Any) -> Self:
        """Allocate a public input wire holding `value`."""
        with cs.namespace("Fp allocation as input") as ns:
            variable = ns.alloc_input("value", value)
        return cls(value, LinearCombination.from_variable(variable, cls.FIELD.identity()))

    @classmethod
    def zero(cls) -> Self:
        """Return the constant `0`. No wire is allocated."""
        return cls(cls.FIELD.zero(), LinearCombination.zero())

    @classmethod
    def one(cls) -> Self:
        """Return the constant `1`, represented by the constant wire. No wire is allocated."""
        return cls.constant(cls.FIELD.identity())

    @classmethod
    def constant(cls, value: Any) -> Self:
        """Return the constant `value`, represented by a multiple of the constant wire."""
        return cls(value, LinearCombination.from_variable(ConstraintSystem.one(), value))

    def add(self, other: Self) -> Self:
        """Return `self + other`. Free."""
        return type(self)(self.value_ + other.value_, self.lc + other.lc)

    def sub(self, other: Self) -> Self:
        """Return `self - other`. Free."""
        return type(self)(self.value_ - other.value_, self.lc - other.lc)

    def negate(self) -> Self:
        """Return `-self`. Free."""
        return type(self)(-self.value_, -self.lc)

    def double(self) -> Self:
        """Return `2 * self`. Free."""
        return self.add(self)

    def mul_by_constant(self, constant: Any) -> Self:
        """Return `constant * self` for a constant `constant` in F_q. Free."""
        return type(self)(self.value_ * constant, self.lc.scale(constant))

    def add_constant(self, constant: Any) -> Self:
        """Return `self + constant` for a constant `constant` in F_q. Free."""
        return type(self)(self.value_ + constant, self.lc.add_term(constant, ConstraintSystem.one()))

    __add__ = add
    __sub__ = sub
    __neg__ = negate

    def mul(self, cs: ConstraintSystem, other: Self) -> Self:
        """Return `self * other`.

        Allocates the product and enforces `self * other = product`: one wire, one constraint.
        """
        with cs.namespace("Field multiplication") as ns:
            product = type(self).alloc(ns, self.value_ * other.value_)
            ns.enforce("a * b == c", self.lc, other.lc, product.lc)
        return product

    def square(self, cs: ConstraintSystem) -> Self:
        """Return `self^2`.

        Allocates the square and enforces `self * self = square`: one wire, one constraint.
        """
        with cs.namespace("Field squaring") as ns:
            square = type(self).alloc(ns, self.value_ * self.value_)
            ns.enforce("a * a == c", self.lc, self.lc, square.lc)
        return square

    def inverse(self, cs: ConstraintSystem) -> Self | None:
        """Return `self^-1`, or `None` if `self` is zero.

        Allocates the inverse and enforces `self * inverse = 1`: one wire, one constraint. If `self` is zero, nothing
        is allocated nor constrained.
        """
        if self.value_.is_zero():
            logger.debug("Refusing to invert zero")
            return None

        with cs.namespace("Field inversion") as ns:
            inverse = type(self).alloc(ns, self.value_.invert())
            ns.enforce("a * a^-1 == 1", self.lc, inverse.lc, type(self).one().lc)
        return inverse

    def enforce_mul(self, cs: ConstraintSystem, other: Self, result: Self):
        """Enforce `self * other = result`. One constraint, no wire."""
        with cs.namespace("Multiplication check") as ns:
            ns.enforce("a * b == c", self.lc, other.lc, result.lc)

    def enforce_square(self, cs: ConstraintSystem, result: Self):
        """Enforce `self * self = result`. One constraint, no wire."""
        with cs.namespace("Squaring check") as ns:
            ns.enforce("a * a == c", self.lc, self.lc, result.lc)

    def enforce_equal(self, cs: ConstraintSystem, other: Self):
        """Enforce `(self - other) * 1 = 0`. One constraint, no wire."""
        with cs.namespace("Equality check") as ns:
            ns.enforce("(a - b) * 1 == 0", self.lc - other.lc, type(self).one().lc, LinearCombination.zero())


@cache
def fp_gadget_from_base_field(field) -> type[FpGadget]:
    """Return the class of gadgets for elements of `field`.

    Calling the function twice with the same field returns the same class.

    Args:
        field: The scalar field, e.g. `PrimeField(q)`.

    Returns:
        A subclass of `FpGadget` with `FIELD = field`.
    """
    return type("FpGadget", (FpGadget,), {"FIELD": field})
