"""Gadget for elements of a quadratic extension F_q^2 = F_q[u] / (u^2 - non_residue)."""

import logging
from typing import Any, Self

from src.zkgadgets.constraint_system.constraint_system import ConstraintSystem
from src.zkgadgets.fields.fp import FpGadget, fp_gadget_from_base_field
from src.zkgadgets.fields.parameters import Fp2Parameters, fp2_inverse, fp2_value

logger = logging.getLogger(__name__)


class Fp2Gadget:
    """Gadget for an element `x = c0 + c1 u` of F_q^2 = F_q[u] / (u^2 - non_residue).

    The coordinates `c0` and `c1` are `FpGadget`s. Linear operations act on them componentwise and are free.
    Multiplication, squaring and inversion follow the Karatsuba-style formulas of "Multiplication and Squaring on
    Pairing-Friendly Fields" (Devegili, OhEigeartaigh, Scott, Dahab), costing respectively 3, 2 and 2 constraints.

    Concrete classes are obtained with `fp2_gadget_from_parameters`.

    Attributes:
        PARAMETERS (Fp2Parameters): The parameters of the extension (class attribute).
        BASE_FIELD_GADGET (type[FpGadget]): The gadget class of the coordinates (class attribute).
        c0 (FpGadget): The first coordinate.
        c1 (FpGadget): The second coordinate.
    """

    PARAMETERS: Fp2Parameters = None
    BASE_FIELD_GADGET: type[FpGadget] = None

    def __init__(self, c0: FpGadget, c1: FpGadget):
        """Initialise the gadget `c0 + c1 u`.

        Args:
            c0 (FpGadget): The first coordinate.
            c1 (FpGadget): The second coordinate.
        """
        self.c0 = c0
        self.c1 = c1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(c0={self.c0}, c1={self.c1})"

    def value(self) -> Any:
        """Return the value of the gadget, as an element of `PARAMETERS.extension_field`."""
        return fp2_value(self.PARAMETERS, self.c0.value(), self.c1.value())

    @classmethod
    def alloc(cls, cs: ConstraintSystem, value: Any) -> Self:
        """Allocate two private wires holding the coordinates of `value`."""
        with cs.namespace("Fp2 allocation") as ns:
            with ns.namespace("c0") as c0_ns:
                c0 = cls.BASE_FIELD_GADGET.alloc(c0_ns, value.x0)
            with ns.namespace("c1") as c1_ns:
                c1 = cls.BASE_FIELD_GADGET.alloc(c1_ns, value.x1)
        return cls(c0, c1)

    @classmethod
    def alloc_input(cls, cs: ConstraintSystem, value: Any) -> Self:
        """Allocate two public input wires holding the coordinates of `value`."""
        with cs.namespace("Fp2 allocation as input") as ns:
            with ns.namespace("c0") as c0_ns:
                c0 = cls.BASE_FIELD_GADGET.alloc_input(c0_ns, value.x0)
            with ns.namespace("c1") as c1_ns:
                c1 = cls.BASE_FIELD_GADGET.alloc_input(c1_ns, value.x1)
        return cls(c0, c1)

    @classmethod
    def zero(cls) -> Self:
        """Return the constant `0`. No wire is allocated."""
        return cls(cls.BASE_FIELD_GADGET.zero(), cls.BASE_FIELD_GADGET.zero())

    @classmethod
    def one(cls) -> Self:
        """Return the constant `1`. No wire is allocated."""
        return cls(cls.BASE_FIELD_GADGET.one(), cls.BASE_FIELD_GADGET.zero())

    @classmethod
    def constant(cls, value: Any) -> Self:
        """Return the constant `value`. No wire is allocated."""
        return cls(cls.BASE_FIELD_GADGET.constant(value.x0), cls.BASE_FIELD_GADGET.constant(value.x1))

    def add(self, other: Self) -> Self:
        """Return `self + other`. Free."""
        return type(self)(self.c0.add(other.c0), self.c1.add(other.c1))

    def sub(self, other: Self) -> Self:
        """Return `self - other`. Free."""
        return type(self)(self.c0.sub(other.c0), self.c1.sub(other.c1))

    def negate(self) -> Self:
        """Return `-self`. Free."""
        return type(self)(self.c0.negate(), self.c1.negate())

    def double(self) -> Self:
        """Return `2 * self`. Free."""
        return type(self)(self.c0.double(), self.c1.double())

    def mul_by_constant(self, constant: Any) -> Self:
        """Return `constant * self` for a constant `constant` in F_q. Free."""
        return type(self)(self.c0.mul_by_constant(constant), self.c1.mul_by_constant(constant))

    def mul_by_fp2_constant(self, constant: Any) -> Self:
        """Return `constant * self` for a constant `constant = k0 + k1 u` in F_q^2. Free.

        The product is `(c0 k0 + non_residue c1 k1) + (c0 k1 + c1 k0) u`.
        """
        k0, k1 = constant.x0, constant.x1
        c0 = self.c0.mul_by_constant(k0).add(self.c1.mul_by_constant(self.PARAMETERS.non_residue * k1))
        c1 = self.c0.mul_by_constant(k1).add(self.c1.mul_by_constant(k0))
        return type(self)(c0, c1)

    def mul_by_non_residue(self) -> Self:
        """Return `u * self = non_residue c1 + c0 u`. Free."""
        return type(self)(self.c1.mul_by_constant(self.PARAMETERS.non_residue), self.c0)

    def conjugate(self) -> Self:
        """Return `c0 - c1 u`. Free."""
        return type(self)(self.c0, self.c1.negate())

    def frobenius_map(self, power: int) -> Self:
        """Return `self^(q^power)`. Free.

        The Frobenius map fixes `c0` and rescales `c1` by the coefficient matching the parity of `power`.
        """
        return type(self)(self.c0, self.c1.mul_by_constant(self.PARAMETERS.frobenius_coefficients[power % 2]))

    __add__ = add
    __sub__ = sub
    __neg__ = negate

    def mul(self, cs: ConstraintSystem, other: Self) -> Self:
        """Return `self * other`.

        The product is computed out of circuit, allocated (two wires) and checked with `enforce_mul` (three
        constraints, one wire).
        """
        with cs.namespace("Fp2 multiplication") as ns:
            product = type(self).alloc(ns, self.value() * other.value())
            self.enforce_mul(ns, other, product)
        return product

    def enforce_mul(self, cs: ConstraintSystem, other: Self, result: Self):
        """Enforce `self * other = result`.

        With `v0 = c0 * other.c0` and `v1 = c1 * other.c1`, the product is
            result.c0 = v0 + non_residue * v1
            result.c1 = (c0 + c1) * (other.c0 + other.c1) - v0 - v1
        which is enforced with three constraints:
            c1 * other.c1 = v1
            c0 * other.c0 = result.c0 - non_residue * v1
            (c0 + c1) * (other.c0 + other.c1) = result.c1 + result.c0 + (1 - non_residue) * v1
        """
        non_residue = self.PARAMETERS.non_residue
        one = self.PARAMETERS.base_field.identity()

        with cs.namespace("Fp2 multiplication check") as ns:
            with ns.namespace("v1") as v1_ns:
                v1 = self.c1.mul(v1_ns, other.c1)

            with ns.namespace("v0") as v0_ns:
                self.c0.enforce_mul(v0_ns, other.c0, result.c0.sub(v1.mul_by_constant(non_residue)))

            with ns.namespace("cross term") as cross_ns:
                self.c0.add(self.c1).enforce_mul(
                    cross_ns,
                    other.c0.add(other.c1),
                    result.c1.add(result.c0).add(v1.mul_by_constant(one - non_residue)),
                )

    def square(self, cs: ConstraintSystem) -> Self:
        """Return `self^2`.

        With `v0 = c0 * c1`, the square is
            result.c0 = (c0 + c1) * (c0 + non_residue * c1) - (1 + non_residue) * v0
            result.c1 = 2 * v0
        which costs two constraints and two wires.
        """
        non_residue = self.PARAMETERS.non_residue
        one = self.PARAMETERS.base_field.identity()

        with cs.namespace("Fp2 squaring") as ns:
            with ns.namespace("v0") as v0_ns:
                v0 = self.c0.mul(v0_ns, self.c1)

            with ns.namespace("c0") as c0_ns:
                a0_plus_a1 = self.c0.add(self.c1)
                a0_plus_non_residue_a1 = self.c0.add(self.c1.mul_by_constant(non_residue))
                c0 = a0_plus_a1.mul(c0_ns, a0_plus_non_residue_a1).sub(v0.mul_by_constant(one + non_residue))

        return type(self)(c0, v0.double())

    def enforce_square(self, cs: ConstraintSystem, result: Self):
        """Enforce `self^2 = result`.

        Enforced with two constraints, without allocating:
            (2 * c0) * c1 = result.c1
            (c0 + c1) * (c0 + non_residue * c1) = result.c0 + (1 + non_residue) / 2 * result.c1

        Note:
            The check requires the characteristic of the base field to be odd.
        """
        non_residue = self.PARAMETERS.non_residue
        one = self.PARAMETERS.base_field.identity()
        half = (one + one).invert()

        with cs.namespace("Fp2 squaring check") as ns:
            with ns.namespace("c1") as c1_ns:
                self.c0.double().enforce_mul(c1_ns, self.c1, result.c1)

            with ns.namespace("c0") as c0_ns:
                self.c0.add(self.c1).enforce_mul(
                    c0_ns,
                    self.c0.add(self.c1.mul_by_constant(non_residue)),
                    result.c0.add(result.c1.mul_by_constant((one + non_residue) * half)),
                )

    def inverse(self, cs: ConstraintSystem) -> Self | None:
        """Return `self^-1`, or `None` if `self` is zero.

        The inverse `b` is computed out of circuit, allocated (two wires), and checked against the Karatsuba identity
        of `self * b = 1`: the coordinate `c1` of the product vanishes iff `v0 + v1 = (c0 + c1) * (b.c0 + b.c1)`,
        and `v0 = 1 - non_residue * v1` when the coordinate `c0` is `1`. Enforced with two constraints:
            c1 * b.c1 = v1
            (c0 + c1) * (b.c0 + b.c1) = 1 + (1 - non_residue) * v1
        If `self` is zero, nothing is allocated nor constrained.

        Note:
            The two constraints leave one degree of freedom in the witness: for any `b.c1`, a prover can pick `b.c0`
            so that both hold, and `b` need not be the inverse of `self`. Circuits which rely on `b` being the
            inverse must also call `self.enforce_mul(cs, b, type(self).one())`.
        """
        inverse_value = fp2_inverse(self.PARAMETERS, self.value())
        if inverse_value is None:
            logger.debug("Refusing to invert zero")
            return None

        non_residue = self.PARAMETERS.non_residue
        one = self.PARAMETERS.base_field.identity()

        with cs.namespace("Fp2 inversion") as ns:
            inverse = type(self).alloc(ns, inverse_value)

            with ns.namespace("v1") as v1_ns:
                v1 = self.c1.mul(v1_ns, inverse.c1)

            with ns.namespace("cross term") as cross_ns:
                self.c0.add(self.c1).enforce_mul(
                    cross_ns,
                    inverse.c0.add(inverse.c1),
                    v1.mul_by_constant(one - non_residue).add(self.BASE_FIELD_GADGET.one()),
                )

        return inverse

    def mul_by_fp(self, cs: ConstraintSystem, fp: FpGadget) -> Self:
        """Return `fp * self` for a gadget `fp` in F_q. Two constraints, two wires."""
        with cs.namespace("Fp2 multiplication by Fp") as ns:
            with ns.namespace("c0") as c0_ns:
                c0 = self.c0.mul(c0_ns, fp)
            with ns.namespace("c1") as c1_ns:
                c1 = self.c1.mul(c1_ns, fp)
        return type(self)(c0, c1)

    def enforce_equal(self, cs: ConstraintSystem, other: Self):
        """Enforce `self = other`. Two constraints, no wire."""
        with cs.namespace("Fp2 equality check") as ns:
            self.c0.enforce_equal(ns, other.c0)
            self.c1.enforce_equal(ns, other.c1)


_gadget_classes: dict[int, tuple[Fp2Parameters, type[Fp2Gadget]]] = {}


def fp2_gadget_from_parameters(parameters: Fp2Parameters) -> type[Fp2Gadget]:
    """Return the class of gadgets for elements of the quadratic extension defined by `parameters`.

    Calling the function twice with the same parameters object returns the same class.

    Args:
        parameters (Fp2Parameters): The parameters of F_q^2.

    Returns:
        A subclass of `Fp2Gadget` with `PARAMETERS = parameters`.
    """
    # Keyed by identity: the field elements in `parameters` need not be hashable. The stored parameters keep the
    # key alive.
    if id(parameters) not in _gadget_classes:
        gadget_class = type(
            "Fp2Gadget",
            (Fp2Gadget,),
            {"PARAMETERS": parameters, "BASE_FIELD_GADGET": fp_gadget_from_base_field(parameters.base_field)},
        )
        _gadget_classes[id(parameters)] = (parameters, gadget_class)
    return _gadget_classes[id(parameters)][1]
