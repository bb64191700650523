"""Utility functions written once for every field gadget."""

from functools import reduce

from src.zkgadgets.constraint_system.constraint_system import ConstraintSystem, DivisionByZero
from src.zkgadgets.fields.field_gadget import FieldGadget


def check_same_parameters(x: FieldGadget, y: FieldGadget) -> ValueError | None:
    """Check that `x` and `y` are gadgets of the same field.

    Raises:
        ValueError: If `x` and `y` are instances of different gadget classes.
    """
    if type(x) is not type(y):
        msg = "The gadgets must belong to the same field: "
        msg += f"type(x): {type(x).__name__}, type(y): {type(y).__name__}"
        raise ValueError(msg)


def sum_gadgets(gadgets: list[FieldGadget]) -> FieldGadget:
    """Return the sum of `gadgets`. Free.

    Raises:
        ValueError: If `gadgets` is empty.
    """
    if not gadgets:
        msg = "Cannot sum an empty list of gadgets."
        raise ValueError(msg)
    for gadget in gadgets[1:]:
        check_same_parameters(gadgets[0], gadget)
    return reduce(lambda x, y: x.add(y), gadgets)


def divide(cs: ConstraintSystem, numerator: FieldGadget, denominator: FieldGadget) -> FieldGadget:
    """Return `numerator / denominator`.

    The cost is the cost of one inversion and one multiplication in the field of the gadgets.

    Raises:
        DivisionByZero: If the value of `denominator` is zero.
    """
    check_same_parameters(numerator, denominator)
    with cs.namespace("Division") as ns:
        denominator_inverse = denominator.inverse(ns)
        if denominator_inverse is None:
            msg = "The denominator is zero: "
            msg += f"denominator: {denominator.value()}"
            raise DivisionByZero(msg)
        return numerator.mul(ns, denominator_inverse)


def power(cs: ConstraintSystem, base: FieldGadget, exponent: int) -> FieldGadget:
    """Return `base^exponent` by square-and-multiply.

    The bits of `exponent` are processed from the most significant one. The first bit costs nothing, every following
    bit costs one squaring, and every following set bit one extra multiplication.

    Raises:
        ValueError: If `exponent` is negative.
    """
    if exponent < 0:
        msg = "The exponent must be non-negative: "
        msg += f"exponent: {exponent}"
        raise ValueError(msg)
    if exponent == 0:
        return type(base).one()

    out = base
    with cs.namespace("Exponentiation") as ns:
        for bit in bin(exponent)[3:]:
            out = out.square(ns)
            if bit == "1":
                out = out.mul(ns, base)
    return out
