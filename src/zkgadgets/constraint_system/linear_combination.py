"""Variables and linear combinations over the wires of a rank-1 constraint system."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Self


class VariableKind(Enum):
    """Kind of wire in the constraint system."""

    INPUT = "input"
    AUX = "aux"


@dataclass(frozen=True)
class Variable:
    """A wire in the constraint system.

    Attributes:
        index (int): The index of the wire among the wires of the same kind.
        kind (VariableKind): Whether the wire is a public input or an auxiliary (private) wire.
    """

    index: int
    kind: VariableKind

    @classmethod
    def one(cls) -> Self:
        """Return the constant wire, which always holds the scalar `1`."""
        return cls(0, VariableKind.INPUT)

    def is_one(self) -> bool:
        """Check whether `self` is the constant wire."""
        return self == Variable.one()


class LinearCombination:
    """Construct linear combinations `sum_i coeff_i * w_i` of wires `w_i`.

    The constant term of an affine expression is the coefficient of the constant wire `Variable.one()`.
    Terms with a zero coefficient are never stored. Every operation returns a new linear combination and leaves its
    operands untouched.

    Attributes:
        terms (dict[Variable, Any]): The coefficients, indexed by wire, in insertion order.
    """

    def __init__(self, terms: dict[Variable, Any] | None = None):
        """Initialise a linear combination.

        Args:
            terms (dict[Variable, Any] | None): The coefficients of the linear combination. Defaults to `None`
                (the empty linear combination).
        """
        self.terms = {variable: coeff for variable, coeff in (terms or {}).items() if not coeff.is_zero()}

    @classmethod
    def zero(cls) -> Self:
        """Return the empty linear combination."""
        return cls()

    @classmethod
    def from_variable(cls, variable: Variable, coeff: Any) -> Self:
        """Return the linear combination `coeff * variable`."""
        return cls({variable: coeff})

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[tuple[Variable, Any]]:
        return iter(self.terms.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearCombination):
            return NotImplemented
        return self.terms == other.terms

    def __repr__(self) -> str:
        terms = " + ".join(f"{coeff} * {variable.kind.value}[{variable.index}]" for variable, coeff in self)
        return f"LinearCombination({terms or '0'})"

    def add_term(self, coeff: Any, variable: Variable) -> Self:
        """Return `self + coeff * variable`."""
        terms = dict(self.terms)
        terms[variable] = terms[variable] + coeff if variable in terms else coeff
        return LinearCombination(terms)

    def __add__(self, other: Self) -> Self:
        terms = dict(self.terms)
        for variable, coeff in other:
            terms[variable] = terms[variable] + coeff if variable in terms else coeff
        return LinearCombination(terms)

    def __neg__(self) -> Self:
        return LinearCombination({variable: -coeff for variable, coeff in self})

    def __sub__(self, other: Self) -> Self:
        return self + (-other)

    def scale(self, scalar: Any) -> Self:
        """Return `scalar * self`."""
        return LinearCombination({variable: coeff * scalar for variable, coeff in self})

    def evaluate(self, assignment: Callable[[Variable], Any], zero: Any) -> Any:
        """Evaluate the linear combination.

        Args:
            assignment (Callable[[Variable], Any]): Function returning the value assigned to a wire.
            zero: The zero of the scalar field, used as the value of the empty linear combination.

        Returns:
            The value `sum_i coeff_i * assignment(w_i)`.
        """
        out = zero
        for variable, coeff in self:
            out = out + coeff * assignment(variable)
        return out
