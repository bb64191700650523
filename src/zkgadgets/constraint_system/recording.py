"""Constraint system recording wires, assignments and constraints, and checking satisfiability."""

import logging
from dataclasses import dataclass
from typing import Any

from src.zkgadgets.constraint_system.constraint_system import (
    AssignmentMissing,
    RootConstraintSystem,
    SynthesisError,
    Unsatisfiable,
)
from src.zkgadgets.constraint_system.linear_combination import LinearCombination, Variable, VariableKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constraint:
    """Constraint `a * b = c`.

    Attributes:
        a (LinearCombination): The left factor.
        b (LinearCombination): The right factor.
        c (LinearCombination): The product.
        path (str): The full path of the constraint annotation.
    """

    a: LinearCombination
    b: LinearCombination
    c: LinearCombination
    path: str


class RecordingConstraintSystem(RootConstraintSystem):
    """Constraint system keeping every wire assignment and every constraint.

    The first input wire is the constant wire, assigned to `1` at construction.

    Attributes:
        field: The scalar field of the constraint system.
        inputs (list): The values of the public input wires, the constant wire first.
        aux (list): The values of the auxiliary wires.
        constraints (list[Constraint]): The recorded constraints, in emission order.
    """

    def __init__(self, field):
        """Initialise an empty constraint system over `field`.

        Args:
            field: The scalar field of the constraint system, e.g. `PrimeField(q)`.
        """
        super().__init__()
        self.field = field
        self.inputs = [field.identity()]
        self.aux = []
        self.constraints: list[Constraint] = []
        self._paths: dict[str, Variable | int] = {"ONE": Variable.one()}

    def _register_path(self, path: str, entry: Variable | int):
        if path in self._paths:
            msg = "Path already in use: "
            msg += f"path: {path}"
            raise SynthesisError(msg)
        self._paths[path] = entry

    def _alloc(self, path: str, value: Any) -> Variable:
        variable = Variable(len(self.aux), VariableKind.AUX)
        self._register_path(path, variable)
        self.aux.append(value)
        return variable

    def _alloc_input(self, path: str, value: Any) -> Variable:
        variable = Variable(len(self.inputs), VariableKind.INPUT)
        self._register_path(path, variable)
        self.inputs.append(value)
        return variable

    def _enforce(self, path: str, a: LinearCombination, b: LinearCombination, c: LinearCombination):
        self._register_path(path, len(self.constraints))
        self.constraints.append(Constraint(a, b, c, path))

    def num_inputs(self) -> int:
        """Return the number of input wires, the constant wire included."""
        return len(self.inputs)

    def num_aux(self) -> int:
        """Return the number of auxiliary wires."""
        return len(self.aux)

    def num_constraints(self) -> int:
        """Return the number of constraints."""
        return len(self.constraints)

    def constraint_paths(self) -> list[str]:
        """Return the paths of the constraints, in emission order."""
        return [constraint.path for constraint in self.constraints]

    def assignment(self, variable: Variable) -> Any:
        """Return the value assigned to `variable`."""
        match variable.kind:
            case VariableKind.INPUT:
                return self.inputs[variable.index]
            case VariableKind.AUX:
                return self.aux[variable.index]

    def get(self, path: str) -> Any:
        """Return the value of the wire allocated at `path`.

        Args:
            path (str): The full path of the wire, e.g. `"a/Fp2 allocation/c0"`.

        Returns:
            The value assigned to the wire.

        Raises:
            AssignmentMissing: If no wire was allocated at `path`.
        """
        entry = self._paths.get(path)
        if not isinstance(entry, Variable):
            msg = "No wire allocated at path: "
            msg += f"path: {path}"
            raise AssignmentMissing(msg)
        return self.assignment(entry)

    def set(self, path: str, value: Any):
        """Overwrite the value of the wire allocated at `path`.

        Args:
            path (str): The full path of the wire.
            value: The new value.

        Raises:
            AssignmentMissing: If no wire was allocated at `path`.
        """
        entry = self._paths.get(path)
        if not isinstance(entry, Variable) or entry.is_one():
            msg = "No overwritable wire allocated at path: "
            msg += f"path: {path}"
            raise AssignmentMissing(msg)
        match entry.kind:
            case VariableKind.INPUT:
                self.inputs[entry.index] = value
            case VariableKind.AUX:
                self.aux[entry.index] = value

    def which_is_unsatisfied(self) -> str | None:
        """Return the path of the first constraint not satisfied by the current assignment, or `None`."""
        zero = self.field.zero()
        for constraint in self.constraints:
            a = constraint.a.evaluate(self.assignment, zero)
            b = constraint.b.evaluate(self.assignment, zero)
            c = constraint.c.evaluate(self.assignment, zero)
            if a * b != c:
                logger.debug("Constraint %s is not satisfied", constraint.path)
                return constraint.path
        return None

    def is_satisfied(self) -> bool:
        """Check whether the current assignment satisfies every constraint."""
        return self.which_is_unsatisfied() is None

    def check_satisfied(self):
        """Raise `Unsatisfiable` if the current assignment does not satisfy every constraint."""
        path = self.which_is_unsatisfied()
        if path is not None:
            msg = "The assignment does not satisfy the constraint system: "
            msg += f"first unsatisfied constraint: {path}"
            raise Unsatisfiable(msg)

    def to_json(self) -> dict:
        """Return a JSON-serialisable summary of the constraint system."""
        return {
            "num_inputs": self.num_inputs(),
            "num_aux": self.num_aux(),
            "num_constraints": self.num_constraints(),
            "constraints": self.constraint_paths(),
        }
