"""Interface of the constraint system consumed by the gadgets, and its scoped handles."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

from src.zkgadgets.constraint_system.linear_combination import LinearCombination, Variable

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


class SynthesisError(Exception):
    """Error raised while synthesising a circuit."""


class AssignmentMissing(SynthesisError):
    """A value was requested for a path that holds no assignment."""


class DivisionByZero(SynthesisError):
    """A circuit required the inverse of zero."""


class NamespaceError(SynthesisError):
    """A namespace was misused: bad name, or a handle used while a nested scope is open."""


class Unsatisfiable(SynthesisError):
    """The assignment does not satisfy the constraint system."""


class ConstraintSystem(ABC):
    """Rank-1 constraint system: wires, and constraints `A * B = C` over linear combinations of wires.

    This is the interface the gadgets consume. Every handle forwards to the `root` of the constraint system, a
    `RootConstraintSystem`, which stores the wires and constraints.

    Access to the constraint system is scoped: `namespace` returns a handle which must be used for every allocation
    and constraint until its scope closes. While a scope is open, only the innermost handle can allocate or
    constrain.

    Attributes:
        path (tuple[str, ...]): The names of the enclosing scopes, outermost first. Empty for the root.
    """

    path: tuple[str, ...] = ()

    @property
    @abstractmethod
    def root(self) -> "RootConstraintSystem":
        """The constraint system storing the wires and constraints."""

    @staticmethod
    def one() -> Variable:
        """Return the constant wire holding `1`."""
        return Variable.one()

    def alloc(self, annotation: str, value: Any) -> Variable:
        """Allocate a private (auxiliary) wire holding `value`.

        Args:
            annotation (str): The name of the wire, relative to the current namespace.
            value: The value assigned to the wire.

        Returns:
            The allocated wire.
        """
        self._check_is_active()
        path = self._full_path(annotation)
        variable = self.root._alloc(path, value)
        logger.debug("Allocated aux[%d] at %s", variable.index, path)
        return variable

    def alloc_input(self, annotation: str, value: Any) -> Variable:
        """Allocate a public input wire holding `value`.

        Args:
            annotation (str): The name of the wire, relative to the current namespace.
            value: The value assigned to the wire.

        Returns:
            The allocated wire.
        """
        self._check_is_active()
        path = self._full_path(annotation)
        variable = self.root._alloc_input(path, value)
        logger.debug("Allocated input[%d] at %s", variable.index, path)
        return variable

    def enforce(self, annotation: str, a: LinearCombination, b: LinearCombination, c: LinearCombination):
        """Record the constraint `a * b = c`.

        Args:
            annotation (str): The name of the constraint, relative to the current namespace.
            a (LinearCombination): The left factor.
            b (LinearCombination): The right factor.
            c (LinearCombination): The product.
        """
        self._check_is_active()
        path = self._full_path(annotation)
        self.root._enforce(path, a, b, c)
        logger.debug("Enforced %s", path)

    @contextmanager
    def namespace(self, name: str) -> Iterator["Namespace"]:
        """Open a scope named `name`, nested in the current one.

        The returned handle prefixes every annotation with the path of the scope. The scope is closed when the
        `with` block exits, whether normally or through an exception. Reopening a scope with the same name in the
        same parent yields a fresh path: `name`, then `name[1]`, `name[2]`, and so on.

        Args:
            name (str): The name of the scope. It must be non-empty and must not contain `/`.

        Yields:
            The handle to use inside the scope.
        """
        if not name or PATH_SEPARATOR in name:
            msg = "Namespace names must be non-empty and cannot contain the path separator: "
            msg += f"name: {name!r}"
            raise NamespaceError(msg)
        self._check_is_active()

        root = self.root
        key = (*self.path, name)
        count = root._scope_counts.get(key, 0)
        root._scope_counts[key] = count + 1

        handle = Namespace(self, name if count == 0 else f"{name}[{count}]")
        root._open_scopes.append(handle)
        logger.debug("Entering namespace %s", PATH_SEPARATOR.join(handle.path))
        try:
            yield handle
        finally:
            closed = root._open_scopes.pop()
            logger.debug("Leaving namespace %s", PATH_SEPARATOR.join(closed.path))
            if closed is not handle:
                msg = "Namespaces closed out of order: "
                msg += f"expected: {PATH_SEPARATOR.join(handle.path)}, closed: {PATH_SEPARATOR.join(closed.path)}"
                raise NamespaceError(msg)

    def _full_path(self, annotation: str) -> str:
        return PATH_SEPARATOR.join((*self.path, annotation))

    def _check_is_active(self):
        """Check that `self` is the innermost open scope."""
        open_scopes = self.root._open_scopes
        innermost = open_scopes[-1] if open_scopes else self.root
        if innermost is not self:
            msg = "The constraint system handle is not the innermost open scope: "
            msg += f"handle: {PATH_SEPARATOR.join(self.path) or '<root>'}, "
            msg += f"innermost: {PATH_SEPARATOR.join(innermost.path) or '<root>'}"
            raise NamespaceError(msg)


class RootConstraintSystem(ConstraintSystem):
    """Root of a constraint system, storing its wires and constraints.

    Concrete constraint systems inherit from this class and implement `_alloc`, `_alloc_input` and `_enforce`, which
    receive the full path of the annotation. The root also tracks the open scopes.
    """

    def __init__(self):
        """Initialise the root of the constraint system."""
        self._open_scopes: list["Namespace"] = []
        self._scope_counts: dict[tuple[str, ...], int] = {}

    @property
    def root(self) -> "RootConstraintSystem":
        return self

    @abstractmethod
    def _alloc(self, path: str, value: Any) -> Variable: ...

    @abstractmethod
    def _alloc_input(self, path: str, value: Any) -> Variable: ...

    @abstractmethod
    def _enforce(self, path: str, a: LinearCombination, b: LinearCombination, c: LinearCombination): ...


class Namespace(ConstraintSystem):
    """Scoped handle to a constraint system, obtained from `ConstraintSystem.namespace`.

    Attributes:
        path (tuple[str, ...]): The names of the enclosing scopes, outermost first.
    """

    def __init__(self, parent: ConstraintSystem, name: str):
        """Initialise a handle for the scope `name` nested in `parent`.

        Args:
            parent (ConstraintSystem): The enclosing scope.
            name (str): The name of the scope.
        """
        self._root = parent.root
        self.path = (*parent.path, name)

    @property
    def root(self) -> RootConstraintSystem:
        return self._root

    def __repr__(self) -> str:
        return f"Namespace({PATH_SEPARATOR.join(self.path)!r})"
