"""constraint_system package.

This package provides the rank-1 constraint system the gadgets emit their constraints into.

Modules:
    - linear_combination: Contains the Variable and LinearCombination classes.
    - constraint_system: Contains the ConstraintSystem interface, its RootConstraintSystem backend base, the scoped
    Namespace handles and the SynthesisError hierarchy.
    - recording: Contains the RecordingConstraintSystem class, which keeps the assignment and the constraints and
    checks satisfiability.

Usage example:
    >>> from elliptic_curves.fields.prime_field import PrimeField
    >>> from src.zkgadgets.constraint_system.recording import RecordingConstraintSystem
    >>> Fq = PrimeField(13)
    >>> cs = RecordingConstraintSystem(Fq)
    >>> with cs.namespace("a") as ns:
    >>>     a = ns.alloc("value", Fq(3))
    >>> cs.num_aux()
    1
"""
