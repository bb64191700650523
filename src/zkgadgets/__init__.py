"""zkgadgets: A Python package of field gadgets for rank-1 constraint systems.

The `zkgadgets` package lets a circuit author manipulate finite field elements as if doing ordinary algebra, while
emitting the constraints proving, inside a rank-1 constraint system (R1CS), that the values are consistent with that
algebra. Linear operations are free; multiplications, squarings and inversions allocate their result and emit the
minimal number of constraints. It supports the base field F_q of the constraint system and quadratic extensions
F_q^2 = F_q[u] / (u^2 - non_residue), as used in recursive proof composition over MNT4/MNT6 cycles.

Usage example:
    Prove knowledge of a^2 * b / b == a^2 for an element `a` of F_q^2:

    >>> from src.zkgadgets.constraint_system.recording import RecordingConstraintSystem
    >>> from src.zkgadgets.instantiations.mnt4_753 import Fq, Fp2Gadget
    >>> from src.zkgadgets.util.utility_functions import divide
    >>>
    >>> Fq2 = Fp2Gadget.PARAMETERS.extension_field
    >>> cs = RecordingConstraintSystem(Fq)
    >>> with cs.namespace("a") as ns:
    >>>     a = Fp2Gadget.alloc_input(ns, Fq2(Fq(3), Fq(5)))
    >>> with cs.namespace("b") as ns:
    >>>     b = Fp2Gadget.alloc_input(ns, Fq2(Fq(4), Fq(1)))
    >>> with cs.namespace("a^2 * b / b") as ns:
    >>>     lhs = divide(ns, a.square(ns).mul(ns, b), b)
    >>> with cs.namespace("lhs == a^2") as ns:
    >>>     a.enforce_square(ns, lhs)
    >>> cs.is_satisfied()
    True
"""
