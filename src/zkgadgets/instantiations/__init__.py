"""instantiations package.

This package provides the quadratic extensions used by circuits over specific curves.

Modules:
    - mnt4_753: Contains the parameters and the gadget classes of F_q^2 for the base field F_q of MNT4-753, which is
    the scalar field of MNT6-753.
    - bls12_381: Contains the parameters and the gadget classes of F_q^2 for the base field F_q of BLS12-381.

Usage example:
    >>> from src.zkgadgets.instantiations.mnt4_753 import Fq, Fp2Gadget
    >>> from src.zkgadgets.constraint_system.recording import RecordingConstraintSystem
    >>> cs = RecordingConstraintSystem(Fq)
    >>> x = Fp2Gadget.alloc_input(cs, Fp2Gadget.PARAMETERS.extension_field(Fq(1), Fq(2)))
"""
