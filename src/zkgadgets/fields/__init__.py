"""fields package.

This package provides gadgets for arithmetic in finite fields inside a rank-1 constraint system.

Modules:
    - field_gadget: Contains the Gadget, FieldGadget and FieldExtensionGadget protocols, the capabilities higher-level
    circuits are written against.
    - fp: Contains the FpGadget class for elements of the base field F_q.
    - parameters: Contains the Fp2Parameters class, defining F_q^2 = F_q[u] / (u^2 - non_residue), and the
    out-of-circuit arithmetic of F_q^2 used by the gadgets.
    - fp2: Contains the Fp2Gadget class for elements of F_q^2.

Usage example:
    >>> from elliptic_curves.fields.prime_field import PrimeField
    >>> from src.zkgadgets.constraint_system.recording import RecordingConstraintSystem
    >>> from src.zkgadgets.fields.fp2 import fp2_gadget_from_parameters
    >>> from src.zkgadgets.fields.parameters import fp2_parameters_from_base_field_and_non_residue
    >>> Fq = PrimeField(13)
    >>> parameters = fp2_parameters_from_base_field_and_non_residue(base_field=Fq, non_residue=Fq(2))
    >>> Fp2Gadget = fp2_gadget_from_parameters(parameters)
    >>> cs = RecordingConstraintSystem(Fq)
    >>> a = Fp2Gadget.alloc(cs, parameters.extension_field(Fq(3), Fq(5)))
    >>> b = Fp2Gadget.alloc(cs, parameters.extension_field(Fq(4), Fq(1)))
    >>> a.mul(cs, b).value().to_list()
    [9, 10]
    >>> cs.num_constraints()
    3
"""
