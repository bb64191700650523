"""Quadratic extension F_q^2 = F_q[u] / (u^2 - 13) of the base field of MNT4-753."""

from elliptic_curves.fields.prime_field import PrimeField
from elliptic_curves.instantiations.mnt4_753.mnt4_753 import MNT4_753

from src.zkgadgets.fields.fp import fp_gadget_from_base_field
from src.zkgadgets.fields.fp2 import fp2_gadget_from_parameters
from src.zkgadgets.fields.parameters import fp2_parameters_from_base_field_and_non_residue

q = MNT4_753.g1_field.get_modulus()
Fq = PrimeField(q)
NON_RESIDUE = Fq(13)

# The quadratic non residue is the first k + u which is not a square
FP2_PARAMETERS = fp2_parameters_from_base_field_and_non_residue(base_field=Fq, non_residue=NON_RESIDUE)
QUADRATIC_NON_RESIDUE = FP2_PARAMETERS.quadratic_non_residue

FpGadget = fp_gadget_from_base_field(Fq)
Fp2Gadget = fp2_gadget_from_parameters(FP2_PARAMETERS)
