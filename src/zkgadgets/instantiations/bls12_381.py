"""Quadratic extension F_q^2 = F_q[u] / (u^2 + 1) of the base field of BLS12-381."""

from elliptic_curves.fields.prime_field import PrimeField
from elliptic_curves.instantiations.bls12_381.bls12_381 import BLS12_381

from src.zkgadgets.fields.fp import fp_gadget_from_base_field
from src.zkgadgets.fields.fp2 import fp2_gadget_from_parameters
from src.zkgadgets.fields.parameters import fp2_parameters_from_base_field_and_non_residue

q = BLS12_381.g1_field.get_modulus()
Fq = PrimeField(q)
NON_RESIDUE = Fq(-1)
QUADRATIC_NON_RESIDUE = (Fq(1), Fq(1))

FP2_PARAMETERS = fp2_parameters_from_base_field_and_non_residue(
    base_field=Fq, non_residue=NON_RESIDUE, quadratic_non_residue=QUADRATIC_NON_RESIDUE
)

FpGadget = fp_gadget_from_base_field(Fq)
Fp2Gadget = fp2_gadget_from_parameters(FP2_PARAMETERS)
