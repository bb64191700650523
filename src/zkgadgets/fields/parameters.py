"""Parameters of a quadratic extension F_q^2 = F_q[u] / (u^2 - non_residue), and its out-of-circuit arithmetic."""

from dataclasses import dataclass
from typing import Any

from elliptic_curves.fields.quadratic_extension import QuadraticExtension


@dataclass(frozen=True)
class Fp2Parameters:
    """Constants defining F_q^2 = F_q[u] / (u^2 - non_residue).

    Attributes:
        base_field: The base field F_q.
        non_residue: The quadratic non-residue of F_q defining the extension.
        quadratic_non_residue (tuple): An element of F_q^2 which is not a square, used to build a quadratic extension
            of F_q^2 on top of this one. Given as its two coordinates.
        frobenius_coefficients (tuple): `non_residue^((q^j - 1) / 2)` for `j = 0, 1`. The Frobenius map
            `x -> x^(q^j)` sends `c0 + c1 u` to `c0 + c1 * frobenius_coefficients[j % 2] u`.
        extension_field: The out-of-circuit arithmetic of F_q^2.
    """

    base_field: Any
    non_residue: Any
    quadratic_non_residue: tuple[Any, Any]
    frobenius_coefficients: tuple[Any, Any]
    extension_field: Any


def fp2_parameters_from_base_field_and_non_residue(
    base_field, non_residue, quadratic_non_residue: tuple | None = None
) -> Fp2Parameters:
    """Build the parameters of F_q^2 = F_q[u] / (u^2 - non_residue).

    Args:
        base_field: The base field F_q.
        non_residue: An element of F_q which is not a square.
        quadratic_non_residue (tuple | None): An element of F_q^2 which is not a square. Defaults to `None`, in
            which case the first element of the form `k + u`, `k = 1, 2, ..`, which is not a square is used.

    Returns:
        The parameters of the extension, with the Frobenius coefficients computed from `non_residue`.

    Raises:
        ValueError: If `non_residue` is a square in F_q.
    """
    q = base_field.get_modulus()
    # Euler's criterion
    legendre_symbol = pow(non_residue.to_int(), (q - 1) // 2, q)
    if legendre_symbol != q - 1:
        msg = "The non residue must not be a square in the base field: "
        msg += f"non_residue: {non_residue.to_int()}, q: {q}"
        raise ValueError(msg)

    frobenius_coefficients = (base_field.identity(), base_field(legendre_symbol))
    if quadratic_non_residue is None:
        quadratic_non_residue = find_quadratic_non_residue(base_field, non_residue)

    return Fp2Parameters(
        base_field=base_field,
        non_residue=non_residue,
        quadratic_non_residue=quadratic_non_residue,
        frobenius_coefficients=frobenius_coefficients,
        extension_field=QuadraticExtension(base_field=base_field, non_residue=non_residue),
    )


def fp2_value(parameters: Fp2Parameters, c0, c1):
    """Return the element `c0 + c1 u` of F_q^2."""
    return parameters.extension_field(c0, c1)


def fp2_is_zero(value) -> bool:
    """Check whether `value` is the zero of F_q^2."""
    return value.x0.is_zero() and value.x1.is_zero()


def fp2_inverse(parameters: Fp2Parameters, value):
    """Compute the inverse of `value` in F_q^2.

    The inverse of `c0 + c1 u` is `(c0 - c1 u) / (c0^2 - non_residue * c1^2)`.

    Args:
        parameters (Fp2Parameters): The parameters of F_q^2.
        value: The element to invert.

    Returns:
        The inverse of `value`, or `None` if `value` is zero.
    """
    if fp2_is_zero(value):
        return None

    c0, c1 = value.x0, value.x1
    norm = c0 * c0 - parameters.non_residue * c1 * c1
    # norm != 0 for value != 0, as non_residue is not a square
    norm_inverse = norm.invert()
    return fp2_value(parameters, c0 * norm_inverse, -(c1 * norm_inverse))


def fp2_frobenius(parameters: Fp2Parameters, value, power: int):
    """Compute `value^(q^power)` in F_q^2."""
    return fp2_value(parameters, value.x0, value.x1 * parameters.frobenius_coefficients[power % 2])


def find_quadratic_non_residue(base_field, non_residue) -> tuple:
    """Return the coordinates of the first element `k + u`, `k = 1, 2, ..`, which is not a square in F_q^2.

    An element of F_q^2 is a square iff its norm is a square in F_q. The norm of `k + u` is `k^2 - non_residue`.
    """
    q = base_field.get_modulus()
    for k in range(1, q):
        norm = (k * k - non_residue.to_int()) % q
        if norm != 0 and pow(norm, (q - 1) // 2, q) == q - 1:
            return (base_field(k), base_field.identity())
    msg = "No quadratic non residue of the form k + u: "
    msg += f"non_residue: {non_residue.to_int()}, q: {q}"
    raise ValueError(msg)
