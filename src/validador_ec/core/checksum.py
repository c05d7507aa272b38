"""Algoritmos de dígito verificador (módulo 10 y módulo 11).

Por qué un único algoritmo parametrizado:
- Ambos son la misma suma ponderada posicional; solo cambian la tabla de
  coeficientes, el módulo y si los productos de dos cifras se reducen a la
  suma de sus dígitos.
- Las tablas son datos, no código duplicado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


CEDULA_COEFFICIENTS: tuple[int, ...] = (2, 1, 2, 1, 2, 1, 2, 1, 2)
PRIVATE_COMPANY_COEFFICIENTS: tuple[int, ...] = (4, 3, 2, 7, 6, 5, 4, 3, 2)
PUBLIC_COMPANY_COEFFICIENTS: tuple[int, ...] = (3, 2, 7, 6, 5, 4, 3, 2)


@dataclass(frozen=True)
class ChecksumScheme:
    """Coeficientes más la aritmética que se les aplica."""

    name: str
    coefficients: tuple[int, ...]
    modulus: int
    reduce_products: bool = False

    @property
    def width(self) -> int:
        """Cantidad de dígitos iniciales cubiertos; el verificador va justo después."""

        return len(self.coefficients)


MODULO_10 = ChecksumScheme(
    name="modulo-10",
    coefficients=CEDULA_COEFFICIENTS,
    modulus=10,
    reduce_products=True,
)
MODULO_11_PRIVATE = ChecksumScheme(
    name="modulo-11 (private)",
    coefficients=PRIVATE_COMPANY_COEFFICIENTS,
    modulus=11,
)
MODULO_11_PUBLIC = ChecksumScheme(
    name="modulo-11 (public)",
    coefficients=PUBLIC_COMPANY_COEFFICIENTS,
    modulus=11,
)


def _digit_sum(value: int) -> int:
    return sum(int(ch) for ch in str(value))


def weighted_sum(digits: str, coefficients: Sequence[int], *, reduce_products: bool = False) -> int:
    """Suma de ``dígito * coeficiente`` sobre la cadena de dígitos.

    Con ``reduce_products`` un producto de 10 o más se reemplaza por la suma de
    sus propios dígitos (18 -> 9).
    """

    if len(digits) != len(coefficients):
        raise ValueError(f"expected {len(coefficients)} digits, got {len(digits)}")

    total = 0
    for ch, coefficient in zip(digits, coefficients):
        product = int(ch) * coefficient
        if reduce_products and product >= 10:
            product = _digit_sum(product)
        total += product
    return total


def compute_check_digit(digits: str, scheme: ChecksumScheme) -> int:
    """Dígito verificador esperado para ``digits`` (``0`` si el residuo es 0).

    En módulo 11 el resultado puede ser 10, que nunca coincide con un dígito:
    quien compara falla.
    """

    remainder = weighted_sum(digits, scheme.coefficients, reduce_products=scheme.reduce_products) % scheme.modulus
    return 0 if remainder == 0 else scheme.modulus - remainder


def verify(number: str, scheme: ChecksumScheme) -> bool:
    """True si el dígito en ``scheme.width`` coincide con el verificador calculado."""

    body = number[: scheme.width]
    return compute_check_digit(body, scheme) == int(number[scheme.width])
