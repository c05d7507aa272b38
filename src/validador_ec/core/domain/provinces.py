"""Códigos de provincia (dos primeros dígitos de cédula o RUC).

Nota:
- 01-24 son provincias; 30 es el código de ecuatorianos registrados en el exterior.
"""

from __future__ import annotations


FOREIGN_RESIDENT_CODE = 30

PROVINCES: dict[int, str] = {
    1: "Azuay",
    2: "Bolívar",
    3: "Cañar",
    4: "Carchi",
    5: "Cotopaxi",
    6: "Chimborazo",
    7: "El Oro",
    8: "Esmeraldas",
    9: "Guayas",
    10: "Imbabura",
    11: "Loja",
    12: "Los Ríos",
    13: "Manabí",
    14: "Morona Santiago",
    15: "Napo",
    16: "Pastaza",
    17: "Pichincha",
    18: "Tungurahua",
    19: "Zamora Chinchipe",
    20: "Galápagos",
    21: "Sucumbíos",
    22: "Orellana",
    23: "Santo Domingo de los Tsáchilas",
    24: "Santa Elena",
    FOREIGN_RESIDENT_CODE: "Ecuadorians registered abroad",
}


def is_valid_province_code(code: int) -> bool:
    return 1 <= code <= 24 or code == FOREIGN_RESIDENT_CODE


def province_name(code: int | None) -> str | None:
    if code is None:
        return None
    return PROVINCES.get(code)
