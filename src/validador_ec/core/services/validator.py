"""Motor de validación de cédulas y RUC.

Cada punto de entrada ejecuta un pipeline lineal con salida temprana:

    formato -> provincia -> tercer dígito -> establecimiento (RUC) -> dígito verificador

Por qué así:
- Los guards lanzan `ValidationFailure` y el pipeline la captura en el borde:
  hacia afuera solo sale un `ValidationOutcome`.
- Los métodos `check*` no guardan estado y pueden compartirse entre hilos.
- `validate*` + `get_error()` / `get_document_type()` guardan el último
  resultado en la instancia: no usar una misma instancia desde varios hilos.
- Sin `settings` explícitos se usan los defaults de librería (no se lee el
  entorno ni `.env`).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from validador_ec.core import checksum
from validador_ec.core.checksum import ChecksumScheme
from validador_ec.core.config import DEFAULT_SETTINGS, ValidatorSettings
from validador_ec.core.domain.document_type import DocumentType
from validador_ec.core.domain.errors import (
    MSG_CHECK_DIGIT,
    MSG_EMPTY,
    MSG_ESTABLISHMENT,
    MSG_LENGTH,
    MSG_NON_DIGIT,
    MSG_PROVINCE,
    MSG_THIRD_DIGIT_NATURAL,
    MSG_THIRD_DIGIT_PRIVATE,
    MSG_THIRD_DIGIT_PUBLIC,
    MSG_UNKNOWN_LENGTH,
    MSG_UNKNOWN_RUC_TYPE,
    ErrorKind,
    ValidationFailure,
)
from validador_ec.core.domain.models import ValidationOutcome
from validador_ec.core.domain.provinces import FOREIGN_RESIDENT_CODE, is_valid_province_code


logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

CEDULA_LENGTH = 10
RUC_LENGTH = 13
EXTENDED_SEQUENTIAL_LIMIT = 999_999


@dataclass(frozen=True)
class DocumentRules:
    """Configuración de guards para un tipo de documento."""

    document_type: DocumentType
    length: int
    third_digits: frozenset[int]
    third_digit_message: str
    checksum: ChecksumScheme
    # Provincia 30 (registrados en el exterior) omite el guard del tercer dígito.
    foreign_resident_skips_third_digit: bool = False
    establishment: slice | None = None
    # Subcampo comparado con EXTENDED_SEQUENTIAL_LIMIT cuando el bypass está activo.
    extended_sequential: slice | None = None


RULES: dict[DocumentType, DocumentRules] = {
    DocumentType.CEDULA: DocumentRules(
        document_type=DocumentType.CEDULA,
        length=CEDULA_LENGTH,
        third_digits=frozenset(range(6)),
        third_digit_message=MSG_THIRD_DIGIT_NATURAL,
        checksum=checksum.MODULO_10,
        foreign_resident_skips_third_digit=True,
    ),
    DocumentType.RUC_NATURAL: DocumentRules(
        document_type=DocumentType.RUC_NATURAL,
        length=RUC_LENGTH,
        third_digits=frozenset(range(6)),
        third_digit_message=MSG_THIRD_DIGIT_NATURAL,
        checksum=checksum.MODULO_10,
        foreign_resident_skips_third_digit=True,
        establishment=slice(10, 13),
    ),
    DocumentType.RUC_PRIVATE: DocumentRules(
        document_type=DocumentType.RUC_PRIVATE,
        length=RUC_LENGTH,
        third_digits=frozenset({9}),
        third_digit_message=MSG_THIRD_DIGIT_PRIVATE,
        checksum=checksum.MODULO_11_PRIVATE,
        establishment=slice(10, 13),
        extended_sequential=slice(3, 10),
    ),
    DocumentType.RUC_PUBLIC: DocumentRules(
        document_type=DocumentType.RUC_PUBLIC,
        length=RUC_LENGTH,
        third_digits=frozenset({6}),
        third_digit_message=MSG_THIRD_DIGIT_PUBLIC,
        checksum=checksum.MODULO_11_PUBLIC,
        establishment=slice(9, 13),
    ),
}

_TYPE_BY_LENGTH: dict[int, DocumentType] = {CEDULA_LENGTH: DocumentType.CEDULA}

_RUC_TYPE_BY_THIRD_DIGIT: dict[int, DocumentType] = {
    **{digit: DocumentType.RUC_NATURAL for digit in range(6)},
    6: DocumentType.RUC_PUBLIC,
    9: DocumentType.RUC_PRIVATE,
}


def _coerce(number: Any) -> str:
    if number is None:
        return ""
    if isinstance(number, str):
        return number
    return str(number)


def _is_digits(number: str) -> bool:
    return _DIGITS.fullmatch(number) is not None


class IdentifierValidator:
    """Valida cédulas y RUC ecuatorianos.

    API estructurada (sin estado): `check`, `check_cedula`, `check_natural_person_ruc`,
    `check_private_company_ruc`, `check_public_company_ruc`, `check_as`.

    API booleana (guarda el último resultado): `validate`, `validate_cedula`,
    `validate_natural_person_ruc`, `validate_private_company_ruc`,
    `validate_public_company_ruc`, then `get_error()` / `get_document_type()`.
    """

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.last_outcome: ValidationOutcome | None = None

    # ------------------------------------------------------------------
    # API estructurada

    def check(self, number: str = "") -> ValidationOutcome:
        """Detecta el tipo por longitud y tercer dígito, luego valida."""

        number = _coerce(number).strip()
        try:
            if not number:
                raise ValidationFailure(ErrorKind.EMPTY, MSG_EMPTY)
            if not _is_digits(number):
                raise ValidationFailure(ErrorKind.NON_DIGIT, MSG_NON_DIGIT)
            document_type = self._detect(number)
        except ValidationFailure as failure:
            return self._failed(number, failure)
        return self.check_as(number, document_type)

    def check_cedula(self, number: str = "") -> ValidationOutcome:
        return self.check_as(number, DocumentType.CEDULA)

    def check_natural_person_ruc(self, number: str = "") -> ValidationOutcome:
        return self.check_as(number, DocumentType.RUC_NATURAL)

    def check_private_company_ruc(self, number: str = "") -> ValidationOutcome:
        return self.check_as(number, DocumentType.RUC_PRIVATE)

    def check_public_company_ruc(self, number: str = "") -> ValidationOutcome:
        return self.check_as(number, DocumentType.RUC_PUBLIC)

    def check_as(self, number: str, document_type: DocumentType | str) -> ValidationOutcome:
        """Valida ``number`` con las reglas de ``document_type``, sin recortar espacios.

        Raises:
            ValueError: ``document_type`` no es un `DocumentType` ni una de sus etiquetas.
        """

        if not isinstance(document_type, DocumentType):
            document_type = DocumentType.from_label(document_type)
        rules = RULES[document_type]
        number = _coerce(number)

        try:
            self._check_format(number, rules.length)
        except ValidationFailure as failure:
            return self._failed(number, failure)

        province: int | None = None
        try:
            province = self._check_province(number)
            if not (rules.foreign_resident_skips_third_digit and province == FOREIGN_RESIDENT_CODE):
                self._check_third_digit(number, rules)
            if rules.establishment is not None:
                self._check_establishment(number[rules.establishment])
            self._check_digit(number, rules)
        except ValidationFailure as failure:
            return self._failed(number, failure, document_type, province)

        return ValidationOutcome(
            number=number,
            valid=True,
            document_type=document_type,
            province_code=province,
        )

    # ------------------------------------------------------------------
    # API booleana (compatibilidad sobre la API estructurada)

    def validate(self, number: str = "") -> bool:
        return self._remember(self.check(number))

    def validate_cedula(self, number: str = "") -> bool:
        return self._remember(self.check_cedula(number))

    def validate_natural_person_ruc(self, number: str = "") -> bool:
        return self._remember(self.check_natural_person_ruc(number))

    def validate_private_company_ruc(self, number: str = "") -> bool:
        return self._remember(self.check_private_company_ruc(number))

    def validate_public_company_ruc(self, number: str = "") -> bool:
        return self._remember(self.check_public_company_ruc(number))

    def get_error(self) -> str:
        """Mensaje de error del último `validate*`; vacío si pasó o no hubo llamada."""

        return self.last_outcome.error if self.last_outcome is not None else ""

    def get_document_type(self) -> str:
        """Etiqueta del tipo del último `validate*`; vacía si no se determinó."""

        return self.last_outcome.document_type_label if self.last_outcome is not None else ""

    # ------------------------------------------------------------------
    # Wrappers estáticos

    @staticmethod
    def is_valid(number: str = "") -> bool:
        return _SHARED.check(number).valid

    @staticmethod
    def is_valid_cedula(number: str = "") -> bool:
        return _SHARED.check_cedula(number).valid

    @staticmethod
    def is_valid_natural_person_ruc(number: str = "") -> bool:
        return _SHARED.check_natural_person_ruc(number).valid

    @staticmethod
    def is_valid_private_company_ruc(number: str = "") -> bool:
        return _SHARED.check_private_company_ruc(number).valid

    @staticmethod
    def is_valid_public_company_ruc(number: str = "") -> bool:
        return _SHARED.check_public_company_ruc(number).valid

    def extract_cedula_from_ruc(self, ruc: str = "") -> str | None:
        """Devuelve la cédula raíz de un RUC de persona natural válido, o None.

        Los RUC de sociedades no tienen cédula raíz; también devuelve None ante
        longitud incorrecta, caracteres no numéricos o dígito verificador inválido.
        No modifica `last_outcome`.
        """

        number = _coerce(ruc).strip()
        if len(number) != RUC_LENGTH or not _is_digits(number):
            return None
        if not self.check_natural_person_ruc(number).valid:
            return None
        return number[:CEDULA_LENGTH]

    # ------------------------------------------------------------------
    # Guards

    @staticmethod
    def _detect(number: str) -> DocumentType:
        if len(number) in _TYPE_BY_LENGTH:
            return _TYPE_BY_LENGTH[len(number)]
        if len(number) == RUC_LENGTH:
            document_type = _RUC_TYPE_BY_THIRD_DIGIT.get(int(number[2]))
            if document_type is None:
                raise ValidationFailure(ErrorKind.UNKNOWN_RUC_TYPE, MSG_UNKNOWN_RUC_TYPE)
            return document_type
        raise ValidationFailure(ErrorKind.UNKNOWN_LENGTH, MSG_UNKNOWN_LENGTH)

    @staticmethod
    def _check_format(number: str, length: int) -> None:
        if not number:
            raise ValidationFailure(ErrorKind.EMPTY, MSG_EMPTY)
        if not _is_digits(number):
            raise ValidationFailure(ErrorKind.NON_DIGIT, MSG_NON_DIGIT)
        if len(number) != length:
            raise ValidationFailure(ErrorKind.LENGTH, MSG_LENGTH.format(length=length))

    @staticmethod
    def _check_province(number: str) -> int:
        code = int(number[:2])
        if not is_valid_province_code(code):
            raise ValidationFailure(ErrorKind.PROVINCE, MSG_PROVINCE)
        return code

    @staticmethod
    def _check_third_digit(number: str, rules: DocumentRules) -> None:
        if int(number[2]) not in rules.third_digits:
            raise ValidationFailure(ErrorKind.THIRD_DIGIT, rules.third_digit_message)

    @staticmethod
    def _check_establishment(code: str) -> None:
        if int(code) < 1:
            raise ValidationFailure(ErrorKind.ESTABLISHMENT, MSG_ESTABLISHMENT)

    def _check_digit(self, number: str, rules: DocumentRules) -> None:
        if (
            self.settings.extended_sequential_bypass
            and rules.extended_sequential is not None
            and int(number[rules.extended_sequential]) > EXTENDED_SEQUENTIAL_LIMIT
        ):
            logger.debug("Extended sequential number, skipping %s", rules.checksum.name)
            return
        if not checksum.verify(number, rules.checksum):
            raise ValidationFailure(ErrorKind.CHECK_DIGIT, MSG_CHECK_DIGIT)

    # ------------------------------------------------------------------

    def _remember(self, outcome: ValidationOutcome) -> bool:
        self.last_outcome = outcome
        return outcome.valid

    @staticmethod
    def _failed(
        number: str,
        failure: ValidationFailure,
        document_type: DocumentType | None = None,
        province: int | None = None,
    ) -> ValidationOutcome:
        logger.debug(
            "Validation failed: kind=%s type=%s length=%d",
            failure.kind.value,
            document_type.value if document_type is not None else "-",
            len(number),
        )
        return ValidationOutcome(
            number=number,
            valid=False,
            error=failure.message,
            error_kind=failure.kind,
            document_type=document_type,
            province_code=province,
        )


# `check*` no guarda estado: una instancia con los defaults de librería sirve
# a todos los wrappers estáticos.
_SHARED = IdentifierValidator()
