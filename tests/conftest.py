from __future__ import annotations

import pytest

from validador_ec.core.config import ValidatorSettings
from validador_ec.core.services.validator import IdentifierValidator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer VALIDADOR_EC_* variables out of the tests."""

    for name in ("VALIDADOR_EC_EXTENDED_SEQUENTIAL_BYPASS", "VALIDADOR_EC_LOG_LEVEL", "VALIDADOR_EC_SHOW_BANNER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> ValidatorSettings:
    return ValidatorSettings(_env_file=None)


@pytest.fixture
def validator(settings: ValidatorSettings) -> IdentifierValidator:
    return IdentifierValidator(settings)
