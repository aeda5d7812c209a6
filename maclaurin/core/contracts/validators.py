"""
Contracts — проверка sweep_request / sweep_result по JSON Schema

Схемы лежат в schema/ внутри пакета и проверяются jsonschema
(Draft 2020-12) при первой загрузке. Контракт описывает форму данных
на границе ядра: нормализованный запрос перед проходом и результат,
отдаваемый наружу (CLI --json).

Инварианты, которые JSON Schema не выражает (равная длина
последовательностей, lower <= upper), проверяют pydantic модели
core.domain.sweep.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и meta-валидация схем из каталога, с кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения ('sweep_result').

        Raises:
            FileNotFoundError: файла нет в каталоге
            ValueError: содержимое не является схемой Draft 2020-12
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{name}.json"
        if not path.exists():
            raise FileNotFoundError(f"Schema not found: {path}")
        schema = json.loads(path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {name}.json: {e}") from e

        self._cache[name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка словаря по одной схеме пакета."""

    schema_name: str = ""

    def __init__(self) -> None:
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое найденное нарушение
        """
        self.validator.validate(data)


class SweepRequestValidator(ContractValidator):
    """Нормализованный запрос (SweepRequest.to_contract)."""

    schema_name = "sweep_request"


class SweepResultValidator(ContractValidator):
    """Результат прохода (SweepResult.to_contract), NaN/inf как null."""

    schema_name = "sweep_result"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sweep_request(data: Dict[str, Any]) -> None:
    SweepRequestValidator().validate(data)


def validate_sweep_result(data: Dict[str, Any]) -> None:
    SweepResultValidator().validate(data)
