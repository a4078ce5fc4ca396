"""
JSON Schema Contract Validators

Модуль для валидации JSON документов, содержащих rational значения в
текстовой десятичной форме. Использует библиотеку jsonschema.

Схемы (stark_math/core/contracts/schema/):
- rational_value.json: {"value": "<decimal>"}
- range_set.json: {"ranges": [{"start": "<decimal>", "end": "<decimal>"}]}

Валидация по схеме проверяет только форму документа; load_* функции после
валидации строят RationalNumber / ClosedRange объекты.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from stark_math.core.domain.ranges import ClosedRange
from stark_math.core.math.rational import RationalNumber


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rational_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class RationalValueValidator(ContractValidator):
    """Валидатор для rational_value контракта."""

    def __init__(self):
        super().__init__("rational_value")


class RangeSetValidator(ContractValidator):
    """Валидатор для range_set контракта."""

    def __init__(self):
        super().__init__("range_set")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rational_value(data: Dict[str, Any]) -> None:
    """
    Валидация rational_value документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RationalValueValidator().validate(data)


def validate_range_set(data: Dict[str, Any]) -> None:
    """
    Валидация range_set документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RangeSetValidator().validate(data)


def load_rational_value(data: Dict[str, Any]) -> RationalNumber:
    """
    Валидация rational_value документа и построение RationalNumber.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_rational_value(data)
    return RationalNumber.parse(data["value"])


def load_range_set(data: Dict[str, Any]) -> list[ClosedRange]:
    """
    Валидация range_set документа и построение ClosedRange списка.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если end < start в одном из диапазонов
    """
    validate_range_set(data)
    return [ClosedRange.model_validate(item) for item in data["ranges"]]
