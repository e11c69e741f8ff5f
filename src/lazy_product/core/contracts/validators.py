"""
JSON Schema Contract Validators

Модуль для валидации JSON документов запроса и результата сэмплирования.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (package data, contracts/schema/):
- sample_request.json: домены, размер выборки, backend, стратегия, seed
- sample_result.json: размер пространства и выбранные комбинации
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в contracts/schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем и собранных по ним валидаторов
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'sample_request')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator(self, schema_name: str) -> Draft202012Validator:
        """
        Draft202012Validator для схемы, один на загрузчик.

        Валидатор не хранит состояния между вызовами validate(), поэтому
        один экземпляр обслуживает все документы.
        """
        if schema_name not in self._validators:
            self._validators[schema_name] = Draft202012Validator(self.load_schema(schema_name))
        return self._validators[schema_name]


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
        self.validator = _SCHEMA_LOADER.validator(schema_name)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SampleRequestValidator(ContractValidator):
    """Валидатор для sample_request контракта."""

    def __init__(self):
        super().__init__("sample_request")


class SampleResultValidator(ContractValidator):
    """Валидатор для sample_result контракта."""

    def __init__(self):
        super().__init__("sample_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_REQUEST_VALIDATOR = SampleRequestValidator()
_RESULT_VALIDATOR = SampleResultValidator()


def validate_sample_request(data: Dict[str, Any]) -> None:
    """
    Валидация sample_request документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _REQUEST_VALIDATOR.validate(data)


def validate_sample_result(data: Dict[str, Any]) -> None:
    """
    Валидация sample_result документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _RESULT_VALIDATOR.validate(data)
