"""
JSON Schema Contract Validators

JSON представление NumberSymbols описано контрактом number_symbols.json
(Draft 2020-12), который поставляется вместе с пакетом.

Разделение ответственности:
- контракт: структура (обязательные поля, типы, длина символьных полей)
- модель NumberSymbols: предикаты формата и попарная уникальность

Поэтому данные, прошедшие контракт, всё ещё могут быть отвергнуты
моделью (например, negative_sign == positive_sign).
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов из одного каталога.

    Каждая схема проходит meta-validation один раз, при первой загрузке.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def schema_names(self) -> List[str]:
        """Имена доступных схем (без расширения .json)"""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя схемы без расширения (например, 'number_symbols')

        Raises:
            FileNotFoundError: Файл схемы не найден
            json.JSONDecodeError: Файл не является JSON
            ValueError: Файл не является валидной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка данных против одной схемы.

    validate() сообщает самую релевантную ошибку (jsonschema best_match),
    error_messages() — все ошибки в виде строк "<json path>: <message>".
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Данные не соответствуют схеме
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            logger.debug("%s contract rejected data: %s", self.schema_name, error.message)
            raise error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Any) -> List[str]:
        """Все ошибки, отсортированные по пути в документе"""
        errors = sorted(self.iter_errors(data), key=lambda e: (e.json_path, e.message))
        return [f"{e.json_path}: {e.message}" for e in errors]


class NumberSymbolsValidator(ContractValidator):
    """Валидатор контракта number_symbols"""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("number_symbols", loader)


@lru_cache(maxsize=None)
def _number_symbols_validator() -> NumberSymbolsValidator:
    return NumberSymbolsValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_number_symbols(data: Dict[str, Any]) -> None:
    """
    Проверка JSON представления NumberSymbols по контракту.

    Raises:
        ValidationError: Данные не соответствуют контракту
    """
    _number_symbols_validator().validate(data)
