"""
Record Contracts — JSON Schema для wire-формы записей

Wire-форма записи: camelCase JSON, который получается из
model_dump(by_alias=True) соответствующей Pydantic модели.
Каждая модель из src.core.domain.records привязана к своей схеме
(RECORD_SCHEMAS), схемы лежат внутри пакета в schema/*.json.

Поток данных:
    dict (wire) --parse_record--> модель --dump_record--> dict (wire)
Обе стороны проверяются одной и той же схемой, поэтому модель и контракт
не могут разойтись незаметно.

Операции из src.core.transforms сами ничего не валидируют: контракты
предназначены для кода, получающего или отдающего сырые dict.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Iterable, Iterator, List, Optional, Type, TypeVar

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from src.core.domain.records import Book, Product, RatedItem, User

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


# Каталог схем внутри пакета (ставится как package data)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Модель записи → имя схемы (без расширения)
RECORD_SCHEMAS: Final[Dict[Type[BaseModel], str]] = {
    RatedItem: "rated_item",
    User: "user",
    Book: "book",
    Product: "product",
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-валидацией.

    По умолчанию читает SCHEMA_DIR.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'product')

        Returns:
            Схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_default_loader: Optional[SchemaLoader] = None


def default_loader() -> SchemaLoader:
    """Общий загрузчик SCHEMA_DIR, создаётся при первом обращении."""
    global _default_loader
    if _default_loader is None:
        _default_loader = SchemaLoader()
    return _default_loader


def schema_name_for(model_cls: Type[BaseModel]) -> str:
    """
    Имя схемы для модели записи.

    Raises:
        TypeError: Если для модели нет контракта
    """
    try:
        return RECORD_SCHEMAS[model_cls]
    except KeyError:
        raise TypeError(f"No contract registered for {model_cls.__name__}") from None


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка dict против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    @classmethod
    def for_model(
        cls, model_cls: Type[BaseModel], loader: Optional[SchemaLoader] = None
    ) -> "ContractValidator":
        return cls(schema_name_for(model_cls), loader)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая найденная ошибка
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Все ошибки в виде строк "<path>: <message>", отсортированные по пути.

        Пустой путь (ошибка уровня объекта, например required) выводится как "$".
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [
            f"{'.'.join(map(str, e.absolute_path)) or '$'}: {e.message}" for e in errors
        ]


# =============================================================================
# RECORD PARSING / DUMPING
# =============================================================================


def parse_record(model_cls: Type[M], data: Dict[str, Any]) -> M:
    """
    Wire dict → модель записи.

    Сначала контракт, затем Pydantic: ошибки формы сообщаются в терминах
    wire-формы (camelCase).

    Raises:
        TypeError: Если для модели нет контракта
        ValidationError: Если данные не соответствуют схеме
    """
    ContractValidator.for_model(model_cls).validate(data)
    return model_cls.model_validate(data)


def parse_records(model_cls: Type[M], payload: Iterable[Dict[str, Any]]) -> List[M]:
    """Список wire dict → список моделей, порядок сохраняется."""
    validator = ContractValidator.for_model(model_cls)
    records: List[M] = []
    for data in payload:
        validator.validate(data)
        records.append(model_cls.model_validate(data))
    return records


def dump_record(record: BaseModel) -> Dict[str, Any]:
    """
    Модель записи → wire dict (by_alias), проверенный контрактом.

    Raises:
        TypeError: Если для модели нет контракта
        ValidationError: Если выход модели разошёлся со схемой
    """
    data = record.model_dump(by_alias=True)
    ContractValidator.for_model(type(record)).validate(data)
    return data
