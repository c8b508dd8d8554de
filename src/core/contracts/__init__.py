"""
Contract Validation Module

Валидация wire-формы записей (RatedItem, User, Book, Product) по JSON Schema.
"""

from .validators import (
    RECORD_SCHEMAS,
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    default_loader,
    dump_record,
    parse_record,
    parse_records,
    schema_name_for,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "RECORD_SCHEMAS",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "default_loader",
    "schema_name_for",
    "parse_record",
    "parse_records",
    "dump_record",
]
