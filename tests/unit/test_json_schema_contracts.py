"""
Tests for Record Contracts

Комплексное тестирование JSON Schema контрактов записей:
- Расположение схем внутри пакета и ленивый загрузчик
- Валидность самих схем
- Детекция нарушений required полей и типов
- Согласованность схем с Pydantic моделями (alias, required, extra)
- parse_record / dump_record
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import BaseModel

import src.core.contracts.validators as validators_module
from src.core.contracts import (
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
from src.core.domain import Book, Person, Product, RatedItem, User
from src.core.transforms import calculate_total_price, filter_active_users


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_rated_item():
    return {"title": "A", "rating": 4.5}


@pytest.fixture
def valid_user():
    return {"id": 1, "name": "Ann", "email": "ann@example.com", "isActive": True}


@pytest.fixture
def valid_book():
    return {"title": "T", "author": "Au", "publishedYear": 2000, "isAvailable": False}


@pytest.fixture
def valid_product():
    return {"name": "x", "price": 10, "quantity": 2, "discount": 50}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_dir_inside_package(self) -> None:
        """Схемы лежат рядом с модулем и ставятся вместе с пакетом"""
        package_dir = Path(validators_module.__file__).parent
        assert SCHEMA_DIR == package_dir / "schema"
        assert SCHEMA_DIR.is_dir()

    def test_default_loader_without_arguments(self) -> None:
        loader = SchemaLoader()
        assert loader.schema_dir == SCHEMA_DIR

    def test_every_registered_schema_file_exists(self) -> None:
        for schema_name in RECORD_SCHEMAS.values():
            assert (SCHEMA_DIR / f"{schema_name}.json").is_file()

    def test_default_loader_created_lazily(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(validators_module, "_default_loader", None)
        loader = default_loader()
        assert isinstance(loader, SchemaLoader)
        assert default_loader() is loader

    @pytest.mark.parametrize("schema_name", sorted(RECORD_SCHEMAS.values()))
    def test_schemas_load(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("user") is loader.load_schema("user")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError) as exc_info:
            SchemaLoader(tmp_path).load_schema("broken")
        assert "broken.json" in str(exc_info.value)

    def test_custom_loader_for_validator(self, tmp_path: Path) -> None:
        schema = {"type": "object", "required": ["k"]}
        (tmp_path / "custom.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = ContractValidator("custom", loader=SchemaLoader(tmp_path))
        assert validator.is_valid({"k": 1})
        assert not validator.is_valid({})


# =============================================================================
# MODEL ↔ SCHEMA CONSISTENCY
# =============================================================================


class TestModelSchemaConsistency:
    """Схемы совпадают с тем, что модели принимают и выдают"""

    @pytest.mark.parametrize("model_cls", list(RECORD_SCHEMAS))
    def test_properties_match_model_aliases(self, model_cls) -> None:
        contract = SchemaLoader().load_schema(schema_name_for(model_cls))
        model_schema = model_cls.model_json_schema(by_alias=True)
        assert set(contract["properties"]) == set(model_schema["properties"])

    @pytest.mark.parametrize("model_cls", list(RECORD_SCHEMAS))
    def test_required_match_model(self, model_cls) -> None:
        contract = SchemaLoader().load_schema(schema_name_for(model_cls))
        model_schema = model_cls.model_json_schema(by_alias=True)
        assert set(contract["required"]) == set(model_schema.get("required", []))

    @pytest.mark.parametrize("model_cls", list(RECORD_SCHEMAS))
    def test_extra_fields_forbidden_on_both_sides(self, model_cls) -> None:
        model_schema = model_cls.model_json_schema(by_alias=True)
        assert model_schema.get("additionalProperties") is False

    def test_unregistered_model(self) -> None:
        with pytest.raises(TypeError) as exc_info:
            schema_name_for(Person)
        assert "Person" in str(exc_info.value)


# =============================================================================
# VIOLATIONS
# =============================================================================


class TestViolations:
    """Нарушения required полей и типов"""

    def test_rated_item_missing_rating(self, valid_rated_item) -> None:
        del valid_rated_item["rating"]
        with pytest.raises(ValidationError) as exc_info:
            ContractValidator.for_model(RatedItem).validate(valid_rated_item)
        assert "rating" in exc_info.value.message

    def test_rated_item_string_rating(self, valid_rated_item) -> None:
        valid_rated_item["rating"] = "5"
        assert not ContractValidator.for_model(RatedItem).is_valid(valid_rated_item)

    def test_user_snake_case_rejected_on_wire(self, valid_user) -> None:
        """Wire-форма использует camelCase"""
        valid_user["is_active"] = valid_user.pop("isActive")
        assert not ContractValidator.for_model(User).is_valid(valid_user)

    def test_user_bool_id_rejected(self, valid_user) -> None:
        valid_user["id"] = True
        assert not ContractValidator.for_model(User).is_valid(valid_user)

    def test_book_year_not_integer(self, valid_book) -> None:
        valid_book["publishedYear"] = "2000"
        with pytest.raises(ValidationError):
            parse_record(Book, valid_book)

    def test_product_error_messages(self, valid_product) -> None:
        valid_product["price"] = "ten"
        valid_product["quantity"] = None
        messages = ContractValidator.for_model(Product).error_messages(valid_product)
        assert len(messages) == 2
        assert messages[0].startswith("price: ")
        assert messages[1].startswith("quantity: ")

    def test_missing_required_reported_at_root(self, valid_book) -> None:
        del valid_book["author"]
        messages = ContractValidator.for_model(Book).error_messages(valid_book)
        assert messages == ["$: 'author' is a required property"]

    def test_extra_field_rejected(self, valid_book) -> None:
        valid_book["isbn"] = "123"
        with pytest.raises(ValidationError):
            parse_record(Book, valid_book)


# =============================================================================
# PARSE / DUMP
# =============================================================================


class TestParseAndDump:
    """Wire dict ↔ модель через один и тот же контракт"""

    def test_parse_user(self, valid_user) -> None:
        user = parse_record(User, valid_user)
        assert isinstance(user, User)
        assert user.is_active is True

    @pytest.mark.parametrize(
        "model_cls, fixture_name",
        [
            (RatedItem, "valid_rated_item"),
            (User, "valid_user"),
            (Book, "valid_book"),
            (Product, "valid_product"),
        ],
    )
    def test_dump_returns_wire_form(self, model_cls, fixture_name, request) -> None:
        data = request.getfixturevalue(fixture_name)
        assert dump_record(parse_record(model_cls, data)) == data

    def test_dump_product_without_discount(self) -> None:
        wire = dump_record(Product(name="y", price=5, quantity=1))
        assert wire["discount"] is None

    def test_dump_unregistered_model(self) -> None:
        with pytest.raises(TypeError):
            dump_record(Person("Ada", 30))

    def test_dump_unregistered_subclass(self) -> None:
        class Other(BaseModel):
            x: int

        with pytest.raises(TypeError):
            dump_record(Other(x=1))

    def test_products_from_wire_to_total(self, valid_product) -> None:
        payload = [valid_product, {"name": "y", "price": 5, "quantity": 1}]
        products = parse_records(Product, payload)
        assert calculate_total_price(products) == 15

    def test_users_from_wire_filtered(self, valid_user) -> None:
        payload = [valid_user, {**valid_user, "id": 2, "isActive": False}]
        users = parse_records(User, payload)
        assert [u.id for u in filter_active_users(users)] == [1]

    def test_parse_records_stops_on_invalid(self, valid_user) -> None:
        payload = [valid_user, {"id": 2}]
        with pytest.raises(ValidationError):
            parse_records(User, payload)
