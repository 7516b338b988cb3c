"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (min/max/enum/const)
- Интеграция с Pydantic снимками и значениями BigInteger/Rational
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    BigIntegerContract,
    RationalContract,
    SchemaLoader,
    big_integer_contract,
    validate_big_integer,
    validate_rational,
    validators,
)
from src.core.math import BigInteger, Rational


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_big_integer():
    """Валидный снимок BigInteger для тестирования."""
    return {"sign": "negative", "digits": [234567890, 345678901, 12]}


@pytest.fixture
def valid_rational():
    """Валидный снимок Rational для тестирования."""
    return {"sign": "positive", "numerator": [1], "denominator": [0, 3]}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["big_integer", "rational"])
    def test_schemas_are_valid(self, schema_name: str) -> None:
        """Каждая схема проходит meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает кэшированный объект"""
        loader = SchemaLoader()
        assert loader.load_schema("rational") is loader.load_schema("rational")

    def test_missing_schema(self) -> None:
        """Отсутствующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_schema_files_are_json(self) -> None:
        """Файлы схем — валидный JSON"""
        for path in SCHEMA_DIR.glob("*.json"):
            with open(path, "r", encoding="utf-8") as f:
                assert isinstance(json.load(f), dict)

    def test_schemas_ship_inside_package(self) -> None:
        """Схемы лежат рядом с модулем контрактов"""
        assert SCHEMA_DIR.parent == Path(validators.__file__).parent
        assert sorted(p.name for p in SCHEMA_DIR.glob("*.json")) == [
            "big_integer.json",
            "rational.json",
        ]

    def test_loader_is_lazy(self, tmp_path) -> None:
        """Создание загрузчика не обращается к файловой системе"""
        loader = SchemaLoader(tmp_path / "absent")
        with pytest.raises(FileNotFoundError):
            loader.load_schema("big_integer")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        """Файл, не являющийся JSON Schema → ValueError"""
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# BIG INTEGER CONTRACT
# =============================================================================


class TestBigIntegerContract:
    """Тесты контракта big_integer"""

    def test_valid(self, valid_big_integer) -> None:
        """Валидный снимок проходит"""
        validate_big_integer(valid_big_integer)
        assert BigIntegerContract().is_valid(valid_big_integer)

    def test_zero(self) -> None:
        """Ноль: sign zero и digits [0]"""
        validate_big_integer({"sign": "zero", "digits": [0]})

    @pytest.mark.parametrize("field", ["sign", "digits"])
    def test_missing_required(self, valid_big_integer, field: str) -> None:
        """Отсутствие required поля"""
        del valid_big_integer[field]
        with pytest.raises(ValidationError):
            validate_big_integer(valid_big_integer)

    @pytest.mark.parametrize(
        "patch",
        [
            {"sign": "plus"},
            {"digits": []},
            {"digits": [1_000_000_000]},
            {"digits": [-1]},
            {"digits": ["12"]},
            {"digits": [1.5]},
            {"sign": "zero"},
            {"sign": "positive", "digits": [0]},
            {"extra": 1},
        ],
    )
    def test_violations(self, valid_big_integer, patch: dict) -> None:
        """Нарушения типов и constraints"""
        valid_big_integer.update(patch)
        assert not BigIntegerContract().is_valid(valid_big_integer)
        assert list(BigIntegerContract().iter_errors(valid_big_integer))

    def test_value_snapshot_conforms(self) -> None:
        """JSON снимок значения соответствует схеме"""
        for value in (BigInteger(0), BigInteger(-1), BigInteger(10**40 + 7)):
            validate_big_integer(json.loads(value.to_json()))


# =============================================================================
# RATIONAL CONTRACT
# =============================================================================


class TestRationalContract:
    """Тесты контракта rational"""

    def test_valid(self, valid_rational) -> None:
        """Валидный снимок проходит"""
        validate_rational(valid_rational)
        assert RationalContract().is_valid(valid_rational)

    @pytest.mark.parametrize("field", ["sign", "numerator", "denominator"])
    def test_missing_required(self, valid_rational, field: str) -> None:
        """Отсутствие required поля"""
        del valid_rational[field]
        with pytest.raises(ValidationError):
            validate_rational(valid_rational)

    @pytest.mark.parametrize(
        "patch",
        [
            {"denominator": [0]},
            {"denominator": []},
            {"numerator": [1_000_000_000]},
            {"sign": "zero"},
            {"sign": "zero", "numerator": [0], "denominator": [7]},
            {"numerator": [0]},
        ],
    )
    def test_violations(self, valid_rational, patch: dict) -> None:
        """Нарушения constraints"""
        valid_rational.update(patch)
        with pytest.raises(ValidationError):
            validate_rational(valid_rational)

    def test_value_snapshot_conforms(self) -> None:
        """JSON снимок дроби соответствует схеме"""
        for value in (Rational(0), Rational(-1, 3), Rational(10**30, 7)):
            validate_rational(json.loads(value.to_json()))


# =============================================================================
# DECODE
# =============================================================================


class TestDecode:
    """Тесты разбора JSON текста через контракт"""

    def test_decode_valid(self) -> None:
        """Валидный текст → payload"""
        payload = big_integer_contract().decode('{"sign": "zero", "digits": [0]}')
        assert payload == {"sign": "zero", "digits": [0]}

    def test_decode_malformed(self) -> None:
        """Не-JSON текст → JSONDecodeError"""
        with pytest.raises(json.JSONDecodeError):
            big_integer_contract().decode("[1, 2")

    def test_decode_violation(self) -> None:
        """Нарушение контракта → ValidationError с путём к полю"""
        with pytest.raises(ValidationError) as exc_info:
            big_integer_contract().decode('{"sign": "positive", "digits": [1, -5]}')
        assert list(exc_info.value.path) == ["digits", 1]

    def test_contract_shared(self) -> None:
        """Контракт пакета создаётся один раз"""
        assert big_integer_contract() is big_integer_contract()
