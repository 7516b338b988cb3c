"""
Snapshot Contracts — JSON Schema контракты снимков BigInteger и Rational

Внешняя граница JSON обмена: текст снимка сначала разбирается и
проверяется по схеме, и только затем превращается в Pydantic снимок.

Схемы поставляются внутри пакета (schema/*.json) и загружаются лениво,
при первом обращении к контракту:
- big_integer.json (BigIntegerSnapshot)
- rational.json (RationalSnapshot)

Нарушение контракта → jsonschema.ValidationError с наиболее релевантной
ошибкой (jsonschema.exceptions.best_match).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем контрактов с кэшем.

    Каталог не проверяется при создании: отсутствующая схема обнаруживается
    при первой загрузке.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-validation схемы.

        Args:
            schema_name: Имя схемы без расширения ('big_integer', 'rational')

        Raises:
            FileNotFoundError: Если файла схемы нет в каталоге
            ValueError: Если файл не является валидной Draft 2020-12 схемой
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик схем пакета (создаётся при первом вызове)"""
    return SchemaLoader()


# =============================================================================
# SNAPSHOT CONTRACTS
# =============================================================================


class SnapshotContract:
    """
    Контракт JSON снимка одного типа значения.

    Подклассы задают только schema_name.
    """

    schema_name: str = ""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        loader = loader if loader is not None else default_loader()
        self.schema = loader.load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def iter_errors(self, payload: Any) -> Iterator[ValidationError]:
        """Все нарушения контракта"""
        return self._validator.iter_errors(payload)

    def is_valid(self, payload: Any) -> bool:
        return self._validator.is_valid(payload)

    def validate(self, payload: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self._validator.iter_errors(payload))
        if error is not None:
            raise error

    def decode(self, data: Union[str, bytes]) -> Dict[str, Any]:
        """
        JSON текст → провалидированный по схеме payload.

        Raises:
            json.JSONDecodeError: Если data не является JSON
            ValidationError: Если payload нарушает контракт
        """
        payload = json.loads(data)
        self.validate(payload)
        return payload


class BigIntegerContract(SnapshotContract):
    """Контракт снимка BigInteger"""

    schema_name = "big_integer"


class RationalContract(SnapshotContract):
    """Контракт снимка Rational"""

    schema_name = "rational"


@lru_cache(maxsize=None)
def big_integer_contract() -> BigIntegerContract:
    return BigIntegerContract()


@lru_cache(maxsize=None)
def rational_contract() -> RationalContract:
    return RationalContract()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(payload: Any) -> None:
    """
    Raises:
        ValidationError: Если payload не соответствует big_integer.json
    """
    big_integer_contract().validate(payload)


def validate_rational(payload: Any) -> None:
    """
    Raises:
        ValidationError: Если payload не соответствует rational.json
    """
    rational_contract().validate(payload)
