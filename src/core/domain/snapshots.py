"""
Snapshots — сериализуемые снимки BigInteger и Rational

Immutable Pydantic модели для обмена значениями в JSON.
Соответствуют схемам contracts/schema/big_integer.json и rational.json.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются валидаторами):
1. Список цифровых групп не пуст, каждая группа в [0, RADIX)
2. Старшая группа ненулевая, кроме значения [0]
3. sign == ZERO тогда и только тогда, когда величина равна нулю
4. Знаменатель Rational не равен нулю
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.radix import RADIX
from src.core.domain.sign import Sign


def _check_digit_groups(groups: list[int]) -> list[int]:
    """
    Проверка инвариантов последовательности цифровых групп.

    Raises:
        ValueError: Если группы вне диапазона или есть незначащие нули
    """
    if not groups:
        raise ValueError("digit groups must not be empty")

    for group in groups:
        if not 0 <= group < RADIX:
            raise ValueError(f"digit group {group} outside [0, {RADIX})")

    if len(groups) > 1 and groups[-1] == 0:
        raise ValueError("most significant digit group must be nonzero")

    return groups


def _is_zero_groups(groups: list[int]) -> bool:
    return groups == [0]


# =============================================================================
# BIG INTEGER SNAPSHOT
# =============================================================================


class BigIntegerSnapshot(BaseModel):
    """
    Снимок BigInteger: знак и цифровые группы (младшая первой).
    """

    sign: Sign = Field(..., description="Знак значения")
    digits: list[int] = Field(
        ..., min_length=1, description="Цифровые группы, младшая первой"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: list[int]) -> list[int]:
        """Диапазон групп и отсутствие незначащих нулей"""
        return _check_digit_groups(v)

    @model_validator(mode="after")
    def validate_sign_matches_magnitude(self) -> "BigIntegerSnapshot":
        """sign == ZERO тогда и только тогда, когда digits == [0]"""
        if (self.sign is Sign.ZERO) != _is_zero_groups(self.digits):
            raise ValueError(
                f"sign {self.sign.value} inconsistent with digits {self.digits}"
            )
        return self


# =============================================================================
# RATIONAL SNAPSHOT
# =============================================================================


class RationalSnapshot(BaseModel):
    """
    Снимок Rational: знак, модуль числителя и знаменатель.

    Числитель и знаменатель хранятся как неотрицательные величины,
    знак живёт только на уровне дроби.
    """

    sign: Sign = Field(..., description="Знак дроби")
    numerator: list[int] = Field(..., min_length=1, description="Модуль числителя")
    denominator: list[int] = Field(..., min_length=1, description="Знаменатель")

    model_config = {"frozen": True}  # Immutable

    @field_validator("numerator", "denominator")
    @classmethod
    def validate_groups(cls, v: list[int]) -> list[int]:
        """Диапазон групп и отсутствие незначащих нулей"""
        return _check_digit_groups(v)

    @field_validator("denominator")
    @classmethod
    def validate_denominator_nonzero(cls, v: list[int]) -> list[int]:
        """Знаменатель не может быть нулём"""
        if _is_zero_groups(v):
            raise ValueError("denominator must be nonzero")
        return v

    @model_validator(mode="after")
    def validate_sign_matches_numerator(self) -> "RationalSnapshot":
        """sign == ZERO тогда и только тогда, когда числитель равен нулю"""
        if (self.sign is Sign.ZERO) != _is_zero_groups(self.numerator):
            raise ValueError(
                f"sign {self.sign.value} inconsistent with numerator {self.numerator}"
            )
        return self
