"""
Rational — точная рациональная дробь

Дробь = трёхзначный знак + неотрицательный числитель + положительный
знаменатель (оба BigInteger). Знак живёт только на уровне дроби.

Вся поразрядная работа делегируется BigInteger; Rational добавляет учёт
знака и сокращение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знаменатель никогда не равен нулю (и всегда положителен)
2. gcd(числитель, знаменатель) == 1, кроме нулевого числителя,
   при котором знаменатель == 1
3. sign == ZERO тогда и только тогда, когда числитель равен нулю
4. Сокращение выполняется после каждой операции, до того как значение
   становится доступно вызывающему

АЛГОРИТМЫ:
    a/b + c/d = (a*d + b*c) / (b*d)      (одинаковые знаки)
    a/b - c/d = (a*d - c*b) / (b*d)      (одинаковые знаки, по сравнению a*d vs c*b)
    a/b * c/d = (a*c) / (b*d)
    a/b / c/d = (a*d) / (b*c)
"""

import json
import logging
from typing import Optional, TextIO, Union

import jsonschema
from pydantic import ValidationError

from src.core.contracts import rational_contract
from src.core.domain.decimal_format import DecimalFormat
from src.core.domain.sign import Sign
from src.core.domain.snapshots import RationalSnapshot
from src.core.math.big_integer import BigInteger, IntegerLike, compare, power
from src.core.math.errors import DivisionByZero, InvalidFormat

LOG = logging.getLogger(__name__)


# =============================================================================
# GCD
# =============================================================================


def gcd(first: IntegerLike, second: IntegerLike) -> BigInteger:
    """
    Наибольший общий делитель (итеративный алгоритм Евклида).

    Использует остаток от деления BigInteger; глубина стека постоянна.

    Args:
        first: Первое значение (знак игнорируется)
        second: Второе значение (знак игнорируется)

    Returns:
        Неотрицательный НОД; gcd(0, 0) == 0

    Examples:
        >>> gcd(12, 18)
        BigInteger('6')
    """
    first = abs(BigInteger(first))
    second = abs(BigInteger(second))

    while second:
        if second == 1:
            return BigInteger(1)
        first, second = second, first % second

    return first


# =============================================================================
# RATIONAL
# =============================================================================


class Rational:
    """
    Точная рациональная дробь, всегда в несократимом виде.

    Examples:
        >>> Rational(2, 4)
        Rational(1, 2)
        >>> str(Rational(1, 3) + Rational(1, 6))
        '1/2'
        >>> Rational(1, 3).as_decimal(5)
        '0.33333'
    """

    __slots__ = ("_sign", "_numerator", "_denominator")

    def __init__(self, numerator: IntegerLike = 0, denominator: IntegerLike = 1):
        """
        Args:
            numerator: Числитель со знаком (int, BigInteger или десятичная строка)
            denominator: Знаменатель со знаком (int, BigInteger или десятичная строка)

        Raises:
            DivisionByZero: Если знаменатель равен нулю
            InvalidFormat: Если строковый аргумент не соответствует грамматике
            TypeError: Если тип аргумента не поддерживается
        """
        numerator = BigInteger(numerator)
        denominator = BigInteger(denominator)

        if not denominator:
            raise DivisionByZero(f"Rational with zero denominator: {numerator}/0")

        self._sign = numerator.sign.combine(denominator.sign)
        self._numerator = abs(numerator)
        self._denominator = abs(denominator)
        self._reduce()

    @classmethod
    def _from_parts(
        cls, sign: Sign, numerator: BigInteger, denominator: BigInteger
    ) -> "Rational":
        """Сборка из знака и неотрицательных частей с обязательным сокращением"""
        result = cls.__new__(cls)
        result._sign = sign
        result._numerator = numerator
        result._denominator = denominator
        result._reduce()
        return result

    def _reduce(self) -> None:
        """
        Приведение к несократимому виду.

        1. Нулевой числитель → знаменатель 1, знак ZERO
        2. Знаменатель делит числитель → (n / d, 1)
        3. Числитель делит знаменатель → (1, d / n)
        4. Иначе деление обеих частей на НОД, если он больше 1
        """
        if not self._numerator:
            self._sign = Sign.ZERO
            self._denominator = BigInteger(1)
            return

        if self._denominator == 1:
            return

        quotient, remainder = divmod(self._numerator, self._denominator)
        if not remainder:
            self._numerator = quotient
            self._denominator = BigInteger(1)
            return

        quotient, remainder = divmod(self._denominator, self._numerator)
        if not remainder:
            self._denominator = quotient
            self._numerator = BigInteger(1)
            return

        divisor = gcd(self._numerator, self._denominator)
        if divisor != 1:
            LOG.debug("Rational reduction by gcd=%s", divisor)
            self._numerator //= divisor
            self._denominator //= divisor

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def sign(self) -> Sign:
        """Знак дроби"""
        return self._sign

    @property
    def numerator(self) -> BigInteger:
        """Модуль числителя (неотрицательный)"""
        return self._numerator

    @property
    def denominator(self) -> BigInteger:
        """Знаменатель (положительный)"""
        return self._denominator

    def copy(self) -> "Rational":
        """Независимая копия"""
        result = Rational.__new__(Rational)
        result._sign = self._sign
        result._numerator = self._numerator.copy()
        result._denominator = self._denominator.copy()
        return result

    def __copy__(self) -> "Rational":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Rational":
        return self.copy()

    # =========================================================================
    # УНАРНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def __neg__(self) -> "Rational":
        result = self.copy()
        result._sign = self._sign.negate()
        return result

    def __pos__(self) -> "Rational":
        return self.copy()

    def __abs__(self) -> "Rational":
        if self._sign is Sign.NEGATIVE:
            return -self
        return self.copy()

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    def __float__(self) -> float:
        # int / int округляется корректно
        return self._sign.to_int() * (int(self._numerator) / int(self._denominator))

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _add(self, other: "Rational") -> "Rational":
        if other._sign is Sign.ZERO:
            return self.copy()
        if self._sign is Sign.ZERO:
            return other.copy()

        if self._sign is other._sign:
            numerator = (
                self._numerator * other._denominator
                + self._denominator * other._numerator
            )
            return Rational._from_parts(
                self._sign, numerator, self._denominator * other._denominator
            )

        return self._subtract(-other)

    def _subtract(self, other: "Rational") -> "Rational":
        if other._sign is Sign.ZERO:
            return self.copy()
        if self._sign is Sign.ZERO:
            return -other

        if self._sign is not other._sign:
            return self._add(-other)

        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        order = compare(left, right)
        if order == 0:
            return Rational()

        denominator = self._denominator * other._denominator
        if order > 0:
            return Rational._from_parts(self._sign, left - right, denominator)
        # |self| < |other|: знак результата противоположен знаку self
        return Rational._from_parts(self._sign.negate(), right - left, denominator)

    def _multiply(self, other: "Rational") -> "Rational":
        sign = self._sign.combine(other._sign)
        if sign is Sign.ZERO:
            return Rational()
        return Rational._from_parts(
            sign,
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def _divide(self, other: "Rational") -> "Rational":
        if other._sign is Sign.ZERO:
            raise DivisionByZero(f"division of {self} by zero rational")
        if self._sign is Sign.ZERO:
            return Rational()
        # Умножение на обратную дробь
        return Rational._from_parts(
            self._sign.combine(other._sign),
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __add__(self, other: object) -> "Rational":
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return self._add(other)

    def __radd__(self, other: object) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Rational":
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return self._subtract(other)

    def __rsub__(self, other: object) -> "Rational":
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other._subtract(self)

    def __mul__(self, other: object) -> "Rational":
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return self._multiply(other)

    def __rmul__(self, other: object) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Rational":
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return self._divide(other)

    def __rtruediv__(self, other: object) -> "Rational":
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return other._divide(self)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return (
            self._sign is other._sign
            and self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __lt__(self, other: object) -> bool:
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return compare_rationals(self, other) < 0

    def __le__(self, other: object) -> bool:
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return compare_rationals(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return compare_rationals(self, other) > 0

    def __ge__(self, other: object) -> bool:
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return compare_rationals(self, other) >= 0

    def __hash__(self) -> int:
        if self._denominator == 1:
            # Целая дробь равна соответствующему int/BigInteger
            return hash(self._sign.to_int() * int(self._numerator))
        return hash((self._sign, self._numerator, self._denominator))

    # =========================================================================
    # ТЕКСТ
    # =========================================================================

    def __str__(self) -> str:
        if self._sign is Sign.ZERO:
            return "0"

        text = str(self._numerator)
        if self._sign is Sign.NEGATIVE:
            text = f"-{text}"
        if self._denominator != 1:
            text += f"/{self._denominator}"
        return text

    def __repr__(self) -> str:
        sign = "-" if self._sign is Sign.NEGATIVE else ""
        return f"Rational({sign}{self._numerator}, {self._denominator})"

    def as_decimal(self, precision: int = 0, *, trim_trailing_zeros: bool = False) -> str:
        """
        Десятичное представление с фиксированной точностью.

        Значение усекается к нулю на precision-й цифре после точки.

        Args:
            precision: Количество цифр после точки (>= 0)
            trim_trailing_zeros: Убрать хвостовые нули дробной части
                (точное значение теряет дробную часть целиком)

        Returns:
            Строка вида "-?целая(.дробная)?"

        Raises:
            ValueError: Если precision отрицательна или не int
                (pydantic.ValidationError)

        Examples:
            >>> Rational(1, 3).as_decimal(5)
            '0.33333'
            >>> Rational(5, 2).as_decimal(3)
            '2.500'
            >>> Rational(5, 2).as_decimal(3, trim_trailing_zeros=True)
            '2.5'
        """
        return self.format_decimal(
            DecimalFormat(precision=precision, trim_trailing_zeros=trim_trailing_zeros)
        )

    def format_decimal(self, fmt: DecimalFormat) -> str:
        """
        Десятичное представление по конфигурации DecimalFormat.

        Алгоритм:
        1. scaled = (числитель * 10^precision) // знаменатель
        2. Разбиение scaled на целую и дробную части по границе precision цифр
        3. Дробная часть дополняется ведущими нулями до precision цифр
        4. При trim_trailing_zeros хвостовые нули удаляются
        5. Минус выводится только для ненулевого усечённого значения
        """
        scale = power(10, fmt.precision)
        scaled = (self._numerator * scale) // self._denominator
        integer_part, fraction_part = divmod(scaled, scale)

        text = str(integer_part)
        fraction = str(fraction_part).zfill(fmt.precision) if fmt.precision > 0 else ""
        if fmt.trim_trailing_zeros:
            fraction = fraction.rstrip("0")
        if fraction:
            text = f"{text}.{fraction}"

        if self._sign is Sign.NEGATIVE and scaled:
            text = f"-{text}"
        return text

    # =========================================================================
    # СНИМКИ
    # =========================================================================

    def to_snapshot(self) -> RationalSnapshot:
        """Сериализуемый снимок дроби"""
        return RationalSnapshot(
            sign=self._sign,
            numerator=list(self._numerator.digit_groups),
            denominator=list(self._denominator.digit_groups),
        )

    @classmethod
    def from_snapshot(cls, snapshot: RationalSnapshot) -> "Rational":
        """Дробь из провалидированного снимка (повторно сокращается)"""
        part_sign = Sign.ZERO if snapshot.sign is Sign.ZERO else Sign.POSITIVE
        return cls._from_parts(
            snapshot.sign,
            BigInteger.from_digit_groups(part_sign, snapshot.numerator),
            BigInteger.from_digit_groups(Sign.POSITIVE, snapshot.denominator),
        )

    def to_json(self) -> str:
        """JSON представление снимка (схема rational.json)"""
        return self.to_snapshot().model_dump_json()

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Rational":
        """
        Дробь из JSON снимка.

        Снимок проверяется контрактом rational.json, затем моделью
        RationalSnapshot; несокращённый снимок сокращается.

        Raises:
            InvalidFormat: Если текст не является JSON или нарушает контракт
        """
        try:
            payload = rational_contract().decode(data)
        except json.JSONDecodeError as e:
            raise InvalidFormat(f"invalid Rational JSON: {e}") from e
        except jsonschema.ValidationError as e:
            raise InvalidFormat(f"invalid Rational snapshot: {e.message}") from e

        try:
            snapshot = RationalSnapshot.model_validate(payload)
        except ValidationError as e:
            raise InvalidFormat(f"invalid Rational snapshot: {e}") from e
        return cls.from_snapshot(snapshot)


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def as_rational(value: object) -> Optional[Rational]:
    """
    Приведение операнда к Rational.

    Returns:
        Rational для Rational/BigInteger/int, None для неподдерживаемых типов
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, (int, BigInteger)):
        return Rational(value)
    return None


def compare_rationals(left: Rational, right: Rational) -> int:
    """
    Трёхзначное сравнение двух дробей.

    Разные знаки: NEGATIVE < ZERO < POSITIVE. Одинаковые знаки:
    сравнение перекрёстных произведений n1*d2 vs n2*d1
    (инвертируется для NEGATIVE).

    Returns:
        -1 если left < right, 0 если равны, +1 если left > right
    """
    if left.sign is not right.sign:
        return -1 if left.sign.to_int() < right.sign.to_int() else 1

    if left.sign is Sign.ZERO:
        return 0

    order = compare(
        left.numerator * right.denominator, right.numerator * left.denominator
    )
    return order if left.sign is Sign.POSITIVE else -order


def write_rational(stream: TextIO, value: Rational) -> None:
    """Запись представления "-?n(/d)?" в текстовый поток"""
    stream.write(str(value))
