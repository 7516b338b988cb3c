"""
BigInteger — целое число неограниченной точности

Значение = трёхзначный знак + величина (цифровые группы в системе с
основанием RADIX, младшая первой). Переполнение невозможно: величина растёт
добавлением групп.

Семантика значения (value type):
- Каждый оператор возвращает новое независимое значение
- Составное присваивание (+=, -=, ...) перепривязывает имя к новому значению
- Никакие два экземпляра не разделяют список цифровых групп
- Экземпляры hashable: равные значения имеют равный hash

Деление усекающее (как в C), а НЕ floor как у нативного int:
    BigInteger(-7) // 2 == -3
    BigInteger(-7) % 2 == -1
    a == (a // b) * b + a % b

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список групп не пуст, старшая группа ненулевая (кроме [0])
2. sign == ZERO тогда и только тогда, когда группы == [0]
3. Каждая группа в [0, RADIX)
"""

import json
from typing import Iterable, Optional, TextIO, Union

import jsonschema
from pydantic import ValidationError

from src.core.contracts import big_integer_contract
from src.core.domain.radix import RADIX
from src.core.domain.sign import Sign
from src.core.domain.snapshots import BigIntegerSnapshot
from src.core.math import long_division, magnitude
from src.core.math.errors import InvalidFormat
from src.core.math.text_codec import parse_decimal, read_decimal, render_decimal

IntegerLike = Union[int, str, "BigInteger"]


class BigInteger:
    """
    Целое число неограниченной точности.

    Examples:
        >>> BigInteger("12345678901234567890") + 1
        BigInteger('12345678901234567891')
        >>> BigInteger(100) // 7, BigInteger(100) % 7
        (BigInteger('14'), BigInteger('2'))
        >>> str(-BigInteger(-5))
        '5'
    """

    __slots__ = ("_sign", "_digits")

    def __init__(self, value: IntegerLike = 0):
        """
        Args:
            value: Нативный int, десятичная строка или другой BigInteger (копируется)

        Raises:
            InvalidFormat: Если строка не соответствует грамматике
            TypeError: Если тип value не поддерживается
        """
        if isinstance(value, BigInteger):
            self._sign = value._sign
            self._digits = list(value._digits)
        elif isinstance(value, int):
            self._sign = Sign.from_int(value)
            self._digits = magnitude.from_int(abs(value))
        elif isinstance(value, str):
            self._sign, self._digits = parse_decimal(value)
        else:
            raise TypeError(
                f"BigInteger() argument must be int, str or BigInteger, "
                f"got {type(value).__name__}"
            )

    @classmethod
    def _from_parts(cls, sign: Sign, digits: list[int]) -> "BigInteger":
        """
        Сборка из знака и величины без копирования.

        Величина нормализуется; нулевая величина принудительно получает ZERO.
        Вызывающий обязан передать владение списком digits.
        """
        result = cls.__new__(cls)
        result._digits = magnitude.normalize(digits)
        result._sign = Sign.ZERO if magnitude.is_zero(result._digits) else sign
        return result

    @classmethod
    def from_digit_groups(cls, sign: Sign, groups: Iterable[int]) -> "BigInteger":
        """
        Сборка из знака и цифровых групп (младшая первой) с проверкой.

        Незначащие старшие нулевые группы отбрасываются.

        Args:
            sign: Знак значения
            groups: Цифровые группы в [0, RADIX)

        Raises:
            InvalidFormat: Если группы пусты, вне диапазона или знак
                не согласован с величиной
        """
        digits = list(groups)
        if not digits:
            raise InvalidFormat("digit groups must not be empty")

        for group in digits:
            if isinstance(group, bool) or not isinstance(group, int):
                raise InvalidFormat(f"digit group {group!r} is not an int")
            if not 0 <= group < RADIX:
                raise InvalidFormat(f"digit group {group!r} outside [0, {RADIX})")

        magnitude.normalize(digits)
        if (sign is Sign.ZERO) != magnitude.is_zero(digits):
            raise InvalidFormat(
                f"sign {sign.value} inconsistent with digit groups {digits}"
            )

        return cls._from_parts(sign, digits)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def sign(self) -> Sign:
        """Знак значения"""
        return self._sign

    @property
    def digit_groups(self) -> tuple[int, ...]:
        """Цифровые группы величины (младшая первой), только чтение"""
        return tuple(self._digits)

    def copy(self) -> "BigInteger":
        """Независимая копия (глубокая копия цифровых групп)"""
        return BigInteger(self)

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    # =========================================================================
    # УНАРНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def __neg__(self) -> "BigInteger":
        return BigInteger._from_parts(self._sign.negate(), list(self._digits))

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        if self._sign is Sign.NEGATIVE:
            return -self
        return self.copy()

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    def __int__(self) -> int:
        return self._sign.to_int() * magnitude.to_int(self._digits)

    def increment(self) -> "BigInteger":
        """self + 1"""
        return self + 1

    def decrement(self) -> "BigInteger":
        """self - 1"""
        return self - 1

    # =========================================================================
    # СЛОЖЕНИЕ / ВЫЧИТАНИЕ
    # =========================================================================

    def _add(self, other: "BigInteger") -> "BigInteger":
        if other._sign is Sign.ZERO:
            return self.copy()
        if self._sign is Sign.ZERO:
            return other.copy()

        if self._sign is other._sign:
            return BigInteger._from_parts(
                self._sign, magnitude.add(self._digits, other._digits)
            )

        # Разные знаки: a + b == a - (-b)
        return self._subtract(-other)

    def _subtract(self, other: "BigInteger") -> "BigInteger":
        if other._sign is Sign.ZERO:
            return self.copy()
        if self._sign is Sign.ZERO:
            return -other

        if self._sign is not other._sign:
            # Разные знаки: a - b == a + (-b)
            return self._add(-other)

        order = magnitude.compare(self._digits, other._digits)
        if order == 0:
            return BigInteger()
        if order > 0:
            return BigInteger._from_parts(
                self._sign, magnitude.subtract(self._digits, other._digits)
            )
        # |self| < |other|: знак результата противоположен знаку self
        return BigInteger._from_parts(
            self._sign.negate(), magnitude.subtract(other._digits, self._digits)
        )

    def __add__(self, other: object) -> "BigInteger":
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return self._add(other)

    def __radd__(self, other: object) -> "BigInteger":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInteger":
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return self._subtract(other)

    def __rsub__(self, other: object) -> "BigInteger":
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return other._subtract(self)

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def _multiply(self, other: "BigInteger") -> "BigInteger":
        sign = self._sign.combine(other._sign)
        if sign is Sign.ZERO:
            return BigInteger()
        return BigInteger._from_parts(
            sign, magnitude.multiply(self._digits, other._digits)
        )

    def __mul__(self, other: object) -> "BigInteger":
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return self._multiply(other)

    def __rmul__(self, other: object) -> "BigInteger":
        return self.__mul__(other)

    def __pow__(self, exponent: object, modulo: object = None) -> "BigInteger":
        if modulo is not None:
            raise TypeError("BigInteger does not support modular exponentiation")
        if isinstance(exponent, BigInteger):
            exponent = int(exponent)
        if not isinstance(exponent, int):
            return NotImplemented
        return power(self, exponent)

    def __rpow__(self, base: object, modulo: object = None) -> "BigInteger":
        if modulo is not None:
            raise TypeError("BigInteger does not support modular exponentiation")
        base = as_big_integer(base)
        if base is None:
            return NotImplemented
        return power(base, int(self))

    # =========================================================================
    # ДЕЛЕНИЕ (усекающее)
    # =========================================================================

    def _divmod(self, other: "BigInteger") -> tuple["BigInteger", "BigInteger"]:
        quotient, remainder = long_division.divide(self._digits, other._digits)
        return (
            BigInteger._from_parts(self._sign.combine(other._sign), quotient),
            # Остаток наследует знак делимого
            BigInteger._from_parts(self._sign, remainder),
        )

    def __divmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)

    def __rdivmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return other._divmod(self)

    def __floordiv__(self, other: object) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rfloordiv__(self, other: object) -> "BigInteger":
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: object) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rmod__(self, other: object) -> "BigInteger":
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        other = as_big_integer(other)
        if other is None:
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        # Совпадает с hash(int(self)), т.к. BigInteger(n) == n
        return hash(int(self))

    # =========================================================================
    # ТЕКСТ И СНИМКИ
    # =========================================================================

    def __str__(self) -> str:
        return render_decimal(self._sign, self._digits)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def to_snapshot(self) -> BigIntegerSnapshot:
        """Сериализуемый снимок значения"""
        return BigIntegerSnapshot(sign=self._sign, digits=list(self._digits))

    @classmethod
    def from_snapshot(cls, snapshot: BigIntegerSnapshot) -> "BigInteger":
        """Значение из провалидированного снимка"""
        return cls.from_digit_groups(snapshot.sign, snapshot.digits)

    def to_json(self) -> str:
        """JSON представление снимка (схема big_integer.json)"""
        return self.to_snapshot().model_dump_json()

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "BigInteger":
        """
        Значение из JSON снимка.

        Порядок проверок:
        1. Разбор JSON
        2. Контракт big_integer.json (jsonschema)
        3. Модель BigIntegerSnapshot (pydantic)

        Raises:
            InvalidFormat: Если текст не является JSON или нарушает контракт
        """
        try:
            payload = big_integer_contract().decode(data)
        except json.JSONDecodeError as e:
            raise InvalidFormat(f"invalid BigInteger JSON: {e}") from e
        except jsonschema.ValidationError as e:
            raise InvalidFormat(f"invalid BigInteger snapshot: {e.message}") from e

        try:
            snapshot = BigIntegerSnapshot.model_validate(payload)
        except ValidationError as e:
            raise InvalidFormat(f"invalid BigInteger snapshot: {e}") from e
        return cls.from_snapshot(snapshot)


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def as_big_integer(value: object) -> Optional[BigInteger]:
    """
    Приведение операнда к BigInteger.

    Returns:
        BigInteger для BigInteger/int, None для неподдерживаемых типов
        (вызывающий оператор возвращает NotImplemented)
    """
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def compare(left: BigInteger, right: BigInteger) -> int:
    """
    Трёхзначное сравнение двух BigInteger.

    Порядок:
    1. Разные знаки: NEGATIVE < ZERO < POSITIVE
    2. Одинаковый знак: сравнение величин (инвертируется для NEGATIVE)

    Returns:
        -1 если left < right, 0 если равны, +1 если left > right
    """
    if left._sign is not right._sign:
        return -1 if left._sign.to_int() < right._sign.to_int() else 1

    if left._sign is Sign.ZERO:
        return 0

    order = magnitude.compare(left._digits, right._digits)
    return order if left._sign is Sign.POSITIVE else -order


def power(base: IntegerLike, exponent: int) -> BigInteger:
    """
    Возведение в неотрицательную степень (итеративное возведение в квадрат).

    Глубина стека постоянна, число умножений O(log exponent).

    Args:
        base: Основание
        exponent: Нативный int >= 0

    Raises:
        TypeError: Если exponent не int (например, float)
        ValueError: Если exponent < 0

    Examples:
        >>> power(10, 18)
        BigInteger('1000000000000000000')
    """
    if not isinstance(exponent, int):
        raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = BigInteger(1)
    square = BigInteger(base)
    while exponent > 0:
        if exponent % 2 == 1:
            result = result * square
        exponent //= 2
        if exponent > 0:
            square = square * square
    return result


def read_big_integer(stream: TextIO) -> BigInteger:
    """
    Чтение одного токена из текстового потока как BigInteger.

    Raises:
        InvalidFormat: Если токена нет или он не соответствует грамматике
    """
    sign, digits = read_decimal(stream)
    return BigInteger._from_parts(sign, digits)


def write_big_integer(stream: TextIO, value: BigInteger) -> None:
    """Запись десятичного представления value в текстовый поток"""
    stream.write(str(value))
