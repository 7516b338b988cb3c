"""
Sign — трёхзначный знак числа

Явный вариант {NEGATIVE, ZERO, POSITIVE} с явным отображением в {-1, 0, +1}
для арифметики знаков. Используется и BigInteger, и Rational.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак значения (строковые значения совпадают с JSON контрактами)"""

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"

    def to_int(self) -> int:
        """
        Отображение знака в целое число.

        Returns:
            -1 для NEGATIVE, 0 для ZERO, +1 для POSITIVE
        """
        if self is Sign.NEGATIVE:
            return -1
        if self is Sign.POSITIVE:
            return 1
        return 0

    @classmethod
    def from_int(cls, value: int) -> "Sign":
        """
        Знак нативного целого числа.

        Examples:
            >>> Sign.from_int(-42)
            <Sign.NEGATIVE: 'negative'>
            >>> Sign.from_int(0)
            <Sign.ZERO: 'zero'>
        """
        if value < 0:
            return cls.NEGATIVE
        if value > 0:
            return cls.POSITIVE
        return cls.ZERO

    def negate(self) -> "Sign":
        """Смена знака; ZERO остаётся ZERO"""
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.ZERO

    def combine(self, other: "Sign") -> "Sign":
        """
        Знак произведения/частного двух значений.

        Args:
            other: Знак второго операнда

        Returns:
            Sign.from_int(self.to_int() * other.to_int())
        """
        return Sign.from_int(self.to_int() * other.to_int())
