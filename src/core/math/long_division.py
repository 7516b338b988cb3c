"""
Long Division — деление величин по группам

Деление "в столбик" в системе с основанием RADIX: группы делимого
обрабатываются от старшей к младшей, каждая цифра частного ищется
ограниченным бинарным поиском (нативного деления многогрупповых величин нет).

АЛГОРИТМ:
    rem = 0
    для каждой группы g делимого (от старшей):
        rem = rem * RADIX + g                  (shift_and_add)
        q = max{q in [0, RADIX): q * d <= rem}  (find_quotient_digit)
        quotient.append(q)
        rem = rem - q * d

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перед поиском цифры выполняется rem < RADIX * d, поэтому q < RADIX
2. После шага 0 <= rem < d
3. dividend == quotient * d + rem
4. Бинарный поиск завершается не более чем за QUOTIENT_SEARCH_STEPS итераций
5. Деление на нулевую величину → DivisionByZero (никогда не зацикливается)

СЛОЖНОСТЬ: O(log RADIX) умножений величины на группу на каждую группу
делимого, каждое умножение O(n) — доминирующая стоимость деления.
"""

import logging

from src.core.domain.radix import QUOTIENT_SEARCH_STEPS, RADIX
from src.core.math import magnitude
from src.core.math.errors import DivisionByZero

LOG = logging.getLogger(__name__)


# =============================================================================
# ПОИСК ЦИФРЫ ЧАСТНОГО
# =============================================================================


def find_quotient_digit(remainder: list[int], divisor: list[int]) -> int:
    """
    Наибольшая цифра q в [0, RADIX) такая, что q * divisor <= remainder.

    Бинарный поиск на полуинтервале [lo, hi): в середине mid сравнивается
    mid * divisor с remainder. Точное совпадение возвращается сразу,
    перебор сужает верхнюю границу, недобор — нижнюю. Поиск останавливается,
    когда hi - lo <= 1, ответом остаётся lo.

    Args:
        remainder: Текущий остаток (нормализованная величина)
        divisor: Делитель (ненулевая нормализованная величина)

    Returns:
        Единственное q: q * divisor <= remainder < (q + 1) * divisor

    Raises:
        DivisionByZero: Если divisor равен нулю
        ValueError: Если remainder >= RADIX * divisor (цифра не помещается в группу)

    Examples:
        >>> find_quotient_digit([100], [7])
        14
        >>> find_quotient_digit([999999999, 1], [2])
        999999999
    """
    if magnitude.is_zero(divisor):
        raise DivisionByZero("quotient digit search with zero divisor")

    if magnitude.compare(remainder, magnitude.shift_and_add(divisor, 0)) >= 0:
        raise ValueError("remainder is too large for a single quotient digit")

    lo, hi = 0, RADIX
    for _ in range(QUOTIENT_SEARCH_STEPS):
        if hi - lo <= 1:
            break

        mid = (lo + hi) // 2
        order = magnitude.compare(magnitude.multiply_by_group(divisor, mid), remainder)

        if order == 0:
            return mid
        if order > 0:
            hi = mid
        else:
            lo = mid

    return lo


# =============================================================================
# ДЕЛЕНИЕ ВЕЛИЧИН
# =============================================================================


def divide(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """
    Частное и остаток от деления величин.

    Порядок граничных случаев:
    1. divisor == 0 → DivisionByZero
    2. dividend == 0 → (0, 0)
    3. dividend < divisor → (0, dividend)
    4. divisor == 1 → (dividend, 0)

    Args:
        dividend: Делимое (нормализованная величина)
        divisor: Делитель (нормализованная величина)

    Returns:
        (quotient, remainder): dividend == quotient * divisor + remainder,
        0 <= remainder < divisor. Оба списка — новые объекты.

    Raises:
        DivisionByZero: Если divisor равен нулю
    """
    if magnitude.is_zero(divisor):
        raise DivisionByZero("division by zero magnitude")

    if magnitude.is_zero(dividend):
        return [0], [0]

    if magnitude.compare(dividend, divisor) < 0:
        return [0], list(dividend)

    if magnitude.is_one(divisor):
        return list(dividend), [0]

    LOG.debug(
        "Long division: dividend_groups=%d divisor_groups=%d",
        len(dividend),
        len(divisor),
    )

    quotient_msf = []  # старшая группа первой
    remainder = [0]
    for group in reversed(dividend):
        remainder = magnitude.shift_and_add(remainder, group)
        digit = find_quotient_digit(remainder, divisor)
        quotient_msf.append(digit)
        if digit:
            remainder = magnitude.subtract(
                remainder, magnitude.multiply_by_group(divisor, digit)
            )

    quotient = magnitude.normalize(quotient_msf[::-1])
    return quotient, remainder
