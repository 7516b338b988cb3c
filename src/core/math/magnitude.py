"""
Magnitude — алгоритмы над неотрицательными величинами

Величина — это список цифровых групп в системе с основанием RADIX,
младшая группа первой. Функции модуля работают только с величинами
(без знака); знак добавляет BigInteger.

Модуль является внутренней границей видимости: BigInteger, long_division
и Rational обращаются к цифровым группам только через эти функции,
публично группы доступны лишь как неизменяемый кортеж.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции нормализован: не пуст, старшая группа ненулевая
   (кроме нуля [0])
2. После переноса/заёма каждая группа лежит в [0, RADIX)
3. Входные списки никогда не модифицируются, результат — всегда новый список
4. Нативная арифметика int применяется только к отдельным группам
   и их произведениям (< RADIX ** 2)
"""

from src.core.domain.radix import GROUP_WIDTH, RADIX

__all__ = [
    "RADIX",
    "GROUP_WIDTH",
    "normalize",
    "is_zero",
    "is_one",
    "from_int",
    "to_int",
    "compare",
    "add",
    "subtract",
    "multiply_by_group",
    "multiply",
    "shift_and_add",
]


# =============================================================================
# НОРМАЛИЗАЦИЯ И ПРЕДИКАТЫ
# =============================================================================


def normalize(digits: list[int]) -> list[int]:
    """
    Удаление незначащих старших нулевых групп (in-place).

    Оставляет минимум одну группу: [0, 0, 0] → [0].

    Args:
        digits: Цифровые группы, младшая первой

    Returns:
        Тот же список, нормализованный
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero(digits: list[int]) -> bool:
    """Величина равна нулю (предполагается нормализованный вход)"""
    return len(digits) == 1 and digits[0] == 0


def is_one(digits: list[int]) -> bool:
    """Величина равна единице (предполагается нормализованный вход)"""
    return len(digits) == 1 and digits[0] == 1


def from_int(value: int) -> list[int]:
    """
    Конверсия нативного неотрицательного int в величину.

    Raises:
        ValueError: Если value < 0

    Examples:
        >>> from_int(12345678901234567890)
        [234567890, 345678901, 12]
    """
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")

    if value == 0:
        return [0]

    digits = []
    while value > 0:
        value, group = divmod(value, RADIX)
        digits.append(group)
    return digits


def to_int(digits: list[int]) -> int:
    """Конверсия величины в нативный int (схема Горнера)"""
    result = 0
    for group in reversed(digits):
        result = result * RADIX + group
    return result


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(left: list[int], right: list[int]) -> int:
    """
    Трёхзначное сравнение двух нормализованных величин.

    Сначала по количеству групп, затем по группам от старшей к младшей.

    Returns:
        -1 если left < right, 0 если равны, +1 если left > right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1

    for i in range(len(left) - 1, -1, -1):
        if left[i] != right[i]:
            return -1 if left[i] < right[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(left: list[int], right: list[int]) -> list[int]:
    """
    Сумма величин: поразрядное сложение с переносом.

    Перенос за пределы старшей группы добавляет новую группу.
    """
    if len(left) < len(right):
        left, right = right, left

    result = []
    carry = 0
    for i, group in enumerate(left):
        total = group + carry
        if i < len(right):
            total += right[i]
        if total >= RADIX:
            total -= RADIX
            carry = 1
        else:
            carry = 0
        result.append(total)

    if carry:
        result.append(carry)

    return normalize(result)


def subtract(left: list[int], right: list[int]) -> list[int]:
    """
    Разность величин left - right с заёмом.

    Args:
        left: Уменьшаемое (должно быть >= right)
        right: Вычитаемое

    Raises:
        ValueError: Если left < right (результат был бы отрицательным)
    """
    if compare(left, right) < 0:
        raise ValueError("subtrahend magnitude exceeds minuend magnitude")

    result = []
    borrow = 0
    for i, group in enumerate(left):
        diff = group - borrow
        if i < len(right):
            diff -= right[i]
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_group(digits: list[int], group: int, shift: int = 0) -> list[int]:
    """
    Частичное произведение: величина × одна цифровая группа, сдвинутое на shift групп.

    Сдвиг эквивалентен приписыванию shift нулевых групп в младшие разряды.
    Произведение group * digit + carry < RADIX ** 2 считается в нативном int.

    Args:
        digits: Множимое
        group: Одна цифровая группа в [0, RADIX)
        shift: Позиция группы множителя

    Raises:
        ValueError: Если group вне [0, RADIX)
    """
    if not 0 <= group < RADIX:
        raise ValueError(f"digit group {group} outside [0, {RADIX})")

    if group == 0 or is_zero(digits):
        return [0]

    result = [0] * shift
    carry = 0
    for digit in digits:
        carry, low = divmod(digit * group + carry, RADIX)
        result.append(low)

    if carry:
        result.append(carry)

    return normalize(result)


def multiply(left: list[int], right: list[int]) -> list[int]:
    """
    Произведение величин по школьному алгоритму.

    Множителем выбирается операнд с меньшим числом групп: каждая его группа
    даёт одно частичное произведение, которые накапливаются сложением.
    """
    if is_zero(left) or is_zero(right):
        return [0]

    if len(left) < len(right):
        left, right = right, left

    result = [0]
    for position, group in enumerate(right):
        if group == 0:
            continue
        result = add(result, multiply_by_group(left, group, position))

    return result


# =============================================================================
# СДВИГ
# =============================================================================


def shift_and_add(digits: list[int], group: int) -> list[int]:
    """
    digits * RADIX + group: "снос" очередной группы делимого.

    Args:
        digits: Текущий остаток
        group: Следующая группа делимого в [0, RADIX)
    """
    if is_zero(digits):
        return [group]
    return [group] + digits
