"""
Тесты для модуля Magnitude

Проверяет:
1. Нормализацию (удаление незначащих старших групп)
2. Конверсию int ↔ величина
3. Трёхзначное сравнение величин
4. Сложение с переносом и вычитание с заёмом
5. Частичные произведения и школьное умножение
6. Инвариант диапазона групп [0, RADIX)
"""

import random

import pytest

from src.core.math.magnitude import (
    RADIX,
    add,
    compare,
    from_int,
    is_one,
    is_zero,
    multiply,
    multiply_by_group,
    normalize,
    shift_and_add,
    subtract,
    to_int,
)


def _groups_in_range(digits: list[int]) -> bool:
    return all(0 <= group < RADIX for group in digits)


# =============================================================================
# НОРМАЛИЗАЦИЯ И КОНВЕРСИЯ
# =============================================================================


class TestNormalize:
    """Тесты для normalize"""

    def test_strips_leading_zero_groups(self) -> None:
        """Старшие нулевые группы удаляются"""
        assert normalize([5, 0, 0]) == [5]
        assert normalize([0, 7, 0]) == [0, 7]

    def test_keeps_single_zero(self) -> None:
        """Ноль остаётся одной группой [0]"""
        assert normalize([0, 0, 0]) == [0]
        assert normalize([0]) == [0]

    def test_empty_becomes_zero(self) -> None:
        """Пустой список превращается в [0]"""
        assert normalize([]) == [0]

    def test_predicates(self) -> None:
        """is_zero / is_one"""
        assert is_zero([0])
        assert not is_zero([0, 1])
        assert is_one([1])
        assert not is_one([1, 1])


class TestIntConversion:
    """Тесты конверсии int ↔ величина"""

    def test_from_int_splits_into_groups(self) -> None:
        """Число делится на группы по 9 цифр, младшая первой"""
        assert from_int(12345678901234567890) == [234567890, 345678901, 12]
        assert from_int(0) == [0]
        assert from_int(RADIX) == [0, 1]

    def test_from_int_rejects_negative(self) -> None:
        """Отрицательная величина невозможна"""
        with pytest.raises(ValueError, match="non-negative"):
            from_int(-1)

    def test_to_int_inverts_from_int(self) -> None:
        """to_int(from_int(n)) == n"""
        for value in (0, 1, RADIX - 1, RADIX, RADIX**3 + 17):
            assert to_int(from_int(value)) == value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestCompare:
    """Тесты для compare"""

    def test_group_count_decides_first(self) -> None:
        """Больше групп — больше величина"""
        assert compare([0, 1], [999_999_999]) == 1
        assert compare([999_999_999], [0, 1]) == -1

    def test_most_significant_difference_decides(self) -> None:
        """При равном числе групп решает старшая отличающаяся группа"""
        assert compare([9, 1], [0, 2]) == -1
        assert compare([0, 2], [9, 1]) == 1

    def test_equal(self) -> None:
        """Равные величины"""
        assert compare([1, 2, 3], [1, 2, 3]) == 0
        assert compare([0], [0]) == 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


class TestAdd:
    """Тесты для add"""

    def test_carry_propagates_into_new_group(self) -> None:
        """Перенос за старшую группу добавляет новую группу"""
        assert add([999_999_999], [1]) == [0, 1]
        assert add([999_999_999, 999_999_999], [1]) == [0, 0, 1]

    def test_different_lengths(self) -> None:
        """Операнды разной длины"""
        assert add([1], [2, 3]) == [3, 3]
        assert add([2, 3], [1]) == [3, 3]

    def test_inputs_not_modified(self) -> None:
        """Входные списки не модифицируются"""
        left, right = [999_999_999], [1]
        add(left, right)
        assert left == [999_999_999]
        assert right == [1]

    def test_matches_native_int(self) -> None:
        """Совпадение с нативной арифметикой на случайных величинах"""
        rng = random.Random(20240101)
        for _ in range(200):
            a = rng.randrange(10**rng.randint(1, 60))
            b = rng.randrange(10**rng.randint(1, 60))
            result = add(from_int(a), from_int(b))
            assert to_int(result) == a + b
            assert _groups_in_range(result)


class TestSubtract:
    """Тесты для subtract"""

    def test_borrow_across_groups(self) -> None:
        """Заём проходит через несколько групп"""
        assert subtract([0, 0, 1], [1]) == [999_999_999, 999_999_999]

    def test_equal_magnitudes_give_zero(self) -> None:
        """Равные величины дают [0]"""
        assert subtract([5, 6], [5, 6]) == [0]

    def test_negative_result_rejected(self) -> None:
        """Вычитание большего из меньшего запрещено"""
        with pytest.raises(ValueError, match="exceeds"):
            subtract([1], [0, 1])

    def test_matches_native_int(self) -> None:
        """Совпадение с нативной арифметикой на случайных величинах"""
        rng = random.Random(7)
        for _ in range(200):
            a = rng.randrange(10**rng.randint(1, 60))
            b = rng.randrange(a + 1)
            result = subtract(from_int(a), from_int(b))
            assert to_int(result) == a - b
            assert _groups_in_range(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMultiply:
    """Тесты для multiply_by_group и multiply"""

    def test_partial_product_with_shift(self) -> None:
        """Сдвиг приписывает нулевые группы"""
        assert multiply_by_group([2], 3, shift=2) == [0, 0, 6]

    def test_partial_product_carry(self) -> None:
        """Перенос из произведения двух максимальных групп"""
        top = RADIX - 1
        assert to_int(multiply_by_group([top, top], top)) == (RADIX**2 - 1) * top

    def test_partial_product_zero_group(self) -> None:
        """Умножение на нулевую группу даёт [0]"""
        assert multiply_by_group([1, 2, 3], 0, shift=4) == [0]

    def test_partial_product_rejects_out_of_range_group(self) -> None:
        """Группа должна лежать в [0, RADIX)"""
        with pytest.raises(ValueError, match="outside"):
            multiply_by_group([1], RADIX)

    def test_multiply_by_zero(self) -> None:
        """a * 0 == 0"""
        assert multiply([1, 2, 3], [0]) == [0]
        assert multiply([0], [1, 2, 3]) == [0]

    def test_operand_order_irrelevant(self) -> None:
        """Выбор множителя не влияет на результат"""
        short, long = from_int(987654321), from_int(10**50 + 12345)
        assert multiply(short, long) == multiply(long, short)

    def test_matches_native_int(self) -> None:
        """Совпадение с нативной арифметикой на случайных величинах"""
        rng = random.Random(42)
        for _ in range(100):
            a = rng.randrange(10**rng.randint(1, 80))
            b = rng.randrange(10**rng.randint(1, 80))
            result = multiply(from_int(a), from_int(b))
            assert to_int(result) == a * b
            assert _groups_in_range(result)


class TestShiftAndAdd:
    """Тесты для shift_and_add"""

    def test_brings_down_group(self) -> None:
        """digits * RADIX + group"""
        assert shift_and_add([5], 7) == [7, 5]
        assert to_int(shift_and_add([1, 2], 3)) == to_int([1, 2]) * RADIX + 3

    def test_zero_remainder(self) -> None:
        """Из нуля получается одна группа без старшего нуля"""
        assert shift_and_add([0], 7) == [7]
        assert shift_and_add([0], 0) == [0]
