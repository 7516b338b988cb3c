"""
Radix — параметры представления цифровых групп

Каждое значение BigInteger хранится как последовательность цифровых групп
в системе счисления с основанием RADIX (младшая группа первой).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифровая группа лежит в диапазоне [0, RADIX)
2. RADIX == 10 ** GROUP_WIDTH (одна группа = ровно GROUP_WIDTH десятичных цифр)
3. Произведение двух групп < RADIX ** 2 помещается в промежуточное int без потерь
"""

from typing import Final

# Основание одной цифровой группы
RADIX: Final[int] = 1_000_000_000

# Количество десятичных цифр в одной группе
GROUP_WIDTH: Final[int] = 9

# Верхняя граница шагов бинарного поиска цифры частного: ceil(log2(RADIX))
QUOTIENT_SEARCH_STEPS: Final[int] = 30
