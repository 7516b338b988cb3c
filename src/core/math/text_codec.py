"""
Text Codec — десятичное текстовое представление величин

Парсинг десятичных строк в (знак, цифровые группы) и обратный рендеринг,
плюс потоковое чтение/запись одного токена.

ГРАММАТИКА:
    "0" | "-"? [1-9][0-9]*

Строка делится справа на куски по GROUP_WIDTH цифр; каждый кусок — одна
цифровая группа. Всё, что не соответствует грамматике (пустая строка,
нецифровые символы, ведущие нули, "-0", "+"), → InvalidFormat.
"""

import re
from typing import TextIO

from src.core.domain.radix import GROUP_WIDTH
from src.core.domain.sign import Sign
from src.core.math.errors import InvalidFormat

DECIMAL_PATTERN = re.compile(r"(?P<minus>-)?(?P<body>0|[1-9][0-9]*)")


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_decimal(text: str) -> tuple[Sign, list[int]]:
    """
    Разбор десятичной строки.

    Args:
        text: Строка по грамматике "0" | "-"? [1-9][0-9]*

    Returns:
        (sign, digits) — знак и цифровые группы, младшая первой

    Raises:
        TypeError: Если text не str
        InvalidFormat: Если text не соответствует грамматике

    Examples:
        >>> parse_decimal("-12345678901")
        (<Sign.NEGATIVE: 'negative'>, [345678901, 12])
        >>> parse_decimal("0")
        (<Sign.ZERO: 'zero'>, [0])
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    match = DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormat(f"invalid decimal integer literal: {text!r}")

    body = match.group("body")
    if body == "0":
        if match.group("minus"):
            raise InvalidFormat(f"negative zero is not a valid literal: {text!r}")
        return Sign.ZERO, [0]

    digits = []
    for end in range(len(body), 0, -GROUP_WIDTH):
        digits.append(int(body[max(0, end - GROUP_WIDTH):end]))

    sign = Sign.NEGATIVE if match.group("minus") else Sign.POSITIVE
    return sign, digits


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def render_decimal(sign: Sign, digits: list[int]) -> str:
    """
    Десятичная строка величины со знаком.

    Старшая группа без дополнения, каждая следующая — ровно GROUP_WIDTH цифр
    с ведущими нулями.

    Examples:
        >>> render_decimal(Sign.POSITIVE, [1, 2])
        '2000000001'
        >>> render_decimal(Sign.ZERO, [0])
        '0'
    """
    if sign is Sign.ZERO:
        return "0"

    parts = ["-"] if sign is Sign.NEGATIVE else []
    parts.append(str(digits[-1]))
    for group in reversed(digits[:-1]):
        parts.append(f"{group:0{GROUP_WIDTH}d}")
    return "".join(parts)


# =============================================================================
# ПОТОКОВЫЙ ВВОД/ВЫВОД
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение одного токена, разделённого пробельными символами.

    Пропускает ведущие пробельные символы, читает до следующего пробельного
    символа или конца потока. Завершающий разделитель поглощается.

    Raises:
        InvalidFormat: Если поток закончился до начала токена
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    if not char:
        raise InvalidFormat("unexpected end of stream: no token to read")

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read_decimal(stream: TextIO) -> tuple[Sign, list[int]]:
    """Чтение одного токена из потока и его разбор как десятичного целого"""
    return parse_decimal(read_token(stream))
