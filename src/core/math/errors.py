"""
Errors — таксономия ошибок точной арифметики

Все остальные операции (сложение, вычитание, умножение, сравнение,
сокращение, рендеринг) тотальны на корректных входах и не падают.
"""


class InvalidFormat(ValueError):
    """
    Текст не соответствует грамматике десятичного целого.

    Грамматика: "0" | "-"? [1-9][0-9]*

    Примеры невалидного ввода: "", "-", "007", "-0", "+5", "12a", " 1".
    Также поднимается для снимков, нарушающих инварианты цифровых групп.
    Никогда не коэрцируется молча в "какое-то" значение.
    """

    pass


class DivisionByZero(ZeroDivisionError):
    """
    Делитель равен нулю.

    Поднимается для //, %, divmod над BigInteger, для деления Rational
    на нулевую дробь и для Rational с нулевым знаменателем.
    """

    pass
