"""
DecimalFormat — параметры десятичного отображения Rational

Immutable Pydantic модель с настройками Rational.as_decimal().
"""

from pydantic import BaseModel, Field


class DecimalFormat(BaseModel):
    """
    Настройки десятичного представления дроби.

    Immutable модель (frozen=True): одна и та же конфигурация может
    переиспользоваться для множества вызовов as_decimal().
    """

    precision: int = Field(
        0, ge=0, strict=True, description="Количество цифр после десятичной точки"
    )
    trim_trailing_zeros: bool = Field(
        False,
        description=(
            "Убирать хвостовые нули дробной части "
            "(точное значение теряет дробную часть целиком)"
        ),
    )

    model_config = {"frozen": True}  # Immutable
