"""
Person — простая модель держателя данных (имя + возраст)

Immutable Pydantic модель. Никакой валидации возраста: отрицательные и
дробные значения принимаются как есть.
"""

from typing import Union

from pydantic import BaseModel, Field


class Person(BaseModel):
    """
    Модель человека.

    Поддерживает позиционное создание: Person("Ada", 30).
    """

    name: str = Field(..., description="Имя")
    age: Union[int, float] = Field(..., description="Возраст (без проверки диапазона)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, name: str, age: Union[int, float], **data) -> None:
        super().__init__(name=name, age=age, **data)

    def get_details(self) -> str:
        """
        Строка для отображения.

        Returns:
            "Name: {name}, Age: {age}"
        """
        return f"Name: {self.name}, Age: {self.age}"
