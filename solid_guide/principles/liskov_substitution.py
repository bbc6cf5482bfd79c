"""
Liskov Substitution: subtypes must be usable wherever their base type is.

The classic trap is modelling a square as a special rectangle. Code written
against the rectangle's setters stops working when it is handed a square.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


# Violation: Square changes what Rectangle's setters promise.


class MutableRectangle:
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def set_width(self, width: float) -> None:
        self.width = width

    def set_height(self, height: float) -> None:
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class MutableSquare(MutableRectangle):
    def __init__(self, side: float):
        super().__init__(side, side)

    def set_width(self, width: float) -> None:
        self.width = self.height = width

    def set_height(self, height: float) -> None:
        self.width = self.height = height


def stretch(rect: MutableRectangle, width: float, height: float) -> float:
    """Callers expect the result to be width * height."""
    rect.set_width(width)
    rect.set_height(height)
    return rect.area()


# Adherence: siblings behind a contract every subtype can keep.


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def scaled(self, factor: float) -> "Shape":
        """Return a shape of the same type whose area is area() * factor ** 2."""


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def scaled(self, factor: float) -> "Rectangle":
        return Rectangle(self.width * factor, self.height * factor)


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def area(self) -> float:
        return self.side ** 2

    def scaled(self, factor: float) -> "Square":
        return Square(self.side * factor)


def total_scaled_area(shapes: list[Shape], factor: float) -> float:
    return sum(shape.scaled(factor).area() for shape in shapes)
