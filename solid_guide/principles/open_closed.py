"""Open/Closed: open for extension, closed for modification."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


# Violation: every new shape means another branch in the calculator.


@dataclass
class RawShape:
    kind: str
    dimensions: tuple[float, ...]


class ShapeAreaCalculator:
    def total_area(self, shapes: list[RawShape]) -> float:
        total = 0.0
        for shape in shapes:
            if shape.kind == "circle":
                (radius,) = shape.dimensions
                total += math.pi * radius ** 2
            elif shape.kind == "rectangle":
                width, height = shape.dimensions
                total += width * height
            else:
                raise ValueError(f"unknown shape kind: {shape.kind}")
        return total


# Adherence: new shapes extend Shape; the calculator never changes.


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...


@dataclass
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius ** 2


@dataclass
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass
class Triangle(Shape):
    base: float
    height: float

    def area(self) -> float:
        return 0.5 * self.base * self.height


class AreaCalculator:
    def total_area(self, shapes: list[Shape]) -> float:
        return sum(shape.area() for shape in shapes)
