"""Single Responsibility: a class should have one reason to change."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Order:
    order_id: str
    customer_email: str
    items: dict[str, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return sum(self.items.values())


# Violation: validation, storage and e-mail all live in one class.


class OrderProcessor:
    def __init__(self):
        self.orders: dict[str, Order] = {}
        self.sent: list[str] = []

    def process(self, order: Order) -> None:
        if not order.items:
            raise ValueError("order has no items")
        if "@" not in order.customer_email:
            raise ValueError("invalid e-mail address")
        self.orders[order.order_id] = order
        self.sent.append(
            f"To {order.customer_email}: order {order.order_id} "
            f"confirmed, total {order.total:.2f}"
        )


# Adherence: one class per reason to change, plus a thin coordinator.


class OrderValidator:
    def validate(self, order: Order) -> list[str]:
        errors = []
        if not order.items:
            errors.append("order has no items")
        if "@" not in order.customer_email:
            errors.append("invalid e-mail address")
        return errors


class InMemoryOrderRepository:
    def __init__(self):
        self._orders: dict[str, Order] = {}

    def save(self, order: Order) -> None:
        self._orders[order.order_id] = order

    def get(self, order_id: str) -> Optional[Order]:
        return self._orders.get(order_id)


class OrderMailer:
    def __init__(self):
        self.outbox: list[str] = []

    def send_confirmation(self, order: Order) -> str:
        message = (
            f"To {order.customer_email}: order {order.order_id} "
            f"confirmed, total {order.total:.2f}"
        )
        self.outbox.append(message)
        return message


class OrderService:
    def __init__(self, validator: OrderValidator,
                 repository: InMemoryOrderRepository, mailer: OrderMailer):
        self.validator = validator
        self.repository = repository
        self.mailer = mailer

    def place(self, order: Order) -> list[str]:
        errors = self.validator.validate(order)
        if errors:
            return errors
        self.repository.save(order)
        self.mailer.send_confirmation(order)
        return []
