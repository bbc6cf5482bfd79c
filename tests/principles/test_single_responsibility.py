"""Tests for the single responsibility examples."""

import pytest

from solid_guide.principles.single_responsibility import (
    InMemoryOrderRepository,
    Order,
    OrderMailer,
    OrderProcessor,
    OrderService,
    OrderValidator,
)


class TestOrder:
    """Test the order data class."""

    def test_total_sums_item_prices(self, valid_order):
        assert valid_order.total == pytest.approx(69.5)

    def test_empty_order_total_is_zero(self):
        assert Order("o", "a@b.c").total == 0


class TestOrderProcessor:
    """Test the class that mixes responsibilities."""

    def test_process_stores_and_notifies(self, valid_order):
        processor = OrderProcessor()
        processor.process(valid_order)

        assert processor.orders["order-001"] is valid_order
        assert processor.sent == [
            "To ada@example.com: order order-001 confirmed, total 69.50"
        ]

    def test_process_rejects_empty_order(self):
        processor = OrderProcessor()
        with pytest.raises(ValueError, match="no items"):
            processor.process(Order("o", "ada@example.com", {}))
        assert processor.orders == {}
        assert processor.sent == []

    def test_process_rejects_bad_address(self):
        with pytest.raises(ValueError, match="e-mail"):
            OrderProcessor().process(Order("o", "nobody", {"pen": 1.0}))


class TestSplitResponsibilities:
    """Test the collaborators and the coordinating service."""

    def test_validator_reports_every_problem(self, invalid_order):
        errors = OrderValidator().validate(invalid_order)
        assert errors == ["order has no items", "invalid e-mail address"]

    def test_validator_accepts_valid_order(self, valid_order):
        assert OrderValidator().validate(valid_order) == []

    def test_repository_round_trip(self, valid_order):
        repository = InMemoryOrderRepository()
        assert repository.get("order-001") is None
        repository.save(valid_order)
        assert repository.get("order-001") is valid_order

    def test_mailer_returns_and_records_message(self, valid_order):
        mailer = OrderMailer()
        message = mailer.send_confirmation(valid_order)
        assert mailer.outbox == [message]
        assert "total 69.50" in message

    def test_service_places_valid_order(self, valid_order):
        service = OrderService(OrderValidator(), InMemoryOrderRepository(), OrderMailer())

        assert service.place(valid_order) == []
        assert service.repository.get("order-001") is valid_order
        assert len(service.mailer.outbox) == 1

    def test_service_does_not_store_or_mail_invalid_order(self, invalid_order):
        service = OrderService(OrderValidator(), InMemoryOrderRepository(), OrderMailer())

        errors = service.place(invalid_order)

        assert errors
        assert service.repository.get("order-002") is None
        assert service.mailer.outbox == []

    def test_service_accepts_substitute_collaborators(self, valid_order):
        """A collaborator can be swapped without touching the others."""

        class RecordingMailer(OrderMailer):
            def send_confirmation(self, order):
                self.outbox.append(order.order_id)
                return order.order_id

        service = OrderService(OrderValidator(), InMemoryOrderRepository(), RecordingMailer())
        service.place(valid_order)
        assert service.mailer.outbox == ["order-001"]
