#!/usr/bin/env python3
"""
Walkthrough - the SOLID examples in action

This script runs each before/after pair side by side so the difference
is visible in the output rather than only in the code:
- Single Responsibility: one class doing three jobs vs. a coordinator
- Open/Closed: adding a shape with and without editing the calculator
- Liskov Substitution: the square that is not a rectangle
- Interface Segregation: stubbed methods vs. role interfaces
- Dependency Inversion: a hardwired sender vs. a composition root

Run: python examples/walkthrough.py
"""

from solid_guide.principles import (
    dependency_inversion as dip,
    interface_segregation as isp,
    liskov_substitution as lsp,
    open_closed as ocp,
    single_responsibility as srp,
)


def banner(title: str) -> None:
    print()
    print(title)
    print("-" * len(title))


def single_responsibility() -> None:
    banner("S: Single Responsibility")
    order = srp.Order("A-100", "ada@example.com", {"notebook": 4.5, "pen": 1.25})

    processor = srp.OrderProcessor()
    processor.process(order)
    print(f"OrderProcessor stored {list(processor.orders)} and sent {processor.sent}")

    service = srp.OrderService(
        srp.OrderValidator(), srp.InMemoryOrderRepository(), srp.OrderMailer()
    )
    print(f"OrderService errors for a bad order: "
          f"{service.place(srp.Order('A-101', 'nobody', {}))}")
    service.place(order)
    print(f"OrderService mailer outbox: {service.mailer.outbox}")


def open_closed() -> None:
    banner("O: Open/Closed")
    try:
        ocp.ShapeAreaCalculator().total_area([ocp.RawShape("triangle", (3.0, 4.0))])
    except ValueError as e:
        print(f"ShapeAreaCalculator needs editing: {e}")

    shapes = [ocp.Circle(1.0), ocp.Rectangle(2.0, 3.0), ocp.Triangle(3.0, 4.0)]
    print(f"AreaCalculator total: {ocp.AreaCalculator().total_area(shapes):.2f}")


def liskov_substitution() -> None:
    banner("L: Liskov Substitution")
    print(f"stretch(rectangle, 2, 3) = {lsp.stretch(lsp.MutableRectangle(1, 1), 2, 3)}")
    print(f"stretch(square, 2, 3)    = {lsp.stretch(lsp.MutableSquare(1), 2, 3)}  <- surprise")

    shapes = [lsp.Rectangle(2.0, 3.0), lsp.Square(2.0)]
    print(f"total_scaled_area(x2) = {lsp.total_scaled_area(shapes, 2.0)}")


def interface_segregation() -> None:
    banner("I: Interface Segregation")
    try:
        isp.LegacyBasicPrinter().scan_document("contract")
    except NotImplementedError as e:
        print(f"LegacyBasicPrinter: {e}")

    for device in (isp.BasicPrinter(), isp.OfficeMachine()):
        print(f"{type(device).__name__}: {isp.print_all(device, ['contract'])}")


def dependency_inversion() -> None:
    banner("D: Dependency Inversion")
    hardwired = dip.HardwiredNotificationService()
    hardwired.notify("ada@example.com", "build passed")
    print(f"Hardwired service always uses {type(hardwired.sender).__name__}")

    for channel in ("email", "sms"):
        service = dip.build_notification_service(channel)
        service.notify("ops", "build passed")
        print(f"{channel}: {service.sender.outbox}")


def main() -> None:
    single_responsibility()
    open_closed()
    liskov_substitution()
    interface_segregation()
    dependency_inversion()


if __name__ == "__main__":
    main()
