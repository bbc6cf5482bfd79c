"""Tests for the interface segregation examples."""

import pytest

from solid_guide.principles.interface_segregation import (
    BasicPrinter,
    Fax,
    LegacyBasicPrinter,
    MultiFunctionDevice,
    OfficeMachine,
    Printer,
    Scanner,
    print_all,
)


class TestFatInterface:
    """Test the device forced to implement methods it cannot support."""

    def test_legacy_printer_prints(self):
        assert LegacyBasicPrinter().print_document("memo") == "printed: memo"

    def test_legacy_printer_is_forced_to_stub(self):
        printer = LegacyBasicPrinter()
        assert isinstance(printer, MultiFunctionDevice)
        with pytest.raises(NotImplementedError):
            printer.scan_document("memo")
        with pytest.raises(NotImplementedError):
            printer.fax_document("memo", "555-0100")


class TestRoleInterfaces:
    """Test the segregated roles."""

    def test_basic_printer_only_prints(self):
        printer = BasicPrinter()
        assert isinstance(printer, Printer)
        assert not isinstance(printer, Scanner)
        assert not isinstance(printer, Fax)
        assert not hasattr(printer, "scan_document")

    def test_office_machine_fills_every_role(self):
        machine = OfficeMachine()
        assert isinstance(machine, Printer)
        assert isinstance(machine, Scanner)
        assert isinstance(machine, Fax)
        assert machine.scan_document("memo") == "scanned: memo"
        assert machine.fax_document("memo", "555-0100") == "faxed to 555-0100: memo"

    @pytest.mark.parametrize("printer", [BasicPrinter(), OfficeMachine()])
    def test_print_all_needs_only_a_printer(self, printer):
        assert print_all(printer, ["a", "b"]) == ["printed: a", "printed: b"]

    def test_roles_are_abstract(self):
        for role in (Printer, Scanner, Fax):
            with pytest.raises(TypeError):
                role()
