"""Interface Segregation: clients should not depend on methods they do not use."""

from abc import ABC, abstractmethod


# Violation: one fat interface forces stubs on simple devices.


class MultiFunctionDevice(ABC):
    @abstractmethod
    def print_document(self, document: str) -> str:
        ...

    @abstractmethod
    def scan_document(self, document: str) -> str:
        ...

    @abstractmethod
    def fax_document(self, document: str, number: str) -> str:
        ...


class LegacyBasicPrinter(MultiFunctionDevice):
    def print_document(self, document: str) -> str:
        return f"printed: {document}"

    def scan_document(self, document: str) -> str:
        raise NotImplementedError("this printer cannot scan")

    def fax_document(self, document: str, number: str) -> str:
        raise NotImplementedError("this printer cannot fax")


# Adherence: small role interfaces, implemented only where they apply.


class Printer(ABC):
    @abstractmethod
    def print_document(self, document: str) -> str:
        ...


class Scanner(ABC):
    @abstractmethod
    def scan_document(self, document: str) -> str:
        ...


class Fax(ABC):
    @abstractmethod
    def fax_document(self, document: str, number: str) -> str:
        ...


class BasicPrinter(Printer):
    def print_document(self, document: str) -> str:
        return f"printed: {document}"


class OfficeMachine(Printer, Scanner, Fax):
    def print_document(self, document: str) -> str:
        return f"printed: {document}"

    def scan_document(self, document: str) -> str:
        return f"scanned: {document}"

    def fax_document(self, document: str, number: str) -> str:
        return f"faxed to {number}: {document}"


def print_all(printer: Printer, documents: list[str]) -> list[str]:
    return [printer.print_document(document) for document in documents]
