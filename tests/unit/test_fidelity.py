"""Unit tests for the example fidelity checks."""

from dataclasses import replace
from unittest.mock import patch

import pytest

from solid_guide.errors import FidelityError, UnknownPrincipleError
from solid_guide.fidelity import (
    CheckResult,
    FidelityChecker,
    FidelityReport,
    public_methods,
    raises_not_implemented,
    stubbed_methods,
)
from solid_guide.principles import interface_segregation, single_responsibility


class PrinterWithoutScanner(interface_segregation.Printer, interface_segregation.Scanner):
    def print_document(self, document):
        return f"printed: {document}"

    def scan_document(self, document):
        raise NotImplementedError("no scanner fitted")


class RebadgedPrinter(PrinterWithoutScanner):
    pass


class TestHelpers:
    """Test the introspection helpers."""

    def test_public_methods(self):
        assert public_methods(single_responsibility.InMemoryOrderRepository) == ["get", "save"]
        assert public_methods(single_responsibility.Order) == []

    def test_raises_not_implemented(self):
        legacy = interface_segregation.LegacyBasicPrinter
        assert raises_not_implemented(legacy.scan_document) is True
        assert raises_not_implemented(legacy.print_document) is False

    def test_raises_not_implemented_bare_name(self):
        def stub():
            raise NotImplementedError

        assert raises_not_implemented(stub) is True

    def test_stubbed_methods_follow_the_mro(self):
        assert stubbed_methods(RebadgedPrinter) == ["scan_document"]
        assert stubbed_methods(interface_segregation.LegacyBasicPrinter) == [
            "fax_document", "scan_document",
        ]

    def test_stubbed_methods_skip_abstract_bases(self):
        assert stubbed_methods(interface_segregation.OfficeMachine) == []
        assert stubbed_methods(interface_segregation.Printer) == []

    def test_overridden_stub_is_not_reported(self):
        class FittedPrinter(PrinterWithoutScanner):
            def scan_document(self, document):
                return f"scanned: {document}"

        assert stubbed_methods(FittedPrinter) == []


class TestReport:
    """Test report aggregation."""

    def test_empty_report_passes(self):
        report = FidelityReport()
        assert report.passed is True
        assert report.summary() == "0/0 checks passed"

    def test_failures(self):
        ok = CheckResult("S", "a", True, "fine")
        bad = CheckResult("D", "b", False, "broken")
        report = FidelityReport([ok, bad])

        assert report.passed is False
        assert report.failures() == [bad]
        assert report.summary() == "1/2 checks passed"


class TestFidelityChecker:
    """Test the checks against the shipped examples."""

    def test_all_examples_demonstrate_their_principle(self, default_config):
        report = FidelityChecker(default_config).run()

        assert len(report.results) == 10
        assert report.failures() == []

    @pytest.mark.parametrize("letter", ["S", "O", "L", "I", "D"])
    def test_each_principle_has_adherence_and_violation_checks(self, letter):
        report = FidelityChecker().run([letter])
        assert {r.principle for r in report.results} == {letter}
        assert {r.name.split("_")[1] for r in report.results} == {"adherence", "violation"}

    def test_keys_accept_slugs(self):
        report = FidelityChecker().run(["dependency-inversion"])
        assert [r.name for r in report.results] == ["dip_adherence", "dip_violation"]

    def test_unknown_key(self):
        with pytest.raises(UnknownPrincipleError):
            FidelityChecker().run(["Q"])

    def test_require_returns_report(self):
        assert FidelityChecker().require(["L"]).passed

    def test_max_public_methods_threshold(self, default_config):
        config = replace(
            default_config,
            fidelity=replace(default_config.fidelity, max_public_methods=1),
        )
        result = FidelityChecker(config).run(["S"]).results[0]

        assert result.name == "srp_adherence"
        assert result.passed is False
        assert "InMemoryOrderRepository" in result.detail

    def test_require_raises_on_failure(self, default_config):
        config = replace(
            default_config,
            fidelity=replace(default_config.fidelity, max_public_methods=1),
        )
        with pytest.raises(FidelityError) as exc_info:
            FidelityChecker(config).require(["S"])

        assert [f.name for f in exc_info.value.failures] == ["srp_adherence"]

    def test_fixed_violation_is_reported(self):
        """A violation example that stops violating makes the guide wrong too."""
        def scan_document(self, document):
            return f"scanned: {document}"

        def fax_document(self, document, number):
            return f"faxed: {document}"

        legacy = interface_segregation.LegacyBasicPrinter
        with patch.object(legacy, "scan_document", scan_document), \
                patch.object(legacy, "fax_document", fax_document):
            report = FidelityChecker().run(["I"])

        violation = [r for r in report.results if r.name == "isp_violation"][0]
        assert violation.passed is False

    def test_inherited_stub_fails_adherence(self):
        with patch.object(interface_segregation, "OfficeMachine", RebadgedPrinter):
            report = FidelityChecker().run(["I"])

        adherence = [r for r in report.results if r.name == "isp_adherence"][0]
        assert adherence.passed is False
        assert "OfficeMachine.scan_document" in adherence.detail

    def test_crashing_check_is_a_failure(self):
        checker = FidelityChecker()
        with patch.object(
            single_responsibility.OrderProcessor, "process", side_effect=RuntimeError("boom")
        ):
            report = checker.run(["S"])

        violation = [r for r in report.results if r.name == "srp_violation"][0]
        assert violation.passed is False
        assert "boom" in violation.detail

    def test_results_are_logged(self):
        with patch("solid_guide.fidelity.log_check_result") as log_check:
            FidelityChecker().run(["O"])

        assert log_check.call_count == 2
        principle, check, passed = log_check.call_args_list[0].args[1:4]
        assert (principle, check, passed) == ("O", "ocp_adherence", True)
