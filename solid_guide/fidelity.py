"""
Automated checks that each example still demonstrates its principle.

Every principle gets two kinds of check: the adherence example must
follow the principle, and the violation example must still break it.
A refactor that accidentally "fixes" a violation snippet makes the guide
as wrong as one that breaks an adherence snippet.
"""

import ast
import inspect
import math
import textwrap
import typing
from dataclasses import dataclass, field
from typing import Callable, Optional

from .catalog import Principle, get_principle, list_principles, load_example
from .config.defaults import DefaultConfig, get_default_config
from .errors import FidelityError
from .logging import get_logger, log_check_result
from .principles import (
    dependency_inversion,
    interface_segregation,
    liskov_substitution,
    open_closed,
    single_responsibility,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one fidelity check."""
    principle: str
    name: str
    passed: bool
    detail: str


@dataclass
class FidelityReport:
    """All check results for one run."""
    results: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.passed]

    def summary(self) -> str:
        failed = len(self.failures())
        return f"{len(self.results) - failed}/{len(self.results)} checks passed"


def public_methods(cls: type) -> list[str]:
    """Names of public functions defined on a class or its bases."""
    return sorted(
        name for name, _ in inspect.getmembers(cls, inspect.isfunction)
        if not name.startswith("_")
    )


def raises_not_implemented(func: Callable) -> bool:
    """True if the function body contains ``raise NotImplementedError``."""
    tree = ast.parse(textwrap.dedent(inspect.getsource(func)))
    for node in ast.walk(tree):
        if isinstance(node, ast.Raise) and node.exc is not None:
            exc = node.exc.func if isinstance(node.exc, ast.Call) else node.exc
            if isinstance(exc, ast.Name) and exc.id == "NotImplementedError":
                return True
    return False


def stubbed_methods(cls: type) -> list[str]:
    """
    Methods a class resolves to a ``NotImplementedError`` stub.

    Follows the MRO so inherited stubs count; definitions on abstract
    bases are skipped, since those are the interface itself.
    """
    seen = set()
    stubs = []
    for klass in cls.__mro__:
        if klass is object:
            continue
        abstract = inspect.isabstract(klass)
        for name, member in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if not abstract and inspect.isfunction(member) and raises_not_implemented(member):
                stubs.append(name)
    return sorted(stubs)


class FidelityChecker:
    """Runs the fidelity checks for some or all principles."""

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.params = self.config.fidelity
        self.checks: dict[str, list[Callable[[], CheckResult]]] = {
            "S": [self.check_srp_adherence, self.check_srp_violation],
            "O": [self.check_ocp_adherence, self.check_ocp_violation],
            "L": [self.check_lsp_adherence, self.check_lsp_violation],
            "I": [self.check_isp_adherence, self.check_isp_violation],
            "D": [self.check_dip_adherence, self.check_dip_violation],
        }

    def run(self, keys: Optional[list[str]] = None) -> FidelityReport:
        """
        Run checks for the selected principles.

        Args:
            keys: Principle letters, slugs or names; defaults to all five

        Returns:
            Report with one result per check
        """
        principles = (
            [get_principle(key) for key in keys] if keys else list_principles()
        )

        report = FidelityReport()
        for principle in principles:
            for check in self.checks[principle.letter]:
                result = self._run_check(principle, check)
                log_check_result(
                    logger, result.principle, result.name, result.passed, result.detail
                )
                report.results.append(result)

        logger.info("Fidelity run finished", summary=report.summary())
        return report

    def require(self, keys: Optional[list[str]] = None) -> FidelityReport:
        """Run checks and raise FidelityError if any fail."""
        report = self.run(keys)
        if not report.passed:
            names = ", ".join(f"{r.principle}:{r.name}" for r in report.failures())
            raise FidelityError(
                f"Examples no longer demonstrate their principle: {names}",
                failures=report.failures(),
            )
        return report

    def _run_check(self, principle: Principle, check: Callable[[], CheckResult]) -> CheckResult:
        name = check.__name__.removeprefix("check_")
        try:
            return check()
        except Exception as e:
            logger.exception("Fidelity check crashed", principle=principle.letter, check=name)
            return CheckResult(principle.letter, name, False, f"check raised {e!r}")

    # Single Responsibility

    def check_srp_adherence(self) -> CheckResult:
        srp = single_responsibility
        principle = get_principle("S")
        limit = self.params.max_public_methods

        crowded = {}
        for object_name in principle.adherence:
            methods = public_methods(load_example(principle, object_name))
            if len(methods) > limit:
                crowded[object_name] = methods
        if crowded:
            return CheckResult("S", "srp_adherence", False,
                               f"classes with more than {limit} public methods: {crowded}")

        service = srp.OrderService(
            srp.OrderValidator(), srp.InMemoryOrderRepository(), srp.OrderMailer()
        )
        bad = srp.Order("bad", "no-address", {})
        good = srp.Order("good", "ada@example.com", {"book": 12.5})
        if not service.place(bad) or service.repository.get("bad") is not None:
            return CheckResult("S", "srp_adherence", False,
                               "invalid order was accepted or stored")
        if service.place(good) or service.repository.get("good") is not good:
            return CheckResult("S", "srp_adherence", False, "valid order was not stored")
        if len(service.mailer.outbox) != 1:
            return CheckResult("S", "srp_adherence", False,
                               "expected exactly one confirmation to be sent")
        return CheckResult("S", "srp_adherence", True,
                           "each collaborator has one job and the service only coordinates")

    def check_srp_violation(self) -> CheckResult:
        srp = single_responsibility
        processor = srp.OrderProcessor()
        processor.process(srp.Order("o-1", "ada@example.com", {"book": 12.5}))

        jobs = {
            "stores": bool(processor.orders),
            "notifies": bool(processor.sent),
        }
        try:
            processor.process(srp.Order("o-2", "ada@example.com", {}))
            jobs["validates"] = False
        except ValueError:
            jobs["validates"] = True

        if all(jobs.values()):
            return CheckResult("S", "srp_violation", True,
                               "OrderProcessor validates, stores and notifies in one class")
        return CheckResult("S", "srp_violation", False,
                           f"OrderProcessor no longer mixes responsibilities: {jobs}")

    # Open/Closed

    def check_ocp_adherence(self) -> CheckResult:
        ocp = open_closed

        class Hexagon(ocp.Shape):
            def __init__(self, side: float):
                self.side = side

            def area(self) -> float:
                return 3 * math.sqrt(3) / 2 * self.side ** 2

        shapes = [ocp.Circle(1.0), ocp.Rectangle(2.0, 3.0), ocp.Triangle(4.0, 1.0), Hexagon(1.0)]
        expected = sum(shape.area() for shape in shapes)
        actual = ocp.AreaCalculator().total_area(shapes)
        if math.isclose(actual, expected, abs_tol=self.params.tolerance):
            return CheckResult("O", "ocp_adherence", True,
                               "a shape added later works without editing AreaCalculator")
        return CheckResult("O", "ocp_adherence", False,
                           f"AreaCalculator returned {actual}, expected {expected}")

    def check_ocp_violation(self) -> CheckResult:
        ocp = open_closed
        try:
            ocp.ShapeAreaCalculator().total_area([ocp.RawShape("hexagon", (1.0,))])
        except ValueError:
            return CheckResult("O", "ocp_violation", True,
                               "ShapeAreaCalculator must be edited to support a new shape")
        return CheckResult("O", "ocp_violation", False,
                           "ShapeAreaCalculator accepted an unknown shape kind")

    # Liskov Substitution

    def check_lsp_adherence(self) -> CheckResult:
        lsp = liskov_substitution
        samples = {lsp.Rectangle: lsp.Rectangle(2.0, 3.0), lsp.Square: lsp.Square(2.0)}

        concrete = [
            cls for cls in lsp.Shape.__subclasses__()
            if cls.__module__ == lsp.__name__ and not inspect.isabstract(cls)
        ]
        missing = [cls.__name__ for cls in concrete if cls not in samples]
        if missing:
            return CheckResult("L", "lsp_adherence", False, f"no sample shape for {missing}")

        for shape in samples.values():
            for factor in self.params.scale_factors:
                scaled = shape.scaled(factor)
                if type(scaled) is not type(shape):
                    return CheckResult("L", "lsp_adherence", False,
                                       f"{shape!r}.scaled({factor}) changed type")
                expected = shape.area() * factor ** 2
                if not math.isclose(scaled.area(), expected, abs_tol=self.params.tolerance):
                    return CheckResult("L", "lsp_adherence", False,
                                       f"{shape!r}.scaled({factor}) has area "
                                       f"{scaled.area()}, expected {expected}")

        return CheckResult("L", "lsp_adherence", True,
                           "every Shape keeps the scaled() contract")

    def check_lsp_violation(self) -> CheckResult:
        lsp = liskov_substitution
        width, height = 2.0, 3.0
        rectangle_area = lsp.stretch(lsp.MutableRectangle(1.0, 1.0), width, height)
        square_area = lsp.stretch(lsp.MutableSquare(1.0), width, height)

        if rectangle_area == width * height and square_area != width * height:
            return CheckResult("L", "lsp_violation", True,
                               f"stretch() gives {square_area} for a square, "
                               f"{rectangle_area} for a rectangle")
        return CheckResult("L", "lsp_violation", False,
                           "MutableSquare is substitutable for MutableRectangle")

    # Interface Segregation

    def check_isp_adherence(self) -> CheckResult:
        principle = get_principle("I")
        stubs = []
        for object_name in principle.adherence:
            obj = load_example(principle, object_name)
            if not inspect.isclass(obj) or inspect.isabstract(obj):
                continue
            stubs.extend(f"{object_name}.{name}" for name in stubbed_methods(obj))

        if stubs:
            return CheckResult("I", "isp_adherence", False,
                               f"classes forced to stub methods: {stubs}")

        printed = interface_segregation.print_all(
            interface_segregation.BasicPrinter(), ["report"]
        )
        if printed != ["printed: report"]:
            return CheckResult("I", "isp_adherence", False,
                               f"print_all returned {printed}")
        return CheckResult("I", "isp_adherence", True,
                           "each device implements only the roles it can fill")

    def check_isp_violation(self) -> CheckResult:
        cls = interface_segregation.LegacyBasicPrinter
        stubs = stubbed_methods(cls)
        if stubs:
            return CheckResult("I", "isp_violation", True,
                               f"LegacyBasicPrinter stubs out {sorted(stubs)}")
        return CheckResult("I", "isp_violation", False,
                           "LegacyBasicPrinter no longer stubs any method")

    # Dependency Inversion

    def check_dip_adherence(self) -> CheckResult:
        dip = dependency_inversion
        hints = typing.get_type_hints(dip.NotificationService.__init__)
        hints.pop("return", None)

        concrete = {
            name: getattr(hint, "__name__", repr(hint)) for name, hint in hints.items()
            if not (inspect.isclass(hint) and inspect.isabstract(hint))
        }
        if not hints or concrete:
            return CheckResult("D", "dip_adherence", False,
                               f"NotificationService depends on concrete types: {concrete}")

        service = dip.build_notification_service("sms")
        if not isinstance(service.sender, dip.SmsSender):
            return CheckResult("D", "dip_adherence", False,
                               "composition root did not wire the requested sender")
        return CheckResult("D", "dip_adherence", True,
                           "NotificationService depends only on MessageSender")

    def check_dip_violation(self) -> CheckResult:
        dip = dependency_inversion
        signature = inspect.signature(dip.HardwiredNotificationService.__init__)
        collaborators = [name for name in signature.parameters if name != "self"]
        service = dip.HardwiredNotificationService()

        if not collaborators and isinstance(service.sender, dip.SmtpEmailSender):
            return CheckResult("D", "dip_violation", True,
                               "HardwiredNotificationService builds its own SmtpEmailSender")
        return CheckResult("D", "dip_violation", False,
                           "HardwiredNotificationService no longer hardwires its sender")
