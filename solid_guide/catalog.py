"""
Catalog of the five SOLID principles.

Each entry holds the prose for its section of the guide and the names of
the example objects that make up the violation and adherence snippets.
Snippet source is read from the example modules at call time, so the
rendered guide always shows the code that the test-suite exercises.
"""

import ast
import importlib
import inspect
import textwrap
from dataclasses import dataclass
from typing import Optional

from .errors import SnippetNotFoundError, UnknownPrincipleError
from .logging import get_logger

logger = get_logger(__name__)

PARTS = ("violation", "adherence")


@dataclass(frozen=True)
class Principle:
    """One SOLID principle and where its examples live."""
    letter: str
    name: str
    slug: str
    summary: str
    violation_text: str
    adherence_text: str
    recap: str
    module: str
    violation: tuple[str, ...]
    adherence: tuple[str, ...]


PRINCIPLES: tuple[Principle, ...] = (
    Principle(
        letter="S",
        name="Single Responsibility Principle",
        slug="single-responsibility",
        summary=(
            "A class should have one, and only one, reason to change. "
            "Validation rules, storage and customer messaging change for "
            "different reasons and at different times, so they belong in "
            "different classes."
        ),
        violation_text=(
            "`OrderProcessor` validates the order, stores it and writes the "
            "confirmation. A new e-mail template, a new database or a new "
            "validation rule all mean editing the same class."
        ),
        adherence_text=(
            "Each concern has its own class. `OrderService` only coordinates "
            "them, so a change to one concern touches one class."
        ),
        recap="one class, one reason to change.",
        module="solid_guide.principles.single_responsibility",
        violation=("Order", "OrderProcessor"),
        adherence=(
            "Order",
            "OrderValidator",
            "InMemoryOrderRepository",
            "OrderMailer",
            "OrderService",
        ),
    ),
    Principle(
        letter="O",
        name="Open/Closed Principle",
        slug="open-closed",
        summary=(
            "Software entities should be open for extension but closed for "
            "modification. New behaviour is added by writing new code, not "
            "by editing code that already works."
        ),
        violation_text=(
            "`ShapeAreaCalculator` switches on a `kind` string. Supporting a "
            "triangle means adding another branch to a class that is "
            "already tested and shipped."
        ),
        adherence_text=(
            "Every shape knows its own area. `AreaCalculator` works with any "
            "`Shape`, including ones written after it."
        ),
        recap="extend with new code instead of editing working code.",
        module="solid_guide.principles.open_closed",
        violation=("RawShape", "ShapeAreaCalculator"),
        adherence=("Shape", "Circle", "Rectangle", "Triangle", "AreaCalculator"),
    ),
    Principle(
        letter="L",
        name="Liskov Substitution Principle",
        slug="liskov-substitution",
        summary=(
            "Objects of a subtype must be usable wherever the base type is "
            "expected, without the caller noticing a difference in "
            "behaviour."
        ),
        violation_text=(
            "`MutableSquare` inherits `MutableRectangle` but changes what the "
            "setters mean. `stretch` returns `width * height` for a "
            "rectangle and something else for a square."
        ),
        adherence_text=(
            "`Rectangle` and `Square` are siblings. Both keep the `Shape` "
            "contract: `scaled(f)` returns the same kind of shape with "
            "`f ** 2` times the area, so either can be passed to "
            "`total_scaled_area`."
        ),
        recap="subtypes keep the promises of their base type.",
        module="solid_guide.principles.liskov_substitution",
        violation=("MutableRectangle", "MutableSquare", "stretch"),
        adherence=("Shape", "Rectangle", "Square", "total_scaled_area"),
    ),
    Principle(
        letter="I",
        name="Interface Segregation Principle",
        slug="interface-segregation",
        summary=(
            "Clients should not be forced to depend on methods they do not "
            "use. Prefer several small, role-specific interfaces to one "
            "general-purpose one."
        ),
        violation_text=(
            "`MultiFunctionDevice` makes every device print, scan and fax. "
            "`LegacyBasicPrinter` can only print, so two of its methods just "
            "raise `NotImplementedError`."
        ),
        adherence_text=(
            "`Printer`, `Scanner` and `Fax` are separate roles. A device "
            "implements only the roles it can fill, and `print_all` asks for "
            "a `Printer` and nothing more."
        ),
        recap="small role interfaces instead of one fat interface.",
        module="solid_guide.principles.interface_segregation",
        violation=("MultiFunctionDevice", "LegacyBasicPrinter"),
        adherence=(
            "Printer",
            "Scanner",
            "Fax",
            "BasicPrinter",
            "OfficeMachine",
            "print_all",
        ),
    ),
    Principle(
        letter="D",
        name="Dependency Inversion Principle",
        slug="dependency-inversion",
        summary=(
            "High-level modules should not depend on low-level modules; both "
            "should depend on abstractions. Concrete classes are chosen in "
            "one place, the composition root."
        ),
        violation_text=(
            "`HardwiredNotificationService` creates an `SmtpEmailSender` "
            "itself. Switching to SMS, or testing without e-mail, means "
            "editing the service."
        ),
        adherence_text=(
            "`NotificationService` depends on the `MessageSender` "
            "abstraction. `build_notification_service` is the composition "
            "root that picks the concrete sender."
        ),
        recap="depend on abstractions and wire concrete classes at the edge.",
        module="solid_guide.principles.dependency_inversion",
        violation=("SmtpEmailSender", "HardwiredNotificationService"),
        adherence=(
            "MessageSender",
            "EmailSender",
            "SmsSender",
            "NotificationService",
            "build_notification_service",
        ),
    ),
)


def list_principles() -> list[Principle]:
    """Return the principles in S, O, L, I, D order."""
    return list(PRINCIPLES)


def get_principle(key: str) -> Principle:
    """
    Look up a principle by letter, slug or name.

    Letters and names are matched case-insensitively; the trailing word
    "principle" may be omitted from a name.

    Raises:
        UnknownPrincipleError: if nothing matches
    """
    wanted = key.strip().lower()
    for principle in PRINCIPLES:
        name = principle.name.lower()
        candidates = {
            principle.letter.lower(),
            principle.slug,
            name,
            name.removesuffix(" principle"),
        }
        if wanted in candidates:
            return principle

    logger.debug("Unknown principle requested", key=key)
    raise UnknownPrincipleError(
        f"Unknown principle: {key!r} (expected one of "
        f"{', '.join(p.letter for p in PRINCIPLES)})",
        key=key,
        context={"key": key},
    )


def load_example(principle: Principle, object_name: str) -> object:
    """Return an example object from the principle's module."""
    module = importlib.import_module(principle.module)
    try:
        return getattr(module, object_name)
    except AttributeError as e:
        raise SnippetNotFoundError(
            f"{principle.module} has no example named {object_name!r}",
            principle=principle.letter,
            object_name=object_name,
        ) from e


def module_imports(principle: Principle, code: str) -> list[str]:
    """
    Import statements from the principle's module that the code needs.

    Only names the code actually refers to are kept, so each snippet
    carries exactly the imports it runs with.
    """
    module = importlib.import_module(principle.module)
    used = {
        node.id for node in ast.walk(ast.parse(code))
        if isinstance(node, ast.Name)
    }

    imports = []
    for node in ast.parse(inspect.getsource(module)).body:
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        names = [
            alias for alias in node.names
            if (alias.asname or alias.name.split(".")[0]) in used
        ]
        if not names:
            continue
        if isinstance(node, ast.Import):
            kept = ast.Import(names=names)
        else:
            kept = ast.ImportFrom(module=node.module, names=names, level=node.level)
        imports.append(ast.unparse(kept))
    return imports


def snippet(principle: Principle, part: str) -> str:
    """
    Return the source code of a violation or adherence snippet.

    Args:
        principle: Principle whose example to show
        part: "violation" or "adherence"

    Returns:
        The imports the objects need, then the dedented source of each
        object, separated by blank lines
    """
    if part not in PARTS:
        raise SnippetNotFoundError(
            f"Unknown snippet part: {part!r} (expected one of {', '.join(PARTS)})",
            principle=principle.letter,
            part=part,
        )

    blocks = []
    for object_name in getattr(principle, part):
        obj = load_example(principle, object_name)
        try:
            source = inspect.getsource(obj)
        except (OSError, TypeError) as e:
            raise SnippetNotFoundError(
                f"Source for {object_name!r} is unavailable: {e}",
                principle=principle.letter,
                part=part,
                object_name=object_name,
            ) from e
        blocks.append(textwrap.dedent(source).strip())

    code = "\n\n\n".join(blocks)
    imports = module_imports(principle, code)
    if imports:
        return "\n".join(imports) + "\n\n\n" + code
    return code


def recap(principles: Optional[list[Principle]] = None) -> list[str]:
    """Return the quick-recap bullets, one per principle."""
    selected = principles if principles is not None else list_principles()
    return [f"**{p.letter}** - {p.name}: {p.recap}" for p in selected]
