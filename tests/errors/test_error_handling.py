"""
Error handling tests for the guide tooling.

Tests cover the exception hierarchy and how lookup, configuration and
output failures surface to callers.
"""

import pytest

from solid_guide.catalog import get_principle, snippet
from solid_guide.errors import (
    ConfigurationError,
    FidelityError,
    GenerationError,
    GuideError,
    LookupFailureError,
    OutputError,
    RenderError,
    SnippetNotFoundError,
    UnknownPrincipleError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_guide_error_defaults(self):
        error = GuideError("base error")
        assert error.context == {}
        assert error.recoverable is False
        assert str(error) == "base error"

    def test_lookup_errors_are_recoverable(self):
        unknown = UnknownPrincipleError("no such principle", key="X")
        assert isinstance(unknown, LookupFailureError)
        assert isinstance(unknown, GuideError)
        assert unknown.recoverable is True
        assert unknown.key == "X"

        missing = SnippetNotFoundError(
            "missing", principle="S", part="adherence", object_name="Order"
        )
        assert missing.recoverable is True
        assert (missing.principle, missing.part, missing.object_name) == (
            "S", "adherence", "Order"
        )

    def test_generation_errors_are_not_recoverable(self):
        errors = [
            ConfigurationError("bad config", errors=["x"]),
            RenderError("cannot render", principle="O"),
            OutputError("cannot write", output_name="file", target="/tmp/x.md"),
            FidelityError("examples drifted", failures=["y"]),
        ]
        for error in errors:
            assert isinstance(error, GenerationError)
            assert error.recoverable is False

    def test_context_is_kept(self):
        error = RenderError("cannot render", principle="L", context={"module": "m"})
        assert error.context == {"module": "m"}
        assert error.principle == "L"

    def test_list_attributes_default_empty(self):
        assert ConfigurationError("bad").errors == []
        assert FidelityError("drifted").failures == []


class TestLookupFailures:
    """Test how lookup failures reach callers."""

    def test_catch_all_guide_errors(self):
        with pytest.raises(GuideError):
            get_principle("SOLID")

    def test_snippet_part_error_names_valid_parts(self):
        with pytest.raises(SnippetNotFoundError, match="violation, adherence"):
            snippet(get_principle("O"), "after")
