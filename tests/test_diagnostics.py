"""Tests for tonumbers.diagnostics: codes, templates, formatter and exceptions."""

import json

import pytest

from tonumbers.diagnostics import (
    CurrencyCodeError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    GrammarError,
    InvalidInputError,
    LocaleRegistrationError,
    NumeralError,
    OutputFormat,
    UnknownLocaleError,
)


class TestDiagnosticCode:
    """Test code numbering."""

    def test_unique_values(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.INVALID_INPUT, 1000, 1999),
            (DiagnosticCode.LOCALE_UNKNOWN, 2000, 2999),
            (DiagnosticCode.LOCALE_ALREADY_REGISTERED, 2000, 2999),
            (DiagnosticCode.CURRENCY_CODE_UNKNOWN, 2000, 2999),
            (DiagnosticCode.GRAMMAR_INVALID, 3000, 3999),
            (DiagnosticCode.GRAMMAR_FILE_UNREADABLE, 3000, 3999),
        ],
    )
    def test_category_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        """Codes fall in their category's range."""
        assert low <= code.value <= high


class TestErrorTemplate:
    """Test diagnostic construction."""

    def test_invalid_input_string(self) -> None:
        """Blank strings get a usage hint."""
        diagnostic = ErrorTemplate.invalid_input("   ")
        assert diagnostic.code == DiagnosticCode.INVALID_INPUT
        assert diagnostic.message == "Invalid input '   '"
        assert diagnostic.input_value == "'   '"
        assert diagnostic.hint is not None
        assert "non-empty phrase" in diagnostic.hint

    def test_invalid_input_type(self) -> None:
        """Non-strings get a type hint."""
        diagnostic = ErrorTemplate.invalid_input(None)
        assert diagnostic.hint == "Expected str, received NoneType"

    def test_invalid_input_truncated(self) -> None:
        """Long values are excerpted."""
        diagnostic = ErrorTemplate.invalid_input("x" * 500)
        assert diagnostic.input_value is not None
        assert diagnostic.input_value.endswith("...")
        assert len(diagnostic.input_value) < 100

    def test_locale_unknown_suggestion(self) -> None:
        """Close identifiers are suggested."""
        diagnostic = ErrorTemplate.locale_unknown("en-UK", ["en-US", "en-IN", "ko-KR"])
        assert diagnostic.hint is not None
        assert diagnostic.hint.startswith("Did you mean:")
        assert diagnostic.locale_code == "en-UK"

    def test_locale_unknown_lists_all(self) -> None:
        """Without close matches every identifier is listed, sorted."""
        diagnostic = ErrorTemplate.locale_unknown("zz", ["ko-KR", "ar-SA"])
        assert diagnostic.hint == "Registered locales: ar-SA, ko-KR"

    def test_locale_already_registered(self) -> None:
        """The hint names the replace flag."""
        diagnostic = ErrorTemplate.locale_already_registered("en-US")
        assert diagnostic.code == DiagnosticCode.LOCALE_ALREADY_REGISTERED
        assert diagnostic.hint is not None
        assert "replace=True" in diagnostic.hint

    def test_currency_code_unknown(self) -> None:
        """Code and locale are both recorded."""
        diagnostic = ErrorTemplate.currency_code_unknown("XQZ", "en_US")
        assert diagnostic.input_value == "XQZ"
        assert diagnostic.locale_code == "en_US"
        assert "XQZ" in diagnostic.message

    def test_grammar_templates(self) -> None:
        """Grammar diagnostics carry their reason."""
        invalid = ErrorTemplate.grammar_invalid("number_words is empty", "eo")
        assert invalid.message == "Invalid grammar description: number_words is empty"
        assert invalid.locale_code == "eo"
        unreadable = ErrorTemplate.grammar_file_unreadable("/tmp/x.json", "not found")
        assert unreadable.code == DiagnosticCode.GRAMMAR_FILE_UNREADABLE
        assert unreadable.input_value == "/tmp/x.json"


class TestDiagnosticFormatter:
    """Test output formats."""

    def test_rust_format(self) -> None:
        """The default format is multi-line with labelled fields."""
        diagnostic = ErrorTemplate.locale_unknown("xx-XX", ["en-US"])
        output = DiagnosticFormatter().format(diagnostic)
        lines = output.splitlines()
        assert lines[0] == 'error[LOCALE_UNKNOWN]: Unknown locale "xx-XX"'
        assert "  = locale: xx-XX" in lines
        assert lines[-1].startswith("  = help: ")

    def test_format_error_delegates(self) -> None:
        """Diagnostic.format_error uses the default formatter."""
        diagnostic = ErrorTemplate.invalid_input("")
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)

    def test_simple_format(self) -> None:
        """The simple format is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.invalid_input("")) == "INVALID_INPUT: Invalid input ''"

    def test_json_format(self) -> None:
        """The JSON format is machine-readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.currency_code_unknown("XQZ", "en")))
        assert data["code"] == "CURRENCY_CODE_UNKNOWN"
        assert data["code_value"] == DiagnosticCode.CURRENCY_CODE_UNKNOWN.value
        assert data["locale_code"] == "en"
        assert data["severity"] == "error"

    def test_warning_severity(self) -> None:
        """Warnings are labelled as such."""
        diagnostic = Diagnostic(DiagnosticCode.INVALID_INPUT, "odd", severity="warning")
        assert DiagnosticFormatter().format(diagnostic) == "warning[INVALID_INPUT]: odd"

    def test_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        output = DiagnosticFormatter(color=True).format(ErrorTemplate.invalid_input(""))
        assert output.startswith("\033[1;31merror\033[0m")

    def test_sanitize(self) -> None:
        """Sanitizing truncates long content."""
        diagnostic = Diagnostic(DiagnosticCode.GRAMMAR_INVALID, "m" * 300)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "GRAMMAR_INVALID: " + "m" * 10 + "..."

    def test_format_all(self) -> None:
        """Several diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        first = ErrorTemplate.invalid_input("")
        second = ErrorTemplate.locale_already_registered("en-US")
        assert formatter.format_all([first, second]).count("\n\n") == 1


class TestExceptions:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            InvalidInputError,
            UnknownLocaleError,
            GrammarError,
            CurrencyCodeError,
            LocaleRegistrationError,
        ],
    )
    def test_hierarchy(self, exc_type: type[NumeralError]) -> None:
        """Every error derives from NumeralError."""
        assert issubclass(exc_type, NumeralError)

    def test_diagnostic_attached(self) -> None:
        """A Diagnostic argument becomes the message and is kept."""
        diagnostic = ErrorTemplate.invalid_input(None)
        error = InvalidInputError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.message

    def test_plain_message(self) -> None:
        """A string argument leaves diagnostic unset."""
        error = GrammarError("broken")
        assert error.diagnostic is None
        assert str(error) == "broken"

    def test_unknown_locale_code(self) -> None:
        """UnknownLocaleError records the identifier."""
        error = UnknownLocaleError("missing", locale_code="xx")
        assert error.locale_code == "xx"
        assert UnknownLocaleError("missing").locale_code == ""
