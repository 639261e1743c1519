"""Shared pytest configuration for the tonumbers suite.

Hypothesis profiles (one place sets max_examples for every property test):

    dev      500 examples, random seed        local runs (default)
    ci       50 examples, derandomized        selected when CI=true
    verbose  100 examples, verbose output     HYPOTHESIS_PROFILE=verbose

HYPOTHESIS_PROFILE overrides the automatic choice.

Tests marked ``fuzz`` are long-running property searches; they are skipped
unless the run selects them with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from tonumbers.grammar import CompiledGrammar, compile_grammar
from tonumbers.locales import get_grammar_description

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


# Compiled grammars are immutable, so one per session is shared by all tests.
# They are compiled directly, leaving the shared GrammarCache untouched.


def _compiled(locale_code: str) -> CompiledGrammar:
    return compile_grammar(get_grammar_description(locale_code), locale_code=locale_code)


@pytest.fixture(scope="session")
def en_us_grammar() -> CompiledGrammar:
    """Compiled en-US grammar."""
    return _compiled("en-US")


@pytest.fixture(scope="session")
def en_in_grammar() -> CompiledGrammar:
    """Compiled en-IN grammar."""
    return _compiled("en-IN")


@pytest.fixture(scope="session")
def ko_kr_grammar() -> CompiledGrammar:
    """Compiled ko-KR grammar."""
    return _compiled("ko-KR")


def pytest_configure(config: pytest.Config) -> None:
    """Declare the fuzz marker."""
    config.addinivalue_line("markers", "fuzz: long-running property search (pytest -m fuzz)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)
