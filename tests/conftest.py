"""
Shared test fixtures for easy-cols tests.
Resets config so no test sees the real environment or leaked runtime flags.
"""

import pytest

from easy_cols import config


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "DEFAULT_INPUT_FORMAT", "auto")
    monkeypatch.setattr(config, "DEFAULT_OUTPUT_FORMAT", "same")
    monkeypatch.setattr(config, "DEFAULT_OUTPUT_SEPARATOR", None)
    monkeypatch.setattr(config, "DEFAULT_NO_HEADER", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)


@pytest.fixture
def csv_text():
    return "Name,Age,City\nJohn,25,NYC\nJane,30,LA"


@pytest.fixture
def tsv_text():
    return "Name\tAge\tCity\nJohn\t25\tNYC\nJane\t30\tLA"


@pytest.fixture
def table_text():
    return "Name | Age | City\n-----|-----|----\nJohn | 25  | NYC\nJane | 30  | LA"
