"""Unit tests for result types, exceptions and logging setup."""

import logging

import pytest

from advcalc import (
    CalculatorError,
    DivisionByZeroError,
    Err,
    NumberOutOfRangeError,
    Ok,
    UnsupportedParameterError,
    UnsupportedSymbolError,
    configure_logging,
)


class TestResult:
    """Tests for Ok and Err."""

    def test_ok_unwraps_value(self):
        assert Ok(True).unwrap() is True
        assert Ok(True).is_ok()

    def test_err_unwrap_raises(self):
        error = DivisionByZeroError(1.0)
        result = Err(error)
        assert not result.is_ok()
        with pytest.raises(DivisionByZeroError) as exc_info:
            result.unwrap()
        assert exc_info.value is error


class TestExceptions:
    """Tests for the error hierarchy."""

    def test_division_by_zero_message_includes_dividend(self):
        assert str(DivisionByZeroError(5.0)) == "Division by zero isn't permitted: 5.0"

    def test_unsupported_symbols_share_base(self):
        error = UnsupportedParameterError("|")
        assert isinstance(error, UnsupportedSymbolError)
        assert isinstance(error, CalculatorError)
        assert str(error) == "Parameter '|' isn't supported"

    def test_out_of_range_default_message(self):
        error = NumberOutOfRangeError(12.346, 0.0, 10.0)
        assert str(error) == "Number 12.35 is not in range [0, 10]"
        assert error.number == 12.346

    def test_out_of_range_open_bound(self):
        assert "[1, inf]" in str(NumberOutOfRangeError(0, 1))


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        package = logging.getLogger("advcalc")
        handlers, root_level, package_level = root.handlers[:], root.level, package.level
        yield
        root.handlers[:] = handlers
        root.setLevel(root_level)
        package.setLevel(package_level)

    def test_sets_package_level(self):
        configure_logging("debug")
        assert logging.getLogger("advcalc").level == logging.DEBUG

    @pytest.fixture
    def clean_env(self, monkeypatch, tmp_path):
        # setenv first so the later delenv is undone as well
        monkeypatch.setenv("ADVCALC_LOG_LEVEL", "INFO")
        monkeypatch.delenv("ADVCALC_LOG_LEVEL")
        monkeypatch.chdir(tmp_path)
        return tmp_path

    def test_defaults_to_configured_level(self, monkeypatch, clean_env):
        from advcalc import config

        monkeypatch.setattr(config, "LOG_LEVEL", "ERROR")
        configure_logging()
        assert logging.getLogger("advcalc").level == logging.ERROR

    def test_environment_overrides_default(self, monkeypatch, clean_env):
        monkeypatch.setenv("ADVCALC_LOG_LEVEL", "info")
        configure_logging()
        assert logging.getLogger("advcalc").level == logging.INFO

    def test_reads_dotenv_from_working_directory(self, clean_env):
        (clean_env / ".env").write_text("ADVCALC_LOG_LEVEL=CRITICAL\n")
        configure_logging()
        assert logging.getLogger("advcalc").level == logging.CRITICAL

    def test_importing_config_leaves_environment_alone(self, clean_env):
        import importlib
        import os

        from advcalc import config

        (clean_env / ".env").write_text("ADVCALC_LOG_LEVEL=CRITICAL\n")
        importlib.reload(config)
        assert "ADVCALC_LOG_LEVEL" not in os.environ
        assert config.LOG_LEVEL == "WARNING"
