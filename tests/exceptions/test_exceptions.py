"""Tests for the exception hierarchy."""

from pathlib import Path

from dependency_mapper.exceptions import (
    AnalysisError,
    ConfigurationError,
    DataIntegrityError,
    DependencyMapperError,
    InputFormatError,
    InvalidConfigError,
    UnknownModuleError,
)


class TestDependencyMapperError:
    def test_message_only(self):
        err = DependencyMapperError("boom")
        assert str(err) == "boom"
        assert err.details == {}

    def test_details_in_str(self):
        err = DependencyMapperError("boom", details={"key": "value"})
        assert str(err) == "boom (key=value)"


class TestDataIntegrityError:
    def test_identifies_module(self):
        err = DataIntegrityError("core", "abstract types exceed total types", 2, 5)
        assert err.module == "core"
        assert err.details["module"] == "core"
        assert err.details["total_types"] == "2"
        assert err.details["abstract_types"] == "5"
        assert "core" in str(err)

    def test_hierarchy(self):
        err = DataIntegrityError("core", "bad")
        assert isinstance(err, AnalysisError)
        assert isinstance(err, DependencyMapperError)
        assert "total_types" not in err.details


class TestOtherErrors:
    def test_unknown_module(self):
        err = UnknownModuleError("ghost", ["a", "b"])
        assert err.module == "ghost"
        assert err.details["known"] == "2"
        assert isinstance(err, AnalysisError)

    def test_invalid_config(self):
        err = InvalidConfigError("workers", 0, "must be at least 1")
        assert err.key == "workers"
        assert isinstance(err, ConfigurationError)

    def test_input_format(self):
        err = InputFormatError("bad edge", Path("deps.json"))
        assert err.details["filepath"] == "deps.json"
        assert isinstance(err, ConfigurationError)
