"""Tests for the exception hierarchy."""

from pathlib import Path

from boltzmann_lens.exceptions import (
    AnalysisError,
    AnalysisFileError,
    BoltzmannLensError,
    ConfigurationError,
    InvalidConfigError,
)


class TestHierarchy:
    def test_all_derive_from_base(self):
        for cls in (AnalysisError, AnalysisFileError, ConfigurationError, InvalidConfigError):
            assert issubclass(cls, BoltzmannLensError)

    def test_str_includes_details(self):
        error = BoltzmannLensError("Something failed", details={"path": "a.blta"})
        assert str(error) == "Something failed (path=a.blta)"

    def test_str_without_details(self):
        assert str(BoltzmannLensError("Plain")) == "Plain"


class TestAnalysisFileError:
    def test_fields(self):
        error = AnalysisFileError(Path("x.blta"), "file not found")
        assert error.filepath == Path("x.blta")
        assert error.reason == "file not found"
        assert error.details == {"filepath": "x.blta", "reason": "file not found"}
        assert isinstance(error, AnalysisError)


class TestInvalidConfigError:
    def test_fields(self):
        error = InvalidConfigError("highlight_alpha", 3, "must be between 0 and 1")
        assert error.key == "highlight_alpha"
        assert error.value == 3
        assert "highlight_alpha" in str(error)
        assert isinstance(error, ConfigurationError)
