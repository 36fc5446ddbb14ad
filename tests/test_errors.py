"""Tests for prerender._errors."""

from prerender._errors import (
    ConfigError,
    ExportError,
    ExtractionError,
    PrerenderError,
    RenderError,
    StorageError,
)


class TestErrorHierarchy:
    """All prerender errors inherit from PrerenderError."""

    def test_prerender_error_is_exception(self) -> None:
        assert issubclass(PrerenderError, Exception)

    def test_catch_all_prerender_errors(self) -> None:
        """All specific errors are catchable via PrerenderError."""
        for error_cls in (ConfigError, RenderError, ExtractionError, StorageError, ExportError):
            assert issubclass(error_cls, PrerenderError)
            try:
                raise error_cls("test")
            except PrerenderError:
                pass  # Expected — all caught by base class
