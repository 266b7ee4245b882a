"""
Unit tests for the error taxonomy.
"""

import pytest

from pdf_toolkit.core.errors import (
    DocumentLoadError,
    EmptyInputError,
    ExternalServiceError,
    ImageDecodeError,
    InvalidConfigurationError,
    PageOutOfRangeError,
    ToolkitError,
)


class TestErrorHierarchy:

    @pytest.mark.parametrize(
        "error",
        [
            InvalidConfigurationError("x"),
            EmptyInputError("x"),
            PageOutOfRangeError(5, 3),
            DocumentLoadError("x"),
            ImageDecodeError("x"),
            ExternalServiceError("x"),
        ],
    )
    def test_errors_when_raised_then_are_toolkit_errors(self, error):
        assert isinstance(error, ToolkitError)

    def test_page_out_of_range_when_created_then_carries_details(self):
        error = PageOutOfRangeError(12, 10)

        assert isinstance(error, IndexError)
        assert (error.index, error.page_count) == (12, 10)
        assert "12" in str(error) and "10 pages" in str(error)

    def test_document_load_error_when_source_given_then_prefixed(self):
        error = DocumentLoadError("Cannot read PDF", "report.pdf")

        assert error.source == "report.pdf"
        assert str(error) == "report.pdf: Cannot read PDF"
