"""
Tests for assembly.pages

Test Coverage:
- extract_subset(): ascending order, dedup, out of range, empty selection
- merge_documents(): page counts, order, empty and single inputs
- page_count(): corrupt input
"""

import fitz
import pytest

from pdf_toolkit.assembly import extract_subset, merge_documents, page_count
from pdf_toolkit.core.errors import DocumentLoadError, PageOutOfRangeError
from pdf_toolkit.core.models import SourceDocument


@pytest.fixture
def ten_pages(make_pdf):
    return SourceDocument("ten.pdf", make_pdf(10))


class TestExtractSubset:
    """Tests for extract_subset()."""

    @pytest.mark.asyncio
    async def test_extract_when_indices_unordered_then_ascending_pages(self, ten_pages, page_texts):
        """Indices {9, 0, 4} produce pages [0, 4, 9]."""
        # Act
        content = await extract_subset(ten_pages, [9, 0, 4])

        # Assert
        assert page_texts(content) == ["Page 0", "Page 4", "Page 9"]

    @pytest.mark.asyncio
    async def test_extract_when_duplicates_then_each_page_once(self, ten_pages, page_texts):
        content = await extract_subset(ten_pages, [3, 3, 1, 3])

        assert page_texts(content) == ["Page 1", "Page 3"]

    @pytest.mark.asyncio
    async def test_extract_when_all_indices_then_same_content(self, ten_pages, page_texts):
        content = await extract_subset(ten_pages, range(10))

        assert page_count(content) == 10
        assert page_texts(content) == page_texts(ten_pages.content)

    @pytest.mark.asyncio
    async def test_extract_when_repeated_then_same_page_content(self, ten_pages, page_texts):
        """Idempotent in content (not necessarily in bytes)."""
        first = await extract_subset(ten_pages, {2, 5})
        second = await extract_subset(ten_pages, {2, 5})

        assert page_texts(first) == page_texts(second)

    @pytest.mark.asyncio
    async def test_extract_when_empty_selection_then_zero_page_document(self, ten_pages):
        content = await extract_subset(ten_pages, [])

        assert page_count(content) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_index", [10, 42, -1])
    async def test_extract_when_index_out_of_range_then_raises(self, ten_pages, bad_index):
        with pytest.raises(PageOutOfRangeError) as exc_info:
            await extract_subset(ten_pages, [0, bad_index])

        assert exc_info.value.page_count == 10

    @pytest.mark.asyncio
    async def test_extract_when_called_then_source_bytes_untouched(self, ten_pages):
        before = ten_pages.content

        await extract_subset(ten_pages, [1])

        assert ten_pages.content == before
        assert page_count(ten_pages.content) == 10

    @pytest.mark.asyncio
    async def test_extract_when_source_corrupt_then_raises_load_error(self):
        document = SourceDocument("broken.pdf", b"%PDF-1.4 not really")

        with pytest.raises(DocumentLoadError, match="broken.pdf"):
            await extract_subset(document, [0])

    @pytest.mark.asyncio
    async def test_extract_when_password_protected_then_raises_load_error(self, make_pdf):
        # Arrange
        with fitz.open(stream=make_pdf(2), filetype="pdf") as doc:
            locked = doc.tobytes(
                encryption=fitz.PDF_ENCRYPT_RC4_128,
                owner_pw="owner",
                user_pw="secret",
            )

        # Act & Assert
        with pytest.raises(DocumentLoadError):
            await extract_subset(SourceDocument("locked.pdf", locked), [0])


class TestMergeDocuments:
    """Tests for merge_documents()."""

    @pytest.mark.asyncio
    async def test_merge_when_two_documents_then_page_counts_add(self, make_pdf):
        a = SourceDocument("a.pdf", make_pdf(3, label="A"))
        b = SourceDocument("b.pdf", make_pdf(2, label="B"))

        content = await merge_documents([a, b])

        assert page_count(content) == 5

    @pytest.mark.asyncio
    async def test_merge_when_two_documents_then_source_order_then_page_order(self, make_pdf, page_texts):
        a = SourceDocument("a.pdf", make_pdf(2, label="A"))
        b = SourceDocument("b.pdf", make_pdf(2, label="B"))

        content = await merge_documents([b, a])

        assert page_texts(content) == ["B 0", "B 1", "A 0", "A 1"]

    @pytest.mark.asyncio
    async def test_merge_when_single_document_then_copy(self, make_pdf, page_texts):
        a = SourceDocument("a.pdf", make_pdf(4, label="A"))

        content = await merge_documents([a])

        assert page_texts(content) == page_texts(a.content)

    @pytest.mark.asyncio
    async def test_merge_when_no_documents_then_zero_page_document(self):
        content = await merge_documents([])

        assert page_count(content) == 0

    @pytest.mark.asyncio
    async def test_merge_when_duplicate_document_then_pages_repeated(self, make_pdf, page_texts):
        a = SourceDocument("a.pdf", make_pdf(1, label="A"))

        content = await merge_documents([a, a])

        assert page_texts(content) == ["A 0", "A 0"]

    @pytest.mark.asyncio
    async def test_merge_when_zero_page_source_then_contributes_nothing(self, make_pdf):
        empty = SourceDocument("empty.pdf", await merge_documents([]))
        a = SourceDocument("a.pdf", make_pdf(2))

        content = await merge_documents([empty, a, empty])

        assert page_count(content) == 2

    @pytest.mark.asyncio
    async def test_merge_when_one_source_corrupt_then_raises_naming_it(self, make_pdf):
        a = SourceDocument("a.pdf", make_pdf(1))
        bad = SourceDocument("bad.pdf", b"not a pdf at all")

        with pytest.raises(DocumentLoadError, match="bad.pdf"):
            await merge_documents([a, bad])


class TestPageCount:

    def test_page_count_when_valid_then_counts(self, make_pdf):
        assert page_count(make_pdf(7)) == 7

    def test_page_count_when_empty_bytes_then_raises(self):
        with pytest.raises(DocumentLoadError, match="empty"):
            page_count(b"")
