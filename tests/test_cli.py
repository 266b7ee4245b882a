"""
Tests for the command-line front end.
"""

import argparse
import zipfile
from unittest.mock import AsyncMock, patch

import pytest

from pdf_toolkit.assembly import page_count
from pdf_toolkit.cli import main, parse_page_ranges


class TestParsePageRanges:

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", (0,)),
            ("3,1", (0, 2)),
            ("5-7", (4, 5, 6)),
            ("2, 1-3 ,2", (0, 1, 2)),
        ],
    )
    def test_parse_when_valid_then_sorted_zero_based(self, text, expected):
        assert parse_page_ranges(text) == expected

    @pytest.mark.parametrize("text", ["0", "a", "4-2", "1-x"])
    def test_parse_when_invalid_then_raises(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_page_ranges(text)


class TestMain:

    def test_images_to_pdf_when_images_then_pdf_written(self, tmp_path, sample_image):
        # Arrange
        out_dir = tmp_path / "out"

        # Act
        code = main(["images-to-pdf", str(sample_image), str(sample_image),
                     "--filename", "scan", "-o", str(out_dir)])

        # Assert
        assert code == 0
        assert page_count((out_dir / "scan.pdf").read_bytes()) == 2

    def test_images_to_pdf_when_naming_env_invalid_then_default_name(self, tmp_path, sample_image, monkeypatch):
        """A broken naming setting never stops the compose run."""
        # Arrange
        monkeypatch.setenv("PDF_TOOLKIT_NAMING_TIMEOUT", "soon")
        out_dir = tmp_path / "out"

        # Act
        code = main(["images-to-pdf", str(sample_image), "--suggest-name", "-o", str(out_dir)])

        # Assert
        assert code == 0
        assert page_count((out_dir / "my_document.pdf").read_bytes()) == 1

    def test_split_when_pages_given_then_subset_written(self, tmp_path, make_pdf, page_texts):
        source = tmp_path / "book.pdf"
        source.write_bytes(make_pdf(5))

        code = main(["split", str(source), "--pages", "5,2", "-o", str(tmp_path)])

        assert code == 0
        assert page_texts((tmp_path / "split_book.pdf").read_bytes()) == ["Page 1", "Page 4"]

    def test_split_when_pages_given_then_no_previews_rendered(self, tmp_path, make_pdf):
        source = tmp_path / "book.pdf"
        source.write_bytes(make_pdf(3))
        render = AsyncMock()

        with patch("pdf_toolkit.session.render_previews", render):
            code = main(["split", str(source), "--pages", "2", "-o", str(tmp_path)])

        assert code == 0
        render.assert_not_awaited()

    def test_split_when_page_missing_then_exit_code_1(self, tmp_path, make_pdf):
        source = tmp_path / "book.pdf"
        source.write_bytes(make_pdf(2))

        code = main(["split", str(source), "--pages", "3", "-o", str(tmp_path)])

        assert code == 1
        assert not (tmp_path / "split_book.pdf").exists()

    def test_merge_when_pdfs_then_merged_written(self, tmp_path, make_pdf):
        a, b = tmp_path / "a.pdf", tmp_path / "b.pdf"
        a.write_bytes(make_pdf(1))
        b.write_bytes(make_pdf(2))

        code = main(["merge", str(a), str(b), "--filename", "both", "-o", str(tmp_path)])

        assert code == 0
        assert page_count((tmp_path / "both.pdf").read_bytes()) == 3

    def test_pdf_to_images_when_zip_then_archive_of_selected_pages(self, tmp_path, make_pdf):
        source = tmp_path / "deck.pdf"
        source.write_bytes(make_pdf(4))

        code = main(["pdf-to-images", str(source), "--pages", "4,1", "--zip", "-o", str(tmp_path)])

        assert code == 0
        with zipfile.ZipFile(tmp_path / "pages.zip") as zf:
            assert zf.namelist() == ["page_1.png", "page_4.png"]

    def test_pdf_to_images_when_no_pages_flag_then_every_page(self, tmp_path, make_pdf):
        source = tmp_path / "deck.pdf"
        source.write_bytes(make_pdf(2))

        code = main(["pdf-to-images", str(source), "-o", str(tmp_path / "png")])

        assert code == 0
        assert sorted(p.name for p in (tmp_path / "png").iterdir()) == ["page_1.png", "page_2.png"]

    def test_info_when_pdf_then_prints_page_count(self, tmp_path, make_pdf, capsys):
        source = tmp_path / "three.pdf"
        source.write_bytes(make_pdf(3))

        code = main(["info", str(source)])

        assert code == 0
        assert "three.pdf: 3 pages" in capsys.readouterr().out

    def test_main_when_file_missing_then_exit_code_1(self, tmp_path):
        code = main(["info", str(tmp_path / "missing.pdf")])

        assert code == 1

    def test_main_when_not_a_pdf_then_exit_code_1(self, tmp_path):
        source = tmp_path / "fake.pdf"
        source.write_bytes(b"hello")

        assert main(["merge", str(source), "-o", str(tmp_path)]) == 1
