"""Unit tests for OutFileReader."""

from pathlib import Path

import pytest

from apsim_outputs.domain.entities.policies import (
    DuplicateConstantPolicy,
    OutReadOptions,
)
from apsim_outputs.domain.exceptions import (
    DuplicateColumnError,
    DuplicateConstantError,
    EmptyFileError,
    RowWidthMismatch,
    UnitsMismatch,
    UnreadableFileError,
)
from apsim_outputs.infrastructure.io import DataSourceNotFoundError, OutFileReader

SIMPLE = """\
ApsimVersion = 7.10
Title = Wheat
factors = Cultivar=Hartog;SowDate=15-may
Date  biomass  yield
(dd/mm/yyyy)  (kg/ha)  (kg/ha)
01/05/1990  0  ?
02/05/1990  12.5  1500
"""


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestOutFileReader:
    """Tests for reading a single output file."""

    @pytest.fixture
    def reader(self) -> OutFileReader:
        return OutFileReader()

    def test_reads_data_constants_and_file_name(self, reader, tmp_path):
        """Data columns come first, then constants, then fileName."""
        # Arrange
        path = _write(tmp_path, "Wheat.out", SIMPLE)

        # Act
        table = reader.read(path)

        # Assert
        assert table.file_name == "Wheat.out"
        assert list(table.frame.columns) == [
            "Date",
            "biomass",
            "yield",
            "ApsimVersion",
            "Title",
            "Cultivar",
            "SowDate",
            "fileName",
        ]
        assert table.row_count == 2
        assert table.frame["fileName"].tolist() == ["Wheat.out", "Wheat.out"]
        assert table.frame["Cultivar"].tolist() == ["Hartog", "Hartog"]
        assert table.frame.loc[0, "yield"] is None
        assert table.frame.loc[1, "biomass"] == "12.5"

    def test_header_is_kept_on_table(self, reader, tmp_path):
        table = reader.read(_write(tmp_path, "Wheat.out", SIMPLE))

        assert table.header.column_names == ("Date", "biomass", "yield")
        assert table.header.units == ("(dd/mm/yyyy)", "(kg/ha)", "(kg/ha)")
        assert table.header.data_start_offset == 5

    def test_constants_can_be_left_out(self, reader, tmp_path):
        path = _write(tmp_path, "Wheat.out", SIMPLE)

        table = reader.read(path, OutReadOptions(add_constants=False))

        assert list(table.frame.columns) == ["Date", "biomass", "yield", "fileName"]

    def test_header_only_file_has_zero_rows(self, reader, tmp_path):
        path = _write(tmp_path, "NoRows.out", "Title = x\na b\n() ()\n")

        table = reader.read(path)

        assert table.row_count == 0
        assert list(table.frame.columns) == ["a", "b", "Title", "fileName"]

    def test_repeated_constant_last_value_wins(self, reader, tmp_path):
        content = "Title = first\nTitle = second\na\n()\n1\n"
        path = _write(tmp_path, "Dup.out", content)

        table = reader.read(path)

        assert table.frame["Title"].tolist() == ["second"]
        assert table.duplicate_constant_keys == ("Title",)

    def test_repeated_constant_can_be_an_error(self, reader, tmp_path):
        content = "Title = first\nTitle = second\na\n()\n1\n"
        path = _write(tmp_path, "Dup.out", content)
        options = OutReadOptions(duplicate_constants=DuplicateConstantPolicy.ERROR)

        with pytest.raises(DuplicateConstantError, match="in file Dup.out"):
            reader.read(path, options)

    def test_windows_line_endings(self, reader, tmp_path):
        path = tmp_path / "Crlf.out"
        path.write_bytes(b"Title = x\r\na b\r\n() ()\r\n1 2\r\n")

        table = reader.read(path)

        assert table.frame.loc[0, "b"] == "2"
        assert table.frame.loc[0, "Title"] == "x"

    def test_zero_byte_file_is_empty(self, reader, tmp_path):
        path = _write(tmp_path, "Empty.out", "")

        with pytest.raises(EmptyFileError) as exc_info:
            reader.read(path)

        assert exc_info.value.file_name == "Empty.out"
        assert "0 bytes" in str(exc_info.value)

    def test_blank_file_is_empty(self, reader, tmp_path):
        path = _write(tmp_path, "Blank.out", "\n   \n")

        with pytest.raises(EmptyFileError):
            reader.read(path)

    def test_errors_carry_file_name_and_line(self, reader, tmp_path):
        path = _write(tmp_path, "Bad.out", "a b\n() ()\n1 2\n3\n")

        with pytest.raises(RowWidthMismatch) as exc_info:
            reader.read(path)

        assert exc_info.value.file_name == "Bad.out"
        assert exc_info.value.line_number == 4
        assert str(exc_info.value) == (
            "expected 2 fields but found 1 in file Bad.out, line 4"
        )

    def test_units_mismatch(self, reader, tmp_path):
        path = _write(tmp_path, "Units.out", "a b\n()\n")

        with pytest.raises(UnitsMismatch, match="in file Units.out, line 2"):
            reader.read(path)

    def test_file_name_column_is_reserved(self, reader, tmp_path):
        path = _write(tmp_path, "Reserved.out", "fileName a\n() ()\nx 1\n")

        with pytest.raises(DuplicateColumnError, match="reserved"):
            reader.read(path)

    def test_undecodable_file(self, reader, tmp_path):
        path = tmp_path / "Latin.out"
        path.write_bytes("Title = Sé\na\n()\n1\n".encode("latin-1"))

        with pytest.raises(UnreadableFileError, match="in file Latin.out"):
            reader.read(path)

    def test_other_encodings_can_be_read(self, reader, tmp_path):
        path = tmp_path / "Latin.out"
        path.write_bytes("Title = Sé\na\n()\n1\n".encode("latin-1"))

        table = reader.read(path, OutReadOptions(encoding="latin-1"))

        assert table.frame.loc[0, "Title"] == "Sé"

    def test_missing_file_raises(self, reader, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="File not found"):
            reader.read(tmp_path / "missing.out")

    def test_directory_is_not_a_file(self, reader, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="Not a file"):
            reader.read(tmp_path)
