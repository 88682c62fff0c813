"""Unit tests for the sheet reader."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import io

import pandas as pd

from sheetform.data.sheet_reader import SheetDataReader


def _write_csv(path, text: str):
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestCsv:

    def test_rows_are_read_without_header(self, tmp_path):
        path = _write_csv(tmp_path / "Pesquisa.csv", "Name,Color\ntexto curto,múltipla escolha\n,Red\n,Blue\n")
        reader = SheetDataReader(path)

        assert reader.load_data()
        assert reader.get_table() == [
            ["Name", "Color"],
            ["texto curto", "múltipla escolha"],
            ["", "Red"],
            ["", "Blue"],
        ]
        assert reader.sheet_title == "Pesquisa"

    def test_numbers_stay_as_text(self, tmp_path):
        path = _write_csv(tmp_path / "n.csv", "Q\nlista suspensa\n1\n2.0\n")
        reader = SheetDataReader(path)
        reader.load_data()
        assert reader.get_table()[2:] == [["1"], ["2.0"]]

    def test_empty_file(self, tmp_path):
        reader = SheetDataReader(_write_csv(tmp_path / "empty.csv", ""))
        assert reader.load_data()
        assert reader.get_table() == []

    def test_from_bytes(self):
        reader = SheetDataReader.from_bytes(b"A\ndata\n", "upload.csv")
        assert reader.load_data()
        assert reader.get_table() == [["A"], ["data"]]
        assert reader.sheet_title == "upload"

    def test_unsupported_extension(self, tmp_path):
        reader = SheetDataReader(_write_csv(tmp_path / "notes.txt", "A\n"))
        assert not reader.load_data()
        assert reader.get_table() == []


class TestExcel:

    def _workbook(self) -> bytes:
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            pd.DataFrame([["A"], ["data"]]).to_excel(writer, sheet_name="Primeira", header=False, index=False)
            pd.DataFrame([["B", "C"], ["hora", "lista suspensa"], ["", "X"]]).to_excel(
                writer, sheet_name="Segunda", header=False, index=False
            )
        return buffer.getvalue()

    def test_first_sheet_by_default(self):
        reader = SheetDataReader.from_bytes(self._workbook(), "book.xlsx")
        assert reader.load_data()
        assert reader.sheet_title == "Primeira"
        assert reader.get_table() == [["A"], ["data"]]

    def test_named_sheet(self):
        reader = SheetDataReader.from_bytes(self._workbook(), "book.xlsx", sheet_name="Segunda")
        assert reader.load_data()
        assert reader.sheet_title == "Segunda"
        assert reader.get_table() == [["B", "C"], ["hora", "lista suspensa"], ["", "X"]]


class TestCsvShapes:

    def test_blank_type_row_is_kept(self):
        reader = SheetDataReader.from_bytes(b"Q1\n\ntexto curto\n", "p.csv")
        assert reader.load_data()
        assert reader.get_table() == [["Q1"], [""], ["texto curto"]]

    def test_rows_wider_than_header_are_padded(self):
        reader = SheetDataReader.from_bytes(b"Name\ntexto curto,extra\n", "ragged.csv")
        assert reader.load_data()
        assert reader.get_table() == [["Name", ""], ["texto curto", "extra"]]

    def test_short_rows_are_filled_with_empty_cells(self):
        reader = SheetDataReader.from_bytes(b"A,B\ntexto curto\n", "short.csv")
        assert reader.load_data()
        assert reader.get_table() == [["A", "B"], ["texto curto", ""]]


class TestCsvEncodings:

    def test_latin1_export(self):
        content = "Duração,Cor\nduração,múltipla escolha\n,Azul\n".encode("latin-1")
        reader = SheetDataReader.from_bytes(content, "Planilha.csv")
        assert reader.load_data()
        assert reader.get_table() == [["Duração", "Cor"], ["duração", "múltipla escolha"], ["", "Azul"]]

    def test_utf8_byte_order_mark_is_dropped(self):
        reader = SheetDataReader.from_bytes("\ufeffNome\ntexto curto\n".encode("utf-8"), "bom.csv")
        assert reader.load_data()
        assert reader.get_table() == [["Nome"], ["texto curto"]]

    def test_latin1_file_on_disk(self, tmp_path):
        path = tmp_path / "Pesquisa.csv"
        path.write_bytes("Q\nparágrafo\n".encode("cp1252"))
        reader = SheetDataReader(str(path))
        assert reader.load_data()
        assert reader.get_table() == [["Q"], ["parágrafo"]]
