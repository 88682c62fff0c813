"""Unit tests for helper functions."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from datetime import datetime

import pandas as pd
import pytz

from sheetform.utils.helpers import cell_to_str, create_sample_sheet, format_timestamp, is_absent


class TestCells:

    def test_absent(self):
        assert is_absent(None)
        assert is_absent(float("nan"))
        assert not is_absent("")
        assert not is_absent(0)

    def test_cell_to_str(self):
        assert cell_to_str(None) == ""
        assert cell_to_str(9.0) == "9"
        assert cell_to_str(9.5) == "9.5"
        assert cell_to_str(True) == "True"
        assert cell_to_str("  x ") == "  x "


class TestTimestamp:

    def test_naive_time_is_localized(self):
        assert format_timestamp("America/Sao_Paulo", "%d/%m/%Y %H:%M", datetime(2026, 1, 2, 3, 4)) == "02/01/2026 03:04"

    def test_aware_time_is_converted(self):
        now = pytz.utc.localize(datetime(2026, 1, 2, 12, 0))
        assert format_timestamp("America/Sao_Paulo", "%H:%M", now) == "09:00"


class TestSampleSheet:

    def test_sample_has_titles_and_types(self, tmp_path):
        path = tmp_path / "sample.csv"
        create_sample_sheet(str(path))
        df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
        assert df.iloc[0, 0] == "Nome"
        assert df.iloc[1, 1] == "múltipla escolha"
