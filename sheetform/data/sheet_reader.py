"""
Sheet data reader module: baca CSV/Excel sebagai tabel mentah
"""

import csv
import io
import logging
import os
from typing import List, Optional, Union

import pandas as pd

from ..core.config import SHEET_CONFIG
from ..utils.helpers import cell_to_str

logger = logging.getLogger(__name__)


class SheetDataReader:
    """Reads a spreadsheet without headers; every row is returned as-is"""

    def __init__(self, file_path: str, sheet_name: Optional[str] = None):
        self.file_path = file_path
        self.sheet_name = sheet_name
        self.sheet_title = sheet_name or os.path.splitext(os.path.basename(file_path))[0]
        self.df = None
        self._source: Union[str, io.BytesIO] = file_path

    @classmethod
    def from_bytes(cls, content: bytes, filename: str, sheet_name: Optional[str] = None) -> 'SheetDataReader':
        """Reader for uploaded file content"""
        reader = cls(filename, sheet_name)
        reader._source = io.BytesIO(content)
        return reader

    def _read_text(self) -> str:
        """Raw CSV text; export CSV dari Excel Brasil biasanya cp1252/latin-1"""
        if isinstance(self._source, io.BytesIO):
            raw = self._source.getvalue()
        else:
            with open(self._source, 'rb') as f:
                raw = f.read()

        for encoding in SHEET_CONFIG['csv_encodings']:
            try:
                text = raw.decode(encoding)
                logger.debug(f"CSV decoded as {encoding}")
                return text
            except UnicodeDecodeError:
                logger.debug(f"CSV is not {encoding}, trying next encoding")
        raise UnicodeDecodeError('csv', raw, 0, len(raw), "no configured encoding matched")

    def _read_csv(self) -> pd.DataFrame:
        text = self._read_text()

        # Column count from the widest row, so ragged rows do not break the parser
        width = max((len(row) for row in csv.reader(io.StringIO(text))), default=0)
        if width == 0:
            raise pd.errors.EmptyDataError("No columns to parse from file")

        # Blank lines are kept: an empty type row must stay row 2
        return pd.read_csv(
            io.StringIO(text),
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
        )

    def load_data(self) -> bool:
        """Load data from CSV or Excel file"""
        try:
            file_ext = os.path.splitext(self.file_path)[1].lower()

            if file_ext not in SHEET_CONFIG['supported_extensions']:
                logger.error(f"Unsupported file format: {file_ext}")
                return False

            # All cells as text, empty cells as '' (not NaN)
            if file_ext == '.csv':
                self.df = self._read_csv()
            else:
                # Tanpa sheet_name -> sheet pertama (sheet "aktif")
                sheets = pd.read_excel(
                    self._source,
                    header=None,
                    dtype=str,
                    keep_default_na=False,
                    sheet_name=self.sheet_name if self.sheet_name else None,
                )
                if isinstance(sheets, dict):
                    first_name = next(iter(sheets))
                    self.df = sheets[first_name]
                    self.sheet_title = str(first_name)
                else:
                    self.df = sheets

            logger.info(f"✅ Sheet '{self.sheet_title}': {len(self.df)} rows, {len(self.df.columns)} columns")
            return True
        except pd.errors.EmptyDataError:
            logger.warning(f"⚠️ File is empty: {self.file_path}")
            self.df = pd.DataFrame()
            return True
        except Exception as e:
            logger.error(f"Error loading file: {e}")
            return False

    def get_table(self) -> List[List[str]]:
        """Convert DataFrame to list of rows"""
        if self.df is None:
            return []
        return [[cell_to_str(value) for value in row] for row in self.df.values.tolist()]
