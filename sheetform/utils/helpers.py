"""
Utility functions and helpers
"""

import logging
import math
from datetime import datetime
from typing import Optional

import pandas as pd
import pytz

logger = logging.getLogger(__name__)


def is_absent(value) -> bool:
    """True for None and NaN cells (pandas fills missing cells with NaN)"""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def cell_to_str(value) -> str:
    """Stringify a cell value, absent cells become ''"""
    if is_absent(value):
        return ''

    # Remove .0 from float numbers (e.g., 9.0 -> 9, but keep 9.5 as 9.5)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_timestamp(timezone_str: str, fmt: str, now: Optional[datetime] = None) -> str:
    """Current local time in the given timezone, used to make form titles unique"""
    timezone = pytz.timezone(timezone_str)
    if now is None:
        now = datetime.now(timezone)
    elif now.tzinfo is None:
        now = timezone.localize(now)
    else:
        now = now.astimezone(timezone)
    return now.strftime(fmt)


def create_sample_sheet(filename: str = 'sample_sheet.csv'):
    """Create sample CSV file (row 1 titles, row 2 types, row 3+ options)"""
    rows = [
        ['Nome', 'Cor favorita', 'Interesses', 'Estado', 'Comentários', 'Satisfação', 'Nascimento'],
        ['texto curto', 'múltipla escolha', 'caixa de seleção', 'lista suspensa', 'parágrafo', 'escala linear', 'data'],
        ['', 'Vermelho', 'Música', 'SP', '', '', ''],
        ['', 'Azul', 'Esportes', 'RJ', '', '', ''],
        ['', 'Verde', 'Leitura', 'MG', '', '', ''],
    ]

    df = pd.DataFrame(rows)
    df.to_csv(filename, index=False, header=False)
    logger.info(f"✅ Sample sheet created: {filename}")
