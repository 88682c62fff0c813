"""
Pydantic schemas untuk request models
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Union


class TablePreviewRequest(BaseModel):
    """Schema untuk preview form dari tabel JSON"""
    sheet_name: str = Field("Planilha", description="Nama sheet sumber")
    table: List[List[Optional[Union[str, int, float]]]] = Field(
        ..., description="Baris 1 judul, baris 2 tipe, baris 3+ opsi"
    )
