"""
Question types yang didukung dan model field untuk form

Tag di baris 2 sheet adalah string tetap dalam bahasa Portugis (Brasil).
Matching case-insensitive, tapi aksen tetap dihitung.
"""

import unicodedata
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..core.config import FORM_CONFIG


class QuestionType(str, Enum):
    """Question type enum, value = tag as written in the sheet"""
    MULTIPLE_CHOICE = "múltipla escolha"
    CHECKBOX = "caixa de seleção"
    DROPDOWN = "lista suspensa"
    SHORT_TEXT = "texto curto"
    PARAGRAPH = "parágrafo"
    LINEAR_SCALE = "escala linear"
    DATE = "data"
    TIME = "hora"
    DATE_TIME = "data e hora"
    DURATION = "duração"


CHOICE_TYPES = {
    QuestionType.MULTIPLE_CHOICE,
    QuestionType.CHECKBOX,
    QuestionType.DROPDOWN,
}

# Normalized tag -> question type
QUESTION_TYPE_TAGS: Dict[str, QuestionType] = {qt.value: qt for qt in QuestionType}

# Label dipakai di log ("Adicionado: Múltipla Escolha ...")
QUESTION_TYPE_LABELS: Dict[QuestionType, str] = {
    QuestionType.MULTIPLE_CHOICE: "Múltipla Escolha",
    QuestionType.CHECKBOX: "Caixa de Seleção",
    QuestionType.DROPDOWN: "Lista Suspensa",
    QuestionType.SHORT_TEXT: "Texto Curto",
    QuestionType.PARAGRAPH: "Parágrafo",
    QuestionType.LINEAR_SCALE: "Escala Linear",
    QuestionType.DATE: "Data",
    QuestionType.TIME: "Hora",
    QuestionType.DATE_TIME: "Data e Hora",
    QuestionType.DURATION: "Duração",
}


def normalize_tag(raw_tag: str) -> str:
    """Normalize a type tag for comparison (NFC + lower case, accents kept)"""
    return unicodedata.normalize('NFC', raw_tag).lower()


def lookup_question_type(raw_tag: str) -> Optional[QuestionType]:
    """Return the QuestionType for a raw tag, or None if it is not recognized"""
    return QUESTION_TYPE_TAGS.get(normalize_tag(raw_tag))


class Column(BaseModel):
    """One column of the sheet: header, type tag and option cells"""
    index: int
    title: str = ""
    raw_type: str = ""
    type_tag: str = ""
    options: List[str] = []

    @property
    def position(self) -> int:
        """1-based column number as shown in the spreadsheet"""
        return self.index + 1


class FieldSpec(BaseModel):
    """Field yang akan ditambahkan ke form"""
    kind: QuestionType
    title: str = Field(..., min_length=1)


class ChoiceFieldSpec(FieldSpec):
    """Field with a list of choices (radio, checkbox, dropdown)"""
    choices: List[str] = Field(..., min_length=1)


class ScaleFieldSpec(FieldSpec):
    """Linear scale field"""
    low: int = FORM_CONFIG['scale_bounds'][0]
    high: int = FORM_CONFIG['scale_bounds'][1]
