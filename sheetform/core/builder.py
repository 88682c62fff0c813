"""
Form builder: ubah tabel sheet menjadi form

Baris 1 = judul pertanyaan, baris 2 = tipe pertanyaan,
baris 3+ = opsi (hanya untuk tipe pilihan).
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from .config import AUTOMATION_CONFIG, FORM_CONFIG, SHEET_CONFIG
from .errors import ValidationError
from ..forms.field_types import (
    QUESTION_TYPE_LABELS,
    ChoiceFieldSpec,
    Column,
    FieldSpec,
    QuestionType,
    ScaleFieldSpec,
    lookup_question_type,
    normalize_tag,
)
from ..forms.service import FormHandle, FormService
from ..utils.helpers import cell_to_str, format_timestamp, is_absent

logger = logging.getLogger(__name__)

Table = Sequence[Sequence]


def _cell(row: Sequence, index: int):
    """Cell at index, None when the row is shorter"""
    if row is None or index >= len(row):
        return None
    return row[index]


def extract_columns(table: Table) -> List[Column]:
    """Build one Column per header cell, left to right"""
    header_row = table[SHEET_CONFIG['header_row']]
    type_row = table[SHEET_CONFIG['type_row']]
    option_rows = table[SHEET_CONFIG['options_start_row']:]

    columns = []
    for j in range(len(header_row)):
        raw_type = cell_to_str(_cell(type_row, j)).strip()

        options = []
        for row in option_rows:
            value = _cell(row, j)
            if is_absent(value) or value == '':
                continue
            options.append(cell_to_str(value))

        columns.append(Column(
            index=j,
            title=cell_to_str(_cell(header_row, j)).strip(),
            raw_type=raw_type,
            type_tag=normalize_tag(raw_type),
            options=options,
        ))
    return columns


class FormBuilder:
    """Creates a form with one field per sheet column"""

    def __init__(self, service: FormService, notify: Callable[[str], None] = None,
                 timezone: str = None, now: Callable[[], datetime] = None):
        self.service = service
        self.notify = notify or (lambda message: logger.info(f"📣 {message}"))
        self.timezone = timezone or AUTOMATION_CONFIG['timezone']
        self.now = now
        self.stats = {}
        self.warnings: List[str] = []
        self.fields: List[FieldSpec] = []
        self._reset()

        self._handlers: Dict[QuestionType, Callable[[Column, QuestionType], Optional[FieldSpec]]] = {
            QuestionType.MULTIPLE_CHOICE: self._choice_field,
            QuestionType.CHECKBOX: self._choice_field,
            QuestionType.DROPDOWN: self._choice_field,
            QuestionType.LINEAR_SCALE: self._scale_field,
            QuestionType.SHORT_TEXT: self._simple_field,
            QuestionType.PARAGRAPH: self._simple_field,
            QuestionType.DATE: self._simple_field,
            QuestionType.TIME: self._simple_field,
            QuestionType.DATE_TIME: self._simple_field,
            QuestionType.DURATION: self._simple_field,
        }

    def _reset(self):
        self.stats = {'columns': 0, 'added': 0, 'skipped': 0, 'failed': 0}
        self.warnings = []
        self.fields = []

    def _warn(self, message: str):
        logger.warning(message)
        self.warnings.append(message)

    def form_title(self, sheet_name: str) -> str:
        timestamp = format_timestamp(
            self.timezone,
            AUTOMATION_CONFIG['timestamp_format'],
            self.now() if self.now else None,
        )
        return FORM_CONFIG['title_template'].format(sheet_name=sheet_name, timestamp=timestamp)

    def build(self, table: Table, sheet_name: str) -> FormHandle:
        """Create the form from the table, return its handle"""
        self._reset()

        row_count = len(table) if table is not None else 0
        if row_count < 2:
            message = FORM_CONFIG['validation_message']
            logger.error(f"❌ {message}")
            self.notify(message)
            raise ValidationError(message, row_count)

        title = self.form_title(sheet_name)
        description = FORM_CONFIG['description_template'].format(sheet_name=sheet_name)
        form = self.service.create_form(title, description)
        logger.info(f'📝 Criado novo formulário: "{title}"')
        logger.info(f"🔗 URL de Edição: {form.edit_url}")

        for column in extract_columns(table):
            self.stats['columns'] += 1
            spec = self.interpret_column(column)
            if spec is None:
                self.stats['skipped'] += 1
                continue

            try:
                form.add_field(spec)
            except Exception as e:
                self.stats['failed'] += 1
                logger.error(f'   ❌ ERRO ao adicionar item para "{spec.title}": {e}')
                continue

            self.stats['added'] += 1
            self.fields.append(spec)
            logger.info(f"   ✅ Adicionado: {self._describe(spec)}")

        logger.info("🏁 Processo de criação do formulário concluído.")
        self.notify(FORM_CONFIG['completion_notice'].format(edit_url=form.edit_url))
        return form

    def interpret_column(self, column: Column) -> Optional[FieldSpec]:
        """Turn a column into a FieldSpec, None when the column is skipped"""
        if not column.title:
            logger.info(f"⏭️ Pulando coluna {column.position} porque o título está vazio.")
            return None
        if not column.type_tag:
            logger.info(f'⏭️ Pulando coluna {column.position} ("{column.title}") porque o tipo está vazio na linha 2.')
            return None

        logger.debug(f'Processando coluna {column.position}: Título="{column.title}", Tipo="{column.raw_type}"')

        question_type = lookup_question_type(column.type_tag)
        if question_type is None:
            self._warn(
                f"⚠️ Tipo de pergunta não reconhecido ou inválido na coluna {column.position}: "
                f'"{column.raw_type}". Item não adicionado.'
            )
            return None

        return self._handlers[question_type](column, question_type)

    def _choice_field(self, column: Column, question_type: QuestionType) -> Optional[FieldSpec]:
        if not column.options:
            self._warn(
                f'⚠️ {QUESTION_TYPE_LABELS[question_type]} "{column.title}" não tem opções '
                f"na planilha (Linha 3+). Item não adicionado."
            )
            return None
        return ChoiceFieldSpec(kind=question_type, title=column.title, choices=list(column.options))

    def _scale_field(self, column: Column, question_type: QuestionType) -> FieldSpec:
        return ScaleFieldSpec(kind=question_type, title=column.title)

    def _simple_field(self, column: Column, question_type: QuestionType) -> FieldSpec:
        return FieldSpec(kind=question_type, title=column.title)

    @staticmethod
    def _describe(spec: FieldSpec) -> str:
        label = QUESTION_TYPE_LABELS[spec.kind]
        if isinstance(spec, ChoiceFieldSpec):
            return f"{label} com {len(spec.choices)} opções."
        if isinstance(spec, ScaleFieldSpec):
            return f"{label} ({spec.low}-{spec.high})."
        return f"{label}."

    def print_stats(self):
        """Print build statistics"""
        logger.info("📊 Build Statistics:")
        logger.info(f"   Columns: {self.stats['columns']}")
        logger.info(f"   Added: {self.stats['added']}")
        logger.info(f"   Skipped: {self.stats['skipped']}")
        logger.info(f"   Failed: {self.stats['failed']}")
