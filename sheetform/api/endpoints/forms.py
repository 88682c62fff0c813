"""
Endpoints untuk membuat form dari sheet
"""

from fastapi import APIRouter, File, UploadFile, HTTPException, Form
import os
import logging
from typing import Optional

import requests

from ..schemas import (
    TablePreviewRequest,
    BuildFormResponse,
    BuildStats,
    FormFieldInfo,
    QuestionTypeInfo,
    QuestionTypesResponse
)
from ...core.builder import FormBuilder
from ...core.config import AUTOMATION_CONFIG, GOOGLE_API_CONFIG, REQUEST_CONFIG, SHEET_CONFIG
from ...core.errors import ValidationError
from ...data.sheet_reader import SheetDataReader
from ...forms.field_types import CHOICE_TYPES, QUESTION_TYPE_LABELS, ChoiceFieldSpec, QuestionType, ScaleFieldSpec
from ...forms.service import FormService, GoogleFormsService, InMemoryFormService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/forms", tags=["Sheet Forms"])


def get_form_service(dry_run: bool) -> FormService:
    """Pick the form service for a request"""
    if dry_run:
        return InMemoryFormService()
    return GoogleFormsService(api_config=GOOGLE_API_CONFIG, request_config=REQUEST_CONFIG)


def _run_builder(table, sheet_name: str, dry_run: bool) -> BuildFormResponse:
    builder = FormBuilder(get_form_service(dry_run), timezone=AUTOMATION_CONFIG['timezone'])

    try:
        form = builder.build(table, sheet_name)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except requests.RequestException as e:
        logger.error(f"❌ Form service error: {e}")
        raise HTTPException(status_code=502, detail=f"Form service error: {e}")

    fields = []
    for spec in builder.fields:
        info = FormFieldInfo(title=spec.title, question_type=spec.kind.value)
        if isinstance(spec, ChoiceFieldSpec):
            info.choices = spec.choices
        elif isinstance(spec, ScaleFieldSpec):
            info.low, info.high = spec.low, spec.high
        fields.append(info)

    return BuildFormResponse(
        success=True,
        message="Form created successfully",
        form_title=form.title,
        edit_url=form.edit_url,
        dry_run=dry_run,
        fields=fields,
        warnings=builder.warnings,
        stats=BuildStats(**builder.stats),
    )


@router.get("/question-types/", response_model=QuestionTypesResponse)
async def list_question_types():
    """List tag tipe pertanyaan yang didukung (baris 2 sheet)"""
    return QuestionTypesResponse(
        success=True,
        message=f"{len(QuestionType)} question types supported",
        question_types=[
            QuestionTypeInfo(
                tag=question_type.value,
                name=QUESTION_TYPE_LABELS[question_type],
                requires_options=question_type in CHOICE_TYPES,
            )
            for question_type in QuestionType
        ]
    )


@router.post("/build/", response_model=BuildFormResponse)
def build_form_from_sheet(
    file: UploadFile = File(..., description="File CSV atau Excel (baris 1 judul, baris 2 tipe)"),
    sheet_name: Optional[str] = Form(None, description="Nama sheet (Excel), default sheet pertama"),
    dry_run: bool = Form(False, description="Build in memory tanpa Google Forms API")
):
    """
    Buat form dari file sheet yang di-upload
    Returns edit URL, field yang ditambahkan dan warning
    """
    filename = file.filename
    if not filename:
        raise HTTPException(status_code=400, detail="Filename is required")

    file_ext = os.path.splitext(filename)[1].lower()
    if file_ext not in SHEET_CONFIG['supported_extensions']:
        raise HTTPException(
            status_code=400,
            detail=f"Format file tidak didukung: {file_ext}. Gunakan CSV atau XLSX."
        )

    reader = SheetDataReader.from_bytes(file.file.read(), filename, sheet_name)
    if not reader.load_data():
        raise HTTPException(status_code=400, detail="Invalid file format or content")

    logger.info(f"🚀 Building form from upload: {filename}")
    return _run_builder(reader.get_table(), reader.sheet_title, dry_run)


@router.post("/preview/", response_model=BuildFormResponse)
def preview_form(request: TablePreviewRequest):
    """Preview form dari tabel JSON, selalu in memory"""
    return _run_builder(request.table, request.sheet_name, dry_run=True)
