"""
Pydantic schemas untuk response models
"""

from pydantic import BaseModel
from typing import Optional, List


class BaseResponse(BaseModel):
    """Base response schema"""
    success: bool
    message: str


class BuildStats(BaseModel):
    """Schema untuk statistik build"""
    columns: int = 0
    added: int = 0
    skipped: int = 0
    failed: int = 0


class FormFieldInfo(BaseModel):
    """Schema untuk field yang ditambahkan"""
    title: str
    question_type: str
    choices: Optional[List[str]] = None
    low: Optional[int] = None
    high: Optional[int] = None


class BuildFormResponse(BaseResponse):
    """Schema untuk response build form"""
    form_title: Optional[str] = None
    edit_url: Optional[str] = None
    dry_run: bool = False
    fields: List[FormFieldInfo] = []
    warnings: List[str] = []
    stats: Optional[BuildStats] = None


class QuestionTypeInfo(BaseModel):
    """Schema untuk tipe pertanyaan yang didukung"""
    tag: str
    name: str
    requires_options: bool


class QuestionTypesResponse(BaseResponse):
    """Schema untuk daftar tipe pertanyaan"""
    question_types: List[QuestionTypeInfo] = []
