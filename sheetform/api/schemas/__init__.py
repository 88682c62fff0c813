"""
Schemas module untuk API
"""

from .requests import TablePreviewRequest
from .responses import (
    BaseResponse,
    BuildFormResponse,
    BuildStats,
    FormFieldInfo,
    QuestionTypeInfo,
    QuestionTypesResponse
)
