"""Shared test configuration and fixtures."""

from datetime import datetime

import pytest

from sheetform.core.builder import FormBuilder
from sheetform.core.errors import FieldCreationError
from sheetform.forms.service import InMemoryForm, InMemoryFormService

FIXED_NOW = datetime(2026, 10, 19, 14, 3, 5)


class RejectingForm(InMemoryForm):
    """In-memory form that rejects fields with the given titles."""

    def __init__(self, title, description, rejected_titles):
        super().__init__(title, description)
        self.rejected_titles = rejected_titles

    def add_field(self, spec):
        if spec.title in self.rejected_titles:
            raise FieldCreationError(spec.title, "rejected by service")
        return super().add_field(spec)


class RejectingFormService(InMemoryFormService):

    def __init__(self, rejected_titles):
        super().__init__()
        self.rejected_titles = set(rejected_titles)

    def create_form(self, title, description):
        form = RejectingForm(title, description, self.rejected_titles)
        self.forms.append(form)
        return form


@pytest.fixture
def service():
    return InMemoryFormService()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def builder(service, notices):
    return FormBuilder(service, notify=notices.append, timezone="America/Sao_Paulo", now=lambda: FIXED_NOW)
