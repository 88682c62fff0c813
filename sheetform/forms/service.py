"""
Form service: interface ke layanan form eksternal

GoogleFormsService bicara ke Google Forms REST API lewat requests.
InMemoryFormService dipakai untuk dry run, preview API dan test.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import requests

from ..core.config import GOOGLE_API_CONFIG, REQUEST_CONFIG
from ..core.errors import FieldCreationError
from .field_types import ChoiceFieldSpec, FieldSpec, QuestionType, ScaleFieldSpec

logger = logging.getLogger(__name__)


class FormHandle(ABC):
    """A created form that fields can be appended to"""

    title: str = ""
    description: str = ""

    @property
    @abstractmethod
    def edit_url(self) -> str:
        """URL to edit the form"""

    @abstractmethod
    def add_field(self, spec: FieldSpec) -> str:
        """Append a field at the end of the form, return its id"""


class FormService(ABC):
    """Factory for new forms"""

    @abstractmethod
    def create_form(self, title: str, description: str) -> FormHandle:
        """Create a new form resource"""


# ===== IN-MEMORY =====

class InMemoryForm(FormHandle):
    """Form kept in memory, fields stored in append order"""

    def __init__(self, title: str, description: str):
        self.form_id = uuid.uuid4().hex
        self.title = title
        self.description = description
        self.fields: List[FieldSpec] = []

    @property
    def edit_url(self) -> str:
        return f"memory://forms/{self.form_id}/edit"

    def add_field(self, spec: FieldSpec) -> str:
        self.fields.append(spec)
        return f"{self.form_id}-{len(self.fields)}"


class InMemoryFormService(FormService):
    """Form service without any external call"""

    def __init__(self):
        self.forms: List[InMemoryForm] = []

    def create_form(self, title: str, description: str) -> InMemoryForm:
        form = InMemoryForm(title, description)
        self.forms.append(form)
        logger.debug(f"🧪 In-memory form created: {form.form_id}")
        return form


# ===== GOOGLE FORMS API =====

def build_question(spec: FieldSpec) -> Dict:
    """Translate a FieldSpec into a Google Forms API question body"""
    kind = spec.kind

    if isinstance(spec, ChoiceFieldSpec):
        choice_type = {
            QuestionType.MULTIPLE_CHOICE: 'RADIO',
            QuestionType.CHECKBOX: 'CHECKBOX',
            QuestionType.DROPDOWN: 'DROP_DOWN',
        }[kind]
        return {'choiceQuestion': {
            'type': choice_type,
            'options': [{'value': choice} for choice in spec.choices],
        }}
    if isinstance(spec, ScaleFieldSpec):
        return {'scaleQuestion': {'low': spec.low, 'high': spec.high}}
    if kind == QuestionType.SHORT_TEXT:
        return {'textQuestion': {'paragraph': False}}
    if kind == QuestionType.PARAGRAPH:
        return {'textQuestion': {'paragraph': True}}
    if kind == QuestionType.DATE:
        return {'dateQuestion': {'includeTime': False, 'includeYear': True}}
    if kind == QuestionType.DATE_TIME:
        return {'dateQuestion': {'includeTime': True, 'includeYear': True}}
    if kind == QuestionType.TIME:
        return {'timeQuestion': {'duration': False}}
    if kind == QuestionType.DURATION:
        return {'timeQuestion': {'duration': True}}

    raise ValueError(f"No question mapping for {kind}")


class GoogleForm(FormHandle):
    """Form resource on the Google Forms API"""

    def __init__(self, service: 'GoogleFormsService', form_id: str, title: str, description: str):
        self.service = service
        self.form_id = form_id
        self.title = title
        self.description = description
        self.item_count = 0

    @property
    def edit_url(self) -> str:
        return GOOGLE_API_CONFIG['edit_url_template'].format(form_id=self.form_id)

    def add_field(self, spec: FieldSpec) -> str:
        request = {
            'createItem': {
                'item': {
                    'title': spec.title,
                    'questionItem': {'question': build_question(spec)},
                },
                'location': {'index': self.item_count},
            }
        }
        try:
            data = self.service.batch_update(self.form_id, [request])
        except requests.RequestException as e:
            raise FieldCreationError(spec.title, e) from e

        self.item_count += 1
        replies = data.get('replies') or [{}]
        return replies[0].get('createItem', {}).get('itemId', '')


class GoogleFormsService(FormService):
    """Form service backed by the Google Forms REST API"""

    def __init__(self, token: Optional[str] = None, api_config: Dict = None, request_config: Dict = None):
        self.api_config = api_config or GOOGLE_API_CONFIG
        self.request_config = request_config or REQUEST_CONFIG
        self.base_url = self.api_config['base_url'].rstrip('/')
        self.timeout = self.request_config.get('timeout', 30)

        token = token or self.api_config.get('token')
        if not token:
            logger.warning("⚠️ No Google Forms token configured (GOOGLE_FORMS_TOKEN)")

        self.session = requests.Session()
        self.session.headers.update(self.request_config.get('headers', {}))
        if token:
            self.session.headers['Authorization'] = f"Bearer {token}"

    def create_form(self, title: str, description: str) -> GoogleForm:
        # forms.create hanya menerima title, description diset via batchUpdate
        response = self.session.post(
            self.base_url,
            json={'info': {'title': title, 'documentTitle': title}},
            timeout=self.timeout,
        )
        response.raise_for_status()
        form_id = response.json()['formId']

        self.batch_update(form_id, [{
            'updateFormInfo': {
                'info': {'description': description},
                'updateMask': 'description',
            }
        }])

        logger.debug(f"Google form created: {form_id}")
        return GoogleForm(self, form_id, title, description)

    def batch_update(self, form_id: str, requests_body: List[Dict]) -> Dict:
        """Send a forms.batchUpdate call and return the JSON reply"""
        response = self.session.post(
            f"{self.base_url}/{form_id}:batchUpdate",
            json={'requests': requests_body},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()
