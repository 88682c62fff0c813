"""
Main sheet form builder system
"""

import logging
from typing import Callable, Dict, Optional

from .builder import FormBuilder
from .config import AUTOMATION_CONFIG, MENU_ITEM, MENU_TITLE
from .errors import ValidationError
from ..data.sheet_reader import SheetDataReader
from ..forms.service import FormHandle, FormService, GoogleFormsService, InMemoryFormService

logger = logging.getLogger(__name__)


class FormBuilderSystem:
    """Main system: sheet file -> form ("Criar Formulário desta Planilha")"""

    def __init__(self, api_config: Dict, request_config: Dict, timezone: str = None,
                 dry_run: bool = False, notify: Callable[[str], None] = None):
        self.api_config = api_config
        self.request_config = request_config
        self.timezone = timezone or AUTOMATION_CONFIG['timezone']
        self.dry_run = dry_run
        self.notify = notify
        self._service: Optional[FormService] = None
        self.builder: Optional[FormBuilder] = None

    @property
    def service(self) -> FormService:
        if self._service is None:
            if self.dry_run:
                logger.info("🧪 Dry run: forms are built in memory only")
                self._service = InMemoryFormService()
            else:
                self._service = GoogleFormsService(api_config=self.api_config, request_config=self.request_config)
        return self._service

    def run_build(self, file_path: str, sheet_name: Optional[str] = None) -> Optional[FormHandle]:
        """Run the menu action against a sheet file"""
        logger.info(f"📋 {MENU_TITLE} → {MENU_ITEM}")

        reader = SheetDataReader(file_path, sheet_name)
        if not reader.load_data():
            return None

        self.builder = FormBuilder(self.service, notify=self.notify, timezone=self.timezone)
        try:
            form = self.builder.build(reader.get_table(), reader.sheet_title)
        except ValidationError:
            return None

        self.builder.print_stats()
        return form
