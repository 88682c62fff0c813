"""
Exceptions untuk form builder
"""


class FormBuilderError(Exception):
    """Base error for the sheet form builder"""


class ValidationError(FormBuilderError):
    """Sheet does not have the header row and the type row"""

    def __init__(self, message: str, row_count: int = 0):
        super().__init__(message)
        self.row_count = row_count


class FieldCreationError(FormBuilderError):
    """The form service rejected a single field"""

    def __init__(self, title: str, reason):
        super().__init__(f"Failed to add field '{title}': {reason}")
        self.title = title
        self.reason = reason
