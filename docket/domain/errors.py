"""Exceptions raised by the case workflow."""
from __future__ import annotations


class CaseError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class CaseValidationError(CaseError):
    """Raised when a required form field is missing."""

    def __init__(self, message: str = "Please provide a valid Case ID."):
        super().__init__(message, "invalid_case_id", 400)


class DuplicateCaseError(CaseError):
    """Raised when the case id is already registered (case-insensitive)."""

    def __init__(self, case_id: str):
        super().__init__(f"Error: Case ID {case_id} already exists.", "duplicate", 409)
        self.case_id = case_id


class CaseNotFoundError(CaseError):
    """Raised when a delete targets a case id that is not in the store."""

    def __init__(self, case_id: str):
        super().__init__("Error: Case not found.", "not_found", 404)
        self.case_id = case_id


class StorageWriteError(CaseError):
    """Raised when the durable slot could not be written."""

    def __init__(self, message: str = "Error: Could not save data."):
        super().__init__(message, "storage", 500)
