# --- __init__.py ---

# Import the main public API facade
from .secret_santa_api import SecretSantaAPI

# Core building blocks, usable without any file I/O
from .validator import ValidationResult, normalize_email, validate_data
from .assignment_service import AssignmentService
from .participant import Assignment, Participant, PreviousPairing

# Import custom exceptions for client error handling
from .config_loader import ConfigError
from .participant_repository import RepositoryError
from .assignment_service import AssignmentError, ExhaustedAttemptsError

__all__ = [
    "SecretSantaAPI",
    "ValidationResult",
    "normalize_email",
    "validate_data",
    "AssignmentService",
    "Assignment",
    "Participant",
    "PreviousPairing",
    "ConfigError",
    "RepositoryError",
    "AssignmentError",
    "ExhaustedAttemptsError",
]
