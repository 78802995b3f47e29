from .dataset_validation import validate_city_frame
from .errors import ValidationError, ValidationIssue

__all__ = ["ValidationError", "ValidationIssue", "validate_city_frame"]
