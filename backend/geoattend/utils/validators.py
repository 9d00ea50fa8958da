"""Validation utilities for request payloads."""
import math
from typing import Any, Dict, List

from geoattend.utils.exceptions import InvalidRequest

class Validator:
    """Validation helper class."""
    
    @staticmethod
    def require_fields(data: Dict, required_fields: List[str]) -> None:
        """Raise InvalidRequest if any field is missing or None."""
        if not isinstance(data, dict):
            raise InvalidRequest("Request body must be a JSON object")
        
        missing = [field for field in required_fields if data.get(field) is None]
        if missing:
            raise InvalidRequest(f"Missing required field: {', '.join(missing)}")
    
    @staticmethod
    def coordinate(value: Any, field: str) -> float:
        """Coerce a latitude/longitude value to float."""
        if isinstance(value, bool):
            raise InvalidRequest(f"{field} must be a number")
        try:
            result = float(value)
        except (TypeError, ValueError):
            raise InvalidRequest(f"{field} must be a number")
        if not math.isfinite(result):
            raise InvalidRequest(f"{field} must be a finite number")
        return result
    
    @staticmethod
    def non_empty_string(value: Any, field: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequest(f"{field} is required")
        return value.strip()
