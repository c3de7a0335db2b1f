"""プロンプト改善APIのエラー定義"""
from typing import Any, Dict, Optional


class EnhancerError(Exception):
    """Base error carrying the HTTP status it is reported with."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(EnhancerError):
    status_code = 400


class ConfigurationError(EnhancerError):
    status_code = 500


class AuthError(EnhancerError):
    status_code = 401


class RateLimitError(EnhancerError):
    status_code = 429


class UpstreamError(EnhancerError):
    status_code = 500
