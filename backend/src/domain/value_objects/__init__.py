"""値オブジェクトモジュール."""
from .verification_request import VerificationRequest
from .verification_result import TOO_YOUNG_MESSAGE, WELCOME_MESSAGE, VerificationResult

__all__ = [
    "TOO_YOUNG_MESSAGE",
    "VerificationRequest",
    "VerificationResult",
    "WELCOME_MESSAGE",
]
