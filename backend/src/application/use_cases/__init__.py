"""ユースケースモジュール."""
from .verify_age import VerifyAgeUseCase, utc_now

__all__ = ["VerifyAgeUseCase", "utc_now"]
