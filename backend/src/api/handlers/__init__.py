"""Lambdaハンドラーモジュール."""
from .age_gate import verify_age

__all__ = [
    # Age Gate
    "verify_age",
]
