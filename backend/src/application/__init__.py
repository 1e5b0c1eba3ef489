"""アプリケーション層モジュール."""
from .use_cases import VerifyAgeUseCase

__all__ = [
    # Age Gate Use Cases
    "VerifyAgeUseCase",
]
