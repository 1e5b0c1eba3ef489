"""ドメインサービスモジュール."""
from .age_calculator import AgeCalculator

__all__ = ["AgeCalculator"]
