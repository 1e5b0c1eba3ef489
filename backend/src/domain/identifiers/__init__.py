"""識別子モジュール."""
from .country_code import DEFAULT_COUNTRY_CODE, CountryCode

__all__ = [
    "CountryCode",
    "DEFAULT_COUNTRY_CODE",
]
