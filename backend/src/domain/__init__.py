"""ドメイン層モジュール."""
from .identifiers import DEFAULT_COUNTRY_CODE, CountryCode
from .ports import DEFAULT_MINIMUM_AGE, MinimumAgePolicyStore, PolicyLookupError
from .services import AgeCalculator
from .value_objects import (
    TOO_YOUNG_MESSAGE,
    WELCOME_MESSAGE,
    VerificationRequest,
    VerificationResult,
)

__all__ = [
    # Identifiers
    "CountryCode",
    "DEFAULT_COUNTRY_CODE",
    # Ports
    "DEFAULT_MINIMUM_AGE",
    "MinimumAgePolicyStore",
    "PolicyLookupError",
    # Services
    "AgeCalculator",
    # Value Objects
    "TOO_YOUNG_MESSAGE",
    "VerificationRequest",
    "VerificationResult",
    "WELCOME_MESSAGE",
]
