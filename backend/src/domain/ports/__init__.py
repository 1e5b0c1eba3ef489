"""ポートモジュール."""
from .minimum_age_policy_store import DEFAULT_MINIMUM_AGE, MinimumAgePolicyStore, PolicyLookupError

__all__ = [
    "DEFAULT_MINIMUM_AGE",
    "MinimumAgePolicyStore",
    "PolicyLookupError",
]
