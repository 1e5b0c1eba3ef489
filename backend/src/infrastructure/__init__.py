"""インフラストラクチャ層モジュール."""
from .providers import (
    DynamoDbMinimumAgePolicyStore,
    InMemoryMinimumAgePolicyStore,
    PolicyStoreConfig,
    create_minimum_age_policy_store,
)

__all__ = [
    "DynamoDbMinimumAgePolicyStore",
    "InMemoryMinimumAgePolicyStore",
    "PolicyStoreConfig",
    "create_minimum_age_policy_store",
]
