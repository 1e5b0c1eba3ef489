"""プロバイダー実装."""
from .dynamodb_minimum_age_policy_store import DynamoDbMinimumAgePolicyStore
from .in_memory_minimum_age_policy_store import InMemoryMinimumAgePolicyStore
from .policy_store_config import PolicyStoreConfig
from .policy_store_factory import create_minimum_age_policy_store

__all__ = [
    "DynamoDbMinimumAgePolicyStore",
    "InMemoryMinimumAgePolicyStore",
    "PolicyStoreConfig",
    "create_minimum_age_policy_store",
]
