"""MinimumAgePolicyStore ファクトリ."""
import json
import logging
import os

from src.domain.ports import MinimumAgePolicyStore

logger = logging.getLogger(__name__)


def create_minimum_age_policy_store() -> MinimumAgePolicyStore:
    """環境変数に基づいてMinimumAgePolicyStoreを生成する.

    POLICY_STORE:
        "memory"   → InMemoryMinimumAgePolicyStore（ローカル開発・テスト用）
        "dynamodb" → DynamoDbMinimumAgePolicyStore
        未設定      → DynamoDbMinimumAgePolicyStore（デフォルト）

    POLICY_STORE_MEMORY_POLICIES:
        memory の場合に登録する JSON（例: {"US": 21, "NL": 18}）。
        未設定ならサンプルの最低年齢を登録する。

    Raises:
        ValueError: POLICY_STORE_MEMORY_POLICIES が JSON オブジェクトでない場合
    """
    store_type = os.environ.get("POLICY_STORE")
    if store_type == "memory":
        from src.infrastructure.providers.in_memory_minimum_age_policy_store import (
            SAMPLE_MINIMUM_AGES,
            InMemoryMinimumAgePolicyStore,
        )

        return InMemoryMinimumAgePolicyStore(_memory_policies_from_env() or SAMPLE_MINIMUM_AGES)

    if store_type and store_type != "dynamodb":
        logger.warning("Unknown POLICY_STORE=%s, falling back to DynamoDB", store_type)

    from src.infrastructure.providers.dynamodb_minimum_age_policy_store import (
        DynamoDbMinimumAgePolicyStore,
    )

    return DynamoDbMinimumAgePolicyStore()


def _memory_policies_from_env() -> dict | None:
    """POLICY_STORE_MEMORY_POLICIES を読み込む."""
    raw = os.environ.get("POLICY_STORE_MEMORY_POLICIES")
    if not raw:
        return None
    try:
        policies = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid POLICY_STORE_MEMORY_POLICIES: {e}")
    if not isinstance(policies, dict):
        raise ValueError("POLICY_STORE_MEMORY_POLICIES must be a JSON object")
    return policies
