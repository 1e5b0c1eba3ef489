"""最低年齢ポリシーストアの接続設定."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_NAMESPACE = "jgrinwiskv"
DEFAULT_GROUP = "age_gate"
DEFAULT_NUM_RETRIES_ON_TIMEOUT = 2
DEFAULT_TIMEOUT_MS = 500

MIN_TIMEOUT_MS = 1
MAX_TIMEOUT_MS = 1000


@dataclass(frozen=True)
class PolicyStoreConfig:
    """ポリシーストアの設定.

    Attributes:
        namespace: 論理パーティション名（DynamoDB テーブル名）
        group: サブパーティション名（パーティションキーの値）
        num_retries_on_timeout: タイムアウト時の追加試行回数
        timeout_ms: 1回の読み出しのタイムアウト（ミリ秒、1〜1000）
    """

    namespace: str = DEFAULT_NAMESPACE
    group: str = DEFAULT_GROUP
    num_retries_on_timeout: int = DEFAULT_NUM_RETRIES_ON_TIMEOUT
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.namespace:
            raise ValueError("namespace cannot be empty")
        if not self.group:
            raise ValueError("group cannot be empty")
        if isinstance(self.num_retries_on_timeout, bool) or not isinstance(self.num_retries_on_timeout, int):
            raise TypeError("num_retries_on_timeout must be an integer")
        if self.num_retries_on_timeout < 0:
            raise ValueError("num_retries_on_timeout must be 0 or greater")
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise TypeError("timeout_ms must be an integer")
        if not MIN_TIMEOUT_MS <= self.timeout_ms <= MAX_TIMEOUT_MS:
            raise ValueError(
                f"timeout_ms must be between {MIN_TIMEOUT_MS} and {MAX_TIMEOUT_MS}"
            )

    @property
    def max_attempts(self) -> int:
        """初回を含む最大試行回数."""
        return self.num_retries_on_timeout + 1

    @property
    def timeout_seconds(self) -> float:
        """botocore に渡すタイムアウト秒数."""
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls) -> PolicyStoreConfig:
        """環境変数から設定を生成する.

        POLICY_STORE_NAMESPACE, POLICY_STORE_GROUP,
        POLICY_STORE_NUM_RETRIES_ON_TIMEOUT, POLICY_STORE_TIMEOUT_MS
        """
        return cls(
            namespace=os.environ.get("POLICY_STORE_NAMESPACE", DEFAULT_NAMESPACE),
            group=os.environ.get("POLICY_STORE_GROUP", DEFAULT_GROUP),
            num_retries_on_timeout=int(
                os.environ.get(
                    "POLICY_STORE_NUM_RETRIES_ON_TIMEOUT", DEFAULT_NUM_RETRIES_ON_TIMEOUT
                )
            ),
            timeout_ms=int(os.environ.get("POLICY_STORE_TIMEOUT_MS", DEFAULT_TIMEOUT_MS)),
        )
