"""DynamoDB を使用した MinimumAgePolicyStore 実装.

namespace をテーブル名、group をパーティションキー（group_id）、
国コードをソートキー（item_key）として最低年齢（value 属性）を読み出す。
"""
import logging
import os
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    ReadTimeoutError,
)

from src.domain.identifiers import CountryCode
from src.domain.ports import MinimumAgePolicyStore, PolicyLookupError

from .minimum_age_value import to_minimum_age
from .policy_store_config import PolicyStoreConfig

logger = logging.getLogger(__name__)

# 想定するリクエスト元に近いリージョンを使う
DEFAULT_REGION = "eu-west-1"


class DynamoDbMinimumAgePolicyStore(MinimumAgePolicyStore):
    """DynamoDB から国ごとの最低年齢を取得するストア.

    botocore 側のリトライは無効化し、タイムアウトした場合だけ
    num_retries_on_timeout 回まで読み直す。
    """

    def __init__(
        self,
        config: PolicyStoreConfig | None = None,
        table: Any = None,
        region_name: str | None = None,
    ) -> None:
        """初期化.

        Args:
            config: ストア設定（省略時は環境変数から生成）
            table: DynamoDB Table リソース（テスト用）
            region_name: AWS リージョン
        """
        self._config = config or PolicyStoreConfig.from_env()
        self._table = table if table is not None else self._create_table(region_name)

    @property
    def config(self) -> PolicyStoreConfig:
        """ストア設定."""
        return self._config

    def _create_table(self, region_name: str | None) -> Any:
        """タイムアウト設定付きの Table リソースを作成する."""
        boto_config = Config(
            connect_timeout=self._config.timeout_seconds,
            read_timeout=self._config.timeout_seconds,
            retries={"mode": "standard", "total_max_attempts": 1},
        )
        dynamodb = boto3.resource(
            "dynamodb",
            region_name=region_name or os.environ.get("AWS_REGION", DEFAULT_REGION),
            config=boto_config,
        )
        return dynamodb.Table(self._config.namespace)

    def get_minimum_age(self, country_code: CountryCode) -> int:
        """国コードに対応する最低年齢を取得する."""
        key = {"group_id": self._config.group, "item_key": country_code.value}
        max_attempts = self._config.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                response = self._table.get_item(Key=key, ConsistentRead=False)
            except (ConnectTimeoutError, ReadTimeoutError) as e:
                logger.warning(
                    "Policy store timed out for %s (attempt %d/%d): %s",
                    country_code,
                    attempt,
                    max_attempts,
                    e,
                )
                continue
            except (BotoCoreError, ClientError) as e:
                raise PolicyLookupError(f"Policy store read failed for {country_code}: {e}") from e

            item = response.get("Item")
            if item is None:
                raise PolicyLookupError(f"No minimum age registered for {country_code}")
            return to_minimum_age(item.get("value"))

        raise PolicyLookupError(
            f"Policy store timed out for {country_code} after {max_attempts} attempts"
        )
