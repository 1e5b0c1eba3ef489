"""依存性注入コンテナ."""
from collections.abc import Callable
from datetime import datetime

from src.application.use_cases import utc_now
from src.domain.ports import MinimumAgePolicyStore


class Dependencies:
    """依存性を管理するコンテナ.

    ポリシーストアはプロセスごとに一度だけ生成し、以降のリクエストで使い回す。
    POLICY_STORE 環境変数で実装を切り替える。
    """

    _policy_store: MinimumAgePolicyStore | None = None
    _clock: Callable[[], datetime] | None = None

    @classmethod
    def get_policy_store(cls) -> MinimumAgePolicyStore:
        """最低年齢ポリシーストアを取得する."""
        if cls._policy_store is None:
            from src.infrastructure.providers.policy_store_factory import (
                create_minimum_age_policy_store,
            )

            cls._policy_store = create_minimum_age_policy_store()
        return cls._policy_store

    @classmethod
    def set_policy_store(cls, store: MinimumAgePolicyStore) -> None:
        """最低年齢ポリシーストアを設定する（テスト用）."""
        cls._policy_store = store

    @classmethod
    def get_clock(cls) -> Callable[[], datetime]:
        """現在時刻を返す関数を取得する."""
        if cls._clock is None:
            cls._clock = utc_now
        return cls._clock

    @classmethod
    def set_clock(cls, clock: Callable[[], datetime]) -> None:
        """現在時刻を返す関数を設定する（テスト用）."""
        cls._clock = clock

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._policy_store = None
        cls._clock = None
