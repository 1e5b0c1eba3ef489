"""最低年齢ポリシーストアのインターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import CountryCode

# ストアから取得できなかった場合に使う最低年齢
DEFAULT_MINIMUM_AGE = 18


class PolicyLookupError(Exception):
    """最低年齢の取得に失敗したエラー."""

    pass


class MinimumAgePolicyStore(ABC):
    """国ごとの最低年齢を保持する外部キーバリューストア."""

    @abstractmethod
    def get_minimum_age(self, country_code: CountryCode) -> int:
        """国コードに対応する最低年齢を取得する.

        Raises:
            PolicyLookupError: タイムアウト、未登録、値が整数でない場合
        """
        pass
