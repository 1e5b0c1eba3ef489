"""インメモリ最低年齢ポリシーストア実装."""
from typing import Any

from src.domain.identifiers import CountryCode
from src.domain.ports import MinimumAgePolicyStore, PolicyLookupError

from .minimum_age_value import to_minimum_age

# ローカル開発用のサンプル
SAMPLE_MINIMUM_AGES: dict[str, int] = {
    "DE": 16,
    "JP": 20,
    "NL": 18,
    "US": 21,
}


class InMemoryMinimumAgePolicyStore(MinimumAgePolicyStore):
    """インメモリ最低年齢ポリシーストア（ローカル開発・テスト用）."""

    def __init__(self, policies: dict[str, Any] | None = None) -> None:
        """初期化."""
        self._policies: dict[str, Any] = {
            code.upper(): value for code, value in (policies or {}).items()
        }

    def put(self, country_code: CountryCode, value: Any) -> None:
        """最低年齢を登録する."""
        self._policies[country_code.value] = value

    def get_minimum_age(self, country_code: CountryCode) -> int:
        """国コードに対応する最低年齢を取得する."""
        if country_code.value not in self._policies:
            raise PolicyLookupError(f"No minimum age registered for {country_code}")
        return to_minimum_age(self._policies[country_code.value])
