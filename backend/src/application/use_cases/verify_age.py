"""年齢確認ユースケース."""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from src.domain.identifiers import CountryCode
from src.domain.ports import DEFAULT_MINIMUM_AGE, MinimumAgePolicyStore, PolicyLookupError
from src.domain.services import AgeCalculator
from src.domain.value_objects import VerificationRequest, VerificationResult

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """現在時刻（UTC）を返す."""
    return datetime.now(timezone.utc)


class VerifyAgeUseCase:
    """生年月日と国コードから年齢要件を満たすか判定するユースケース."""

    def __init__(
        self,
        policy_store: MinimumAgePolicyStore | None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """初期化.

        Args:
            policy_store: 最低年齢ポリシーストア（利用できない場合はNone）
            clock: 現在時刻を返す関数
        """
        self._policy_store = policy_store
        self._clock = clock

    def execute(self, request: VerificationRequest) -> VerificationResult:
        """年齢確認を実行する.

        Args:
            request: 年齢確認リクエスト

        Returns:
            年齢確認結果（年齢不明の場合は常に要件を満たさない）
        """
        age = AgeCalculator.age_from_birthday(request.birthday, self._clock())
        result = VerificationResult(age=age, country=str(request.country_code))

        minimum_age = self.lookup_minimum_age(request.country_code)
        if age is not None and age >= minimum_age:
            return result.welcome()
        return result

    def lookup_minimum_age(self, country_code: CountryCode) -> int:
        """最低年齢を取得する（失敗時はデフォルト値）."""
        if self._policy_store is None:
            logger.warning(
                "Policy store is unavailable for %s, using default %d",
                country_code,
                DEFAULT_MINIMUM_AGE,
            )
            return DEFAULT_MINIMUM_AGE
        try:
            minimum_age = self._policy_store.get_minimum_age(country_code)
        except PolicyLookupError as e:
            logger.warning(
                "Minimum age lookup failed for %s, using default %d: %s",
                country_code,
                DEFAULT_MINIMUM_AGE,
                e,
            )
            return DEFAULT_MINIMUM_AGE
        logger.info("Minimum age for %s: %d", country_code, minimum_age)
        return minimum_age
