"""年齢計算ドメインサービス."""
from datetime import date, datetime, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class AgeCalculator:
    """生年月日から満年齢を計算するサービス.

    経過時間をエポック（1970-01-01 UTC）からの時刻とみなし、その年から
    1970 を引いて年数を求める。閏日を日単位で補正しないため、誕生日の
    前後では実際の満年齢と最大1歳ずれることがある。年齢確認の用途では
    この近似で十分とする。
    """

    @staticmethod
    def parse_birthday(value: Any) -> datetime | None:
        """ISO 8601 形式の生年月日をパースする.

        日付のみ（YYYY-MM-DD）の場合は UTC の 0 時とみなす。

        Returns:
            タイムゾーン付きの日時（解釈できない場合はNone）
        """
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value.strip())
            except ValueError:
                return None
        else:
            return None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @staticmethod
    def calculate_age(birthdate: datetime, now: datetime) -> int | None:
        """満年齢を計算する.

        Args:
            birthdate: 生年月日（タイムゾーン付き）
            now: 現在時刻（タイムゾーン付き）

        Returns:
            年齢（生年月日が未来の場合はNone）
        """
        elapsed = now - birthdate
        if elapsed.total_seconds() < 0:
            return None
        return (EPOCH + elapsed).year - EPOCH.year

    @classmethod
    def age_from_birthday(cls, value: Any, now: datetime) -> int | None:
        """リクエストの birthday 値から年齢を求める（不明ならNone）."""
        birthdate = cls.parse_birthday(value)
        if birthdate is None:
            return None
        return cls.calculate_age(birthdate, now)
