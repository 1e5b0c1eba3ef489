"""年齢確認リクエストの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..identifiers import CountryCode


@dataclass(frozen=True)
class VerificationRequest:
    """年齢確認リクエスト.

    birthday はリクエストボディの値をそのまま保持する。
    パースできるかどうかは年齢計算側で判断する。
    """

    birthday: Any
    country_code: CountryCode

    @classmethod
    def from_body(cls, body: dict[str, Any], country_code: CountryCode) -> VerificationRequest:
        """パース済みのリクエストボディから生成する."""
        return cls(birthday=body.get("birthday"), country_code=country_code)
