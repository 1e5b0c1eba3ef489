"""年齢確認結果の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

TOO_YOUNG_MESSAGE = "You are too young to drink!"
WELCOME_MESSAGE = "Welcome, have a drink."


@dataclass(frozen=True)
class VerificationResult:
    """年齢確認結果.

    age が None の場合は年齢不明（生年月日が解釈できなかった）を表す。
    old_enough はレスポンスボディには含めない。
    """

    age: int | None
    country: str
    message: str = TOO_YOUNG_MESSAGE
    old_enough: bool = False

    def welcome(self) -> VerificationResult:
        """年齢要件を満たした結果を返す."""
        return replace(self, message=WELCOME_MESSAGE, old_enough=True)

    def to_dict(self) -> dict[str, Any]:
        """レスポンスボディ用の辞書に変換する."""
        return {
            "age": self.age,
            "country": self.country,
            "message": self.message,
        }
