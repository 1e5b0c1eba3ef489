"""国コードの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COUNTRY_CODE = "NL"


@dataclass(frozen=True)
class CountryCode:
    """ISO-3166 alpha-2 の国コード."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str):
            raise TypeError("CountryCode must be a string")
        if len(self.value) != 2 or not self.value.isascii() or not self.value.isalpha():
            raise ValueError(f"Invalid country code: {self.value!r}")
        # 大文字に正規化（frozen のため object.__setattr__ を使う）
        object.__setattr__(self, "value", self.value.upper())

    @classmethod
    def default(cls) -> CountryCode:
        """位置情報が無い場合の国コードを返す."""
        return cls(DEFAULT_COUNTRY_CODE)

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
