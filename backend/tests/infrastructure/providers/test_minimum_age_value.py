"""to_minimum_ageのテスト."""
from decimal import Decimal

import pytest

from src.domain.ports import PolicyLookupError
from src.infrastructure.providers.minimum_age_value import to_minimum_age


class TestToMinimumAge:
    """ストア値の整数変換のテスト."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (21, 21),
            (Decimal("18"), 18),
            (Decimal("18.0"), 18),
            (21.0, 21),
            ("21", 21),
            (" 16 ", 16),
            (0, 0),
        ],
    )
    def test_整数として解釈できる値(self, value, expected):
        assert to_minimum_age(value) == expected

    def test_Noneは値なしエラー(self):
        with pytest.raises(PolicyLookupError, match="missing"):
            to_minimum_age(None)

    @pytest.mark.parametrize("value", ["abc", '"21"', "", "[21]", "true"])
    def test_数値でない文字列はエラー(self, value):
        with pytest.raises(PolicyLookupError):
            to_minimum_age(value)

    @pytest.mark.parametrize("value", [Decimal("20.5"), 20.5, Decimal("NaN"), float("inf"), "NaN"])
    def test_整数でない数値はエラー(self, value):
        with pytest.raises(PolicyLookupError):
            to_minimum_age(value)

    @pytest.mark.parametrize("value", [True, False])
    def test_真偽値はエラー(self, value):
        with pytest.raises(PolicyLookupError, match="unexpected type"):
            to_minimum_age(value)

    def test_負の値はエラー(self):
        with pytest.raises(PolicyLookupError, match="negative"):
            to_minimum_age(-1)
