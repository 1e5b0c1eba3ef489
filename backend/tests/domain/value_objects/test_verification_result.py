"""VerificationRequest / VerificationResultのテスト."""
from src.domain.identifiers import CountryCode
from src.domain.value_objects import (
    TOO_YOUNG_MESSAGE,
    WELCOME_MESSAGE,
    VerificationRequest,
    VerificationResult,
)


class TestVerificationRequest:
    """VerificationRequestのテスト."""

    def test_ボディからbirthdayを取り出す(self):
        request = VerificationRequest.from_body(
            {"birthday": "2000-01-01", "name": "ignored"}, CountryCode("US")
        )
        assert request.birthday == "2000-01-01"
        assert request.country_code == CountryCode("US")

    def test_birthdayが無い場合はNone(self):
        request = VerificationRequest.from_body({}, CountryCode.default())
        assert request.birthday is None


class TestVerificationResult:
    """VerificationResultのテスト."""

    def test_デフォルトは年齢不足のメッセージ(self):
        result = VerificationResult(age=14, country="NL")
        assert result.message == TOO_YOUNG_MESSAGE
        assert result.old_enough is False

    def test_welcomeで歓迎メッセージになる(self):
        result = VerificationResult(age=24, country="US").welcome()
        assert result.message == WELCOME_MESSAGE
        assert result.old_enough is True

    def test_welcomeは元の結果を変更しない(self):
        original = VerificationResult(age=24, country="US")
        original.welcome()
        assert original.message == TOO_YOUNG_MESSAGE

    def test_to_dictはage_country_messageのみ(self):
        result = VerificationResult(age=24, country="US").welcome()
        assert result.to_dict() == {
            "age": 24,
            "country": "US",
            "message": WELCOME_MESSAGE,
        }

    def test_年齢不明はNoneで出力される(self):
        assert VerificationResult(age=None, country="NL").to_dict()["age"] is None
