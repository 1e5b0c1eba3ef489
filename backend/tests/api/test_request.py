"""APIリクエストユーティリティのテスト."""
import base64
import json

import pytest

from src.api.request import MAX_BODY_BYTES, get_header, get_json_body, get_viewer_country
from src.domain.identifiers import CountryCode


class TestGetJsonBody:
    """get_json_bodyのテスト."""

    def test_JSONオブジェクトをパースする(self):
        event = {"body": json.dumps({"birthday": "2000-01-01"})}
        assert get_json_body(event) == {"birthday": "2000-01-01"}

    def test_base64エンコードされたボディをパースする(self):
        encoded = base64.b64encode(json.dumps({"birthday": "2000-01-01"}).encode()).decode()
        event = {"body": encoded, "isBase64Encoded": True}
        assert get_json_body(event) == {"birthday": "2000-01-01"}

    @pytest.mark.parametrize("event", [{}, {"body": None}, {"body": ""}])
    def test_空のボディはValueError(self, event):
        with pytest.raises(ValueError, match="empty"):
            get_json_body(event)

    def test_JSONでないボディはValueError(self):
        with pytest.raises(ValueError, match="Invalid JSON body"):
            get_json_body({"body": "not json"})

    @pytest.mark.parametrize("body", ["123", '"2000-01-01"', "[1, 2]", "null"])
    def test_JSONオブジェクト以外はValueError(self, body):
        with pytest.raises(ValueError, match="must be a JSON object"):
            get_json_body({"body": body})

    def test_深くネストしたボディはValueError(self):
        body = "[" * 5000 + "]" * 5000
        with pytest.raises(ValueError, match="Invalid JSON body"):
            get_json_body({"body": body})

    def test_上限を超えるボディはValueError(self):
        body = json.dumps({"birthday": "2000-01-01", "padding": "x" * MAX_BODY_BYTES})
        with pytest.raises(ValueError, match="exceeds"):
            get_json_body({"body": body})

    def test_上限ちょうどのボディは受け付ける(self):
        prefix = '{"birthday": "2000-01-01", "padding": "'
        suffix = '"}'
        body = prefix + "x" * (MAX_BODY_BYTES - len(prefix) - len(suffix)) + suffix
        assert len(body.encode("utf-8")) == MAX_BODY_BYTES
        assert get_json_body({"body": body})["birthday"] == "2000-01-01"

    def test_不正なbase64はValueError(self):
        with pytest.raises(ValueError, match="Invalid base64 body"):
            get_json_body({"body": "%%%not-base64%%%", "isBase64Encoded": True})


class TestGetHeader:
    """get_headerのテスト."""

    def test_大文字小文字を区別しない(self):
        event = {"headers": {"cloudfront-viewer-country": "US"}}
        assert get_header(event, "CloudFront-Viewer-Country") == "US"

    def test_multiValueHeadersからも取得する(self):
        event = {"multiValueHeaders": {"CloudFront-Viewer-Country": ["DE", "FR"]}}
        assert get_header(event, "cloudfront-viewer-country") == "DE"

    def test_存在しない場合はNone(self):
        assert get_header({"headers": None}, "X-Missing") is None


class TestGetViewerCountry:
    """get_viewer_countryのテスト."""

    def test_ヘッダーの国コードを返す(self):
        event = {"headers": {"CloudFront-Viewer-Country": "us"}}
        assert get_viewer_country(event) == CountryCode("US")

    def test_ヘッダーが無い場合はNL(self):
        assert get_viewer_country({}) == CountryCode("NL")

    def test_不正な国コードはNLにフォールバックする(self, caplog):
        event = {"headers": {"CloudFront-Viewer-Country": "XYZ"}}
        assert get_viewer_country(event) == CountryCode("NL")
        assert "Invalid CloudFront-Viewer-Country header" in caplog.text
