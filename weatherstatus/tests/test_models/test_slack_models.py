"""Tests for Slack response model."""

from weatherstatus.models.slack import SlackResponse


class TestSlackResponse:
    def test_ok(self):
        resp = SlackResponse(200, '{"ok": true, "profile": {}}')
        assert resp.ok is True
        assert resp.error is None

    def test_api_error(self):
        resp = SlackResponse(200, '{"ok": false, "error": "invalid_auth"}')
        assert resp.ok is False
        assert resp.error == "invalid_auth"

    def test_non_json_body(self):
        resp = SlackResponse(200, "<html>oops</html>")
        assert resp.ok is False
        assert resp.json() == {}

    def test_http_error_code(self):
        resp = SlackResponse(500, '{"ok": true}')
        assert resp.ok is False
