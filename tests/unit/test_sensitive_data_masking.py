import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_password_assignment_masked(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_password_hash_masked(self):
        hashed = "pbkdf2_sha256$870000$salt$c2VjcmV0aGFzaA=="
        event_dict = {"event": "test", "detail": f"stored {hashed}"}
        result = mask_sensitive_data(None, None, event_dict)
        assert hashed not in result["detail"]
        assert "***MASKED***" in result["detail"]

    def test_password_key_masked(self):
        event_dict = {"event": "customer.created", "password": "plain"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["password"] == "***MASKED***"

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "customer.created", "email": "isabel@gmail.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["email"] == "isabel@gmail.com"
        assert result["event"] == "customer.created"
