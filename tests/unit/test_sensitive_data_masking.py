import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_password_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_api_key_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "API-KEY: k-998877"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "k-998877" not in result["data"]
        assert result["data"].startswith("API-KEY: ")

    def test_database_url_credentials_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {
            "event": "store.failure",
            "error": "could not connect to postgres://catalog:hunter2@db:5432/catalog",
        }
        result = mask_sensitive_data(None, None, event_dict)
        assert "hunter2" not in result["error"]
        assert "postgres://catalog:***MASKED***@db:5432/catalog" in result["error"]

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "product.created", "name": "Widget", "active": True}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "product.created", "name": "Widget", "active": True}
