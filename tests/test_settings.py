import importlib
import sys

import pytest

PROD = "apps.api.config.settings.prod"


@pytest.fixture
def fresh_prod(monkeypatch):
    monkeypatch.setenv("DJANGO_SECRET_KEY", "prod-secret")
    monkeypatch.setenv("ALLOWED_HOSTS", "api.lms.test")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://lms.test")
    monkeypatch.delenv("API_BASE_URL", raising=False)
    sys.modules.pop(PROD, None)
    yield
    sys.modules.pop(PROD, None)


class TestProdSettings:
    def test_loads_from_env_only(self, fresh_prod):
        prod = importlib.import_module(PROD)
        assert prod.DEBUG is False
        assert prod.ALLOWED_HOSTS == ["api.lms.test"]
        assert prod.CSRF_TRUSTED_ORIGINS == ["https://lms.test"]
        assert not hasattr(prod, "API_BASE_URL")
