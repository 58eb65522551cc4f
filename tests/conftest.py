import os

import pytest
from fastapi.testclient import TestClient

# Модуль app.web.main создаёт приложение при импорте
os.environ["ENVIRONMENT"] = "test"

from app.infra.config.settings import Settings
from app.web.main import create_app

from helpers import WEBHOOK_SECRET, RecordingBonusCreditor, RecordingTransactionHandler


@pytest.fixture
def handler() -> RecordingTransactionHandler:
    return RecordingTransactionHandler()


@pytest.fixture
def bonus_creditor() -> RecordingBonusCreditor:
    return RecordingBonusCreditor()


@pytest.fixture
def make_client(handler, bonus_creditor):
    def _make(secret: str | None = WEBHOOK_SECRET, transaction_handler=None, **overrides) -> TestClient:
        overrides.setdefault("ENVIRONMENT", "test")
        settings = Settings(_env_file=None, HELIO_WEBHOOK_SECRET=secret, **overrides)
        app = create_app(
            settings,
            transaction_handler=transaction_handler or handler,
            bonus_creditor=bonus_creditor,
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def unsigned_client(make_client) -> TestClient:
    return make_client(secret=None)
