import hashlib
import hmac
import json

from app.application.dto.schemas import TransactionRecord

WEBHOOK_SECRET = "helio_test_secret"


class RecordingTransactionHandler:
    """Fake handler that records every call instead of touching a ledger."""

    def __init__(self, fail_with: Exception | None = None):
        self.calls: list[tuple[str, TransactionRecord]] = []
        self.fail_with = fail_with

    async def _record(self, name: str, record: TransactionRecord) -> None:
        self.calls.append((name, record))
        if self.fail_with is not None:
            raise self.fail_with

    async def payment_completed(self, record: TransactionRecord) -> None:
        await self._record("payment_completed", record)

    async def payment_failed(self, record: TransactionRecord) -> None:
        await self._record("payment_failed", record)

    async def withdrawal_completed(self, record: TransactionRecord) -> None:
        await self._record("withdrawal_completed", record)

    async def withdrawal_failed(self, record: TransactionRecord) -> None:
        await self._record("withdrawal_failed", record)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


class RecordingBonusCreditor:
    def __init__(self):
        self.credits: list[tuple[str | None, float]] = []

    async def credit_bonus(self, record: TransactionRecord, bonus: float) -> None:
        self.credits.append((record.id, bonus))


def sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def webhook_body(event: str, **data) -> bytes:
    data.setdefault("id", "txn_001")
    return json.dumps({"event": event, "data": data}).encode("utf-8")
