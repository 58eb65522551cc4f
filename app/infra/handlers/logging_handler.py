import structlog

from app.application.dto.schemas import TransactionRecord
from app.infra.handlers.base import BonusCreditor, TransactionHandler

logger = structlog.get_logger()


class LoggingTransactionHandler(TransactionHandler):
    """
    Обработчик по умолчанию: только пишет события в лог.
    Баланс, почта и учёт подключаются отдельной реализацией.
    """

    async def payment_completed(self, record: TransactionRecord) -> None:
        logger.info(
            "payment_completed",
            transaction_id=record.id,
            amount=record.amount,
            currency=record.currency,
            customer_email=record.customer_email,
            customer_name=record.customer_name,
        )

    async def payment_failed(self, record: TransactionRecord) -> None:
        logger.warning(
            "payment_failed",
            transaction_id=record.id,
            amount=record.amount,
            customer_email=record.customer_email,
            error=record.error,
        )

    async def withdrawal_completed(self, record: TransactionRecord) -> None:
        logger.info(
            "withdrawal_completed",
            transaction_id=record.id,
            amount=record.amount,
            customer_email=record.customer_email,
        )

    async def withdrawal_failed(self, record: TransactionRecord) -> None:
        logger.warning(
            "withdrawal_failed",
            transaction_id=record.id,
            amount=record.amount,
            customer_email=record.customer_email,
            error=record.error,
        )


class LoggingBonusCreditor(BonusCreditor):
    async def credit_bonus(self, record: TransactionRecord, bonus: float) -> None:
        logger.info(
            "signup_bonus_applied",
            transaction_id=record.id,
            bonus=bonus,
            currency=record.currency,
        )
