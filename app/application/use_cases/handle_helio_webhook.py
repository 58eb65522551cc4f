from dataclasses import dataclass

import structlog
from pydantic import ValidationError

from app.application.dto.schemas import HelioWebhook, TransactionRecord
from app.application.services.bonus_policy import compute_signup_bonus
from app.domain.enums import DispatchStatus, WebhookEventKind
from app.domain.exceptions import MalformedPayload, TransactionNotRecorded
from app.infra.handlers.base import BonusCreditor, TransactionHandler

logger = structlog.get_logger()


@dataclass
class DispatchResult:
    kind: WebhookEventKind
    event: str
    transaction_id: str | None
    status: DispatchStatus
    bonus: float | None = None
    error: str | None = None
    retry: bool = False


def parse_helio_webhook(raw_body: bytes) -> HelioWebhook:
    """
    Разбирает тело вебхука. Вызывается только после проверки подписи.
    """
    try:
        payload = HelioWebhook.model_validate_json(raw_body)
    except ValidationError as e:
        raise MalformedPayload(f"Invalid webhook payload: {e.error_count()} error(s)") from e

    if not payload.data.id:
        raise MalformedPayload("Webhook data has no transaction id")
    return payload


class HandleHelioWebhookUseCase:
    def __init__(
        self,
        handler: TransactionHandler,
        bonus_creditor: BonusCreditor,
    ):
        self.handler = handler
        self.bonus_creditor = bonus_creditor

    async def execute(self, payload: HelioWebhook) -> DispatchResult:
        """
        Направляет событие в нужный обработчик. Исключения не пробрасывает:
        ошибка обработчика возвращается в DispatchResult.
        """
        kind = payload.kind
        data = payload.data
        result = DispatchResult(
            kind=kind,
            event=payload.event,
            transaction_id=data.id,
            status=DispatchStatus.HANDLED,
        )
        logger.info("webhook_dispatch_started", webhook_event=payload.event, transaction_id=data.id)

        try:
            match kind:
                case WebhookEventKind.PAYMENT_COMPLETED:
                    await self._handle_payment_completed(data, result)
                case WebhookEventKind.PAYMENT_FAILED:
                    await self.handler.payment_failed(data)
                case WebhookEventKind.WITHDRAWAL_COMPLETED:
                    await self.handler.withdrawal_completed(data)
                case WebhookEventKind.WITHDRAWAL_FAILED:
                    await self.handler.withdrawal_failed(data)
                case WebhookEventKind.UNRECOGNIZED:
                    logger.warning("webhook_unknown_event", webhook_event=payload.event, transaction_id=data.id)
                    result.status = DispatchStatus.IGNORED
        except TransactionNotRecorded as e:
            logger.error(
                "webhook_transaction_not_recorded",
                webhook_event=payload.event,
                transaction_id=data.id,
                reason=e.reason,
            )
            result.status = DispatchStatus.FAILED
            result.error = str(e)
            result.retry = True
        except Exception as e:
            logger.exception(
                "webhook_handler_failed",
                webhook_event=payload.event,
                transaction_id=data.id,
                error_type=type(e).__name__,
            )
            result.status = DispatchStatus.FAILED
            result.error = str(e)

        return result

    async def _handle_payment_completed(self, data: TransactionRecord, result: DispatchResult) -> None:
        await self.handler.payment_completed(data)

        bonus = compute_signup_bonus(data)
        if bonus is None:
            return

        result.bonus = bonus
        logger.info("signup_bonus_computed", transaction_id=data.id, bonus=bonus)
        await self.bonus_creditor.credit_bonus(data, bonus)
