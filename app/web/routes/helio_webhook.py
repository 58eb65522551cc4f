import json
import time
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.application.dto.schemas import SmokePaymentRequest, SmokePaymentResponse
from app.application.services.signature import verify_signature
from app.application.use_cases.handle_helio_webhook import HandleHelioWebhookUseCase, parse_helio_webhook
from app.domain.enums import TransactionStatus
from app.domain.exceptions import AuthenticationFailure, MalformedPayload
from app.infra.config.settings import Settings
from app.web.deps import get_handle_webhook_use_case, get_settings

logger = structlog.get_logger()
router = APIRouter()

SIGNATURE_HEADERS = ("x-helio-signature", "x-signature")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/webhook")
async def helio_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
    use_case: HandleHelioWebhookUseCase = Depends(get_handle_webhook_use_case),
):
    """
    Принимает вебхуки от Helio.
    """
    try:
        raw_body = await request.body()
        signature = next(
            (request.headers[name] for name in SIGNATURE_HEADERS if request.headers.get(name)),
            None,
        )
        secret = settings.WEBHOOK_SECRET

        logger.info(
            "helio_webhook_received",
            has_signature=signature is not None,
            has_secret=secret is not None,
            body_length=len(raw_body),
        )

        # Без секрета проверка не выполняется (только для локального запуска)
        if secret and not verify_signature(raw_body, signature, secret):
            raise AuthenticationFailure("Invalid signature")

        payload = parse_helio_webhook(raw_body)
        result = await use_case.execute(payload)
    except AuthenticationFailure:
        logger.warning("webhook_signature_invalid")
        return _error(status.HTTP_401_UNAUTHORIZED, "Invalid signature")
    except MalformedPayload as e:
        logger.error("webhook_payload_invalid", error=str(e))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Invalid webhook payload")
    except Exception:
        logger.exception("webhook_processing_error")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Webhook processing failed")

    if result.retry:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Webhook processing failed")

    logger.info(
        "helio_webhook_processed",
        webhook_event=result.event,
        transaction_id=result.transaction_id,
        dispatch_status=result.status,
    )
    return {"message": "Webhook processed successfully"}


@router.post("/test")
async def helio_test_payment(request: Request):
    """
    Имитация успешного платежа для проверки интеграции.
    Подпись и обработчики не задействуются.
    """
    try:
        raw_body = await request.body()
        data = json.loads(raw_body) if raw_body.strip() else {}
        # Пустое тело или не объект: как пустой запрос
        if not isinstance(data, dict):
            data = {}
        body = SmokePaymentRequest.model_validate(data)
        now_ms = int(time.time() * 1000)
        response = SmokePaymentResponse(
            id=f"test_{now_ms}",
            status=TransactionStatus.COMPLETED,
            amount=body.amount,
            currency=body.currency or "USD",
            customer_email=body.customer_email,
            customer_name=body.customer_name,
            transaction_id=f"txn_{now_ms}",
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        logger.info("helio_test_payment", transaction_id=response.transaction_id)
        return response.model_dump(by_alias=True, mode="json", exclude_none=True)
    except Exception:
        logger.exception("helio_test_payment_error")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Test failed")
