import hashlib
import hmac

import structlog

logger = structlog.get_logger()

SIGNATURE_PREFIX = "sha256="


def compute_signature(raw_body: bytes, secret: str) -> str:
    """
    HMAC-SHA256 от сырого тела запроса, hex.
    """
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()


def verify_signature(raw_body: bytes, provided_signature: str | None, secret: str | None) -> bool:
    """
    Проверяет подпись вебхука Helio.

    Тело должно быть ровно теми байтами, что пришли в запросе,
    без повторной сериализации JSON.
    """
    if not provided_signature or not secret:
        logger.warning(
            "webhook_signature_missing",
            has_signature=bool(provided_signature),
            has_secret=bool(secret),
        )
        return False

    try:
        expected = compute_signature(raw_body, secret)
        provided = provided_signature.removeprefix(SIGNATURE_PREFIX)
        # compare_digest не зависит от позиции первого расхождения
        return hmac.compare_digest(expected.encode("ascii"), provided.encode("ascii"))
    except Exception as e:
        logger.warning("webhook_signature_error", error_type=type(e).__name__)
        return False
