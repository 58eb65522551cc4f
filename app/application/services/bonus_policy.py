from app.application.dto.schemas import TransactionRecord

SIGNUP_BONUS_RATE = 0.5


def compute_signup_bonus(record: TransactionRecord) -> float | None:
    """
    Бонус 50% за первый депозит.
    Без лимита, округления и защиты от повторного начисления.
    """
    if not record.is_first_deposit or record.amount is None:
        return None
    return record.amount * SIGNUP_BONUS_RATE
