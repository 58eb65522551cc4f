from typing import Protocol

from app.application.dto.schemas import TransactionRecord


class TransactionHandler(Protocol):
    async def payment_completed(self, record: TransactionRecord) -> None:
        """
        Зачисляет депозит на баланс игрока, отправляет подтверждение.
        """
        ...

    async def payment_failed(self, record: TransactionRecord) -> None:
        """
        Фиксирует неудачный платёж и уведомляет игрока.
        """
        ...

    async def withdrawal_completed(self, record: TransactionRecord) -> None:
        """
        Подтверждает вывод средств.
        """
        ...

    async def withdrawal_failed(self, record: TransactionRecord) -> None:
        """
        Возвращает средства на баланс после неудачного вывода.
        """
        ...


class BonusCreditor(Protocol):
    async def credit_bonus(self, record: TransactionRecord, bonus: float) -> None:
        """
        Начисляет бонус на счёт игрока.
        """
        ...
