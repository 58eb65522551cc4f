class WebhookError(Exception):
    """Базовая ошибка обработки вебхука."""


class AuthenticationFailure(WebhookError):
    pass


class MalformedPayload(WebhookError):
    pass


class TransactionNotRecorded(WebhookError):
    """
    Коллаборатор не смог надёжно сохранить транзакцию.
    Провайдер должен повторить доставку.
    """

    def __init__(self, transaction_id: str | None, reason: str = ""):
        self.transaction_id = transaction_id
        self.reason = reason
        super().__init__(f"Transaction {transaction_id} was not recorded: {reason}")
