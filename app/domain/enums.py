from enum import StrEnum, auto


class WebhookEventKind(StrEnum):
    PAYMENT_COMPLETED = "payment.completed"
    PAYMENT_FAILED = "payment.failed"
    WITHDRAWAL_COMPLETED = "withdrawal.completed"
    WITHDRAWAL_FAILED = "withdrawal.failed"
    UNRECOGNIZED = auto()

    @classmethod
    def parse(cls, value: str | None) -> "WebhookEventKind":
        # Exact match only; "unrecognized" itself is not a provider event.
        for kind in cls:
            if kind is not cls.UNRECOGNIZED and kind.value == value:
                return kind
        return cls.UNRECOGNIZED


class DispatchStatus(StrEnum):
    HANDLED = auto()
    IGNORED = auto()
    FAILED = auto()


class TransactionStatus(StrEnum):
    COMPLETED = auto()
    FAILED = auto()
