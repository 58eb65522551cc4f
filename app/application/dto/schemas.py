from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.enums import TransactionStatus, WebhookEventKind


class TransactionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    id: str | None = None
    amount: float | None = None
    currency: str | None = "USD"
    customer_email: str | None = Field(default=None, alias="customerEmail")
    customer_name: str | None = Field(default=None, alias="customerName")
    error: str | None = None
    metadata: Dict[str, Any] | None = Field(default_factory=dict)

    # null в currency/metadata приходит от провайдера как "поле не задано"
    @field_validator("currency", mode="before")
    @classmethod
    def _default_currency(cls, value: Any) -> Any:
        return "USD" if value is None else value

    @field_validator("metadata", mode="before")
    @classmethod
    def _default_metadata(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_first_deposit(self) -> bool:
        return (self.metadata or {}).get("isFirstDeposit") is True


class HelioWebhook(BaseModel):
    event: str
    data: TransactionRecord

    @property
    def kind(self) -> WebhookEventKind:
        return WebhookEventKind.parse(self.event)


class SmokePaymentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    amount: Any = None
    currency: str | None = None
    customer_email: str | None = Field(default=None, alias="customerEmail")
    customer_name: str | None = Field(default=None, alias="customerName")


class SmokePaymentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    status: TransactionStatus
    amount: Any
    currency: str
    customer_email: str | None = Field(alias="customerEmail")
    customer_name: str | None = Field(alias="customerName")
    transaction_id: str = Field(alias="transactionId")
    timestamp: str
