from fastapi import Request

from app.application.use_cases.handle_helio_webhook import HandleHelioWebhookUseCase
from app.infra.config.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_handle_webhook_use_case(request: Request) -> HandleHelioWebhookUseCase:
    state = request.app.state
    return HandleHelioWebhookUseCase(state.transaction_handler, state.bonus_creditor)
