import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError as SchemaValidationError

from order_intake.presentation.schemas import OrderForm, OrderReceivedResponse
from order_intake.application.create_order import CreateOrderUseCase
from order_intake.application.interfaces import OrderRepository
from order_intake.domain.models import Order
from order_intake.domain.exceptions import DecodeError, ValidationError, PersistenceError
from order_intake.infrastructure.repositories import SQLAlchemyOrderRepository
from order_intake.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_order_repository(request: Request) -> OrderRepository:
    return SQLAlchemyOrderRepository(request.app.state.session_factory)


# Фабрика для создания use case
def get_create_order_use_case(orders: OrderRepository = Depends(get_order_repository)):
    return CreateOrderUseCase(orders, settings.STORE_TIMEOUT)


def decode_order(body: bytes) -> Order:
    """Только структурный разбор: отсутствующие поля не ошибка"""
    # Пустой заказ на null, дальше его отклонит валидация
    if body.strip() == b"null":
        body = b"{}"
    try:
        form = OrderForm.model_validate_json(body)
    except SchemaValidationError as e:
        raise DecodeError(str(e))
    return form.to_domain()


@router.post("/order")
async def create_order(
    request: Request,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case)
):
    """Принять заявку на заказ"""
    try:
        order = decode_order(await request.body())
        order_id = await use_case(order)
    except DecodeError as e:
        logger.info(f"Некорректный JSON: {e}")
        return PlainTextResponse("Invalid JSON data", status_code=status.HTTP_400_BAD_REQUEST)
    except ValidationError as e:
        logger.info(f"Заказ отклонён: {e.reason}")
        return PlainTextResponse(e.reason, status_code=status.HTTP_400_BAD_REQUEST)
    except PersistenceError as e:
        logger.error(f"Ошибка сохранения заказа: {e}")
        return PlainTextResponse(
            "Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return JSONResponse(OrderReceivedResponse(order_id=order_id).model_dump(by_alias=True))
