import asyncio
import logging
from datetime import datetime, timezone

from order_intake.domain.models import Order
from order_intake.domain.exceptions import PersistenceError
from order_intake.application.interfaces import OrderRepository
from order_intake.application.validate_order import validate_order


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    def __init__(self, order_repository: OrderRepository, store_timeout: float):
        self._orders = order_repository
        self._store_timeout = store_timeout

    async def __call__(self, order: Order) -> str:
        logger.info(f"Приём заказа от {order.company_name!r}, тип {order.order_type!r}")

        # 1. Валидация и вычисление delivery_datetime
        validated = validate_order(order)

        # 2. Серверные поля: единственные изменения перед вставкой
        validated = validated.model_copy(update={
            "id": None,
            "created_at": datetime.now(timezone.utc),
        })

        # 3. Одна попытка вставки, ограниченная таймаутом
        try:
            order_id = await asyncio.wait_for(
                self._orders.create(validated), timeout=self._store_timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"Вставка заказа не уложилась в {self._store_timeout} с")
            raise PersistenceError(f"insert timed out after {self._store_timeout}s")

        logger.info(f"Заказ сохранён: {order_id}")
        return order_id
