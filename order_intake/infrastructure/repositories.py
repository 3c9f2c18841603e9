import logging
from sqlalchemy import insert, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from order_intake.domain.models import Order
from order_intake.domain.exceptions import PersistenceError
from order_intake.infrastructure.db_schema import orders_tbl
from order_intake.application.interfaces import OrderRepository

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(OrderRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, order: Order) -> str:
        stmt = insert(orders_tbl).values(**self._to_row(order))
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                order_id = result.inserted_primary_key[0]
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Ошибка вставки заказа: {e}")
            raise PersistenceError(f"insert failed: {e}")
        except Exception as e:
            logger.exception(f"Непредвиденная ошибка хранилища: {e}")
            raise PersistenceError(f"unexpected store error: {e}")
        return order_id

    async def ping(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            raise PersistenceError(f"store is unreachable: {e}")

    def _to_row(self, order: Order) -> dict:
        """Трансформация Domain → DB"""
        return {
            "product_type": order.product_type,
            "sub_option": order.sub_option,
            "order_type": order.order_type,
            "brand_name": order.brand_name or None,
            "quantity": order.quantity,
            "size": order.size,
            "delivery_date": order.delivery_date,
            "delivery_time": order.delivery_time,
            "special_instructions": order.special_instructions or None,
            "terms_accepted": order.terms_accepted,
            "company_name": order.company_name,
            "email": order.email,
            "phone_number": order.phone_number,
            "address": order.address,
            "created_at": order.created_at,
            "delivery_datetime": order.delivery_datetime,
        }
