from abc import ABC, abstractmethod
from order_intake.domain.models import Order


class OrderRepository(ABC):
    @abstractmethod
    async def create(self, order: Order) -> str:
        """Сохраняет заказ одной вставкой и возвращает сгенерированный id"""
        pass

    @abstractmethod
    async def ping(self) -> None:
        pass
