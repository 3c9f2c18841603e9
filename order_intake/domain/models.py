from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

EXISTING_BRAND = "Existing Brand"
EXISTING_BRAND_MIN_QUANTITY = 1000


class Order(BaseModel):
    """Domain Entity — заявка на печать/производство"""
    model_config = ConfigDict(frozen=True)

    product_type: str = ""
    sub_option: str = ""
    order_type: str = ""
    brand_name: str = ""
    quantity: str = ""
    size: str = ""
    delivery_date: str = ""
    delivery_time: str = ""
    special_instructions: str = ""
    terms_accepted: bool = False
    company_name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""

    # Заполняются только на сервере
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    delivery_datetime: Optional[datetime] = None

    def is_existing_brand(self) -> bool:
        """Бизнес-правило: для существующего бренда действуют доп. проверки"""
        return self.order_type == EXISTING_BRAND
