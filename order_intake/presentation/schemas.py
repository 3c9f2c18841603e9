from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from order_intake.domain.models import Order


class OrderForm(BaseModel):
    """Тело POST /order. Отсутствующие поля получают нулевые значения"""
    model_config = ConfigDict(alias_generator=to_camel, strict=True, extra="ignore")

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

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero(cls, value, info: ValidationInfo):
        # null в JSON оставляет нулевое значение поля
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def to_domain(self) -> Order:
        # id, createdAt и deliveryDateTime от клиента не принимаются
        return Order(**self.model_dump())


class OrderReceivedResponse(BaseModel):
    order_id: str = Field(serialization_alias="orderID")
    status: str = "Order received"
