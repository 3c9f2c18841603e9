import uuid
from sqlalchemy import Table, Column, String, Boolean, DateTime, Text, MetaData

metadata = MetaData()


def generate_order_id() -> str:
    return uuid.uuid4().hex


orders_tbl = Table(
    "orders",
    metadata,
    Column("id", String, primary_key=True, default=generate_order_id),
    Column("product_type", String, nullable=False),
    Column("sub_option", String, nullable=False),
    Column("order_type", String, nullable=False),
    Column("brand_name", String, nullable=True),
    Column("quantity", String, nullable=False),
    Column("size", String, nullable=False),
    Column("delivery_date", String, nullable=False),
    Column("delivery_time", String, nullable=False),
    Column("special_instructions", Text, nullable=True),
    Column("terms_accepted", Boolean, nullable=False, default=False),
    Column("company_name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("phone_number", String, nullable=False),
    Column("address", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("delivery_datetime", DateTime(timezone=False), nullable=False)
)
