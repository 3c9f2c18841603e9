import re
from datetime import datetime

from order_intake.domain.models import Order, EXISTING_BRAND_MIN_QUANTITY
from order_intake.domain.exceptions import ValidationError

DELIVERY_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DELIVERY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

EMAIL_MIN_LENGTH = 3
EMAIL_MAX_LENGTH = 254


def parse_quantity(value: str) -> int:
    """Десятичное целое: знак, только ASCII-цифры, без пробелов, в пределах int64"""
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    number = int(value)
    if number < _INT64_MIN or number > _INT64_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def parse_delivery_datetime(date_str: str, time_str: str) -> datetime:
    """Склеивает дату "YYYY-MM-DD" и время "HH:MM" в один datetime без таймзоны"""
    combined = f"{date_str} {time_str}"
    if not _DELIVERY_RE.fullmatch(combined):
        raise ValueError(f"unexpected delivery layout: {combined!r}")
    return datetime.strptime(combined, DELIVERY_DATETIME_FORMAT)


def is_valid_email(email: str) -> bool:
    # Намеренно слабая проверка: длина и наличие "@"
    length = len(email.encode("utf-8"))
    if length < EMAIL_MIN_LENGTH or length > EMAIL_MAX_LENGTH:
        return False
    return "@" in email


def _check_required_fields(order: Order) -> None:
    required = (
        order.product_type,
        order.sub_option,
        order.quantity,
        order.size,
        order.delivery_date,
        order.delivery_time,
        order.company_name,
        order.email,
        order.phone_number,
        order.address,
    )
    if any(value == "" for value in required):
        raise ValidationError("missing required fields")


def _check_existing_brand(order: Order) -> None:
    if not order.is_existing_brand():
        return
    if order.brand_name == "":
        raise ValidationError("brandName is required for Existing Brand orders")
    try:
        quantity = parse_quantity(order.quantity)
    except ValueError:
        raise ValidationError("quantity must be a valid number")
    if quantity < EXISTING_BRAND_MIN_QUANTITY:
        raise ValidationError(
            f"quantity must be at least {EXISTING_BRAND_MIN_QUANTITY} for Existing Brand orders"
        )


def validate_order(order: Order) -> Order:
    """
    Проверяет заказ и вычисляет delivery_datetime.

    Правила применяются по порядку, возвращается первая ошибка.
    Исходный заказ не меняется, возвращается копия с delivery_datetime.
    """
    _check_required_fields(order)
    _check_existing_brand(order)

    if not is_valid_email(order.email):
        raise ValidationError("invalid email format")

    try:
        parse_quantity(order.quantity)
    except ValueError:
        raise ValidationError("quantity must be a valid number")

    try:
        delivery_datetime = parse_delivery_datetime(order.delivery_date, order.delivery_time)
    except ValueError:
        raise ValidationError("invalid delivery date or time format")

    return order.model_copy(update={"delivery_datetime": delivery_datetime})
