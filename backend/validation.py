from typing import Any, List, Sequence

from errors import INVALID_STATUS_MESSAGE, InvalidStatus, ValidationDetails, ValidationFailed
from models import OrderStatus

CUSTOMER_EMPTY = "must not be empty"
ITEMS_EMPTY = "at least one item required"


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def check_customer(customer: Any) -> ValidationDetails:
    if _is_blank(customer):
        return {"customer": [CUSTOMER_EMPTY]}
    return {}


def check_items(items: Sequence[Any]) -> ValidationDetails:
    messages: List[str] = []
    if not items:
        messages.append(ITEMS_EMPTY)
    for index, item in enumerate(items or ()):
        if _is_blank(item):
            messages.append(f"item {index} must not be empty")
    return {"items": messages} if messages else {}


def check_status(status: Any) -> ValidationDetails:
    try:
        OrderStatus.parse(status)
    except InvalidStatus:
        return {"status": [INVALID_STATUS_MESSAGE]}
    return {}


def merge_errors(*results: ValidationDetails) -> ValidationDetails:
    merged: ValidationDetails = {}
    for result in results:
        for field, messages in result.items():
            merged.setdefault(field, []).extend(messages)
    return merged


def validate_create(customer: Any, items: Sequence[Any]) -> None:
    errors = merge_errors(check_customer(customer), check_items(items))
    if errors:
        raise ValidationFailed(errors)


def validate_status(status: Any) -> OrderStatus:
    errors = check_status(status)
    if errors:
        raise ValidationFailed(errors)
    return OrderStatus(status)
