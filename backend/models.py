from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Sequence, Tuple

from errors import InvalidStatus


class OrderStatus(str, Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: Any) -> "OrderStatus":
        if isinstance(value, cls):
            return value
        for member in cls:
            if isinstance(value, str) and value == member.value:
                return member
        raise InvalidStatus(value)


@dataclass(frozen=True)
class Order:
    id: str
    customer: str
    items: Tuple[str, ...]
    status: OrderStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        customer: str,
        items: Sequence[str],
        *,
        order_id: str,
        now: datetime,
    ) -> "Order":
        return cls(
            id=order_id,
            customer=customer,
            items=tuple(items),
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def with_status(self, status: Any, now: datetime) -> "Order":
        return replace(self, status=OrderStatus.parse(status), updated_at=now)
