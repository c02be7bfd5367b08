import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Sequence

from errors import NotFound
from models import Order
from validation import validate_create, validate_status

logger = logging.getLogger("orders-api")

_TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStore:
    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._orders)

    async def create(self, customer: Any, items: Sequence[Any]) -> Order:
        items = list(items or ())
        validate_create(customer, items)
        async with self._lock:
            order = Order.create(
                customer.strip(),
                [item.strip() for item in items],
                order_id=str(uuid.uuid4()),
                now=_utcnow(),
            )
            self._orders[order.id] = order
        logger.info("Created order %s for %s (%d items)", order.id, order.customer, len(order.items))
        return order

    async def list(self) -> List[Order]:
        async with self._lock:
            return list(self._orders.values())

    async def get(self, order_id: str) -> Order:
        async with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            raise NotFound(order_id)
        return order

    async def update_status(self, order_id: str, status: Any) -> Order:
        target = validate_status(status)
        async with self._lock:
            current = self._orders.get(order_id)
            if current is None:
                raise NotFound(order_id)
            now = max(_utcnow(), current.updated_at + _TICK)
            order = current.with_status(target, now)
            self._orders[order_id] = order
        logger.info("Updated order %s status %s => %s", order_id, current.status.value, order.status.value)
        return order

    async def delete(self, order_id: str) -> None:
        async with self._lock:
            if self._orders.pop(order_id, None) is None:
                raise NotFound(order_id)
        logger.info("Deleted order %s", order_id)
