from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models import Order


class OrderCreate(BaseModel):
    customer: str = Field(..., description="Customer name")
    items: List[str] = Field(..., description="Ordered item names, at least one")


class OrderStatusUpdate(BaseModel):
    status: str = Field(..., description="One of pending, shipped, delivered, cancelled")


class OrderResponse(BaseModel):
    id: str
    customer: str
    items: List[str]
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            customer=order.customer,
            items=list(order.items),
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class ErrorResponse(BaseModel):
    message: str
    details: Optional[Dict[str, List[str]]] = None
