from typing import List

from fastapi import APIRouter, Depends, Response, status

from dependencies import get_order_store
from repositories.order_store import OrderStore
from schemas import ErrorResponse, OrderCreate, OrderResponse, OrderStatusUpdate

router = APIRouter(prefix="/orders", tags=["orders"])

VALIDATION_ERROR = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_ERROR,
)
async def create_order(
    payload: OrderCreate,
    store: OrderStore = Depends(get_order_store),
) -> OrderResponse:
    order = await store.create(payload.customer, payload.items)
    return OrderResponse.from_order(order)


@router.get("", response_model=List[OrderResponse])
async def list_orders(
    store: OrderStore = Depends(get_order_store),
) -> List[OrderResponse]:
    orders = await store.list()
    return [OrderResponse.from_order(order) for order in orders]


@router.get("/{order_id}", response_model=OrderResponse, responses=NOT_FOUND)
async def read_order(
    order_id: str,
    store: OrderStore = Depends(get_order_store),
) -> OrderResponse:
    order = await store.get(order_id)
    return OrderResponse.from_order(order)


@router.put(
    "/{order_id}/status",
    response_model=OrderResponse,
    responses={**VALIDATION_ERROR, **NOT_FOUND},
)
async def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    store: OrderStore = Depends(get_order_store),
) -> OrderResponse:
    order = await store.update_status(order_id, payload.status)
    return OrderResponse.from_order(order)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
)
async def delete_order(
    order_id: str,
    store: OrderStore = Depends(get_order_store),
) -> Response:
    await store.delete(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
