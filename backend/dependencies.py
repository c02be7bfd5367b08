from fastapi import Request

from repositories.order_store import OrderStore


def get_order_store(request: Request) -> OrderStore:
    return request.app.state.order_store
