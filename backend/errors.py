from __future__ import annotations

from typing import Any, Dict, List

ValidationDetails = Dict[str, List[str]]

INVALID_STATUS_MESSAGE = "invalid status"


class OrderError(Exception):
    status_code: int = 400
    message: str = "order error"

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationFailed(OrderError):
    """One or more fields of a payload were rejected."""

    status_code = 400
    message = "validation failed"

    def __init__(self, details: ValidationDetails) -> None:
        super().__init__(f"{self.message}: {', '.join(sorted(details))}")
        self.details = {field: list(messages) for field, messages in details.items()}

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message, "details": self.details}


class NotFound(OrderError):
    status_code = 404
    message = "order not found"

    def __init__(self, order_id: str) -> None:
        super().__init__(f"{self.message}: {order_id}")
        self.order_id = order_id


class InvalidStatus(OrderError):
    status_code = 400
    message = INVALID_STATUS_MESSAGE

    def __init__(self, value: Any) -> None:
        super().__init__(f"{self.message}: {value!r}")
        self.value = value

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message, "details": {"status": [INVALID_STATUS_MESSAGE]}}
