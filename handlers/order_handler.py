"""
handlers/order_handler.py
-------------------------
HTTP endpoints for /orders.
Each endpoint decodes the request, delegates to OrderService and wraps the
result in the response envelope. OrderNotFound and StorageUnavailable are
mapped by the application-wide exception handlers in main.py.
"""

from fastapi import APIRouter, Depends, Request

from handlers.responses import envelope, error_response
from handlers.schemas import CreateOrderRequest, UpdateOrderRequest
from repositories.exceptions import QueryFailed
from repositories.order_repo import OrderRepository
from services.order_service import OrderService

router = APIRouter()


def get_order_service(request: Request) -> OrderService:
    """Build an OrderService bound to the application's connection pool."""
    return OrderService(OrderRepository(request.app.state.db_pool))


@router.get("")
def get_orders(service: OrderService = Depends(get_order_service)):
    try:
        orders = service.list_orders()
    except QueryFailed:
        return error_response(500, "error retrieving orders")
    return envelope(data=orders)


@router.post("", status_code=201)
def add_order(body: CreateOrderRequest, service: OrderService = Depends(get_order_service)):
    try:
        created = service.add_order(body.to_model())
    except QueryFailed:
        return error_response(500, "error adding order to db")
    return envelope(data=created)


@router.get("/{order_id}")
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    try:
        order = service.get_order(order_id)
    except QueryFailed:
        return error_response(500, "error retrieving order")
    return envelope(data=order)


@router.put("/{order_id}")
def update_order(
    order_id: int,
    body: UpdateOrderRequest,
    service: OrderService = Depends(get_order_service),
):
    """Partially update an order; fields left out of the body are unchanged."""
    try:
        result = service.update_order(order_id, body.to_patch())
    except QueryFailed:
        return error_response(500, "error updating order")
    return envelope(data=result)


@router.delete("/{order_id}")
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    try:
        result = service.delete_order(order_id)
    except QueryFailed:
        return error_response(500, "error deleting order")
    return envelope(data=result)
