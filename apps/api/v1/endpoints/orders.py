"""Order endpoints for REST API."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from coffeeshop.application.dtos.order_dto import CreateOrderRequest, OrderDTO, UpdateOrderRequest
from coffeeshop.application.services.order_service import OrderService
from coffeeshop.domain.errors import OrderNotFoundError, ProductNotFoundError

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List every order with line items and products.

    Args:
        service: OrderService instance

    Returns:
        List of OrderDTO instances
    """
    orders = await service.get_all_orders()
    return [OrderDTO.from_domain(order) for order in orders]


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID.

    Raises:
        HTTPException: 404 if order not found
    """
    order = await service.get_order_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return OrderDTO.from_domain(order)


@router.post("", response_model=OrderDTO, status_code=201)
async def create_order(
    request: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderDTO:
    """Create a new order.

    Args:
        request: CreateOrderRequest DTO
        service: OrderService instance

    Returns:
        OrderDTO with created order details

    Raises:
        HTTPException: 404 if a referenced product does not exist
    """
    order, order_products = request.to_domain()
    try:
        created = await service.create_order(order, order_products)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return OrderDTO.from_domain(created)


@router.put("/{order_id}", response_model=OrderDTO)
async def update_order(
    order_id: int,
    request: UpdateOrderRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderDTO:
    """Replace an order's header fields and line items.

    Raises:
        HTTPException: 404 if the order or a referenced product does not exist
    """
    order, order_products = request.to_domain_for(order_id)
    try:
        updated = await service.update_order(order, order_products)
    except (OrderNotFoundError, ProductNotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.message)
    return OrderDTO.from_domain(updated)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> Response:
    """Delete an order and its line items. Missing orders are ignored."""
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
