"""
Orders API Endpoints
Handles order listing, status management and invoice printing

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: use OrderRepository for data access)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from onium_admin.api.deps import get_order_repository
from onium_admin.core.auth import get_current_admin
from onium_admin.core.config import settings
from onium_admin.domain.order import BulkStatusUpdate, OrderStatus, StatusUpdate
from onium_admin.repositories.order_repository import OrderRepository
from onium_admin.services.invoice_service import render_invoice

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])

STATUS_FILTER_VALUES = ["all"] + [s.value for s in OrderStatus]


@router.get("/")
async def get_orders(
    status: str = Query("all", description="Filter by order status, or 'all'"),
    search: Optional[str] = Query(None, description="Order id or part of the customer name"),
    page: int = Query(1, ge=1, description="1-based page number"),
    repo: OrderRepository = Depends(get_order_repository),
):
    """
    Get one page of orders with their items

    Returns orders newest first plus total count and page count
    """
    if status not in STATUS_FILTER_VALUES:
        raise HTTPException(
            status_code=400,
            detail=f"status must be one of: {', '.join(STATUS_FILTER_VALUES)}"
        )

    try:
        order_page = repo.find_page(
            status=status,
            search=search,
            page=page,
            page_size=settings.ORDERS_PAGE_SIZE,
        )
        return order_page.to_dict()

    except Exception as e:
        logger.error(f"Error fetching orders: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/statuses")
async def get_order_statuses():
    """Order statuses with their display label and badge classes"""
    return {
        "status": "success",
        "data": [
            {"value": s.value, "label": s.label, "badge": s.badge}
            for s in OrderStatus
        ]
    }


@router.post("/bulk-status")
async def bulk_update_status(
    payload: BulkStatusUpdate,
    repo: OrderRepository = Depends(get_order_repository),
):
    """Apply one status to every order in the selection"""
    try:
        updated = repo.bulk_update_status(payload.ids, payload.status)
    except Exception as e:
        logger.error(f"Error updating orders {payload.ids}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating orders: {str(e)}")

    return {
        "status": "success",
        "updated": updated,
        "requested": len(payload.ids),
        "new_status": payload.status.value,
    }


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    repo: OrderRepository = Depends(get_order_repository),
):
    """Get one order with its items"""
    try:
        order = repo.find_by_id(order_id)
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")

    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    return {"status": "success", "data": order.to_dict()}


@router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    payload: StatusUpdate,
    repo: OrderRepository = Depends(get_order_repository),
):
    """Change one order's status"""
    try:
        order = repo.update_status(order_id, payload.status)
    except Exception as e:
        logger.error(f"Error updating order {order_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating order: {str(e)}")

    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    return {
        "status": "success",
        "message": f"Order status updated to {order.status.value}",
        "data": order.to_dict(),
    }


@router.get("/{order_id}/invoice", response_class=HTMLResponse)
async def get_order_invoice(
    order_id: str,
    repo: OrderRepository = Depends(get_order_repository),
):
    """Printable invoice / packing slip for an order"""
    try:
        order = repo.find_by_id(order_id)
    except Exception as e:
        logger.error(f"Error fetching order {order_id} for invoice: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")

    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    return HTMLResponse(content=render_invoice(order))
