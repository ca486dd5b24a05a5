"""
Dashboard API Endpoint
Admin overview: revenue, order counts, low stock, best sellers, recent orders

Author: TM3
Date: 2025-11-14
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from onium_admin.api.deps import get_order_repository, get_product_repository, get_review_repository
from onium_admin.core.auth import get_current_admin
from onium_admin.core.config import settings
from onium_admin.repositories import OrderRepository, ProductRepository, ReviewRepository
from onium_admin.services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/")
async def get_dashboard(
    orders: OrderRepository = Depends(get_order_repository),
    products: ProductRepository = Depends(get_product_repository),
    reviews: ReviewRepository = Depends(get_review_repository),
):
    """
    Get dashboard statistics

    Returns:
    - Total revenue, orders, pending orders, products, pending reviews
    - Low stock count and the lowest-stock products
    - Best sellers by units sold
    - Most recent orders
    """
    service = DashboardService(
        orders,
        products,
        reviews,
        low_stock_threshold=settings.LOW_STOCK_THRESHOLD,
        top_n=settings.DASHBOARD_TOP_N,
    )
    try:
        stats = service.get_stats()
    except Exception as e:
        logger.error(f"Error fetching dashboard data: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching dashboard data: {str(e)}")

    return {"status": "success", "data": stats.to_dict()}
