"""
Dashboard Service
Derives the admin overview numbers from orders, products, order items and
the pending review count

All derivation happens in memory over collections fetched wholesale.

Author: TM3
Date: 2025-11-14
"""
import logging
from typing import Dict, Iterable, List, Optional

from onium_admin.domain.dashboard import BestSeller, DashboardStats
from onium_admin.domain.order import Order, OrderItem, OrderStatus
from onium_admin.domain.product import Product
from onium_admin.repositories.order_repository import OrderRepository
from onium_admin.repositories.product_repository import ProductRepository
from onium_admin.repositories.review_repository import ReviewRepository

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 5
TOP_N = 5


def low_stock(products: Iterable[Product], threshold: int = LOW_STOCK_THRESHOLD) -> List[Product]:
    """Products with stock at or under the threshold, lowest stock first"""
    return sorted((p for p in products if p.stock <= threshold), key=lambda p: p.stock)


def best_sellers(items: Iterable[OrderItem], top_n: int = TOP_N) -> List[BestSeller]:
    """
    Units sold and revenue per product title, most units first

    Grouped by title, so two distinct products sharing a title are counted
    together.
    """
    by_title: Dict[str, BestSeller] = {}
    for item in items:
        seller = by_title.setdefault(item.product_title, BestSeller(title=item.product_title))
        seller.sales += item.quantity
        seller.revenue += item.line_total

    ranked = sorted(by_title.values(), key=lambda s: s.sales, reverse=True)
    return ranked[:top_n]


def derive_dashboard_stats(
    orders: List[Order],
    products: List[Product],
    order_items: List[OrderItem],
    pending_reviews: int = 0,
    products_count: Optional[int] = None,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    top_n: int = TOP_N,
) -> DashboardStats:
    """
    Compute the dashboard from already-fetched collections

    Args:
        orders: Every order, oldest first
        products: Every product
        order_items: Every order item
        pending_reviews: Number of unapproved reviews
        products_count: Exact product count if known, else len(products)
        low_stock_threshold: Stock at or under this is flagged
        top_n: Length of the displayed top lists

    Returns:
        DashboardStats
    """
    low = low_stock(products, low_stock_threshold)

    orders_by_status = {status.value: 0 for status in OrderStatus}
    for order in orders:
        orders_by_status[order.status.value] += 1

    return DashboardStats(
        total_revenue=sum(order.total_price or 0 for order in orders),
        total_orders=len(orders),
        pending_orders=orders_by_status[OrderStatus.PENDING.value],
        products_count=products_count if products_count is not None else len(products),
        pending_reviews=pending_reviews,
        low_stock_count=len(low),
        low_stock_products=low[:top_n],
        best_sellers=best_sellers(order_items, top_n),
        recent_orders=list(reversed(orders))[:top_n],
        orders_by_status=orders_by_status,
    )


class DashboardService:
    """Fetches the dashboard's source collections and derives the stats"""

    def __init__(
        self,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
        review_repository: ReviewRepository,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        top_n: int = TOP_N,
    ):
        self.order_repository = order_repository
        self.product_repository = product_repository
        self.review_repository = review_repository
        self.low_stock_threshold = low_stock_threshold
        self.top_n = top_n

    def get_stats(self) -> DashboardStats:
        """
        Fetch everything and derive the dashboard

        Any failed fetch propagates and nothing is derived.
        """
        orders = self.order_repository.find_all(ascending=True)
        products = self.product_repository.find_all()
        order_items = self.order_repository.find_all_items()
        pending_reviews = self.review_repository.count_pending()
        products_count = self.product_repository.count()

        return derive_dashboard_stats(
            orders,
            products,
            order_items,
            pending_reviews=pending_reviews,
            products_count=products_count,
            low_stock_threshold=self.low_stock_threshold,
            top_n=self.top_n,
        )
