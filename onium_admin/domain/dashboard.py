"""
Dashboard Domain Models

Author: TM3
Date: 2025-11-14
"""
from pydantic import BaseModel, Field
from typing import Dict, List

from onium_admin.domain.order import Order
from onium_admin.domain.product import Product


class BestSeller(BaseModel):
    """Sales of one product title across all order items"""
    title: str
    sales: int = 0
    revenue: float = 0


class DashboardStats(BaseModel):
    """Summary numbers and top-N lists for the admin overview"""

    total_revenue: float = 0
    total_orders: int = 0
    pending_orders: int = 0
    products_count: int = 0
    pending_reviews: int = 0
    # Counted over every product at or under the threshold, not just the ones displayed
    low_stock_count: int = 0
    low_stock_products: List[Product] = Field(default_factory=list)
    best_sellers: List[BestSeller] = Field(default_factory=list)
    recent_orders: List[Order] = Field(default_factory=list)
    orders_by_status: Dict[str, int] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", exclude={"low_stock_products", "recent_orders"})
        data["low_stock_products"] = [product.to_dict() for product in self.low_stock_products]
        data["recent_orders"] = [order.to_dict() for order in self.recent_orders]
        return data
