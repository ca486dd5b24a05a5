"""
Customer Domain Model

Customers are not stored; a CustomerProfile is rebuilt from the orders
table on every load.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from onium_admin.domain.order import Order


class CustomerProfile(BaseModel):
    """
    Customer aggregate keyed by lowercased email

    Fields:
        email: Email as written on the first order seen
        name / phone / address: Taken from the most recent order
        total_orders: Number of orders
        total_spent: Sum of order totals (missing totals count as 0)
        last_order_date: Creation time of the most recent order
        orders: Full order history
    """

    email: str
    name: str
    phone: Optional[str] = ""
    address: Optional[str] = ""
    total_orders: int = 0
    total_spent: float = 0
    last_order_date: datetime
    orders: List[Order] = Field(default_factory=list)

    @property
    def average_order_value(self) -> float:
        if not self.total_orders:
            return 0
        return self.total_spent / self.total_orders

    def to_dict(self, include_orders: bool = True) -> dict:
        data = self.model_dump(mode="json", exclude={"orders"})
        data["average_order_value"] = round(self.average_order_value, 2)
        if include_orders:
            data["orders"] = [order.to_dict() for order in self.orders]
        return data
