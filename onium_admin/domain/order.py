"""
Order Domain Models

Represents order-related entities of the storefront.
These are the single source of truth for order data structure.

Author: TM3
Date: 2025-10-17
"""
from enum import Enum
from math import ceil
from typing import Dict, List, Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderStatus(str, Enum):
    """Lifecycle stage of an order"""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return STATUS_DISPLAY[self]["label"]

    @property
    def badge(self) -> str:
        """CSS classes the admin UI uses for the status pill"""
        return STATUS_DISPLAY[self]["badge"]


# Every OrderStatus member must have an entry here
STATUS_DISPLAY: Dict[OrderStatus, Dict[str, str]] = {
    OrderStatus.PENDING: {"label": "Pending", "badge": "bg-yellow-100 text-yellow-800"},
    OrderStatus.PROCESSING: {"label": "Processing", "badge": "bg-blue-100 text-blue-800"},
    OrderStatus.SHIPPED: {"label": "Shipped", "badge": "bg-purple-100 text-purple-800"},
    OrderStatus.DELIVERED: {"label": "Delivered", "badge": "bg-green-100 text-green-800"},
    OrderStatus.CANCELLED: {"label": "Cancelled", "badge": "bg-red-100 text-red-800"},
}

PAYMENT_LABELS = {
    "cod": "Cash on Delivery",
    "card": "Card",
}


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        id: Order item ID
        order_id: Parent order ID
        product_id: Reference to product catalog (null if product was deleted)
        product_title: Product title at time of order
        quantity: Number of units ordered
        price_at_purchase: Unit price at time of order
        created_at: Creation timestamp
    """

    id: str = Field(..., description="Order item ID")
    order_id: str = Field(..., description="Parent order ID")
    product_id: Optional[str] = Field(None, description="Product catalog ID")
    product_title: str = Field(..., description="Product title at order time")
    quantity: int = Field(..., description="Quantity ordered", ge=0)
    price_at_purchase: float = Field(..., description="Price per unit", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def line_total(self) -> float:
        return self.quantity * self.price_at_purchase

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data["line_total"] = self.line_total
        return data


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        id: Order ID (uuid)
        customer_name / customer_email / customer_phone / customer_address:
            Contact details captured at checkout
        special_instructions: Free-form note from the customer
        payment_method: Payment tag ("cod", "card", ...)

        # Financial information
        subtotal_price: Items subtotal
        shipping_charge: Delivery charge
        total_price: Final amount (expected subtotal + shipping, not enforced)

        status: Lifecycle stage
        created_at: When the order was placed
        order_items: Line items (filled in by the repository)
    """

    id: str = Field(..., description="Order ID")
    customer_name: str = Field(..., description="Customer name")
    customer_email: str = Field(..., description="Customer email")
    customer_phone: Optional[str] = Field("", description="Customer phone")
    customer_address: Optional[str] = Field("", description="Shipping address")
    special_instructions: Optional[str] = Field(None, description="Special instructions")
    payment_method: str = Field("cod", description="Payment method tag")

    subtotal_price: Optional[float] = Field(None, description="Items subtotal")
    shipping_charge: Optional[float] = Field(None, description="Shipping charge")
    total_price: Optional[float] = Field(None, description="Order total")

    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")
    created_at: datetime = Field(..., description="Creation timestamp")

    order_items: List[OrderItem] = Field(default_factory=list, description="Line items")

    model_config = ConfigDict(from_attributes=True)

    # Computed properties
    @property
    def short_id(self) -> str:
        """Human-facing order number used on screens and invoices"""
        return self.id[:8].upper()

    @property
    def item_count(self) -> int:
        """Total quantity of all items"""
        return sum(item.quantity for item in self.order_items)

    @property
    def payment_label(self) -> str:
        return PAYMENT_LABELS.get(self.payment_method, self.payment_method)

    @property
    def shipping(self) -> float:
        return self.shipping_charge or 0

    @property
    def subtotal(self) -> float:
        """Stored subtotal, or total minus shipping for older orders that lack one"""
        if self.subtotal_price is not None:
            return self.subtotal_price
        return (self.total_price or 0) - self.shipping

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump(mode="json")

        data["short_id"] = self.short_id
        data["item_count"] = self.item_count
        data["payment_label"] = self.payment_label
        data["status_label"] = self.status.label
        data["status_badge"] = self.status.badge
        data["order_items"] = [item.to_dict() for item in self.order_items]

        return data


class OrderPage(BaseModel):
    """One page of orders plus the total number of matching orders"""

    data: List[Order] = Field(default_factory=list)
    total: int = Field(0, ge=0)
    page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.page_size)

    def to_dict(self) -> dict:
        return {
            "status": "success",
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "count": len(self.data),
            "data": [order.to_dict() for order in self.data],
        }


class StatusUpdate(BaseModel):
    """Schema for changing one order's status"""
    status: OrderStatus


class BulkStatusUpdate(BaseModel):
    """Schema for applying one status to a set of orders"""
    ids: List[str] = Field(..., min_length=1)
    status: OrderStatus

    @field_validator("ids")
    @classmethod
    def dedupe_ids(cls, ids: List[str]) -> List[str]:
        return list(dict.fromkeys(ids))
