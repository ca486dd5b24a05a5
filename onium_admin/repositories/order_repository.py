"""
Order Repository - Data Access Layer for Orders

Handles all Supabase queries for orders and order items and returns Order
domain models.

Author: TM3
Date: 2025-10-17
"""
import logging
import re
import uuid
from typing import Dict, Iterable, List, Optional, Union

from supabase import Client

from onium_admin.core.database import get_supabase
from onium_admin.domain.order import Order, OrderItem, OrderPage, OrderStatus

logger = logging.getLogger(__name__)

ORDERS_TABLE = "orders"
ORDER_ITEMS_TABLE = "order_items"

# Characters with meaning inside a PostgREST or=(...) filter
_POSTGREST_RESERVED = re.compile(r'[,()"]')


def build_search_filter(search: str) -> Optional[str]:
    """
    Build the or=(...) expression for the order search box

    Matches the exact order id OR a case-insensitive partial customer name.
    The id branch is only sent when the text is a UUID, since PostgREST
    rejects a uuid comparison against anything else.
    """
    text = _POSTGREST_RESERVED.sub("", search or "").strip()
    if not text:
        return None

    clauses = []
    try:
        clauses.append(f"id.eq.{uuid.UUID(text)}")
    except ValueError:
        pass
    clauses.append(f"customer_name.ilike.%{text}%")
    return ",".join(clauses)


class OrderRepository:
    """
    Repository for Order data access

    All collaborator queries for orders are centralized here.
    Returns Order domain models, with items where the caller needs them.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_all(self, ascending: bool = False) -> List[Order]:
        """
        Fetch every order, without items

        Args:
            ascending: Oldest first when True, newest first otherwise

        Returns:
            List of orders sorted by created_at
        """
        response = (
            self.client.table(ORDERS_TABLE)
            .select("*")
            .order("created_at", desc=not ascending)
            .execute()
        )
        return [Order(**row) for row in response.data or []]

    def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Find order by ID with its items

        Returns:
            Order with items or None if not found
        """
        response = (
            self.client.table(ORDERS_TABLE)
            .select("*")
            .eq("id", order_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None

        items = self.find_items_for_orders([order_id])
        return Order(**{**response.data[0], "order_items": items.get(order_id, [])})

    def find_page(
        self,
        status: Union[OrderStatus, str, None] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 10,
    ) -> OrderPage:
        """
        Fetch one page of orders matching the status filter and search text

        Args:
            status: Order status, or None / "all" for every status
            search: Order id or part of the customer name
            page: 1-based page number
            page_size: Orders per page

        Returns:
            OrderPage with the orders of this page (items included) and the
            total number of matching orders
        """
        if page < 1:
            raise ValueError("page must be >= 1")

        query = self.client.table(ORDERS_TABLE).select("*", count="exact")

        if status and status != "all":
            query = query.eq("status", OrderStatus(status).value)

        search_filter = build_search_filter(search)
        if search_filter:
            query = query.or_(search_filter)

        start = (page - 1) * page_size
        response = (
            query.order("created_at", desc=True)
            .range(start, start + page_size - 1)
            .execute()
        )

        rows = response.data or []
        total = response.count if response.count is not None else len(rows)

        if not rows:
            return OrderPage(data=[], total=total, page=page, page_size=page_size)

        # Items only for the orders on this page
        items_by_order = self.find_items_for_orders([row["id"] for row in rows])

        orders = [
            Order(**{**row, "order_items": items_by_order.get(row["id"], [])})
            for row in rows
        ]
        return OrderPage(data=orders, total=total, page=page, page_size=page_size)

    def find_items_for_orders(self, order_ids: Iterable[str]) -> Dict[str, List[OrderItem]]:
        """Fetch items for the given orders in one query, grouped by order id"""
        order_ids = list(order_ids)
        if not order_ids:
            return {}

        response = (
            self.client.table(ORDER_ITEMS_TABLE)
            .select("*")
            .in_("order_id", order_ids)
            .execute()
        )

        items_by_order: Dict[str, List[OrderItem]] = {}
        for row in response.data or []:
            items_by_order.setdefault(row["order_id"], []).append(OrderItem(**row))
        return items_by_order

    def find_all_items(self) -> List[OrderItem]:
        """Fetch every order item (dashboard best sellers)"""
        response = self.client.table(ORDER_ITEMS_TABLE).select("*").execute()
        return [OrderItem(**row) for row in response.data or []]

    def update_status(self, order_id: str, status: Union[OrderStatus, str]) -> Optional[Order]:
        """
        Set one order's status

        Returns:
            The updated order (without items) or None if no order matched
        """
        status = OrderStatus(status)
        response = (
            self.client.table(ORDERS_TABLE)
            .update({"status": status.value})
            .eq("id", order_id)
            .execute()
        )
        if not response.data:
            return None

        logger.info(f"Order {order_id} status -> {status.value}")
        return Order(**response.data[0])

    def bulk_update_status(self, order_ids: Iterable[str], status: Union[OrderStatus, str]) -> int:
        """
        Apply one status to a set of orders in a single request

        Returns:
            Number of orders the collaborator reports as updated
        """
        order_ids = list(dict.fromkeys(order_ids))
        if not order_ids:
            raise ValueError("At least one order id is required")

        status = OrderStatus(status)
        response = (
            self.client.table(ORDERS_TABLE)
            .update({"status": status.value})
            .in_("id", order_ids)
            .execute()
        )
        updated = len(response.data or [])
        logger.info(f"Bulk status update: {updated}/{len(order_ids)} orders -> {status.value}")
        return updated
