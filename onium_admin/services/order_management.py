"""
Order Management State
State behind the Orders screen: filters, the current page and the bulk
selection, with status changes reconciled against the write result

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional, Set, Union

from onium_admin.domain.order import OrderPage, OrderStatus
from onium_admin.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

ALL_STATUSES = "all"


class OrderMutationError(Exception):
    """A status write failed; local state has been restored"""


class OrderListState:
    """
    Orders screen state over an OrderRepository

    Changing the status filter, the search text or the page clears the bulk
    selection before the new page is fetched, since the selected rows may
    no longer be on screen.
    """

    def __init__(self, repository: OrderRepository, page_size: int = 10):
        self.repository = repository
        self.page_size = page_size
        self.status: Union[OrderStatus, str] = ALL_STATUSES
        self.search: str = ""
        self.page: int = 1
        self.current: OrderPage = OrderPage(page_size=page_size)
        self.selected: Set[str] = set()

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def load(self) -> OrderPage:
        """Fetch the page for the current filters"""
        self.current = self.repository.find_page(
            status=self.status,
            search=self.search,
            page=self.page,
            page_size=self.page_size,
        )
        return self.current

    def set_status_filter(self, status: Union[OrderStatus, str]) -> OrderPage:
        if status != ALL_STATUSES:
            status = OrderStatus(status)
        self.clear_selection()
        self.status = status
        self.page = 1
        return self.load()

    def set_search(self, search: Optional[str]) -> OrderPage:
        self.clear_selection()
        self.search = search or ""
        self.page = 1
        return self.load()

    def set_page(self, page: int) -> OrderPage:
        if page < 1:
            raise ValueError("page must be >= 1")
        self.clear_selection()
        self.page = page
        return self.load()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_selection(self, order_id: str) -> None:
        if order_id in self.selected:
            self.selected.discard(order_id)
        else:
            self.selected.add(order_id)

    def select_all_on_page(self) -> None:
        self.selected = {order.id for order in self.current.data}

    def clear_selection(self) -> None:
        self.selected = set()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def bulk_update_status(self, status: Union[OrderStatus, str]) -> int:
        """
        Apply a status to every selected order

        On success the selection is cleared and the page re-fetched. On
        failure the selection is kept so the admin can retry.
        """
        if not self.selected:
            raise ValueError("No orders selected")

        status = OrderStatus(status)
        try:
            updated = self.repository.bulk_update_status(sorted(self.selected), status)
        except Exception as e:
            logger.error(f"Bulk status update failed: {e}")
            raise OrderMutationError(f"Failed to update {len(self.selected)} orders") from e

        self.clear_selection()
        self.load()
        return updated

    def change_status(self, order_id: str, status: Union[OrderStatus, str]) -> None:
        """
        Optimistically set one order's status, reverting if the write fails

        The row on the current page changes immediately. If the write raises
        or matches no order, the row goes back to its previous status and
        OrderMutationError is raised.
        """
        status = OrderStatus(status)
        order = next((o for o in self.current.data if o.id == order_id), None)
        previous = order.status if order else None

        if order is not None:
            order.status = status

        try:
            result = self.repository.update_status(order_id, status)
        except Exception as e:
            self._revert(order, previous)
            logger.error(f"Status update for order {order_id} failed: {e}")
            raise OrderMutationError(f"Failed to update order {order_id}") from e

        if result is None:
            self._revert(order, previous)
            raise OrderMutationError(f"Order {order_id} not found")

    @staticmethod
    def _revert(order, previous: Optional[OrderStatus]) -> None:
        if order is not None and previous is not None:
            order.status = previous
