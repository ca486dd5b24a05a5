"""
Deal Repository - Data Access Layer for promotional deals

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import List, Optional

from supabase import Client

from onium_admin.core.database import get_supabase
from onium_admin.domain.deal import Deal, DealCreate

logger = logging.getLogger(__name__)

DEALS_TABLE = "deals"


class DealRepository:
    """Repository for Deal data access"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_all(self) -> List[Deal]:
        """All deals in display order (order_position ascending)"""
        response = (
            self.client.table(DEALS_TABLE)
            .select("*")
            .order("order_position")
            .execute()
        )
        return [Deal(**row) for row in response.data or []]

    def find_by_id(self, deal_id: str) -> Optional[Deal]:
        response = (
            self.client.table(DEALS_TABLE)
            .select("*")
            .eq("id", deal_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Deal(**response.data[0])

    def create(self, deal: DealCreate) -> Deal:
        response = self.client.table(DEALS_TABLE).insert(deal.to_record()).execute()
        return Deal(**response.data[0])

    def update(self, deal_id: str, deal: DealCreate) -> Optional[Deal]:
        response = (
            self.client.table(DEALS_TABLE)
            .update(deal.to_record())
            .eq("id", deal_id)
            .execute()
        )
        if not response.data:
            return None
        return Deal(**response.data[0])

    def set_active(self, deal_id: str, is_active: bool) -> Optional[Deal]:
        response = (
            self.client.table(DEALS_TABLE)
            .update({"is_active": is_active})
            .eq("id", deal_id)
            .execute()
        )
        if not response.data:
            return None
        return Deal(**response.data[0])

    def toggle_active(self, deal_id: str) -> Optional[Deal]:
        """
        Flip a deal's is_active flag

        Returns:
            The updated deal or None if not found
        """
        deal = self.find_by_id(deal_id)
        if deal is None:
            return None
        return self.set_active(deal_id, not deal.is_active)

    def delete(self, deal_id: str) -> bool:
        response = self.client.table(DEALS_TABLE).delete().eq("id", deal_id).execute()
        deleted = bool(response.data)
        if deleted:
            logger.info(f"Deal deleted: {deal_id}")
        return deleted
