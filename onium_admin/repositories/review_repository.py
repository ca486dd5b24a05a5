"""
Review Repository - Data Access Layer for product reviews

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import List, Optional

from supabase import Client

from onium_admin.core.database import get_supabase
from onium_admin.domain.review import Review

logger = logging.getLogger(__name__)

REVIEWS_TABLE = "reviews"


class ReviewRepository:
    """Repository for Review data access"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_all(self, approved: Optional[bool] = None) -> List[Review]:
        """
        Reviews newest first

        Args:
            approved: Only approved (True) or only pending (False) reviews
        """
        query = self.client.table(REVIEWS_TABLE).select("*")
        if approved is not None:
            query = query.eq("is_approved", approved)
        response = query.order("created_at", desc=True).execute()
        return [Review(**row) for row in response.data or []]

    def find_by_id(self, review_id: str) -> Optional[Review]:
        response = (
            self.client.table(REVIEWS_TABLE)
            .select("*")
            .eq("id", review_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Review(**response.data[0])

    def count_pending(self) -> int:
        """Exact number of reviews waiting for approval"""
        response = (
            self.client.table(REVIEWS_TABLE)
            .select("id", count="exact")
            .eq("is_approved", False)
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def toggle_approval(self, review_id: str) -> Optional[Review]:
        """Flip is_approved; None if the review does not exist"""
        review = self.find_by_id(review_id)
        if review is None:
            return None

        response = (
            self.client.table(REVIEWS_TABLE)
            .update({"is_approved": not review.is_approved})
            .eq("id", review_id)
            .execute()
        )
        if not response.data:
            return None
        return Review(**response.data[0])

    def delete(self, review_id: str) -> bool:
        response = self.client.table(REVIEWS_TABLE).delete().eq("id", review_id).execute()
        deleted = bool(response.data)
        if deleted:
            logger.info(f"Review deleted: {review_id}")
        return deleted
