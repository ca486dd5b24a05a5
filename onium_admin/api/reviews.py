"""
Reviews API Endpoints
Moderation of customer reviews

Author: TM3
Date: 2025-10-03
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from onium_admin.api.deps import get_review_repository
from onium_admin.core.auth import get_current_admin
from onium_admin.repositories.review_repository import ReviewRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/")
async def get_reviews(
    approved: Optional[bool] = Query(None, description="Only approved (true) or pending (false)"),
    repo: ReviewRepository = Depends(get_review_repository),
):
    """Get reviews, newest first"""
    try:
        reviews = repo.find_all(approved=approved)
    except Exception as e:
        logger.error(f"Error fetching reviews: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching reviews: {str(e)}")

    return {
        "status": "success",
        "count": len(reviews),
        "data": [review.to_dict() for review in reviews]
    }


@router.post("/{review_id}/toggle-approval")
async def toggle_review_approval(
    review_id: str,
    repo: ReviewRepository = Depends(get_review_repository),
):
    try:
        review = repo.toggle_approval(review_id)
    except Exception as e:
        logger.error(f"Error updating review {review_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating review: {str(e)}")

    if not review:
        raise HTTPException(status_code=404, detail=f"Review {review_id} not found")

    return {"status": "success", "data": review.to_dict()}


@router.delete("/{review_id}")
async def delete_review(review_id: str, repo: ReviewRepository = Depends(get_review_repository)):
    try:
        deleted = repo.delete(review_id)
    except Exception as e:
        logger.error(f"Error deleting review {review_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting review: {str(e)}")

    if not deleted:
        raise HTTPException(status_code=404, detail=f"Review {review_id} not found")

    return {"status": "success", "message": "Review deleted"}
