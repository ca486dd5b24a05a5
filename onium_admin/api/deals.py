"""
Deals API Endpoints
Promotional banners for the storefront home page

Author: TM3
Date: 2025-10-03
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from onium_admin.api.deps import get_deal_repository
from onium_admin.core.auth import get_current_admin
from onium_admin.domain.deal import DealCreate
from onium_admin.repositories.deal_repository import DealRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/")
async def get_deals(repo: DealRepository = Depends(get_deal_repository)):
    """Get all deals in display order"""
    try:
        deals = repo.find_all()
    except Exception as e:
        logger.error(f"Error fetching deals: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching deals: {str(e)}")

    return {
        "status": "success",
        "count": len(deals),
        "data": [deal.to_dict() for deal in deals]
    }


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_deal(payload: DealCreate, repo: DealRepository = Depends(get_deal_repository)):
    try:
        deal = repo.create(payload)
    except Exception as e:
        logger.error(f"Error saving deal: {e}")
        raise HTTPException(status_code=500, detail=f"Error saving deal: {str(e)}")

    return {"status": "success", "data": deal.to_dict()}


@router.put("/{deal_id}")
async def update_deal(
    deal_id: str,
    payload: DealCreate,
    repo: DealRepository = Depends(get_deal_repository),
):
    try:
        deal = repo.update(deal_id, payload)
    except Exception as e:
        logger.error(f"Error saving deal {deal_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error saving deal: {str(e)}")

    if not deal:
        raise HTTPException(status_code=404, detail=f"Deal {deal_id} not found")

    return {"status": "success", "data": deal.to_dict()}


@router.post("/{deal_id}/toggle")
async def toggle_deal(deal_id: str, repo: DealRepository = Depends(get_deal_repository)):
    """Show or hide a deal"""
    try:
        deal = repo.toggle_active(deal_id)
    except Exception as e:
        logger.error(f"Error updating deal {deal_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating deal: {str(e)}")

    if not deal:
        raise HTTPException(status_code=404, detail=f"Deal {deal_id} not found")

    return {"status": "success", "data": deal.to_dict()}


@router.delete("/{deal_id}")
async def delete_deal(deal_id: str, repo: DealRepository = Depends(get_deal_repository)):
    try:
        deleted = repo.delete(deal_id)
    except Exception as e:
        logger.error(f"Error deleting deal {deal_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting deal: {str(e)}")

    if not deleted:
        raise HTTPException(status_code=404, detail=f"Deal {deal_id} not found")

    return {"status": "success", "message": "Deal deleted"}
