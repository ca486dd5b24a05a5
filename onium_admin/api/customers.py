"""
Customers API Endpoints
Customer profiles aggregated from orders

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from onium_admin.api.deps import get_order_repository
from onium_admin.core.auth import get_current_admin
from onium_admin.repositories.order_repository import OrderRepository
from onium_admin.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/")
async def get_customers(
    search: Optional[str] = Query(None, description="Search by name, email or phone"),
    include_orders: bool = Query(False, description="Include each customer's order history"),
    repo: OrderRepository = Depends(get_order_repository),
):
    """
    Get one profile per customer email

    Profiles are rebuilt from every order on each call
    """
    try:
        customers = CustomerService(repo).list_customers(search=search)
    except Exception as e:
        logger.error(f"Error fetching customers: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching customers: {str(e)}")

    return {
        "status": "success",
        "count": len(customers),
        "data": [c.to_dict(include_orders=include_orders) for c in customers]
    }


@router.get("/{email}")
async def get_customer(email: str, repo: OrderRepository = Depends(get_order_repository)):
    """One customer's profile with full order history"""
    try:
        customer = CustomerService(repo).get_customer(email)
    except Exception as e:
        logger.error(f"Error fetching customer {email}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching customer: {str(e)}")

    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer {email} not found")

    return {"status": "success", "data": customer.to_dict()}
