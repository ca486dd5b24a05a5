"""
Shared FastAPI dependencies for the API routers
"""
from fastapi import Depends
from supabase import Client

from onium_admin.core.database import get_supabase
from onium_admin.repositories import (
    AdminRepository,
    DealRepository,
    OrderRepository,
    ProductRepository,
    ReviewRepository,
)


def get_order_repository(client: Client = Depends(get_supabase)) -> OrderRepository:
    return OrderRepository(client)


def get_product_repository(client: Client = Depends(get_supabase)) -> ProductRepository:
    return ProductRepository(client)


def get_deal_repository(client: Client = Depends(get_supabase)) -> DealRepository:
    return DealRepository(client)


def get_review_repository(client: Client = Depends(get_supabase)) -> ReviewRepository:
    return ReviewRepository(client)


def get_admin_repository(client: Client = Depends(get_supabase)) -> AdminRepository:
    return AdminRepository(client)
