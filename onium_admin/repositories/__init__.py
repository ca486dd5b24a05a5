"""
Repository Layer - Data Access

This layer handles all Supabase queries and returns domain models.
Repositories abstract away query-builder details from business logic.

Author: TM3
Date: 2025-10-17
"""
from onium_admin.repositories.product_repository import ProductRepository
from onium_admin.repositories.order_repository import OrderRepository
from onium_admin.repositories.deal_repository import DealRepository
from onium_admin.repositories.review_repository import ReviewRepository
from onium_admin.repositories.admin_repository import AdminRepository

__all__ = [
    'ProductRepository',
    'OrderRepository',
    'DealRepository',
    'ReviewRepository',
    'AdminRepository',
]
