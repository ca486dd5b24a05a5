"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2025-10-17
"""
from onium_admin.domain.product import Product, ProductCreate, ProductUpdate
from onium_admin.domain.order import Order, OrderItem, OrderPage, OrderStatus
from onium_admin.domain.deal import Deal, DealCreate
from onium_admin.domain.review import Review
from onium_admin.domain.customer import CustomerProfile
from onium_admin.domain.dashboard import BestSeller, DashboardStats

__all__ = [
    'Product', 'ProductCreate', 'ProductUpdate',
    'Order', 'OrderItem', 'OrderPage', 'OrderStatus',
    'Deal', 'DealCreate',
    'Review',
    'CustomerProfile',
    'BestSeller', 'DashboardStats',
]
