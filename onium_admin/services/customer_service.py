"""
Customer Service
Builds customer profiles from the orders table

There is no customers table: every profile is derived from orders on each
load and never written back.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Dict, Iterable, List, Optional

from onium_admin.domain.customer import CustomerProfile
from onium_admin.domain.order import Order
from onium_admin.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def aggregate_customers(orders: Iterable[Order]) -> List[CustomerProfile]:
    """
    Group orders into one profile per case-insensitive email

    Contact details (name, phone, address) come from the customer's most
    recent order, decided by comparing created_at rather than by input order.

    Args:
        orders: Orders, normally newest first

    Returns:
        Profiles in the order their email was first seen
    """
    profiles: Dict[str, CustomerProfile] = {}

    for order in orders:
        key = order.customer_email.lower()

        profile = profiles.get(key)
        if profile is None:
            profile = CustomerProfile(
                email=order.customer_email,
                name=order.customer_name,
                phone=order.customer_phone,
                address=order.customer_address,
                last_order_date=order.created_at,
            )
            profiles[key] = profile

        profile.total_orders += 1
        profile.total_spent += order.total_price or 0
        profile.orders.append(order)

        if order.created_at > profile.last_order_date:
            profile.name = order.customer_name
            profile.phone = order.customer_phone
            profile.address = order.customer_address
            profile.last_order_date = order.created_at

    return list(profiles.values())


def filter_customers(profiles: Iterable[CustomerProfile], term: Optional[str]) -> List[CustomerProfile]:
    """Search box filter: name or email (case-insensitive), or phone substring"""
    profiles = list(profiles)
    if not term:
        return profiles

    lower_term = term.lower()
    return [
        profile for profile in profiles
        if lower_term in profile.name.lower()
        or lower_term in profile.email.lower()
        or lower_term in (profile.phone or "")
    ]


class CustomerService:
    """Customer views over the orders repository"""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    def list_customers(self, search: Optional[str] = None) -> List[CustomerProfile]:
        orders = self.order_repository.find_all(ascending=False)
        profiles = aggregate_customers(orders)
        logger.debug(f"Aggregated {len(orders)} orders into {len(profiles)} customers")
        return filter_customers(profiles, search)

    def get_customer(self, email: str) -> Optional[CustomerProfile]:
        key = email.lower()
        for profile in self.list_customers():
            if profile.email.lower() == key:
                return profile
        return None
