"""
Product Repository - Data Access Layer for Products

Handles all Supabase queries for the product catalog and returns Product
domain models.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import List, Optional

from supabase import Client

from onium_admin.core.database import get_supabase
from onium_admin.domain.product import Product, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

PRODUCTS_TABLE = "products"


class ProductRepository:
    """
    Repository for Product data access

    All collaborator queries for products are centralized here.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_all(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Product]:
        """
        Find products, newest first

        Args:
            search: Case-insensitive partial match on the title
            category: Exact category

        Returns:
            List of products
        """
        query = self.client.table(PRODUCTS_TABLE).select("*")

        if search and search.strip():
            query = query.ilike("title", f"%{search.strip()}%")

        if category:
            query = query.eq("category", category)

        response = query.order("created_at", desc=True).execute()
        return [Product(**row) for row in response.data or []]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID, or None if not found"""
        response = (
            self.client.table(PRODUCTS_TABLE)
            .select("*")
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Product(**response.data[0])

    def count(self) -> int:
        """Exact number of products"""
        response = self.client.table(PRODUCTS_TABLE).select("id", count="exact").execute()
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def create(self, product: ProductCreate) -> Product:
        """Insert a product; the slug is generated from the title"""
        record = product.to_record()
        response = self.client.table(PRODUCTS_TABLE).insert(record).execute()
        created = Product(**response.data[0])
        logger.info(f"Product created: {created.id} ({created.slug})")
        return created

    def update(self, product_id: str, product: ProductUpdate) -> Optional[Product]:
        """Replace a product's editable fields, or None if not found"""
        response = (
            self.client.table(PRODUCTS_TABLE)
            .update(product.to_record())
            .eq("id", product_id)
            .execute()
        )
        if not response.data:
            return None
        return Product(**response.data[0])

    def delete(self, product_id: str) -> bool:
        """Delete a product; True if a row was removed"""
        response = (
            self.client.table(PRODUCTS_TABLE)
            .delete()
            .eq("id", product_id)
            .execute()
        )
        deleted = bool(response.data)
        if deleted:
            logger.info(f"Product deleted: {product_id}")
        return deleted
