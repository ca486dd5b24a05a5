"""
Products API Endpoints
Handles product catalog management

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: use ProductRepository for data access)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from onium_admin.api.deps import get_product_repository
from onium_admin.core.auth import get_current_admin
from onium_admin.domain.product import ProductCreate, ProductUpdate
from onium_admin.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/")
async def get_products(
    search: Optional[str] = Query(None, description="Search by title"),
    category: Optional[str] = Query(None, description="Filter by category"),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Get all products, newest first"""
    try:
        products = repo.find_all(search=search, category=category)
    except Exception as e:
        logger.error(f"Error fetching products: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching products: {str(e)}")

    return {
        "status": "success",
        "count": len(products),
        "data": [product.to_dict() for product in products]
    }


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    repo: ProductRepository = Depends(get_product_repository),
):
    try:
        product = repo.find_by_id(product_id)
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching product: {str(e)}")

    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")

    return {"status": "success", "data": product.to_dict()}


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Create a product; the slug is generated from the title"""
    try:
        product = repo.create(payload)
    except Exception as e:
        logger.error(f"Error creating product: {e}")
        raise HTTPException(status_code=500, detail=f"Error creating product: {str(e)}")

    return {"status": "success", "message": "Product created", "data": product.to_dict()}


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository),
):
    try:
        product = repo.update(product_id, payload)
    except Exception as e:
        logger.error(f"Error updating product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating product: {str(e)}")

    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")

    return {"status": "success", "message": "Product updated", "data": product.to_dict()}


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    repo: ProductRepository = Depends(get_product_repository),
):
    try:
        deleted = repo.delete(product_id)
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting product: {str(e)}")

    if not deleted:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")

    return {"status": "success", "message": "Product deleted"}
