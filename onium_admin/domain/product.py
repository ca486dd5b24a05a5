"""
Product Domain Model

Represents a product entity of the storefront catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
import re
import time
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Dict, List, Optional, Union
from datetime import datetime


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Product ID (uuid)
        slug: URL slug, unique per product
        title: Product title
        description: Rich-text (HTML) description
        price: List price
        discount: Discount percentage (0-100)
        category: Product category
        image_url: Main image (Cloudinary URL)
        additional_images: Extra gallery images
        unit: Unit description (e.g. "1kg")
        specifications: Free-form key/value specs shown on the product page
        stock: Units in stock
        created_at / updated_at: Timestamps
    """

    id: str = Field(..., description="Product ID")
    slug: str = Field(..., description="URL slug")
    title: str = Field(..., description="Product title")
    description: Optional[str] = Field("", description="Product description")
    price: float = Field(..., description="List price", ge=0)
    discount: Optional[int] = Field(0, description="Discount percentage", ge=0, le=100)
    category: Optional[str] = Field("", description="Product category")
    image_url: Optional[str] = Field("", description="Main image URL")
    additional_images: List[str] = Field(default_factory=list, description="Gallery images")
    unit: Optional[str] = Field(None, description="Unit description")
    specifications: Dict[str, str] = Field(default_factory=dict, description="Key/value specifications")
    stock: int = Field(0, description="Units in stock", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("specifications", mode="before")
    @classmethod
    def stringify_specs(cls, value):
        if not value:
            return {}
        return {str(k): str(v) for k, v in value.items()}

    @field_validator("additional_images", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or []

    # Computed properties
    @property
    def discounted_price(self) -> float:
        """Price after applying the discount percentage"""
        if not self.discount:
            return self.price
        return round(self.price * (100 - self.discount) / 100, 2)

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data["discounted_price"] = self.discounted_price
        return data


class SpecRow(BaseModel):
    """One row of the specification editor"""
    key: str = ""
    value: str = ""


def build_specifications(rows: Union[List[SpecRow], Dict[str, str], None]) -> Dict[str, str]:
    """
    Turn specification editor rows into the stored mapping

    Blank rows are dropped. A row with only a key or only a value, or a key
    used twice, is rejected so nothing half-filled gets written.

    Raises:
        ValueError: if the rows are malformed
    """
    if not rows:
        return {}
    if isinstance(rows, dict):
        rows = [SpecRow(key=str(k), value=str(v)) for k, v in rows.items()]

    specs: Dict[str, str] = {}
    for index, row in enumerate(rows, start=1):
        key = row.key.strip()
        value = row.value.strip()
        if not key and not value:
            continue
        if not key or not value:
            raise ValueError(f"Specification row {index} needs both a key and a value")
        if key in specs:
            raise ValueError(f"Duplicate specification key: {key}")
        specs[key] = value
    return specs


def generate_slug(title: str) -> str:
    """Lowercase, dash-separated slug made of word characters only"""
    slug = title.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def unique_slug(title: str) -> str:
    """Slug with a 4-digit suffix taken from the current timestamp"""
    suffix = str(int(time.time() * 1000))[-4:]
    return f"{generate_slug(title)}-{suffix}"


class ProductBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    discount: int = Field(0, ge=0, le=100)
    category: str = ""
    image_url: str = ""
    stock: int = Field(..., ge=0)
    specifications: Union[List[SpecRow], Dict[str, str]] = Field(default_factory=dict)

    @field_validator("specifications")
    @classmethod
    def validate_specifications(cls, value):
        return build_specifications(value)

    def to_record(self) -> dict:
        """Row payload for the products table"""
        return self.model_dump()


class ProductCreate(ProductBase):
    """Schema for creating a new product"""

    def to_record(self) -> dict:
        data = super().to_record()
        data["slug"] = unique_slug(self.title)
        return data


class ProductUpdate(ProductBase):
    """Schema for updating an existing product (slug is never changed)"""
