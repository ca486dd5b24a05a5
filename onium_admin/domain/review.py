"""
Review Domain Model

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class Review(BaseModel):
    """Customer review awaiting or holding approval"""

    id: str = Field(..., description="Review ID")
    customer_name: str = Field(..., description="Reviewer name")
    rating: int = Field(..., description="Star rating", ge=1, le=5)
    comment: Optional[str] = Field("", description="Review text")
    is_approved: bool = Field(False, description="Shown on the storefront")
    image_url: Optional[str] = Field(None, description="Optional photo")
    product_id: Optional[str] = Field(None, description="Reviewed product")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
