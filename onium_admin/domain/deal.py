"""
Deal Domain Model

Promotional banners shown on the storefront home page, ordered by
order_position.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class Deal(BaseModel):
    """
    Deal domain model

    Fields:
        id: Deal ID (uuid)
        image_url: Banner image
        link_url: Where the banner links to (may be empty)
        order_position: Display position, ascending (not unique)
        is_active: Whether the banner is shown
        expires_at: Optional expiry
        created_at: Creation timestamp
    """

    id: str = Field(..., description="Deal ID")
    image_url: str = Field(..., description="Banner image URL")
    link_url: Optional[str] = Field("", description="Link target")
    order_position: int = Field(0, description="Display position")
    is_active: bool = Field(True, description="Whether the deal is shown")
    expires_at: Optional[datetime] = Field(None, description="Expiry timestamp")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class DealCreate(BaseModel):
    """Schema for creating or replacing a deal"""
    image_url: str = Field(..., min_length=1)
    link_url: str = ""
    order_position: int
    is_active: bool = True
    expires_at: Optional[datetime] = None

    def to_record(self) -> dict:
        return self.model_dump(mode="json")
