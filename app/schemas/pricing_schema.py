from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class PricingItemBase(BaseModel):
    name: str = Field(..., min_length=2, examples=["Plastic Bottles"])
    description: str = Field(..., min_length=5, examples=["Clean plastic bottles and containers"])
    price: float = Field(..., ge=0, examples=[5])


class PricingItemCreate(PricingItemBase):
    pass


class PricingItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, examples=["Plastic Bottles"])
    description: Optional[str] = Field(None, min_length=5, examples=["Clean plastic bottles and containers"])
    price: Optional[float] = Field(None, ge=0, examples=[5])


class PricingItemResponse(PricingItemBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PricingItemList(BaseModel):
    items: List[PricingItemResponse]


class PricingItemCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Pricing item added"
    itemId: int
