from pydantic import BaseModel, EmailStr, Field
from typing import List
from datetime import datetime


class ContactMessageCreate(BaseModel):
    name: str = Field(..., min_length=2, description="Name must be at least 2 characters")
    email: EmailStr
    message: str = Field(..., min_length=10, description="Message must be at least 10 characters")


class ContactMessageResponse(BaseModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True


class ContactMessageList(BaseModel):
    messages: List[ContactMessageResponse]
