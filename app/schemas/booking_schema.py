import re
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from enum import Enum

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")


class BookingStatus(str, Enum):
    pending = "pending"
    completing = "completing"
    completed = "completed"


class BookingCreate(BaseModel):
    name: str = Field(..., min_length=2, description="Name must be at least 2 characters")
    email: EmailStr
    address: str = Field(..., min_length=10, description="Address must be at least 10 characters")
    date: date
    time: str

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("date")
    @classmethod
    def date_must_not_be_in_past(cls, v):
        if v < date.today():
            raise ValueError("Pickup date cannot be in the past")
        return v

    @field_validator("time")
    @classmethod
    def time_must_be_24_hour(cls, v):
        match = TIME_PATTERN.match(v.strip())
        if not match:
            raise ValueError("Valid time is required (HH:MM, 24-hour)")
        hours, minutes = match.groups()
        return f"{int(hours):02d}:{minutes}"


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    name: str
    email: str
    address: str
    date: date
    time: str
    photo: str
    status: BookingStatus
    created_at: datetime

    class Config:
        from_attributes = True


class BookingListResponse(BaseModel):
    bookings: List[BookingResponse]


class BookingCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Booking created successfully"
    bookingId: int
