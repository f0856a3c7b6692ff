from fastapi import APIRouter, Depends, HTTPException, status, Query, Form, File, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from typing import Optional
from app.services.booking_crud import booking_crud
from app.schemas.booking_schema import (
    BookingCreate,
    BookingStatus,
    BookingStatusUpdate,
    BookingResponse,
    BookingListResponse,
    BookingCreatedResponse,
)
from app.schemas.user_schema import Role, TokenClaims, MessageResponse
from app.database import get_db
from app.security.auth import get_current_admin, get_optional_claims
from app.exceptions import ValidationError, NotFound
from app.utils.photo_store import photo_store
from app.logger import get_logger

booking_router = APIRouter()
logger = get_logger(__name__)

# PUBLIC ENDPOINTS - anyone can request a pickup


@booking_router.post(
    "/bookings", response_model=BookingCreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_booking(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    time: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    claims: Optional[TokenClaims] = Depends(get_optional_claims),
    db: Session = Depends(get_db),
):
    """Create a pickup booking from a multipart form with one photo (max 5MB)"""
    try:
        booking = BookingCreate(name=name, email=email, address=address, date=date, time=time)
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))

    if photo is None or not photo.filename:
        raise ValidationError("Photo is required")

    user_id = claims.subject_id if claims and claims.role == Role.user else None

    try:
        filename = photo_store.save(photo)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error storing booking photo: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )

    try:
        db_booking = booking_crud.create_booking(db, booking, filename, user_id)
        return BookingCreatedResponse(bookingId=db_booking.id)

    except Exception as e:
        # No booking row references the photo, so don't keep it around
        photo_store.delete(filename)
        if isinstance(e, HTTPException):
            raise
        logger.error(f"Error creating booking: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


# ADMIN ENDPOINTS


@booking_router.get(
    "/bookings", response_model=BookingListResponse, status_code=status.HTTP_200_OK
)
def get_all_bookings(
    booking_status: Optional[BookingStatus] = Query(
        None, alias="status", description="Filter by booking status"
    ),
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Get all bookings, newest first (admin only)"""
    try:
        logger.info(f"Admin {admin.subject_id} fetching bookings")
        bookings = booking_crud.get_bookings(db=db, status=booking_status)
        return BookingListResponse(
            bookings=[BookingResponse.model_validate(booking) for booking in bookings]
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching bookings: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@booking_router.get(
    "/bookings/{booking_id}",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
def get_booking(
    booking_id: int,
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Get booking by ID (admin only)"""
    try:
        booking = booking_crud.get_booking_by_id(db, booking_id)
        if not booking:
            raise NotFound("Booking not found")
        return BookingResponse.model_validate(booking)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching booking {booking_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@booking_router.put(
    "/bookings/{booking_id}/status",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
def update_booking_status(
    booking_id: int,
    status_update: BookingStatusUpdate,
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Update booking status (admin only)"""
    try:
        logger.info(
            f"Admin {admin.subject_id} updating booking {booking_id} status to {status_update.status.value}"
        )
        booking_crud.update_status(db, booking_id, status_update.status)
        return MessageResponse(message="Booking status updated")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating booking status {booking_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
