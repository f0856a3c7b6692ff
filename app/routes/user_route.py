from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.services.user_crud import user_crud
from app.services.booking_crud import booking_crud
from app.schemas.user_schema import UserCreate, UserProfile, UserLogin, LoginResponse, MessageResponse
from app.schemas.booking_schema import BookingListResponse, BookingResponse
from app.database import get_db
from app.security.auth import get_current_user
from app.utils.user_app_service import user_app_service
from app.models.user_model import User
from app.logger import get_logger


user_router = APIRouter()
logger = get_logger(__name__)


# AUTH ENDPOINTS

@user_router.post("/users/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    try:
        logger.info(f"Registering user: {user.email}")
        user_crud.create_user(db, user)
        logger.info(f"User registered successfully: {user.email}")
        return MessageResponse(message="User registered successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error registering user {user.email}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )


@user_router.post("/users/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
def login_user(user_login: UserLogin, db: Session = Depends(get_db)):
    """Login user and return a 24h session token"""
    try:
        logger.info(f"Login attempt for user: {user_login.email}")
        return user_app_service.login_user(db, user_login)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error during login for {user_login.email}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )


# SELF-SERVICE ENDPOINTS

@user_router.get("/users/me", response_model=UserProfile, status_code=status.HTTP_200_OK)
def get_current_user_profile(current_user: User = Depends(get_current_user)):
    return UserProfile.model_validate(current_user)


@user_router.get("/users/me/bookings", response_model=BookingListResponse, status_code=status.HTTP_200_OK)
def get_my_bookings(
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """Bookings made while logged in as the current user, newest first"""
    try:
        logger.info(f"User {current_user.email} fetching own bookings")
        bookings = booking_crud.get_user_bookings(db, current_user.id)
        return BookingListResponse(
            bookings=[BookingResponse.model_validate(booking) for booking in bookings]
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching bookings for user {current_user.id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )
