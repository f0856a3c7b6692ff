from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.services.contact_crud import contact_crud
from app.schemas.contact_schema import ContactMessageCreate, ContactMessageResponse, ContactMessageList
from app.schemas.user_schema import TokenClaims, MessageResponse
from app.database import get_db
from app.security.auth import get_current_admin
from app.logger import get_logger

contact_router = APIRouter()
logger = get_logger(__name__)


@contact_router.post("/contact", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def submit_contact_message(message: ContactMessageCreate, db: Session = Depends(get_db)):
    """Public contact form"""
    try:
        contact_crud.create_message(db, message)
        return MessageResponse(message="Message sent successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error storing contact message: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@contact_router.get("/contact", response_model=ContactMessageList, status_code=status.HTTP_200_OK)
def get_contact_messages(
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Inbox, newest first (admin only)"""
    try:
        messages = contact_crud.get_messages(db)
        return ContactMessageList(
            messages=[ContactMessageResponse.model_validate(m) for m in messages]
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching contact messages: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
