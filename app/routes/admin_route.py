from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.schemas.user_schema import AdminLogin, AdminLoginResponse
from app.database import get_db
from app.utils.user_app_service import user_app_service
from app.logger import get_logger

admin_router = APIRouter()
logger = get_logger(__name__)


@admin_router.post("/admin/login", response_model=AdminLoginResponse, status_code=status.HTTP_200_OK)
def admin_login(credentials: AdminLogin, db: Session = Depends(get_db)):
    """Exchange the admin password for a 24h admin token"""
    try:
        logger.info("Admin login attempt")
        return user_app_service.login_admin(db, credentials)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error during admin login: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )
