from sqlalchemy.orm import Session
from app.schemas.user_schema import (
    Role,
    UserOut,
    UserLogin,
    AdminLogin,
    LoginResponse,
    AdminLoginResponse,
)
from app.security.auth import (
    authenticate_user,
    authenticate_admin,
    create_access_token,
)
from app.exceptions import Unauthorized
from app.logger import get_logger

logger = get_logger(__name__)


class UserService:
    @staticmethod
    def login_user(db: Session, user_login: UserLogin) -> LoginResponse:
        try:
            user = authenticate_user(db, user_login.email, user_login.password)
        except Unauthorized:
            logger.warning(f"Failed login attempt for email: {user_login.email}")
            raise

        token, _ = create_access_token(
            subject_id=user.id, role=Role.user, extra_claims={"email": user.email}
        )

        logger.info(f"User logged in: {user_login.email}")
        return LoginResponse(token=token, user=UserOut.model_validate(user))

    @staticmethod
    def login_admin(db: Session, admin_login: AdminLogin) -> AdminLoginResponse:
        try:
            admin = authenticate_admin(db, admin_login.password)
        except Unauthorized:
            logger.warning("Failed admin login attempt")
            raise

        token, _ = create_access_token(subject_id=admin.id, role=Role.admin)

        logger.info("Admin logged in")
        return AdminLoginResponse(token=token)


user_app_service = UserService()
