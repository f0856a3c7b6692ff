from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from app.schemas.user_schema import UserCreate
from app.models.user_model import User
from app.security.auth import get_password_hash
from app.exceptions import DuplicateIdentity, PersistenceError
from app.logger import get_logger

logger = get_logger(__name__)


class UserCRUD:
    @staticmethod
    def get_user_id(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def create_user(db: Session, user: UserCreate) -> User:
        """Register a user, storing only the bcrypt hash of the password"""
        if UserCRUD.get_user_by_email(db, user.email):
            raise DuplicateIdentity("User already exists")

        db_user = User(
            name=user.name,
            email=user.email,
            password_hash=get_password_hash(user.password),
        )
        try:
            db.add(db_user)
            db.commit()
            db.refresh(db_user)
            logger.info(f"User created: {db_user.id}")
            return db_user

        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            db.rollback()
            raise DuplicateIdentity("User already exists")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating user {user.email}: {str(e)}")
            raise PersistenceError()


user_crud = UserCRUD()
