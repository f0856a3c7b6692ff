from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.admin_model import Admin, ADMIN_USERNAME
from app.security.auth import get_password_hash
from app.logger import get_logger

logger = get_logger(__name__)


class AdminCRUD:
    @staticmethod
    def get_admin(db: Session):
        return db.query(Admin).filter(Admin.username == ADMIN_USERNAME).first()

    @staticmethod
    def ensure_admin(db: Session, password: str) -> Admin:
        """Create the admin account on first startup; an existing one is left untouched"""
        admin = AdminCRUD.get_admin(db)
        if admin:
            return admin

        try:
            admin = Admin(username=ADMIN_USERNAME, password_hash=get_password_hash(password))
            db.add(admin)
            db.commit()
            db.refresh(admin)
            logger.info("Default admin account created")
            logger.warning("Change the default admin password (ADMIN_PASSWORD) in production!")
            return admin

        except IntegrityError:
            # Another worker seeded it between our check and insert
            db.rollback()
            return AdminCRUD.get_admin(db)


admin_crud = AdminCRUD()
