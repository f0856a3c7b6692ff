from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.models.contact_model import ContactMessage
from app.schemas.contact_schema import ContactMessageCreate
from app.exceptions import PersistenceError
from app.logger import get_logger

logger = get_logger(__name__)


class ContactCRUD:
    @staticmethod
    def create_message(db: Session, message: ContactMessageCreate) -> ContactMessage:
        try:
            db_message = ContactMessage(
                name=message.name,
                email=message.email,
                message=message.message,
            )
            db.add(db_message)
            db.commit()
            db.refresh(db_message)
            logger.info(f"Contact message stored: {db_message.id}")
            return db_message

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error storing contact message: {str(e)}")
            raise PersistenceError()

    @staticmethod
    def get_messages(db: Session) -> List[ContactMessage]:
        return (
            db.query(ContactMessage)
            .order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
            .all()
        )


contact_crud = ContactCRUD()
