from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Dict, FrozenSet, List, Optional
from app import config
from app.models.booking_model import Booking
from app.schemas.booking_schema import BookingCreate, BookingStatus
from app.exceptions import NotFound, PersistenceError, ValidationError
from app.logger import get_logger

logger = get_logger(__name__)

# Only consulted when STRICT_STATUS_TRANSITIONS is on
STRICT_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.pending: frozenset({BookingStatus.pending, BookingStatus.completing}),
    BookingStatus.completing: frozenset({BookingStatus.completing, BookingStatus.completed}),
    BookingStatus.completed: frozenset({BookingStatus.completed}),
}


def allowed_transitions(current: BookingStatus, strict: Optional[bool] = None) -> FrozenSet[BookingStatus]:
    """Statuses a booking in ``current`` may be moved to"""
    if strict is None:
        strict = config.STRICT_STATUS_TRANSITIONS
    if not strict:
        return frozenset(BookingStatus)
    return STRICT_TRANSITIONS[BookingStatus(current)]


class BookingCRUD:
    @staticmethod
    def create_booking(
            db: Session, booking: BookingCreate, photo: str, user_id: Optional[int] = None
    ) -> Booking:
        """Create a pickup booking; new bookings always start as pending"""
        if not photo:
            raise ValidationError("Photo is required")

        try:
            db_booking = Booking(
                user_id=user_id,
                name=booking.name,
                email=booking.email,
                address=booking.address,
                date=booking.date,
                time=booking.time,
                photo=photo,
                status=BookingStatus.pending.value,
            )
            db.add(db_booking)
            db.commit()
            db.refresh(db_booking)
            logger.info(f"Booking created: {db_booking.id} (user {user_id or 'anonymous'})")
            return db_booking

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating booking: {str(e)}")
            raise PersistenceError()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_bookings(
            db: Session,
            user_id: Optional[int] = None,
            status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        """Get bookings newest first, optionally filtered by owner and status"""
        query = db.query(Booking)

        if user_id is not None:
            query = query.filter(Booking.user_id == user_id)

        if status:
            query = query.filter(Booking.status == BookingStatus(status).value)

        return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    @staticmethod
    def get_user_bookings(db: Session, user_id: int) -> List[Booking]:
        return BookingCRUD.get_bookings(db=db, user_id=user_id)

    @staticmethod
    def update_status(db: Session, booking_id: int, new_status: BookingStatus) -> Booking:
        """Set a booking's status. Last writer wins."""
        db_booking = BookingCRUD.get_booking_by_id(db, booking_id)
        if not db_booking:
            raise NotFound("Booking not found")

        new_status = BookingStatus(new_status)
        current = BookingStatus(db_booking.status)
        if new_status not in allowed_transitions(current):
            raise ValidationError(
                f"Cannot change booking status from {current.value} to {new_status.value}"
            )

        try:
            db_booking.status = new_status.value
            db.commit()
            db.refresh(db_booking)
            logger.info(f"Booking {booking_id} status: {current.value} -> {new_status.value}")
            return db_booking

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating booking {booking_id}: {str(e)}")
            raise PersistenceError()


booking_crud = BookingCRUD()
