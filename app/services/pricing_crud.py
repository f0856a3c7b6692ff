from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from app.models.pricing_model import PricingItem
from app.schemas.pricing_schema import PricingItemCreate, PricingItemUpdate
from app.exceptions import NotFound, PersistenceError
from app.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PRICING_ITEMS = [
    {"name": "Plastic Bottles", "description": "Clean plastic bottles and containers", "price": 5},
    {"name": "Paper & Cardboard", "description": "Newspapers, magazines, cardboard boxes", "price": 3},
    {"name": "Metal Cans", "description": "Aluminum and steel cans", "price": 8},
    {"name": "Glass Bottles", "description": "Glass bottles and jars", "price": 4},
    {"name": "Electronic Waste", "description": "Old phones, computers, batteries", "price": 15},
    {"name": "Organic Waste", "description": "Kitchen scraps, garden waste", "price": 2},
]


class PricingCRUD:
    @staticmethod
    def get_items(db: Session) -> List[PricingItem]:
        """Get the whole catalog ordered by name (public)"""
        return db.query(PricingItem).order_by(PricingItem.name).all()

    @staticmethod
    def get_item_by_id(db: Session, item_id: int) -> Optional[PricingItem]:
        return db.query(PricingItem).filter(PricingItem.id == item_id).first()

    @staticmethod
    def create_item(db: Session, item: PricingItemCreate) -> PricingItem:
        now = datetime.now(timezone.utc)
        try:
            db_item = PricingItem(
                name=item.name,
                description=item.description,
                price=item.price,
                created_at=now,
                updated_at=now,
            )
            db.add(db_item)
            db.commit()
            db.refresh(db_item)
            logger.info(f"Pricing item created: {db_item.id} ({item.name})")
            return db_item

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating pricing item: {str(e)}")
            raise PersistenceError()

    @staticmethod
    def update_item(db: Session, item_id: int, item_update: PricingItemUpdate) -> PricingItem:
        """Update the given fields; updated_at is refreshed on every call"""
        db_item = PricingCRUD.get_item_by_id(db, item_id)
        if not db_item:
            raise NotFound("Pricing item not found")

        try:
            for key, value in item_update.model_dump(exclude_unset=True).items():
                if value is not None:
                    setattr(db_item, key, value)
            db_item.updated_at = datetime.now(timezone.utc)

            db.commit()
            db.refresh(db_item)
            logger.info(f"Pricing item updated: {item_id}")
            return db_item

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating pricing item {item_id}: {str(e)}")
            raise PersistenceError()

    @staticmethod
    def delete_item(db: Session, item_id: int) -> PricingItem:
        db_item = PricingCRUD.get_item_by_id(db, item_id)
        if not db_item:
            raise NotFound("Pricing item not found")

        try:
            db.delete(db_item)
            db.commit()
            logger.info(f"Pricing item deleted: {item_id}")
            return db_item

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting pricing item {item_id}: {str(e)}")
            raise PersistenceError()

    @staticmethod
    def seed_defaults(db: Session) -> int:
        """Fill an empty catalog with the default waste categories"""
        if db.query(PricingItem).count() > 0:
            return 0

        for item in DEFAULT_PRICING_ITEMS:
            PricingCRUD.create_item(db, PricingItemCreate(**item))
        logger.info(f"Seeded {len(DEFAULT_PRICING_ITEMS)} default pricing items")
        return len(DEFAULT_PRICING_ITEMS)


pricing_crud = PricingCRUD()
