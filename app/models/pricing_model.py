from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Numeric, DateTime, CheckConstraint
from app.database import Base


class PricingItem(Base):
    __tablename__ = "pricing_items"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_price_non_negative"),
    )
