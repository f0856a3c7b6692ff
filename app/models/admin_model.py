from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base

ADMIN_USERNAME = "admin"


class Admin(Base):
    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Unique so a second startup can never seed a duplicate
    username = Column(String, unique=True, nullable=False, default=ADMIN_USERNAME)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
