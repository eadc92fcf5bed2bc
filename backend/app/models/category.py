"""Category model"""

from sqlalchemy import Column, String, Boolean, Integer, Text, Uuid
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin
import uuid


class Category(Base, TimestampMixin):
    """Job category"""

    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(50), unique=True, nullable=False, index=True)
    slug = Column(String(60), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    icon = Column(String(50), nullable=False, default="briefcase")
    color = Column(String(20), nullable=False, default="#667eea")
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    job_count = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
