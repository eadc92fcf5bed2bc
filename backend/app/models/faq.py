"""FAQ model"""

from sqlalchemy import Column, String, Text, Boolean, Integer, JSON, ForeignKey, Uuid
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column
import uuid
import enum


class FAQCategory(str, enum.Enum):
    GENERAL = "General"
    JOB_SEARCH = "Job Search"
    APPLICATIONS = "Applications"
    COMPANY = "Company"
    TECHNICAL = "Technical"
    PAYMENT = "Payment"
    ACCOUNT = "Account"
    OTHER = "Other"


class FAQ(Base, TimestampMixin):
    """Frequently asked question"""

    __tablename__ = "faqs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    question = Column(String(500), nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(enum_column(FAQCategory), nullable=False, default=FAQCategory.GENERAL, index=True)
    tags = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)
    helpful_count = Column(Integer, nullable=False, default=0)
    not_helpful_count = Column(Integer, nullable=False, default=0)
    created_by = Column(Uuid, ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    last_updated_by = Column(Uuid, ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    def __repr__(self):
        return f"<FAQ(id={self.id}, category={self.category})>"
