"""Content model (CMS pages, posts and policies)"""

from sqlalchemy import Column, String, Text, Boolean, Integer, JSON, ForeignKey, DateTime, Uuid
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column, utcnow
import uuid
import enum


class ContentType(str, enum.Enum):
    PAGE = "page"
    BLOG = "blog"
    ANNOUNCEMENT = "announcement"
    POLICY = "policy"
    TERMS = "terms"
    PRIVACY = "privacy"
    ABOUT = "about"
    CONTACT = "contact"
    HELP = "help"
    CUSTOM = "custom"


class ContentStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    SCHEDULED = "scheduled"


class Content(Base, TimestampMixin):
    """Managed content item"""

    __tablename__ = "content"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False, index=True)
    type = Column(enum_column(ContentType), nullable=False, default=ContentType.PAGE, index=True)
    body = Column(Text, nullable=False)
    excerpt = Column(String(500), nullable=True)
    featured_image = Column(String(500), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    status = Column(enum_column(ContentStatus), nullable=False, default=ContentStatus.DRAFT, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_public = Column(Boolean, nullable=False, default=True)
    publish_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    sort_order = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)
    author_id = Column(Uuid, ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    last_updated_by = Column(Uuid, ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    def __repr__(self):
        return f"<Content(id={self.id}, slug={self.slug}, status={self.status})>"
