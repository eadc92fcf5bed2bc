"""Content repository for database operations"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, select, update

from backend.app.core.pagination import ListParams, Page
from backend.app.models.base import utcnow
from backend.app.models.content import Content, ContentStatus, ContentType
from backend.app.repositories.base_repository import BaseRepository
from backend.app.repositories.category_repository import slugify
from backend.app.schemas.content import ContentBulkUpdate


class ContentRepository(BaseRepository[Content]):
    """Repository for managed content"""

    model = Content
    label = "Content"
    sort_columns = {
        "createdAt": "created_at",
        "title": "title",
        "type": "type",
        "status": "status",
        "publishDate": "publish_date",
        "viewCount": "view_count",
    }
    search_columns = ("title", "body", "excerpt")
    bulk_update_schema = ContentBulkUpdate
    conflict_message = "Content slug already exists"

    @staticmethod
    def filters(
        type: Optional[ContentType] = None,
        status: Optional[ContentStatus] = None,
        is_active: Optional[bool] = None,
        published_only: bool = False
    ) -> List[ColumnElement[bool]]:
        """Published-only restricts to active, public, published items already past their publish date"""
        criteria = []
        if type:
            criteria.append(Content.type == type)
        if status:
            criteria.append(Content.status == status)
        if is_active is not None:
            criteria.append(Content.is_active.is_(is_active))
        if published_only:
            criteria.extend([
                Content.status == ContentStatus.PUBLISHED,
                Content.is_active.is_(True),
                Content.is_public.is_(True),
                Content.publish_date <= utcnow(),
            ])
        return criteria

    async def list_content(
        self,
        params: ListParams,
        search: Optional[str] = None,
        **filters
    ) -> Page[Content]:
        return await self.find_page(params, self.filters(**filters), search)

    async def get_published_by_slug(self, slug: str) -> Optional[Content]:
        result = await self.session.execute(
            select(Content).where(Content.slug == slug, *self.filters(published_only=True))
        )
        return result.scalar_one_or_none()

    async def get_published_by_type(self, type: ContentType) -> Optional[Content]:
        """Most recently published item of a type, such as the about page"""
        items = await self.find_latest(
            self.filters(type=type, published_only=True), 1, Content.publish_date.desc()
        )
        return items[0] if items else None

    async def create(self, data):
        values = dict(data)
        if not values.get("slug"):
            values["slug"] = slugify(values["title"], fallback="content")
        if values.get("publish_date") is None:
            values.pop("publish_date", None)
        return await super().create(values)

    async def increment_views(self, content_id: UUID) -> None:
        await self.session.execute(
            update(Content).where(Content.id == content_id).values(view_count=Content.view_count + 1)
        )
