"""FAQ repository for database operations"""

from typing import List, Optional

from sqlalchemy import ColumnElement

from backend.app.core.pagination import ListParams, Page
from backend.app.models.faq import FAQ, FAQCategory
from backend.app.repositories.base_repository import BaseRepository
from backend.app.schemas.faq import FAQBulkUpdate


class FAQRepository(BaseRepository[FAQ]):
    """Repository for FAQ CRUD operations"""

    model = FAQ
    label = "FAQ"
    sort_columns = {
        "createdAt": "created_at",
        "question": "question",
        "category": "category",
        "sortOrder": "sort_order",
        "viewCount": "view_count",
    }
    search_columns = ("question", "answer")
    bulk_update_schema = FAQBulkUpdate

    @staticmethod
    def filters(
        category: Optional[FAQCategory] = None,
        is_active: Optional[bool] = None,
        is_featured: Optional[bool] = None
    ) -> List[ColumnElement[bool]]:
        criteria = []
        if category:
            criteria.append(FAQ.category == category)
        if is_active is not None:
            criteria.append(FAQ.is_active.is_(is_active))
        if is_featured is not None:
            criteria.append(FAQ.is_featured.is_(is_featured))
        return criteria

    async def list_faqs(
        self,
        params: ListParams,
        search: Optional[str] = None,
        **filters
    ) -> Page[FAQ]:
        return await self.find_page(params, self.filters(**filters), search)
