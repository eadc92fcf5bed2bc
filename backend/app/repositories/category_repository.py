"""Category repository for database operations"""

import re
from typing import Optional

from sqlalchemy import func, select

from backend.app.core.exceptions import ValidationException
from backend.app.core.logging import get_logger
from backend.app.models.category import Category
from backend.app.models.job import Job
from backend.app.repositories.base_repository import BaseRepository
from backend.app.schemas.category import CategoryBulkUpdate

logger = get_logger(__name__)


def slugify(name: str, fallback: str = "category") -> str:
    """Lower-case, hyphen-separated ASCII slug ("Data & AI" -> "data-ai")"""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or fallback


class CategoryRepository(BaseRepository[Category]):
    """Repository for job categories"""

    model = Category
    label = "Category"
    sort_columns = {
        "createdAt": "created_at",
        "name": "name",
        "sortOrder": "sort_order",
        "jobCount": "job_count",
    }
    search_columns = ("name", "description")
    bulk_update_schema = CategoryBulkUpdate
    conflict_message = "Category name already exists"

    async def get_by_name(self, name: str) -> Optional[Category]:
        """Get category by name, ignoring case"""
        result = await self.session.execute(
            select(Category).where(func.lower(Category.name) == name.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        result = await self.session.execute(select(Category).where(Category.slug == slug))
        return result.scalar_one_or_none()

    async def create(self, data):
        values = dict(data)
        values.setdefault("slug", slugify(values["name"]))
        return await super().create(values)

    async def update(self, obj: Category, data):
        values = dict(data)
        if "name" in values:
            values["slug"] = slugify(values["name"])
        return await super().update(obj, values)

    async def get_or_create_by_name(self, name: str) -> Category:
        category = await self.get_by_name(name)
        if category is None:
            category = await self.create({"name": name.strip()})
            logger.info(f"Created category from job posting: {category.name}")
        return category

    async def count_jobs(self, category: Category) -> int:
        return await self.session.scalar(
            select(func.count()).select_from(Job).where(Job.category_id == category.id)
        ) or 0

    async def delete(self, obj: Category) -> None:
        """
        Delete a category

        Raises:
            ValidationException: If any job still references the category
        """
        job_count = await self.count_jobs(obj)
        if job_count:
            raise ValidationException(
                f"Cannot delete category with {job_count} associated jobs. "
                "Please reassign or delete the jobs first."
            )
        await super().delete(obj)

    async def refresh_job_count(self, category: Category) -> Category:
        """Recount the jobs referencing the category and store the result"""
        category.job_count = await self.count_jobs(category)
        await self.flush()
        return category
