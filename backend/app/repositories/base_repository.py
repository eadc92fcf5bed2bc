"""Generic CRUD, pagination and bulk update shared by all repositories"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Generic, Iterable, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy import ColumnElement, Select, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import Base
from backend.app.core.exceptions import ConflictException, NotFoundException, ValidationException
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, Page, PageInfo, SortOrder

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@dataclass(frozen=True)
class BulkUpdateResult:
    matched_count: int
    modified_count: int


def validation_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten a pydantic ValidationError into the API's error list"""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


class BaseRepository(Generic[ModelT]):
    """
    Repository for one model

    Subclasses declare the model, a label for messages, the sort allow-list
    (wire name -> attribute), searchable columns and the schema describing
    which fields may be bulk updated.
    """

    model: ClassVar[Type[Base]]
    label: ClassVar[str] = "Resource"
    sort_columns: ClassVar[Dict[str, str]] = {"createdAt": "created_at"}
    search_columns: ClassVar[Sequence[str]] = ()
    bulk_update_schema: ClassVar[Optional[Type[BaseModel]]] = None
    conflict_message: ClassVar[Optional[str]] = None

    def __init__(self, session: AsyncSession):
        self.session = session

    @classmethod
    def sort_fields(cls) -> List[str]:
        return list(cls.sort_columns)

    @classmethod
    def bulk_fields(cls) -> List[str]:
        if cls.bulk_update_schema is None:
            return []
        return [to_camel(name) for name in cls.bulk_update_schema.model_fields]

    def base_query(self) -> Select:
        """Select used for single-row and list reads"""
        return select(self.model)

    async def get_by_id(self, obj_id: UUID) -> Optional[ModelT]:
        result = await self.session.execute(
            self.base_query()
            .where(self.model.id == obj_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, obj_id: UUID) -> ModelT:
        obj = await self.get_by_id(obj_id)
        if obj is None:
            raise NotFoundException(f"{self.label} not found")
        return obj

    def search_clause(self, term: str) -> ColumnElement[bool]:
        return or_(*[
            getattr(self.model, column).icontains(term, autoescape=True)
            for column in self.search_columns
        ])

    async def find_page(
        self,
        params: ListParams,
        filters: Iterable[ColumnElement[bool]] = (),
        search: Optional[str] = None
    ) -> Page[ModelT]:
        """
        List rows matching filters, windowed and ordered by params

        Args:
            params: Page window and sort (sort_by already validated)
            filters: Extra WHERE criteria
            search: Case-insensitive substring matched against search_columns

        Returns:
            Page of rows with pagination info
        """
        criteria = list(filters)
        if search and self.search_columns:
            criteria.append(self.search_clause(search))
        return await self.paginate(criteria, params)

    async def paginate(self, criteria: List[ColumnElement[bool]], params: ListParams) -> Page[ModelT]:
        total = await self.session.scalar(
            select(func.count()).select_from(self.model).where(*criteria)
        )

        column = getattr(self.model, self.sort_columns[params.sort_by])
        ordering = column.asc() if params.sort_order == SortOrder.ASC else column.desc()

        result = await self.session.execute(
            self.base_query()
            .where(*criteria)
            .order_by(ordering, self.model.id)
            .offset(params.offset)
            .limit(params.limit)
        )
        items = list(result.scalars().all())

        return Page(items=items, info=PageInfo.build(params.page, params.limit, total or 0))

    async def find_latest(
        self,
        criteria: Iterable[ColumnElement[bool]],
        limit: int,
        *ordering: ColumnElement
    ) -> List[ModelT]:
        """Up to `limit` rows matching criteria, newest first unless an ordering is given"""
        result = await self.session.execute(
            self.base_query()
            .where(*criteria)
            .order_by(*(ordering or (self.model.created_at.desc(),)), self.model.id)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        result = await self.session.scalar(
            select(func.count()).select_from(self.model).where(*criteria)
        )
        return result or 0

    async def create(self, data: Dict[str, Any]) -> ModelT:
        obj = self.model(**data)
        self.session.add(obj)
        await self.flush()
        logger.info(f"Created {self.label.lower()}: {obj.id}")
        return obj

    async def update(self, obj: ModelT, data: Dict[str, Any]) -> ModelT:
        for key, value in data.items():
            setattr(obj, key, value)
        await self.flush()
        logger.info(f"Updated {self.label.lower()}: {obj.id}")
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.session.delete(obj)
        await self.flush()
        logger.info(f"Deleted {self.label.lower()}: {obj.id}")

    async def flush(self) -> None:
        """Flush pending writes, translating uniqueness violations"""
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"{self.label} constraint violation: {e.orig}")
            raise self.conflict_error(e)

    def conflict_error(self, exc: IntegrityError) -> ConflictException:
        return ConflictException(self.conflict_message or f"{self.label} already exists")

    def validate_bulk_updates(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check a bulk patch against the allow-list and coerce its values

        Raises:
            ValidationException: Naming every field outside the allow-list,
                or describing invalid values
        """
        allowed = self.bulk_fields()
        invalid = [field for field in updates if field not in allowed]
        if invalid:
            raise ValidationException(
                f"Invalid fields: {', '.join(invalid)}",
                errors=[
                    {"field": field, "message": "Field cannot be bulk updated", "type": "value_error"}
                    for field in invalid
                ],
            )

        try:
            patch = self.bulk_update_schema.model_validate(updates)
        except ValidationError as e:
            raise ValidationException("Validation errors", errors=validation_errors(e))

        values = patch.model_dump(exclude_none=True)
        if not values:
            raise ValidationException("Updates must contain at least one field")
        return values

    async def bulk_update(self, ids: Sequence[UUID], updates: Dict[str, Any]) -> BulkUpdateResult:
        """
        Apply one patch to many rows

        Not transactional across rows by contract: the result only reports how
        many rows matched and how many actually changed.
        """
        values = self.validate_bulk_updates(updates)

        id_filter = self.model.id.in_(ids)
        changed = or_(*[
            getattr(self.model, key).is_distinct_from(value) for key, value in values.items()
        ])

        matched = await self.count(id_filter)
        modified = await self.count(id_filter, changed)

        await self.session.execute(
            update(self.model)
            .where(id_filter, changed)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

        logger.info(f"Bulk updated {self.label.lower()}s: matched={matched} modified={modified}")
        return BulkUpdateResult(matched_count=matched, modified_count=modified)
