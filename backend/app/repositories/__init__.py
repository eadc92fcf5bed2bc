"""Data access layer"""

from backend.app.repositories.base_repository import BaseRepository, BulkUpdateResult
from backend.app.repositories.principal_repository import (
    AdminRepository,
    PrincipalRepository,
    UserRepository,
)
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.repositories.application_repository import ApplicationRepository
from backend.app.repositories.faq_repository import FAQRepository
from backend.app.repositories.content_repository import ContentRepository

__all__ = [
    'BaseRepository',
    'BulkUpdateResult',
    'PrincipalRepository',
    'AdminRepository',
    'UserRepository',
    'CompanyRepository',
    'CategoryRepository',
    'JobRepository',
    'ApplicationRepository',
    'FAQRepository',
    'ContentRepository',
]
