"""Business logic services"""

from backend.app.services.auth_service import AuthService, TokenScope, TokenService
from backend.app.services.stats_service import StatsService
from backend.app.services.job_service import JobService
from backend.app.services.application_service import ApplicationService

__all__ = ['AuthService', 'TokenScope', 'TokenService', 'StatsService', 'JobService', 'ApplicationService']
