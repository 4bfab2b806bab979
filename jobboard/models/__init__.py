from jobboard.models.user import User, UserRole
from jobboard.models.revoked_token import RevokedToken
from jobboard.models.company import Company
from jobboard.models.society import Society, Gender
from jobboard.models.portfolio import Portfolio
from jobboard.models.position import Position
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.skill import Skill

__all__ = [
    "User",
    "UserRole",
    "RevokedToken",
    "Company",
    "Society",
    "Gender",
    "Portfolio",
    "Position",
    "Application",
    "ApplicationStatus",
    "Skill",
]
