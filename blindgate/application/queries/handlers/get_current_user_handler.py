"""Get current user query handler (read-only, no events)."""

from blindgate.application.dtos import CurrentUserProfile
from blindgate.application.queries.user_queries import GetCurrentUser
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.protocols import CompanyRepository, UserRepository


class GetCurrentUserHandler:
    """Handler for GetCurrentUser.

    Returns the profile with the company's public info attached when the
    user has a company.
    """

    def __init__(self, user_repo: UserRepository, company_repo: CompanyRepository) -> None:
        self._user_repo = user_repo
        self._company_repo = company_repo

    async def handle(self, query: GetCurrentUser) -> Result[CurrentUserProfile, DomainError]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=IdentityErrors.USER_NOT_FOUND)

        company = None
        if user.company_id is not None:
            company = await self._company_repo.find_by_id(user.company_id)

        return Success(
            value=CurrentUserProfile(
                id=user.id,
                nickname=user.nickname,
                company_verified=user.company_verified,
                role=user.role,
                status=user.status,
                last_active_at=user.last_active_at,
                created_at=user.created_at,
                company=company,
            )
        )
