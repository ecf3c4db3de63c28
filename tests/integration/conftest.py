"""Integration fixtures: container-built handlers over the test session.

The notifier and event bus used by the container factories are swapped for
recording doubles so tests can read the emailed codes and published events.
"""

from dataclasses import dataclass

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.core.container import identity_handlers


@dataclass
class Handlers:
    """Builds request-scoped handlers bound to one AsyncSession."""

    session: AsyncSession

    async def request_company_code(self):
        return await identity_handlers.get_request_company_code_handler(self.session)

    async def verify_company_email(self):
        return await identity_handlers.get_verify_company_email_handler(self.session)

    async def complete_company_registration(self):
        return await identity_handlers.get_complete_company_registration_handler(
            self.session
        )

    async def request_general_code(self):
        return await identity_handlers.get_request_general_code_handler(self.session)

    async def verify_general_email(self):
        return await identity_handlers.get_verify_general_email_handler(self.session)

    async def complete_general_registration(self):
        return await identity_handlers.get_complete_general_registration_handler(
            self.session
        )

    async def request_password_reset(self):
        return await identity_handlers.get_request_password_reset_handler(self.session)

    async def verify_password_reset_code(self):
        return await identity_handlers.get_verify_password_reset_code_handler(
            self.session
        )

    async def confirm_password_reset(self):
        return await identity_handlers.get_confirm_password_reset_handler(self.session)

    async def login(self):
        return await identity_handlers.get_login_user_handler(self.session)

    async def logout(self):
        return await identity_handlers.get_logout_user_handler(self.session)

    async def current_user(self):
        return await identity_handlers.get_current_user_handler(self.session)

    async def authenticator(self):
        return await identity_handlers.get_session_authenticator(self.session)


@pytest.fixture
def handlers(db_session, email_service, event_bus, monkeypatch) -> Handlers:
    monkeypatch.setattr(identity_handlers, "get_email_service", lambda: email_service)
    monkeypatch.setattr(identity_handlers, "get_event_bus", lambda: event_bus)
    return Handlers(session=db_session)
