"""Container module - centralized dependency injection (composition root).

    from blindgate.core.container import get_logger, get_login_user_handler

- infrastructure: settings, database, logging, security, email
- events: event bus and subscriptions
- identity_handlers: request-scoped handler factories
"""

from blindgate.core.container.events import get_event_bus
from blindgate.core.container.identity_handlers import (
    build_policy_gate,
    get_complete_company_registration_handler,
    get_complete_general_registration_handler,
    get_confirm_password_reset_handler,
    get_current_user_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_request_company_code_handler,
    get_request_general_code_handler,
    get_request_password_reset_handler,
    get_session_authenticator,
    get_verify_company_email_handler,
    get_verify_general_email_handler,
    get_verify_password_reset_code_handler,
)
from blindgate.core.container.infrastructure import (
    get_app_settings,
    get_database,
    get_db_session,
    get_email_hasher,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
)

__all__ = [
    "build_policy_gate",
    "get_app_settings",
    "get_complete_company_registration_handler",
    "get_complete_general_registration_handler",
    "get_confirm_password_reset_handler",
    "get_current_user_handler",
    "get_database",
    "get_db_session",
    "get_email_hasher",
    "get_email_service",
    "get_event_bus",
    "get_logger",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_password_service",
    "get_request_company_code_handler",
    "get_request_general_code_handler",
    "get_request_password_reset_handler",
    "get_session_authenticator",
    "get_token_service",
    "get_verify_company_email_handler",
    "get_verify_general_email_handler",
    "get_verify_password_reset_code_handler",
]
