"""Email (notifier) adapters.

- StubEmailService: logs instead of sending (delivery is out of scope)
"""

from blindgate.infrastructure.email.stub_email_service import StubEmailService

__all__ = ["StubEmailService"]
