"""
Account service: signup and passwordless login.

Signup validates the address before anything is sent, so the email channel
never sees a malformed address from this path. Login does not validate; it
delivers whatever code the generator produced to the given address.
"""

import logging
import re
from typing import Optional

from providers.security import RandomCodeGenerator, SecurityCodeGenerator
from shared.channels import EmailChannel, Notifier
from shared.templates import EmailType, render_email

logger = logging.getLogger("account_service")


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


def is_valid_email(email) -> bool:
    """Basic local@domain check; both parts must be non-empty."""
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


class AccountService:
    """
    Sends account emails through the notifier.

    Example:
        channel = EmailChannel()
        service = AccountService(notifier=channel)
        service.sign_up("ada@example.com")   # True, one welcome email sent
        service.sign_up("not-an-email")      # False, nothing sent
    """

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        code_generator: Optional[SecurityCodeGenerator] = None,
    ):
        self.notifier = notifier or EmailChannel()
        self.code_generator = code_generator or RandomCodeGenerator()

    def sign_up(self, email: str) -> bool:
        """
        Register an email address and send exactly one welcome email.

        Returns:
            False for an invalid address (no email is sent), True otherwise
        """
        if not is_valid_email(email):
            logger.info(f"Signup rejected, invalid email: {email!r}")
            return False

        subject, body = render_email(EmailType.WELCOME, email=email)
        self.notifier.send(email, body, subject=subject)
        logger.info(f"Signed up {email}")
        return True

    def login(self, email: str) -> None:
        """Email a freshly generated one-time code to `email`."""
        code = self.code_generator.generate_code()
        subject, body = render_email(EmailType.LOGIN_CODE, code=str(code))
        self.notifier.send(email, body, subject=subject)
        logger.info(f"Login code sent to {email}")
