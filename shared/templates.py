"""
Message templates for the storefront.

This module holds every customer-facing string the orchestration layer
produces: account emails, shipping messages and page content. Templates use
Python's string formatting with {variable} placeholders.

Design decisions:
- Email templates have a subject and a body
- Short status messages (shipping) are plain format strings
- Login codes are sent as the bare code, so only their subject is templated

In a production system, templates might be:
- Stored in a database for runtime editing
- Localized for different languages
- Rendered with a proper templating engine (Jinja2)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EmailType(str, Enum):
    """Emails sent by the account workflow."""
    WELCOME = "welcome"
    LOGIN_CODE = "login_code"


@dataclass
class EmailTemplate:
    """An email template: a subject and a body with placeholders."""
    email_type: EmailType
    subject: str
    body: str

    def render(self, **kwargs) -> tuple[str, str]:
        """
        Render the template with provided variables.

        Returns:
            Tuple of (subject, body)
        """
        return (
            self.subject.format(**kwargs),
            self.body.format(**kwargs),
        )


# =============================================================================
# Template Definitions
# =============================================================================

EMAIL_TEMPLATES: dict[EmailType, EmailTemplate] = {

    EmailType.WELCOME: EmailTemplate(
        email_type=EmailType.WELCOME,
        subject="Welcome to {store_name}!",
        body="""Welcome aboard!

Your account for {email} is ready. You can now sign in with a one-time
code sent to this address whenever you visit {store_name}.

Thanks for joining us!
""",
    ),

    # The body is the code itself
    EmailType.LOGIN_CODE: EmailTemplate(
        email_type=EmailType.LOGIN_CODE,
        subject="Your {store_name} login code",
        body="{code}",
    ),
}

STORE_NAME = "the Storefront"

SHIPPING_QUOTE_MESSAGE = "Shipping Cost: ${cost} ({days})"
SHIPPING_UNAVAILABLE_MESSAGE = "Shipping Unavailable"

HOME_PAGE_PATH = "/home"
HOME_PAGE_CONTENT = "<div>content</div>"


# =============================================================================
# Template Access Functions
# =============================================================================

def get_email_template(email_type: EmailType) -> Optional[EmailTemplate]:
    """Get a template by email type."""
    return EMAIL_TEMPLATES.get(email_type)


def render_email(email_type: EmailType, **context) -> tuple[str, str]:
    """
    Render an email.

    Raises:
        ValueError: If no template exists for the email type
    """
    template = get_email_template(email_type)
    if not template:
        raise ValueError(f"No template found for email type: {email_type}")
    return template.render(store_name=STORE_NAME, **context)


def format_money(amount: float) -> str:
    """Render an amount without a decimal part when it is a whole number."""
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def format_days(days: int) -> str:
    """Render a day count, e.g. "1 day" or "3 days"."""
    return f"{days} day" if days == 1 else f"{days} days"


def render_shipping_quote(cost: float, estimated_days: int) -> str:
    """Render the shipping message for an available quote."""
    return SHIPPING_QUOTE_MESSAGE.format(
        cost=format_money(cost),
        days=format_days(estimated_days),
    )
