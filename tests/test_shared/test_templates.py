"""
Tests for message templates.
"""

import pytest

from shared.templates import (
    EMAIL_TEMPLATES,
    EmailType,
    format_days,
    format_money,
    get_email_template,
    render_email,
    render_shipping_quote,
)


class TestEmailTemplates:
    """Tests for the account email templates."""

    def test_every_email_type_has_a_template(self):
        for email_type in EmailType:
            assert email_type in EMAIL_TEMPLATES

    def test_welcome_email_mentions_welcome(self):
        subject, body = render_email(EmailType.WELCOME, email="ada@example.com")

        assert "welcome" in subject.lower()
        assert "welcome" in body.lower()
        assert "ada@example.com" in body

    def test_login_code_body_is_the_code(self):
        """The login body is exactly the code, nothing around it."""
        _, body = render_email(EmailType.LOGIN_CODE, code="004217")
        assert body == "004217"

    def test_missing_variable_raises(self):
        with pytest.raises(KeyError):
            get_email_template(EmailType.WELCOME).render(store_name="Shop")


class TestFormatting:
    """Tests for shipping message formatting."""

    def test_whole_amounts_have_no_decimals(self):
        assert format_money(100) == "100"
        assert format_money(100.0) == "100"

    def test_fractional_amounts_have_two_decimals(self):
        assert format_money(7.5) == "7.50"

    @pytest.mark.parametrize("days,expected", [(1, "1 day"), (2, "2 days"), (10, "10 days")])
    def test_format_days(self, days, expected):
        assert format_days(days) == expected

    def test_render_shipping_quote(self):
        message = render_shipping_quote(100.0, 2)

        assert "$100" in message
        assert "2 days" in message
