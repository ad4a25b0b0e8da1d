"""
One-time security code generator.

Codes are six-digit integers. The generator remembers what it issued so tests
can compare the delivered code with the generated one.
"""

import logging
import secrets
from typing import Protocol

logger = logging.getLogger("security_codes")


CODE_UPPER_BOUND = 1_000_000


class SecurityCodeGenerator(Protocol):
    """Produces a fresh one-time code on every call."""

    def generate_code(self) -> int:
        ...


class RandomCodeGenerator:
    """Generates codes in [0, CODE_UPPER_BOUND) with a CSPRNG."""

    def __init__(self):
        self.issued: list[int] = []

    def generate_code(self) -> int:
        code = secrets.randbelow(CODE_UPPER_BOUND)
        self.issued.append(code)
        logger.info("[CODE] Issued a one-time login code")
        return code

    @property
    def last_code(self):
        """The most recently issued code, or None."""
        return self.issued[-1] if self.issued else None
