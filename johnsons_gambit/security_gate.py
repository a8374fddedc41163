# security_gate.py -- Security Gate SG1: name length + ZIP checks before the secret
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import GateValidationError

NAME_LIMIT_DEFAULT = 20

SECRET_MESSAGE = (
    "In cyber security and in life, the strongest defense is constant learning, "
    "careful validation, and never trusting unchecked input."
)

# ASCII only: \d would also accept other scripts' digits
_ZIP_RE = re.compile(r"[0-9]{5}")


def is_five_digit_zip(text: Optional[str]) -> bool:
    if text is None:
        return False
    return _ZIP_RE.fullmatch(text) is not None


@dataclass(frozen=True)
class Clearance:
    full_name: str
    zip_code: str
    secret: str = SECRET_MESSAGE

    @property
    def greeting(self) -> str:
        return (
            f"Clearance granted, {self.full_name}. "
            f"ZIP code {self.zip_code} verified for Security Gate SG1."
        )


def check_clearance(
    first_name: Optional[str],
    last_name: Optional[str],
    zip_code: Optional[str],
    *,
    name_limit: int = NAME_LIMIT_DEFAULT,
) -> Clearance:
    """
    Validate the SG1 form and return the clearance on success.

    Inputs are trimmed first. Checks run in order (both names present,
    combined ``"first last"`` length within ``name_limit``, five-digit ZIP)
    and the first failure raises ``GateValidationError``.
    """
    first = (first_name or "").strip()
    last = (last_name or "").strip()
    zip_text = (zip_code or "").strip()
    full_name = f"{first} {last}"

    if not first or not last:
        raise GateValidationError(
            "Please enter both your first and last names to continue."
        )

    if len(full_name) > name_limit:
        raise GateValidationError(
            f"Your full name is {len(full_name)} characters long, which exceeds the "
            f"{name_limit} character limit. Please shorten your name to gain access to SG1."
        )

    if not is_five_digit_zip(zip_text):
        raise GateValidationError(
            "ZIP code must contain exactly 5 digits (0-9) with no spaces or letters."
        )

    return Clearance(full_name=full_name, zip_code=zip_text)
