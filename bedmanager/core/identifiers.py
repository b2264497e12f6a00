"""
Short human-readable identifiers for patients, transfers and discharges.

Identifiers are a fixed prefix plus four random characters. The space is
small, so callers draw candidates until one is unused.
"""
import logging
import secrets
import string
from typing import Callable, Optional

from bedmanager.core.config import Config
from bedmanager.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

PATIENT_PREFIX = "PAT-"
TRANSFER_PREFIX = "TAT-"
DISCHARGE_PREFIX = "Dsh-"

PATIENT_ALPHABET = "ABCDEF1234"
RECORD_ALPHABET = string.ascii_letters + string.digits

SUFFIX_LENGTH = 4


def random_suffix(alphabet: str, length: int = SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_patient_id() -> str:
    return f"{PATIENT_PREFIX}{random_suffix(PATIENT_ALPHABET)}"


def generate_transfer_id() -> str:
    return f"{TRANSFER_PREFIX}{random_suffix(RECORD_ALPHABET)}"


def generate_discharge_id() -> str:
    return f"{DISCHARGE_PREFIX}{random_suffix(RECORD_ALPHABET)}"


def unique_id(
    generate: Callable[[], str],
    is_taken: Callable[[str], bool],
    max_attempts: Optional[int] = None
) -> str:
    """
    Draw identifiers until one is not taken.

    Args:
        generate: Produces a candidate identifier
        is_taken: Returns True when the candidate is already stored
        max_attempts: Defaults to Config.ID_MAX_ATTEMPTS

    Raises:
        ServiceError: When every attempt collided
    """
    attempts = Config.ID_MAX_ATTEMPTS if max_attempts is None else max_attempts
    for attempt in range(1, attempts + 1):
        candidate = generate()
        if not is_taken(candidate):
            return candidate
        logger.debug(f"Identifier collision on {candidate} (attempt {attempt})")

    logger.error(f"Could not allocate a unique identifier after {attempts} attempts")
    raise ServiceError("Could not allocate a unique identifier")
