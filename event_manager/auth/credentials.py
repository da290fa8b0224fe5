# File: event_manager/auth/credentials.py

import hmac
from abc import ABC, abstractmethod
from typing import Optional

from event_manager.core.config_manager import Config
from event_manager.utils.logger import setup_logger

logger = setup_logger(__name__)


class CredentialCheck(ABC):
    """Decides whether a typed secret opens the admin menu."""

    @abstractmethod
    def verify(self, secret: str) -> bool:
        ...


class SharedSecretCheck(CredentialCheck):
    """Single shared secret, compared in constant time."""

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Shared secret must not be empty")
        self._secret = secret.encode('utf-8')

    def verify(self, secret: str) -> bool:
        ok = hmac.compare_digest(self._secret, (secret or "").encode('utf-8'))
        if not ok:
            logger.info("Rejected admin login attempt")
        return ok


def credential_check_from_config(secret: Optional[str] = None) -> CredentialCheck:
    """
    Build the credential check from ADMIN_PASSWORD.

    Raises:
        ValueError: If no admin secret is configured
    """
    secret = secret if secret is not None else Config.ADMIN_PASSWORD
    if not secret:
        raise ValueError("ADMIN_PASSWORD not set. Run 'python scripts/setup.py' first.")
    return SharedSecretCheck(secret)
