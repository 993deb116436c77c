"""Authentication services.

Provides credential verification, attempt auditing and remember-me tokens.
"""

from gatehouse_auth.services.attempt_recorder import AttemptRecorder
from gatehouse_auth.services.credential_verifier import CredentialVerifier
from gatehouse_auth.services.remember_token_service import RememberTokenService

__all__ = [
    "AttemptRecorder",
    "CredentialVerifier",
    "RememberTokenService",
]
