from gatehouse_auth.persistence.sqlalchemy.repositories.login_attempt_repository import (  # noqa: E501
    LoginAttemptRepositorySQLAlchemy,
)
from gatehouse_auth.persistence.sqlalchemy.repositories.remember_token_repository import (  # noqa: E501
    RememberTokenRepositorySQLAlchemy,
)

__all__ = ["LoginAttemptRepositorySQLAlchemy", "RememberTokenRepositorySQLAlchemy"]
