from uuid import UUID

from pydantic import BaseModel, Field, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str | None = Field(default=None, examples=["mluukkai"])
    password: SecretStr | None = Field(default=None, examples=["salainen"])


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str
