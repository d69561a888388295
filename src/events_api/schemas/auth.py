from pydantic import BaseModel


class TokenResponse(BaseModel):
    """Access token body. The refresh token travels in an HTTP-only cookie."""

    access_token: str
    token_type: str = "bearer"
