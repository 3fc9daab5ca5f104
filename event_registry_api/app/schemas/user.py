"""
Pydantic models for operator authentication.

Operators are the only users of the API.  They are created from
configuration on first start (see ``UserService.ensure_operator``) and
exchange their credentials for a token via ``POST /api/login``.
Passwords are never returned through the API.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field("", examples=["admin"])
    password: str = Field("", examples=["admin123"])


class TokenResponse(BaseModel):
    token: str


class UserRead(BaseModel):
    id: int
    username: str

    model_config = {
        "from_attributes": True,
    }
