"""User request/response schemas - registration and login contract."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    login: str = Field(..., min_length=4, max_length=64)
    # bcrypt accepts max 72 bytes; validate here for a clear 400.
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(BaseModel):
    login: str = Field(..., min_length=4, max_length=64)
    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(BaseModel):
    id: int
    login: str

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    token: str
