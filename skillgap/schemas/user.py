from typing import Optional

from pydantic import BaseModel, Field, field_validator

from skillgap.schemas.common import CamelModel, Text


def _normalize_email(v: str) -> str:
    value = (v or "").strip().lower()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class Education(CamelModel):
    level: Optional[Text] = None
    institution: Optional[Text] = None
    field_of_study: Optional[Text] = None
    graduation_year: Optional[int] = None


class UserCreate(CamelModel):
    email: Text
    password: Text = Field(min_length=1)
    name: Text = Field(min_length=1)
    education: Optional[Education] = None

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return _normalize_email(v)


class UserLogin(CamelModel):
    email: Text
    password: Text

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return _normalize_email(v)


class UserRead(CamelModel):
    id: int
    email: str
    name: str
    education: Education = Field(default_factory=Education)


class ProfileRead(CamelModel):
    email: str
    name: str
    education: Education = Field(default_factory=Education)


class ProfileUpdate(CamelModel):
    name: Optional[Text] = Field(default=None, min_length=1)
    education: Optional[Education] = None


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: int
