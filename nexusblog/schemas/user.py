"""User signup/signin schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from nexusblog.configs.settings import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH


class SignupInput(BaseModel):
    """Body of `POST /user/signup`."""

    model_config = ConfigDict(extra="ignore")

    email: EmailStr = Field(..., examples=["aditya@example.com"])
    password: SecretStr = Field(..., min_length=MIN_PASSWORD_LENGTH)
    name: str | None = Field(default=None, max_length=MAX_NAME_LENGTH, examples=["Aditya"])


class SigninInput(BaseModel):
    """Body of `POST /user/signin`."""

    model_config = ConfigDict(extra="ignore")

    email: EmailStr
    password: SecretStr
