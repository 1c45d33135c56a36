"""Entity: User."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Request body for creating or replacing a user.

    Every field is optional at parse time so that missing values reach
    `validate_user` and are reported as constraint violations. A client-sent
    `id` is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    firstname: str | None = Field(default=None, description="User's first name")
    lastname: str | None = Field(default=None, description="User's last name")
    email: str | None = Field(default=None, description="User's email address")
    birthday: date | None = Field(default=None, description="User's birthday (YYYY-MM-DD)")
    password: str | None = Field(default=None, description="User's password")


class User(BaseModel):
    """User as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    firstname: str
    lastname: str
    email: str
    birthday: date | None = None
    password: str

    def __str__(self) -> str:
        # Keep the password out of log lines
        return (
            f"User(id={self.id}, firstname={self.firstname!r}, "
            f"lastname={self.lastname!r}, email={self.email!r}, birthday={self.birthday})"
        )
