"""User database table model."""

from datetime import date

from sqlmodel import Field, SQLModel


class UserTable(SQLModel, table=True):
    """Database persistence model for users.

    The primary key is assigned by the database on insert and never changes
    afterwards; every other column is overwritten by an update.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    firstname: str
    lastname: str
    email: str
    birthday: date | None = None
    password: str
