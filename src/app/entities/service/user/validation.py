"""Field constraints checked before a user is created or replaced."""

from typing import Annotated

from pydantic import (
    BaseModel,
    BeforeValidator,
    EmailStr,
    StringConstraints,
    ValidationError,
)

from .entity import UserPayload

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

BLANK_MESSAGE = "must not be blank"
EMAIL_MESSAGE = "must be a well-formed email address"


def _bare_address(value: object) -> object:
    # EmailStr would reduce "Name <addr>" to "addr"; the stored value must be the address itself
    if isinstance(value, str) and ("<" in value or ">" in value):
        raise ValueError("display names are not allowed")
    return value


class UserConstraints(BaseModel):
    """Declarative constraints on the writable user fields."""

    firstname: NonBlankStr
    lastname: NonBlankStr
    email: Annotated[EmailStr, BeforeValidator(_bare_address)]
    password: NonBlankStr


def _violation_message(field: str, value: object, error_msg: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return f"{field}: {BLANK_MESSAGE}"
    if field == "email":
        return f"{field}: {EMAIL_MESSAGE}"
    return f"{field}: {error_msg}"


def validate_user(payload: UserPayload) -> list[str]:
    """Check a payload against `UserConstraints`.

    Returns one message per violated field, in field order. An empty list
    means the payload is valid.
    """
    values = payload.model_dump(include=set(UserConstraints.model_fields))
    try:
        UserConstraints.model_validate(values)
    except ValidationError as exc:
        messages = []
        for error in exc.errors():
            field = str(error["loc"][0])
            message = _violation_message(field, values.get(field), error["msg"])
            if message not in messages:
                messages.append(message)
        return messages
    return []
