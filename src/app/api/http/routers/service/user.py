"""User API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from loguru import logger
from sqlmodel import Session

from src.app.api.http.deps import get_db_session, get_user_service
from src.app.core.services import UserService, transactional
from src.app.entities.service.user import User, UserPayload, UserTable, validate_user

router = APIRouter()

# Ids are stored as signed 64-bit integers
UserId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def not_found(user_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"There is no user with the ID {user_id}.",
    )


def ensure_valid(payload: UserPayload) -> None:
    """Raise a 400 carrying every constraint violation of the payload."""
    violations = validate_user(payload)
    if violations:
        logger.info("User data is invalid: {}", violations)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Validation errors: " + ", ".join(violations),
        )


@router.get("", response_model=list[User])
def list_users(
    service: UserService = Depends(get_user_service),
) -> list[User]:
    """List all users."""
    logger.info("GET users: Getting all users")
    return [User.model_validate(row) for row in service.find_all()]


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> User:
    """Get a user by ID."""
    logger.info("GET users/{}: Getting user by id", user_id)
    row = service.find(user_id)
    if row is None:
        logger.info("User {} doesn't exist in database.", user_id)
        raise not_found(user_id)

    user = User.model_validate(row)
    logger.info("Found {}", user)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserPayload,
    session: Session = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a new user."""
    logger.info("POST users: Add user to database.")
    ensure_valid(payload)

    with transactional(session):
        created = service.create(UserTable(**payload.model_dump()))
        if created is None or created.id is None:
            logger.info("User can't be created in database.")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
        user = User.model_validate(created)

    logger.info("New user {} has been created in database.", user.id)
    return user


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: UserId,
    payload: UserPayload,
    session: Session = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace every mutable field of an existing user."""
    logger.info("PUT users/{}: Update existing user in database.", user_id)
    ensure_valid(payload)

    with transactional(session):
        row = service.find(user_id)
        if row is None:
            logger.info("The user to be updated (ID = {}) does not exist in the database.", user_id)
            raise not_found(user_id)

        for field, value in payload.model_dump().items():
            setattr(row, field, value)
        user = User.model_validate(service.update(row))

    logger.info("The user with the ID = {} has been updated in the database.", user_id)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: UserId,
    session: Session = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user."""
    logger.info("DELETE users/{}: Delete user from database.", user_id)

    with transactional(session):
        if service.find(user_id) is None:
            logger.info("The user to be deleted (ID = {}) does not exist in the database.", user_id)
            raise not_found(user_id)
        service.delete(user_id)

    logger.info("The user with the ID = {} has been removed from database.", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
