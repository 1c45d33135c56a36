from collections.abc import Sequence

from sqlmodel import Session, select

from src.app.entities.service.user import UserTable


class UserService:
    """Data-access layer for users.

    Thin pass-through over the session. Commits belong to the caller's
    transactional scope; this class only flushes so that generated ids and
    merged state are visible before the caller returns.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> Sequence[UserTable]:
        return self._session.exec(select(UserTable)).all()

    def find(self, user_id: int) -> UserTable | None:
        return self._session.get(UserTable, user_id)

    def create(self, user: UserTable) -> UserTable:
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user

    def update(self, user: UserTable) -> UserTable:
        merged = self._session.merge(user)
        self._session.flush()
        return merged

    def delete(self, user_id: int) -> None:
        user = self.find(user_id)
        if user is not None:
            self._session.delete(user)
            self._session.flush()
