from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from indenture.identity.exceptions import NotAuthenticatedError
from indenture.logging.logger import Log


@dataclass(frozen=True)
class User:
    id: str


@dataclass(frozen=True)
class AuthState:
    user: User | None
    is_loading: bool = False


AuthListener = Callable[[AuthState], None]


class BaseIdentityProvider(ABC):
    """Contract for the external identity/session provider."""

    def __init__(self) -> None:
        self._listeners: list[AuthListener] = []

    @abstractmethod
    def current_user(self) -> User | None:
        """Return the signed-in user, or None."""

    @abstractmethod
    def login(self, user_id: str) -> None:
        """Sign ``user_id`` in."""

    @abstractmethod
    def logout(self) -> None:
        """Sign the current user out."""

    def current_user_id(self) -> str:
        """Return the signed-in user's id, used to tag owned records.

        Raises:
            NotAuthenticatedError: if nobody is signed in.
        """
        user = self.current_user()
        if user is None:
            raise NotAuthenticatedError("No user is signed in")
        return user.id

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register ``listener`` for auth state changes and return an unsubscribe callable.

        The listener is called immediately with the current state.
        """
        self._listeners.append(listener)
        listener(AuthState(user=self.current_user()))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        state = AuthState(user=self.current_user())
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:
                Log.warning(f"Auth listener failed: {exc}")


class StaticIdentityProvider(BaseIdentityProvider):
    """In-process session seeded from configuration (``OWNER_ID``)."""

    def __init__(self, user_id: str = "") -> None:
        super().__init__()
        self._user = User(id=user_id) if user_id else None

    def current_user(self) -> User | None:
        return self._user

    def login(self, user_id: str) -> None:
        if not user_id:
            raise ValueError("user_id must be non-empty")
        self._user = User(id=user_id)
        Log.info(f"User {user_id} signed in")
        self._notify()

    def logout(self) -> None:
        if self._user is not None:
            Log.info(f"User {self._user.id} signed out")
        self._user = None
        self._notify()
