"""
Session context for the active user.

One SessionContext is created when the app starts (one per Streamlit browser
session) and passed to whatever needs the current user, instead of every
caller reaching into global storage. It is discarded when the session ends.
"""

import logging
from typing import Optional

from saral_backend.models import Language, User
from saral_backend.store import ApplicationStore

logger = logging.getLogger(__name__)

_UNSET = object()


class SessionContext:
    """Holds the store and the single active user profile."""

    def __init__(self, store: ApplicationStore):
        self.store = store
        self._user = _UNSET

    @property
    def current_user(self) -> Optional[User]:
        """The active user, loaded from the store's current-user slot on first use."""
        if self._user is _UNSET:
            self._user = self.store.get_current_user()
        return self._user

    def _remember(self, user: User) -> User:
        self.store.set_current_user(user)
        self._user = user
        return user

    def select_language(self, language: Language) -> User:
        """Start a fresh user profile with the chosen language."""
        user = User(id=self.store.generate_id(), phone="", preferred_language=language)
        logger.info("New session user %s (%s)", user.id, language)
        return self._remember(user)

    def set_language(self, language: Language) -> Optional[User]:
        """Switch the active user's preferred language, if there is a user."""
        user = self.current_user
        if user is None:
            return None
        return self._remember(user.model_copy(update={"preferred_language": language}))

    def update_profile(self, name: str, phone: str) -> Optional[User]:
        user = self.current_user
        if user is None:
            return None
        return self._remember(user.model_copy(update={"name": name, "phone": phone}))

    @property
    def language(self) -> Language:
        user = self.current_user
        return user.preferred_language if user else "hi"

    def end(self) -> None:
        """Log the user out: clear the stored current user and the cached copy."""
        self.store.clear_current_user()
        self._user = None
