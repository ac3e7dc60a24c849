"""Django session implementation of the SelectionStore."""

from django.contrib.sessions.backends.base import SessionBase

from storefront.stores.interfaces import SelectionStore


class DjangoSessionStore(SelectionStore):
    """Key-value store over `request.session`.

    With the signed-cookie engine and SESSION_EXPIRE_AT_BROWSER_CLOSE the
    values live exactly as long as the browser session.
    """

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def get(self, key: str) -> str | None:
        value = self._session.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._session[key] = value
