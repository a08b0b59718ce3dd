"""
Session storage backends for the cart.

Every backend satisfies ``SessionStore``: byte values under string keys,
scoped to one visitor session. Backend errors are not caught here.
"""
from typing import MutableMapping, Optional, Protocol

from upstash_redis import Redis

from bookshop.db import RedisKeys, TTL


class SessionStore(Protocol):
    """Key/value view of one visitor's session."""

    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemorySessionStore:
    """Dict-backed session, for tests and scripts."""

    def __init__(self, initial: Optional[dict] = None):
        self.data: dict = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class RequestSessionStore:
    """
    Adapter over Starlette's ``request.session``.

    The cookie session is JSON, so values are kept as UTF-8 text and
    turned back into bytes on read.
    """

    encoding = "utf-8"

    def __init__(self, session: MutableMapping):
        self._session = session

    def get(self, key: str) -> Optional[bytes]:
        value = self._session.get(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value
        return str(value).encode(self.encoding)

    def set(self, key: str, value: bytes) -> None:
        self._session[key] = value.decode(self.encoding)

    def remove(self, key: str) -> None:
        self._session.pop(key, None)


class RedisSessionStore:
    """
    Session values in Upstash Redis under ``session:{sid}:{key}``.

    Every write refreshes the TTL, so an idle session expires on its own.
    """

    encoding = "utf-8"

    def __init__(self, redis: Redis, session_id: str, ttl: int = TTL.SESSION):
        if not session_id:
            raise ValueError("session_id must be a non-empty string")
        self._redis = redis
        self._session_id = session_id
        self._ttl = ttl

    def _key(self, key: str) -> str:
        return RedisKeys.session_key(self._session_id, key)

    def get(self, key: str) -> Optional[bytes]:
        value = self._redis.get(self._key(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value
        return str(value).encode(self.encoding)

    def set(self, key: str, value: bytes) -> None:
        self._redis.set(self._key(key), value.decode(self.encoding), ex=self._ttl)

    def remove(self, key: str) -> None:
        self._redis.delete(self._key(key))
