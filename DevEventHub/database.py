"""
Cached database connection helper.

Serverless workers and the autoreloader can re-enter the app many times in a
short span. The first caller verifies the connection for an alias, callers
arriving while that attempt is in flight wait on the same future, and later
callers get the verified handle straight away.
"""
import logging
import threading
from concurrent.futures import Future

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, connections

logger = logging.getLogger(__name__)


class ConnectionCache:
    """Tracks which aliases are connected and which attempts are pending."""

    def __init__(self):
        self.connected = set()
        self.pending = {}
        self._lock = threading.Lock()

    def connect(self, alias=DEFAULT_DB_ALIAS):
        _ensure_configured(alias)
        # Django hands each thread its own wrapper, so the handle itself is
        # looked up per call; only the verification is shared.
        connection = connections[alias]

        with self._lock:
            if alias in self.connected:
                return connection
            future = self.pending.get(alias)
            is_owner = future is None
            if is_owner:
                future = self.pending[alias] = Future()

        if not is_owner:
            future.result()
            return connection

        try:
            connection.ensure_connection()
        except Exception as e:
            with self._lock:
                self.pending.pop(alias, None)
            logger.error(f"Database connection error on '{alias}': {e}")
            future.set_exception(e)
            raise

        with self._lock:
            self.connected.add(alias)
            self.pending.pop(alias, None)
        logger.info(f"Database connected successfully ({connection.vendor}, alias '{alias}')")
        future.set_result(alias)
        return connection

    def reset(self):
        with self._lock:
            self.connected.clear()
            self.pending.clear()


def _ensure_configured(alias):
    database = settings.DATABASES.get(alias) or {}
    engine = database.get('ENGINE', '')
    if not engine or engine.endswith('.dummy'):
        raise ImproperlyConfigured('Please define the DATABASE_URL environment variable inside .env')


cached = ConnectionCache()


def connect_db(alias=DEFAULT_DB_ALIAS):
    """Return a verified connection for ``alias``, connecting at most once."""
    return cached.connect(alias)


def reset_connection_cache():
    """Forget cached state so the next ``connect_db`` call reconnects."""
    cached.reset()
