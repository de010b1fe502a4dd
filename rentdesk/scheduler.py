"""Background lease expiration.

The sweep runs once when the scheduler starts and then every
``LEASE_SWEEP_INTERVAL_SECONDS``. A failed run is logged and the loop keeps
going; the next tick retries.
"""
import logging
import threading

from .extensions import db
from .services.lifecycle import LeaseLifecycle

logger = logging.getLogger(__name__)


class LeaseExpirationScheduler:
    def __init__(self, app, interval=3600, lifecycle_factory=None):
        self.app = app
        self.interval = interval
        self.lifecycle_factory = lifecycle_factory or (lambda: LeaseLifecycle(db.session))
        self._stop = threading.Event()
        self._thread = None

    def run_once(self):
        """One sweep inside an app context. Returns the count, or None on failure."""
        with self.app.app_context():
            try:
                count = self.lifecycle_factory().sweep_expired_leases()
            except Exception:
                logger.exception("Scheduled lease expiration failed")
                return None
            finally:
                db.session.remove()
        logger.info("Scheduled lease expiration finished: %d expired", count)
        return count

    def _run(self):
        self.run_once()
        while not self._stop.wait(self.interval):
            self.run_once()

    def start(self):
        if self._thread is not None and self._thread.is_alive():
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="lease-expiration", daemon=True)
        self._thread.start()
        logger.info("Lease expiration scheduler started (every %ss)", self.interval)
        return self

    def stop(self, timeout=None):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()


def start_lease_scheduler(app):
    """Start the sweep thread for ``app`` unless LEASE_SWEEP_ENABLED is off."""
    if not app.config.get("LEASE_SWEEP_ENABLED", True):
        logger.info("Lease expiration scheduler disabled")
        return None
    scheduler = LeaseExpirationScheduler(app, interval=app.config.get("LEASE_SWEEP_INTERVAL_SECONDS", 3600))
    app.extensions["lease_scheduler"] = scheduler
    return scheduler.start()
