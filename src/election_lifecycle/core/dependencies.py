"""FastAPI dependencies.

``now`` is sampled once per request here and passed explicitly into the
lifecycle libraries, so tests override this dependency instead of
mocking a clock.
"""

from datetime import datetime

from election_lifecycle.lib.lifecycle import Instant


def get_current_instant() -> Instant:
    """Return the local wall-clock instant for the current request."""
    return Instant.from_datetime(datetime.now())  # noqa: DTZ005
