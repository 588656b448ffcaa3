import contextlib
import logging

from database.database import SessionLocal
from database.repositories import CvRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def cv_uow():
    """Per-unit-of-work transaction scope.

    Yields a CvRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with cv_uow() as repo:
            record = repo.get_latest_for_user(user_id)
        # commit happens automatically on successful exit
    """
    session = SessionLocal()
    try:
        repo = CvRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
