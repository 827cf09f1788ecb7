from contextlib import contextmanager
from sqlalchemy.orm.exc import StaleDataError
from sitepages.extensions import db
from sitepages.domain.exceptions import Conflict


@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except StaleDataError as exc:
        # Another writer bumped the page revision between our read and write
        db.session.rollback()
        raise Conflict() from exc
    except Exception:
        db.session.rollback()
        raise
