import logging
from contextlib import contextmanager
from storefront.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """Commit on success; roll back and re-raise on any failure."""
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        logger.warning("Transaction rolled back: %s", exc.__class__.__name__)
        raise
