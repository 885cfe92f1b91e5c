from contextlib import contextmanager
from flask import current_app
from modular_pages.extensions import db


@contextmanager
def transactional(action="transaction"):
    """
    Yield the session and commit it when the block completes.

    Any error rolls the session back, is logged under ``action`` and re-raised.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.warning("%s rolled back: %s", action, exc.__class__.__name__)
        raise
