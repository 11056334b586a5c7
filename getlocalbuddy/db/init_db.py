"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all runs.
"""

import logging

from getlocalbuddy.db.session import Database
from getlocalbuddy.models import post, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(db: Database) -> None:
    """
    Check connectivity, then create any missing tables.

    Any exception propagates so a service that cannot reach its database
    never starts serving.
    """
    db.verify_connection()
    db.create_all()
    logger.info("Database ready (%s)", db.engine.url.render_as_string(hide_password=True))
