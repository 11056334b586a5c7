# File: getlocalbuddy/api/deps.py

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Sessions come from the single Database built at startup and stored on
    ``app.state.db``; nothing here creates engines.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
