from sqlalchemy.orm import Session


class BaseRepository:
    """Read-only repository bound to one session; the unit of work owns the transaction."""

    def __init__(self, db: Session):
        self.db = db
