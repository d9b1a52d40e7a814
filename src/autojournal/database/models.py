"""SQLAlchemy models for the autojournal journal store."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Boolean,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Decimal stored as its exact string form.

    Amounts keep every digit the ledger posted, so a replayed journal
    reproduces the same balances.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class JournalEntry(Base):
    """Journal entry model."""

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True, autoincrement=False)
    description = Column(String, nullable=False)
    debit_account = Column(String, nullable=False)
    credit_account = Column(String, nullable=False)
    debit_amount = Column(DecimalString, nullable=False)
    credit_amount = Column(DecimalString, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    validated = Column(Boolean, default=True, nullable=False)
    recorded_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
