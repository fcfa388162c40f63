"""SQLAlchemy models for the brokerage ledger."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Boolean,
    CheckConstraint,
    Enum,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from brokerage.database.types import Money
from brokerage.domain.entities import ContractStatus, ProfileType

Base = declarative_base()

# SQLite busy timeout, seconds: concurrent writers wait instead of failing
SQLITE_TIMEOUT = 15


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Profile(Base):
    """Client or contractor profile."""

    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    profession = Column(String, nullable=False)
    balance = Column(Money, nullable=False, default=0)
    type = Column(
        Enum(ProfileType, name="profile_type", values_callable=_enum_values),
        nullable=False,
    )
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (CheckConstraint("balance >= 0", name="ck_profile_balance_non_negative"),)

    # Relationships
    client_contracts = relationship(
        "Contract", foreign_keys="Contract.client_id", back_populates="client"
    )
    contractor_contracts = relationship(
        "Contract", foreign_keys="Contract.contractor_id", back_populates="contractor"
    )


class Contract(Base):
    """Contract between a client and a contractor."""

    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True)
    terms = Column(String, nullable=False)
    status = Column(
        Enum(ContractStatus, name="contract_status", values_callable=_enum_values),
        nullable=False,
        default=ContractStatus.NEW,
    )
    client_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    contractor_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    client = relationship("Profile", foreign_keys=[client_id], back_populates="client_contracts")
    contractor = relationship(
        "Profile", foreign_keys=[contractor_id], back_populates="contractor_contracts"
    )
    jobs = relationship("Job", back_populates="contract", cascade="all, delete-orphan")


class Job(Base):
    """Billable job under a contract."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    price = Column(Money, nullable=False)
    paid = Column(Boolean, default=False, nullable=False)
    payment_date = Column(DateTime, nullable=True, index=True)
    contract_id = Column(Integer, ForeignKey("contracts.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (CheckConstraint("price > 0", name="ck_job_price_positive"),)

    # Relationships
    contract = relationship("Contract", back_populates="jobs")


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # Leave transaction control to the "begin" hook below
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_immediate(conn) -> None:
    # Take the write lock up front so reads in a unit of work are isolated
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory and make sure the schema exists."""
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"timeout": SQLITE_TIMEOUT} if is_sqlite else {}
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    if is_sqlite:
        event.listen(engine, "connect", _configure_sqlite_connection)
        event.listen(engine, "begin", _begin_immediate)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
