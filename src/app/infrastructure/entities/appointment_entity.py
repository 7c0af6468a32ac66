from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class AppointmentEntity(Base):
    """SQLAlchemy model for the appointments table."""
    __tablename__ = "appointments"
    __table_args__ = (
        # One appointment per time slot, enforced atomically by the store
        UniqueConstraint("date", "time", name="uq_appointments_slot"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    procedure: Mapped[str] = mapped_column(String, nullable=False)
    date: Mapped[str] = mapped_column(String, nullable=False)
    time: Mapped[str] = mapped_column(String, nullable=False)
    # NULL on rows written before the flag existed; read as not concluded
    concluida: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
