from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class VaccineProtocolORM(Base):
    __tablename__ = "vaccine_protocols"
    __table_args__ = (
        Index("idx_vaccine_protocols_species_age", "species", "min_age_weeks"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    species: Mapped[str] = mapped_column(String(20), nullable=False)
    vaccine_name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_core: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    min_age_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
    max_age_weeks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    dose_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    interval_weeks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    booster_interval_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
