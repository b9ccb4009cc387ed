"""
db/models/chicken.py

Chicken inventory rows. Owned by inventory management; the weight
workflows only read them.
"""

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base

if TYPE_CHECKING:
    from db.models.chicken_weight import ChickenWeight
    from db.models.farm import Farm


class Chicken(Base):
    __tablename__ = "chicken_inventory"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    farm_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("farms.id", ondelete="CASCADE"),
        nullable=False,
    )
    breed: Mapped[str] = mapped_column(String(120), nullable=False)
    age: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Age in weeks when the bird was added",
    )
    health_status: Mapped[str | None] = mapped_column(String(120), nullable=True)
    date_added: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_removed: Mapped[date | None] = mapped_column(Date, nullable=True)

    farm: Mapped["Farm"] = relationship("Farm", back_populates="chickens")
    weights: Mapped[list["ChickenWeight"]] = relationship(
        "ChickenWeight",
        back_populates="chicken",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_chicken_inventory_farm_id", "farm_id"),
        Index("ix_chicken_inventory_farm_id_id", "farm_id", "id"),
    )

    def __repr__(self) -> str:
        return f"<Chicken id={self.id} farm_id={self.farm_id} breed={self.breed!r}>"
