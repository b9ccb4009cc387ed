"""
db/models/chicken_weight.py

Recorded chicken weights. Rows are created by the bulk upload and never
updated by this service.
"""

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from db.models.chicken import Chicken

UNIQUE_CHICKEN_DATE_CONSTRAINT = "uq_chicken_weights_chicken_id_date_recorded"


class ChickenWeight(Base, CreatedAtMixin):
    """
    One weighing of one chicken on one calendar day.

    A chicken can only be weighed once per day; a second row for the same
    (chicken_id, date_recorded) violates UNIQUE_CHICKEN_DATE_CONSTRAINT.
    """

    __tablename__ = "chicken_weights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    farm_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("farms.id", ondelete="CASCADE"),
        nullable=False,
    )
    chicken_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("chicken_inventory.id", ondelete="CASCADE"),
        nullable=False,
    )
    date_recorded: Mapped[date] = mapped_column(Date, nullable=False)
    weight_kg: Mapped[float] = mapped_column(Float, nullable=False)

    chicken: Mapped["Chicken"] = relationship("Chicken", back_populates="weights")

    __table_args__ = (
        UniqueConstraint(
            "chicken_id",
            "date_recorded",
            name=UNIQUE_CHICKEN_DATE_CONSTRAINT,
        ),
        CheckConstraint("weight_kg > 0", name="ck_chicken_weights_weight_positive"),
        Index("ix_chicken_weights_farm_id", "farm_id"),
        Index("ix_chicken_weights_chicken_id_date", "chicken_id", "date_recorded"),
    )

    def __repr__(self) -> str:
        return (
            f"<ChickenWeight id={self.id} chicken_id={self.chicken_id} "
            f"date_recorded={self.date_recorded} weight_kg={self.weight_kg}>"
        )
