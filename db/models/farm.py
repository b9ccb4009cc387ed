"""
db/models/farm.py

Farm model: the partition key every farm-scoped row hangs off.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from db.models.chicken import Chicken


class Farm(Base, CreatedAtMixin):
    """
    One poultry farm. Inventory and weight rows are scoped by farm id.
    """

    __tablename__ = "farms"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    farm_name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner: Mapped[str | None] = mapped_column(String(255), nullable=True)

    chickens: Mapped[list["Chicken"]] = relationship(
        "Chicken",
        back_populates="farm",
        passive_deletes=True,
    )

    __table_args__ = (Index("ix_farms_farm_name", "farm_name"),)

    def __repr__(self) -> str:
        return f"<Farm id={self.id} farm_name={self.farm_name!r}>"
