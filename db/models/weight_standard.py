"""
db/models/weight_standard.py

Reference expected weights by age. Shared by every farm and read-only
for the service.
"""

from sqlalchemy import CheckConstraint, Float, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class WeightStandardRecord(Base):
    __tablename__ = "weight_standards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    age_in_days: Mapped[int] = mapped_column(Integer, nullable=False)
    expected_weight_kg: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        UniqueConstraint("age_in_days", name="uq_weight_standards_age_in_days"),
        CheckConstraint("age_in_days >= 0", name="ck_weight_standards_age_non_negative"),
        CheckConstraint(
            "expected_weight_kg > 0",
            name="ck_weight_standards_expected_weight_positive",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<WeightStandardRecord age_in_days={self.age_in_days} "
            f"expected_weight_kg={self.expected_weight_kg}>"
        )
