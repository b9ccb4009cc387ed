"""
db/base.py

Declarative base and shared mixins for the farm record models.
"""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Declarative base every farm record model inherits from.
    """


class CreatedAtMixin:
    """
    Adds a server-populated created_at column.
    Rows using this mixin are append-only from the service's point of view.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
