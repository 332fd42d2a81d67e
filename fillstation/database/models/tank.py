from datetime import datetime
from typing import List

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fillstation.config import TZ
from fillstation.database.models.base import Base, fk


def now() -> datetime:
    return datetime.now(TZ)


class TankOrm(Base):
    __tablename__ = "tank"
    __table_args__ = (
        sa.CheckConstraint("current_quantity >= 0", name="tank_current_quantity_not_negative"),
        {'comment': 'Fuel tanks of a station'}
    )

    station_id: Mapped[str] = mapped_column(
        sa.Uuid(as_uuid=False),
        sa.ForeignKey(fk("station.id")),
        nullable=False,
        index=True,
        comment="Station"
    )

    # Station
    station: Mapped["StationOrm"] = relationship(
        back_populates="tanks",
        lazy="noload",
        init=False
    )

    title: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Title, unique within the station regardless of case"
    )

    fuel_type: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        comment="Fuel type"
    )

    limit: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Capacity limit, ltr"
    )

    threshold: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Low stock threshold, ltr"
    )

    current_quantity: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        default=0.0,
        comment="Current quantity, ltr"
    )

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        nullable=False,
        default_factory=now,
        init=False,
        comment="Creation time, defines tank order"
    )

    # Pumps attached to the tank
    pumps: Mapped[List["PumpOrm"]] = relationship(
        back_populates="tank",
        lazy="noload",
        init=False
    )

    repr_cols = ("title", "fuel_type", "current_quantity", "limit")

    @property
    def is_low_stock(self) -> bool:
        return self.current_quantity <= self.threshold
