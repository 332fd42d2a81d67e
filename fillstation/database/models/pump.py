import datetime as dt
from typing import List

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fillstation.database.models.base import Base, fk
from fillstation.database.models.tank import now
from fillstation.utils.enums import PumpStatus


class PumpOrm(Base):
    __tablename__ = "pump"
    __table_args__ = {'comment': 'Pumps attached to a tank'}

    tank_id: Mapped[str] = mapped_column(
        sa.Uuid(as_uuid=False),
        sa.ForeignKey(fk("tank.id")),
        nullable=False,
        index=True,
        comment="Tank"
    )

    # Tank
    tank: Mapped["TankOrm"] = relationship(
        back_populates="pumps",
        lazy="noload",
        init=False
    )

    title: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Title, 'Pump N' by position unless given"
    )

    price_per_ltr: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Price per liter"
    )

    start_date: Mapped[dt.date] = mapped_column(
        sa.Date,
        nullable=False,
        comment="Start of operation"
    )

    status: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        default=PumpStatus.IDLE.value,
        comment="Status"
    )

    last_maintenance: Mapped[dt.date | None] = mapped_column(
        sa.Date,
        nullable=True,
        default=None,
        comment="Last maintenance date"
    )

    created_at: Mapped[dt.datetime] = mapped_column(
        sa.DateTime(timezone=True),
        nullable=False,
        default_factory=now,
        init=False,
        comment="Creation time, defines pump order"
    )

    # Daily sales
    daily_ltr_sales: Mapped[List["PumpSaleOrm"]] = relationship(
        back_populates="pump",
        lazy="noload",
        order_by="PumpSaleOrm.date",
        init=False
    )

    repr_cols = ("title", "status", "price_per_ltr")


class PumpSaleOrm(Base):
    __tablename__ = "pump_sale"
    __table_args__ = {'comment': 'Daily sales of a pump'}

    pump_id: Mapped[str] = mapped_column(
        sa.Uuid(as_uuid=False),
        sa.ForeignKey(fk("pump.id")),
        nullable=False,
        index=True,
        comment="Pump"
    )

    # Pump
    pump: Mapped["PumpOrm"] = relationship(
        back_populates="daily_ltr_sales",
        lazy="noload",
        init=False
    )

    date: Mapped[dt.date] = mapped_column(
        sa.Date,
        nullable=False,
        comment="Sale date"
    )

    ltr_sale: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Liters sold"
    )

    price_per_ltr: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Price per liter at the time of sale"
    )

    repr_cols = ("date", "ltr_sale", "price_per_ltr")
