import datetime as dt

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fillstation.database.models.base import Base, fk
from fillstation.database.models.tank import now
from fillstation.utils.enums import DeliveryStatus


class DeliveryOrm(Base):
    __tablename__ = "delivery"
    __table_args__ = {'comment': 'Fuel deliveries (supplies)'}

    station_id: Mapped[str] = mapped_column(
        sa.Uuid(as_uuid=False),
        sa.ForeignKey(fk("station.id")),
        nullable=False,
        index=True,
        comment="Station"
    )

    # Tank reference is cleared when the tank is deleted
    tank_id: Mapped[str | None] = mapped_column(
        sa.Uuid(as_uuid=False),
        sa.ForeignKey(fk("tank.id"), ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Tank"
    )

    # Tank
    tank: Mapped["TankOrm"] = relationship(
        lazy="noload",
        init=False
    )

    price_per_ltr: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Price per liter"
    )

    quantity: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        comment="Quantity, ltr"
    )

    supplier: Mapped[str] = mapped_column(
        sa.String(255),
        nullable=False,
        comment="Supplier"
    )

    delivery_date: Mapped[dt.date] = mapped_column(
        sa.Date,
        nullable=False,
        comment="Delivery date"
    )

    status: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        default=DeliveryStatus.PENDING.value,
        comment="Status"
    )

    created_at: Mapped[dt.datetime] = mapped_column(
        sa.DateTime(timezone=True),
        nullable=False,
        default_factory=now,
        init=False,
        comment="Creation time"
    )

    repr_cols = ("supplier", "quantity", "status")
