from datetime import date
from typing import List

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

from fillstation.database.models.base import Base


class StationOrm(Base):
    __tablename__ = "station"
    __table_args__ = {'comment': 'Filling stations'}

    name: Mapped[str] = mapped_column(
        sa.String(255),
        nullable=False,
        comment="Station name"
    )

    address: Mapped[str] = mapped_column(
        sa.String(255),
        nullable=False,
        comment="Address"
    )

    email: Mapped[str] = mapped_column(
        sa.String(320),
        nullable=False,
        comment="Station email"
    )

    phone: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        comment="Station phone"
    )

    city: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="City"
    )

    country: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Country"
    )

    zip_code: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        comment="Zip code"
    )

    license_number: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        unique=True,
        comment="License number"
    )

    tax_id: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Tax ID"
    )

    establishment_date: Mapped[date] = mapped_column(
        sa.Date,
        nullable=False,
        comment="Establishment date"
    )

    business_type: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Business type"
    )

    number_of_pumps: Mapped[int] = mapped_column(
        sa.Integer,
        nullable=False,
        comment="Declared number of pumps"
    )

    operation_hours: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Operation hours"
    )

    tank_capacity: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Declared tank capacity"
    )

    average_monthly_revenue: Mapped[str] = mapped_column(
        sa.String(100),
        nullable=False,
        comment="Average monthly revenue"
    )

    image: Mapped[str | None] = mapped_column(
        sa.String(),
        nullable=True,
        default=None,
        comment="Station image URL"
    )

    fuel_types_offered: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default_factory=list,
        comment="Fuel types offered"
    )

    additional_services: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default_factory=list,
        comment="Additional services"
    )

    # Staff of the station
    staff: Mapped[List["StaffOrm"]] = relationship(
        back_populates="station",
        lazy="noload",
        init=False
    )

    # Tank collection of the station
    tanks: Mapped[List["TankOrm"]] = relationship(
        back_populates="station",
        lazy="noload",
        init=False
    )

    repr_cols = ("name", "license_number")
