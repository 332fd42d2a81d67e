import uuid
from typing import List, Dict

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

from fillstation.database.models.base import Base, fk


class StaffOrm(Base):
    __tablename__ = "staff"
    __table_args__ = {
        'comment': 'Station staff (user accounts)'
    }

    # FastAPI Users parses identifiers into uuid.UUID
    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True),
        primary_key=True,
        default_factory=uuid.uuid4,
        init=False
    )

    email: Mapped[str] = mapped_column(
        sa.String(320),
        unique=True,
        index=True,
        nullable=False,
        comment="Email (login)"
    )

    hashed_password: Mapped[str] = mapped_column(
        sa.String(1024),
        nullable=False,
        comment="Password hash"
    )

    first_name: Mapped[str] = mapped_column(
        sa.String(50),
        nullable=False,
        comment="First name"
    )

    last_name: Mapped[str] = mapped_column(
        sa.String(50),
        nullable=False,
        comment="Last name"
    )

    phone: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        comment="Phone"
    )

    role: Mapped[str] = mapped_column(
        sa.String(20),
        nullable=False,
        comment="Role name"
    )

    station_id: Mapped[str | None] = mapped_column(
        sa.Uuid(as_uuid=False),
        sa.ForeignKey(fk("station.id")),
        nullable=True,
        default=None,
        comment="Station"
    )

    # Station
    station: Mapped["StationOrm"] = relationship(
        back_populates="staff",
        lazy="noload",
        init=False
    )

    image: Mapped[str] = mapped_column(
        sa.String(),
        nullable=False,
        default="",
        comment="Photo URL"
    )

    shift_type: Mapped[str | None] = mapped_column(
        sa.String(50),
        nullable=True,
        default=None,
        comment="Shift type"
    )

    responsibility: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default_factory=list,
        comment="Responsibilities"
    )

    on_duty: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=False,
        comment="Currently on duty"
    )

    add_sale_target: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=False,
        comment="Sale target assigned"
    )

    pay_type: Mapped[str | None] = mapped_column(
        sa.String(50),
        nullable=True,
        default=None,
        comment="Pay type"
    )

    amount: Mapped[float] = mapped_column(
        sa.Numeric(12, 2, asdecimal=False),
        nullable=False,
        default=0.0,
        comment="Pay amount"
    )

    two_factor_auth_enabled: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=False,
        comment="Two-factor authentication enabled"
    )

    notification_preferences: Mapped[Dict[str, bool]] = mapped_column(
        JSON,
        nullable=False,
        default_factory=dict,
        comment="Notification preferences"
    )

    is_active: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=True,
        comment="Account is active"
    )

    is_superuser: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=False,
        comment="Required by FastAPI Users"
    )

    is_verified: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=False,
        comment="Required by FastAPI Users"
    )

    repr_cols = ("email", "role")
