import uuid
from typing import Dict, Any

import sqlalchemy as sa
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import MappedAsDataclass, DeclarativeBase, Mapped, mapped_column

from fillstation.config import SCHEMA


def new_uuid() -> str:
    return str(uuid.uuid4())


def fk(column: str) -> str:
    # Foreign keys name the schema when the tables live in one
    return f"{SCHEMA}.{column}" if SCHEMA else column


class Base(AsyncAttrs, MappedAsDataclass, DeclarativeBase):
    metadata = MetaData(schema=SCHEMA)

    id: Mapped[str] = mapped_column(
        sa.Uuid(as_uuid=False),
        primary_key=True,
        default_factory=new_uuid,
        init=False
    )

    repr_cols = tuple()

    def __repr__(self):
        cols = []
        for col in self.__table__.columns.keys():
            if col in self.repr_cols:
                cols.append(f"{col}={getattr(self, col)}")

        return f"<{self.__class__.__name__} {', '.join(cols)}>"

    def update_without_saving(self, data: Dict[str, Any]) -> None:
        for field, value in data.items():
            setattr(self, field, value)

