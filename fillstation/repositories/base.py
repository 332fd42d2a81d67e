import traceback
from typing import Dict, Any

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fillstation.auth.actor import Actor
from fillstation.utils.exceptions import DBException, DBDuplicateException, BadRequestException, api_logger


class BaseRepository:

    def __init__(self, session: AsyncSession, actor: Actor | None = None):
        self.session = session
        self.actor = actor
        self.logger = api_logger

    @property
    def station_id(self) -> str:
        return self.actor.require_station()

    async def select_helper(self, stmt, scalars=True) -> Any:
        # Reads never commit: they may be part of a larger unit of work
        try:
            if scalars:
                result = await self.session.scalars(
                    stmt,
                    execution_options={"populate_existing": True}
                )
                result = result.unique()
            else:
                result = await self.session.execute(stmt)

            return result

        except Exception:
            self.logger.error(traceback.format_exc())
            raise DBException()

    async def select_all(self, stmt, scalars=True) -> Any:
        dataset = await self.select_helper(stmt, scalars)
        return dataset.all()

    async def select_first(self, stmt, scalars=True) -> Any:
        dataset = await self.select_helper(stmt, scalars)
        return dataset.first()

    async def select_single_field(self, stmt) -> Any:
        dataset = await self.select_helper(stmt, scalars=False)
        row = dataset.first()
        return row[0] if row else None

    async def execute(self, stmt) -> Any:
        # Bulk statements do not touch the objects already loaded into the session
        try:
            return await self.session.execute(stmt, execution_options={"synchronize_session": False})

        except Exception:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise DBException()

    async def commit(self) -> None:
        try:
            await self.session.commit()

        except IntegrityError:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise DBDuplicateException()

        except Exception:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise DBException()

    async def add_object(self, obj: Any) -> None:
        """
        Adds the object to the unit of work without committing it
        """
        try:
            self.session.add(obj)
            await self.session.flush()

        except IntegrityError:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise DBDuplicateException()

        except Exception:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise DBException()

    async def save_object(self, obj: Any) -> None:
        await self.add_object(obj)
        await self.commit()
        await self.session.refresh(obj)

    async def update_object(self, obj, update_data: Dict[str, Any]) -> None:
        obj.update_without_saving(update_data)
        await self.save_object(obj)

    async def delete_object(self, _model_, _id_: str, commit: bool = True) -> None:
        try:
            stmt = sa.delete(_model_).where(_model_.id == _id_)
            await self.session.execute(stmt)

        except IntegrityError:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise BadRequestException("The record cannot be deleted because other records refer to it")

        except Exception:
            await self.session.rollback()
            self.logger.error(traceback.format_exc())
            raise DBException()

        if commit:
            await self.commit()
