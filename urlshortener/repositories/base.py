"""Base repository implementation for the URL shortener application.

This module provides a generic BaseRepository class that follows the Repository pattern
for database operations, serving as a foundation for more specific repositories.
Only create and read operations exist: stored rows are immutable.
"""

from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel

# Type variable for model types
T = TypeVar("T", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class DuplicateEntityError(RepositoryError):
    """Exception raised when a unique constraint is violated."""

    def __init__(self, model_type: Type[SQLModel], field_name: str, value: Any):
        self.model_type = model_type
        self.field_name = field_name
        self.value = value
        model_name = getattr(model_type, "__name__", "Entity")
        super().__init__(f"{model_name} with {field_name}={value} already exists")


class BaseRepository(Generic[T, CreateSchemaType]):
    """
    Base repository implementing common create and read operations for SQLModel entities.

    Type parameters:
        T: The SQLModel type this repository manages
        CreateSchemaType: The Pydantic model type for creation operations
    """

    def __init__(self, model_type: Type[T]):
        """
        Initialize the repository with a specific model type.

        Args:
            model_type: The SQLModel class this repository will work with
        """
        self.model_type = model_type

    async def get_one_by(self, db: AsyncSession, field_name: str, value: Any) -> Optional[T]:
        """
        Get the entity whose ``field_name`` equals ``value``.

        Intended for columns with a UNIQUE constraint.

        Raises:
            RepositoryError: On database errors
        """
        try:
            query = select(self.model_type).where(getattr(self.model_type, field_name) == value)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model_type.__name__} by {field_name}: {e}")
            raise RepositoryError(f"Database error retrieving entity: {e}") from e

    async def create(
        self,
        db: AsyncSession,
        data: Union[CreateSchemaType, Dict[str, Any]],
        unique_fields: tuple = (),
    ) -> T:
        """
        Create a new entity.

        The row is flushed, not committed; the caller owns the transaction.

        Args:
            db: Database session
            data: Entity data (either as a Pydantic model or dictionary)
            unique_fields: Columns with UNIQUE constraints, used to name the
                violated one in DuplicateEntityError

        Returns:
            The created entity

        Raises:
            DuplicateEntityError: If a unique constraint is violated
            RepositoryError: On other database errors
        """
        if isinstance(data, BaseModel):
            data_dict = data.model_dump(exclude_unset=True)
        else:
            data_dict = data

        try:
            entity = self.model_type(**data_dict)
            db.add(entity)
            await db.flush()  # Flush to generate ID but don't commit yet
            return entity
        except IntegrityError as e:
            await db.rollback()
            field_name = self._violated_field(e, unique_fields)
            logger.debug(f"Unique constraint on {self.model_type.__name__}.{field_name} rejected insert")
            raise DuplicateEntityError(self.model_type, field_name, data_dict.get(field_name)) from e
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model_type.__name__}: {e}")
            await db.rollback()
            raise RepositoryError(f"Database error creating entity: {e}") from e

    async def count(self, db: AsyncSession) -> int:
        """
        Count the total number of entities.

        Raises:
            RepositoryError: On database errors
        """
        try:
            query = select(func.count()).select_from(self.model_type)
            result = await db.execute(query)
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_type.__name__} records: {e}")
            raise RepositoryError(f"Database error counting entities: {e}") from e

    def _violated_field(self, error: IntegrityError, unique_fields: tuple) -> str:
        """Best-effort guess of which unique column an IntegrityError is about."""
        message = str(error.orig).lower()
        table = getattr(self.model_type, "__tablename__", "")
        for field_name in unique_fields:
            # sqlite: "UNIQUE constraint failed: urls.short"
            # postgres: 'duplicate key ... "ix_urls_short"' / "Key (short)=(...)"
            if f"{table}.{field_name}" in message or f"({field_name})" in message or f"_{field_name}" in message:
                return field_name
        return "unknown"
