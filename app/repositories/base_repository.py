"""
Base repository with common CRUD operations.
All specific repositories should inherit from this base class.
"""

from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from ..core.database import Base

ModelType = TypeVar("ModelType", bound=Base)

# Largest value an Integer primary key column holds on every supported database
MAX_ID = 2**31 - 1


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common database operations.

    Every write commits its own unit of work and rolls the session back
    when the database rejects it.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def create(self, *, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new record in the database.

        Args:
            obj_in: Dictionary of attributes for the new record

        Returns:
            The created database object, with its generated id

        Raises:
            SQLAlchemyError: If database operation fails
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            self.db.commit()
            self.db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get(self, id: int) -> Optional[ModelType]:
        """
        Retrieve a record by ID.

        Returns:
            The database object if found, None otherwise
        """
        if not -MAX_ID <= id <= MAX_ID:
            return None

        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_multi(
        self,
        *,
        order_by: Optional[Any] = None
    ) -> List[ModelType]:
        """
        Retrieve all records, optionally ordered.

        Args:
            order_by: SQLAlchemy order_by clause

        Returns:
            List of database objects
        """
        query = self.db.query(self.model)

        if order_by is not None:
            query = query.order_by(order_by)

        return query.all()

    def update(
        self,
        *,
        db_obj: ModelType,
        obj_in: Dict[str, Any]
    ) -> ModelType:
        """
        Update a record in the database.

        Args:
            db_obj: The existing database object to update
            obj_in: Dictionary of attributes to update

        Returns:
            The updated database object

        Raises:
            SQLAlchemyError: If database operation fails
        """
        try:
            for field, value in obj_in.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            self.db.commit()
            self.db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete(self, *, id: int) -> bool:
        """
        Delete a record from the database.

        Returns:
            True if a record was deleted, False if none matched

        Raises:
            SQLAlchemyError: If database operation fails
        """
        if not -MAX_ID <= id <= MAX_ID:
            return False

        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
            return deleted > 0
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def count(self) -> int:
        return self.db.query(self.model).count()
