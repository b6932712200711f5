"""Base database models and common ORM definitions.

Defines the declarative base shared by every ORM model of the recipe manager schema.
"""

import enum
from typing import Any

import orjson
from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase


class BaseDatabaseModel(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models.

    Inherits from:
        DeclarativeBase: SQLAlchemy's declarative base class for ORM models.

    Provides a column-only dictionary view and a JSON ``repr`` for logging. Only
    loaded column attributes are included, so rendering a model never triggers a
    lazy load.
    """

    def to_dict(self) -> dict[str, Any]:
        """Return the loaded column values of this instance.

        Returns:
            dict[str, Any]: Column name to value, enums replaced by their values.
        """
        state = inspect(self)
        data: dict[str, Any] = {}
        for column in state.mapper.column_attrs:
            if column.key in state.unloaded:
                continue
            value = getattr(self, column.key)
            data[column.key] = value.value if isinstance(value, enum.Enum) else value
        return data

    def __repr__(self) -> str:
        """Return a JSON representation of the model's loaded columns.

        Returns:
            str: The class name followed by the JSON encoded columns.
        """
        encoded = orjson.dumps(self.to_dict(), default=str).decode("utf-8")
        return f"{type(self).__name__}({encoded})"
