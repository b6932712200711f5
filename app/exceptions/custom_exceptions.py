"""Custom exception classes.

Defines application-specific exceptions used to handle error cases with meaningful
messages.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.api.v1.schemas.common.revision import RevisionRecord


class InvalidRevisionError(ValueError):
    """Raised when a change set contains a revision record that fails validation.

    The whole change set is rejected; none of its records are persisted.
    """

    def __init__(self, records: Sequence["RevisionRecord"]) -> None:
        """Initialize the exception with the offending records.

        Args:
            records: The records whose ``is_valid()`` returned False.
        """
        self.records = list(records)
        described = ", ".join(
            f"{record.category.value}/{record.type.value}(id={record.entity_id})"
            for record in self.records
        )
        super().__init__(f"Invalid revision record(s): {described}")

    def get_records(self) -> list["RevisionRecord"]:
        """Get the records that failed validation.

        Returns:
            list[RevisionRecord]: The rejected records.
        """
        return self.records


class DuplicateEntityError(ValueError):
    """Raised when a replacement list names the same ingredient or step twice."""

    def __init__(self, entity: str, entity_ids: Sequence[int]) -> None:
        """Initialize the exception with the repeated identifiers.

        Args:
            entity: Kind of entity, e.g. ``"ingredient"``.
            entity_ids: The identifiers listed more than once.
        """
        self.entity = entity
        self.entity_ids = list(entity_ids)
        super().__init__(
            f"Duplicate {entity} id(s) in request: {self.entity_ids}",
        )

    def get_entity_ids(self) -> list[int]:
        """Get the identifiers listed more than once.

        Returns:
            list[int]: The repeated identifiers.
        """
        return self.entity_ids


class RevisionDecodeError(ValueError):
    """Raised when stored revision data cannot be decoded into a revision record.

    This exception is raised when:
    - The stored (category, type) pair does not name a known revision variant
    - The stored text is empty or not valid JSON
    - The JSON does not match the shape of the variant it is stored as
    """

    def __init__(self, reason: str, revision_id: int | None = None) -> None:
        """Initialize the exception with the reason and optional revision ID.

        Args:
            reason: Why the data could not be decoded.
            revision_id: The stored revision row the data came from, if known.
        """
        self.reason = reason
        self.revision_id = revision_id

        if revision_id is not None:
            message = f"Failed to decode revision {revision_id}: {reason}"
        else:
            message = f"Failed to decode revision: {reason}"

        super().__init__(message)

    def get_reason(self) -> str:
        """Get the reason decoding failed.

        Returns:
            str: The decode failure reason.
        """
        return self.reason

    def get_revision_id(self) -> int | None:
        """Get the ID of the revision row that failed to decode.

        Returns:
            int | None: The revision ID, if known.
        """
        return self.revision_id


class ResourceNotFoundError(LookupError):
    """Raised when a recipe, or one of its ingredients or steps, does not exist."""

    def __init__(self, resource: str, resource_id: int) -> None:
        """Initialize the exception with the missing resource.

        Args:
            resource: Human-readable resource name, e.g. ``"Recipe"``.
            resource_id: The identifier that was looked up.
        """
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} with ID {resource_id} not found")

    def get_resource(self) -> str:
        """Get the name of the missing resource.

        Returns:
            str: The resource name.
        """
        return self.resource

    def get_resource_id(self) -> int:
        """Get the identifier of the missing resource.

        Returns:
            int: The resource identifier.
        """
        return self.resource_id


class DatabaseUnavailableError(Exception):
    """Raised when a database session cannot be established.

    The session dependency raises this after exhausting its connection retries.
    """

    def __init__(
        self,
        reason: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize the exception with a reason and the underlying error.

        Args:
            reason: Why the database is considered unavailable.
            original_error: The driver or SQLAlchemy error that triggered it.
        """
        self.reason = reason
        self.original_error = original_error
        super().__init__(f"Database unavailable: {reason}")

    def get_reason(self) -> str:
        """Get the reason the database is unavailable.

        Returns:
            str: The unavailability reason.
        """
        return self.reason

    def get_original_error(self) -> Exception | None:
        """Get the underlying error.

        Returns:
            Exception | None: The original error, if any.
        """
        return self.original_error
