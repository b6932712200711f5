"""Revision record (de)serialization.

Revision records are stored as JSON text in the ``previous_data`` / ``new_data``
columns of a ``recipe_revisions`` row. The row also stores the revision category and
type in their own columns, and those columns decide which record class a payload is
decoded into. Decimal quantities are written as JSON strings so they survive the text
encoding exactly.
"""

from typing import Any

import orjson
from pydantic import ValidationError

from app.api.v1.schemas.common.revision import REVISION_RECORD_TYPES, RevisionRecord
from app.core.logging import get_logger
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.enums.revision_type_enum import RevisionTypeEnum
from app.exceptions.custom_exceptions import RevisionDecodeError

_log = get_logger(__name__)

EMPTY_REVISION_DATA = "{}"


def encode_revision(record: RevisionRecord) -> str:
    """Encode a revision record as compact JSON text.

    The ``category`` and ``type`` discriminator is embedded in the output.

    Args:
        record (RevisionRecord): The record to encode.

    Returns:
        str: The JSON text.
    """
    return orjson.dumps(record.model_dump(mode="json")).decode("utf-8")


def _resolve_record_type(
    category: RevisionCategoryEnum | str | None,
    revision_type: RevisionTypeEnum | str | None,
    payload: dict[str, Any],
) -> type[RevisionRecord]:
    if category is None or revision_type is None:
        category = category if category is not None else payload.get("category")
        revision_type = (
            revision_type if revision_type is not None else payload.get("type")
        )

    try:
        key = (RevisionCategoryEnum(category), RevisionTypeEnum(revision_type))
    except ValueError as e:
        msg = f"Unknown revision category/type pair ({category}, {revision_type})"
        raise RevisionDecodeError(msg) from e

    return REVISION_RECORD_TYPES[key]


def decode_revision(
    text: str | None,
    category: RevisionCategoryEnum | str | None = None,
    revision_type: RevisionTypeEnum | str | None = None,
) -> RevisionRecord:
    """Decode JSON text into the revision record class it was stored as.

    When ``category`` and ``revision_type`` are given (the persisted columns), they
    select the record class. Otherwise the discriminator embedded in the text is used.

    Args:
        text (str | None): The stored JSON text.
        category (RevisionCategoryEnum | str | None): Stored revision category.
        revision_type (RevisionTypeEnum | str | None): Stored revision type.

    Returns:
        RevisionRecord: The decoded record.

    Raises:
        RevisionDecodeError: If the text is blank or malformed, the category/type
            pair is unknown, or the payload does not fit the record class.
    """
    if text is None or not text.strip():
        raise RevisionDecodeError("Revision data is empty")

    try:
        payload = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise RevisionDecodeError(f"Malformed revision JSON: {e}") from e

    if not isinstance(payload, dict) or not payload:
        raise RevisionDecodeError("Revision data is not a JSON object with fields")

    record_cls = _resolve_record_type(category, revision_type, payload)

    try:
        return record_cls.model_validate(payload)
    except ValidationError as e:
        _log.debug(
            "Payload does not match {}: {} validation error(s)",
            record_cls.__name__,
            e.error_count(),
        )
        msg = f"Revision data does not match {record_cls.__name__}: {e}"
        raise RevisionDecodeError(msg) from e


def encode_revision_pair(record: RevisionRecord) -> tuple[str, str]:
    """Encode a record into the ``(previous_data, new_data)`` pair of a revision row.

    Adds have nothing before them and removes have nothing after them; that side is
    written as the empty marker ``"{}"``. Updates carry both values inside the one
    record, so the same text is written to both sides.

    Args:
        record (RevisionRecord): The record to encode.

    Returns:
        tuple[str, str]: The previous and new data texts.
    """
    encoded = encode_revision(record)
    if record.type == RevisionTypeEnum.ADD:
        return EMPTY_REVISION_DATA, encoded
    if record.type == RevisionTypeEnum.REMOVE:
        return encoded, EMPTY_REVISION_DATA
    return encoded, encoded


def decode_revision_pair(
    previous_data: str | None,
    new_data: str | None,
    category: RevisionCategoryEnum | str,
    revision_type: RevisionTypeEnum | str,
) -> RevisionRecord:
    """Decode the record held in a revision row's data pair.

    Args:
        previous_data (str | None): The stored ``previous_data`` text.
        new_data (str | None): The stored ``new_data`` text.
        category (RevisionCategoryEnum | str): The stored revision category.
        revision_type (RevisionTypeEnum | str): The stored revision type.

    Returns:
        RevisionRecord: The decoded record.

    Raises:
        RevisionDecodeError: If the relevant half cannot be decoded.
    """
    try:
        is_remove = RevisionTypeEnum(revision_type) == RevisionTypeEnum.REMOVE
    except ValueError as e:
        msg = f"Unknown revision category/type pair ({category}, {revision_type})"
        raise RevisionDecodeError(msg) from e

    text = previous_data if is_remove else new_data
    return decode_revision(text, category, revision_type)
