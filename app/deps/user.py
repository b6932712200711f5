"""Current user dependency.

Authentication happens upstream of this service. The authenticated user's ID is
forwarded in the ``X-User-Id`` header and threaded explicitly into the services that
record who made a change.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header

USER_ID_HEADER = "X-User-Id"


def get_current_user_id(
    x_user_id: Annotated[
        uuid.UUID,
        Header(alias=USER_ID_HEADER, description="ID of the authenticated user"),
    ],
) -> uuid.UUID:
    """Return the ID of the user making the request.

    Args:
        x_user_id: Value of the ``X-User-Id`` header.

    Returns:
        uuid.UUID: The current user's ID.
    """
    return x_user_id


CurrentUserId = Annotated[uuid.UUID, Depends(get_current_user_id)]
