"""Enum for tracked recipe step fields.

Declaration order is the order in which field-level step updates are emitted.
"""

from enum import Enum


class StepFieldEnum(str, Enum):
    """Step fields whose changes are recorded as individual revisions."""

    INSTRUCTION = "INSTRUCTION"
    STEP_NUMBER = "STEP_NUMBER"
    OPTIONAL_STATUS = "OPTIONAL_STATUS"
    TIMER = "TIMER"
