from .exceptions import InvariantViolation
from .design import assert_design, assert_section_order
from .section import assert_section

__all__ = ["InvariantViolation", "assert_design", "assert_section_order", "assert_section"]
