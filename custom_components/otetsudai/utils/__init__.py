# File: utils/__init__.py
"""Pure Python utilities for Otetsudai.

This module contains pure Python functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

Submodules:
    - dt_utils: Timestamp parsing/formatting and calendar-month helpers
    - hue_utils: Deterministic colour hue for a registrant name
    - math_utils: Integer amount parsing and percentage calculations

Usage:
    from . import dt_utils
    from .math_utils import parse_amount
"""

from . import dt_utils, hue_utils, math_utils

__all__ = ["dt_utils", "hue_utils", "math_utils"]
