"""
Supporting utilities.
"""

from .logging import get_logger, set_log_level
