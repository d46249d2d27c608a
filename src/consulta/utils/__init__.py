"""Utility modules for Consulta.

Provides:
- logger: get_logger for logging
"""

from consulta.utils.logger import get_logger

__all__ = ["get_logger"]
