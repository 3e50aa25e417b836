"""
SVG Markup - Utilities Package
==============================
This package contains utility modules for SVG Markup.
"""

from svg_markup.utils.logger import (
    JsonFormatter, setup_logger, get_logger, LogCapture, log_exception
)


__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'LogCapture',
    'log_exception'
]
