"""
Default configuration settings for SVG markup output.
"""

DEFAULT_CONFIG = {
    # Logging settings
    "log_level": "INFO",
    "log_file": None,  # Path of a rotating log file, or None for console only
    "log_json": False,  # Structured JSON log records

    # Rasterization settings
    "png_size": (300, 300),  # Default size for rendered PNG images (width, height)
}
