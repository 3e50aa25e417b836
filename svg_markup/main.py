"""
Main Entry Point for SVG Markup
===============================
This module provides the command line tool that renders the sample
document to stdout or to files.
"""

import sys
import argparse
import logging
from typing import Optional, Sequence

from svg_markup.config import load_config
from svg_markup.core.renderer import SVGRenderer
from svg_markup.demo import build_demo_document
from svg_markup.generation.svg_generator import SVGGenerator
from svg_markup.utils.logger import setup_logger, get_logger, log_exception

# Configure logger
logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="svg-markup",
        description="Render the sample SVG document to stdout or to files"
    )
    parser.add_argument("--output", "-o", metavar="FILE",
                        help="Write the SVG to this file instead of stdout")
    parser.add_argument("--png", metavar="FILE",
                        help="Also rasterize the document to this PNG file (requires cairosvg)")
    parser.add_argument("--png-size", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"),
                        help="PNG size in pixels (defaults to config setting)")
    parser.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (defaults to config setting)")
    parser.add_argument("--config", "-c", help="Path to configuration file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments, ``sys.argv[1:]`` when None

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    try:
        # Load configuration
        config = load_config(args.config)

        # Setup logging
        setup_logger(
            args.log_level or config.get("log_level", "INFO"),
            log_file=config.get("log_file"),
            use_json=bool(config.get("log_json", False))
        )

        document = build_demo_document()

        renderer = SVGRenderer(default_size=config["png_size"])
        generator = SVGGenerator(renderer=renderer)

        if args.output:
            generator.write_svg(document, args.output)
        else:
            document.render(sys.stdout)
            sys.stdout.write("\n")

        if args.png:
            generator.write_png(document, args.png, size=args.png_size)
        return 0

    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 130
    except Exception as e:
        log_exception(logger, e, context={"config": args.config})
        return 1


if __name__ == "__main__":
    sys.exit(main())
