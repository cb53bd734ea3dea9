"""Command-line interface.

Usage::

    providergen -i ./etc/sample -o ./app/src/main/java
    python -m providergen --input ./etc/sample --output ./out -v

Exit codes:
    0 - success
    1 - configuration error
    2 - entity model error
    3 - template rendering error
    4 - file-system error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import pipeline
from .config import load_config
from .errors import ConfigError, ModelLoadError, RenderError
from .loader import load_model
from .version import VERSION

logger = logging.getLogger("providergen")

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_MODEL_ERROR = 2
EXIT_RENDER_ERROR = 3
EXIT_IO_ERROR = 4


def _setup_logging(verbosity: int) -> None:
    """Configure the providergen logger: 0 = WARNING, 1 = INFO, 2+ = DEBUG."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="providergen",
        description=(
            "Generate Android content providers, wrappers, API services and"
            " views from JSON entity definitions."
        ),
    )
    parser.add_argument("--version", action="version", version=f"providergen {VERSION}")
    parser.add_argument(
        "-i", "--input",
        required=True,
        metavar="DIR",
        help="Input directory, where to find _config.json and your entity json files.",
    )
    parser.add_argument(
        "-o", "--output",
        required=True,
        metavar="DIR",
        help="Output directory, where to generate the Java files.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for INFO, -vv for DEBUG).",
    )
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the generator, and return the exit code."""
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    input_dir = Path(args.input)
    output_dir = Path(args.output)
    logger.info("Input:  %s", input_dir)
    logger.info("Output: %s", output_dir)

    try:
        config = load_config(input_dir)
        model = load_model(input_dir)
        result = pipeline.run(config, model, output_dir)
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG_ERROR
    except ModelLoadError as exc:
        logger.error("%s", exc)
        return EXIT_MODEL_ERROR
    except RenderError as exc:
        logger.error("%s", exc)
        return EXIT_RENDER_ERROR
    except OSError as exc:
        logger.error("%s", exc)
        return EXIT_IO_ERROR

    print(f"Generated {len(result.files)} files in {output_dir}")
    return EXIT_SUCCESS


def main() -> None:
    sys.exit(run_cli())
