"""Main entry point for the glossfix package."""

import json
import sys

from loguru import logger

from glossfix import __version__
from glossfix.cli import create_parser
from glossfix.core import Config, load_config
from glossfix.core.pipeline import ReconstructionResult
from glossfix.processing import clean_many
from glossfix.utils.logging import setup_logger


def _log_version(verbose: bool) -> None:
    if verbose:
        logger.info(f"glossfix {__version__}: repairing PDF text selections")


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        if config.input:
            logger.info(f"  Input file: {config.input}")
        if config.output:
            logger.info(f"  Output file: {config.output}")
        if config.top_n:
            logger.info(f"  wordfreq words: {config.top_n}")
        if config.extra_rules:
            logger.info(f"  Extra rules: {config.extra_rules}")
        logger.info(f"  Fallback length: {config.min_fallback_length}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")


def read_texts(positional: list[str], config: Config) -> list[str]:
    """Collect selections from positional args, the input file, or stdin."""
    if positional:
        return list(positional)
    if config.input:
        with open(config.input, "r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f if line.strip()]
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def format_results(results: list[ReconstructionResult], report: bool) -> str:
    """Render results as cleaned lines or as a JSON report."""
    if report:
        return json.dumps([result.model_dump(mode="json") for result in results], indent=2)
    return "\n".join(result.cleaned for result in results)


def write_output(rendered: str, output: str | None) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(rendered + "\n")
    else:
        sys.stdout.write(rendered + "\n")


def _clean_and_write(texts: list[str], config: Config) -> None:
    """Clean the selections and write them out, noting the outcome when verbose."""
    try:
        results = clean_many(texts, config)
        write_output(format_results(results, config.report), config.output)
    except KeyboardInterrupt:
        logger.warning("Cleaning stopped before all selections were written")
        raise
    except Exception:
        if config.verbose:
            logger.error(f"Could not clean {len(texts)} selections")
        raise
    if config.verbose:
        logger.info(f"Wrote {len(results)} cleaned selections")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _log_version(config.verbose)

    # Print configuration summary
    _print_config_summary(config)

    texts = read_texts(args.texts, config)
    if not texts:
        logger.warning("No input text given")
        return

    _clean_and_write(texts, config)


if __name__ == "__main__":
    main()
