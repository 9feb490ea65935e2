#!/usr/bin/env python3
"""
Main CLI entry point for image filter tool.

Scans a folder for images, reads their text with OCR, moves images whose text
is flagged as sensitive into <folder>/dacy and crops all the others in place.
"""
import sys
import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from image_filter_tool.api import AVAILABLE_APIS, APIClient, get_client
from image_filter_tool.config import FilterConfig
from image_filter_tool.core.classifier import ContentClassifier, DEFAULT_BACKOFF_SECONDS
from image_filter_tool.core.file_operations import QuarantineRouter
from image_filter_tool.core.ocr import OcrExtractor
from image_filter_tool.core.pipeline import PipelineOrchestrator, RunStatistics
from image_filter_tool.core.transformer import ImageTransformer
from image_filter_tool.utils.log_utils import get_logger, configure_logging

logger = get_logger(__name__)

USAGE = "Please provide a folder path as an argument"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Filter images whose text has sensitive content and crop the rest'
    )
    parser.add_argument('input', nargs='?', help='Folder to process recursively')
    parser.add_argument('--api',
                      default='openai',
                      choices=list(AVAILABLE_APIS),
                      help='API provider used to classify the extracted text (default: openai)')
    parser.add_argument('--model',
                      help='Override the provider default model')
    parser.add_argument('--backoff',
                      type=float,
                      default=DEFAULT_BACKOFF_SECONDS,
                      help=f'Seconds to wait after a failed classification (default: {DEFAULT_BACKOFF_SECONDS:g})')
    parser.add_argument('--fail-closed',
                      action='store_true',
                      help='Quarantine images whose classification failed instead of treating them as safe')
    parser.add_argument('--max-aspect-ratio',
                      type=float,
                      help='Delete images whose long side exceeds the short side by more than this factor')
    parser.add_argument('--log-level',
                      choices=['debug', 'info', 'warning', 'error', 'critical', 'none'],
                      default='info',
                      help="Set logging level (default: info; 'none' disables logging)")
    return parser


def build_pipeline(config: FilterConfig, client: Optional[APIClient] = None) -> PipelineOrchestrator:
    """Wire the collaborators for one run. A client can be injected for tests."""
    if client is None:
        client_kwargs = {'model': config.model} if config.model else {}
        client = get_client(config.api, **client_kwargs)
    classifier = ContentClassifier(
        client,
        backoff_seconds=config.backoff_seconds,
        fail_open=config.fail_open,
    )
    return PipelineOrchestrator(
        root=config.root,
        extractor=OcrExtractor(),
        classifier=classifier,
        transformer=ImageTransformer(config.top_ratio, config.max_aspect_ratio),
        router=QuarantineRouter(config.quarantine_dir),
    )


def cli_run(config: FilterConfig) -> RunStatistics:
    logger.info(f"Filtering images under {config.root} with {config.api}...")
    pipeline = build_pipeline(config)
    return asyncio.run(pipeline.run())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.input:
        print(USAGE, file=sys.stderr)
        return 1

    if args.log_level.lower() != 'none':
        configure_logging(getattr(logging, args.log_level.upper()))
    else:
        logging.disable(logging.CRITICAL)

    try:
        config = FilterConfig(
            root=Path(args.input),
            api=args.api,
            model=args.model,
            backoff_seconds=args.backoff,
            fail_open=not args.fail_closed,
            max_aspect_ratio=args.max_aspect_ratio,
        )
        cli_run(config)
    except Exception as err:
        logger.error("Fatal error: %s", err)
        return 1
    return 0


def cli() -> None:
    """Entry point for the image-filter command."""
    sys.exit(main())


if __name__ == '__main__':
    cli()
