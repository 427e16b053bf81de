#!/usr/bin/env python3
"""
Command-line interface for the shift_extractor package.
Usage:
  python -m shift_extractor <input_files> <output_file> <filter_user> [options]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .extractor import (
	ALL_USERS,
	DEFAULT_ANCHOR,
	ENGINES,
	ExtractionOptions,
	ScheduleExtractor,
	filter_months,
	year_from_filename,
)
from .grid import decode_cell
from .output import write_json

logger = logging.getLogger(__name__)


def split_filenames(value: str) -> List[str]:
	return [item.strip() for item in value.split(",") if item.strip()]


def configure_logging(verbose: bool = False) -> None:
	handler = logging.StreamHandler(sys.stderr)
	handler.setFormatter(logging.Formatter(
		fmt='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
		datefmt='%Y-%m-%d %H:%M:%S',
	))
	root = logging.getLogger("shift_extractor")
	root.handlers = [handler]
	root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Extract per-person shift schedules from Excel workbooks into JSON')
	parser.add_argument('input_files', help='Comma-separated Excel file paths; each filename must contain a 4-digit year')
	parser.add_argument('output_file', help='Path of the JSON file to write')
	parser.add_argument('filter_user', help=f'Person to keep, or "{ALL_USERS}" to not filter')
	parser.add_argument('--anchor', '-a', default=DEFAULT_ANCHOR,
				   help=f'Cell above the names column and left of the dates row (default: {DEFAULT_ANCHOR})')
	parser.add_argument('--engine', choices=ENGINES, help='Backend engine to use')
	parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
	return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)
	configure_logging(args.verbose)

	input_files = split_filenames(args.input_files)
	output_files = split_filenames(args.output_file)

	if not input_files:
		parser.error("At least one filename is required")
	if len(output_files) != 1:
		parser.error("Exactly one output filename is required")
	try:
		decode_cell(args.anchor)
		years = [year_from_filename(input_file) for input_file in input_files]
	except ValueError as e:
		parser.error(str(e))

	extractor = ScheduleExtractor(ExtractionOptions(anchor=args.anchor, engine=args.engine))
	# absolute(), not resolve(): a symlink keeps the name its year came from
	months = extractor.extract_files([Path(f).absolute() for f in input_files], years)
	result = filter_months(months, args.filter_user)

	output_file = write_json(result, Path(output_files[0]).absolute())

	print("\nExtraction completed successfully!")
	print(f"Output file: {output_file}")


if __name__ == "__main__":
	main()
