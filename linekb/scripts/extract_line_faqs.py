#!/usr/bin/env python3
"""
Extract knowledge-base entries from a LINE Official Account chat export.

Reads the CSV produced by the LINE chat export, pairs customer questions
with the shop's replies, collects Q./A. blocks from auto-replies and writes
the entries as JSON (with run metadata) or as JSON Lines.

Usage:
    linekb-extract <export.csv> [--output out.json] [--format json|jsonl]

Examples:
    # Extract to the default location next to the export
    linekb-extract ~/Downloads/line_chat.csv

    # Stream-friendly output for bulk import
    linekb-extract line_chat.csv -o entries.jsonl --format jsonl
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from linekb.core.config import Settings
from linekb.core.exceptions import TranscriptError
from linekb.core.logging_setup import configure_logging
from linekb.models.knowledge import ExtractionResult
from linekb.services.knowledge.pipeline import KnowledgePipeline

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def save_results(result: ExtractionResult, output_path: Path, fmt: str) -> None:
    """Save extraction results.

    Args:
        result: The extraction result
        output_path: Where to save the results
        fmt: "json" for one document with metadata, "jsonl" for one entry per line
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    records = result.to_records()

    with open(output_path, "w", encoding="utf-8") as f:
        if fmt == "jsonl":
            for record in records:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        else:
            output = {
                "metadata": {
                    "total_messages": result.total_messages,
                    "skipped_messages": result.skipped_messages,
                    "pair_count": result.pair_count,
                    "embedded_faq_count": result.embedded_faq_count,
                    "processing_time_ms": result.processing_time_ms,
                },
                "entries": records,
            }
            json.dump(output, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved {len(records)} entries to {output_path}")


def print_summary(result: ExtractionResult) -> None:
    """Print extraction summary to console."""
    print(f"\n{'='*60}")
    print("LINE KNOWLEDGE EXTRACTION SUMMARY")
    print(f"{'='*60}")
    print(f"Total messages: {result.total_messages}")
    print(f"Entries extracted: {len(result.entries)}")
    print(f"  Adjacent pairs: {result.pair_count}")
    print(f"  Embedded FAQs: {result.embedded_faq_count}")
    print(f"Processing time: {result.processing_time_ms}ms")

    if result.skipped_messages:
        print("\nSkipped messages:")
        for reason, count in sorted(result.skipped_messages.items()):
            print(f"  {reason}: {count}")

    if result.entries:
        categories: dict[str, int] = {}
        for entry in result.entries:
            categories[entry.category] = categories.get(entry.category, 0) + 1
        print("\nCategories:")
        for category, count in sorted(categories.items(), key=lambda kv: -kv[1]):
            print(f"  {category}: {count}")

        print(f"\n{'='*60}")
        print("SAMPLE ENTRIES")
        print(f"{'='*60}")
        for i, entry in enumerate(result.entries[:3]):
            print(f"\n--- Entry {i+1} [{entry.category}] (priority {entry.priority}) ---")
            print(f"Q: {entry.question[:150]}")
            print(f"A: {entry.answer[:150]}")


def main(
    input_file: str,
    output_file: Optional[str] = None,
    fmt: str = "json",
    settings: Optional[Settings] = None,
) -> Optional[ExtractionResult]:
    """Run the extraction pipeline on one export file.

    Args:
        input_file: Path to the LINE export CSV
        output_file: Optional output path (defaults to <input>.knowledge.<fmt>)
        fmt: Output format, "json" or "jsonl"
        settings: Settings override

    Returns:
        ExtractionResult if successful, None if the file could not be read
    """
    pipeline = KnowledgePipeline(settings)
    input_path = Path(input_file)

    try:
        result = pipeline.run_file(input_path)
    except TranscriptError as e:
        logger.error(f"{e.error_code}: {e.detail}")
        return None

    print_summary(result)

    output_path = (
        Path(output_file)
        if output_file
        else input_path.with_suffix(f".knowledge.{fmt}")
    )
    save_results(result, output_path, fmt)
    print(f"\nDone! Results saved to: {output_path}\n")
    return result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract knowledge-base Q&A entries from a LINE chat export"
    )
    parser.add_argument(
        "input_file",
        help="Path to the LINE Official Account chat export (CSV)",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Output file path (default: <input>.knowledge.<format>)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "jsonl"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL from the environment",
    )
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    args = parse_args(argv)
    overrides = {"LOG_LEVEL": args.log_level} if args.log_level else {}
    settings = Settings(**overrides)
    configure_logging(settings)

    result = main(args.input_file, args.output, args.format, settings)
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(run())
