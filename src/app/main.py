"""Command line entrypoint for batch kana/romaji conversion."""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from tqdm import tqdm

from common.config import get_settings
from kana import Operation, convert

from .schemas import ConversionRecord

LOGGER = logging.getLogger(__name__)


def read_lines(path: Path) -> list[str]:
    """Return the non-blank lines of ``path`` without their line endings."""

    if not path.is_file():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    with path.open(encoding="utf-8") as fh:
        return [line.rstrip("\r\n") for line in fh if line.strip()]


def convert_line(index: int, text: str, operation: Operation, phonetic: bool) -> ConversionRecord:
    return ConversionRecord(
        index=index,
        operation=operation,
        phonetic=phonetic,
        source=text,
        result=convert(text, operation, phonetic=phonetic),
    )


def run_batch(
    texts: Sequence[str],
    operation: Operation,
    *,
    phonetic: bool,
    max_workers: int,
    progress: bool,
) -> list[ConversionRecord]:
    records: list[ConversionRecord] = []

    if max_workers <= 1:
        for index, text in enumerate(tqdm(texts, desc="Converting", unit="line", disable=not progress)):
            records.append(convert_line(index, text, operation, phonetic))
        return records

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(convert_line, index, text, operation, phonetic)
            for index, text in enumerate(texts)
        ]
        for future in tqdm(
            as_completed(futures),
            total=len(futures),
            desc="Converting",
            unit="line",
            disable=not progress,
        ):
            records.append(future.result())

    records.sort(key=lambda record: record.index)
    return records


def write_csv(records: Sequence[ConversionRecord], output_csv: Path) -> None:
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    with output_csv.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["index", "operation", "phonetic", "input", "output"])
        for record in records:
            writer.writerow(
                [
                    record.index,
                    record.operation,
                    "1" if record.phonetic else "0",
                    record.source,
                    record.result,
                ]
            )


def emit(records: Sequence[ConversionRecord], *, jsonl: bool) -> None:
    for record in records:
        if jsonl:
            print(record.model_dump_json(by_alias=True))
        else:
            print(record.result)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Convert between kana and wapuro-Hepburn romaji")
    parser.add_argument(
        "operation",
        choices=[op.value for op in Operation],
        help="Conversion to apply",
    )
    parser.add_argument("texts", nargs="*", help="Text to convert (one result per argument)")
    parser.add_argument(
        "--input",
        dest="input",
        default=None,
        help="UTF-8 file whose non-blank lines are converted after the positional texts",
    )
    parser.add_argument(
        "--phonetic",
        dest="phonetic",
        action=argparse.BooleanOptionalAction,
        default=settings.phonetic,
        help="Spell ぢ/づ as pronounced (ji/zu) instead of di/du; the default comes from KANA_PHONETIC",
    )
    parser.add_argument(
        "--max-workers",
        dest="max_workers",
        type=int,
        default=settings.max_workers,
        help="Number of concurrent workers (default: env KANA_MAX_WORKERS or 1)",
    )
    parser.add_argument(
        "--output",
        dest="output",
        default=None,
        help="Also write the records to this CSV file",
    )
    parser.add_argument(
        "--jsonl",
        dest="jsonl",
        action="store_true",
        help="Print one JSON record per line instead of the bare results",
    )
    parser.add_argument(
        "--progress",
        dest="progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )
    args = parser.parse_args(argv)
    if not args.texts and args.input is None:
        parser.error("no text given; pass TEXT arguments or --input FILE")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))

    texts = list(args.texts)
    if args.input is not None:
        source = Path(args.input).expanduser().resolve()
        try:
            lines = read_lines(source)
        except FileNotFoundError as exc:
            print(exc, file=sys.stderr)
            return 1
        if not lines:
            print(f"No text found in {source}", file=sys.stderr)
            return 1
        texts.extend(lines)

    operation = Operation(args.operation)
    records = run_batch(
        texts,
        operation,
        phonetic=args.phonetic,
        max_workers=max(1, args.max_workers),
        progress=args.progress,
    )
    emit(records, jsonl=args.jsonl)

    if args.output is not None:
        output_csv = Path(args.output).expanduser().resolve()
        write_csv(records, output_csv)
        LOGGER.info("csv=%s", output_csv)

    LOGGER.info("operation=%s lines=%d phonetic=%s", operation.value, len(records), args.phonetic)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
