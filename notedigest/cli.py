"""Command-line interface for digesting OCR text files.

Provides subcommands for cleaning, summarizing, keyphrase extraction,
and question-focused retrieval on a single text file, plus batch
digesting of a folder of text files into a CSV report.
"""

import argparse
import csv
import json
import sys
import time
from pathlib import Path

from notedigest.pipeline import DocumentPipeline
from notedigest.utils.config import load_config
from notedigest.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_SUPPORTED_EXTENSIONS = ("*.txt",)
_CSV_COLUMNS = [
    "filename",
    "status",
    "input_chars",
    "cleaned_chars",
    "processing_time_s",
    "keyphrases",
    "summary",
    "error",
]


def _find_documents(input_dir: Path) -> list[Path]:
    """Find all supported text files in a directory.

    Args:
        input_dir: Directory to scan.

    Returns:
        Sorted list of text file paths.
    """
    files: list[Path] = []
    for ext in _SUPPORTED_EXTENSIONS:
        files.extend(input_dir.glob(ext))
        files.extend(input_dir.glob(ext.upper()))
    return sorted(set(files))


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def process_folder(
    input_dir: Path,
    output_csv: Path,
    pipeline: DocumentPipeline | None = None,
    verbose: bool = False,
) -> dict[str, int]:
    """Digest every text file in a folder and export results to CSV.

    Args:
        input_dir: Directory containing text files.
        output_csv: Path for the output CSV file.
        pipeline: Pipeline to use. Built from the config file if omitted.
        verbose: Whether to print per-file progress.

    Returns:
        Summary dict with total, successful, and failed counts.
    """
    pipeline = pipeline or DocumentPipeline(load_config())

    files = _find_documents(input_dir)
    if not files:
        logger.warning("No text files found in %s", input_dir)
        return {"total": 0, "successful": 0, "failed": 0}

    logger.info("Found %d text files to process", len(files))

    results: list[dict[str, object]] = []
    successful = 0
    failed = 0

    for i, file_path in enumerate(files, 1):
        if verbose:
            print(f"Processing [{i}/{len(files)}]: {file_path.name}")

        start_time = time.time()
        try:
            result = _process_single_file(file_path, pipeline)
            result["processing_time_s"] = round(time.time() - start_time, 2)
            results.append(result)
            successful += 1
        except Exception as exc:
            logger.error("Failed to process %s: %s", file_path.name, exc)
            results.append(
                {"filename": file_path.name, "status": "failed", "error": str(exc)}
            )
            failed += 1

    _write_csv(results, output_csv)
    logger.info("Results written to %s", output_csv)

    summary = {"total": len(files), "successful": successful, "failed": failed}
    _print_summary(summary, output_csv)
    return summary


def _process_single_file(
    file_path: Path, pipeline: DocumentPipeline
) -> dict[str, object]:
    """Digest one text file into a CSV row."""
    text = _read_text(file_path)
    digest = pipeline.digest(text)
    return {
        "filename": file_path.name,
        "status": "success",
        "input_chars": len(text),
        "cleaned_chars": len(digest.cleaned_text),
        "keyphrases": "; ".join(digest.keyphrases),
        "summary": " ".join(digest.summary),
        "error": None,
    }


def _write_csv(results: list[dict[str, object]], output_path: Path) -> None:
    """Write digest rows to a CSV file.

    Args:
        results: List of result dictionaries.
        output_path: Path for the output CSV file.
    """
    if not results:
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=_CSV_COLUMNS, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(results)


def _print_summary(summary: dict[str, int], output_csv: Path) -> None:
    """Print batch processing summary to stdout."""
    print(f"\n{'=' * 50}")
    print("Batch Digest Complete")
    print(f"{'=' * 50}")
    print(f"Total:      {summary['total']}")
    print(f"Successful: {summary['successful']}")
    print(f"Failed:     {summary['failed']}")
    print(f"Output:     {output_csv}")


def digest_single(
    file_path: Path, pipeline: DocumentPipeline | None = None
) -> dict[str, object]:
    """Digest a single text file into a JSON-serializable dict.

    Args:
        file_path: Path to the text file.
        pipeline: Pipeline to use. Built from the config file if omitted.

    Returns:
        Dictionary with filename, cleaned_text, summary, and keyphrases.
    """
    pipeline = pipeline or DocumentPipeline(load_config())
    digest = pipeline.digest(_read_text(file_path))
    return {
        "filename": file_path.name,
        "cleaned_text": digest.cleaned_text,
        "summary": list(digest.summary),
        "keyphrases": list(digest.keyphrases),
    }


def _emit(payload: object, output: Path | None) -> None:
    output_str = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(output_str, encoding="utf-8")
        print(f"Output written to {output}")
    else:
        print(output_str)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Note Digest text processor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="YAML configuration file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    clean_parser = subparsers.add_parser("clean", help="Remove OCR noise lines")
    clean_parser.add_argument("file", type=Path, help="Text file to clean")
    clean_parser.add_argument("-o", "--output", type=Path, help="Output text file")

    summarize_parser = subparsers.add_parser(
        "summarize", help="Extract the most central sentences"
    )
    summarize_parser.add_argument("file", type=Path, help="Text file to summarize")
    summarize_parser.add_argument(
        "-n", "--sentences", type=int, default=None, help="Maximum sentences"
    )

    keyphrase_parser = subparsers.add_parser(
        "keyphrases", help="Extract ranked keyphrases"
    )
    keyphrase_parser.add_argument("file", type=Path, help="Text file to analyze")
    keyphrase_parser.add_argument(
        "-k", "--top-k", type=int, default=None, help="Maximum keyphrases"
    )

    retrieve_parser = subparsers.add_parser(
        "retrieve", help="Find paragraphs relevant to a question"
    )
    retrieve_parser.add_argument("file", type=Path, help="Context text file")
    retrieve_parser.add_argument(
        "-q", "--question", required=True, help="Question to focus on"
    )
    retrieve_parser.add_argument(
        "-k", "--top-k", type=int, default=None, help="Number of paragraphs"
    )

    digest_parser = subparsers.add_parser(
        "digest", help="Clean, summarize, and extract keyphrases"
    )
    digest_parser.add_argument("file", type=Path, help="Text file to digest")
    digest_parser.add_argument("-o", "--output", type=Path, help="Output JSON file")

    batch_parser = subparsers.add_parser("batch", help="Digest a folder of text files")
    batch_parser.add_argument("input_dir", type=Path, help="Input directory")
    batch_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("digest.csv"),
        help="Output CSV file (default: digest.csv)",
    )
    batch_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = load_config(args.config)
    setup_logging(config.log_level)
    pipeline = DocumentPipeline(config)

    if args.command == "batch":
        if not args.input_dir.is_dir():
            print(f"Error: {args.input_dir} is not a directory", file=sys.stderr)
            sys.exit(1)
        process_folder(args.input_dir, args.output, pipeline, args.verbose)
        return

    if not args.file.exists():
        print(f"Error: {args.file} does not exist", file=sys.stderr)
        sys.exit(1)

    if args.command == "clean":
        cleaned = pipeline.clean(_read_text(args.file))
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(cleaned, encoding="utf-8")
            print(f"Output written to {args.output}")
        else:
            print(cleaned)
    elif args.command == "summarize":
        summary = pipeline.extract_summary(_read_text(args.file), args.sentences)
        _emit({"summary": summary}, None)
    elif args.command == "keyphrases":
        phrases = pipeline.extract_keyphrases(_read_text(args.file), args.top_k)
        _emit({"keyphrases": phrases}, None)
    elif args.command == "retrieve":
        context = pipeline.truncate(_read_text(args.file))
        paragraphs = pipeline.retrieve_relevant(args.question, context, args.top_k)
        _emit({"question": args.question, "paragraphs": paragraphs}, None)
    elif args.command == "digest":
        _emit(digest_single(args.file, pipeline), args.output)


if __name__ == "__main__":
    main()
