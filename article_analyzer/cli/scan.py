# article_analyzer/cli/scan.py
"""
CLI for scanning a text file for bias markers.

Usage:
    python -m article_analyzer.cli.scan article.txt
    cat article.txt | python -m article_analyzer.cli.scan
    python -m article_analyzer.cli.scan article.txt --no-factives --indent 2
    python -m article_analyzer.cli.scan article.txt --html > article.html
"""

import argparse
import json
import sys

from article_analyzer.lexicon import DetectorGroup
from article_analyzer.services.bias_scan import build_highlighted_html, get_bias_annotator


def read_input(path):
    """Read the text to scan from a file path, or stdin for None / '-'."""
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def selected_detectors(args) -> list[DetectorGroup]:
    detectors = []
    if not args.no_intensifiers:
        detectors.append(DetectorGroup.SUBJECTIVE_INTENSIFIERS)
    if not args.no_factives:
        detectors.append(DetectorGroup.FACTIVE_VERBS)
    return detectors


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Scan article text for subjective intensifiers and factive verbs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report as JSON
  python -m article_analyzer.cli.scan article.txt --indent 2

  # Intensifiers only, from stdin
  cat article.txt | python -m article_analyzer.cli.scan --no-factives

  # Highlighted HTML
  python -m article_analyzer.cli.scan article.txt --html
        """,
    )
    parser.add_argument("file", nargs="?", help="Text file to scan (default: stdin)")
    parser.add_argument("--no-intensifiers", action="store_true", help="Disable the intensifier detector")
    parser.add_argument("--no-factives", action="store_true", help="Disable the factive verb detector")
    parser.add_argument("--html", action="store_true", help="Print highlighted HTML instead of JSON")
    parser.add_argument("--indent", type=int, default=None, help="Indent JSON output")

    args = parser.parse_args(argv)

    try:
        text = read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read input: {e}", file=sys.stderr)
        return 1

    annotator = get_bias_annotator()
    report = annotator.annotate(text, selected_detectors(args))

    if args.html:
        print(build_highlighted_html(text, report))
    else:
        print(json.dumps(report.to_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
