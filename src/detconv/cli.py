"""Command-line interface for detconv."""

import argparse
import logging
import sys
from pathlib import Path

import detconv
from detconv.errors import ConversionError
from detconv.files import NEWLINE_MAP, analyse, convert_file

_DEFAULT_MAX_BYTES = 200_000
_REPORTED_ERRORS = (OSError, ValueError, LookupError, ConversionError)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(name)s: %(levelname)s: %(message)s")


def _report(name: str, encoding: str, confidence: float, minimal: bool) -> None:
    if minimal:
        print(encoding)
    else:
        print(f"{name}: {encoding} with confidence {confidence:.2f}")


def _handle_stdin(args) -> None:
    data = sys.stdin.buffer.read()
    if args.detect:
        result = detconv.detect(data[:_DEFAULT_MAX_BYTES])
        if result.encoding is None:
            raise detconv.DetectionFailed("Could not detect the encoding of stdin")
        _report("stdin", result.encoding, result.confidence, args.minimal)
        return

    if args.newlines is None:
        converted = detconv.convert(data, args.to, args.errors)
    else:
        text = detconv.convert(data, detconv.NATIVE_TEXT, args.errors)
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if args.newlines != "LF":
            text = text.replace("\n", NEWLINE_MAP[args.newlines])
        converted = detconv.convert(text, args.to, args.errors)
    sys.stdout.buffer.write(converted)
    sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> None:
    """
    Run the ``detconv`` command-line tool.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the character encoding of files and convert them to another encoding."
    )
    parser.add_argument("files", nargs="*", help="Files to convert (stdin to stdout when omitted)")
    parser.add_argument(
        "-t", "--to", default=detconv.DEFAULT_ENCODING, help="Target encoding (default: %(default)s)"
    )
    parser.add_argument("-o", "--output", default=None, help="Output file (single input only)")
    parser.add_argument("--newlines", choices=sorted(NEWLINE_MAP), default=None, help="Rewrite newlines")
    parser.add_argument("--errors", default=None, help="Codec error policy, e.g. strict or replace")
    parser.add_argument(
        "--detect", action="store_true", help="Only report the detected encoding, convert nothing"
    )
    parser.add_argument("--minimal", action="store_true", help="With --detect, output only the encoding name")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"detconv {detconv.__version__}")

    args = parser.parse_args(argv)
    if args.output and len(args.files) != 1:
        parser.error("--output requires exactly one input file")
    _configure_logging(args.verbose, args.quiet)

    if not args.files:
        try:
            _handle_stdin(args)
        except _REPORTED_ERRORS as e:
            print(f"detconv: stdin: {e}", file=sys.stderr)
            sys.exit(1)
        return

    failed = False
    for filepath in args.files:
        try:
            if args.detect:
                result = analyse(filepath, max_sample_size=_DEFAULT_MAX_BYTES)
                _report(filepath, result.encoding, result.confidence, args.minimal)
            else:
                written = convert_file(
                    filepath,
                    output=args.output,
                    encoding=args.to,
                    newlines=args.newlines,
                    errors=args.errors,
                )
                logging.getLogger(__name__).info("Converted %s -> %s", filepath, Path(written))
        except _REPORTED_ERRORS as e:
            print(f"detconv: {filepath}: {e}", file=sys.stderr)
            failed = True

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
