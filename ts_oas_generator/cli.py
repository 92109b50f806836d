#!/usr/bin/env python3
"""Command-line interface for the TypeScript OAS Generator."""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from ts_oas_generator.constants import (
    EXIT_FETCH_ERROR,
    EXIT_FILE_NOT_FOUND,
    EXIT_GENERATION_ERROR,
    EXIT_INVALID_SPEC,
    EXIT_SUCCESS,
)
from ts_oas_generator.errors import DeserializationError, SpecFetchError
from ts_oas_generator.generator.template_engine import TypeScriptCodeGenerator
from ts_oas_generator.parser.oas_parser import Document, OASParser
from ts_oas_generator.utils.fetch import fetch_spec
from ts_oas_generator.utils.file_utils import read_spec_file, read_stdin, write_output


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate TypeScript type declarations from a Swagger 2.0 or OpenAPI 3.0 specification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --file petstore.yaml
  %(prog)s --url https://example.com/openapi.json --auth-user me --auth-password secret
  cat spec.json | %(prog)s --stdin --skip-empty-types --write types.ts
  %(prog)s --file spec.yaml --skip-type-name Date --skip-type-name Error
        """,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--file",
        type=Path,
        help="The Swagger/OpenAPI file to parse (JSON or YAML)",
        dest="spec_file",
    )
    source.add_argument(
        "--url",
        help="The URL to the Swagger/OpenAPI file. Must be a URL to a JSON/YAML resource",
    )
    source.add_argument(
        "--stdin",
        action="store_true",
        help="Read the specification from standard input",
    )
    parser.add_argument(
        "--auth-user",
        help="Username for HTTP basic authentication when using --url",
        dest="auth_user",
    )
    parser.add_argument(
        "--auth-password",
        help="Password for HTTP basic authentication when using --url",
        dest="auth_password",
    )
    parser.add_argument(
        "--write",
        type=Path,
        help="The destination file to write to (default: stdout)",
        dest="output_file",
    )
    parser.add_argument(
        "--skip-empty-types",
        action="store_true",
        help="Skip empty types; some linters reject empty object types",
        dest="skip_empty_types",
    )
    parser.add_argument(
        "--skip-type-name",
        action="append",
        default=[],
        help="Skip types with the given name. Useful when the specification shadows implicitly "
        "available types. May be given multiple times",
        dest="skip_type_names",
        metavar="NAME",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(args)


def configure_logging(*, verbose: bool) -> None:
    """Send log records to stderr so stdout only carries generated code."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def load_document(parsed_args: argparse.Namespace) -> Document:
    """Read the specification from the selected source and parse it."""
    if parsed_args.spec_file is not None:
        raw = read_spec_file(parsed_args.spec_file)
    elif parsed_args.url is not None:
        raw = fetch_spec(
            parsed_args.url,
            auth_user=parsed_args.auth_user,
            auth_password=parsed_args.auth_password,
        )
    else:
        raw = read_stdin()
    return OASParser().parse_bytes(raw)


def print_verbose_info(*, document: Document, output: str) -> None:
    """Print verbose information about the generated output."""
    declaration_count = sum(1 for line in output.splitlines() if line.startswith("export type "))
    print(f"Detected {type(document).__name__}", file=sys.stderr)
    print(f"Generated {declaration_count} type declarations", file=sys.stderr)


def generate_typescript_from_args(parsed_args: argparse.Namespace) -> str:
    """Generate TypeScript declarations for the parsed command line."""
    document = load_document(parsed_args)
    generator = TypeScriptCodeGenerator()
    output = generator.generate_types(
        document,
        skip_empty_types=parsed_args.skip_empty_types,
        excluded_type_names=parsed_args.skip_type_names,
    )
    if parsed_args.verbose:
        print_verbose_info(document=document, output=output)
    return output


def main(args: list[str] | None = None) -> int:
    """Generate TypeScript types from a Swagger/OpenAPI specification."""
    parsed_args = parse_command_line_args(args)
    configure_logging(verbose=parsed_args.verbose)

    try:
        output = generate_typescript_from_args(parsed_args)

        if parsed_args.output_file is not None:
            write_output(parsed_args.output_file, output)
            if parsed_args.verbose:
                print(f"TypeScript types written to {parsed_args.output_file}", file=sys.stderr)
        else:
            print(output, end="")

        return EXIT_SUCCESS

    except FileNotFoundError:
        print(f"Error: Specification file not found: {parsed_args.spec_file}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except DeserializationError as e:
        print(f"Error: Invalid specification: {e}", file=sys.stderr)
        if parsed_args.verbose:
            for detail in e.details:
                print(f"  {detail}", file=sys.stderr)
        return EXIT_INVALID_SPEC
    except SpecFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FETCH_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_GENERATION_ERROR
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
