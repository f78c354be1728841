"""CLI for api-mocker."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass

from api_mocker.domain.constants import DEFAULT_PREFIX, describe_method
from api_mocker.domain.models import Documentation, GenerateOptions
from api_mocker.generation.route_generator import generate_documentation
from api_mocker.output.json_dumper import JSONDumper
from api_mocker.sample_reader import SampleReadError, read_json_file
from api_mocker.simulation.simulator import MockSimulator
from api_mocker.storage.document_store import JsonFileDocumentStore, default_store_path


@dataclass
class GenerateResult:
    """Result summary of a generate run."""

    routes_generated: int
    store_path: str
    written_files: list[str]


def generate_from_file(sample_path: str, options: GenerateOptions) -> GenerateResult:
    """Main orchestration: JSON sample -> documentation -> store (+ optional dump)."""
    sample = read_json_file(sample_path)
    documentation = generate_documentation(sample, options.prefix)

    store = JsonFileDocumentStore(options.store_path or default_store_path())
    store.save(documentation)

    written: list[str] = []
    if options.output_dir:
        dumper = JSONDumper(options.output_dir, pretty=options.pretty)
        written = dumper.write_all(documentation)

    return GenerateResult(
        routes_generated=len(documentation.routes),
        store_path=str(store.path),
        written_files=written,
    )


def _load_or_exit(store: JsonFileDocumentStore) -> Documentation:
    documentation = store.load()
    if documentation is None:
        print(f"Error: no documentation in {store.path}; run 'generate' first", file=sys.stderr)
        sys.exit(1)
    return documentation


def _print_routes(documentation: Documentation) -> None:
    for route in documentation.routes:
        print(f"{route.method:<7} {route.url}")
        print(f"        {route.description} ({describe_method(route.method)})")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog='api-mocker', description='JSON sample to simulated REST API')
    parser.add_argument('--store', help='Documentation store file (default: $API_MOCKER_STORE or .api_mocker/documentation.json)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # generate command
    gen_parser = subparsers.add_parser('generate', help='Infer routes from a JSON sample')
    gen_parser.add_argument('sample', help='Path to a JSON sample file')
    gen_parser.add_argument('--prefix', default=DEFAULT_PREFIX, help=f'API prefix (default: {DEFAULT_PREFIX})')
    gen_parser.add_argument('--output', help='Also dump documentation JSON files to this directory')
    gen_parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')

    # routes command
    subparsers.add_parser('routes', help='List generated routes')

    # call command
    call_parser = subparsers.add_parser('call', help='Simulate a request')
    call_parser.add_argument('method', help='GET, POST, PUT or DELETE')
    call_parser.add_argument('path', help='Concrete path, e.g. /api/v1/users/1')
    call_parser.add_argument('--body', help='JSON request body')

    # show / clear commands
    subparsers.add_parser('show', help='Print the live mock document')
    subparsers.add_parser('clear', help='Remove stored documentation')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    store = JsonFileDocumentStore(args.store or default_store_path())

    if args.command == 'generate':
        options = GenerateOptions(
            prefix=args.prefix,
            pretty=not args.no_pretty,
            output_dir=args.output,
            store_path=str(store.path),
        )
        try:
            result = generate_from_file(args.sample, options)
        except SampleReadError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Done! Generated {result.routes_generated} routes")
        print(f"Store: {result.store_path}")
        for path in result.written_files:
            print(f"Output: {path}")

    elif args.command == 'routes':
        _print_routes(_load_or_exit(store))

    elif args.command == 'call':
        body = None
        if args.body is not None:
            try:
                body = json.loads(args.body)
            except json.JSONDecodeError as e:
                print(f"Error: invalid JSON body: {e}", file=sys.stderr)
                sys.exit(1)
        response = MockSimulator(store).request_path(args.method, args.path, body)
        print(response.status)
        print(json.dumps(response.data, indent=2, ensure_ascii=False))
        if not response.ok:
            sys.exit(1)

    elif args.command == 'show':
        documentation = _load_or_exit(store)
        print(json.dumps(documentation.json_data, indent=2, ensure_ascii=False))

    elif args.command == 'clear':
        store.clear()
        print(f"Cleared {store.path}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
