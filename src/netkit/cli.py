"""Command-line interface for netkit."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console

from . import __version__
from .http import AiohttpTransport, HttpClient, HttpMethod
from .http.errors import ClientStatusError, HTTPError, ServerStatusError
from .logging_config import setup_logging
from .models.config import ClientConfig, TransportConfig


def _parse_pair(raw: str, separator: str, kind: str) -> tuple[str, str]:
    name, sep, value = raw.partition(separator)
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Invalid {kind} '{raw}', expected NAME{separator}VALUE")
    return name.strip(), value.strip()


def _query_param(raw: str) -> tuple[str, str]:
    return _parse_pair(raw, "=", "query parameter")


def _header(raw: str) -> tuple[str, str]:
    return _parse_pair(raw, ":", "header")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="netkit",
        description="Send one HTTP request and print the response body",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simple GET
  netkit GET https://api.example.com/items

  # Query parameters and headers
  netkit GET https://api.example.com/items -p page=2 -H "Accept: application/json"

  # POST a body (use @path to read it from a file)
  netkit POST https://api.example.com/items -d '{"name": "widget"}'
        """,
    )

    parser.add_argument(
        "method",
        type=str.upper,
        choices=[method.value for method in HttpMethod],
        help="HTTP method",
    )
    parser.add_argument(
        "url",
        help="Target URL",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    request_group = parser.add_argument_group("request")
    request_group.add_argument(
        "--param",
        "-p",
        type=_query_param,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    request_group.add_argument(
        "--header",
        "-H",
        type=_header,
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Request header (repeatable)",
    )
    request_group.add_argument(
        "--data",
        "-d",
        type=str,
        default=None,
        metavar="DATA",
        help="Request body for POST/PUT/PATCH, or @path to read a file",
    )

    network_group = parser.add_argument_group("network settings")
    network_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Total request timeout in seconds (default: 30)",
    )
    network_group.add_argument(
        "--proxy",
        type=str,
        metavar="URL",
        help="Proxy URL",
    )
    network_group.add_argument(
        "--user-agent",
        type=str,
        help="Custom User-Agent string",
    )

    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--reject-empty",
        action="store_true",
        help="Treat a successful response without body as an error",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log request dispatch to stderr",
    )

    return parser


def _read_body(data: Optional[str]) -> Optional[bytes]:
    if data is None:
        return None
    if data.startswith("@"):
        return Path(data[1:]).read_bytes()
    return data.encode("utf-8")


def _describe(error: HTTPError) -> str:
    if isinstance(error, (ClientStatusError, ServerStatusError)) and error.body:
        return f"{error.message}\n{error.body.decode('utf-8', errors='replace')}"
    return error.message


def run_request(args: argparse.Namespace) -> int:
    """Run one request with given arguments."""
    console = Console(stderr=True)

    if args.verbose:
        setup_logging("DEBUG")

    method = HttpMethod(args.method)
    if args.data is not None and not method.allows_body:
        console.print(f"[red]Error:[/red] {method.value} requests cannot carry a body")
        return 2

    transport_kwargs: dict = {}
    if args.timeout is not None:
        transport_kwargs["timeout"] = args.timeout
    if args.proxy:
        transport_kwargs["proxy"] = args.proxy
    if args.user_agent:
        transport_kwargs["user_agent"] = args.user_agent

    try:
        transport_config = TransportConfig(**transport_kwargs)
        client_config = ClientConfig(empty_body="reject" if args.reject_empty else "accept")
        body = _read_body(args.data)
    except (ValidationError, OSError) as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 2

    if method.allows_body and body is None:
        body = b""

    async def run() -> Optional[bytes]:
        async with AiohttpTransport(transport_config) as transport:
            client = HttpClient(transport, client_config)
            return await client.arequest(
                method,
                args.url,
                body,
                params=dict(args.param),
                headers=dict(args.header),
            )

    try:
        payload = asyncio.run(run())
    except HTTPError as e:
        console.print(f"[red]{type(e).__name__}:[/red] {_describe(e)}")
        return 1

    if payload:
        sys.stdout.buffer.write(payload)
        sys.stdout.flush()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_request(args)


if __name__ == "__main__":
    sys.exit(main())
