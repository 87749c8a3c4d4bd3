"""
Sauron CLI — talk to the gateway from a terminal.

Usage:
    sauron health
    sauron login --api-key sk-... [--provider anthropic]
    sauron --token JWT query "Explain quicksort" [--stream | --algorithm]
"""

from __future__ import annotations

import argparse
import base64
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sauron.client import SauronClient
from sauron.core.config import reload_config
from sauron.core.errors import SauronError
from sauron.core.logging import setup_logging
from sauron.models import AIAlgorithmResponse, AIProvider, AIQueryRequest, LoginRequest
from sauron.version import VERSION

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sauron", description="Sauron AI gateway client")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--base-url", help="Gateway URL (default: SAURON_BASE_URL)")
    parser.add_argument("--token", help="JWT to use instead of logging in (default: SAURON_TOKEN)")
    parser.add_argument("--log-level", help="DEBUG / INFO / WARNING / ERROR")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("health", help="Check gateway health")

    login = sub.add_parser("login", help="Exchange a provider API key for a JWT")
    login.add_argument("--api-key", required=True)
    login.add_argument("--provider", default="openai", choices=AIProvider.values())

    query = sub.add_parser("query", help="Send a prompt")
    query.add_argument("prompt")
    query.add_argument("--provider", default="openai", choices=AIProvider.values())
    query.add_argument("--model", default="default")
    query.add_argument("--image", action="append", default=[], help="Image file to attach (repeatable)")
    mode = query.add_mutually_exclusive_group()
    mode.add_argument("--stream", action="store_true", help="Print the answer as it arrives")
    mode.add_argument("--algorithm", action="store_true", help="Ask for code plus complexity analysis")

    return parser


def build_client(args: argparse.Namespace) -> SauronClient:
    settings = reload_config()
    settings = replace(
        settings,
        base_url=args.base_url or settings.base_url,
        token=args.token or settings.token,
    )
    return SauronClient.from_config(settings)


def _encode_image(path: str) -> str:
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def _print_algorithm(answer: AIAlgorithmResponse) -> None:
    console.print(escape(answer.response))
    console.print()
    console.print(escape(answer.explanation))
    table = Table(title="Complexity")
    table.add_column("")
    table.add_column("Bound")
    table.add_column("Why")
    table.add_row("time", escape(answer.complexity.time.value), escape(answer.complexity.time.explanation))
    table.add_row("space", escape(answer.complexity.space.value), escape(answer.complexity.space.explanation))
    console.print(table)


def _run(client: SauronClient, args: argparse.Namespace) -> None:
    if args.command == "health":
        health = client.check_health()
        style = "green" if health.is_ok() else "red"
        console.print(f"[{style}]{escape(health.status)}[/{style}]")
        return

    if args.command == "login":
        token = client.login(LoginRequest(api_key=args.api_key, provider=AIProvider.parse(args.provider)))
        console.print(token.token, highlight=False)
        return

    request = AIQueryRequest(
        prompt=args.prompt,
        provider=AIProvider.parse(args.provider),
        model=args.model,
    )
    for path in args.image:
        request.add_image(_encode_image(path))

    if args.stream:
        def on_chunk(chunk: str, is_final: bool) -> bool:
            console.print(chunk, end="", markup=False, highlight=False)
            if is_final:
                console.print()
            return True

        client.query_stream(request, on_chunk)
    elif args.algorithm:
        _print_algorithm(client.query_algorithm(request))
    else:
        console.print(escape(client.query(request).response))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        with build_client(args) as client:
            _run(client, args)
    except SauronError as e:
        err_console.print(f"[bold red]{e.kind.value}:[/bold red] {escape(e.message)}")
        return 1
    except OSError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
