from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .api.models import ContactPayload, TodoPayload, describe_due_date
from .bootstrap import configure_logging
from .errors import ConfigurationError, OrchestrationError
from .orchestrator import TodoAgent
from .services import ServiceContext
from .services.http import run_local_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Agentic Todos command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the HTTP API server.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    ask_parser = subparsers.add_parser("ask", help="Create a todo from a free-text request and print the reply.")
    ask_parser.add_argument("prompt", nargs="+")
    ask_parser.add_argument("--show-todos", action="store_true", help="Print the todos created by this request.")

    subparsers.add_parser("contacts", help="List the contact directory.")

    return parser


def _ask(prompt: str, show_todos: bool) -> int:
    agent = TodoAgent()
    try:
        reply = agent.create_todo(prompt)
    except OrchestrationError as exc:
        retry = " (retryable)" if exc.retryable else ""
        print(f"Error [{exc.code}]{retry}: {exc.message}", file=sys.stderr)
        return 1
    print(reply)
    if show_todos:
        for todo in agent.list_todos():
            payload = TodoPayload.from_domain(todo)
            print(f"- {payload.title} | {describe_due_date(todo)} | contact={payload.contact_id or '-'}")
    return 0


def _contacts() -> int:
    context = ServiceContext()
    for contact in context.contact_repository.list():
        payload = ContactPayload.from_domain(contact)
        print(f"{payload.id}  {payload.display_name}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("Agentic Todos CLI starting: %s", args.command)

    try:
        if args.command == "api":
            run_local_server(host=args.host, port=args.port)
            return 0
        if args.command == "ask":
            return _ask(" ".join(args.prompt), args.show_todos)
        if args.command == "contacts":
            return _contacts()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 2


if __name__ == "__main__":
    sys.exit(main())
