#!/usr/bin/env python3
"""
Command-line interface for the storefront.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run demo scenarios
    status      Show store availability and today's discount
    test        Run the test suite
    serve       Start the API server

Examples:
    uv run python cli.py demo checkout
    uv run python cli.py demo all
    uv run python cli.py status
    uv run python cli.py serve --reload
"""

import argparse
import subprocess
import sys


def run_demo(scenario: str) -> None:
    """Run a demo scenario."""
    if scenario == "checkout":
        from storefront.demo import run_checkout_demo
        run_checkout_demo()
    elif scenario == "accounts":
        from storefront.demo import run_accounts_demo
        run_accounts_demo()
    elif scenario == "store":
        from storefront.demo import run_store_demo
        run_store_demo()
    elif scenario == "all":
        from storefront.demo import (
            run_checkout_demo,
            run_accounts_demo,
            run_store_demo,
        )
        run_checkout_demo()
        run_accounts_demo()
        run_store_demo()
    else:
        print(f"Unknown scenario: {scenario}")
        sys.exit(1)


def show_status() -> None:
    """Print whether the store is online and the current discount."""
    from storefront.availability import StoreHours

    hours = StoreHours()
    policy = hours.policy
    state = "ONLINE" if hours.is_online() else "OFFLINE"
    print(f"Store is {state} (hours {policy.open_hour}:00-{policy.close_hour}:00)")
    print(f"Seasonal discount today: {hours.get_discount():.0%}")


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = ["uv", "run", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Storefront CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo checkout
  %(prog)s demo all
  %(prog)s status
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demo scenarios")
    demo_parser.add_argument(
        "scenario",
        choices=["checkout", "accounts", "store", "all"],
        help="Which scenario to run",
    )

    # Status command
    subparsers.add_parser("status", help="Show store availability and discount")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()

    if args.command == "demo":
        run_demo(args.scenario)
    elif args.command == "status":
        show_status()
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
