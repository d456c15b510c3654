"""Command line front end for the jobwatch backend."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from jobwatch.client.session import PageSession
from jobwatch.config import settings
from jobwatch.utils.cookies import SESSION_COOKIE, find_cookie, format_cookie_lines, write_cookie_file

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _print_status(session: PageSession) -> None:
    stream = sys.stderr if session.status.is_error else sys.stdout
    print(session.status.message, file=stream)


def _print_form(session: PageSession) -> None:
    form = session.form
    print(f"keywords:       {form.keywords}")
    print(f"location:       {form.location}")
    print(f"remote:         {'yes' if form.remote else 'no'}")
    print(f"salary_min:     {form.salary_min}")
    print(f"interval_hours: {form.interval_hours}")


async def config_show(args) -> bool:
    async with PageSession(args.base_url) as session:
        if not await session.load_config():
            _print_status(session)
            return False
        _print_form(session)
        return True


async def config_set(args) -> bool:
    async with PageSession(args.base_url) as session:
        if not await session.load_config():
            _print_status(session)
            return False
        form = session.form
        if args.keywords is not None:
            form.keywords = args.keywords
        if args.location is not None:
            form.location = args.location
        if args.remote is not None:
            form.remote = args.remote
        if args.salary_min is not None:
            form.salary_min = args.salary_min
        if args.interval_hours is not None:
            form.interval_hours = args.interval_hours
        ok = await session.save_config()
        _print_status(session)
        return ok


async def run_now(args) -> bool:
    async with PageSession(args.base_url) as session:
        print("Running scrape...", flush=True)
        ok = await session.run_now()
        _print_status(session)
        return ok


async def show_jobs(args) -> bool:
    async with PageSession(args.base_url) as session:
        ok = await session.load_jobs()
        print(session.jobs.to_text())
        return ok


def cookies(args) -> bool:
    raw = Path(args.input).read_text(encoding="utf-8") if args.input else sys.stdin.read()
    if args.name:
        line = find_cookie(raw, args.name)
        if line is None:
            print(f"{args.name} cookie not found. Make sure you're logged in!", file=sys.stderr)
            return False
        lines = [line]
    else:
        lines = format_cookie_lines(raw)
    if not lines:
        print("No cookies found in input.", file=sys.stderr)
        return False
    if args.output:
        path = write_cookie_file(lines, Path(args.output))
        print(f"Wrote {len(lines)} cookies to {path}")
    else:
        print("\n".join(lines))
    return True


def serve(args) -> bool:
    import uvicorn

    uvicorn.run("jobwatch.main:app", host=args.host, port=args.port)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobwatch",
        description="Edit search settings, trigger scrapes and list today's jobs",
    )
    parser.add_argument(
        "--base-url",
        default=settings.base_url,
        help=f"Backend URL (default: {settings.base_url})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable detailed logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    config_parser = commands.add_parser("config", help="Show or change the search configuration")
    config_commands = config_parser.add_subparsers(dest="config_command", required=True)
    config_commands.add_parser("show", help="Print the current configuration").set_defaults(handler=config_show)

    set_parser = config_commands.add_parser("set", help="Change fields and save the configuration")
    set_parser.add_argument("--keywords")
    set_parser.add_argument("--location")
    set_parser.add_argument("--remote", dest="remote", action="store_const", const=True, default=None)
    set_parser.add_argument("--no-remote", dest="remote", action="store_const", const=False)
    set_parser.add_argument("--salary-min", help="Minimum salary; non-numeric values become 0")
    set_parser.add_argument("--interval-hours", help="Hours between scheduled runs; invalid values become 4")
    set_parser.set_defaults(handler=config_set)

    commands.add_parser("run", help="Run a scrape now and wait for the result").set_defaults(handler=run_now)
    commands.add_parser("jobs", help="List today's jobs from the latest run").set_defaults(handler=show_jobs)

    cookies_parser = commands.add_parser("cookies", help="Format browser cookies for the credentials file")
    cookies_parser.add_argument("--input", help="File holding the document.cookie string (default: stdin)")
    cookies_parser.add_argument("--output", help=f"Write lines to this file, e.g. {settings.cookies_path}")
    cookies_parser.add_argument(
        "--name",
        nargs="?",
        const=SESSION_COOKIE,
        help=f"Only keep this cookie (default when given without a value: {SESSION_COOKIE})"
    )
    cookies_parser.set_defaults(handler=cookies)

    serve_parser = commands.add_parser("serve", help="Start the backend API server")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.set_defaults(handler=serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    result = args.handler(args)
    if asyncio.iscoroutine(result):
        result = asyncio.run(result)
    return 0 if result else 1


if __name__ == "__main__":
    sys.exit(main())
