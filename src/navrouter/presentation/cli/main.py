"""
CLI entry point.

`navrouter route URL` runs one routing session against the configured API
and prints every signal the coordinator emits.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Callable, List, Optional

from navrouter import __version__
from navrouter.application.coordinator import NavigationCoordinator
from navrouter.application.ports.update_source_port import UpdateSourcePort
from navrouter.bootstrap import build_coordinator
from navrouter.config import configure_logging, load_config
from navrouter.domain.models import Project


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="navrouter",
        description="navrouter - route intercepted project updates navigations",
    )
    parser.add_argument("--version", "-v", action="store_true", help="show version")

    subparsers = parser.add_subparsers(dest="command", help="commands")

    route_parser = subparsers.add_parser("route", help="route one intercepted URL")
    route_parser.add_argument("url", help="intercepted navigation URL")
    route_parser.add_argument("--project-id", required=True, help="project id")
    route_parser.add_argument("--updates-url", required=True, help="project updates page URL")
    route_parser.add_argument("--config", "-c", help="YAML config path")

    return parser


async def route_once(
    coordinator: NavigationCoordinator,
    project: Project,
    url: str,
    echo: Callable[[str], None] = print,
) -> bool:
    """Feed one URL through a fresh session; returns whether it was taken over."""
    async with coordinator:
        web_view = coordinator.current_web_view_url.listen()
        comments = coordinator.start_comments_view.listen()
        updates = coordinator.start_update_view.listen()

        coordinator.startup(project)
        handled = coordinator.on_navigation_intercepted(url)
        await coordinator.join()

        for page_url in web_view.drain():
            echo(f"web_view_url\t{page_url}")
        for update in comments.drain():
            echo(f"comments\t{update.id}\t{update.title}")
        for pair in updates.drain():
            echo(f"update\t{pair.project.id}\t{pair.update.id}\t{pair.update.title}")
        if not handled:
            echo(f"pass_through\t{url}")
    return handled


def run_cli(args: Optional[List[str]] = None, *, source: Optional[UpdateSourcePort] = None) -> int:
    """
    Run the CLI.

    Args:
        args: command line arguments (sys.argv by default)
        source: update source override, used by tests

    Returns:
        exit code
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"navrouter v{__version__}")
        return 0

    if parsed.command != "route":
        parser.print_help()
        return 1

    config = load_config(parsed.config)
    configure_logging(config.logging)
    project = Project(id=parsed.project_id, updates_url=parsed.updates_url)
    coordinator = build_coordinator(config, source=source)
    asyncio.run(route_once(coordinator, project, parsed.url))
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
