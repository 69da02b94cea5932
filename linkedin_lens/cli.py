import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from linkedin_lens import config
from linkedin_lens.analyzers.report import build_analytics
from linkedin_lens.fetchers.linkedin import RawResources, fetch_all
from linkedin_lens.models import AnalyticsReport

app = typer.Typer(help="LinkedIn profile analytics from Member Data API payloads.")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )


def _check_range(time_range: str) -> None:
    if time_range not in ("7d", "30d", "90d"):
        console.print(f"[bold red]Error:[/] --range must be 7d, 30d or 90d, got '{time_range}'")
        raise typer.Exit(1)


def _load_json(path: Optional[Path]) -> Any:
    if path is None:
        return None
    return json.loads(path.read_text())


def _print_report(report: AnalyticsReport) -> None:
    trend = Table(title=f"Posts & engagement ({report.time_range})")
    for column in ("Date", "Posts", "Likes", "Comments", "Shares", "Total"):
        trend.add_column(column, justify="right" if column != "Date" else "left")
    for day in report.posts_engagements_trend:
        if day.posts or day.total_engagement:
            trend.add_row(day.date, str(day.posts), str(day.likes), str(day.comments),
                          str(day.shares), str(day.total_engagement))
    console.print(trend)

    growth = report.connections_growth
    new_total = growth[-1].total_connections if growth else 0
    console.print(f"[bold]New connections in range:[/] {new_total}")

    types = ", ".join(f"{t.name} {t.value}" for t in report.post_types_breakdown) or "none"
    console.print(f"[bold]Post types:[/] {types}")
    tags = ", ".join(f"{h.hashtag} ({h.count})" for h in report.top_hashtags) or "none"
    console.print(f"[bold]Top hashtags:[/] {tags}")

    posts = Table(title="Top posts by engagement")
    for column in ("Post", "Likes", "Comments", "Shares", "Total"):
        posts.add_column(column)
    for p in report.engagement_per_post:
        posts.add_row(p.content, str(p.likes), str(p.comments), str(p.shares), str(p.total_engagement))
    console.print(posts)

    audience = report.audience_distribution
    for title, entries in (("Industries", audience.industries), ("Positions", audience.positions),
                           ("Locations", audience.locations)):
        if entries:
            console.print(f"[bold]{title}:[/] " + ", ".join(f"{e.name} {e.value}" for e in entries))

    console.print(f"[dim]Generated {report.last_updated}[/]")


def _emit(report: AnalyticsReport, output: Optional[Path]) -> None:
    if output:
        payload = report.model_dump(mode="json", by_alias=True)
        output.write_text(json.dumps(payload, indent=2, ensure_ascii=False))
        console.print(f"[bold green]✓[/] Report saved to [cyan]{output}[/]")
    else:
        _print_report(report)


@app.command()
def fetch(
    token: str = typer.Option(..., "--token", envvar="LINKEDIN_TOKEN", help="Bearer token forwarded upstream"),
    time_range: str = typer.Option("30d", "--range", "-r", help="7d, 30d or 90d"),
    member_id: Optional[str] = typer.Option(None, "--member-id", help="Current member id for message direction"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save report JSON to file instead of printing"),
):
    """Fetch live data through the proxy and build the report."""
    _check_range(time_range)
    authorization = token if token.lower().startswith("bearer ") else f"Bearer {token}"

    with console.status("[bold green]Fetching LinkedIn data..."):
        resources = asyncio.run(fetch_all(authorization))

    report = build_analytics(resources, time_range, member_id=member_id)
    _emit(report, output)


@app.command()
def report(
    changelog: Optional[Path] = typer.Option(None, "--changelog", help="Saved linkedin-changelog response"),
    connections: Optional[Path] = typer.Option(None, "--connections", help="Saved CONNECTIONS snapshot"),
    posts: Optional[Path] = typer.Option(None, "--posts", help="Saved MEMBER_SHARE_INFO snapshot"),
    time_range: str = typer.Option("30d", "--range", "-r", help="7d, 30d or 90d"),
    member_id: Optional[str] = typer.Option(None, "--member-id", help="Current member id for message direction"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save report JSON to file instead of printing"),
):
    """Build the report offline from saved upstream responses."""
    _check_range(time_range)
    resources = RawResources(
        changelog=_load_json(changelog),
        connections=_load_json(connections),
        posts=_load_json(posts),
    )
    _emit(build_analytics(resources, time_range, member_id=member_id), output)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
):
    """Run the analytics API server."""
    import uvicorn

    uvicorn.run("linkedin_lens.api.server:app", host=host, port=port)
