"""CLI Entry Point - Main command interface.

This module provides the main entry point for the SkillPath CLI: the
skill assessment with a learning path recommendation, the dashboard,
the course catalog and the API server.
"""

import asyncio
from contextlib import asynccontextmanager
import logging
from typing import AsyncIterator, Optional

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm

from skillpath.cli.ui.display import (
    display_courses,
    display_dashboard,
    display_recommendation,
)
from skillpath.cli.ui.quiz import run_quiz
from skillpath.modules.analytics.service import courses_in_progress
from skillpath.modules.assessment import engine
from skillpath.modules.assessment.engine import AssessmentSession
from skillpath.modules.assessment.service import AssessmentService
from skillpath.modules.recommendation.client import (
    RecommendationRequester,
    profile_from_result,
    resolve_courses,
)
from skillpath.modules.recommendation.interface import RecommendationResponse
from skillpath.shared.config import get_settings
from skillpath.shared.constants import RECOMMENDATION_ERROR_MESSAGE
from skillpath.shared.exceptions import RecommendationRequestError
from skillpath.shared.service_registry import get_service_registry

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Main application
app = typer.Typer(
    name="skillpath",
    help="SkillPath - Find your level and the learning path that fits it",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)
console = Console()


def run_async(coro):
    """Helper to run async functions in sync context."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@asynccontextmanager
async def api_client(api_url: Optional[str]) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client for the SkillPath API.

    With no URL the application is served in-process over ASGI, so the CLI
    works without a running server. Server errors come back as 500 error
    envelopes, as they would over the network.
    """
    settings = get_settings()
    if api_url:
        client = httpx.AsyncClient(base_url=api_url, timeout=settings.api_timeout_seconds)
    else:
        from skillpath.api.main import app as api_app

        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=api_app, raise_app_exceptions=False),
            base_url="http://skillpath",
            timeout=settings.api_timeout_seconds,
        )
    async with client:
        yield client


async def request_recommendation(
    session: AssessmentSession,
    api_url: Optional[str],
) -> RecommendationResponse | None:
    """Ask the API for a learning path matching a scored session."""
    settings = get_settings()
    async with api_client(api_url) as client:
        requester = RecommendationRequester(
            client,
            time_available=settings.recommendation_time_available,
        )
        return await requester.request_recommendation(
            profile_from_result(session.result),
            session.session_id,
        )


def _recommend_with_retry(
    session: AssessmentSession,
    api_url: Optional[str],
) -> RecommendationResponse | None:
    while True:
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                progress.add_task(description="Finding your learning path...", total=None)
                return run_async(request_recommendation(session, api_url))
        except RecommendationRequestError as e:
            logger.warning(f"Recommendation failed: {e.message}")
            console.print(f"[red]{RECOMMENDATION_ERROR_MESSAGE}[/red]")
            if not Confirm.ask("Try again?", default=True):
                return None


def _open_with_retry(assessment_service: AssessmentService) -> AssessmentSession | None:
    """Load the questions, letting the user retry a failed fetch."""
    while True:
        session = run_async(assessment_service.open_session())
        if not session.has_load_error:
            return session
        console.print(f"[red]{session.load_error}[/red]")
        if not Confirm.ask("Try again?", default=True):
            return None


# =============================================================================
# Commands
# =============================================================================

@app.command("assess")
def assess(
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        help="SkillPath API to ask for recommendations (default: in-process)",
    ),
    remote: bool = typer.Option(
        False,
        "--remote",
        help="Use the API_BASE_URL setting instead of the in-process API",
    ),
    save: bool = typer.Option(True, "--save/--no-save", help="Store the result"),
) -> None:
    """Take the skill assessment and get a learning path recommendation."""
    if remote and not api_url:
        api_url = get_settings().api_base_url

    registry = get_service_registry()
    assessment_service = registry.get_assessment_service()
    catalog_service = registry.get_catalog_service()

    session = _open_with_retry(assessment_service)
    if session is None:
        raise typer.Exit(1)
    if not engine.can_start(session):
        console.print("[red]No assessment questions are available.[/red]")
        raise typer.Exit(1)

    session = run_quiz(session)
    if session is None:
        raise typer.Exit(0)

    recommendation = _recommend_with_retry(session, api_url)
    if recommendation is not None:
        catalog = run_async(catalog_service.list_courses())
        known_ids, unknown_count = resolve_courses(recommendation, [c.id for c in catalog])
        by_id = {course.id: course for course in catalog}
        display_recommendation(
            recommendation,
            [by_id[course_id] for course_id in known_ids],
            unknown_count,
        )

    if save:
        record = run_async(assessment_service.save_session(
            session,
            recommended_path=recommendation.title if recommendation else None,
        ))
        console.print(f"\n[dim]Result saved ({record.id}).[/dim]")


@app.command("dashboard")
def dashboard() -> None:
    """Show learning statistics and courses in progress."""
    registry = get_service_registry()
    catalog_service = registry.get_catalog_service()

    view = run_async(registry.get_analytics_service().fetch_view())
    progress = run_async(catalog_service.list_progress())
    courses = run_async(catalog_service.list_courses())

    display_dashboard(view, courses_in_progress(progress, courses))


@app.command("courses")
def courses(
    category: str = typer.Option("all", "--category", "-c", help="Category filter"),
    difficulty: str = typer.Option("all", "--difficulty", "-d", help="Difficulty filter"),
    provider: str = typer.Option("all", "--provider", "-p", help="Provider filter"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Text search"),
) -> None:
    """Browse the course catalog."""
    catalog_service = get_service_registry().get_catalog_service()
    results = run_async(catalog_service.list_courses(
        category=category,
        difficulty=difficulty,
        provider=provider,
        search=search,
    ))
    display_courses(results)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the SkillPath API server."""
    import uvicorn

    from skillpath.api.middleware.logging import setup_logging

    settings = get_settings()
    setup_logging()
    uvicorn.run(
        "skillpath.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@app.command("version")
def version() -> None:
    """Show version information."""
    console.print(Panel.fit(
        "[bold]SkillPath CLI[/bold]\n"
        f"Version: {__version__}\n"
        "Skill assessment and learning path recommendations",
        border_style="cyan",
    ))


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """SkillPath - skill assessment and learning path recommendations.

    Use 'skillpath --help' to see all available commands.

    Quick start:
      skillpath assess      - Take the skill assessment
      skillpath dashboard   - View your learning statistics
      skillpath serve       - Run the API server
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif not logging.getLogger().handlers:
        # Failure details are logged; without --verbose they stay off the terminal
        logging.getLogger("skillpath").addHandler(logging.NullHandler())


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
