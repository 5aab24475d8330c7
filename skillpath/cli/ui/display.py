"""Display Utilities - Rich output for the catalog, dashboard and recommendations."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from skillpath.modules.analytics.service import (
    AnalyticsView,
    CourseInProgress,
    category_chart_rows,
    format_hours,
    format_minutes,
    unique_skills,
)
from skillpath.modules.catalog.schemas import Course
from skillpath.modules.recommendation.interface import RecommendationResponse
from skillpath.shared.models import category_label

console = Console()


def display_progress_bar(percent: float, width: int = 20) -> str:
    """Render a percentage as a text bar."""
    filled = int(width * min(max(percent, 0), 100) / 100)
    return f"[green]{'█' * filled}[/green][dim]{'░' * (width - filled)}[/dim]"


def display_courses(courses: list[Course]) -> None:
    """Display courses in a table."""
    if not courses:
        console.print("[dim]No courses match these filters.[/dim]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", min_width=24)
    table.add_column("Category")
    table.add_column("Level")
    table.add_column("Provider")
    table.add_column("Rating", justify="right")

    for course in courses:
        table.add_row(
            course.id,
            course.title,
            category_label(course.category),
            course.difficulty.value.title(),
            course.provider.value.title(),
            f"{course.rating:.1f}",
        )

    console.print(table)


def display_dashboard(view: AnalyticsView, in_progress: list[CourseInProgress]) -> None:
    """Display the learner dashboard."""
    if view.failed:
        console.print("[red]Could not load analytics. Please try again.[/red]")
        return

    analytics = view.analytics
    if view.is_zero_state:
        console.print(
            "[dim]No learning activity yet. Take the assessment or start a course.[/dim]"
        )

    stats = Table(show_header=False, box=None)
    stats.add_column("Stat", style="bold")
    stats.add_column("Value")
    stats.add_row("Courses started", str(analytics.total_courses_started))
    stats.add_row("Courses completed", str(analytics.total_courses_completed))
    stats.add_row("Time spent", format_hours(analytics.total_time_spent_minutes))
    stats.add_row("Average progress", f"{analytics.average_progress:.0f}%")
    stats.add_row("Streak", f"{analytics.streak_days} days")
    console.print(Panel(stats, title="[bold cyan]Dashboard[/bold cyan]", border_style="cyan"))

    console.print("\n[bold]This Week:[/bold]")
    for day in analytics.weekly_activity:
        console.print(f"  {day.day}  {format_minutes(day.minutes)}")

    rows = category_chart_rows(analytics)
    if rows:
        console.print("\n[bold]By Category:[/bold]")
        for row in rows:
            console.print(f"  [{row.color}]{row.label}[/{row.color}]: {row.value:g}%")

    skills = unique_skills(analytics.skills_acquired)
    if skills:
        console.print(f"\n[bold]Skills:[/bold] {', '.join(skills)}")

    if in_progress:
        console.print("\n[bold]Continue Learning:[/bold]")
        for item in in_progress:
            console.print(
                f"  {item.course.title}  "
                f"{display_progress_bar(item.progress.progress_percent)} "
                f"{item.progress.progress_percent:.0f}%"
            )


def display_recommendation(
    recommendation: RecommendationResponse,
    courses: list[Course],
    unknown_count: int = 0,
) -> None:
    """Display a recommended learning path with the courses that resolved."""
    body = (
        f"[bold]{recommendation.title}[/bold]\n"
        f"{recommendation.description}\n\n"
        f"[dim]Estimated duration:[/dim] {recommendation.estimated_duration}\n"
        f"[dim]Skills:[/dim] {', '.join(recommendation.skills)}\n\n"
        f"[italic]{recommendation.reasoning}[/italic]"
    )
    console.print(Panel(
        body,
        title="[bold green]Recommended Path[/bold green]",
        border_style="green",
    ))

    for course in courses:
        console.print(f"  [cyan]>>[/cyan] {course.title} [dim]({course.duration})[/dim]")
    if unknown_count:
        console.print(f"  [dim]{unknown_count} more course(s) not in the catalog[/dim]")
