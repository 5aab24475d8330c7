"""Quiz Interface - Interactive skill assessment in the terminal."""

import string

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from skillpath.modules.assessment import engine
from skillpath.modules.assessment.engine import AssessmentSession
from skillpath.modules.assessment.interface import AssessmentResult, OptionFeedback
from skillpath.shared.models import category_label

console = Console()

LETTERS = string.ascii_uppercase

_FEEDBACK_STYLES = {
    OptionFeedback.CORRECT: "green",
    OptionFeedback.INCORRECT: "red",
    OptionFeedback.NEUTRAL: "dim",
}


class QuizInterface:
    """Renders an assessment session and reads answers from the prompt.

    The session itself is owned by the engine; this class only shows it.
    """

    def display_header(self, total_questions: int) -> None:
        console.print(Panel.fit(
            "[bold blue]Skill Assessment[/bold blue]\n"
            f"Questions: {total_questions}",
            border_style="blue",
        ))
        console.print("[dim]Type 'quit' to exit early.[/dim]\n")

    def display_question(self, session: AssessmentSession) -> None:
        """Display the current question and its options."""
        question = session.current_question
        if question is None:
            return

        header = (
            f"Question {session.position + 1}/{len(session.questions)}"
            f" | [dim]{category_label(question.category)}[/dim]"
            f" | {engine.progress_percent(session):.0f}%"
        )
        console.print()
        console.print(Panel(
            f"[bold]{question.question}[/bold]",
            title=f"[bold blue]{header}[/bold blue]",
            border_style="blue",
            padding=(1, 2),
        ))
        console.print()
        for index, option in enumerate(question.options):
            console.print(f"  [cyan][{LETTERS[index]}][/cyan] {option}")

    def get_answer(self, option_count: int) -> int | None:
        """Read an option letter. Returns None when the user quits."""
        valid = [letter.lower() for letter in LETTERS[:option_count]]
        while True:
            answer = Prompt.ask("\n[bold]Your answer[/bold]").strip().lower()
            if answer == "quit" or (answer == "q" and "q" not in valid):
                return None
            if answer in valid:
                return valid.index(answer)
            console.print(f"[red]Please enter {', '.join(valid)}[/red]")

    def display_feedback(self, session: AssessmentSession) -> None:
        """Show each option classified as correct, incorrect or neutral."""
        feedback = engine.option_feedback(session)
        question = session.current_question
        if feedback is None or question is None:
            return

        answer = session.answers[session.position]
        if answer.is_correct:
            console.print("\n[green]Correct![/green]")
        else:
            console.print("\n[red]Incorrect[/red]")

        for index, (option, state) in enumerate(zip(question.options, feedback)):
            style = _FEEDBACK_STYLES[state]
            console.print(f"  [{style}][{LETTERS[index]}] {option}[/{style}]")

    def display_results(self, result: AssessmentResult) -> None:
        """Display overall score, level and the per-category breakdown."""
        if result.overall_score >= 80:
            color = "green"
        elif result.overall_score >= 50:
            color = "yellow"
        else:
            color = "red"

        console.print("\n")
        console.print(Panel.fit(
            f"[bold {color}]Assessment Complete![/bold {color}]",
            border_style=color,
        ))

        table = Table(show_header=False, box=None)
        table.add_column("Stat", style="bold")
        table.add_column("Value")
        table.add_row(
            "Score",
            f"[{color}]{result.correct_count}/{result.total_questions} "
            f"({result.overall_score}%)[/{color}]",
        )
        table.add_row("Level", result.level.value.title())
        if result.strongest_category is not None:
            table.add_row("Strongest", category_label(result.strongest_category))
        console.print(table)

        if result.category_percentages:
            console.print("\n[bold]By Category:[/bold]")
            for category, percent in result.category_percentages.items():
                tally = result.category_scores[category]
                console.print(
                    f"  {category_label(category)}: {percent}% "
                    f"[dim]({tally.correct}/{tally.total})[/dim]"
                )


def run_quiz(session: AssessmentSession) -> AssessmentSession | None:
    """Run an intro session through to results.

    Args:
        session: A startable intro session

    Returns:
        The session in the results state, or None if the user quit
    """
    interface = QuizInterface()
    interface.display_header(len(session.questions))

    session = engine.start(session)
    while not session.is_complete:
        interface.display_question(session)
        choice = interface.get_answer(len(session.current_question.options))
        if choice is None:
            console.print("[yellow]Assessment ended.[/yellow]")
            return None

        session = engine.select(session, choice)
        if not engine.can_submit(session):
            continue
        session = engine.submit(session)
        interface.display_feedback(session)
        session = engine.advance(session)

    interface.display_results(session.result)
    return session
