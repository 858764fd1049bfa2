"""Wizard command implementation - interactive question flow"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from legal_docgen.models.answer import AnswerValue
from legal_docgen.models.template import Question, QuestionType
from legal_docgen.services.engine import LegalDocumentEngine

console = Console()


def _prompt_label(question: Question) -> str:
    label = f"[bold]{question.text}[/bold]"
    if not question.required:
        label += " [dim](facultatif, Entrée pour passer)[/dim]"
    return label


def _show_question(question: Question):
    if question.help_text:
        console.print(f"[dim]{question.help_text}[/dim]")
    if question.type == QuestionType.SELECT:
        for i, option in enumerate(question.options, 1):
            console.print(f"  {i}. {option.label} [dim]({option.value})[/dim]")
    elif question.type == QuestionType.BOOLEAN:
        console.print("  [dim]oui / non[/dim]")
    elif question.placeholder:
        console.print(f"  [dim]Ex. : {question.placeholder}[/dim]")


def _resolve_option_number(question: Question, raw: str) -> str:
    """Let the user type the option number shown in the list"""
    if question.type == QuestionType.SELECT and raw.strip().isdigit():
        index = int(raw.strip()) - 1
        if 0 <= index < len(question.options):
            return question.options[index].value
    return raw


def ask_question(engine: LegalDocumentEngine, question: Question) -> AnswerValue:
    """Ask until a valid answer is given, return the canonical value"""
    _show_question(question)
    while True:
        raw = Prompt.ask(_prompt_label(question), default="", show_default=False)
        result = engine.validate_answer(question, _resolve_option_number(question, raw))
        if result.ok:
            return result.value
        console.print(f"[red]{result.message}[/red]")


def wizard_command(engine: LegalDocumentEngine, document_id: str, output: Optional[str] = None) -> bool:
    """
    Walk the user through a template and print the document.

    Returns False when the template is unknown or generation is refused.
    """
    template = engine.get_template(document_id)
    if not template:
        console.print(f"[red]Document '{document_id}' introuvable[/red]")
        return False

    console.print(Panel.fit(
        f"[bold blue]{template.name}[/bold blue]\n\n"
        f"{template.description}\n"
        f"[dim]Base légale : {template.legal_basis}[/dim]\n"
        f"[dim]Durée estimée : {template.estimated_time}[/dim]",
        title="Assistant",
        border_style="blue",
    ))

    answers: dict[str, AnswerValue] = {}
    while True:
        question = engine.next_question(document_id, answers)
        if question is None:
            break
        rate = engine.completion_rate(document_id, answers)
        console.print(f"\n[cyan][{rate}%][/cyan]")
        answers[question.id] = ask_question(engine, question)

    result = engine.generate(document_id, answers)
    if not result.ok:
        console.print("\n[red]Document incomplet :[/red]")
        for error in result.errors:
            console.print(f"  - {error}")
        return False

    console.print()
    console.print(Panel(Text(result.document), title=f"[bold]{template.name}[/bold]", border_style="green"))

    if template.legal_notices:
        console.print("\n[yellow]Mentions importantes :[/yellow]")
        for notice in template.legal_notices:
            console.print(f"  • {notice}")

    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.document, encoding="utf-8")
        console.print(f"\n[green][OK] Document enregistré : {path}[/green]")

    return True
