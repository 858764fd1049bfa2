"""Main CLI application"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from legal_docgen.cli.wizard_cmd import wizard_command
from legal_docgen.services.engine import LegalDocumentEngine, create_engine
from legal_docgen.utils.config import get_settings
from legal_docgen.utils.text import sanitize_filename

app = typer.Typer(
    name="legal-docgen",
    help="Génération de documents juridiques français par questions successives",
    add_completion=False,
)

console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """Configure logging from settings"""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _engine() -> LegalDocumentEngine:
    return create_engine()


def default_output_path(document_id: str) -> Path:
    """<output_dir>/<document>_<YYYY-MM-DD>.txt"""
    stem = f"{sanitize_filename(document_id)}_{date.today().isoformat()}"
    return Path(get_settings().output_dir) / f"{stem}.txt"


@app.command("templates")
def templates():
    """List available document templates"""
    documents = _engine().list_documents()

    if not documents:
        console.print("[yellow]Aucun modèle disponible[/yellow]")
        return

    table = Table(title="Documents juridiques disponibles")
    table.add_column("ID", style="cyan")
    table.add_column("Nom", style="green")
    table.add_column("Catégorie")
    table.add_column("Durée", justify="right")

    for doc in documents:
        table.add_row(doc.id, doc.name, doc.category.value, doc.estimated_time)

    console.print(table)
    console.print("\nUtilisez [cyan]python -m legal_docgen template <id> --questions[/cyan] pour voir les questions")


@app.command("template")
def template_detail(
    document_id: str = typer.Argument(..., help="Template id (e.g. bail-habitation)"),
    questions: bool = typer.Option(False, "--questions", "-q", help="Show the questionnaire"),
):
    """Show template details"""
    engine = _engine()
    template = engine.get_template(document_id)

    if not template:
        console.print(f"[red]Document '{document_id}' introuvable[/red]")
        console.print("Modèles disponibles : " + ", ".join(d.id for d in engine.list_documents()))
        raise typer.Exit(code=1)

    console.print(Panel(
        f"[bold]{template.name}[/bold]\n\n{template.description}\n\n"
        f"[dim]Base légale : {template.legal_basis}[/dim]\n"
        f"[dim]Champs obligatoires : {len(template.required_fields)} / {len(template.questions)} questions[/dim]",
        title=f"Modèle : {document_id}",
        border_style="blue",
    ))

    if questions:
        table = Table(title="Questions")
        table.add_column("ID", style="cyan")
        table.add_column("Question", style="green")
        table.add_column("Type")
        table.add_column("Obligatoire")
        table.add_column("Dépend de")

        for question in template.questions:
            table.add_row(
                question.id,
                question.text,
                question.type.value,
                "Oui" if question.required else "Non",
                question.depends_on or "",
            )

        console.print(table)


@app.command("wizard")
def wizard(
    document_id: str = typer.Argument(..., help="Template id"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Save the document to this file"),
    save: bool = typer.Option(False, "--save", "-s", help="Save into the configured output directory"),
):
    """Answer the questions one by one and get the document"""
    if save and not output:
        output = str(default_output_path(document_id))

    try:
        done = wizard_command(_engine(), document_id, output)
    except KeyboardInterrupt:
        console.print("\n\n[blue]Abandon. Aucune donnée n'a été enregistrée.[/blue]")
        raise typer.Exit(code=130)

    if not done:
        raise typer.Exit(code=1)


def _load_answers(data: Optional[str], file: Optional[str]) -> dict:
    if data and file:
        raise typer.BadParameter("Use either --data or --file, not both")
    if not data and not file:
        raise typer.BadParameter("Provide answers with --data or --file")

    try:
        if file:
            answers = json.loads(Path(file).read_text(encoding="utf-8"))
        else:
            answers = json.loads(data)
    except OSError as e:
        raise typer.BadParameter(f"Cannot read {file}: {e}")
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise typer.BadParameter(f"Invalid JSON data: {e}")

    if not isinstance(answers, dict):
        raise typer.BadParameter("Answers must be a JSON object")
    return answers


@app.command("generate")
def generate(
    document_id: str = typer.Argument(..., help="Template id"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Answers as a JSON object"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="JSON file of answers"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Generate a document from a full set of answers"""
    answers = _load_answers(data, file)
    engine = _engine()

    if not engine.get_template(document_id):
        _fail(json_output, f"Document '{document_id}' introuvable")

    invalid = engine.invalid_answers(document_id, answers)
    if invalid:
        _fail(json_output, "Réponses invalides", [f"{qid} : {r.message}" for qid, r in invalid.items()])

    result = engine.generate(document_id, answers)
    if not result.ok:
        _fail(json_output, "Erreur de génération", result.errors)

    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.document, encoding="utf-8")

    if json_output:
        print(json.dumps({
            "document_id": document_id,
            "document": result.document,
            "completion_rate": engine.completion_rate(document_id, answers),
            "output": output,
        }, ensure_ascii=False, indent=2))
        return

    console.print(result.document, markup=False, highlight=False, soft_wrap=True)
    if output:
        console.print(f"\n[green][OK] Document enregistré : {output}[/green]")
    console.print("[dim]Document de référence, ne remplace pas le conseil d'un professionnel du droit.[/dim]")


def _fail(json_output: bool, error: str, details: Optional[list[str]] = None):
    details = details or []
    if json_output:
        print(json.dumps({"error": error, "details": details}, ensure_ascii=False))
    else:
        console.print(f"[red]{error}[/red]")
        for detail in details:
            console.print(f"  - {detail}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
