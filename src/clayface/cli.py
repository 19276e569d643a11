"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import NoReturn

from dotenv import load_dotenv

load_dotenv()

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from clayface.config import AppConfig, load_config
from clayface.errors import ClayfaceError
from clayface.logging.usage_store import UsageStore
from clayface.models.page import PageContent
from clayface.parsers.page_parser import fetch_page, load_page_file
from clayface.parsers.resume_parser import parse_resume
from clayface.pipeline.orchestrator import TailoringOrchestrator
from clayface.pipeline.transformer import TransformationClient
from clayface.session import build_session

app = typer.Typer(
    name="clayface",
    help="Adapt your CV and write a cover letter for a job posting page with Claude",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)

PageOption = typer.Option(None, "--page", "-p", help="Saved job posting page (HTML or text)")
UrlOption = typer.Option(None, "--url", "-u", help="Job posting URL to fetch")
ApiKeyOption = typer.Option(None, "--api-key", help="Claude API key (default: $ANTHROPIC_API_KEY)")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Show debug logging")


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def _resolve_api_key(api_key: str | None) -> str:
    key = api_key or os.environ.get("ANTHROPIC_API_KEY")
    if not key:
        _fail("Please enter your Claude API key (--api-key or ANTHROPIC_API_KEY)")
    return key


def _load_page(page: Path | None, url: str | None, timeout: float) -> PageContent:
    if page is not None:
        if not page.exists():
            _fail(f"Page file not found: {page}")
        return load_page_file(page)
    if url:
        with console.status("Fetching page..."):
            return asyncio.run(fetch_page(url, timeout=timeout))
    _fail("Provide a job posting with --page or --url")


def _load_resume(resume: Path | None) -> str | None:
    if resume is None:
        return None
    if not resume.exists():
        _fail(f"Resume file not found: {resume}")
    return parse_resume(resume)


def _build_client(config: AppConfig, session) -> TransformationClient:
    store = None
    if config.usage.enabled:
        try:
            store = UsageStore(config.usage.resolved_db_path)
        except Exception:
            logger.exception("Failed to open usage log")
    return TransformationClient(
        session,
        model=config.llm.model,
        max_source_chars=config.transform.max_source_chars,
        resume_max_tokens=config.llm.resume_max_tokens,
        letter_max_tokens=config.llm.letter_max_tokens,
        temperature=config.llm.temperature,
        usage_store=store,
    )


def _run(config: AppConfig, api_key: str, work):
    """Initialize a session, run ``work(client)`` and close the session."""

    async def _main():
        async with build_session(config.llm) as session:
            session.initialize(api_key)
            return await work(_build_client(config, session))

    return asyncio.run(_main())


def _write(output: Path, text: str, label: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]{label} saved: {output}[/green]")


@app.command()
def adapt(
    page: Path = PageOption,
    url: str = UrlOption,
    resume: Path = typer.Option(None, "--resume", "-r", help="Current CV (PDF/TXT/MD)"),
    output: Path = typer.Option(Path("output/adapted-cv.md"), "--output", "-o", help="Output file"),
    api_key: str = ApiKeyOption,
    verbose: bool = VerboseOption,
) -> None:
    """Adapt a CV to a job posting, or draft a CV template when no CV is given."""
    _setup_logging(verbose)
    config = load_config()
    key = _resolve_api_key(api_key)
    try:
        content = _load_page(page, url, config.llm.timeout)
        cv_text = _load_resume(resume)
        with console.status("Adapting CV..."):
            text = _run(config, key, lambda client: client.adapt_document(content.html, cv_text))
    except (ClayfaceError, ValueError, httpx.HTTPError) as exc:
        _fail(str(exc))

    _write(output, text, "Adapted CV")


@app.command("cover-letter")
def cover_letter(
    page: Path = PageOption,
    url: str = UrlOption,
    output: Path = typer.Option(Path("output/cover-letter.txt"), "--output", "-o", help="Output file"),
    api_key: str = ApiKeyOption,
    verbose: bool = VerboseOption,
) -> None:
    """Write a short cover letter for a job posting."""
    _setup_logging(verbose)
    config = load_config()
    key = _resolve_api_key(api_key)
    try:
        content = _load_page(page, url, config.llm.timeout)
        with console.status("Writing cover letter..."):
            text = _run(config, key, lambda client: client.generate_companion_letter(content.html))
    except (ClayfaceError, ValueError, httpx.HTTPError) as exc:
        _fail(str(exc))

    _write(output, text, "Cover letter")


@app.command()
def tailor(
    page: Path = PageOption,
    url: str = UrlOption,
    resume: Path = typer.Option(None, "--resume", "-r", help="Current CV (PDF/TXT/MD)"),
    out_dir: Path = typer.Option(Path("output"), "--out-dir", "-d", help="Output directory"),
    api_key: str = ApiKeyOption,
    verbose: bool = VerboseOption,
) -> None:
    """Adapt the CV and write the cover letter concurrently."""
    _setup_logging(verbose)
    config = load_config()
    key = _resolve_api_key(api_key)
    try:
        content = _load_page(page, url, config.llm.timeout)
        cv_text = _load_resume(resume)
        with console.status("Adapting CV and writing cover letter..."):
            result = _run(
                config, key, lambda client: TailoringOrchestrator(client).run(content, cv_text)
            )
    except (ClayfaceError, ValueError, httpx.HTTPError) as exc:
        _fail(str(exc))

    _write(out_dir / "adapted-cv.md", result.adapted_document, "Adapted CV")
    _write(out_dir / "cover-letter.txt", result.cover_letter, "Cover letter")
    console.print(Panel(result.cover_letter, title="Cover letter", border_style="cyan"))
    console.print(f"[dim]Elapsed: {result.elapsed_seconds:.1f}s[/dim]")


@app.command()
def usage(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of recent calls to show"),
) -> None:
    """Show this month's usage and the most recent calls."""
    config = load_config()
    store = UsageStore(config.usage.resolved_db_path)
    stats = store.get_monthly_stats()

    console.print(Panel(
        f"Calls: {stats['total_runs']} | Success: {stats['success_rate']:.0f}% | "
        f"Truncated: {stats['truncated_runs']}\n"
        f"Tokens: {stats['total_input_tokens']} in / {stats['total_output_tokens']} out | "
        f"Cost: ${stats['total_cost_usd']:.4f}",
        title=f"Usage {stats['month']}",
    ))

    logs = store.get_logs(limit=limit)
    if not logs:
        console.print("[yellow]No calls recorded yet.[/yellow]")
        return

    table = Table()
    for column in ("Time", "Operation", "Model", "Tokens", "Cost", "Result"):
        table.add_column(column)
    for log in logs:
        result = "ok" if log.success else f"[red]{log.error_kind}[/red]"
        table.add_row(
            log.timestamp.strftime("%Y-%m-%d %H:%M"),
            log.operation,
            log.model,
            f"{log.input_tokens}/{log.output_tokens}",
            f"${log.estimated_cost_usd:.4f}",
            result,
        )
    console.print(table)


if __name__ == "__main__":
    app()
