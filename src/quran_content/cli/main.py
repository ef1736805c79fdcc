"""CLI `quran-content` (Typer + Rich).

Cada comando abre un `QuranClient`, ejecuta una sola operación y muestra el
resultado como tabla (por defecto) o JSON (`--json`). `--output` guarda el
payload en disco.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional, TypeVar

import httpx
import typer
from rich.console import Console

from quran_content._logging import configure_logging
from quran_content.adapters.json_exporter import export_payload_json, payload_to_json
from quran_content.cli import ui_components as ui
from quran_content.cli.doctor import app as doctor_app
from quran_content.client import QuranClient
from quran_content.core.domain.language import DEFAULT_LANGUAGE
from quran_content.core.domain.models import ApiPayload
from quran_content.core.domain.queries import VerseQuery
from quran_content.core.errors import LanguageValidationError, ParameterError, PayloadError

PayloadT = TypeVar("PayloadT", bound=ApiPayload)

app = typer.Typer(
    no_args_is_help=True,
    help="Query the Quran.com content API: chapters, verses, juzs, audio and resources.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

LanguageOpt = Annotated[str, typer.Option("--language", "-l", help="ISO language code.")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print the raw payload as JSON.")]
OutputOpt = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Also write the payload to this JSON file."),
]


class VerseUnit(str, Enum):
    CHAPTER = "chapter"
    PAGE = "page"
    JUZ = "juz"
    HIZB = "hizb"
    RUB = "rub"
    KEY = "key"


def build_client() -> QuranClient:
    return QuranClient()


def _execute(call: Callable[[QuranClient], Awaitable[PayloadT]]) -> PayloadT:
    async def _runner() -> PayloadT:
        async with build_client() as client:
            return await call(client)

    try:
        return asyncio.run(_runner())
    except (ParameterError, LanguageValidationError) as exc:
        _err_console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    except PayloadError as exc:
        _err_console.print(f"[red]Unexpected response:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _err_console.print(f"[red]Request failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _emit(
    payload: PayloadT,
    *,
    as_json: bool,
    output: Path | None,
    render: Callable[[PayloadT], object],
) -> None:
    if output is not None:
        path = export_payload_json(payload=payload, output_path=output)
        _err_console.print(f"[green]Saved:[/green] {path}")

    if payload.is_error:
        _console.print(ui.build_upstream_error_panel(payload))
        raise typer.Exit(code=1)

    if as_json:
        _console.print_json(payload_to_json(payload))
    else:
        _console.print(render(payload))


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP activity.")] = False,
) -> None:
    if verbose:
        configure_logging(logging.DEBUG)


@app.command()
def chapters(
    language: LanguageOpt = DEFAULT_LANGUAGE,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """List the 114 chapters."""

    payload = _execute(lambda c: c.chapter.list_chapters(language))
    _emit(payload, as_json=as_json, output=output, render=lambda p: ui.build_chapters_table(p.chapters))


@app.command()
def chapter(
    chapter_id: int,
    language: LanguageOpt = DEFAULT_LANGUAGE,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """Show a single chapter."""

    payload = _execute(lambda c: c.chapter.get_chapter(chapter_id, language))

    def render(p):
        if p.chapter is None:
            return "No chapter in response."
        return ui.build_chapter_panel(p.chapter)

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command(name="chapter-info")
def chapter_info(
    chapter_id: int,
    language: LanguageOpt = DEFAULT_LANGUAGE,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """Show the introduction text of a chapter."""

    payload = _execute(lambda c: c.chapter.get_chapter_info(chapter_id, language))

    def render(p):
        info = p.chapter_info
        if info is None:
            return "No chapter info in response."
        return f"{info.short_text or ''}\n\n[dim]Source: {info.source or '-'}[/dim]"

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command()
def verses(
    unit: Annotated[VerseUnit, typer.Argument(help="What VALUE refers to.")],
    value: Annotated[str, typer.Argument(help="Number, or 'chapter:verse' for key.")],
    language: LanguageOpt = DEFAULT_LANGUAGE,
    translations: Annotated[
        Optional[str], typer.Option(help="Comma separated translation ids, e.g. 131,20.")
    ] = None,
    page: Annotated[Optional[int], typer.Option(help="Page of results.")] = None,
    per_page: Annotated[Optional[int], typer.Option(help="Results per page.")] = None,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """List verses by chapter, page, juz, hizb, rub el-hizb or key."""

    query = VerseQuery(language=language, translations=translations, page=page, per_page=per_page)

    def call(c: QuranClient):
        by_unit = {
            VerseUnit.CHAPTER: c.verse.get_verse_by_chapter,
            VerseUnit.PAGE: c.verse.get_verse_by_page,
            VerseUnit.JUZ: c.verse.get_verse_by_juz,
            VerseUnit.HIZB: c.verse.get_verse_by_hizb_number,
            VerseUnit.RUB: c.verse.get_verse_by_rub_el_hizb_number,
            VerseUnit.KEY: c.verse.get_specific_verse_by_verse_key,
        }
        return by_unit[unit](value, query)

    payload = _execute(call)

    def render(p):
        items = p.verses or ([p.verse] if p.verse else [])
        return ui.build_verses_table(items)

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command(name="random-verse")
def random_verse(
    language: LanguageOpt = DEFAULT_LANGUAGE,
    translations: Annotated[Optional[str], typer.Option(help="Comma separated translation ids.")] = None,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """Show a random verse."""

    query = VerseQuery(language=language, translations=translations)
    payload = _execute(lambda c: c.verse.get_random_ayah(query))
    _emit(
        payload,
        as_json=as_json,
        output=output,
        render=lambda p: ui.build_verses_table([p.verse] if p.verse else p.verses),
    )


@app.command()
def juzs(as_json: JsonOpt = False, output: OutputOpt = None) -> None:
    """List the 30 juzs."""

    payload = _execute(lambda c: c.juz.get_all_juzs())
    _emit(payload, as_json=as_json, output=output, render=lambda p: ui.build_juzs_table(p.juzs))


@app.command()
def reciters(
    language: LanguageOpt = DEFAULT_LANGUAGE,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """List chapter reciters."""

    payload = _execute(lambda c: c.audio.get_list_of_chapter_reciters(language))
    _emit(payload, as_json=as_json, output=output, render=lambda p: ui.build_reciters_table(p.reciters))


@app.command(name="chapter-audio")
def chapter_audio(
    reciter_id: int,
    chapter_number: int,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """Show the audio file of a chapter for a reciter."""

    payload = _execute(lambda c: c.audio.get_chapters_audio_of_a_reciter(reciter_id, chapter_number))

    def render(p):
        if p.audio_file is None:
            return "No audio file in response."
        return p.audio_file.audio_url or ""

    _emit(payload, as_json=as_json, output=output, render=render)


@app.command(name="translations")
def list_translations(
    language: LanguageOpt = DEFAULT_LANGUAGE,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """List available translations."""

    payload = _execute(lambda c: c.resource.get_translations(language))
    _emit(
        payload,
        as_json=as_json,
        output=output,
        render=lambda p: ui.build_resources_table("Translations", p.translations),
    )


@app.command(name="tafsirs")
def list_tafsirs(
    language: LanguageOpt = DEFAULT_LANGUAGE,
    as_json: JsonOpt = False,
    output: OutputOpt = None,
) -> None:
    """List available tafsirs."""

    payload = _execute(lambda c: c.resource.get_tafsirs(language))
    _emit(
        payload,
        as_json=as_json,
        output=output,
        render=lambda p: ui.build_resources_table("Tafsirs", p.tafsirs),
    )


def run() -> None:
    app()
