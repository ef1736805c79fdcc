"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quran_content.core.domain.models import (
    ApiPayload,
    Chapter,
    Juz,
    Reciter,
    TranslationResource,
    Verse,
)


def print_banner(console: Console) -> None:
    title = Text("quran-content", style="bold cyan")
    subtitle = Text("Quran.com content API • chapters • verses • audio", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_chapters_table(chapters: Iterable[Chapter]) -> Table:
    table = Table(title="Chapters")
    table.add_column("#", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Arabic", style="green")
    table.add_column("Translated", style="magenta")
    table.add_column("Verses", justify="right")
    table.add_column("Revelation", style="dim")
    for chapter in chapters:
        translated = chapter.translated_name.name if chapter.translated_name else None
        table.add_row(
            str(chapter.id or ""),
            chapter.name_simple or "",
            chapter.name_arabic or "",
            translated or "",
            str(chapter.verses_count or ""),
            chapter.revelation_place or "",
        )
    return table


def build_chapter_panel(chapter: Chapter) -> Panel:
    body = Text()
    body.append(f"{chapter.name_arabic or ''}\n", style="bold green")
    if chapter.translated_name and chapter.translated_name.name:
        body.append(f"{chapter.translated_name.name}\n")
    body.append(f"\nVerses: {chapter.verses_count}")
    body.append(f"\nRevelation: {chapter.revelation_place} (order {chapter.revelation_order})")
    if chapter.pages:
        body.append(f"\nPages: {chapter.pages[0]}-{chapter.pages[-1]}", style="dim")
    title = Text(f"{chapter.id}. {chapter.name_simple or ''}", style="bold cyan")
    return Panel(body, title=title, border_style="cyan")


def build_verses_table(verses: Iterable[Verse]) -> Table:
    table = Table(title="Verses")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Page", justify="right", style="dim")
    table.add_column("Juz", justify="right", style="dim")
    table.add_column("Translation", style="white")
    for verse in verses:
        translation = verse.translations[0].text if verse.translations else None
        table.add_row(
            verse.verse_key or "",
            str(verse.page_number or ""),
            str(verse.juz_number or ""),
            translation or "",
        )
    return table


def build_juzs_table(juzs: Iterable[Juz]) -> Table:
    table = Table(title="Juzs")
    table.add_column("Juz", style="cyan", justify="right", no_wrap=True)
    table.add_column("Verses", justify="right")
    table.add_column("Chapters", style="dim")
    for juz in juzs:
        mapping = ", ".join(f"{ch}:{rng}" for ch, rng in juz.verse_mapping.items())
        table.add_row(str(juz.juz_number or juz.id or ""), str(juz.verses_count or ""), mapping)
    return table


def build_reciters_table(reciters: Iterable[Reciter]) -> Table:
    table = Table(title="Chapter reciters")
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Arabic", style="green")
    table.add_column("Format", style="dim")
    for reciter in reciters:
        table.add_row(
            str(reciter.id or ""),
            reciter.name or "",
            reciter.arabic_name or "",
            reciter.format or "",
        )
    return table


def build_resources_table(title: str, resources: Iterable[TranslationResource]) -> Table:
    """Tabla para traducciones o tafsirs."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Author", style="magenta")
    table.add_column("Language", style="dim")
    for resource in resources:
        table.add_row(
            str(resource.id or ""),
            resource.name or "",
            resource.author_name or "",
            resource.language_name or "",
        )
    return table


def build_upstream_error_panel(payload: ApiPayload) -> Panel:
    """Panel para cuerpos de error devueltos con status 4xx."""

    body = Text()
    body.append(f"Status: {payload.status}\n", style="bold")
    body.append(payload.error or payload.message or "Unknown upstream error")
    return Panel(body, title=Text("Upstream error", style="bold yellow"), border_style="yellow")
