"""
cli.py - command line glossary browser
Features:
- Search-as-you-type style queries against the prefix index
- Entry display with [links] resolved to other glossary terms
- Category listing in hierarchy order and index diagnostics
- Uses Rich for tables and formatting
"""

import argparse
import logging
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.prompt import Prompt
from rich import box

from glossary_browser.core.glossary import Glossary, is_link, link_title, term_in_link, text_sections
from glossary_browser.entry import Entry
from glossary_browser.errors import GlossaryError
from glossary_browser.loader import load_glossary
from glossary_browser.utils.config_manager import Config
from glossary_browser.utils.logger_utils import LOG_LEVELS, configure_logging, time_block

logger = logging.getLogger(__name__)

# initialise console for rich output
console = Console()


class CLI:
    """Interactive browser over a loaded Glossary."""

    def __init__(self, glossary: Glossary, max_results: int = 20):
        self.glossary = glossary
        self.max_results = max_results
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts for search text
        - Handles commands like /quit, /show
        """
        console.rule("[bold magenta]Glossary[/bold magenta]")
        console.print(f"[cyan]{len(self.glossary.entries)} terms loaded. Type to search.[/cyan]")
        console.print("Commands: /quit /stats /categories /show <term>\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Search[/green]", default="")
                if not line:
                    continue
                if line.startswith("/"):
                    self._handle_command(line)
                    continue
                self.search(line)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        name, _, arg = cmd.partition(" ")
        if name in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if name == "/stats":
            self.show_stats()
            return

        if name == "/categories":
            self.show_categories()
            return

        if name == "/show" and arg.strip():
            self.show(arg.strip())
            return

        console.print(f"[red]Unknown command:[/red] {cmd}")

    # SEARCH ---------------------------------------------------------------
    def search(self, text: str) -> List[Entry]:
        with time_block(f"search {text!r}", logger) as t:
            scored = self.glossary.index.search_scores(text)
        if not scored:
            console.print("[dim](no matches)[/dim]")
            return []

        table = Table(title=f"Results for '{text}'", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Id", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Category")
        table.add_column("Score", justify="right", style="magenta")

        shown = []
        for i, (entry_id, score) in enumerate(scored[: self.max_results], 1):
            entry = self.glossary.get(entry_id)
            if entry is None:
                continue
            shown.append(entry)
            table.add_row(str(i), entry.id, entry.title, entry.category or "", f"{score:g}")
        console.print(table)
        console.print(f"[dim]{len(scored)} matches in {t.elapsed_ms:.1f}ms[/dim]")
        return shown

    # DISPLAY -------------------------------------------------------------------------------
    def show(self, term: str) -> Optional[Entry]:
        """Print one entry; `term` may be an id, a title, a synonym or an abbreviation."""
        entry = self.glossary.select(term)
        if entry is None:
            entry_id = self.glossary.term_id_for_link_text(term)
            entry = self.glossary.get(entry_id) if entry_id else None
        if entry is None:
            console.print(f"[red]No such term:[/red] {term}")
            return None

        body = Text()
        aka = [*entry.synonyms, *entry.abbreviations]
        if aka:
            body.append("Also: " + ", ".join(aka) + "\n\n", style="italic")
        for paragraph in entry.body:
            for section in text_sections(paragraph):
                if is_link(section):
                    target = self.glossary.term_id_for_link_text(term_in_link(section))
                    style = "underline cyan" if target else "red"
                    body.append(term_in_link(section), style=style)
                else:
                    body.append(section)
            body.append("\n\n")
        for link in entry.links:
            body.append(f"- {link_title(link)}\n", style="blue")

        console.print(Panel(body, title=entry.title, subtitle=entry.category or "", border_style="cyan"))
        return entry

    def show_categories(self):
        table = Table(title="Categories", box=box.MINIMAL)
        table.add_column("Order")
        table.add_column("Category")
        table.add_column("Terms", justify="right")
        counts = {}
        for e in self.glossary.entries:
            counts[e.category] = counts.get(e.category, 0) + 1
        for label in self.glossary.categories_sorted():
            table.add_row(self.glossary.category_order[label], label, str(counts.get(label, 0)))
        console.print(table)

    def show_stats(self):
        stats = self.glossary.index.stats()
        panel = Panel(
            f"entries: {stats['entries']}\ntokens: {stats['tokens']}\nbuild: {stats['build_ms']}ms",
            title="Search Index",
            border_style="cyan",
        )
        console.print(panel)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glossary-browser", description="Browse and search a glossary")
    parser.add_argument("data", nargs="?", help="glossary JSON file (default: data_path from config)")
    parser.add_argument("--query", "-q", help="run one search and exit")
    parser.add_argument("--show", "-s", help="show one term and exit")
    parser.add_argument("--config", default="glossary_config.json", help="config file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="default: log_level from config")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = Config(args.config)
        configure_logging(args.log_level or cfg.get("log_level", "WARNING"))
    except ValueError as e:
        console.print(f"[red]Bad configuration:[/red] {e}")
        return 1

    try:
        entries, category_order = load_glossary(args.data or cfg.get("data_path"))
        glossary = Glossary(entries, category_order, weights=cfg.get("weights"))
    except (GlossaryError, OSError, ValueError) as e:
        console.print(f"[red]Could not load glossary:[/red] {e}")
        return 1

    cli = CLI(glossary, max_results=cfg.get("max_results", 20))
    if args.query is not None or args.show is not None:
        if args.show is not None and cli.show(args.show) is None:
            return 1
        if args.query is not None:
            cli.search(args.query)
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
