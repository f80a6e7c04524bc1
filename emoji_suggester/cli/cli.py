"""
cli.py - interactive emoji suggester in the terminal
Features:
- Each prompt line acts as the editor line; a ":keyword" at its end opens suggestions
- Numbered pick replaces the trigger span and counts one use of that emoji
- Slash commands for languages, custom mappings, popularity and display settings
- Uses Rich for tables and formatting
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from emoji_suggester.core.commands import (
    AddLanguage,
    AddMapping,
    CommandBus,
    CommandError,
    DeleteMapping,
    RemoveLanguage,
    ResetMappings,
    ResetPopularity,
    SetShowKeywords,
    SetTriggerChar,
)
from emoji_suggester.core.dictionary import SUPPORTED_LANGUAGES
from emoji_suggester.core.errors import ResourceError
from emoji_suggester.core.protocols import LineBuffer
from emoji_suggester.core.suggester import EmojiSuggester
from emoji_suggester.utils.logger_utils import Log

MAX_SHOWN = 10

HELP = """\
/langs                     show chosen languages
/lang add|remove <id>      change the language set
/map <keyword> <emoji>     add a custom mapping
/unmap <keyword>           delete a custom mapping
/mappings                  list custom mappings
/top                       your most used emojis
/explain <query>           popularity behind a query's ordering
/reset-popularity          forget usage statistics
/reset-mappings            delete all custom mappings
/keywords on|off           show keywords next to emojis
/trigger <char>            change the trigger character
/random                    append a random emoji
/quit"""


class CLI:
    """Command-line front-end: prompt line = editor line."""

    def __init__(self, suggester: Optional[EmojiSuggester] = None, console: Optional[Console] = None):
        self.console = console or Console()
        self.suggester = suggester or EmojiSuggester()
        self.bus = CommandBus(self.suggester)
        self.buffer = LineBuffer()
        self.running = True

    def start(self) -> bool:
        """Load dictionaries. A failure is reported once and suggestions stay off."""
        try:
            self.suggester.start()
        except ResourceError as e:
            self.console.print(f"[red]Failed to initialize emoji suggestions:[/red] {e}")
            return False
        return True

    def run(self):
        self.console.rule("[bold magenta]Emoji Suggester[/bold magenta]")
        self.start()
        self.console.print(f"[cyan]{self.suggester.usage_hint()}[/cyan]")
        self.console.print("Commands: /help /top /map /langs /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", console=self.console)
                if not line:
                    continue
                if line.startswith("/"):
                    self.handle_command(line)
                    continue
                self.process_line(line)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

    # INPUT -----------------------------------------------------------------
    def process_line(self, line: str, pick: Optional[str] = None) -> List[str]:
        """
        Show suggestions for the trigger at the end of `line`, then insert
        the picked one. `pick` skips the prompt (used by tests/scripts).
        """
        self.buffer.set_text(line)
        span, suggestions = self.suggester.suggestions_for(self.buffer)
        if span is None:
            self.console.print(f"[dim]{self.suggester.usage_hint()}[/dim]")
            return []
        if not suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return []

        shown = suggestions[:MAX_SHOWN]
        self._display_suggestions(span.query, shown)
        if pick is None:
            pick = Prompt.ask("Pick # / Enter to skip", default="", console=self.console)
        if pick.isdigit() and 1 <= int(pick) <= len(shown):
            emoji = self.suggester.select_suggestion(shown[int(pick) - 1], self.buffer, span)
            self.console.print(f"[green]Inserted {emoji}:[/green] {self.buffer.get_line()}")
        return shown

    def _display_suggestions(self, query: str, suggestions: List[str]):
        table = Table(title=f"Emojis for '{query}'", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Suggestion", style="bold")
        table.add_column("Used", justify="right", style="magenta")
        popularity = self.suggester.settings.emoji_popularity
        for i, value in enumerate(suggestions, 1):
            count = popularity.get(self.suggester.emoji_of(value), 0)
            table.add_row(str(i), value, str(count) if count else "")
        self.console.print(table)

    # COMMANDS --------------------------------------------------------------
    def handle_command(self, cmd: str):
        parts = cmd.split()
        name, args = parts[0], parts[1:]

        if name == "/quit":
            self._exit()
            return
        if name == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
            return
        if name == "/langs":
            self.console.print("Languages: " + ", ".join(self.suggester.settings.chosen_languages))
            self.console.print("[dim]Available: " + ", ".join(SUPPORTED_LANGUAGES) + "[/dim]")
            return
        if name == "/mappings":
            self._show_mappings()
            return
        if name == "/top":
            self._show_top()
            return
        if name == "/explain" and args:
            self._explain(args[0])
            return
        if name == "/random":
            emoji = self.suggester.insert_random(self.buffer)
            self.console.print(f"[green]Inserted {emoji}:[/green] {self.buffer.get_line()}")
            return

        command = self._parse_settings_command(name, args)
        if command is None:
            self.console.print(f"[red]Unknown command:[/red] {cmd}")
            return
        try:
            summary = self.bus.dispatch(command)
        except CommandError as e:
            self.console.print(f"[red]{e}[/red]")
            return
        except ResourceError as e:
            self.console.print(f"[red]Reindex failed, suggestions disabled:[/red] {e}")
            return
        self.console.print(f"[yellow]{summary}[/yellow]")

    @staticmethod
    def _parse_settings_command(name: str, args: List[str]):
        if name == "/lang" and len(args) == 2 and args[0] == "add":
            return AddLanguage(args[1])
        if name == "/lang" and len(args) == 2 and args[0] == "remove":
            return RemoveLanguage(args[1])
        if name == "/map" and len(args) >= 2:
            return AddMapping(args[0], args[1])
        if name == "/unmap" and len(args) == 1:
            return DeleteMapping(args[0])
        if name == "/reset-popularity":
            return ResetPopularity()
        if name == "/reset-mappings":
            return ResetMappings()
        if name == "/keywords" and args and args[0] in ("on", "off"):
            return SetShowKeywords(args[0] == "on")
        if name == "/trigger" and len(args) == 1:
            return SetTriggerChar(args[0])
        return None

    def _show_mappings(self):
        mappings = self.suggester.settings.custom_emoji_mappings
        if not mappings:
            self.console.print("[dim]No custom mappings[/dim]")
            return
        table = Table(title="Custom Mappings", box=box.MINIMAL)
        table.add_column("Keyword")
        table.add_column("Emoji")
        for kw, emoji in sorted(mappings.items()):
            table.add_row(kw, emoji)
        self.console.print(table)

    def _show_top(self):
        top = self.suggester.top_emojis(10)
        if not top:
            self.console.print("[dim]No emojis used yet[/dim]")
            return
        table = Table(title="Your Most Used Emojis", box=box.MINIMAL)
        table.add_column("Emoji")
        table.add_column("Used")
        for emoji, count in top:
            table.add_row(emoji, f"{count} time{'s' if count != 1 else ''}")
        self.console.print(table)

    def _explain(self, query: str):
        pairs = self.suggester.suggest_pairs(query)
        rows = self.suggester.ranker.debug_ordering(pairs, self.suggester.settings.emoji_popularity)
        table = Table(title=f"Ordering for '{query}'", box=box.MINIMAL)
        table.add_column("Emoji")
        table.add_column("Keyword")
        table.add_column("Used", justify="right")
        for emoji, kw, count in rows[:MAX_SHOWN]:
            table.add_row(emoji, kw, str(count))
        table.caption = f"{self.suggester.last_latency * 1000:.2f} ms"
        self.console.print(table)

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.suggester.persist()
        Log.write("[CLI] session closed")
        self.running = False


def main():
    CLI().run()


if __name__ == "__main__":
    main()
