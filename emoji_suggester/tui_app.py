# tui_app.py - Emoji Suggester TUI
# -------------------------------------------------------
# Text based terminal UI around EmojiSuggester.
# Features:
#  - Live emoji suggestions as you type ":keyword"
#  - Up/Down to move through suggestions, Tab or Enter to insert
#  - Most used emojis panel, refreshed on every insertion
#  - Latency readout for the last query
# -------------------------------------------------------

from __future__ import annotations

import time
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from emoji_suggester.context.trigger import TriggerSpan
from emoji_suggester.core.commands import CommandBus, ResetPopularity
from emoji_suggester.core.errors import ResourceError
from emoji_suggester.core.protocols import LineBuffer
from emoji_suggester.core.suggester import EmojiSuggester
from emoji_suggester.utils.logger_utils import Log


class SuggestionPanel(Static):
    """Right-side list of suggestions with the highlighted one marked."""

    def update_suggestions(self, suggestions: List[str], selected: int):
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = []
        for i, value in enumerate(suggestions[:10]):
            marker = "[b]›[/b]" if i == selected else " "
            lines.append(f"{marker} {value}")
        self.update("\n".join(lines))


class TopEmojis(Static):
    """Most used emojis, from the popularity table."""

    def update_top(self, top):
        if not top:
            self.update("[dim]No emojis used yet[/dim]")
            return
        formatted = "  ".join(f"{emoji} {count}" for emoji, count in top)
        self.update(f"[b]Most used:[/b] {formatted}")


class TypingLatency(Static):
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


class EmojiSuggesterTUI(App):
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border: round $accent; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept", "Insert", priority=True),
        Binding("down", "move(1)", "Next", priority=True),
        Binding("up", "move(-1)", "Prev", priority=True),
        ("ctrl+e", "random", "Random emoji"),
        ("ctrl+r", "reset_popularity", "Reset popularity"),
    ]

    suggestions = reactive(list)
    selected = reactive(0)
    latency = reactive(0.0)

    def __init__(self, suggester: Optional[EmojiSuggester] = None):
        super().__init__()
        self.suggester = suggester or EmojiSuggester()
        self.bus = CommandBus(self.suggester)
        self.span: Optional[TriggerSpan] = None

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder=self.suggester.usage_hint(), id="text_input")
                yield TopEmojis(id="top")
            with Container(id="right"):
                yield SuggestionPanel(id="suggestions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self):
        try:
            self.suggester.start()
        except ResourceError as e:
            self.notify(f"Failed to initialize emoji suggestions: {e}", severity="error")
            self.query_one("#status", Static).update("[red]suggestions disabled[/red]")
        self.query_one(TopEmojis).update_top(self.suggester.top_emojis(6))
        self.query_one(SuggestionPanel).update_suggestions([], 0)

    # typing ----------------------------------------------------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        buf = LineBuffer(event.value, event.input.cursor_position)
        t0 = time.perf_counter()
        self.span, found = self.suggester.suggestions_for(buf)
        self.latency = time.perf_counter() - t0
        self.selected = 0
        self.suggestions = found

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_accept()

    def watch_suggestions(self, suggestions):
        self.query_one(SuggestionPanel).update_suggestions(suggestions, self.selected)

    def watch_selected(self, selected):
        self.query_one(SuggestionPanel).update_suggestions(self.suggestions, selected)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # actions ---------------------------------------------------------------
    def action_move(self, step: int):
        if self.suggestions:
            self.selected = (self.selected + step) % min(len(self.suggestions), 10)

    def action_accept(self):
        if self.span is None or not self.suggestions:
            return
        value = self.suggestions[self.selected]
        field = self.query_one(Input)
        buf = LineBuffer(field.value, field.cursor_position)
        emoji = self.suggester.select_suggestion(value, buf, self.span)
        self._apply(field, buf)
        self.query_one(TopEmojis).update_top(self.suggester.top_emojis(6))
        self.query_one("#status", Static).update(f"[green]inserted {emoji}[/green]")

    def action_random(self):
        field = self.query_one(Input)
        buf = LineBuffer(field.value, field.cursor_position)
        self.suggester.insert_random(buf)
        self._apply(field, buf)

    def action_reset_popularity(self):
        summary = self.bus.dispatch(ResetPopularity())
        self.query_one(TopEmojis).update_top(self.suggester.top_emojis(6))
        self.query_one("#status", Static).update(f"[yellow]{summary}[/yellow]")

    @staticmethod
    def _apply(field: Input, buf: LineBuffer):
        field.value = buf.get_line()
        field.cursor_position = buf.get_cursor()

    def on_unmount(self):
        self.suggester.persist()
        Log.write("[TUI] session closed")


def main():
    EmojiSuggesterTUI().run()


if __name__ == "__main__":
    main()
