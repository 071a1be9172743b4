"""
Output sinks.

The assessor reports each result as a single styled line. The console sink
maps styles to colours; the capturing sink records lines for inspection.
"""

from typing import List, Optional, Protocol, Tuple

from rich.console import Console

from halting.models.assessment import OutputStyle


class OutputSink(Protocol):
    """Anything that accepts styled lines in call order."""

    def write(self, text: str, style: OutputStyle = OutputStyle.PLAIN) -> None:
        ...


# Green when the assessor halts, cyan when it loops
STYLE_COLOURS = {
    OutputStyle.AFFIRMATIVE: "green",
    OutputStyle.UNCERTAIN: "cyan",
    OutputStyle.PLAIN: None,
}


class ConsoleSink:
    """Writes lines to a rich console."""

    def __init__(self, console: Optional[Console] = None, width: Optional[int] = None):
        self.console = console or Console(width=width, highlight=False)

    def write(self, text: str, style: OutputStyle = OutputStyle.PLAIN) -> None:
        self.console.print(
            text,
            style=STYLE_COLOURS[OutputStyle(style)],
            markup=False,
            soft_wrap=True
        )


class CapturingSink:
    """Records every line written to it, in order."""

    def __init__(self):
        self.records: List[Tuple[str, OutputStyle]] = []

    def write(self, text: str, style: OutputStyle = OutputStyle.PLAIN) -> None:
        self.records.append((text, OutputStyle(style)))

    @property
    def lines(self) -> List[str]:
        return [text for text, _ in self.records]

    @property
    def styles(self) -> List[OutputStyle]:
        return [style for _, style in self.records]

    def clear(self) -> None:
        self.records.clear()
