"""Rich-based terminal renderer for session and countdown events."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from pomodoro.constants import KIND_LONG_BREAK, KIND_SHORT_BREAK, KIND_WORK
from pomodoro.session import Phase, Session


def format_remaining(seconds: int) -> str:
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{remainder:02d}"


class RichConsoleSink:
    """Progress bar per phase plus colored banners between phases."""

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        clear_on_complete: bool = True,
    ):
        self._console = console or Console()
        self._clear_on_complete = clear_on_complete
        self._cycles: Optional[int] = None
        self._phase: Optional[Phase] = None
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    @property
    def console(self) -> Console:
        return self._console

    def on_session_started(self, session: Session) -> None:
        self._cycles = session.cycles
        self._console.print("🍅 Pomodoro Session Starting!", style="bold bright_red")
        self._console.print(
            f"Work: [cyan]{session.work_minutes}[/]min | "
            f"Short Break: [green]{session.short_break_minutes}[/]min | "
            f"Long Break: [blue]{session.long_break_minutes}[/]min | "
            f"Cycles: [yellow]{session.cycles}[/]"
        )
        self._console.print()

    def on_phase_started(self, phase: Phase) -> None:
        self._phase = phase
        if phase.kind == KIND_WORK:
            cycle_text = ""
            if phase.cycle is not None and self._cycles is not None:
                cycle_text = f" (Cycle [yellow]{phase.cycle}[/]/[yellow]{self._cycles}[/])"
            self._console.print(f"🔥 [bold bright_red]WORK TIME[/]{cycle_text}")
        elif phase.kind == KIND_SHORT_BREAK:
            self._console.print("☕ [bold bright_green]SHORT BREAK[/]")
        elif phase.kind == KIND_LONG_BREAK:
            self._console.print("🎉 [bold bright_blue]LONG BREAK - You earned it![/]")

        self._progress = Progress(
            SpinnerColumn(style="green"),
            TimeElapsedColumn(),
            BarColumn(bar_width=40, style="blue", complete_style="cyan"),
            MofNCompleteColumn(),
            TextColumn("{task.description}"),
            console=self._console,
        )
        self._task_id = self._progress.add_task(
            f"{phase.label} - {phase.minutes}min",
            total=phase.duration_seconds,
        )
        self._progress.start()

    def on_progress(
        self,
        phase_label: str,
        elapsed_seconds: int,
        remaining_seconds: int,
        total_seconds: int,
    ) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=elapsed_seconds,
            total=total_seconds,
            description=f"{phase_label} - {format_remaining(remaining_seconds)} remaining",
        )

    def on_phase_complete(self, phase_label: str) -> None:
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, description=f"{phase_label} - Complete! ✅")
            self._progress.stop()
        self._progress = None
        self._task_id = None

        if self._clear_on_complete:
            self._console.clear()
        minutes = self._phase.minutes if self._phase is not None else 0
        self._console.print(
            f"🎉 [bold bright_cyan]{phase_label}[/] [dim]({minutes}min)[/] completed!"
        )
        self._console.print()

    def on_session_complete(self) -> None:
        self._console.print(
            "🎊 Pomodoro session complete! Great work!",
            style="bold bright_magenta",
        )

    def close(self) -> None:
        """Stop a still-running progress display, e.g. after cancellation."""
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
