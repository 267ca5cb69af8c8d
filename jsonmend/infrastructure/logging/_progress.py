# jsonmend/infrastructure/logging/_progress.py

"""Progress bar for multi-file CLI runs"""

# Standard library imports
from logging import getLogger
from types import TracebackType
from typing import Self

# Third party imports
from rich.console import Console
from rich.progress import BarColumn
from rich.progress import MofNCompleteColumn
from rich.progress import Progress
from rich.progress import SpinnerColumn
from rich.progress import TaskID
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn

logger = getLogger(__name__)


class FileProgress:
    """Progress display over a known number of files

    Renders to stderr so stdout stays usable for output. When disabled, each
    advance is logged at DEBUG instead.
    """

    def __init__(self, total: int, description: str = "Processing", enabled: bool = True):
        """Initialize the progress display

        Args:
            total: Number of files that will be processed
            description: Label shown next to the bar
            enabled: Whether to draw the bar at all
        """
        self.total = total
        self.description = description
        self.enabled = enabled
        self.completed = 0
        self.console: Console | None = None
        self.progress: Progress | None = None
        self.task_id: TaskID | None = None

        if self.enabled:
            self.console = Console(stderr=True)
            self.progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                console=self.console,
                expand=False,
                transient=True,
            )

    def __enter__(self) -> Self:
        if self.progress:
            self.progress.start()
            self.task_id = self.progress.add_task(self.description, total=self.total)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.progress:
            self.progress.stop()

    def advance(self, label: str) -> None:
        """Mark one more file as done

        Args:
            label: Name of the file just processed
        """
        self.completed += 1
        if self.progress and self.task_id is not None:
            self.progress.update(self.task_id, advance=1, description=label)
        else:
            logger.debug(f"[{self.completed}/{self.total}] {label}")
