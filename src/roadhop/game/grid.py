"""Board geometry in grid cells."""

from dataclasses import dataclass

from roadhop.config.settings import BoardSettings


@dataclass(frozen=True)
class Grid:
    """Fixed cell size and board extent.

    Every lane row, tree column and player cell is an integer index into
    this grid; pixel coordinates are derived with ``to_px``.
    """

    size: int = 40
    cols: int = 12
    rows: int = 18
    scroll_threshold_row: int = 8
    start_rows: int = 2

    def __post_init__(self) -> None:
        if self.size <= 0 or self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"Invalid grid {self.cols}x{self.rows} @ {self.size}px")
        if not 1 <= self.start_rows <= self.rows:
            raise ValueError(f"Start rows {self.start_rows} outside board")
        if not 0 <= self.scroll_threshold_row < self.rows:
            raise ValueError(f"Scroll threshold row {self.scroll_threshold_row} outside board")

    @classmethod
    def from_settings(cls, board: BoardSettings) -> "Grid":
        return cls(
            size=board.grid_size,
            cols=board.width // board.grid_size,
            rows=board.height // board.grid_size,
            scroll_threshold_row=board.scroll_threshold_rows,
            start_rows=board.start_rows,
        )

    @property
    def width(self) -> int:
        """Board width in pixels."""
        return self.cols * self.size

    @property
    def height(self) -> int:
        """Board height in pixels."""
        return self.rows * self.size

    def to_px(self, cells: float) -> float:
        return cells * self.size

    @property
    def start_row(self) -> int:
        """Row the player spawns on; always one of the forced-safe start rows."""
        return max(self.rows - 2, self.rows - self.start_rows)

    def is_start_row(self, row: int) -> bool:
        """Rows the player starts on are always safe ground."""
        return row >= self.rows - self.start_rows

    def in_cols(self, col: int) -> bool:
        return 0 <= col < self.cols

    def in_rows(self, row: int) -> bool:
        return 0 <= row < self.rows
