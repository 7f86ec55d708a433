import numpy as np


class GridState:
    # n by n open flags, all sites blocked at creation
    def __init__(self, n: int):
        if n <= 0: raise ValueError("n must be a positive integer")

        self.gridSize = n
        self.grid = np.zeros((n, n), dtype=bool)
        self.openCount = 0

    def isOnGrid(self, row: int, col: int) -> bool:
        return (row >= 0 and col >= 0 and row < self.gridSize and col < self.gridSize)

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(f"site ({row}, {col}) is out of bounds for a {self.gridSize}x{self.gridSize} grid")

    def isOpenAt(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row][col])

    # counts each site once, re-opening is a no-op
    def setOpen(self, row: int, col: int):
        self.validState(row, col)

        if self.grid[row][col]:
            return

        self.grid[row][col] = True
        self.openCount += 1

    def openSiteCount(self) -> int:
        return self.openCount
