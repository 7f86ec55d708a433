import numpy as np
import random
import math
import argparse
from scipy.stats import linregress

from grid_state import GridState
from weighted_union_find import WeightedQuickUnionUF

DEFAULT_GRID_SIZE = 20
DEFAULT_TRIALS = 1000
DEFAULT_L_STEP = 10
CONFIDENCE_Z = 1.96
SCALING_EXPONENT = -3/4


class SquarePercolation:
    """
    Site percolation on an n by n square grid, top to bottom.

    Sites are addressed by 0-indexed (row, col). The union-find holds the
    n*n sites followed by two virtual sites, one above row 0 and one below
    row n-1, so percolation is a single connected() query.
    """

    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        if n <= 0: raise ValueError("n must be a positive integer")

        self.gridSize = n
        self.gridSquare = n * n
        self.grid = GridState(n)

        self.wqfGrid = WeightedQuickUnionUF(self.gridSquare + 2)

        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare + 1

    # open the site[row, col] if it's not open yet
    def open_site(self, row: int, col: int):
        self.grid.validState(row, col)

        if self.grid.isOpenAt(row, col):
            return

        self.grid.setOpen(row, col)
        flatIndex = self.flattenGrid(row, col)

        ## top row
        if row == 0:
            self.wqfGrid.union(flatIndex, self.virtualTop)

        ## bottom row
        if row == self.gridSize - 1:
            self.wqfGrid.union(flatIndex, self.virtualBottom)

        ## up, down, left, right
        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.grid.isOnGrid(nRow, nCol) and self.grid.isOpenAt(nRow, nCol):
                self.wqfGrid.union(flatIndex, self.flattenGrid(nRow, nCol))

    # is site[row, col] open?
    def isOpen(self, row: int, col: int) -> bool:
        return self.grid.isOpenAt(row, col)

    # is site[row, col] reachable from the top through open sites?
    def isFull(self, row: int, col: int) -> bool:
        if not self.isOpen(row, col):
            return False
        return self.wqfGrid.connected(self.flattenGrid(row, col), self.virtualTop)

    def percolates(self, ) -> bool:
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self, ) -> int:
        return self.grid.openSiteCount()

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * row + col


class PercolationStats:
    """
    Monte Carlo estimate of the percolation threshold.

    Every trial opens uniformly random sites on a fresh grid until it
    percolates and records the fraction of open sites. All draws come from
    ``rng``; pass a seeded ``random.Random`` for reproducible runs.
    """

    def __init__(self, n: int, trials: int, rng: random.Random = None):

        if (n <= 0 or trials <= 0):
            raise ValueError("grid size n and trials count must be positive integers")

        self.trialCount = trials
        self.gridSize = n
        self.rng = rng if rng is not None else random.Random()
        self.trialResults = []

        for i in range(self.trialCount):
            simulator = SquarePercolation(self.gridSize)
            while (not simulator.percolates()):
                row = self.rng.randrange(self.gridSize)
                col = self.rng.randrange(self.gridSize)
                simulator.open_site(row, col)

            result = simulator.numberOfOpenSites() / (self.gridSize * self.gridSize)
            self.trialResults.append(result)

    def trials_mean(self, ):
        return np.mean(self.trialResults)

    def trials_std(self, ):
        return np.std(self.trialResults)

    def trials_confidence_interval(self, ):
        margin = (CONFIDENCE_Z * self.trials_std()) / math.sqrt(self.trialCount)
        return self.trials_mean() - margin, self.trials_mean() + margin

    def report(self, ):
        print("="*60)
        print(f"STATS REPORT (n = {self.gridSize}, trials = {self.trialCount})")
        print("="*60)

        print(f"mean value of critical value pc = {self.trials_mean(): .6f}")
        print(f"std value of critical value pc = {self.trials_std(): .6f}")
        lo, hi = self.trials_confidence_interval()
        print(f"the 95% confidence interval is {lo} ~ {hi}")
        print("="*60)


def run_monte_carlo(n: int, trials: int, rng: random.Random = None) -> float:
    """Mean open-site fraction at the moment of percolation over ``trials`` grids."""
    return float(PercolationStats(n, trials, rng).trials_mean())


def extrapolate_threshold(L_values, means, exponent=SCALING_EXPONENT):
    """
    Fits mean pc against L^(exponent) and extrapolates to L -> infinity.

    The intercept of the fitted line at X = 0 is the estimate of pc(infinity).
    Returns a dict with 'pc_inf', 'slope' and 'R2'.
    """
    L_values = np.asarray(L_values, dtype=float)
    means = np.asarray(means, dtype=float)

    if len(L_values) < 2:
        raise ValueError("at least two grid sizes are needed to extrapolate")

    X_scaling = L_values ** exponent
    slope, intercept, r_value, p_value, std_err = linregress(X_scaling, means)

    return {'pc_inf': intercept, 'slope': slope, 'R2': r_value**2}


def build_parser():
    parser = argparse.ArgumentParser(
        description="Run a Monte Carlo simulation for 2D site percolation on a square grid."
    )

    parser.add_argument(
        '--n',
        type=int,
        default=DEFAULT_GRID_SIZE,
        help="Size of the square grid (n x n). Smallest size when sweeping."
    )

    parser.add_argument(
        '--t',
        type=int,
        default=DEFAULT_TRIALS,
        help="The number of Monte Carlo trials to perform per grid size."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random source, for reproducible runs."
    )

    parser.add_argument(
        '--Lmax',
        type=int,
        default=None,
        help="Sweep grid sizes from n up to Lmax and extrapolate pc(infinity)."
    )

    parser.add_argument(
        '--Lstep',
        type=int,
        default=DEFAULT_L_STEP,
        help="Step size for increasing the grid size in a sweep."
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.n <= 0 or args.t <= 0:
        parser.error("grid size n and trials count must be positive integers")

    rng = random.Random(args.seed)

    if args.Lmax is None:
        stats = PercolationStats(args.n, args.t, rng)
        print(f"Percolation threshold estimate: {stats.trials_mean()}")
        stats.report()
        return

    if args.Lstep <= 0:
        parser.error("Lstep must be a positive integer")

    L_values = [int(L) for L in np.arange(args.n, args.Lmax + 1, args.Lstep)]
    if len(L_values) < 2:
        parser.error("a sweep needs at least two grid sizes between n and Lmax")

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (N): {args.n} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    means = []
    for n_value in L_values:
        print(f"simulate n = {n_value}")
        stats = PercolationStats(n_value, args.t, rng)
        stats.report()
        means.append(stats.trials_mean())

    print("\n--- Simulation Complete ---")

    result = extrapolate_threshold(L_values, means)
    print(f"\n--- Extrapolation Results (exponent {SCALING_EXPONENT:.2f}) ---")
    print(f"pc(infinity) = {result['pc_inf']:.6f}, R^2 = {result['R2']:.4f}")
    print("-------------------------------------------------------")


if __name__ == "__main__":
    main()
