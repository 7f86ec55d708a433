# weighted quick union-find over a flat index space
class WeightedQuickUnionUF:
    """
    Weighted Quick-Union-Find over the sites 0 through n-1.

    The smaller tree is always hung under the root of the larger one, so
    tree height stays O(log n). find() also compresses the path it walks;
    that never changes which root a site reports.
    """

    def __init__(self, n: int):
        """
        Creates 'n' singleton components.

        :param n: The number of sites.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        # self.parent[i] = parent of site i, roots point at themselves
        self.parent = list(range(n))

        # self.size[i] = number of sites in the tree rooted at i
        self.size = [1] * n

        # number of disjoint components
        self.count = n

    def get_count(self) -> int:
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p: int) -> int:
        """
        Returns the root of the tree containing site 'p'.
        """
        self._validate(p)

        root = p
        while root != self.parent[root]:
            root = self.parent[root]

        # point every site on the walked path straight at the root
        while p != root:
            next_p = self.parent[p]
            self.parent[p] = root
            p = next_p

        return root

    def connected(self, p: int, q: int) -> bool:
        self._validate(p)
        self._validate(q)
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int):
        """
        Merges the component of 'p' with the component of 'q'.
        On equal sizes the tree of 'q' goes under the root of 'p'.
        """
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        if self.size[rootP] < self.size[rootQ]:
            self.parent[rootP] = rootQ
            self.size[rootQ] += self.size[rootP]
        else:
            self.parent[rootQ] = rootP
            self.size[rootP] += self.size[rootQ]

        self.count -= 1
