"""Pixel traversal orders and 4:2:0 chroma site selection.

A traversal decides the order in which source pixels are written to the
luma plane, and which of the visited pixels contribute a chroma sample.
One chroma sample covers a 2x2 block of the traversal, so the sample grid
is always every second row and every second column *of the visit order*,
never of the untransformed source when a rotation is active.
"""

from enum import Enum

import numpy as np
from numpy.typing import NDArray


def even_extent(n: int) -> int:
    """Largest even number not above n."""
    return n - (n % 2)


class Traversal(Enum):
    """Order in which source pixels are visited."""

    # Row-major: rows top to bottom, columns left to right
    IDENTITY = "identity"
    # Source columns left to right, each walked from the bottom row up.
    # The visit sequence is the row-major order of the image turned a
    # quarter turn, without transposing the declared width and height.
    ROTATE_90_CCW = "rotate_90_ccw"

    def visit(self, frame: NDArray[np.uint8]) -> NDArray[np.uint8]:
        """Lay out a frame in visit order.

        Args:
            frame: numpy array of shape (H, W, C).

        Returns:
            A view whose row-major order is the visit order: the frame itself
            for IDENTITY, an array of shape (W, H, C) with
            ``visited[j, k] == frame[H - 1 - k, j]`` for ROTATE_90_CCW.
        """
        if self is Traversal.IDENTITY:
            return frame
        return frame.transpose(1, 0, 2)[:, ::-1]

    def chroma_sites(self, visited: NDArray[np.uint8]) -> NDArray[np.uint8]:
        """Select the visited pixels that emit a chroma sample, in visit order.

        Only complete 2x2 blocks emit; a trailing odd row or column is
        skipped.

        Args:
            visited: Output of visit().
        """
        rows, cols = visited.shape[:2]
        if self is Traversal.IDENTITY:
            return visited[0:even_extent(rows):2, 0:even_extent(cols):2]
        # Inner index k = H - 1 - i, so "H - i even" is "k odd"
        return visited[0:even_extent(rows):2, 1:cols:2]

    def emits_chroma(self, i: int, j: int, width: int, height: int) -> bool:
        """Decide whether source pixel (row i, column j) emits chroma.

        Scalar form of chroma_sites(), expressed on source coordinates.
        """
        if self is Traversal.IDENTITY:
            return i % 2 == 0 and j % 2 == 0 and i < even_extent(height) and j < even_extent(width)
        return j % 2 == 0 and (height - i) % 2 == 0 and j < even_extent(width)
