"""
N-percentile of a sequence of numbers.

The N50 of a set of values is the value at which the running sum of the
ascending values first exceeds half of the total. N80, N90 etc. use 80%,
90% of the total. Note this is a percentile by mass, not by count.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pycook.core.validation import check_vector


def n_percentile(
    values: ArrayLike,
    percentile: float = 50,
) -> tuple[float, int] | None:
    """
    Find the first sorted value whose running sum crosses a threshold.

    Values are sorted ascending and summed in order; the result is the
    first value at which the running sum strictly exceeds
    total * percentile / 100.

    Parameters
    ----------
    values : array-like
        1D finite numeric values.
    percentile : float
        Percentage of the total sum, default 50.

    Returns
    -------
    (value, rank) or None
        rank is the 1-based number of sorted values consumed. None when no
        running sum exceeds the threshold, including empty input.

    Examples
    --------
    >>> n_percentile([1, 2, 3, 4])
    (3.0, 3)
    >>> n_percentile([1, 2, 3, 4], 90)
    (4.0, 4)
    """
    nums = np.sort(check_vector(values, 'values'))
    if nums.shape[0] == 0:
        return None

    running = np.cumsum(nums)
    threshold = running[-1] * percentile / 100
    crossed = np.nonzero(running > threshold)[0]
    if crossed.shape[0] == 0:
        return None

    i = int(crossed[0])
    return (float(nums[i]), i + 1)
