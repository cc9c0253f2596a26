# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["shortest_sequence", "longest_sequence", "find_shared_subsequence"]

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def shortest_sequence(sequences):
    """
    Get the shortest of the given sequences.

    Parameters
    ----------
    sequences : iterable object of Sequence
        The sequences to choose from.

    Returns
    -------
    shortest : Sequence or None
        The first sequence with minimal length.
        ``None`` if `sequences` is empty.
    """
    return min(sequences, key=len, default=None)


def longest_sequence(sequences):
    """
    Get the longest of the given sequences.

    Parameters
    ----------
    sequences : iterable object of Sequence
        The sequences to choose from.

    Returns
    -------
    longest : Sequence or None
        The first sequence with maximal length.
        ``None`` if `sequences` is empty.
    """
    return max(sequences, key=len, default=None)


def find_shared_subsequence(sequences):
    """
    Find the longest contiguous subsequence, that is shared by all
    given sequences.

    The candidate subsequences are taken from the shortest sequence,
    starting with the longest candidates.
    If multiple shared subsequences have the same maximal length, the
    one that appears first in the shortest sequence is returned.

    Each prefix of a shared subsequence is shared as well, hence the
    maximal length is found by a binary search over the subsequence
    length.

    Parameters
    ----------
    sequences : iterable object of Sequence
        The sequences to search in.

    Returns
    -------
    shared : Sequence or None
        The longest shared subsequence.
        ``None`` if `sequences` is empty or the sequences have not a
        single symbol in common.

    Raises
    ------
    ValueError
        If the alphabet of a sequence does not extend the alphabet of
        the shortest sequence.

    Examples
    --------

    >>> sequences = [DNASequence("ACGTACGT"), DNASequence("AACCGTATA")]
    >>> print(find_shared_subsequence(sequences))
    CGTA
    """
    sequences = list(sequences)
    shortest = shortest_sequence(sequences)
    if shortest is None:
        return None
    for sequence in sequences:
        if not sequence.get_alphabet().extends(shortest.get_alphabet()):
            raise ValueError("The sequences alphabets are not equal")

    # Lower bound is always shared, upper bound may be shared
    min_size = 0
    max_size = len(shortest)
    while min_size < max_size:
        size = (min_size + max_size + 1) // 2
        if len(_shared_windows(sequences, size)) > 0:
            min_size = size
        else:
            max_size = size - 1
    if min_size == 0:
        return None

    shared = _shared_windows(sequences, min_size)
    for i, window in enumerate(_windows(shortest, min_size)):
        if window.tobytes() in shared:
            return shortest[i : i + min_size]


def _windows(sequence, size):
    # Uniform dtype for comparable window bytes
    return sliding_window_view(sequence.code.astype(np.int64), size)


def _shared_windows(sequences, size):
    """
    Get the subsequences of the given size, that appear in all
    sequences, as bytes of their code.
    """
    shared = None
    for sequence in sequences:
        windows = set(window.tobytes() for window in _windows(sequence, size))
        shared = windows if shared is None else shared & windows
        if len(shared) == 0:
            break
    return shared
