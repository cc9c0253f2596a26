# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Position-wise comparison of two sequences without alignment.
"""

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["count_mismatches", "transition_transversion_ratio"]

import warnings
import numpy as np
from .alphabet import common_alphabet
from .error import DegenerateSequenceWarning
from .seqtypes import NucleotideSequence


def _truncated_codes(sequence1, sequence2):
    """
    Get the sequence codes of both sequences, truncated to the length
    of the shorter one.
    """
    if common_alphabet([sequence1.alphabet, sequence2.alphabet]) is None:
        raise ValueError("The sequences alphabets are not compatible")
    length = min(len(sequence1), len(sequence2))
    return sequence1.code[:length], sequence2.code[:length]


def count_mismatches(sequence1, sequence2):
    """
    Count the positions at which two sequences have different symbols.

    Only the positions up to the length of the shorter sequence are
    compared, surplus positions of the longer sequence are ignored.

    Parameters
    ----------
    sequence1, sequence2 : Sequence
        The sequences to compare.
        Their alphabets must be compatible.

    Returns
    -------
    mismatches : int
        The number of mismatching positions.

    Examples
    --------

    >>> print(count_mismatches(DNASequence("GAGCCT"), DNASequence("CATCGTAA")))
    3
    """
    code1, code2 = _truncated_codes(sequence1, sequence2)
    return int(np.count_nonzero(code1 != code2))


def transition_transversion_ratio(sequence1, sequence2):
    """
    Calculate the ratio of transitions to transversions between two
    nucleotide sequences.

    A point mutation between two purines or between two pyrimidines is
    a *transition*, a mutation from a purine to a pyrimidine or vice
    versa is a *transversion*.
    Like in :func:`count_mismatches()`, only the positions up to the
    length of the shorter sequence are compared.

    Parameters
    ----------
    sequence1, sequence2 : NucleotideSequence
        The sequences to compare.

    Returns
    -------
    ratio : float
        The number of transitions divided by the number of
        transversions.
        If no transversion occurs, the ratio is infinite, or *NaN* if
        no transition occurs either.
        In both cases a :class:`DegenerateSequenceWarning` is issued.

    Examples
    --------

    >>> print(transition_transversion_ratio(
    ...     DNASequence("GCAACGCA"), DNASequence("GTATCTCA")
    ... ))
    0.5
    """
    for sequence in (sequence1, sequence2):
        if not isinstance(sequence, NucleotideSequence):
            raise TypeError(
                f"Expected a nucleotide sequence, not '{type(sequence).__name__}'"
            )
    code1, code2 = _truncated_codes(sequence1, sequence2)
    length = len(code1)
    purine1 = sequence1.is_purine()[:length]
    purine2 = sequence2.is_purine()[:length]
    pyrimidine1 = sequence1.is_pyrimidine()[:length]
    pyrimidine2 = sequence2.is_pyrimidine()[:length]

    mutated = code1 != code2
    same_class = (purine1 & purine2) | (pyrimidine1 & pyrimidine2)
    transitions = np.count_nonzero(mutated & same_class)
    transversions = np.count_nonzero(mutated & ~same_class)

    if transversions == 0:
        warnings.warn(
            f"No transversions between the sequences, "
            f"found {transitions} transitions",
            DegenerateSequenceWarning,
        )
        return np.inf if transitions > 0 else np.nan
    return transitions / transversions
