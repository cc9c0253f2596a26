# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = [
    "find_subsequence",
    "contains_subsequence",
    "all_contain_subsequence",
    "find_palindromes",
]

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from .seqtypes import NucleotideSequence


def _check_query(sequence, query):
    if not sequence.get_alphabet().extends(query.get_alphabet()):
        raise ValueError("The sequences alphabets are not equal")
    if len(query) == 0:
        raise ValueError("The query sequence is empty")


def find_subsequence(sequence, query):
    """
    Find a subsequence in a sequence.

    Parameters
    ----------
    sequence : Sequence
        The sequence to find the subsequence in.
    query : Sequence
        The potential subsequence. Its alphabet must extend the
        `sequence` alphabet.

    Returns
    -------
    match_indices : ndarray
        The starting indices in `sequence`, where `query` has been
        found, in ascending order.
        Overlapping matches are included.
        The array is empty if no match has been found.

    Raises
    ------
    ValueError
        If the `query` alphabet does not extend the `sequence` alphabet
        or if `query` is empty.

    Examples
    --------

    >>> main_seq = DNASequence("ACTGAATGA")
    >>> sub_seq = DNASequence("TGA")
    >>> print(find_subsequence(main_seq, sub_seq))
    [2 6]
    >>> print(find_subsequence(DNASequence("AAAA"), DNASequence("AA")))
    [0 1 2]
    """
    _check_query(sequence, query)
    if len(query) > len(sequence):
        return np.zeros(0, dtype=int)
    windows = sliding_window_view(sequence.code, len(query))
    return np.where(np.all(windows == query.code, axis=1))[0]


def contains_subsequence(sequence, query):
    """
    Check whether a sequence contains a subsequence.

    In contrast to :func:`find_subsequence()` only the presence of a
    match is reported.

    Parameters
    ----------
    sequence : Sequence
        The sequence to find the subsequence in.
    query : Sequence
        The potential subsequence. Its alphabet must extend the
        `sequence` alphabet.

    Returns
    -------
    contains : bool
        True, if `query` occurs at least once in `sequence`.

    Examples
    --------

    >>> print(contains_subsequence(DNASequence("ACGTACGT"), DNASequence("TAC")))
    True
    >>> print(contains_subsequence(DNASequence("ACGTACGT"), DNASequence("TT")))
    False
    """
    _check_query(sequence, query)
    if len(query) > len(sequence):
        return False
    windows = sliding_window_view(sequence.code, len(query))
    return bool(np.all(windows == query.code, axis=1).any())


def all_contain_subsequence(sequences, query):
    """
    Check whether each of the given sequences contains a subsequence.

    Parameters
    ----------
    sequences : iterable object of Sequence
        The sequences to find the subsequence in.
    query : Sequence
        The potential subsequence.

    Returns
    -------
    contain : bool
        True, if `query` occurs in each of the `sequences`.
    """
    return all(contains_subsequence(sequence, query) for sequence in sequences)


def find_palindromes(sequence, min_length, max_length):
    """
    Find all subsequences that equal their own reverse complement.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to search in.
    min_length, max_length : int
        The minimum and maximum length of the palindromes,
        both inclusive.

    Returns
    -------
    palindromes : dict of (NucleotideSequence -> list of int)
        Maps each palindromic subsequence to the ascending starting
        indices of its occurences.
        The palindromes are ordered by length first and by their first
        occurence second.

    Raises
    ------
    ValueError
        If `min_length` is smaller than 1 or larger than `max_length`.

    Examples
    --------

    Find restriction sites in a sequence:

    >>> dna_seq = DNASequence("TCAATGCATGCGGGTCTATATGCAT")
    >>> for palindrome, indices in find_palindromes(dna_seq, 4, 6).items():
    ...     print(palindrome, indices)
    TGCA [4, 20]
    CATG [6]
    TATA [16]
    ATAT [17]
    ATGCAT [3, 19]
    GCATGC [5]
    """
    if not isinstance(sequence, NucleotideSequence):
        raise TypeError(
            f"Expected a nucleotide sequence, not '{type(sequence).__name__}'"
        )
    if min_length < 1:
        raise ValueError(f"Minimum length must be positive, not {min_length}")
    if min_length > max_length:
        raise ValueError(
            f"Minimum length {min_length} is larger than "
            f"maximum length {max_length}"
        )
    code = sequence.code
    rev_compl_code = sequence.reverse_complement().code
    length = len(sequence)
    palindromes = {}
    for size in range(min_length, max_length + 1):
        for i in range(length - size + 1):
            # The reverse complement of the window starting at 'i' is
            # located at the mirrored position of the reverse complement
            mirror = length - i - size
            if np.array_equal(code[i : i + size], rev_compl_code[mirror : mirror + size]):
                palindromes.setdefault(sequence[i : i + size], []).append(i)
    return palindromes
