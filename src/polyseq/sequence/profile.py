# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["SequenceProfile", "profile", "consensus"]

from numbers import Integral
import numpy as np
from .alphabet import common_alphabet
from .motif import longest_sequence
from .seqtypes import DNASequence, GeneralSequence, ProteinSequence, RNASequence


def _sequence_type_for(alphabet):
    """
    Create an empty sequence of the type, that is associated with the
    given alphabet.
    """
    for seq_type in (DNASequence, RNASequence, ProteinSequence):
        if seq_type.alphabet == alphabet:
            return seq_type()
    return GeneralSequence(alphabet)


class SequenceProfile(object):
    """
    A :class:`SequenceProfile` object stores the position-wise symbol
    occurences of a set of sequences.
    It is possible to calculate and return its consensus sequence.

    This class saves the position frequency matrix
    (position count matrix) 'symbols' of the occurrences of each
    alphabet symbol at each position.
    The sequences are aligned at their first position, the profile
    length is the length of the longest sequence.
    The number of sequences that end before a position is saved in the
    array 'gaps'.

    With :meth:`from_sequences()` a :class:`SequenceProfile` object can
    be created from an indefinite number of sequences.

    All attributes of this class are publicly accessible.

    Parameters
    ----------
    symbols : ndarray, dtype=int, shape=(n,k)
        This matrix simply saves for each position how often absolutely
        each symbol is present.
    gaps : ndarray, dtype=int, shape=n
        Array which indicates the number of sequences not covering
        each position.
    alphabet : Alphabet, length=k
        Alphabet of sequences of sequence profile.

    Attributes
    ----------
    symbols : ndarray, dtype=int, shape=(n,k)
        This matrix simply saves for each position how often absolutely
        each symbol is present.
    gaps : ndarray, dtype=int, shape=n
        Array which indicates the number of sequences not covering
        each position.
    alphabet : Alphabet, length=k
        Alphabet of sequences of sequence profile.

    Examples
    --------

    >>> sequences = [
    ...     DNASequence("CGCTCAT"),
    ...     DNASequence("CGCTATTC"),
    ...     DNASequence("CCCTCAATC"),
    ... ]
    >>> profile = SequenceProfile.from_sequences(sequences)
    >>> print(profile)
      A C G T
    0 0 3 0 0
    1 0 1 2 0
    2 0 3 0 0
    3 0 0 0 3
    4 1 2 0 0
    5 2 0 0 1
    6 1 0 0 2
    7 0 1 0 1
    8 0 1 0 0
    >>> print(profile.gaps)
    [0 0 0 0 0 0 0 1 2]
    >>> print(profile.to_consensus())
    CGCTCATCC
    """

    def __init__(self, symbols, gaps, alphabet):
        self._symbols = symbols
        self._gaps = gaps
        self._alphabet = alphabet

        if len(alphabet) != symbols.shape[1]:
            raise ValueError(
                f"The given alphabet doesn't have the same length "
                f"({len(alphabet)}) as the number of columns "
                f"({symbols.shape[1]}) in the 'symbols' frequency table."
            )

        if gaps.shape[0] != symbols.shape[0]:
            raise ValueError(
                f"The given 'gaps' position matrix doesn't have the same "
                f"length ({gaps.shape[0]}) as the 'symbols' "
                f"frequency table ({symbols.shape[0]})"
            )

    @property
    def symbols(self):
        return self._symbols

    @property
    def gaps(self):
        return self._gaps

    @property
    def alphabet(self):
        return self._alphabet

    def __str__(self):
        # Add an additional row and column for the position and symbol indicators
        print_matrix = np.full(
            (self.symbols.shape[0] + 1, self.symbols.shape[1] + 1), "", dtype=object
        )
        print_matrix[1:, 1:] = self.symbols.astype(str)
        print_matrix[0, 1:] = [str(sym) for sym in self.alphabet]
        print_matrix[1:, 0] = [str(i) for i in range(self.symbols.shape[0])]
        max_len = len(max(print_matrix.flatten(), key=len))
        return "\n".join(
            [
                " ".join([str(cell).rjust(max_len) for cell in row])
                for row in print_matrix
            ]
        )

    def __repr__(self):
        return (
            f"SequenceProfile(np.{np.array_repr(self.symbols)}, "
            f"np.{np.array_repr(self.gaps)}, Alphabet({self.alphabet}))"
        )

    def __eq__(self, item):
        if not isinstance(item, SequenceProfile):
            return False
        if not np.array_equal(self.symbols, item.symbols):
            return False
        if not np.array_equal(self.gaps, item.gaps):
            return False
        if not self.alphabet == item.alphabet:
            return False
        return True

    @staticmethod
    def from_sequences(sequences, alphabet=None):
        """
        Create a :class:`SequenceProfile` from sequences.

        The sequences do not need to have the same length:
        A position beyond the end of a shorter sequence does not count
        any symbol for this sequence.

        Parameters
        ----------
        sequences : iterable object of Sequence
            The sequences to create the profile from.
        alphabet : Alphabet, optional
            This alphabet will be used when creating the
            :class:`SequenceProfile` object.
            It must extend the alphabets of all `sequences`.
            By default, the common alphabet of the `sequences` is used.

        Returns
        -------
        profile: SequenceProfile or None
            The created :class:`SequenceProfile` object.
            ``None`` if `sequences` is empty.

        Raises
        ------
        ValueError
            If the alphabets of the sequences are incompatible.
        """
        sequences = list(sequences)
        if len(sequences) == 0:
            return None
        if alphabet is None:
            alphabet = common_alphabet([seq.alphabet for seq in sequences])
            if alphabet is None:
                raise ValueError(
                    "There is no common alphabet that extends all alphabets"
                )
        else:
            for alph in (seq.alphabet for seq in sequences):
                if not alphabet.extends(alph):
                    raise ValueError(
                        "The given alphabet is incompatible with a least one "
                        "alphabet of the given sequences"
                    )
        length = len(longest_sequence(sequences))
        symbols = np.zeros((length, len(alphabet)), dtype=int)
        gaps = np.zeros(length, dtype=int)
        for seq in sequences:
            # As the profile alphabet extends the sequence alphabet,
            # the symbol codes are also valid column indices
            np.add.at(symbols, (np.arange(len(seq)), seq.code), 1)
            gaps[len(seq) :] += 1
        return SequenceProfile(symbols, gaps, alphabet)

    def to_dict(self):
        """
        Get the position-wise occurences for each symbol, that occurs
        in the profile.

        Returns
        -------
        profile_dict : dict of (object -> list of int)
            Maps each symbol that occurs at least once to its number of
            occurences at each position.
            Symbols that never occur are omitted.

        Examples
        --------

        >>> sequences = [DNASequence("ACCT"), DNASequence("AGC")]
        >>> profile = SequenceProfile.from_sequences(sequences)
        >>> print(profile.to_dict())
        {'A': [2, 0, 0, 0], 'C': [0, 1, 2, 0], 'G': [0, 1, 0, 0], 'T': [0, 0, 0, 1]}
        """
        return {
            symbol: [int(count) for count in self.symbols[:, i]]
            for i, symbol in enumerate(self.alphabet)
            if self.symbols[:, i].any()
        }

    def to_consensus(self):
        """
        Get the consensus sequence for this :class:`SequenceProfile`
        object.

        At each position the symbol with the most occurences is taken.
        In case there is more than one symbol with the same maximal
        occurrences, the symbol that comes first in the alphabet is
        taken.

        Returns
        -------
        consensus : Sequence or None
            The consensus sequence.
            The type is derived from the alphabet of the profile:
            :class:`DNASequence`, :class:`RNASequence`,
            :class:`ProteinSequence` or :class:`GeneralSequence`.
            ``None``, if there is a position without any occurence.
        """
        if (np.sum(self.symbols, axis=1) == 0).any():
            return None
        consensus = _sequence_type_for(self.alphabet)
        return consensus.copy(np.argmax(self.symbols, axis=1))

    def probability_matrix(self, pseudocount=0):
        r"""
        Calculate the position probability matrix (PPM) based on
        'symbols' and the given pseudocount.
        This new matrix has the same shape as 'symbols'.

        .. math::

            P(S) = \frac {C_S + \frac{c_p}{k}} {\sum_{i} C_i + c_p}

        :math:`S`: The symbol.

        :math:`C_S`: The count of symbol :math:`S` at the sequence
        position.

        :math:`c_p`: The pseudocount.

        :math:`k`: Length of the alphabet.

        Parameters
        ----------
        pseudocount : int, optional
            Amount added to the number of observed cases in order to
            change the expected probability of the PPM.

        Returns
        -------
        ppm : ndarray, dtype=float, shape=(n,k)
            The calculated the position probability matrix.
        """
        if pseudocount < 0:
            raise ValueError("Pseudocount can not be smaller than zero.")
        return (self.symbols + pseudocount / self.symbols.shape[1]) / (
            np.sum(self.symbols, axis=1)[:, np.newaxis] + pseudocount
        )

    def __getitem__(self, index):
        if isinstance(index, Integral):
            # Do not allow to collapse dimensions
            index = slice(index, index + 1)
        return SequenceProfile(self.symbols[index], self.gaps[index], self.alphabet)

    def __len__(self):
        return len(self.symbols)


def profile(sequences):
    """
    Count the occurences of each symbol at each position of the given
    sequences.

    This is a shortcut for
    ``SequenceProfile.from_sequences(sequences).to_dict()``.

    Parameters
    ----------
    sequences : iterable object of Sequence
        The sequences to create the profile from.

    Returns
    -------
    profile_dict : dict of (object -> list of int) or None
        Maps each occuring symbol to its number of occurences at each
        position.
        Each list has the length of the longest sequence.
        ``None`` if `sequences` is empty.
    """
    seq_profile = SequenceProfile.from_sequences(sequences)
    if seq_profile is None:
        return None
    return seq_profile.to_dict()


def consensus(sequences):
    """
    Get the consensus sequence of the given sequences.

    This is a shortcut for
    ``SequenceProfile.from_sequences(sequences).to_consensus()``.

    Parameters
    ----------
    sequences : iterable object of Sequence
        The sequences to create the consensus from.

    Returns
    -------
    consensus : Sequence or None
        The consensus sequence, that has the length of the longest
        sequence.
        ``None`` if `sequences` is empty.

    Examples
    --------

    >>> sequences = [DNASequence(s) for s in ["ATCCAGCT", "GGGCAACT", "ATGGATCT"]]
    >>> print(consensus(sequences))
    ATGCAACT
    """
    seq_profile = SequenceProfile.from_sequences(sequences)
    if seq_profile is None:
        return None
    return seq_profile.to_consensus()
