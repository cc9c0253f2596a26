# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The module contains the :class:`Sequence` superclass.
"""

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["Sequence"]

import abc
import numpy as np


class Sequence(metaclass=abc.ABCMeta):
    """
    The abstract base class for all sequence types.

    A :class:`Sequence` can be seen as a succession of symbols, that
    are elements in the allowed set of symbols, the :class:`Alphabet`.
    Internally, a :class:`Sequence` object uses a *NumPy*
    :class:`ndarray` of integers, where each integer represents a
    symbol.
    The :class:`Alphabet` of a :class:`Sequence` object is used to
    encode each symbol, that is used to create the :class:`Sequence`,
    into an integer.
    These integer values are called *symbol code*, the encoding of an
    entire sequence of symbols is called *sequence code*.

    The size of the *symbol code* type in the array is determined by
    the size of the :class:`Alphabet`:
    If the :class:`Alphabet` contains 256 symbols or less, one byte is
    used per array element; if the :class:`Alphabet` contains between
    257 and 65536 symbols, two bytes are used, and so on.

    :class:`Sequence` objects are immutable:
    The sequence code is a read-only array and every operation returns
    a new object.
    Hence, sequences are hashable and can be used in sets or as
    dictionary keys.

    Two :class:`Sequence` objects are equal if they are instances of
    the same class, have the same :class:`Alphabet` and have equal
    sequence codes.
    Comparison with a string or list of symbols evaluates always to
    false.

    A :class:`Sequence` can be indexed by any 1-D index a
    :class:`ndarray` accepts.
    If the index is a single integer, the decoded symbol at that
    position is returned, otherwise a subsequence is returned.
    Concatenation of two sequences is achieved with the '+' operator.

    Each subclass of :class:`Sequence` needs to overwrite the abstract
    method :func:`get_alphabet()`, which specifies the alphabet the
    :class:`Sequence` uses.

    Parameters
    ----------
    sequence : iterable object, optional
        The symbol sequence, the :class:`Sequence` is initialized with.
        For alphabets containing single letter strings, this parameter
        may also be a :class:`str` object.
        By default the sequence is empty.

    Attributes
    ----------
    code : ndarray
        The sequence code (read-only).
    symbols : list
        The list of symbols, represented by the sequence.
    alphabet : Alphabet
        The alphabet of this sequence. Cannot be set.
        Equal to `get_alphabet()`.

    Examples
    --------

    >>> dna_seq = DNASequence("ACGTA")
    >>> print(dna_seq)
    ACGTA
    >>> print(dna_seq.code)
    [0 1 2 3 0]
    >>> print(dna_seq[1:3])
    CG
    >>> print(dna_seq[[0,2,4]])
    AGA
    >>> print(dna_seq.subsequence(1, 3))
    CGT
    >>> print(dna_seq.reverse())
    ATGCA
    >>> print(dna_seq + dna_seq.reverse())
    ACGTAATGCA
    """

    def __init__(self, sequence=()):
        if len(sequence) == 0:
            self._set_code(np.zeros(0))
        else:
            self._set_code(self.get_alphabet().encode_multiple(sequence))

    def copy(self, new_seq_code=None):
        """
        Copy the object.

        Parameters
        ----------
        new_seq_code : ndarray, optional
            If this parameter is set, the sequence code is set to this
            value, rather than the original sequence code.

        Returns
        -------
        copy
            A copy of this object.
        """
        clone = self.__copy_create__()
        if new_seq_code is None:
            clone._set_code(self._code)
        else:
            clone._set_code(new_seq_code)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new, empty object of this class.

        This method must be overridden, if the constructor takes
        parameters.
        """
        return type(self)()

    @property
    def code(self):
        return self._code

    @property
    def symbols(self):
        return self.get_alphabet().decode_multiple(self._code)

    @property
    def alphabet(self):
        return self.get_alphabet()

    def _set_code(self, code):
        # Always copy to avoid sharing the buffer with another object
        code = np.array(code, dtype=Sequence.dtype(len(self.get_alphabet())))
        code.setflags(write=False)
        self._code = code

    @abc.abstractmethod
    def get_alphabet(self):
        """
        Get the :class:`Alphabet` of the :class:`Sequence`.

        This method must be overwritten, when subclassing
        :class:`Sequence`.

        Returns
        -------
        alphabet : Alphabet
            :class:`Sequence` alphabet.
        """
        pass

    def reverse(self):
        """
        Reverse the :class:`Sequence`.

        Returns
        -------
        reversed : Sequence
            The reversed :class:`Sequence`.

        Examples
        --------

        >>> dna_seq = DNASequence("ACGTA")
        >>> dna_seq_rev = dna_seq.reverse()
        >>> print(dna_seq_rev)
        ATGCA
        """
        return self.copy(self._code[::-1])

    def is_valid(self):
        """
        Check, if the sequence contains a valid sequence code.

        A sequence code is valid, if at each sequence position the
        code is smaller than the size of the alphabet.

        Returns
        -------
        valid : bool
            True, if the sequence is valid, false otherwise.
        """
        return bool((self._code < len(self.get_alphabet())).all())

    def get_symbol_frequency(self, only_observed=False):
        """
        Get the number of occurences of each symbol in the sequence.

        By default every symbol of the alphabet is a key, including
        symbols with a count of zero.
        Use ``only_observed=True`` to count only the symbols, that
        actually appear in the sequence.

        Parameters
        ----------
        only_observed : bool, optional
            If true, symbols that do not occur in the sequence are
            omitted from the returned dictionary.

        Returns
        -------
        frequency : dict
            A dictionary containing the symbols as keys and the
            corresponding number of occurences in the sequence as
            values.

        Examples
        --------

        >>> dna_seq = DNASequence("ACGCGA")
        >>> print(dna_seq.get_symbol_frequency())
        {'A': 2, 'C': 2, 'G': 2, 'T': 0}
        >>> print(dna_seq.get_symbol_frequency(only_observed=True))
        {'A': 2, 'C': 2, 'G': 2}
        """
        alphabet = self.get_alphabet()
        counts = np.bincount(self._code, minlength=len(alphabet))
        return {
            symbol: int(count)
            for symbol, count in zip(alphabet.get_symbols(), counts)
            if count > 0 or not only_observed
        }

    def subsequence(self, start, stop):
        """
        Get the subsequence between two positions, both inclusive.

        Parameters
        ----------
        start, stop : int
            The first and last position of the subsequence.

        Returns
        -------
        subsequence : Sequence
            The subsequence.

        Raises
        ------
        IndexError
            If `start` or `stop` is outside the sequence or `start` is
            larger than `stop`.

        Examples
        --------

        >>> dna_seq = DNASequence("ACGTA")
        >>> print(dna_seq.subsequence(2, 2))
        G
        """
        if start < 0 or start >= len(self):
            raise IndexError(
                f"Start index {start} is out of range for a sequence of "
                f"length {len(self)}"
            )
        if stop < 0 or stop >= len(self):
            raise IndexError(
                f"Stop index {stop} is out of range for a sequence of "
                f"length {len(self)}"
            )
        if start > stop:
            raise IndexError(
                f"Start index {start} is larger than stop index {stop}"
            )
        return self.copy(self._code[start : stop + 1])

    def __getitem__(self, index):
        alph = self.get_alphabet()
        sub_seq = self._code.__getitem__(index)
        if isinstance(sub_seq, np.ndarray):
            return self.copy(sub_seq)
        else:
            return alph.decode(sub_seq)

    def __len__(self):
        return len(self._code)

    def __iter__(self):
        alph = self.get_alphabet()
        for code in self._code:
            yield alph.decode(code)

    def __eq__(self, item):
        if not isinstance(item, type(self)):
            return False
        if self.get_alphabet() != item.get_alphabet():
            return False
        return np.array_equal(self._code, item._code)

    def __ne__(self, item):
        return not self == item

    def __hash__(self):
        return hash((type(self), self.get_alphabet(), self._code.tobytes()))

    def __str__(self):
        alph = self.get_alphabet()
        return "".join([str(e) for e in alph.decode_multiple(self._code)])

    def __add__(self, sequence):
        if self.get_alphabet().extends(sequence.get_alphabet()):
            new_code = np.concatenate((self._code, sequence._code))
            return self.copy(new_code)
        elif sequence.get_alphabet().extends(self.get_alphabet()):
            new_code = np.concatenate((self._code, sequence._code))
            return sequence.copy(new_code)
        else:
            raise ValueError("The sequences alphabets are not compatible")

    @staticmethod
    def dtype(alphabet_size):
        """
        Get the sequence code dtype required for the given size of the
        alphabet.

        Parameters
        ----------
        alphabet_size : int
            The size of the alphabet.

        Returns
        -------
        dtype
            The :class:`dtype`, that is large enough to store symbol
            codes, that are encoded by an :class:`Alphabet` of the given
            size.
        """
        _size_uint8 = np.iinfo(np.uint8).max + 1
        _size_uint16 = np.iinfo(np.uint16).max + 1
        _size_uint32 = np.iinfo(np.uint32).max + 1
        if alphabet_size <= _size_uint8:
            return np.uint8
        elif alphabet_size <= _size_uint16:
            return np.uint16
        elif alphabet_size <= _size_uint32:
            return np.uint32
        else:
            return np.uint64
