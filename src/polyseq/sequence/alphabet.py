# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Alphabets translate between the symbols of a sequence and the integer
symbol codes, that are stored internally.
"""

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = [
    "Alphabet",
    "LetterAlphabet",
    "AlphabetMapper",
    "AlphabetError",
    "common_alphabet",
]

import string
from numbers import Integral
import numpy as np


class AlphabetError(Exception):
    """
    Raised, when a symbol is not part of an :class:`Alphabet` or a
    symbol code is out of its range.
    """

    pass


class Alphabet(object):
    """
    An ordered set of symbols, that may occur in a :class:`Sequence`.

    The symbol code of a symbol is its position in the alphabet.
    Any hashable object can be a symbol, although most alphabets
    consist of single letters.

    An alphabet *extends* another alphabet, if it starts with exactly
    the symbols of the other one, so that the symbol codes of the other
    alphabet stay valid.
    Each alphabet extends itself.

    Objects of this class are immutable.

    Parameters
    ----------
    symbols : iterable object
        The symbols of the alphabet, in the order of their codes.

    Examples
    --------

    >>> alph = Alphabet(["A","C","G","T"])
    >>> print(alph.encode("G"))
    2
    >>> print(alph.decode(2))
    G
    >>> try:
    ...    alph.encode("foo")
    ... except AlphabetError as e:
    ...    print(e)
    Symbol 'foo' is not in the alphabet
    >>> Alphabet(["A","C","G","T","N"]).extends(alph)
    True
    >>> alph.extends(Alphabet(["A","C","G","T","N"]))
    False
    """

    def __init__(self, symbols):
        self._symbols = tuple(symbols)
        if len(self._symbols) == 0:
            raise ValueError("An alphabet needs at least one symbol")
        self._codes = {symbol: i for i, symbol in enumerate(self._symbols)}

    def __repr__(self):
        return f"Alphabet({self._symbols})"

    def get_symbols(self):
        """
        Get the symbols in the alphabet.

        Returns
        -------
        symbols : tuple
            The symbols, ordered by their symbol code.
        """
        return self._symbols

    def extends(self, alphabet):
        """
        Check, if this alphabet extends another alphabet.

        Parameters
        ----------
        alphabet : Alphabet
            The potential parent alphabet.

        Returns
        -------
        result : bool
            True, if the first symbols of this alphabet are the symbols
            of `alphabet`.
        """
        if alphabet is self:
            return True
        symbols = self.get_symbols()
        parent_symbols = alphabet.get_symbols()
        return symbols[: len(parent_symbols)] == parent_symbols

    def encode(self, symbol):
        """
        Get the symbol code of a symbol.

        Parameters
        ----------
        symbol : object
            The symbol to encode.

        Returns
        -------
        code : int
            The symbol code.

        Raises
        ------
        AlphabetError
            If `symbol` is not in the alphabet.
        """
        code = self._codes.get(symbol)
        if code is None:
            raise AlphabetError(f"Symbol {repr(symbol)} is not in the alphabet")
        return code

    def decode(self, code):
        """
        Get the symbol for a symbol code.

        Parameters
        ----------
        code : int
            The symbol code to decode.

        Returns
        -------
        symbol : object
            The symbol.

        Raises
        ------
        AlphabetError
            If `code` is out of range.
        """
        if not 0 <= code < len(self):
            raise AlphabetError(f"'{code:d}' is not a valid code")
        return self.get_symbols()[code]

    def encode_multiple(self, symbols):
        """
        Encode an iterable of symbols into a sequence code.

        Parameters
        ----------
        symbols : iterable object
            The symbols to encode.

        Returns
        -------
        code : ndarray, dtype=int
            The sequence code.
        """
        return np.array([self.encode(symbol) for symbol in symbols], dtype=np.int64)

    def decode_multiple(self, code):
        """
        Decode a sequence code into symbols.

        Parameters
        ----------
        code : iterable object of int
            The sequence code.

        Returns
        -------
        symbols : list
            The decoded symbols.
        """
        return [self.decode(c) for c in code]

    def __str__(self):
        return str(self.get_symbols())

    def __len__(self):
        return len(self.get_symbols())

    def __iter__(self):
        return iter(self.get_symbols())

    def __contains__(self, symbol):
        return symbol in self._codes

    def __hash__(self):
        return hash(self.get_symbols())

    def __eq__(self, item):
        if not isinstance(item, Alphabet):
            return False
        return self.get_symbols() == item.get_symbols()


class LetterAlphabet(Alphabet):
    """
    An :class:`Alphabet` of single printable ASCII letters, as used for
    nucleotide and protein sequences.

    Instead of a dictionary, a lookup table over all byte values is
    used, so that whole strings are encoded at once.

    Parameters
    ----------
    symbols : iterable object or str
        The letters of the alphabet, in the order of their codes.

    Examples
    --------

    >>> alph = LetterAlphabet("ACGU")
    >>> print(alph.encode_multiple("GAUC"))
    [2 0 3 1]
    >>> print("".join(alph.decode_multiple([3, 3, 0])))
    UUA
    """

    # Letters, that are neither whitespace nor control characters
    _allowed = frozenset(string.digits + string.ascii_letters + string.punctuation)

    def __init__(self, symbols):
        letters = [_as_letter(symbol) for symbol in symbols]
        if len(letters) == 0:
            raise ValueError("An alphabet needs at least one symbol")
        for letter in letters:
            if letter is None or letter not in LetterAlphabet._allowed:
                raise ValueError(
                    "The symbols of a letter alphabet must be printable, "
                    "non-whitespace ASCII letters"
                )
        self._symbols = tuple(letters)
        self._letters = np.array([ord(letter) for letter in letters], dtype=np.ubyte)
        # Byte value -> symbol code, -1 marks letters outside the alphabet
        self._table = np.full(256, -1, dtype=np.int64)
        self._table[self._letters[::-1]] = np.arange(len(letters))[::-1]
        self._codes = {letter: i for i, letter in enumerate(letters)}

    def __repr__(self):
        return f"LetterAlphabet({self._symbols})"

    def encode(self, symbol):
        letter = _as_letter(symbol)
        if letter is None or letter not in self._codes:
            raise AlphabetError(f"Symbol {repr(symbol)} is not in the alphabet")
        return self._codes[letter]

    def encode_multiple(self, symbols):
        """
        Encode multiple letters into a sequence code.

        Parameters
        ----------
        symbols : str or bytes or iterable object of str
            The letters to encode.
            A :class:`str` or :class:`bytes` object is encoded fastest.

        Returns
        -------
        code : ndarray, dtype=uint8
            The sequence code.

        Raises
        ------
        AlphabetError
            If a letter is not in the alphabet.
            The message names the first of these letters.
        """
        if isinstance(symbols, str):
            if not symbols.isascii():
                raise AlphabetError("Symbols contain non-ASCII characters")
            symbols = symbols.encode("ASCII")
        if isinstance(symbols, bytes):
            values = np.frombuffer(symbols, dtype=np.ubyte)
        else:
            letters = [_as_letter(symbol) for symbol in symbols]
            if None in letters or not all(letter.isascii() for letter in letters):
                raise AlphabetError("Symbols must be single ASCII letters")
            values = np.array([ord(letter) for letter in letters], dtype=np.ubyte)
        code = self._table[values]
        invalid = np.flatnonzero(code == -1)
        if len(invalid) > 0:
            letter = chr(values[invalid[0]])
            raise AlphabetError(f"Symbol {repr(letter)} is not in the alphabet")
        return code.astype(np.uint8)

    def decode_multiple(self, code):
        """
        Decode a sequence code into letters.

        Parameters
        ----------
        code : ndarray, dtype=int
            The sequence code.

        Returns
        -------
        symbols : ndarray, dtype='U1'
            The decoded letters.
        """
        code = np.asarray(code, dtype=np.int64)
        if ((code < 0) | (code >= len(self))).any():
            raise AlphabetError("Sequence code contains invalid codes")
        return self._letters[code].view("S1").astype("U1")


def _as_letter(symbol):
    """
    Convert a one character :class:`str` or :class:`bytes` object into
    a :class:`str`, other objects give ``None``.
    """
    if isinstance(symbol, bytes):
        symbol = symbol.decode("ASCII", errors="replace")
    if not isinstance(symbol, str) or len(symbol) != 1:
        return None
    return str(symbol)


class AlphabetMapper(object):
    """
    Convert symbol codes of a source alphabet into the symbol codes of
    the same symbols in a target alphabet.

    Parameters
    ----------
    source_alphabet, target_alphabet : Alphabet
        The codes are converted from the source into the target
        alphabet.
        Each source symbol must be present in the target alphabet, in
        any order.

    Examples
    --------

    >>> source_alph = Alphabet(["A","C","G","T"])
    >>> target_alph = Alphabet(["T","U","A","G","C"])
    >>> mapper = AlphabetMapper(source_alph, target_alph)
    >>> print(mapper[0])
    2
    >>> print(mapper[[1,1,3]])
    [4 4 0]
    """

    def __init__(self, source_alphabet, target_alphabet):
        self._table = np.array(
            [target_alphabet.encode(symbol) for symbol in source_alphabet],
            dtype=np.int64,
        )

    def __getitem__(self, code):
        if isinstance(code, Integral):
            return int(self._table[code])
        return self._table[np.asarray(code, dtype=np.intp)]


def common_alphabet(alphabets):
    """
    Find the alphabet among the given ones, that extends all of them.

    Parameters
    ----------
    alphabets : iterable object of Alphabet
        The candidate alphabets.

    Returns
    -------
    common_alphabet : Alphabet or None
        The alphabet extending all `alphabets`, ``None`` if there is
        none.

    Examples
    --------

    >>> print(common_alphabet([LetterAlphabet("ACG"), LetterAlphabet("ACGT")]))
    ('A', 'C', 'G', 'T')
    >>> print(common_alphabet([LetterAlphabet("ACGT"), LetterAlphabet("ACGU")]))
    None
    """
    common = None
    for alphabet in alphabets:
        if common is None or alphabet.extends(common):
            common = alphabet
        elif not common.extends(alphabet):
            return None
    return common
