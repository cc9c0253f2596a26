# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = [
    "GeneralSequence",
    "NucleotideSequence",
    "DNASequence",
    "RNASequence",
    "ProteinSequence",
]

import warnings
import numpy as np
from .alphabet import AlphabetMapper, LetterAlphabet
from .error import DegenerateSequenceWarning
from .sequence import Sequence


def _complement_mapper(alphabet, compl_symbol_dict):
    # Interpreting the sequence code in the complementary alphabet
    # gives the complementary symbols
    # In order to get the complementary symbols in the original
    # alphabet, the sequence code is mapped from the complementary
    # alphabet into the original alphabet
    compl_alphabet = LetterAlphabet(
        [compl_symbol_dict[symbol] for symbol in alphabet.get_symbols()]
    )
    return AlphabetMapper(compl_alphabet, alphabet)


class GeneralSequence(Sequence):
    """
    This class allows the creation of a sequence with custom
    :class:`Alphabet` without the need to subclass :class:`Sequence`.

    Parameters
    ----------
    alphabet : Alphabet
        The alphabet of this sequence.
    sequence : iterable object, optional
        The symbol sequence, the :class:`Sequence` is initialized with.
        For alphabets containing single letter strings, this parameter
        may also be a :class:`str` object.
        By default the sequence is empty.
    """

    def __init__(self, alphabet, sequence=()):
        self._alphabet = alphabet
        super().__init__(sequence)

    def __repr__(self):
        return (
            f"GeneralSequence(Alphabet({self._alphabet}), "
            f"[{', '.join([repr(symbol) for symbol in self.symbols])}])"
        )

    def __copy_create__(self):
        return GeneralSequence(self._alphabet)

    def get_alphabet(self):
        return self._alphabet


class NucleotideSequence(Sequence):
    """
    Abstract representation of a nucleotide sequence.

    Nucleotide alphabets always contain the four nucleotides in the
    order adenine, cytosine, guanine and thymine/uracil.
    Therefore, the symbol codes of :class:`DNASequence` and
    :class:`RNASequence` objects are interchangeable.

    In addition to the symbols, each nucleotide has a complement, is
    either a purine or a pyrimidine and may be part of the GC content.

    Parameters
    ----------
    sequence : iterable object, optional
        The initial nucleotide sequence.
        This may either be a list or a string.
        May take upper or lower case letters.
        By default the sequence is empty.
    """

    alphabet = None
    _compl_mapper = None

    # Nucleotide properties indexed by symbol code (A, C, G, T/U)
    _purines = np.array([True, False, True, False])
    _pyrimidines = np.array([False, True, False, True])
    _gc = np.array([False, True, True, False])

    def __init__(self, sequence=()):
        if isinstance(sequence, str):
            sequence = sequence.upper()
        else:
            sequence = [symbol.upper() for symbol in sequence]
        super().__init__(sequence)

    def __repr__(self):
        return f'{type(self).__name__}("{str(self)}")'

    def get_alphabet(self):
        return type(self).alphabet

    def complement(self):
        """
        Get the complement nucleotide sequence.

        Returns
        -------
        complement : NucleotideSequence
            The complement sequence.

        Examples
        --------

        >>> dna_seq = DNASequence("ACGCTT")
        >>> print(dna_seq.complement())
        TGCGAA
        """
        return self.copy(type(self)._compl_mapper[self.code])

    def reverse_complement(self):
        """
        Get the reverse complement of this nucleotide sequence.

        Applying this method twice gives the original sequence.

        Returns
        -------
        reverse_complement : NucleotideSequence
            The reverse complement sequence.

        Examples
        --------

        >>> dna_seq = DNASequence("AAAACCCGGT")
        >>> print(dna_seq.reverse_complement())
        ACCGGGTTTT
        """
        return self.complement().reverse()

    def is_palindrome(self):
        """
        Check whether this sequence equals its own reverse complement.

        Returns
        -------
        is_palindrome : bool
            True, if the sequence is a reverse complement palindrome.

        Examples
        --------

        >>> print(DNASequence("GAATTC").is_palindrome())
        True
        >>> print(DNASequence("GAATTA").is_palindrome())
        False
        """
        return self == self.reverse_complement()

    def reading_frames(self):
        """
        Get the six reading frames of this sequence.

        Returns
        -------
        frames : list of NucleotideSequence
            The sequence starting at the first, second and third
            position, followed by the reverse complement starting at
            its first, second and third position.

        Examples
        --------

        >>> for frame in DNASequence("ATGCC").reading_frames():
        ...     print(frame)
        ATGCC
        TGCC
        GCC
        GGCAT
        GCAT
        CAT
        """
        rev_compl = self.reverse_complement()
        return [
            self,
            self[1:],
            self[2:],
            rev_compl,
            rev_compl[1:],
            rev_compl[2:],
        ]

    def gc_content(self):
        """
        Get the percentage of guanine and cytosine in this sequence.

        Returns
        -------
        gc_content : float
            The GC content in percent (0 to 100).
            *NaN* for an empty sequence, accompanied by a
            :class:`DegenerateSequenceWarning`.

        Examples
        --------

        >>> print(DNASequence("ACGCTT").gc_content())
        50.0
        """
        if len(self) == 0:
            warnings.warn(
                "The GC content of an empty sequence is undefined",
                DegenerateSequenceWarning,
            )
            return np.nan
        return 100 * np.count_nonzero(self.is_gc()) / len(self)

    def is_purine(self):
        """
        Get a boolean mask indicating purine (A, G) positions.

        Returns
        -------
        mask : ndarray, dtype=bool
            True at each position occupied by a purine.
        """
        return NucleotideSequence._purines[self.code]

    def is_pyrimidine(self):
        """
        Get a boolean mask indicating pyrimidine (C, T/U) positions.

        Returns
        -------
        mask : ndarray, dtype=bool
            True at each position occupied by a pyrimidine.
        """
        return NucleotideSequence._pyrimidines[self.code]

    def is_gc(self):
        """
        Get a boolean mask indicating guanine and cytosine positions.

        Returns
        -------
        mask : ndarray, dtype=bool
            True at each position occupied by G or C.
        """
        return NucleotideSequence._gc[self.code]


class DNASequence(NucleotideSequence):
    """
    Representation of a DNA sequence, containing the letters
    ``A``, ``C``, ``G`` and ``T``.

    Parameters
    ----------
    sequence : iterable object, optional
        The initial DNA sequence.
        This may either be a list or a string.
        May take upper or lower case letters.
        By default the sequence is empty.

    Examples
    --------

    >>> dna_seq = DNASequence("gattaca")
    >>> print(dna_seq)
    GATTACA
    >>> dna_seq
    DNASequence("GATTACA")
    """

    alphabet = LetterAlphabet(["A", "C", "G", "T"])
    compl_symbol_dict = {"A": "T", "C": "G", "G": "C", "T": "A"}
    _compl_mapper = _complement_mapper(alphabet, compl_symbol_dict)

    def transcribe(self):
        """
        Transcribe this DNA sequence into RNA, i.e. replace thymine by
        uracil.

        Returns
        -------
        rna : RNASequence
            The transcribed sequence.

        Examples
        --------

        >>> print(DNASequence("GATGGAACTTGA").transcribe())
        GAUGGAACUUGA
        """
        rna = RNASequence()
        rna._set_code(self.code)
        return rna


class RNASequence(NucleotideSequence):
    """
    Representation of a RNA sequence, containing the letters
    ``A``, ``C``, ``G`` and ``U``.

    Parameters
    ----------
    sequence : iterable object, optional
        The initial RNA sequence.
        This may either be a list or a string.
        May take upper or lower case letters.
        By default the sequence is empty.
    """

    alphabet = LetterAlphabet(["A", "C", "G", "U"])
    compl_symbol_dict = {"A": "U", "C": "G", "G": "C", "U": "A"}
    _compl_mapper = _complement_mapper(alphabet, compl_symbol_dict)

    def reverse_transcribe(self):
        """
        Reverse transcribe this RNA sequence into DNA, i.e. replace
        uracil by thymine.

        Returns
        -------
        dna : DNASequence
            The reverse transcribed sequence.
        """
        dna = DNASequence()
        dna._set_code(self.code)
        return dna

    def translate(self, codon_table=None, start_amino_acids=None):
        """
        Translate this RNA sequence into all proteins it can encode.

        This is a shortcut for :func:`translate()`.

        Parameters
        ----------
        codon_table : CodonTable, optional
            The codon table to be used.
            By default the standard genetic code is used.
        start_amino_acids : iterable object of str, optional
            The amino acids that open a new protein.
            By default only methionine (``M``) starts a protein.

        Returns
        -------
        proteins : set of ProteinSequence
            The distinct proteins, that are terminated by a stop codon.
        """
        # Import at this position to avoid circular import
        from .translation import translate

        return translate(self, codon_table, start_amino_acids)


class ProteinSequence(Sequence):
    """
    Representation of a protein sequence, consisting of the 20 standard
    amino acids in one-letter code.

    Parameters
    ----------
    sequence : iterable object, optional
        The initial protein sequence.
        This may either be a list or a string.
        May take upper or lower case letters.
        By default the sequence is empty.
    """

    alphabet = LetterAlphabet(
        [
            "A",
            "C",
            "D",
            "E",
            "F",
            "G",
            "H",
            "I",
            "K",
            "L",
            "M",
            "N",
            "P",
            "Q",
            "R",
            "S",
            "T",
            "V",
            "W",
            "Y",
        ]
    )

    # Masses are taken from
    # https://web.expasy.org/findmod/findmod_masses.html#AA

    _mol_weight_average = np.array(
        [
            71.0788,  # A
            103.1388,  # C
            115.0886,  # D
            129.1155,  # E
            147.1766,  # F
            57.0519,  # G
            137.1411,  # H
            113.1594,  # I
            128.1741,  # K
            113.1594,  # L
            131.1926,  # M
            114.1038,  # N
            97.1167,  # P
            128.1307,  # Q
            156.1875,  # R
            87.0782,  # S
            101.1051,  # T
            99.1326,  # V
            186.2132,  # W
            163.1760,  # Y
        ]
    )

    _mol_weight_monoisotopic = np.array(
        [
            71.03711,  # A
            103.00919,  # C
            115.02694,  # D
            129.04259,  # E
            147.06841,  # F
            57.02146,  # G
            137.05891,  # H
            113.08406,  # I
            128.09496,  # K
            113.08406,  # L
            131.04049,  # M
            114.04293,  # N
            97.05276,  # P
            128.05858,  # Q
            156.10111,  # R
            87.03203,  # S
            101.04768,  # T
            99.06841,  # V
            186.07931,  # W
            163.06333,  # Y
        ]
    )

    # Monoisotopic mass of water
    _water_mass = 18.01056
    _water_mass_average = 18.01528

    def __init__(self, sequence=()):
        if isinstance(sequence, str):
            sequence = sequence.upper()
        else:
            sequence = [symbol.upper() for symbol in sequence]
        super().__init__(sequence)

    def __repr__(self):
        return f'ProteinSequence("{str(self)}")'

    def get_alphabet(self):
        return ProteinSequence.alphabet

    def get_mass(self):
        """
        Calculate the mass of this protein as sum of the monoisotopic
        residue masses.

        In contrast to :meth:`get_molecular_weight()`, the water
        molecule of the terminal groups is not included.

        Returns
        -------
        mass : float
            The residue mass sum in Dalton (Da).

        Examples
        --------

        >>> print(f"{ProteinSequence('SKADYEK').get_mass():.3f}")
        821.392
        """
        return float(np.sum(ProteinSequence._mol_weight_monoisotopic[self.code]))

    def get_molecular_weight(self, monoisotopic=False):
        """
        Calculate the molecular weight of this protein.

        The molecular weight is calculated by the addition of the
        masses of the amino acids in the protein and the mass of one
        water molecule.

        Parameters
        ----------
        monoisotopic : bool
            Use the mass of the most common isotope.
            Otherwise the average isotopic masses are used.

        Returns
        -------
        weight : float
            Molecular weight of the protein in Dalton (Da).
        """
        if monoisotopic:
            weight = (
                np.sum(ProteinSequence._mol_weight_monoisotopic[self.code])
                + ProteinSequence._water_mass
            )
        else:
            weight = (
                np.sum(ProteinSequence._mol_weight_average[self.code])
                + ProteinSequence._water_mass_average
            )
        return float(weight)
