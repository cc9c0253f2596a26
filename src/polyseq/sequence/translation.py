# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Translation of RNA sequences into the proteins they encode.
"""

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["DEFAULT_START_AMINO_ACIDS", "split_codons", "translate"]

import logging
import numpy as np
from .codon import CodonTable
from .seqtypes import ProteinSequence, RNASequence

_logger = logging.getLogger(__name__)

#: The amino acids that open a new protein by default
DEFAULT_START_AMINO_ACIDS = frozenset({"M"})

_STOP_CODE = -1


def split_codons(rna):
    """
    Split an RNA sequence into its codons.

    Parameters
    ----------
    rna : RNASequence
        The sequence to be split.

    Returns
    -------
    codon_codes : ndarray, dtype=uint8, shape=(n,3)
        The symbol codes of the consecutive codons.
        Trailing nucleotides, that do not fill a complete codon, are
        dropped.

    Examples
    --------

    >>> print(split_codons(RNASequence("AUGGUUUA")))
    [[0 3 2]
     [2 3 3]]
    """
    n_codons = len(rna) // 3
    return rna.code[: n_codons * 3].reshape(n_codons, 3)


def translate(rna, codon_table=None, start_amino_acids=None):
    """
    Translate an RNA sequence into all proteins it can encode.

    The codons are read from left to right in a single reading frame.
    Every codon that codes for one of the `start_amino_acids` opens a
    new protein, so multiple proteins can be open at the same time.
    Each amino acid is appended to all open proteins.
    A stop codon finishes all open proteins.
    Proteins, that are still open at the end of the sequence, are
    discarded.

    To obtain the proteins in all reading frames, translate each of
    :meth:`NucleotideSequence.reading_frames()`.

    Parameters
    ----------
    rna : RNASequence
        The sequence to be translated.
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

    Examples
    --------

    >>> rna = RNASequence("AUGGCCAUGGCGCCCAGAACUGAGAUCAAUAGUACCCGUAUUAACGGGUGA")
    >>> for protein in sorted(translate(rna), key=str):
    ...     print(protein)
    MAMAPRTEINSTRING
    MAPRTEINSTRING

    With a start amino acid, that is not methionine:

    >>> rna = RNASequence("GCCAUGUAA")
    >>> print(translate(rna, start_amino_acids={"A"}))
    {ProteinSequence("AM")}
    """
    if not isinstance(rna, RNASequence):
        raise TypeError(f"Expected an RNA sequence, not '{type(rna).__name__}'")
    if codon_table is None:
        codon_table = CodonTable.default_table()
    if start_amino_acids is None:
        start_amino_acids = DEFAULT_START_AMINO_ACIDS
    start_codes = set(
        ProteinSequence.alphabet.encode(symbol) for symbol in start_amino_acids
    )

    aa_codes = codon_table.map_codon_codes(split_codons(rna))
    proteins = set()
    # Each candidate is a growing list of amino acid codes
    candidates = []
    for aa_code in aa_codes:
        if aa_code == _STOP_CODE:
            for candidate in candidates:
                proteins.add(ProteinSequence().copy(np.array(candidate)))
            candidates = []
        else:
            if aa_code in start_codes:
                candidates.append([])
            for candidate in candidates:
                candidate.append(aa_code)
    _logger.debug(
        "Translated %d codons into %d proteins, "
        "discarded %d unterminated candidates",
        len(aa_codes), len(proteins), len(candidates),
    )
    return proteins
