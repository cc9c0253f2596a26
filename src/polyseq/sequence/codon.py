# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["CodonTable"]

import copy
import logging
from numbers import Integral
from os.path import dirname, join, realpath
import numpy as np
from .seqtypes import ProteinSequence, RNASequence

_logger = logging.getLogger(__name__)

# Abbreviations
_NUC_ALPH = RNASequence.alphabet
_PROT_ALPH = ProteinSequence.alphabet

# Symbol for stop codons in codon table files and dictionaries
_STOP_SYMBOL = "*"
# Code for stop codons in codon code arrays
_STOP_CODE = -1

# Multiplier array that converts a codon in code representation
# into a unique integer
_radix = len(_NUC_ALPH)
_radix_multiplier = np.array([_radix**n for n in (2, 1, 0)], dtype=int)


class CodonTable(object):
    """
    A :class:`CodonTable` maps a codon (sequence of 3 RNA nucleotides)
    to an amino acid.
    A codon without an amino acid is a *stop codon*.
    A :class:`CodonTable` takes/outputs either the symbols or code of
    the codon/amino acid.

    Furthermore, this class is able to give a list of codons that
    corresponds to a given amino acid.

    The :func:`load()` method allows loading of NCBI codon tables.

    Objects of this class are immutable.

    Parameters
    ----------
    codon_dict : dict of (str -> str)
        A dictionary that maps codons to amino acids.
        The keys must be RNA strings of length 3 and the values strings
        of length 1 (all upper case).
        Codons that are missing in the dictionary or map to ``'*'`` are
        stop codons.

    Examples
    --------

    Get the amino acid coded by a given codon (symbol and code):

    >>> table = CodonTable.default_table()
    >>> print(table["AUG"])
    M
    >>> print(table[(1,2,3)])
    14
    >>> print(table["UAA"])
    None

    Get the codons coding for a given amino acid (symbol and code):

    >>> print(table["M"])
    ('AUG',)
    >>> print(table["*"])
    ('UAA', 'UAG', 'UGA')
    >>> print(table[14])
    ((0, 2, 0), (0, 2, 2), (1, 2, 0), (1, 2, 1), (1, 2, 2), (1, 2, 3))
    """

    # For efficient mapping of codon codes to amino acid codes,
    # especially in in the 'map_codon_codes()' function, the class
    # maps each possible codon into a unique number using a radix based
    # approach.
    # For example the codon (3,1,2) would be represented as
    # 3*16 + 1*4 + 2**1 = 54

    # file for builtin codon tables from NCBI
    _table_file = join(dirname(realpath(__file__)), "codon_tables.txt")

    def __init__(self, codon_dict):
        # The array uses the number representation of codons as index
        # and stores the corresponding symbol codes for amino acids
        self._codons = np.full(_radix**3, _STOP_CODE, dtype=int)
        for key, value in codon_dict.items():
            self._codons[CodonTable._codon_number(key)] = CodonTable._aa_code(value)

    def __repr__(self):
        return f"CodonTable({self.codon_dict()})"

    def __eq__(self, item):
        if not isinstance(item, CodonTable):
            return False
        return np.array_equal(self._codons, item._codons)

    def __ne__(self, item):
        return not self == item

    def __hash__(self):
        return hash(self._codons.tobytes())

    def __getitem__(self, item):
        if isinstance(item, str):
            if len(item) == 1:
                # Amino acid -> return possible codons
                aa_code = CodonTable._aa_code(item)
                codon_numbers = np.where(self._codons == aa_code)[0]
                codon_codes = CodonTable._to_codon(codon_numbers)
                return tuple(
                    ["".join(_NUC_ALPH.decode_multiple(codon_code))
                     for codon_code in codon_codes]
                )
            elif len(item) == 3:
                # Codon -> return corresponding amino acid
                aa_code = self._codons[CodonTable._codon_number(item)]
                if aa_code == _STOP_CODE:
                    return None
                return _PROT_ALPH.decode(aa_code)
            else:
                raise ValueError(f"'{item}' is an invalid index")
        elif isinstance(item, Integral):
            # Code for amino acid -> return possible codon codes
            codon_numbers = np.where(self._codons == item)[0]
            codon_codes = CodonTable._to_codon(codon_numbers)
            return tuple([tuple(int(c) for c in code) for code in codon_codes])
        else:
            # Code for codon as any iterable object
            # Code for codon -> return corresponding amino acid codes
            if len(item) != 3:
                raise ValueError(
                    f"{item} is an invalid sequence code for a codon"
                )
            codon_number = CodonTable._to_number(item)
            return int(self._codons[codon_number])

    def map_codon_codes(self, codon_codes):
        """
        Efficiently map multiple codons to the corresponding amino
        acids.

        Parameters
        ----------
        codon_codes : ndarray, dtype=int, shape=(n,3)
            The codons to be translated into amino acids.
            The codons are given as symbol codes.
            *n* is the amount of codons.

        Returns
        -------
        aa_codes : ndarray, dtype=int, shape=(n,)
            The amino acids as symbol codes.
            Stop codons are represented by ``-1``.

        Examples
        --------

        >>> rna = RNASequence("AUGGUUUAA")
        >>> codon_codes = rna.code.reshape(-1, 3)
        >>> print(codon_codes)
        [[0 3 2]
         [2 3 3]
         [3 0 0]]
        >>> aa_codes = CodonTable.default_table().map_codon_codes(codon_codes)
        >>> print(aa_codes)
        [10 17 -1]
        """
        if codon_codes.shape[-1] != 3:
            raise ValueError(
                f"Codons must be length 3, "
                f"but size of last dimension is {codon_codes.shape[-1]}"
            )
        codon_numbers = CodonTable._to_number(codon_codes)
        return self._codons[codon_numbers]

    def codon_dict(self, code=False):
        """
        Get the codon to amino acid mappings dictionary.

        Stop codons are not part of the dictionary.

        Parameters
        ----------
        code : bool
            If true, the dictionary contains keys and values as code.
            Otherwise, the dictionary contains strings for codons and
            amino acid. (Default: False)

        Returns
        -------
        codon_dict : dict
            The dictionary mapping codons to amino acids.
        """
        if code:
            return {
                tuple(int(c) for c in CodonTable._to_codon(codon_number)): int(aa_code)
                for codon_number, aa_code in enumerate(self._codons)
                if aa_code != _STOP_CODE
            }
        else:
            return {
                "".join(_NUC_ALPH.decode_multiple(codon_code)): _PROT_ALPH.decode(aa_code)
                for codon_code, aa_code in self.codon_dict(code=True).items()
            }

    def stop_codons(self, code=False):
        """
        Get the stop codons of the codon table.

        Parameters
        ----------
        code : bool
            If true, the code will be returned instead of strings.
            (Default: False)

        Returns
        -------
        stop_codons : tuple
            The stop codons. Contains strings or tuples, depending on
            the `code` parameter.
        """
        codon_numbers = np.where(self._codons == _STOP_CODE)[0]
        codon_codes = CodonTable._to_codon(codon_numbers)
        if code:
            return tuple([tuple(int(c) for c in codon) for codon in codon_codes])
        else:
            return tuple(
                ["".join(_NUC_ALPH.decode_multiple(codon)) for codon in codon_codes]
            )

    def with_codon_mappings(self, codon_dict):
        """
        Create an new :class:`CodonTable` with partially changed codon
        mappings.

        Parameters
        ----------
        codon_dict : dict of (str -> str)
            The changed codon mappings.
            Codons mapped to ``'*'`` become stop codons.

        Returns
        -------
        new_table : CodonTable
            The codon table with changed codon mappings.

        Examples
        --------

        >>> table = CodonTable.default_table().with_codon_mappings({"UGA": "W"})
        >>> print(table["UGA"])
        W
        """
        # Copy this table and replace the codons
        new_table = copy.deepcopy(self)
        for key, value in codon_dict.items():
            new_table._codons[CodonTable._codon_number(key)] = CodonTable._aa_code(
                value
            )
        return new_table

    def __str__(self):
        string = ""
        # ['A', 'C', 'G', 'U']
        bases = _NUC_ALPH.get_symbols()
        for b1 in bases:
            for b2 in bases:
                for b3 in bases:
                    codon = b1 + b2 + b3
                    aa = self[codon]
                    string += codon + " " + (_STOP_SYMBOL if aa is None else aa)
                    # Add space for next codon
                    string += " " * 3
                # Remove terminal space
                string = string[:-3]
                # Jump to next line
                string += "\n"
            # Add empty line
            string += "\n"
        # Remove the two terminal new lines
        string = string[:-2]
        return string

    @staticmethod
    def _codon_number(codon):
        if not isinstance(codon, str) or len(codon) != 3:
            raise ValueError(f"Invalid codon '{codon}'")
        return CodonTable._to_number(_NUC_ALPH.encode_multiple(codon))

    @staticmethod
    def _aa_code(symbol):
        if symbol is None or symbol == _STOP_SYMBOL:
            return _STOP_CODE
        return _PROT_ALPH.encode(symbol)

    @staticmethod
    def _to_number(codons):
        if not isinstance(codons, np.ndarray):
            codons = np.array(list(codons), dtype=int)
        return np.sum(_radix_multiplier * codons, axis=-1)

    @staticmethod
    def _to_codon(numbers):
        if isinstance(numbers, Integral):
            # Only a single number
            return CodonTable._to_codon(np.array([numbers]))[0]
        if not isinstance(numbers, np.ndarray):
            numbers = np.array(list(numbers), dtype=int)
        codons = np.zeros(numbers.shape + (3,), dtype=int)
        for n in (2, 1, 0):
            val = _radix**n
            digit = numbers // val
            codons[..., -(n + 1)] = digit
            numbers = numbers - digit * val
        return codons

    @staticmethod
    def load(table_name):
        """
        Load a NCBI codon table.

        Parameters
        ----------
        table_name : str or int
            If a string is given, it is interpreted as official NCBI
            codon table name (e.g. "Vertebrate Mitochondrial").
            An integer is interpreted as NCBI codon table ID.

        Returns
        -------
        table : CodonTable
            The NCBI codon table.

        Raises
        ------
        ValueError
            If no table with the given name or ID exists.

        Examples
        --------

        >>> table = CodonTable.load("Vertebrate Mitochondrial")
        >>> print(table["AGA"])
        None
        >>> print(CodonTable.load(1) == CodonTable.default_table())
        True
        """
        for entry in CodonTable._read_table_file():
            if isinstance(table_name, Integral) and not isinstance(table_name, bool):
                found = entry["id"] == table_name
            else:
                found = table_name in entry["names"]
            if found:
                codon_dict = {}
                for i, aa in enumerate(entry["AA"]):
                    codon = entry["Base1"][i] + entry["Base2"][i] + entry["Base3"][i]
                    codon_dict[codon] = aa
                _logger.debug("Loaded codon table '%s'", entry["names"][0])
                return CodonTable(codon_dict)
        raise ValueError(f"Codon table '{table_name}' was not found")

    @staticmethod
    def table_names():
        """
        The possible codon table names for :func:`load()`.

        Returns
        -------
        names : list of str
            List of valid codon table names.
        """
        names = []
        for entry in CodonTable._read_table_file():
            names.extend(entry["names"])
        return names

    @staticmethod
    def default_table():
        """
        The default codon table.
        The table is equal to the NCBI "Standard" codon table.

        Returns
        -------
        table : CodonTable
            The default codon table.
        """
        return _default_table

    @staticmethod
    def _read_table_file():
        """
        Parse the builtin codon table file into a list of dictionaries,
        one for each table.
        Tables are separated by empty lines, each line consists of a
        field name and its value.
        """
        with open(CodonTable._table_file, "r") as f:
            blocks = f.read().strip().split("\n\n")
        entries = []
        for block in blocks:
            entry = {}
            for line in block.split("\n"):
                key, value = line.split(maxsplit=1)
                entry[key] = value.strip()
            entry["id"] = int(entry["id"])
            entry["names"] = [name.strip() for name in entry.pop("name").split(";")]
            entries.append(entry)
        return entries


_default_table = CodonTable.load("Standard")
