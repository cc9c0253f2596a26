# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for the analysis of biological sequences.

A :class:`Sequence` can be seen as a succession of symbols.
The set of symbols, that can occur in a sequence, is defined by an
:class:`Alphabet`.
For example, a DNA sequence has an :class:`Alphabet`, that includes the
4 letters ``'A'``, ``'C'``, ``'G'`` and ``'T'``.
If a :class:`Sequence` is created with at least one symbol, that is not
in the given :class:`Alphabet`, an :class:`AlphabetError` is raised.

Internally, a :class:`Sequence` is saved as a read-only *NumPy*
:class:`ndarray` of integer values, where each integer represents a
symbol in the :class:`Alphabet`.
For example, ``'A'``, ``'C'``, ``'G'`` and ``'T'`` are encoded into
0, 1, 2 and 3, respectively.
These integer values are called *symbol code*, the encoding of an entire
sequence of symbols is called *sequence code*.
Sequences are immutable: every operation creates a new sequence or a
summary value, hence sequences are hashable and can be collected in
sets and used as dictionary keys.

The abstract :class:`Sequence` superclass cannot be instantiated
directly.
Instead the concrete subclasses :class:`DNASequence`,
:class:`RNASequence` and :class:`ProteinSequence` are used, which
provide additional sequence type specific methods, like
reverse complements, GC content or protein masses.
The class :class:`GeneralSequence` allows the usage of a custom
:class:`Alphabet` without the need to subclass :class:`Sequence`.

On top of these types this subpackage provides

    - searching of subsequences and palindromes
      (:func:`find_subsequence()`, :func:`find_palindromes()`),
    - comparison of sequences without alignment
      (:func:`count_mismatches()`,
      :func:`transition_transversion_ratio()`),
    - the discovery of the longest subsequence shared by a set of
      sequences (:func:`find_shared_subsequence()`),
    - position-wise symbol profiles and consensus sequences
      (:class:`SequenceProfile`),
    - the translation of RNA into proteins based on a
      :class:`CodonTable` (:func:`translate()`).

Degenerate inputs, that do not allow a finite result, like the GC
content of an empty sequence, issue a
:class:`DegenerateSequenceWarning`.
"""

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"

from .alphabet import *
from .error import *
from .sequence import *
from .seqtypes import *
from .search import *
from .compare import *
from .motif import *
from .profile import *
from .codon import *
from .translation import *
