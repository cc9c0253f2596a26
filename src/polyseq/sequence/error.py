# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the warnings of the `sequence` subpackage.
"""

__name__ = "polyseq.sequence"
__author__ = "The polyseq contributors"
__all__ = ["DegenerateSequenceWarning"]


class DegenerateSequenceWarning(Warning):
    """
    Indicates that a sequence or a pair of sequences does not allow a
    finite result for a certain quantity, e.g. the GC content of an
    empty sequence.
    """

    pass
