# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *polyseq*, a toolkit for the analysis
of DNA, RNA and protein sequences.
The functionality is located in the :mod:`polyseq.sequence`
subpackage.
"""

__version__ = "0.1.0"
__name__ = "polyseq"
__author__ = "The polyseq contributors"
