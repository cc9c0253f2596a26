# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
import numpy as np
import pytest
import polyseq.sequence as seq


def test_shared_subsequence():
    sequences = [seq.DNASequence("ACGTACGT"), seq.DNASequence("AACCGTATA")]
    assert seq.find_shared_subsequence(sequences) == seq.DNASequence("CGTA")


@pytest.mark.parametrize(
    "strings, exp_shared",
    [
        (["ACGT"], "ACGT"),
        (["ACGT", "ACGT"], "ACGT"),
        (["GATTACA", "TAGACCA", "ATACA"], "TA"),
        # On equal length, the first candidate in the shortest sequence
        (["ACGTT", "TTACG"], "ACG"),
        (["AAAA", "CCCC"], None),
    ]
)
def test_shared_subsequence_cases(strings, exp_shared):
    sequences = [seq.DNASequence(string) for string in strings]
    shared = seq.find_shared_subsequence(sequences)
    if exp_shared is None:
        assert shared is None
    else:
        assert str(shared) == exp_shared


def test_shared_subsequence_empty():
    assert seq.find_shared_subsequence([]) is None


@pytest.mark.parametrize("seed", range(10))
def test_shared_subsequence_maximality(seed):
    """
    The shared subsequence is contained in every sequence and there is
    no longer subsequence, that is contained in every sequence.
    """
    np.random.seed(seed)
    sequences = [
        seq.DNASequence().copy(np.random.randint(4, size=length))
        for length in np.random.randint(10, 20, size=3)
    ]
    shared = seq.find_shared_subsequence(sequences)
    assert shared is not None
    assert seq.all_contain_subsequence(sequences, shared)
    shortest = seq.shortest_sequence(sequences)
    for i, j in itertools.combinations(range(len(shortest) + 1), 2):
        if j - i > len(shared):
            assert not seq.all_contain_subsequence(sequences, shortest[i:j])


def test_shared_subsequence_long_sequences():
    """
    Search a shared subsequence in sequences of a few hundred symbols,
    with a known motif inserted into each of them.
    """
    np.random.seed(0)
    motif = np.random.randint(4, size=20)
    sequences = []
    for length in (400, 500, 500):
        code = np.random.randint(4, size=length)
        position = np.random.randint(length - len(motif))
        code[position : position + len(motif)] = motif
        sequences.append(seq.DNASequence().copy(code))

    shared = seq.find_shared_subsequence(sequences)
    assert len(shared) >= len(motif)
    assert seq.all_contain_subsequence(sequences, shared)
    shortest = seq.shortest_sequence(sequences)
    size = len(shared) + 1
    for i in range(len(shortest) - size + 1):
        assert not seq.all_contain_subsequence(sequences, shortest[i : i + size])


def test_shared_subsequence_incompatible_alphabets():
    with pytest.raises(ValueError):
        seq.find_shared_subsequence(
            [seq.DNASequence("ACGT"), seq.ProteinSequence("ACDEFG")]
        )


def test_shortest_longest_sequence():
    sequences = [
        seq.DNASequence("ACG"),
        seq.DNASequence("A"),
        seq.DNASequence("ACGT"),
        seq.DNASequence("T"),
        seq.DNASequence("TGCA"),
    ]
    assert seq.shortest_sequence(sequences) is sequences[1]
    assert seq.longest_sequence(sequences) is sequences[2]
    assert seq.shortest_sequence([]) is None
    assert seq.longest_sequence([]) is None
