# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import polyseq.sequence as seq


SEQUENCES = [
    "ATCCAGCT",
    "GGGCAACT",
    "ATGGATCT",
    "AAGCAACC",
    "TTGGAACT",
    "ATGCCATT",
    "ATGGCACT",
]


def test_profile():
    sequences = [seq.DNASequence(string) for string in SEQUENCES]
    assert seq.profile(sequences) == {
        "A": [5, 1, 0, 0, 5, 5, 0, 0],
        "C": [0, 0, 1, 4, 2, 0, 6, 1],
        "G": [1, 1, 6, 3, 0, 1, 0, 0],
        "T": [1, 5, 0, 0, 0, 1, 1, 6],
    }


def test_consensus():
    sequences = [seq.DNASequence(string) for string in SEQUENCES]
    assert seq.consensus(sequences) == seq.DNASequence("ATGCAACT")


def test_empty_input():
    assert seq.profile([]) is None
    assert seq.consensus([]) is None
    assert seq.SequenceProfile.from_sequences([]) is None


def test_from_sequences():
    sequences = [
        seq.DNASequence("CGTCAT"),
        seq.DNASequence("CGTCATGC"),
        seq.DNASequence("TCA"),
    ]
    profile = seq.SequenceProfile.from_sequences(sequences)
    symbols = np.array(
        [
            [0, 2, 0, 1],
            [0, 1, 2, 0],
            [1, 0, 0, 2],
            [0, 2, 0, 0],
            [2, 0, 0, 0],
            [0, 0, 0, 2],
            [0, 0, 1, 0],
            [0, 1, 0, 0],
        ]
    )
    gaps = np.array([0, 0, 0, 1, 1, 1, 2, 2])
    assert np.array_equal(symbols, profile.symbols)
    assert np.array_equal(gaps, profile.gaps)
    assert seq.DNASequence.alphabet == profile.alphabet
    assert len(profile) == 8


@pytest.mark.parametrize("seed", range(10))
def test_profile_properties(seed):
    """
    Each row of the profile has the length of the longest sequence and
    the counts at each position add up to the number of sequences
    covering this position.
    The consensus takes the symbol with the highest count at each
    position, on ties the first one in the alphabet.
    """
    np.random.seed(seed)
    sequences = [
        seq.DNASequence().copy(np.random.randint(4, size=length))
        for length in np.random.randint(1, 20, size=5)
    ]
    max_length = max(len(sequence) for sequence in sequences)

    profile = seq.SequenceProfile.from_sequences(sequences)
    profile_dict = profile.to_dict()
    for counts in profile_dict.values():
        assert len(counts) == max_length
    for i in range(max_length):
        n_covering = sum(len(sequence) > i for sequence in sequences)
        assert sum(counts[i] for counts in profile_dict.values()) == n_covering
        assert profile.symbols[i].sum() + profile.gaps[i] == len(sequences)

    consensus = profile.to_consensus()
    assert len(consensus) == max_length
    for i, symbol in enumerate(consensus):
        max_count = max(counts[i] for counts in profile_dict.values())
        candidates = [
            s for s in seq.DNASequence.alphabet.get_symbols()
            if profile_dict.get(s, [0] * max_length)[i] == max_count
        ]
        assert symbol == candidates[0]


def test_consensus_tie_break():
    """
    On equal counts the symbol, that appears first in the alphabet, is
    taken.
    """
    sequences = [seq.DNASequence("TG"), seq.DNASequence("AC")]
    assert seq.consensus(sequences) == seq.DNASequence("AC")
    sequences = [seq.ProteinSequence("WY"), seq.ProteinSequence("MA")]
    assert seq.consensus(sequences) == seq.ProteinSequence("MA")


def test_to_consensus_nuc():
    symbols = np.array(
        [
            [0, 1, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 2],
            [0, 2, 0, 0],
            [2, 0, 0, 0],
            [0, 0, 0, 2],
            [0, 0, 1, 0],
            [0, 1, 0, 0],
        ]
    )
    gaps = np.array([1, 1, 0, 0, 0, 0, 1, 1])
    alphabet = seq.Alphabet(["A", "C", "G", "T"])
    profile = seq.SequenceProfile(symbols, gaps, alphabet)

    assert seq.DNASequence("CGTCATGC") == profile.to_consensus()


def test_to_consensus_general():
    alphabet = seq.Alphabet(["foo", "bar"])
    sequences = [
        seq.GeneralSequence(alphabet, ["foo", "bar"]),
        seq.GeneralSequence(alphabet, ["bar", "bar"]),
        seq.GeneralSequence(alphabet, ["foo"]),
    ]
    consensus = seq.consensus(sequences)
    assert isinstance(consensus, seq.GeneralSequence)
    assert consensus.symbols == ["foo", "bar"]


def test_to_consensus_uncovered():
    """
    A position without any occurence has no consensus symbol.
    """
    symbols = np.array([[0, 1, 0, 0], [0, 0, 0, 0]])
    gaps = np.array([0, 1])
    profile = seq.SequenceProfile(symbols, gaps, seq.DNASequence.alphabet)
    assert profile.to_consensus() is None


def test_mixed_alphabets():
    """
    The profile uses the common alphabet of the sequences.
    """
    sequences = [seq.DNASequence("ACGT"), seq.RNASequence("ACGU")]
    with pytest.raises(ValueError):
        seq.SequenceProfile.from_sequences(sequences)
    alphabet = seq.LetterAlphabet("ACGTN")
    sequences = [
        seq.DNASequence("ACGT"),
        seq.GeneralSequence(alphabet, "ACNN"),
    ]
    profile = seq.SequenceProfile.from_sequences(sequences)
    assert profile.alphabet == alphabet
    assert profile.to_dict()["N"] == [0, 0, 1, 1]


def test_invalid_profile():
    alphabet = seq.DNASequence.alphabet
    with pytest.raises(ValueError):
        seq.SequenceProfile(np.zeros((3, 5), dtype=int), np.zeros(3), alphabet)
    with pytest.raises(ValueError):
        seq.SequenceProfile(np.zeros((3, 4), dtype=int), np.zeros(2), alphabet)


def test_probability_matrix():
    sequences = [
        seq.DNASequence("AAGAAT"),
        seq.DNASequence("ATCATA"),
        seq.DNASequence("AAGTAA"),
        seq.DNASequence("AACAAA"),
        seq.DNASequence("ATTAAA"),
        seq.DNASequence("AAGAAT"),
    ]
    profile = seq.SequenceProfile.from_sequences(sequences)

    probability_matrix = np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.66666667, 0.0, 0.0, 0.33333333],
            [0.0, 0.33333333, 0.5, 0.16666667],
            [0.83333333, 0.0, 0.0, 0.16666667],
            [0.83333333, 0.0, 0.0, 0.16666667],
            [0.66666667, 0.0, 0.0, 0.33333333],
        ]
    )
    assert np.allclose(probability_matrix, profile.probability_matrix(), atol=1e-3)

    probability_matrix = np.array(
        [
            [0.89285714, 0.03571429, 0.03571429, 0.03571429],
            [0.60714286, 0.03571429, 0.03571429, 0.32142857],
            [0.03571429, 0.32142857, 0.46428571, 0.17857143],
            [0.75, 0.03571429, 0.03571429, 0.17857143],
            [0.75, 0.03571429, 0.03571429, 0.17857143],
            [0.60714286, 0.03571429, 0.03571429, 0.32142857],
        ]
    )
    assert np.allclose(
        probability_matrix, profile.probability_matrix(pseudocount=1), atol=1e-3
    )

    with pytest.raises(ValueError):
        profile.probability_matrix(pseudocount=-1)


def test_indexing():
    sequences = [seq.DNASequence(string) for string in SEQUENCES]
    profile = seq.SequenceProfile.from_sequences(sequences)
    sub_profile = profile[2:5]
    assert len(sub_profile) == 3
    assert np.array_equal(sub_profile.symbols, profile.symbols[2:5])
    assert str(sub_profile.to_consensus()) == "GCA"
    # A single position is kept as profile of length 1
    assert len(profile[0]) == 1


def test_equality():
    sequences = [seq.DNASequence(string) for string in SEQUENCES]
    profile1 = seq.SequenceProfile.from_sequences(sequences)
    profile2 = seq.SequenceProfile.from_sequences(sequences[::-1])
    assert profile1 == profile2
    assert profile1 != seq.SequenceProfile.from_sequences(sequences[1:])
    assert profile1 != "profile"
