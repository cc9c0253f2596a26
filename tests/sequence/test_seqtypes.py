# This source code is part of the polyseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
import numpy as np
import pytest
import polyseq.sequence as seq


def _all_sequences(sequence_type, length):
    symbols = sequence_type.alphabet.get_symbols()
    return [
        sequence_type("".join(symbols))
        for symbols in itertools.product(symbols, repeat=length)
    ]


def test_nucleotide_construction():
    string = "AATGCGTTA"
    dna = seq.DNASequence(string.lower())
    assert dna.get_alphabet() == seq.DNASequence.alphabet
    assert str(dna) == string
    rna = seq.RNASequence(list("AAUGC"))
    assert str(rna) == "AAUGC"
    with pytest.raises(seq.AlphabetError):
        seq.RNASequence("AATGC")


def test_reverse_complement():
    dna = seq.DNASequence("AAAACCCGGT")
    assert dna.reverse_complement() == seq.DNASequence("ACCGGGTTTT")
    rna = seq.RNASequence("AAAACCCGGU")
    assert rna.reverse_complement() == seq.RNASequence("ACCGGGUUUU")


@pytest.mark.parametrize("sequence_type", [seq.DNASequence, seq.RNASequence])
def test_reverse_complement_involution(sequence_type):
    """
    The reverse complement of the reverse complement is the original
    sequence.
    """
    for nuc_seq in _all_sequences(sequence_type, 4):
        assert nuc_seq.reverse_complement().reverse_complement() == nuc_seq
        assert nuc_seq.complement().complement() == nuc_seq


def test_palindrome():
    """
    A sequence is a palindrome exactly if it equals its reverse
    complement.
    """
    for dna in _all_sequences(seq.DNASequence, 4):
        assert dna.is_palindrome() == (dna == dna.reverse_complement())
    assert seq.DNASequence("GAATTC").is_palindrome()
    assert not seq.DNASequence("GAATTA").is_palindrome()


def test_reading_frames():
    dna = seq.DNASequence("AAAACCCGGT")
    frames = dna.reading_frames()
    assert [str(frame) for frame in frames] == [
        "AAAACCCGGT",
        "AAACCCGGT",
        "AACCCGGT",
        "ACCGGGTTTT",
        "CCGGGTTTT",
        "CGGGTTTT",
    ]
    assert all(isinstance(frame, seq.DNASequence) for frame in frames)


def test_gc_content():
    dna = seq.DNASequence(
        "CCACCCTCGTGGTATGGCTAGGCATTCAGGAACCGGAGAACGCTTCAGACCAGCCCGGACTGGGAACCT"
        "GCGGGCAGTAGGTGGAAT"
    )
    assert dna.gc_content() == pytest.approx(60.91954, abs=1e-5)
    assert seq.DNASequence("AATT").gc_content() == 0
    assert seq.RNASequence("GCGC").gc_content() == 100


def test_gc_content_empty():
    """
    The GC content of an empty sequence is not defined.
    """
    with pytest.warns(seq.DegenerateSequenceWarning):
        gc_content = seq.DNASequence().gc_content()
    assert np.isnan(gc_content)


def test_nucleotide_classification():
    dna = seq.DNASequence("ACGT")
    assert dna.is_purine().tolist() == [True, False, True, False]
    assert dna.is_pyrimidine().tolist() == [False, True, False, True]
    assert dna.is_gc().tolist() == [False, True, True, False]
    # Each nucleotide is either a purine or a pyrimidine
    assert (dna.is_purine() ^ dna.is_pyrimidine()).all()


def test_transcription():
    dna = seq.DNASequence("GATGGAACTTGACTACGTAAATT")
    rna = dna.transcribe()
    assert rna == seq.RNASequence("GAUGGAACUUGACUACGUAAAUU")
    assert rna.reverse_transcribe() == dna


def test_mass():
    assert seq.ProteinSequence("SKADYEK").get_mass() == pytest.approx(
        821.392, abs=1e-3
    )
    assert seq.ProteinSequence().get_mass() == 0


def test_molecular_weight():
    protein = seq.ProteinSequence("SKADYEK")
    assert protein.get_molecular_weight(monoisotopic=True) == pytest.approx(
        protein.get_mass() + 18.01056
    )
    # Average masses are slightly larger due to heavier isotopes
    assert protein.get_molecular_weight() > protein.get_molecular_weight(
        monoisotopic=True
    )


def test_protein_alphabet():
    assert len(seq.ProteinSequence.alphabet) == 20
    with pytest.raises(seq.AlphabetError):
        seq.ProteinSequence("MA*")
    with pytest.raises(seq.AlphabetError):
        seq.ProteinSequence("MAX")


@pytest.mark.parametrize(
    "sequence, exp_repr",
    [
        (seq.DNASequence("ACGT"), 'DNASequence("ACGT")'),
        (seq.RNASequence("ACGU"), 'RNASequence("ACGU")'),
        (seq.ProteinSequence("MAPR"), 'ProteinSequence("MAPR")'),
    ]
)
def test_repr(sequence, exp_repr):
    assert repr(sequence) == exp_repr
    assert eval(repr(sequence), {**seq.__dict__}) == sequence
