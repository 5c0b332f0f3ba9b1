import pytest

from gc_content.sequence_api import (
    SequenceValidationError,
    gc_content,
    gc_counts,
    validate_sequence,
)


def test_gc_content_of_text():
    assert gc_content("ATCGATCG") == pytest.approx(0.5)
    assert gc_content("gcgc") == 1.0
    assert gc_content("") == 0.0


def test_iupac_and_gaps_are_accepted_but_not_counted():
    assert gc_content("ATCG-RYN.*ATCG\n") == pytest.approx(0.5)


def test_uracil_is_not_a_valid_base():
    assert gc_counts("GCUU").valid_base_count == 2


def test_rejects_non_string():
    with pytest.raises(SequenceValidationError, match="must be str"):
        validate_sequence(b"ACGT")


def test_rejects_invalid_characters_with_position():
    with pytest.raises(SequenceValidationError, match=r"'X' at position 4"):
        gc_content("ACGTXACGT")


def test_rejects_lowercase_ambiguity_codes():
    with pytest.raises(SequenceValidationError):
        validate_sequence("acgtn")


def test_rejects_overlong_sequence():
    with pytest.raises(SequenceValidationError, match="too long"):
        gc_content("A" * 11, max_length=10)
    assert gc_content("G" * 11, max_length=None) == 1.0


def test_validation_error_is_a_value_error():
    assert issubclass(SequenceValidationError, ValueError)


def test_unvalidated_input_ignores_unknown_symbols():
    assert gc_content("GCXXATé", validate=False) == pytest.approx(0.5)
    assert gc_counts("NNNXXX", validate=False).is_defined is False
