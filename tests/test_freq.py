import pytest

from huffcodec.freq import analyze, relative_frequencies


def test_counts_every_byte_including_control():
    table = analyze(b"aab\r\n\x00\n")
    assert table == {ord("a"): 2, ord("b"): 1, 0x0D: 1, 0x0A: 2, 0x00: 1}


def test_empty_buffer_gives_empty_table():
    assert analyze(b"") == {}
    assert relative_frequencies(analyze(b"")) == {}


def test_relative_frequencies_sorted_and_normalised():
    rel = relative_frequencies(analyze(b"cabbcc"))
    assert list(rel) == [ord("a"), ord("b"), ord("c")]
    assert rel[ord("c")] == pytest.approx(0.5)
    assert sum(rel.values()) == pytest.approx(1.0)
    assert all(0.0 < f <= 1.0 for f in rel.values())
