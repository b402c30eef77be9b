import pytest

from huffcodec import decode, encode
from huffcodec.treecodec import parse


def _encode_decode(tmp_path, data, *extra):
    src = tmp_path / "in.bin"
    enc = tmp_path / "out" / "in.huf"
    dec = tmp_path / "out" / "in.dec"
    src.write_bytes(data)
    assert encode.main(["--input", str(src), "--output", str(enc), *extra]) == 0
    assert decode.main(["--input", str(enc), "--output", str(dec), *extra]) == 0
    return enc, dec.read_bytes()


@pytest.mark.parametrize("data", [b"", b"z", b"hello\r\nworld\n" * 50, bytes(range(256)) * 4])
def test_round_trip_through_files(tmp_path, data):
    _, out = _encode_decode(tmp_path, data)
    assert out == data


def test_legacy_round_trip(tmp_path):
    data = b"\n\n\x0a binary \x00\xff tail\n" * 20
    enc, out = _encode_decode(tmp_path, data, "--legacy")
    assert out == data
    first_line = enc.read_bytes().split(b"\n", 1)[0]
    assert not parse(first_line.decode("ascii")).is_leaf


def test_encode_reports_progress(tmp_path, capsys):
    src = tmp_path / "a.txt"
    src.write_bytes(b"aaab")
    assert encode.main(["--input", str(src), "--output", str(tmp_path / "a.huf")]) == 0
    out = capsys.readouterr().out
    assert "[encode] wrote" in out
    assert "tree=18B payload=2B" in out
    assert "symbols=2 entropy=0.8113 mean_len=1.0000 bits/sym" in out


def test_missing_input(tmp_path, capsys):
    assert encode.main(["--input", str(tmp_path / "nope"), "--output", str(tmp_path / "x")]) == 2
    assert decode.main(["--input", str(tmp_path / "nope"), "--output", str(tmp_path / "x")]) == 2
    assert "[decode] error" in capsys.readouterr().err


def test_unwritable_output(tmp_path, capsys):
    src = tmp_path / "in.bin"
    src.write_bytes(b"aaab")
    out_dir = tmp_path / "outdir"
    out_dir.mkdir()
    assert encode.main(["--input", str(src), "--output", str(out_dir)]) == 2
    assert "[encode] error" in capsys.readouterr().err

    enc = tmp_path / "in.huf"
    assert encode.main(["--input", str(src), "--output", str(enc)]) == 0
    capsys.readouterr()
    assert decode.main(["--input", str(enc), "--output", str(out_dir)]) == 2
    assert "[decode] error" in capsys.readouterr().err


def test_corrupt_input_exits_nonzero(tmp_path, capsys):
    bad = tmp_path / "bad.huf"
    bad.write_bytes(b"HUF")
    assert decode.main(["--input", str(bad), "--output", str(tmp_path / "o")]) == 1
    assert "header too short" in capsys.readouterr().err
    assert not (tmp_path / "o").exists()


def test_usage_error():
    with pytest.raises(SystemExit) as exc:
        encode.main(["--input", "only"])
    assert exc.value.code == 2


def test_deeply_nested_tree_exits_nonzero(tmp_path, capsys):
    bad = tmp_path / "deep.huf"
    bad.write_bytes(("1" + "(0.5" * 5000).encode("ascii") + b"\n\x08")
    assert decode.main(["--input", str(bad), "--output", str(tmp_path / "o"), "--legacy"]) == 1
    assert "nesting deeper than" in capsys.readouterr().err
