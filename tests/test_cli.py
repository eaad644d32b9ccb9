import pytest

from prefixcodec.cli import SAMPLE, main


def test_cli_text_verify_table(capsys):
    main(["abracadabra", "--verify", "--table"])
    out = capsys.readouterr().out
    assert "encoded = 01101001110011110110100 len = 23" in out
    assert "decoded = abracadabra" in out
    assert "[info] round-trip verified" in out
    assert "entropy" in out


def test_cli_defaults_to_sample(capsys):
    main([])
    assert f"decoded = {SAMPLE}" in capsys.readouterr().out


def test_cli_reads_file(tmp_path, capsys):
    path = tmp_path / "in.bin"
    path.write_bytes(b"\x00\x01\x01\x02")
    main(["--file", str(path), "--verify"])
    assert "[info] round-trip verified" in capsys.readouterr().out


def test_cli_reports_codec_errors(capsys):
    with pytest.raises(SystemExit) as info:
        main(["€"])
    assert info.value.code == 1
    assert "[warn]" in capsys.readouterr().out


def test_cli_unknown_log_level_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("PREFIXCODEC_LOG_LEVEL", "verbose")
    main(["abc"])
    out = capsys.readouterr().out
    assert "[warn] unknown PREFIXCODEC_LOG_LEVEL 'VERBOSE'" in out
    assert "decoded = abc" in out
