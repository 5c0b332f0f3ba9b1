import pytest

from gc_content.cli import build_report_config, load_config, main


def test_calc_prints_ratio(capsys):
    assert main(["calc", "ATCGNNATCG"]) == 0
    assert capsys.readouterr().out.strip() == "0.500000"


def test_calc_reports_invalid_sequence(capsys):
    assert main(["calc", "ACGTX"]) == 2
    assert "invalid nucleotide character" in capsys.readouterr().err


def test_calc_without_validation(capsys):
    assert main(["calc", "--no-validate", "GGXA"]) == 0
    assert capsys.readouterr().out.strip() == "0.666667"


def test_report_command(sample_fasta, tmp_path, capsys):
    out_dir = tmp_path / "report"
    assert main(["-v", "report", "--fasta", str(sample_fasta), "--out-dir", str(out_dir)]) == 0
    output = capsys.readouterr().out
    assert "Records reported: 3" in output
    assert "Records rejected: 1" in output
    assert (out_dir / "features.csv").exists()


def test_report_uses_config_file(sample_fasta, tmp_path, capsys):
    config = tmp_path / "config.yaml"
    out_dir = tmp_path / "from_config"
    config.write_text(
        f"out_dir: {out_dir}\nstrict: false\nskip_undefined: true\n", encoding="utf-8"
    )
    assert main(["report", "--fasta", str(sample_fasta), "--config", str(config)]) == 0
    output = capsys.readouterr().out
    assert "Records rejected: 0" in output
    assert (out_dir / "summary.json").exists()


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_unknown_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("email: someone@example.org\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown config keys: email"):
        load_config(path)


def test_cli_flags_override_config(tmp_path):
    config = build_report_config(
        tmp_path / "in.fasta",
        {"out_dir": "ignored", "chunk_size": 10, "skip_undefined": True, "max_length": None},
        out_dir=tmp_path / "out",
        chunk_size=4,
        skip_undefined=False,
        lenient=True,
    )
    assert config.out_dir == tmp_path / "out"
    assert config.chunk_size == 4
    assert config.skip_undefined is False
    assert config.strict is False
    assert config.max_length is None


def test_config_rejects_non_integer_chunk_size(tmp_path):
    with pytest.raises(ValueError, match="chunk_size"):
        build_report_config(tmp_path / "in.fasta", {"chunk_size": "big"})


@pytest.mark.parametrize("key", ["strict", "skip_undefined"])
def test_config_rejects_quoted_booleans(tmp_path, key):
    with pytest.raises(ValueError, match=key):
        build_report_config(tmp_path / "in.fasta", {key: "false"})


def test_config_reads_real_booleans(tmp_path):
    config = build_report_config(
        tmp_path / "in.fasta", {"strict": False, "skip_undefined": True}
    )
    assert config.strict is False
    assert config.skip_undefined is True


def test_config_gc_bounds(tmp_path):
    config = build_report_config(
        tmp_path / "in.fasta", {"min_gc": 0, "max_gc": 0.6}, max_gc=0.7
    )
    assert config.min_gc == 0.0
    assert config.max_gc == 0.7
    with pytest.raises(ValueError, match="min_gc"):
        build_report_config(tmp_path / "in.fasta", {"min_gc": "low"})


def test_report_gc_range_flags(sample_fasta, tmp_path, capsys):
    out_dir = tmp_path / "report"
    argv = ["report", "--fasta", str(sample_fasta), "--out-dir", str(out_dir)]
    assert main(argv + ["--min-gc", "0.6"]) == 0
    output = capsys.readouterr().out
    assert "Records reported: 1" in output
    assert "Records outside GC range: 2" in output
