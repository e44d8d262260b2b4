import pytest

from seqlab.align_cli import demo_manhattan, main, run_global, run_local


@pytest.fixture
def fasta_pair(tmp_path):
    first = tmp_path / "a.fa"
    second = tmp_path / "b.fa"
    first.write_text(">a\nGATTACA\nGG\n")
    second.write_text(">b\nGCATGCU\n")
    return first, second


def test_run_global_writes_alignment(fasta_pair, tmp_path):
    first, second = fasta_pair
    out = tmp_path / "out.txt"
    alignment = run_global(first, second, out, 1.0, 1.0, 3.0)
    assert alignment.first.replace("-", "") == "GATTACAGG"
    assert alignment.second.replace("-", "") == "GCATGCU"
    lines = out.read_text().splitlines()
    assert lines[0] == ">string_1"
    assert lines[1] == alignment.first
    assert lines[3] == alignment.second
    assert lines[4] == ">string_2"


def test_run_local_writes_spans(fasta_pair, tmp_path):
    first, second = fasta_pair
    out = tmp_path / "out.txt"
    result = run_local(first, second, out, 1.0, 1.0, 1.0)
    assert result.alignment.first.replace("-", "") == "GATTACAGG"[result.start1:result.end1]
    assert result.alignment.second.replace("-", "") == "GCATGCU"[result.start2:result.end2]
    lines = out.read_text().splitlines()
    assert lines[0] == f">string_1: {result.start1} to {result.end1}"
    assert lines[4] == f">string_2: {result.start2} to {result.end2}"


def test_demo_manhattan_shape():
    lines = demo_manhattan().splitlines()
    assert len(lines) == 10
    assert all(len(line) == 8 for line in lines)
    assert lines[0][0] == "*"
    assert lines[-1][-1] == "*"
    assert sum(line.count("*") for line in lines) == 10 + 8 - 1


def test_main_default_prints_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.rstrip("\n") == demo_manhattan()


def test_main_manhattan_command(capsys):
    main(["manhattan"])
    assert capsys.readouterr().out.rstrip("\n") == demo_manhattan()


def test_main_global_creates_file(fasta_pair, tmp_path):
    first, second = fasta_pair
    out = tmp_path / "global.txt"
    assert main(["global", str(first), str(second), str(out)]) == 0
    assert out.read_text().startswith(">string_1\n")


def test_main_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["local", str(tmp_path / "none.fa"), str(tmp_path / "none2.fa"), str(tmp_path / "o.txt")])