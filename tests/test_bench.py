import pytest

from schnorr_nopk.bench import main, run_benchmark


def test_run_benchmark_counts():
    result = run_benchmark(5, seed=3)
    assert result.count == 5
    assert result.failures == 0
    assert result.verify_seconds >= 0
    assert result.verify_ms_per_sig >= 0


def test_run_benchmark_rejects_empty():
    with pytest.raises(ValueError):
        run_benchmark(0)


def test_main_prints_summary(capsys):
    assert main(["--count", "3", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "signatures : 3" in out
    assert "failures   : 0" in out


def test_main_rejects_bad_count():
    with pytest.raises(SystemExit):
        main(["--count", "0"])
