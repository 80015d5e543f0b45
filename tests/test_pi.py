import pytest

from conftest import PI_100
from pidigits.pi import (
    BlockCalculator,
    block_count,
    block_offset,
    compute_blocks,
    format_block,
    main,
    pi_digits,
    range_chunks,
)


def test_block_layout():
    assert [block_offset(i) for i in range(4)] == [1, 10, 19, 28]
    assert block_count(0) == 0
    assert block_count(1) == 1
    assert block_count(9) == 1
    assert block_count(10) == 2
    assert block_count(800) == 89


def test_format_block():
    assert format_block(7) == "000000007"
    assert format_block(141592653) == "141592653"
    assert format_block(0) == "000000000"


def test_range_chunks():
    chunks = list(range_chunks(0, 10, 3))
    assert chunks == [range(0, 4), range(4, 7), range(7, 10)]
    assert list(range_chunks(0, 2, 4)) == [range(0, 1), range(1, 2)]
    assert [i for c in range_chunks(5, 23, 4) for i in c] == list(range(5, 23))


def test_block_calculator():
    calc = BlockCalculator(3)
    assert calc(range(3)) == [141592653, 589793238, 462643383]
    assert calc([2]) == [462643383]


def test_pi_digits_prefix():
    assert pi_digits(0) == "3."
    assert pi_digits(1) == "3.1"
    assert pi_digits(20) == "3." + PI_100[:20]
    assert pi_digits(100) == "3." + PI_100


def test_invalid_arguments():
    with pytest.raises(ValueError):
        pi_digits(-1)
    with pytest.raises(ValueError):
        compute_blocks(3, workers=0)


def test_parallel_matches_sequential():
    sequential = compute_blocks(12, workers=1)
    parallel = compute_blocks(12, workers=4)
    assert parallel == sequential
    assert "".join(format_block(b) for b in parallel)[:100] == PI_100


def test_fifty_blocks_parallel(pi_reference):
    digits = "".join(format_block(b) for b in compute_blocks(50, workers=4))
    assert digits == pi_reference[:450]


def test_main_stdout(capsys):
    main(["30", "-n", "1"])
    assert capsys.readouterr().out == "3." + PI_100[:30] + "\n"


def test_main_output_file(tmp_path):
    out = tmp_path / "pi.txt"
    main(["45", "--ncpu", "2", "-o", str(out)])
    assert out.read_text() == "3." + PI_100[:45] + "\n"


@pytest.mark.parametrize("argv", [["-5"], ["10", "-n", "0"], ["ten"]])
def test_main_rejects_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
