from multiprocessing import Pool, cpu_count
import argparse
import logging
import os
import sys
from typing import Iterator, List, Optional

from .extractor import extract_digit_block, term_count
from .primes import PrimeTable

BLOCK_DIGITS = 9
DEFAULT_DIGITS = 800


def block_offset(i: int) -> int:
    # block i covers digits 9i+1 .. 9i+9 after the decimal point
    return BLOCK_DIGITS * i + 1


def block_count(digits: int) -> int:
    return -(-digits // BLOCK_DIGITS)


def format_block(value: int) -> str:
    return "%09d" % value


class BlockCalculator:
    """
    Computes runs of digit blocks. Holds a prime table sized for the last
    block of the job; the table is only ever read, so one calculator can be
    pickled out to every worker.
    """
    def __init__(self, count: int):
        last = block_offset(max(count - 1, 0))
        self.primes = PrimeTable(3 * term_count(last))

    def __call__(self, indices) -> List[int]:
        logging.debug("process %s started on blocks %s", os.getpid(), indices)
        blocks = [extract_digit_block(block_offset(i), self.primes) for i in indices]
        logging.debug("process %s finished blocks %s", os.getpid(), indices)
        return blocks


def range_chunks(start: int, end: int, n: int) -> Iterator[range]:
    # range [start, end) split into n contiguous chunks, the first
    # (end - start) % n chunks one longer than the rest
    interval, extra = divmod(end - start, n)
    lo = start
    for i in range(n):
        hi = lo + interval + (1 if i < extra else 0)
        if hi > lo:
            yield range(lo, hi)
        lo = hi


def compute_blocks(count: int, workers: int = 1) -> List[int]:
    """Values of blocks 0..count-1, in block order."""
    if count < 0:
        raise ValueError(f"block count must be >= 0, got {count}")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if count == 0:
        return []

    calculator = BlockCalculator(count)
    logging.debug("blocks: %d, primes: %r", count, calculator.primes)

    if workers == 1 or count < 2:
        return calculator(range(count))

    chunks = list(range_chunks(0, count, min(workers, count)))
    logging.debug("chunks: %s", chunks)
    with Pool(processes=len(chunks)) as pool:
        results = pool.map(calculator, chunks)

    logging.debug("combining results")
    return [block for chunk in results for block in chunk]


def pi_digits(digits: int, workers: int = 1) -> str:
    """
    "3." followed by exactly `digits` decimal digits of pi.
    """
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {digits}")
    blocks = compute_blocks(block_count(digits), workers)
    return "3." + "".join(format_block(b) for b in blocks)[:digits]


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pidigits",
        description="Print decimal digits of pi, computed nine at a time "
                    "without big-number arithmetic",
    )
    parser.add_argument("digits", type=int, nargs="?", default=DEFAULT_DIGITS)
    parser.add_argument("-n", "--ncpu", type=int, default=cpu_count())
    parser.add_argument("-o", "--output", type=str, default="-")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.digits < 0:
        parser.error("digits must be >= 0")
    if args.ncpu < 1:
        parser.error("--ncpu must be >= 1")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    logging.debug("digits: %d", args.digits)
    logging.debug("workers: %d", args.ncpu)

    result = pi_digits(args.digits, workers=args.ncpu)
    if args.output == "-":
        print(result)
    else:
        with open(args.output, "w") as f:
            f.write(result + "\n")


if __name__ == '__main__':
    main()
