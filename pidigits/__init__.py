__all__ = [
    "mul_mod",
    "inv_mod",
    "inv_mod2",
    "pow_mod",
    "is_prime",
    "next_prime",
    "PrimeTable",
    "term_count",
    "extract_digit_block",
    "compute_blocks",
    "pi_digits",
]

from .extractor import extract_digit_block, term_count
from .modmath import inv_mod, inv_mod2, mul_mod, pow_mod
from .pi import compute_blocks, pi_digits
from .primes import PrimeTable, is_prime, next_prime
