"""
Check-digit algorithms for card numbers and Brazilian tax ids.

These are the only places where correctness rests on arithmetic rather
than plumbing, so they live apart from the value objects and work on
plain digit strings:
1. Luhn: payment card numbers
2. Weighted modulo-11: CPF (individual) and CNPJ (organization) documents

Design Decisions:
- Pure functions over str so they can be tested against random digit sets
- Callers strip formatting first; non-digit input raises ValueError
- Weight sequences are generated, not hard-coded, so both check digits
  share one implementation
"""

from collections.abc import Sequence


def _to_digits(digits: str) -> list[int]:
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"Expected a non-empty digit string, got {len(digits)} chars")
    return [int(ch) for ch in digits]


# =============================================================================
# Luhn
# =============================================================================

def luhn_checksum(digits: str) -> int:
    """
    Compute the Luhn sum of a digit string, modulo 10.

    Walks from the rightmost digit, doubling every second digit starting
    with the second-from-right and subtracting 9 when the double exceeds 9.

    Returns:
        0 for a valid number, 1-9 otherwise
    """
    total = 0
    for position, digit in enumerate(reversed(_to_digits(digits))):
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10


def is_luhn_valid(digits: str) -> bool:
    """True if the Luhn sum of the digits is divisible by 10."""
    return luhn_checksum(digits) == 0


def luhn_check_digit(payload: str) -> str:
    """
    Compute the digit that makes payload + digit Luhn-valid.

    Example:
        >>> luhn_check_digit("411111111111111")
        '1'
    """
    # Appending "0" shifts every payload digit into its final position
    remainder = luhn_checksum(payload + "0")
    return str((10 - remainder) % 10)


# =============================================================================
# Weighted modulo-11
# =============================================================================

def cpf_weights(length: int) -> list[int]:
    """
    CPF weights for a window of `length` digits: length+1 down to 2.

    9 digits -> 10..2 (first check digit), 10 digits -> 11..2 (second).
    """
    return list(range(length + 1, 1, -1))


def cnpj_weights(length: int) -> list[int]:
    """
    CNPJ weights for a window of `length` digits.

    Counted from the right the weights run 2..9 and wrap back to 2, so
    12 digits -> 5,4,3,2,9,8,7,6,5,4,3,2 and 13 digits -> 6,5,4,3,2,9,...,2.
    """
    return [2 + (i % 8) for i in range(length)][::-1]


def mod11_check_digit(digits: str, weights: Sequence[int]) -> int:
    """
    Weighted modulo-11 check digit as used by CPF and CNPJ.

    Args:
        digits: The window of digits preceding the check digit
        weights: One weight per digit, aligned left to right

    Returns:
        0 if the weighted sum mod 11 is below 2, otherwise 11 minus it
    """
    values = _to_digits(digits)
    if len(values) != len(weights):
        raise ValueError(
            f"Weight count {len(weights)} does not match digit count {len(values)}"
        )
    remainder = sum(d * w for d, w in zip(values, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def cpf_check_digits(base: str) -> str:
    """Both check digits for the first 9 digits of a CPF."""
    if len(base) != 9:
        raise ValueError(f"CPF base must have 9 digits, got {len(base)}")
    first = mod11_check_digit(base, cpf_weights(9))
    second = mod11_check_digit(base + str(first), cpf_weights(10))
    return f"{first}{second}"


def cnpj_check_digits(base: str) -> str:
    """Both check digits for the first 12 digits of a CNPJ."""
    if len(base) != 12:
        raise ValueError(f"CNPJ base must have 12 digits, got {len(base)}")
    first = mod11_check_digit(base, cnpj_weights(12))
    second = mod11_check_digit(base + str(first), cnpj_weights(13))
    return f"{first}{second}"
