"""
natural - Arbitrary-precision natural numbers, digit by digit.

Usage example:

    import natural

    a = natural.Natural(999)
    assert a * a == natural.Natural(998001)
    assert a / 7 == 142
    assert a % 7 == 5
    assert natural.Natural(2).power(10) == 1024

Usage example:

    from natural import Natural

    assert Natural(5) ^ Natural(3) == Natural(6)
"""

from .number import Natural

__all__ = [
    'Natural',
]

from . import version
__version__ = version.__doc__
