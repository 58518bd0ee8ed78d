"""
A Natural is a non-negative integer of any size, built from decimal digits.

Features:
 - arbitrary precision
 - canonical form (one representation per value)
 - every algorithm works digit by digit, no native big-integer arithmetic
"""

import logging
import operator


logger = logging.getLogger(__name__)


# Digit store
# -----------
# A raw value is a bytes object of decimal digits, least significant first.
# Each byte is 0 through 9.
# E.g. 1024 is b'\x04\x02\x00\x01'
# Canonical form has no zero digit at the most significant end.  So zero is b''.
RADIX = 10


def canonical(digits):
    """
    Strip zero digits from the most significant end.

    Works on bytes, bytearray, or any sequence of small ints.  Always returns bytes.
    """
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return bytes(digits[:end])
assert b'\x01\x02' == canonical(b'\x01\x02\x00\x00')
assert b'' == canonical(bytearray(3))
assert b'' == canonical(b'')


def is_canonical(raw):
    """Are these raw digits a valid digit store for a Natural?"""
    if not isinstance(raw, bytes):
        return False
    if len(raw) > 0 and raw[-1] == 0:
        return False
    return all(digit < RADIX for digit in raw)
assert is_canonical(b'')
assert is_canonical(b'\x00\x01')
assert not is_canonical(b'\x01\x00')
assert not is_canonical(b'\x0A')


def digits_from_int(i):
    """Decompose a non-negative int into raw digits by repeated remainder and divide."""
    assert i >= 0
    digits = bytearray()
    while i > 0:
        digits.append(i % RADIX)
        i //= RADIX
    return bytes(digits)
assert b'\x04\x02\x00\x01' == digits_from_int(1024)
assert b'' == digits_from_int(0)


# Comparison
# ----------
def digits_equal(a, b):
    """Canonical digit strings are equal exactly when the values are."""
    return a == b


def digits_greater(a, b):
    """
    Is a > b?

    More digits means larger, because there are no leading zeros.
    Same number of digits, compare from the most significant digit down.
    """
    if len(a) != len(b):
        return len(a) > len(b)
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return a[i] > b[i]
    return False
assert digits_greater(b'\x00\x01', b'\x09')
assert digits_greater(b'\x01\x02', b'\x09\x01')
assert not digits_greater(b'\x05', b'\x05')
assert not digits_greater(b'', b'\x01')


# Core arithmetic
# ---------------
def add_digits(a, b):
    """School addition with carry."""
    result = bytearray()
    longer = max(len(a), len(b))
    carry = 0
    i = 0
    while i < longer or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry = 1 if total >= RADIX else 0
        result.append(total - RADIX if carry else total)
        i += 1
    return bytes(result)
assert b'\x00\x00\x00\x01' == add_digits(b'\x03\x02\x01', b'\x07\x07\x08')   # 123 + 877 == 1000
assert b'\x05' == add_digits(b'\x05', b'')
assert b'' == add_digits(b'', b'')


def subtract_digits(a, b):
    """
    School subtraction with borrow.  Requires a >= b.

    Only the positions of b are visited, plus however far a borrow ripples.
    """
    result = bytearray(a)
    borrow = 0
    i = 0
    while i < len(b) or borrow:
        difference = result[i] - borrow
        if i < len(b):
            difference -= b[i]
        borrow = 1 if difference < 0 else 0
        result[i] = difference + RADIX if borrow else difference
        i += 1
    return canonical(result)
assert b'\x09\x09\x09' == subtract_digits(b'\x00\x00\x00\x01', b'\x01')   # 1000 - 1 == 999
assert b'' == subtract_digits(b'\x07\x04', b'\x07\x04')


def multiply_digits(a, b):
    """
    Grade-school long multiplication.

    The inner loop runs past the end of b while a carry remains.
    The result buffer len(a) + len(b) is always big enough.
    """
    result = bytearray(len(a) + len(b))
    for i in range(len(a)):
        carry = 0
        j = 0
        while j < len(b) or carry:
            value = result[i + j] + carry
            if j < len(b):
                value += a[i] * b[j]
            result[i + j] = value % RADIX
            carry = value // RADIX
            j += 1
    return canonical(result)
assert b'\x01\x00\x00\x08\x09\x09' == multiply_digits(b'\x09\x09\x09', b'\x09\x09\x09')   # 998001
assert b'' == multiply_digits(b'\x05', b'')


# Division
# --------
def estimate_by_subtraction(block, divisor):
    """
    Quotient digit and remainder of block / divisor, by repeated addition.

    Requires divisor < block < RADIX * divisor.  So the quotient is a single digit, 1 through 9.
    The accumulator grows by the divisor until it reaches or passes the block,
    then backs off one step if it went past.

    Returns (quotient_digit, remainder_raw).
    """
    quotient = 1
    accumulator = divisor
    while digits_greater(block, accumulator):
        quotient += 1
        accumulator = add_digits(accumulator, divisor)
    if digits_greater(accumulator, block):
        quotient -= 1
        remainder = subtract_digits(block, subtract_digits(accumulator, divisor))
    else:
        remainder = b''
    return quotient, remainder
assert (3, b'\x02') == estimate_by_subtraction(b'\x07\x01', b'\x05')   # 17 / 5 == 3 r 2
assert (4, b'') == estimate_by_subtraction(b'\x00\x02', b'\x05')   # 20 / 5 == 4 r 0


def long_divide_digits(dividend, divisor):
    """
    Long division, most significant dividend digit first.  Returns the raw quotient.

    Requires 1 < divisor < dividend.

    The block starts as the top len(divisor) digits of the dividend.
    A block smaller than the divisor contributes a 0 to the quotient.
    Otherwise the block is divided by subtraction and its remainder carries on.
    Either way the next lower dividend digit is pulled into the block.
    """
    position = len(dividend) - len(divisor)
    block = canonical(dividend[position:])
    quotient_descending = bytearray()
    while True:
        if digits_greater(divisor, block):
            quotient_digit = 0
        elif digits_equal(block, divisor):
            quotient_digit = 1
            block = b''
        else:
            quotient_digit, block = estimate_by_subtraction(block, divisor)
        quotient_descending.append(quotient_digit)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Long division at digit %d: quotient digit %d, %d digits left over",
                         position, quotient_digit, len(block))
        if position == 0:
            break
        position -= 1
        block = canonical(dividend[position:position + 1] + block)
    quotient_descending.reverse()
    return canonical(quotient_descending)
assert b'\x03' == long_divide_digits(b'\x07\x01', b'\x05')
assert b'\x03\x09' == long_divide_digits(b'\x09\x00\x02\x01', b'\x03\x01')   # 1209 / 13 == 93 r 0
assert b'\x00\x00\x01' == long_divide_digits(b'\x00\x00\x00\x01', b'\x00\x01')   # 1000 / 10 == 100


class Natural:
    """
    A non-negative integer of unlimited size.

    Internally a Natural is a bytes string of decimal digits, least significant first,
    called its raw value.

        assert b'\x03\x02\x01' == Natural(123).raw
        assert b'' == Natural(0).raw

    Each operator returns a new Natural.  Operands are never changed.
    The right operand may also be a plain int, which is converted first:

        assert Natural(1000) == Natural(123) + 877
        assert Natural(1000) == 123 + Natural(877)

    Subtraction below zero is an error, not a negative number:

        Natural(1) - Natural(2)   # raises Natural.NegativeResultError
    """

    __slots__ = ('_raw', )

    RADIX = RADIX

    # Raw digit strings for the algorithms.  Immutable, unlike the ZERO, ONE, TWO, TEN instances below.
    RAW_ZERO = b''
    RAW_ONE = b'\x01'
    RAW_TWO = b'\x02'

    def __init__(self, content=0):
        """
        Natural constructor.

        content - the type can be:
            int               10**100
            another Natural   Natural(42)
        """
        if isinstance(content, Natural):
            self._from_another_natural(content)
        elif isinstance(content, int):
            self._from_int(content)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    def _from_int(self, i):
        if i < 0:
            raise self.InvalidConstructionError("A natural number cannot be negative: {}".format(i))
        self.raw = digits_from_int(i)

    def _from_another_natural(self, another_natural_instance):
        """
        Copy Constructor

            assert Natural(1) == Natural(Natural(1))
        """
        self.raw = another_natural_instance.raw

    @classmethod
    def from_raw(cls, value):
        """Construct a Natural from its raw digits, which must already be canonical."""
        if not is_canonical(value):
            raise cls.InvalidConstructionError("Not canonical raw digits: " + repr(value))
        return_value = cls()
        return_value.raw = value
        return return_value

    class ConstructorTypeError(TypeError):
        """e.g. Natural(1.5) or Natural('12')"""

    class InvalidConstructionError(ValueError):
        """e.g. Natural(-1) or Natural.from_raw(b'\x01\x00')"""

    class NegativeResultError(ArithmeticError):
        """e.g. Natural(1) - Natural(2)"""

    class DivisionByZeroError(ZeroDivisionError):
        """e.g. Natural(1) / Natural(0) or Natural(1) % Natural(0)"""

    class BaseError(ValueError):
        """e.g. Natural(8).to_base(1)"""

    @property
    def raw(self):
        """
        Get the internal digit string.

            assert b'\x02\x04' == Natural(42).raw
        """
        return self._raw

    @raw.setter
    def raw(self, value):
        """Set the raw digit string.  Rare:  construction, inc() and dec()."""
        assert is_canonical(value), repr(value)
        # noinspection PyAttributeOutsideInit
        self._raw = value

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return (self.raw, )
        # NOTE:  A tuple because zero's raw b'' is falsy, and pickle skips __setstate__() for falsy states.

    def __setstate__(self, state):
        """For the 'pickle' package, object serialization."""
        (self.raw, ) = state

    def __repr__(self):
        """Handle repr(Natural(x))"""
        decimal = ''.join(chr(ord('0') + digit) for digit in reversed(self.raw))
        return "{}({})".format(type_name(self), decimal or '0')

    def __hash__(self):
        """Hash of the digits.  So Natural(5) == 5 but hash(Natural(5)) != hash(5).  Don't mix them as keys."""
        return hash(self.raw)

    def __bool__(self):
        return len(self.raw) > 0

    def is_zero(self):
        return len(self.raw) == 0

    def is_odd(self):
        """Parity comes from the least significant decimal digit."""
        return not self.is_zero() and self.raw[0] % 2 == 1

    # Comparison
    # ----------
    # Only == and > are computed.  The other four are derived from them.
    def __eq__(self, other):
        """Handle Natural(x) == something"""
        try:
            other_natural = self._op_ready(other)
        except self.ConstructorTypeError:
            return NotImplemented
        return digits_equal(self.raw, other_natural.raw)

    def __gt__(self, other):
        """Handle Natural(x) > something"""
        return digits_greater(self.raw, self._comparable(other).raw)

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return not self.__gt__(other) and not self.__eq__(other)
    def __le__(self, other):  return not self.__gt__(other)
    def __ge__(self, other):  return not self.__lt__(other)

    @classmethod
    def _op_ready(cls, x):
        """Get x ready to be an operand.  Natural or int."""
        if isinstance(x, Natural):
            return x
        return cls(x)

    def _comparable(self, other):
        """Make sure operands can be ordered.  Otherwise TypeError."""
        try:
            return self._op_ready(other)
        except self.ConstructorTypeError:
            raise TypeError("Natural cannot be compared with a " + type_name(other))

    # Math
    # ----
    def __add__(self, other): return self._binary_op(Natural._add, self, other)
    def __radd__(self, other): return self._binary_op(Natural._add, other, self)
    def __sub__(self, other): return self._binary_op(Natural._subtract, self, other)
    def __rsub__(self, other): return self._binary_op(Natural._subtract, other, self)
    def __mul__(self, other): return self._binary_op(Natural._multiply, self, other)
    def __rmul__(self, other): return self._binary_op(Natural._multiply, other, self)
    def __truediv__(self, other): return self._binary_op(Natural._divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(Natural._divide, other, self)
    def __floordiv__(self, other): return self._binary_op(Natural._divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(Natural._divide, other, self)
    def __mod__(self, other): return self._binary_op(Natural._remainder, self, other)
    def __rmod__(self, other): return self._binary_op(Natural._remainder, other, self)
    def __divmod__(self, other): return self._binary_op(Natural._divmod, self, other)
    def __rdivmod__(self, other): return self._binary_op(Natural._divmod, other, self)
    def __rpow__(self, other): return self._binary_op(Natural.power, other, self)

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        return self._binary_op(Natural.power, self, other)

    # NOTE:  There is no __iadd__ etc.  So n += 1 rebinds n to a new Natural,
    #        and any other name for the old value still sees the old value.
    #        And n %= d leaves the remainder in n.

    @classmethod
    def _binary_op(cls, op, input_left, input_right):
        """Two-input operator.  Convert int operands, then do the one true operation."""
        try:
            n1 = cls._op_ready(input_left)
            n2 = cls._op_ready(input_right)
        except cls.ConstructorTypeError:
            return NotImplemented
        return op(n1, n2)

    def _new(self, raw):
        """A fresh instance of the same class, never a shared constant."""
        return_value = type(self)()
        return_value.raw = raw
        return return_value

    def _add(self, other):
        return self._new(add_digits(self.raw, other.raw))

    def _subtract(self, other):
        if digits_greater(other.raw, self.raw):
            raise self.NegativeResultError("Negative result: {!r} - {!r}".format(self, other))
        return self._new(subtract_digits(self.raw, other.raw))

    def _multiply(self, other):
        if self.is_zero() or other.is_zero():
            return self._new(b'')
        if self.raw == self.RAW_ONE:
            return self._new(other.raw)
        if other.raw == self.RAW_ONE:
            return self._new(self.raw)
        return self._new(multiply_digits(self.raw, other.raw))

    def _divide(self, other):
        """Natural division, quotient rounded down."""
        if other.is_zero():
            raise self.DivisionByZeroError("Division by zero: {!r} / 0".format(self))
        if other > self:
            return self._new(b'')
        if other == self:
            return self._new(self.RAW_ONE)
        if other.raw == self.RAW_ONE:
            return self._new(self.raw)
        return self._new(self._long_division(self.raw, other.raw))

    @staticmethod
    def _long_division(dividend_raw, divisor_raw):
        return long_divide_digits(dividend_raw, divisor_raw)

    def _remainder(self, other):
        """
        What's left over after natural division.

        Recomputed from the quotient, dividend - quotient * divisor.
        The leftover block inside the long division is not used.
        """
        if other.is_zero():
            raise self.DivisionByZeroError("Remainder by zero: {!r} % 0".format(self))
        if other.raw == self.RAW_ONE or other == self:
            return self._new(b'')
        if other > self:
            return self._new(self.raw)
        return self._subtract(self._divide(other)._multiply(other))

    def _divmod(self, other):
        return self._divide(other), self._remainder(other)

    def power(self, exponent):
        """
        Raise to a natural power, by squaring and multiplying.

            assert Natural(1024) == Natural(2).power(Natural(10))
        """
        exponent = self._op_ready(exponent)
        if exponent.is_zero():
            return self._new(self.RAW_ONE)
        if exponent.raw == self.RAW_ONE:
            return self._new(self.raw)
        result = self._new(self.RAW_ONE)
        base = self
        while not exponent.is_zero():
            if exponent.is_odd():
                result = result._multiply(base)
            base = base._multiply(base)
            exponent = exponent._divide(self.from_raw(self.RAW_TWO))
        return result

    def inc(self):
        """Add one.  Prefix increment, changes and returns self."""
        self.raw = add_digits(self.raw, self.RAW_ONE)
        return self

    def dec(self):
        """Subtract one.  Prefix decrement, changes and returns self.  Zero stays zero and raises."""
        self.raw = self._subtract(self.from_raw(self.RAW_ONE)).raw
        return self

    # Base conversion
    # ---------------
    def to_base(self, base):
        """
        The digits of this number in another base, least significant first.

        Each digit is itself a Natural.

            assert [Natural(1), Natural(0), Natural(1)] == Natural(5).to_base(2)
            assert [] == Natural(0).to_base(2)
        """
        base = self._valid_base(base)
        digits = []
        value = self
        while not value.is_zero():
            quotient = value._divide(base)
            digits.append(value._subtract(quotient._multiply(base)))
            value = quotient
        logger.debug("%r in base %r has %d digits", self, base, len(digits))
        return digits

    def _valid_base(self, base):
        base = self._op_ready(base)
        if digits_greater(self.RAW_TWO, base.raw):
            raise self.BaseError("Base must be 2 or more, not {!r}".format(base))
        return base

    def digit_count(self, base):
        """How many digits in this base.  Zero has none."""
        return type(self)(len(self.to_base(base)))

    def digit_sum(self, base):
        """Add up the digits in this base."""
        total = type(self)()
        for digit in self.to_base(base):
            total = total._add(digit)
        return total

    # Bitwise
    # -------
    def __xor__(self, other): return self._bitwise_op(operator.xor, other)
    def __and__(self, other): return self._bitwise_op(operator.and_, other)
    def __or__(self, other): return self._bitwise_op(operator.or_, other)

    def _bitwise_op(self, op, other):
        """Line up the base 2 digits, combine them bit by bit, fold back to decimal."""
        if not isinstance(other, Natural):
            return NotImplemented
        bits_left = self.bits()
        bits_right = other.bits()
        align_with_zeroes(bits_left, bits_right)
        return self.binary_to_decimal([op(b1, b2) for b1, b2 in zip(bits_left, bits_right)])

    def bits(self):
        """Base 2 digits as plain 0 or 1, least significant first."""
        return [bit.raw[0] if bit.raw else 0 for bit in self.to_base(self.from_raw(self.RAW_TWO))]

    @classmethod
    def binary_to_decimal(cls, bits):
        """
        Fold bits, least significant first, back into a Natural.

        The weight of each position doubles by addition, so there is no call to power().
        """
        value = cls()
        weight = cls.from_raw(cls.RAW_ONE)
        for bit in bits:
            if bit:
                value = value._add(weight)
            weight = weight._add(weight)
        return value

    # Constants
    # ---------
    ZERO = None
    ONE = None
    TWO = None
    TEN = None

    @classmethod
    def internal_setup(cls):
        """Initialize Natural constants after the Natural class is defined."""
        cls.ZERO = cls.from_raw(cls.RAW_ZERO)
        cls.ONE = cls.from_raw(cls.RAW_ONE)
        cls.TWO = cls.from_raw(cls.RAW_TWO)
        cls.TEN = cls.from_raw(b'\x00\x01')


def align_with_zeroes(bits_1, bits_2):
    """Pad the shorter list of bits with 0s at the most significant end.  Modifies one of the lists."""
    while len(bits_1) < len(bits_2):
        bits_1.append(0)
    while len(bits_2) < len(bits_1):
        bits_2.append(0)


# noinspection PyProtectedMember
Natural.internal_setup()
assert Natural.TEN.raw == b'\x00\x01'


# Inspection
# ----------
def type_name(x):
    """
    Describe (very briefly) what type of object this is.

    THANKS:  http://stackoverflow.com/a/5008854/673991
    """
    return type(x).__name__
assert 'int' == type_name(3)
assert 'Natural' == type_name(Natural.ZERO)
