'''
Encodes unsigned 64-bit ints as strings over an arbitrary alphabet, and back.

The radix is the length of the alphabet, and the first symbol stands for 0.
Optionally a number of checksum symbols is appended, each one the sum of the
preceding symbols' digit values modulo the radix. That catches most typos,
but it is not tamper-proof.
'''
import logging

from hrid.errors import (ChecksumMismatch, DuplicateSymbol, InputTooShort,
                         InvalidAlphabet, NumberTooLarge, UnknownSymbol)


logger = logging.getLogger(__name__)

MAX_NUMBER = 2 ** 64 - 1


def int_pow(radix, exponent):
    '''
    Returns `radix` to the power of `exponent` using integer multiplication
    only. Doesn't check for overflow beyond `MAX_NUMBER`.
    '''
    if exponent == 0:
        return 1
    out = radix
    for _ in range(exponent - 1):
        out *= radix
    return out


class Codec(object):
    '''
    Converts between numbers and symbol sequences. Immutable once built, so
    one instance can be shared between threads.
    '''
    def __init__(self, alphabet, checksum_length=0):
        if not isinstance(alphabet, str) or len(alphabet) < 2:
            raise InvalidAlphabet(
                'alphabet must hold at least 2 symbols, got {!r}'.format(
                    alphabet))
        if (isinstance(checksum_length, bool)
                or not isinstance(checksum_length, int)):
            raise TypeError(
                'Expected an int checksum length, got {!r}.'.format(
                    checksum_length))
        if checksum_length < 0:
            raise ValueError('Checksum length must not be negative.')

        index = {}
        for i, symbol in enumerate(alphabet):
            if symbol in index:
                raise DuplicateSymbol(symbol, alphabet)
            index[symbol] = i

        self._alphabet = alphabet
        self._index = index
        self._checksum_length = checksum_length

        logger.debug('codec: radix {}, alphabet {!r}, {} checksum symbols'
                     .format(self.radix, alphabet, checksum_length))

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def radix(self):
        return len(self._alphabet)

    @property
    def checksum_length(self):
        return self._checksum_length

    def first_symbol(self):
        '''The symbol for digit 0, which is what IDs get padded with.'''
        return self._alphabet[0]

    def checksum_symbol(self, symbols):
        '''
        Returns the checksum symbol for `symbols`: the sum of their digit
        values modulo the radix, mapped back onto the alphabet.
        '''
        return self._alphabet[self._checksum(self._digits(symbols))]

    def to_symbols(self, n):
        '''
        Returns `n` as a list of symbols, most significant first, followed by
        the checksum symbols. 0 is a single symbol (the first one).
        '''
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError('Expected an int, got {!r}.'.format(n))
        if not 0 <= n <= MAX_NUMBER:
            raise ValueError(
                '{} is outside the range 0..{}.'.format(n, MAX_NUMBER))

        digits = []
        while True:
            n, r = divmod(n, self.radix)
            digits.append(r)
            if n == 0:
                break
        digits.reverse()

        # Each checksum symbol also covers the ones appended before it.
        for _ in range(self._checksum_length):
            digits.append(self._checksum(digits))

        return [self._alphabet[d] for d in digits]

    def to_string(self, n):
        return ''.join(self.to_symbols(n))

    def to_number(self, symbols):
        '''
        Returns the number that `symbols` represents. Raises an `InvalidInput`
        subclass when a symbol isn't in the alphabet, when checksum symbols
        are missing or wrong, or when the value doesn't fit in 64 bits.
        '''
        symbols = list(symbols)
        digits = self._digits(symbols)

        if self._checksum_length:
            if len(digits) <= self._checksum_length:
                raise InputTooShort(
                    '{!r} needs more than {} symbols'.format(
                        ''.join(symbols), self._checksum_length))
            # Peel checksum symbols off the end, last appended first.
            for _ in range(self._checksum_length):
                got = digits.pop()
                want = self._checksum(digits)
                if got != want:
                    raise ChecksumMismatch(self._alphabet[got],
                                           self._alphabet[want])

        # Leading zeros add nothing. With a radix of at least 2, more than 64
        # significant digits can never fit in 64 bits.
        start = 0
        while start < len(digits) and digits[start] == 0:
            start += 1
        digits = digits[start:]
        if len(digits) > 64:
            raise NumberTooLarge(
                '{!r} exceeds {}'.format(''.join(symbols), MAX_NUMBER))

        n = 0
        for exponent, digit in enumerate(reversed(digits)):
            n += digit * int_pow(self.radix, exponent)
        if n > MAX_NUMBER:
            raise NumberTooLarge(
                '{!r} exceeds {}'.format(''.join(symbols), MAX_NUMBER))
        return n

    def _digits(self, symbols):
        digits = []
        for symbol in symbols:
            try:
                digits.append(self._index[symbol])
            except KeyError:
                raise UnknownSymbol(symbol, self._alphabet) from None
        return digits

    def _checksum(self, digits):
        return sum(digits) % self.radix

    def __repr__(self):
        return 'Codec({!r}, checksum_length={})'.format(
            self._alphabet, self._checksum_length)
