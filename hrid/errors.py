'''
Exceptions raised by the codec and the ID wrapper.

Every error carries a `code` naming its kind and a `user_error` flag, so
callers can tell a mistyped ID (ask the user to retry) apart from a
misconfigured converter (which will never work, no matter the input).
'''
from django.core.exceptions import ImproperlyConfigured


class HridError(Exception):
    code = 'None'
    user_error = False

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return '{}: {}'.format(self.code, self.msg)


class ConfigurationError(HridError, ImproperlyConfigured):
    '''The converter can't be built from the given alphabet.'''


class InvalidInput(HridError, ValueError):
    '''The converter is fine, but the ID handed to it isn't.'''
    user_error = True


class InvalidAlphabet(ConfigurationError):
    code = 'AlphabetTooShortError'


class DuplicateSymbol(ConfigurationError):
    code = 'TokenRepeatsError'

    def __init__(self, symbol, alphabet):
        super().__init__('{} repeats in alphabet {!r}'.format(symbol, alphabet))
        self.symbol = symbol
        self.alphabet = alphabet


class InputTooShort(InvalidInput):
    code = 'IDTooShortError'


class ChecksumMismatch(InvalidInput):
    code = 'ChecksumError'

    def __init__(self, got, want):
        super().__init__(
            'checksum mismatch, got {!r}, want {!r}'.format(got, want))
        self.got = got
        self.want = want


class UnknownSymbol(InvalidInput):
    code = 'NoSuchTokenError'

    def __init__(self, symbol, alphabet):
        super().__init__(
            'token {} not in alphabet {!r}'.format(symbol, alphabet))
        self.symbol = symbol
        self.alphabet = alphabet


class NumberTooLarge(InvalidInput):
    code = 'NumberTooLargeError'
