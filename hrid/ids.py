'''
Human readable IDs: a `Codec` plus padding, grouping and case folding.

The default alphabet leaves out symbols that are easily mistaken for others
(no I, J, O or Z), so that an ID read aloud or typed over from paper survives.
'''
import logging
import re
import threading

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from hrid.codec import Codec


logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = '0123456789ABCDEFGHKLMNPQRSTUVWXY'
DEFAULT_MIN_LENGTH = 14
DEFAULT_IGNORE_CASE = True
DEFAULT_GROUP_SIZE = 4
DEFAULT_CHECKSUM_LENGTH = 2

# Separates groups in formatted IDs. Any whitespace is accepted when parsing.
GROUP_SEPARATOR = ' '

_WHITESPACE = re.compile(r'\s+')


def _upper(s):
    '''
    Upper-cases `s` one code point at a time. Characters whose upper case
    is longer than one code point (like ß) are kept as they are, so the
    length and the symbol positions never change.
    '''
    out = []
    for c in s:
        u = c.upper()
        out.append(u if len(u) == 1 else c)
    return ''.join(out)


class HumanID(object):
    '''
    Converts numbers to IDs like ``0000 0000 01C8`` and back.

    `min_length` left-pads IDs with the alphabet's first symbol (0 turns this
    off), `group_size` splits them into space-delimited groups (0 turns this
    off), and `ignore_case` makes parsing case-insensitive by upper-casing
    both the alphabet and the input.
    '''
    def __init__(self, alphabet=DEFAULT_ALPHABET,
                 min_length=DEFAULT_MIN_LENGTH,
                 ignore_case=DEFAULT_IGNORE_CASE,
                 group_size=DEFAULT_GROUP_SIZE,
                 checksum_length=DEFAULT_CHECKSUM_LENGTH):
        if min_length < 0:
            raise ValueError('Minimum ID length must not be negative.')
        if group_size < 0:
            raise ValueError('Group size must not be negative.')

        if ignore_case and isinstance(alphabet, str):
            alphabet = _upper(alphabet)

        self.codec = Codec(alphabet, checksum_length)
        self.min_length = min_length
        self.ignore_case = ignore_case
        self.group_size = group_size

    @property
    def options(self):
        return {
            'alphabet': self.codec.alphabet,
            'min_length': self.min_length,
            'ignore_case': self.ignore_case,
            'group_size': self.group_size,
            'checksum_length': self.codec.checksum_length,
        }

    def to_symbols(self, n):
        out = self.codec.to_symbols(n)

        padding = self.min_length - len(out)
        if padding > 0:
            out = [self.codec.first_symbol()] * padding + out

        if self.group_size:
            grouped = []
            for i in range(0, len(out), self.group_size):
                if grouped:
                    grouped.append(GROUP_SEPARATOR)
                grouped.extend(out[i:i + self.group_size])
            out = grouped
        return out

    def to_string(self, n):
        return ''.join(self.to_symbols(n))

    def to_number(self, s):
        if self.ignore_case:
            s = _upper(s)
        if self.group_size:
            s = _WHITESPACE.sub('', s)
        return self.codec.to_number(s)

    def __repr__(self):
        return 'HumanID({})'.format(', '.join(
            '{}={!r}'.format(k, v) for k, v in self.options.items()))


def settings_options():
    '''
    Returns `HumanID` keyword arguments from the ``HRID_*`` settings, falling
    back to the module defaults.
    '''
    return {
        'alphabet': getattr(settings, 'HRID_ALPHABET', DEFAULT_ALPHABET),
        'min_length': getattr(settings, 'HRID_MIN_LENGTH', DEFAULT_MIN_LENGTH),
        'ignore_case': getattr(settings, 'HRID_IGNORE_CASE',
                               DEFAULT_IGNORE_CASE),
        'group_size': getattr(settings, 'HRID_GROUP_SIZE', DEFAULT_GROUP_SIZE),
        'checksum_length': getattr(settings, 'HRID_CHECKSUM_LENGTH',
                                   DEFAULT_CHECKSUM_LENGTH),
    }


_default = None
_default_lock = threading.Lock()


def get_default():
    '''
    Returns the shared `HumanID` built from settings, creating it on first
    use. A misconfiguration raises here, and the next call tries again.
    '''
    global _default
    converter = _default
    if converter is None:
        with _default_lock:
            if _default is None:
                _default = HumanID(**settings_options())
                logger.debug('created default converter: {!r}'.format(
                    _default))
            converter = _default
    return converter


def reset_default():
    global _default
    with _default_lock:
        _default = None


@receiver(setting_changed)
def _reset_on_setting_changed(sender, setting, **kwargs):
    if setting.startswith('HRID_'):
        reset_default()


def to_string(n):
    '''Converts `n` to an ID using the default converter.'''
    return get_default().to_string(n)


def to_number(s):
    '''Converts the ID `s` to its number using the default converter.'''
    return get_default().to_number(s)
