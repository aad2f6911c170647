'''
Converts numbers to human readable IDs, or IDs back to numbers with ``--id``.

    ./manage.py hrid 12
    ./manage.py hrid --id '0000 0000 00CC R'

Options default to the ``HRID_*`` settings. Arguments that can't be converted
are logged and skipped, the rest are printed one per line.
'''
import logging
import re

from django.core.management.base import BaseCommand, CommandError

from hrid.codec import MAX_NUMBER
from hrid.errors import ConfigurationError, InvalidInput
from hrid.ids import HumanID, settings_options


logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r'[0-9]+')


def _parse_number(arg):
    if not _DECIMAL.fullmatch(arg):
        raise ValueError('expected decimal digits 0-9 only')
    n = int(arg, 10)
    if not 0 <= n <= MAX_NUMBER:
        raise ValueError('out of range 0..{}'.format(MAX_NUMBER))
    return n


class Command(BaseCommand):
    help = ('Converts numbers to human readable IDs, or with --id, IDs to '
            'numbers.')

    def add_arguments(self, parser):
        defaults = settings_options()
        parser.add_argument('args', nargs='+', metavar='NUMBER_OR_ID')
        parser.add_argument(
            '--alphabet', '-a', default=defaults['alphabet'],
            help='Conversion alphabet: the first symbol represents 0, the '
                 'second 1, etc.')
        parser.add_argument(
            '--length', '-l', type=int, default=defaults['min_length'],
            help='Minimum length of generated IDs, 0 for no padding.')
        parser.add_argument(
            '--ignorecase', action='store_true', dest='ignore_case',
            default=defaults['ignore_case'],
            help='Ignore casing when converting IDs to numbers.')
        parser.add_argument(
            '--no-ignorecase', action='store_false', dest='ignore_case',
            help='Respect casing when converting IDs to numbers.')
        parser.add_argument(
            '--groupsize', '-g', type=int, default=defaults['group_size'],
            help='Size of space-delimited groups in generated IDs, 0 for '
                 'no grouping.')
        parser.add_argument(
            '--checksum', '-c', type=int, default=defaults['checksum_length'],
            help='Number of checksum symbols to append.')
        parser.add_argument(
            '--id', action='store_true', dest='from_id',
            help='Take arguments as IDs instead of numbers.')

    def handle(self, *args, **options):
        try:
            converter = HumanID(alphabet=options['alphabet'],
                                min_length=options['length'],
                                ignore_case=options['ignore_case'],
                                group_size=options['groupsize'],
                                checksum_length=options['checksum'])
        except (ConfigurationError, ValueError) as e:
            raise CommandError(str(e))

        if options['verbosity'] >= 2:
            logger.info('converter options: {}'.format(converter.options))

        for arg in args:
            if options['from_id']:
                try:
                    n = converter.to_number(arg)
                except InvalidInput as e:
                    logger.warning('{}: not a valid ID: {}'.format(arg, e))
                    continue
                self.stdout.write(str(n))
            else:
                try:
                    n = _parse_number(arg)
                except ValueError as e:
                    logger.warning('{}: not a valid number: {}'.format(arg, e))
                    continue
                self.stdout.write(converter.to_string(n))
