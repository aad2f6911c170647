# -*- coding: utf-8 -*-

import threading

from django.test import SimpleTestCase, override_settings

from hrid import ids
from hrid.codec import MAX_NUMBER
from hrid.errors import DuplicateSymbol, InvalidAlphabet, UnknownSymbol
from hrid.ids import HumanID


class HumanIDTest(SimpleTestCase):
    def test_defaults(self):
        converter = HumanID()
        self.assertEqual(converter.options, {
            'alphabet': '0123456789ABCDEFGHKLMNPQRSTUVWXY',
            'min_length': 14,
            'ignore_case': True,
            'group_size': 4,
            'checksum_length': 2,
        })

    def test_padding_and_grouping(self):
        converter = HumanID()
        # 12 is C, followed by checksums C (12) and R (24).
        self.assertEqual(converter.to_string(12), '0000 0000 000C CR')
        self.assertEqual(converter.to_number('0000 0000 000C CR'), 12)

    def test_parsing_is_lenient(self):
        converter = HumanID()
        for s in ('0000 0000 000c cr', '00000000000CCR', 'CCR', ' ccr\t',
                  '0000\t0000  000C\nCR'):
            self.assertEqual(converter.to_number(s), 12)

    def test_case_sensitive(self):
        converter = HumanID(alphabet='abcdefgh', ignore_case=False,
                            min_length=0, group_size=0, checksum_length=0)
        self.assertEqual(converter.to_string(9), 'bb')
        with self.assertRaises(UnknownSymbol):
            converter.to_number('BB')

    def test_ignore_case_uppercases_alphabet(self):
        converter = HumanID(alphabet='abcdefgh', min_length=0, group_size=0,
                            checksum_length=0)
        self.assertEqual(converter.to_string(9), 'BB')
        self.assertEqual(converter.to_number('bb'), 9)
        with self.assertRaises(DuplicateSymbol):
            HumanID(alphabet='aA')
        HumanID(alphabet='aA', ignore_case=False)

    def test_ignore_case_keeps_symbols_without_single_upper_case(self):
        converter = HumanID(alphabet='0123456789ß', min_length=0,
                            group_size=0, checksum_length=0)
        self.assertEqual(converter.codec.alphabet, '0123456789ß')
        self.assertEqual(converter.codec.radix, 11)
        self.assertEqual(converter.to_string(10), 'ß')
        self.assertEqual(converter.to_string(11), '10')
        self.assertEqual(converter.to_number('ß'), 10)

        converter = HumanID(alphabet='abßŉ', min_length=0, group_size=0,
                            checksum_length=1)
        self.assertEqual(converter.codec.alphabet, 'ABßŉ')
        # b is 1 and ß is 2, followed by checksum (1 + 2) % 4 == 3.
        self.assertEqual(converter.to_number('bßŉ'), 6)
        self.assertEqual(converter.to_string(6), 'Bßŉ')

    def test_no_grouping_keeps_whitespace_significant(self):
        converter = HumanID(min_length=8, group_size=0)
        self.assertEqual(converter.to_string(12), '00000CCR')
        with self.assertRaises(UnknownSymbol):
            converter.to_number('0000 0CCR')

    def test_long_ids_are_not_truncated(self):
        converter = HumanID()
        s = converter.to_string(MAX_NUMBER)
        self.assertEqual(len(s.replace(' ', '')), 15)
        self.assertEqual(converter.to_number(s), MAX_NUMBER)

    def test_round_trips(self):
        converter = HumanID()
        for n in [0, 1, 2, 3, 4, 5, 42, 1234567890, 987654321, MAX_NUMBER]:
            self.assertEqual(converter.to_number(converter.to_string(n)), n)

    def test_invalid_id(self):
        with self.assertRaises(UnknownSymbol):
            HumanID().to_number('012 . 345')

    def test_invalid_options(self):
        with self.assertRaises(ValueError):
            HumanID(min_length=-1)
        with self.assertRaises(ValueError):
            HumanID(group_size=-1)
        with self.assertRaises(InvalidAlphabet):
            HumanID(alphabet='X')


class DefaultConverterTest(SimpleTestCase):
    def setUp(self):
        ids.reset_default()

    def tearDown(self):
        ids.reset_default()

    def test_module_functions(self):
        self.assertEqual(ids.to_string(12), '0000 0000 000C CR')
        self.assertEqual(ids.to_number('0000 0000 000C CR'), 12)

    def test_is_shared(self):
        self.assertIs(ids.get_default(), ids.get_default())

    def test_concurrent_first_use(self):
        results = []

        def get():
            results.append(ids.get_default())

        threads = [threading.Thread(target=get) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(set(map(id, results))), 1)

    @override_settings(HRID_ALPHABET='0123456789', HRID_MIN_LENGTH=0,
                       HRID_GROUP_SIZE=0, HRID_CHECKSUM_LENGTH=0)
    def test_settings(self):
        self.assertEqual(ids.to_string(123), '123')
        self.assertEqual(ids.to_number('0123'), 123)

    def test_settings_change_resets(self):
        before = ids.get_default()
        with self.settings(HRID_GROUP_SIZE=0):
            self.assertEqual(ids.to_string(12), '00000000000CCR')
        self.assertIsNot(ids.get_default(), before)
        self.assertEqual(ids.to_string(12), '0000 0000 000C CR')

    def test_misconfiguration_is_raised(self):
        with self.settings(HRID_ALPHABET='0120'):
            with self.assertRaises(DuplicateSymbol):
                ids.get_default()
            with self.assertRaises(DuplicateSymbol):
                ids.to_string(1)
        self.assertEqual(ids.to_number('CCR'), 12)
