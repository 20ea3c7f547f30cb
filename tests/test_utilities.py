"""
# Chain-Tags: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import math
import unittest

from chaintags.utilities import (
    compute_indentation,
    compute_minimum_indentation,
    is_blank,
    pad_start,
    split_into_lines,
)


class TestUtilities(unittest.TestCase):
    def test_split_into_lines(self):
        self.assertEqual(split_into_lines(''), [''])
        self.assertEqual(split_into_lines('a  b   c  \n'), ['a b c', ''])
        self.assertEqual(split_into_lines('  lead  space'), ['  lead space'])
        self.assertEqual(split_into_lines('a\t\tb'), ['a b'])
        self.assertEqual(split_into_lines('a\n\n\n\nb'), ['a', '', 'b'])
        self.assertEqual(split_into_lines('a\n  \t \nb'), ['a', '', 'b'])
        self.assertEqual(split_into_lines('\n\n\nx'), ['', 'x'])
        self.assertEqual(
            split_into_lines(
                '''
    Some  text.
        Indented   text.\t


    Back.
'''
            ),
            ['', '    Some text.', '        Indented text.', '', '    Back.', ''],
        )

    def test_is_blank(self):
        self.assertTrue(is_blank(''))
        self.assertTrue(is_blank(' \t '))
        self.assertFalse(is_blank('  x'))

    def test_compute_indentation(self):
        self.assertEqual(compute_indentation(''), 0)
        self.assertEqual(compute_indentation('x'), 0)
        self.assertEqual(compute_indentation('   x'), 3)
        self.assertEqual(compute_indentation('\t x'), 2)

    def test_compute_minimum_indentation(self):
        self.assertEqual(compute_minimum_indentation(['  a', '    b', '', ' ']), 2)
        self.assertEqual(compute_minimum_indentation(['a', '    b']), 0)
        self.assertEqual(compute_minimum_indentation(['\tx']), 0)
        self.assertEqual(compute_minimum_indentation([]), math.inf)
        self.assertEqual(compute_minimum_indentation(['', '   ']), math.inf)

    def test_pad_start(self):
        self.assertEqual(pad_start('7', 3, ' '), '  7')
        self.assertEqual(pad_start('7', 4, 'ab'), 'aba7')
        self.assertEqual(pad_start('long', 2, '0'), 'long')
        self.assertEqual(pad_start('x', 3, ''), 'x')
        self.assertEqual(pad_start('', 2, '─'), '──')


if __name__ == '__main__':
    unittest.main()
