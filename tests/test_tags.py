"""
# Chain-Tags: test_tags.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `tags.py`.
"""

import unittest

from chaintags.tags import LineWithIndent, WrapTag, flush, fold, identity, indent, outdent, paragraph, raw, wrap
from chaintags.templates import LiteralTemplate


class TestTags(unittest.TestCase):
    def test_identity(self):
        self.assertEqual(identity(''), '')
        self.assertEqual(identity('  keep \n  as is  '), '  keep \n  as is  ')
        self.assertEqual(identity(['Hello ', '!'], 'world'), 'Hello world!')
        self.assertEqual(identity(['a', 'b', 'c'], 1), 'a1bc')
        self.assertEqual(identity(['a', 'b'], None), 'ab')
        self.assertEqual(identity.name, 'identity')

    def test_raw(self):
        template = LiteralTemplate(['line\n', ''], ['!'], raw=['line\\n', ''])
        self.assertEqual(raw(template), 'line\\n!')
        self.assertEqual(identity(template), 'line\n!')
        self.assertEqual(identity(raw)(template), 'line\\n!')
        self.assertRaises(TypeError, raw, 'plain string')
        self.assertRaises(TypeError, raw, identity)

    def test_paragraph(self):
        self.assertEqual(paragraph(''), '')
        self.assertEqual(paragraph('a\nb\n\n\nc'), 'a\n\nb\n\nc')
        self.assertEqual(paragraph('\n  one  two\n\n   \nthree\n'), '  one two\n\nthree')

        for text in ['a\n\n\n\nb', '\n\n\n', 'x\n \n\t\n\ny\n\n']:
            self.assertNotIn('\n\n\n', paragraph(text))

    def test_fold(self):
        self.assertEqual(fold(''), '')
        self.assertEqual(fold('a\nb\nc'), 'abc')
        self.assertEqual(fold('a\n b\nc'), 'a bc')
        self.assertEqual(fold(flush)('a\n b\nc'), 'abc')

    def test_flush(self):
        self.assertEqual(flush(''), '')
        self.assertEqual(flush('  a\n    b  \nc'), 'a\nb\nc')
        self.assertEqual(flush('\ta  b'), 'a b')

    def test_outdent(self):
        self.assertEqual(outdent(''), '')
        self.assertEqual(outdent('  a\n  b\n    c'), 'a\nb\n  c')
        self.assertEqual(outdent('    a\n\n  b'), '  a\n\nb')
        self.assertEqual(outdent('a\n  b'), 'a\n  b')
        self.assertEqual(outdent('   \n  '), '')

    def test_outdent_idempotent(self):
        for text in ['  a\n  b\n    c', '\n    x\n      y\n\n    z', 'flat\ntext']:
            self.assertEqual(outdent(outdent(text)), outdent(text))

    def test_indent(self):
        self.assertEqual(indent(2)('x\ny'), '  x\n  y')
        self.assertEqual(indent(0)('x\ny'), 'x\ny')
        self.assertEqual(indent(-2)('    x\n      y'), '  x\n    y')
        self.assertEqual(indent(-10)('    x\n      y'), 'x\n  y')
        self.assertEqual(indent(-3)('x\n  y'), 'x\n  y')
        self.assertEqual(indent(-1)(''), '')
        self.assertEqual(indent(4).name, 'indent(4)')
        self.assertEqual(indent(-2).amount, -2)

    def test_wrap(self):
        self.assertEqual(wrap(10)(''), '')
        self.assertEqual(wrap(10)('aaa bbb ccc ddd'), 'aaa bbb\nccc ddd')
        self.assertEqual(wrap(20)('one two\nthree four\nfive'), 'one two three four\nfive')
        self.assertEqual(wrap(12)('  alpha beta gamma delta'), '  alpha beta\n  gamma\n  delta')
        self.assertEqual(wrap(80)('a\nb\n\nc'), 'a b\n\nc')
        self.assertEqual(wrap(80)('a\n  b\n  c\nd'), 'a\n  b c\nd')
        self.assertEqual(wrap(80)('a  \n \nb'), 'a\n\nb')
        self.assertEqual(wrap(3)('abcdef gh'), 'abcdef\ngh')
        self.assertEqual(wrap(5)('ab cdefghij kl'), 'ab\ncdefghij\nkl')
        self.assertEqual(wrap(4)('unsplittable'), 'unsplittable')
        self.assertEqual(wrap(0)('a b c'), 'a\nb\nc')
        self.assertEqual(wrap(-5)('a b'), 'a\nb')
        self.assertEqual(wrap(72).name, 'wrap(72)')
        self.assertEqual(wrap(72).width, 72)

    def test_wrap_line_lengths(self):
        text = 'The quick brown fox\njumps over the lazy dog,\n\nand then naps in the afternoon sun.'
        for width in range(0, 50):
            for line in wrap(width)(text).split('\n'):
                self.assertTrue(len(line) <= width or ' ' not in line, msg=f'width {width}: {line!r}')

    def test_merge_lines_by_indentation(self):
        self.assertEqual(WrapTag.merge_lines_by_indentation([]), [])
        self.assertEqual(
            WrapTag.merge_lines_by_indentation(['a', 'b', '  c', '  d', '', 'e']),
            [
                LineWithIndent(0, 'a b'),
                LineWithIndent(2, '  c d'),
                LineWithIndent(0, ''),
                LineWithIndent(0, 'e'),
            ],
        )
        self.assertEqual(
            WrapTag.merge_lines_by_indentation(['', 'x', 'y']),
            [LineWithIndent(0, ''), LineWithIndent(0, 'x y')],
        )

    def test_split_logical_line(self):
        self.assertEqual(WrapTag.split_logical_line(LineWithIndent(0, ''), 10), [''])
        self.assertEqual(WrapTag.split_logical_line(LineWithIndent(0, 'short'), 10), ['short'])
        self.assertEqual(
            WrapTag.split_logical_line(LineWithIndent(4, '    one two three'), 11),
            ['    one two', '    three'],
        )
        self.assertEqual(WrapTag.split_logical_line(LineWithIndent(0, 'abc def'), 2), ['abc', 'def'])

    def test_chaining(self):
        self.assertEqual(
            indent(-2)(paragraph(outdent))('\n    one\n    two\n        three\n\n\n    four\n'),
            'one\n\ntwo\n\n    three\n\nfour',
        )
        self.assertEqual(indent(-2)(paragraph(outdent)).name, 'indent(-2)(paragraph(outdent))')
        self.assertEqual(indent(2)(wrap(9))('one two three'), '  one two\n  three')
        self.assertEqual(wrap(9)(indent(2))('one two three'), '  one two\n  three')
        self.assertEqual(fold(outdent)(['  x', '\n  y'], 1), 'x1y')


if __name__ == '__main__':
    unittest.main()
