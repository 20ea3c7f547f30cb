"""
# Chain-Tags: test_bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `bases.py`.
"""

import contextlib
import io
import unittest

from chaintags.bases import ComposedTag, FunctionTag, make_chainable
from chaintags.templates import LiteralTemplate, zip_template

upper = make_chainable(lambda template: zip_template(template).upper(), name='upper')
brackets = make_chainable(lambda template: f'[{zip_template(template)}]', name='brackets')


def exclaim(template: LiteralTemplate) -> str:
    return zip_template(template) + '!'


def double(template: LiteralTemplate) -> str:
    return zip_template(template) * 2


class TestBases(unittest.TestCase):
    def test_make_chainable_names(self):
        self.assertIsInstance(upper, FunctionTag)
        self.assertEqual(upper.name, 'upper')
        self.assertEqual(make_chainable(exclaim).name, 'exclaim')
        self.assertEqual(make_chainable(lambda template: '').name, 'anonymous_tag')
        self.assertEqual(make_chainable(exclaim, name='bang').name, 'bang')
        self.assertEqual(repr(upper), '<FunctionTag upper>')

    def test_make_chainable_decorator(self):
        @make_chainable
        def shout(template: LiteralTemplate) -> str:
            return zip_template(template).upper()

        self.assertEqual(shout.name, 'shout')
        self.assertEqual(shout('hey'), 'HEY')

    def test_template_call(self):
        self.assertEqual(upper(['a ', ' c'], 'b'), 'A B C')
        self.assertEqual(upper(LiteralTemplate(['a ', ' c'], ['b'])), 'A B C')
        self.assertEqual(brackets(['x']), '[x]')

    def test_string_call(self):
        self.assertEqual(upper('hi'), 'HI')
        self.assertEqual(brackets(''), '[]')
        self.assertRaises(TypeError, upper, 'hi', 'extra value')

    def test_chaining(self):
        self.assertEqual(brackets(upper)('hi'), '[HI]')
        self.assertEqual(upper(brackets)('hi'), '[HI]')
        self.assertEqual(brackets(upper).name, 'brackets(upper)')
        self.assertEqual(brackets(upper)(['a', 'c'], 'b'), '[ABC]')

    def test_chaining_order(self):
        exclaim_tag = make_chainable(exclaim)
        double_tag = make_chainable(double)
        self.assertEqual(double_tag(exclaim_tag)('a'), 'a!a!')
        self.assertEqual(exclaim_tag(double_tag)('a'), 'aa!')

    def test_chaining_plain_function(self):
        composed_tag = brackets(exclaim)
        self.assertIsInstance(composed_tag, ComposedTag)
        self.assertEqual(composed_tag.name, 'brackets(exclaim)')
        self.assertEqual(composed_tag('wow'), '[wow!]')

    def test_chaining_depth(self):
        composed_tag = brackets(brackets(brackets(upper)))
        self.assertEqual(composed_tag.name, 'brackets(brackets(brackets(upper)))')
        self.assertEqual(composed_tag('x'), '[[[X]]]')

        composed_tag = brackets(upper)(brackets)
        self.assertEqual(composed_tag.name, 'brackets(upper)(brackets)')
        self.assertEqual(composed_tag('x'), '[[X]]')

    def test_composed_tag_parts(self):
        composed_tag = brackets(upper)
        self.assertIs(composed_tag.outer, brackets)
        self.assertIs(composed_tag.inner, upper)

    def test_verbose_mode(self):
        verbose_upper = make_chainable(upper, verbose_mode_enabled=True)
        self.assertEqual(verbose_upper.name, 'upper')

        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            self.assertEqual(verbose_upper('ab'), 'AB')
        printed = output.getvalue()
        self.assertIn('<' * 48 + ' BEFORE upper\nab\n' + '=' * 48 + '\nAB\n' + '>' * 48 + ' AFTER upper', printed)

        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            verbose_upper('AB')
        self.assertIn('=' * 48 + ' (no change)', output.getvalue())

    def test_quiet_mode(self):
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            upper('ab')
        self.assertEqual(output.getvalue(), '')


if __name__ == '__main__':
    unittest.main()
