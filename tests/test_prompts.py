"""Tests for building the run configuration."""

import argparse
import unittest
from pathlib import Path

from tcx_power_scaler.errors import ConfigurationError
from tcx_power_scaler.models import ScaleConfig
from tcx_power_scaler.prompts import (
    parse_scale_factor, prompt_scale_factor, resolve_config, scale_factor_type
)


def scripted_input(*answers):
    """input() replacement returning the given answers, then EOF."""
    remaining = iter(answers)

    def read(prompt=''):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read


def make_args(**overrides):
    values = {'folder': None, 'scale': None, 'dry_run': False, 'no_input': False}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestParseScaleFactor(unittest.TestCase):

    def test_valid(self):
        self.assertEqual(parse_scale_factor('0.95'), 0.95)
        self.assertEqual(parse_scale_factor(' 1.1\n'), 1.1)
        self.assertEqual(parse_scale_factor('-1'), -1.0)

    def test_invalid(self):
        for text in [None, '', 'abc', '0', '0.0', 'nan', 'inf']:
            self.assertIsNone(parse_scale_factor(text), text)

    def test_argparse_type_rejects_zero(self):
        with self.assertRaises(argparse.ArgumentTypeError):
            scale_factor_type('0')


class TestPromptScaleFactor(unittest.TestCase):

    def setUp(self):
        self.shown = []

    def test_confirmed(self):
        factor = prompt_scale_factor(scripted_input('0.95', 'y'), self.shown.append)

        self.assertEqual(factor, 0.95)
        self.assertEqual(self.shown[0], 'Enter scaling factor')
        self.assertIn('95%', self.shown[1])

    def test_reasks_until_y_or_n(self):
        factor = prompt_scale_factor(scripted_input('1.05', 'maybe', '', 'Y'), self.shown.append)

        self.assertEqual(factor, 1.05)
        self.assertEqual(sum('is this correct' in line for line in self.shown), 3)

    def test_rejected_factor_asks_again(self):
        factor = prompt_scale_factor(scripted_input('0.5', 'n', '0.9', 'y'), self.shown.append)

        self.assertEqual(factor, 0.9)

    def test_invalid_factor_asks_again(self):
        factor = prompt_scale_factor(scripted_input('abc', '0', '2', 'y'), self.shown.append)

        self.assertEqual(factor, 2.0)
        self.assertEqual(self.shown.count('Enter scaling factor'), 3)

    def test_blank_cancels(self):
        self.assertIsNone(prompt_scale_factor(scripted_input('  '), self.shown.append))

    def test_end_of_input_cancels(self):
        self.assertIsNone(prompt_scale_factor(scripted_input(), self.shown.append))
        self.assertIsNone(prompt_scale_factor(scripted_input('0.9'), self.shown.append))


class TestResolveConfig(unittest.TestCase):

    def test_from_arguments(self):
        config = resolve_config(make_args(folder='/data/rides', scale=0.95, dry_run=True))

        self.assertEqual(config, ScaleConfig(0.95, Path('/data/rides'), dry_run=True))

    def test_blank_folder_uses_current_directory(self):
        config = resolve_config(make_args(folder='  ', scale=2.0))

        self.assertEqual(config.working_folder, Path.cwd())

    def test_prompts_for_missing_scale(self):
        config = resolve_config(make_args(), scripted_input('0.8', 'Y'), lambda line: None)

        self.assertEqual(config.scale_factor, 0.8)

    def test_cancelled_prompt_is_configuration_error(self):
        with self.assertRaises(ConfigurationError):
            resolve_config(make_args(), scripted_input(''), lambda line: None)

    def test_no_input_requires_scale(self):
        def fail(prompt=''):
            raise AssertionError('prompted')

        with self.assertRaises(ConfigurationError):
            resolve_config(make_args(no_input=True), fail, lambda line: None)

    def test_config_is_immutable(self):
        config = resolve_config(make_args(scale=0.9))

        with self.assertRaises(AttributeError):
            config.scale_factor = 2.0

    def test_config_rejects_zero(self):
        with self.assertRaises(ConfigurationError):
            ScaleConfig(0.0, Path('.'))


if __name__ == '__main__':
    unittest.main()
