"""
Test Enum Frames
================

Unit tests for DataFrame export and import of enum dictionaries.
"""

import unittest

import polars as pl

from enum_dictionary import DuplicateKeyError, EnumDictionary, ValidationError


class TestEnumFrames(unittest.TestCase):
    """Test cases for frame conversion."""

    def setUp(self):
        """Set up test environment."""
        self.mouse_button = EnumDictionary(
            {'name': 'MIDDLE', 'label': '中键', 'code': 4},
            {'name': 'LEFT', 'label': '左键', 'code': 1},
            {'name': 'RIGHT', 'label': '右键', 'code': 2}
        )

    def test_to_frame(self):
        """Test that the frame is ordered by code with the expected schema."""
        df = self.mouse_button.to_frame()

        self.assertEqual(df.columns, ['code', 'name', 'label'])
        self.assertEqual(df.schema['code'], pl.Int64)
        self.assertEqual(df['code'].to_list(), [1, 2, 4])
        self.assertEqual(df['name'].to_list(), ['LEFT', 'RIGHT', 'MIDDLE'])
        self.assertEqual(df['label'].to_list(), ['左键', '右键', '中键'])

    def test_to_frame_with_hints(self):
        """Test that hints select rows and non items are left out."""
        df = self.mouse_button.to_frame('RIGHT', {'name': 'placeholder', 'label': '--'}, 'UNKNOWN', 'LEFT')
        self.assertEqual(df['name'].to_list(), ['RIGHT', 'LEFT'])

    def test_to_frame_with_extreme_codes(self):
        """Test that every code a dictionary accepts fits the frame."""
        enum_dict = EnumDictionary(
            {'name': 'MIN', 'label': 'min', 'code': -2 ** 63},
            {'name': 'MAX', 'label': 'max', 'code': 2 ** 63 - 1}
        )
        self.assertEqual(enum_dict.to_frame()['code'].to_list(), [-2 ** 63, 2 ** 63 - 1])

        with self.assertRaises(ValidationError):
            enum_dict.add_element({'name': 'BIG', 'label': 'b', 'code': 2 ** 63})
        self.assertEqual(len(enum_dict.to_frame()), 2)

    def test_empty_frame(self):
        """Test export of an empty dictionary."""
        df = EnumDictionary().to_frame()
        self.assertEqual(len(df), 0)
        self.assertEqual(df.columns, ['code', 'name', 'label'])

    def test_from_frame(self):
        """Test building a dictionary from a frame."""
        df = pl.DataFrame({
            'code': [None, 5, None],
            'name': ['NORMAL', 'DELETED', 'DISABLED'],
            'label': ['正常', '已删除', '禁用'],
            'color': ['green', 'red', 'gray'],
        })
        status = EnumDictionary.from_frame(df)

        self.assertEqual(status.get_code_from_name('NORMAL'), 0)
        self.assertEqual(status.get_code_from_name('DELETED'), 5)
        self.assertEqual(status.get_code_from_name('DISABLED'), 2)
        self.assertEqual(status.from_name('DELETED').extra, {'color': 'red'})

    def test_frame_round_trip(self):
        """Test that exporting and importing keeps all items."""
        restored = EnumDictionary.from_frame(self.mouse_button.to_frame())
        self.assertEqual(restored.to_list(), self.mouse_button.to_list())

    def test_from_frame_without_code_column(self):
        """Test that a frame without codes gets sequential codes."""
        status = EnumDictionary.from_frame(pl.DataFrame({'name': ['A', 'B'], 'label': ['a', 'b']}))
        self.assertEqual(status.name_of(1), 'B')

    def test_from_frame_missing_column(self):
        """Test that frames without name or label are rejected."""
        with self.assertRaises(ValidationError):
            EnumDictionary.from_frame(pl.DataFrame({'name': ['A']}))
        with self.assertRaises(ValidationError):
            EnumDictionary.from_frame(pl.DataFrame({'label': ['a']}))

    def test_from_frame_duplicate(self):
        """Test that duplicate names in a frame are rejected."""
        with self.assertRaises(DuplicateKeyError):
            EnumDictionary.from_frame(pl.DataFrame({'name': ['A', 'A'], 'label': ['a', 'b']}))


if __name__ == '__main__':
    unittest.main()
