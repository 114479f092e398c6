from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from lnc_config.config import FLAG_ERROR, HINT_ERROR, PORT_ERROR
from lnc_config.errors import FieldValidationError, ItemValidationError, ValidationError
from lnc_config.manager import ChallengeConfig, ChallengeFormManager, EditingAt, Hint, Idle


class ScalarFieldTest(unittest.TestCase):
    def setUp(self) -> None:
        self.form = ChallengeFormManager()

    def test_defaults(self) -> None:
        config = self.form.config
        self.assertEqual(config.category, "misc")
        self.assertEqual(config.difficulty, "easy")
        self.assertEqual(config.hints, [])
        self.assertEqual(config.files, [])
        self.assertFalse(self.form.flag_valid)
        self.assertEqual(self.form.port_error, "")
        self.assertFalse(self.form.can_export)

    def test_flag_edit_recomputes_validity(self) -> None:
        self.form.set_field("flag", "LNC25{abc}")
        self.assertTrue(self.form.flag_valid)
        self.assertTrue(self.form.can_export)

        self.form.set_field("flag", "flag{abc}")
        self.assertFalse(self.form.flag_valid)
        self.assertEqual(self.form.config.flag, "flag{abc}")
        self.assertEqual(self.form.field_errors(), {"flag": FLAG_ERROR})

    def test_port_edit_sets_and_clears_error(self) -> None:
        self.form.set_field("flag", "LNC25{abc}")
        self.form.set_field("port", "70000")
        self.assertEqual(self.form.port_error, PORT_ERROR)
        self.assertEqual(self.form.config.port, "70000")
        self.assertFalse(self.form.can_export)

        self.form.set_field("port", "")
        self.assertEqual(self.form.port_error, "")
        self.assertTrue(self.form.can_export)

    def test_overlong_port_keeps_form_usable(self) -> None:
        self.form.set_field("flag", "LNC25{abc}")
        self.form.set_field("port", "1" * 5000)
        self.assertEqual(self.form.port_error, PORT_ERROR)
        self.assertFalse(self.form.can_export)
        self.assertFalse(self.form.documents().valid)

    def test_free_text_fields(self) -> None:
        for name in ("name", "author", "discord", "description"):
            self.form.set_field(name, f"value for {name}")
            self.assertEqual(getattr(self.form.config, name), f"value for {name}")

    def test_enum_fields_reject_unknown_values(self) -> None:
        self.form.set_field("category", "web")
        with self.assertRaises(FieldValidationError) as ctx:
            self.form.set_field("category", "stego")
        self.assertEqual(ctx.exception.field, "category")
        self.assertEqual(self.form.config.category, "web")

        with self.assertRaises(FieldValidationError):
            self.form.set_field("difficulty", "trivial")
        self.assertEqual(self.form.config.difficulty, "easy")

    def test_unknown_field_rejected(self) -> None:
        with self.assertRaises(FieldValidationError):
            self.form.set_field("hints", "nope")

    def test_seeded_config_validity(self) -> None:
        form = ChallengeFormManager(ChallengeConfig(flag="LNC25{x}", port="0"))
        self.assertTrue(form.flag_valid)
        self.assertEqual(form.port_error, PORT_ERROR)


class HintListTest(unittest.TestCase):
    def setUp(self) -> None:
        self.form = ChallengeFormManager()

    def test_add_appends_and_clears_staging(self) -> None:
        self.form.hint_text = "look closer"
        self.form.hint_cost = "25"
        hint = self.form.add_or_update_hint()
        self.assertEqual(hint, Hint("look closer", 25))
        self.form.add_or_update_hint("second", 0)
        self.assertEqual([h.description for h in self.form.hints], ["look closer", "second"])
        self.assertEqual(self.form.hint_text, "")
        self.assertEqual(self.form.hint_cost, "")
        self.assertEqual(self.form.hint_error, "")

    def test_invalid_hint_leaves_list_unchanged(self) -> None:
        self.form.add_or_update_hint("keep", 10)
        for description, cost in (("", 10), ("x", "-1"), ("x", "abc"), ("x", "")):
            with self.assertRaises(ItemValidationError):
                self.form.add_or_update_hint(description, cost)
            self.assertEqual(self.form.hints, [Hint("keep", 10)])
        self.assertEqual(self.form.hint_error, HINT_ERROR)
        self.assertEqual(self.form.field_errors()["hint"], HINT_ERROR)

    def test_validation_error_alias(self) -> None:
        with self.assertRaises(ValidationError):
            self.form.add_or_update_hint("", "5")

    def test_success_clears_previous_error(self) -> None:
        with self.assertRaises(ItemValidationError):
            self.form.add_or_update_hint("x", "-5")
        self.form.add_or_update_hint("x", "5")
        self.assertEqual(self.form.hint_error, "")

    def test_edit_then_confirm_replaces_in_place(self) -> None:
        for i in range(3):
            self.form.add_or_update_hint(f"hint {i}", i)
        self.form.edit_hint(1)
        self.assertEqual(self.form.hint_cursor, EditingAt(1))
        self.assertEqual(self.form.hint_text, "hint 1")
        self.assertEqual(self.form.hint_cost, 1)
        self.assertEqual(len(self.form.hints), 3)

        self.form.hint_text = "hint one"
        self.form.add_or_update_hint()
        self.assertEqual(
            self.form.hints,
            [Hint("hint 0", 0), Hint("hint one", 1), Hint("hint 2", 2)],
        )
        self.assertIsInstance(self.form.hint_cursor, Idle)
        self.assertIsNone(self.form.hint_cursor.index)

    def test_rejected_update_keeps_cursor(self) -> None:
        self.form.add_or_update_hint("a", 1)
        self.form.edit_hint(0)
        with self.assertRaises(ItemValidationError):
            self.form.add_or_update_hint("a", "-1")
        self.assertEqual(self.form.hint_cursor, EditingAt(0))
        self.assertEqual(self.form.hints, [Hint("a", 1)])

    def test_delete_and_out_of_range(self) -> None:
        self.form.add_or_update_hint("a", 1)
        self.form.add_or_update_hint("b", 2)
        self.form.delete_hint(0)
        self.assertEqual(self.form.hints, [Hint("b", 2)])
        with self.assertRaises(IndexError):
            self.form.delete_hint(1)
        with self.assertRaises(IndexError):
            self.form.edit_hint(-1)

    def test_delete_adjusts_cursor(self) -> None:
        for name in "abc":
            self.form.add_or_update_hint(name, 1)
        self.form.edit_hint(2)
        self.form.delete_hint(0)
        self.assertEqual(self.form.hint_cursor, EditingAt(1))
        self.form.delete_hint(1)
        self.assertIsInstance(self.form.hint_cursor, Idle)

    def test_cancel_edit(self) -> None:
        self.form.add_or_update_hint("a", 1)
        self.form.edit_hint(0)
        self.form.cancel_hint_edit()
        self.assertIsInstance(self.form.hint_cursor, Idle)
        self.assertEqual(self.form.hint_text, "")
        self.form.add_or_update_hint("b", 2)
        self.assertEqual(len(self.form.hints), 2)


class FileListTest(unittest.TestCase):
    def setUp(self) -> None:
        self.form = ChallengeFormManager()

    def test_empty_filename_is_noop(self) -> None:
        self.form.add_or_update_file("")
        self.form.add_or_update_file()
        self.assertEqual(self.form.files, [])

    def test_add_edit_replace(self) -> None:
        self.form.file_input = "chall.zip"
        self.form.add_or_update_file()
        self.form.add_or_update_file("libc.so.6")
        self.assertEqual(self.form.file_input, "")

        self.form.edit_file(0)
        self.assertEqual(self.form.file_input, "chall.zip")
        self.assertEqual(self.form.file_cursor, EditingAt(0))
        self.form.add_or_update_file("vault")
        self.assertEqual(self.form.files, ["vault", "libc.so.6"])
        self.assertIsInstance(self.form.file_cursor, Idle)

    def test_delete_shifts_indices(self) -> None:
        for name in ("a", "b", "c", "d"):
            self.form.add_or_update_file(name)
        self.form.delete_file(1)
        self.assertEqual(self.form.files, ["a", "c", "d"])
        with self.assertRaises(IndexError):
            self.form.delete_file(3)
        self.assertEqual(len(self.form.files), 3)

    def test_delete_adjusts_cursor(self) -> None:
        for name in ("a", "b", "c"):
            self.form.add_or_update_file(name)
        self.form.edit_file(2)
        self.form.delete_file(0)
        self.assertEqual(self.form.file_cursor, EditingAt(1))
        self.form.add_or_update_file("c2")
        self.assertEqual(self.form.files, ["b", "c2"])

        self.form.edit_file(0)
        self.form.delete_file(0)
        self.assertIsInstance(self.form.file_cursor, Idle)

    def test_lists_have_independent_cursors(self) -> None:
        self.form.add_or_update_file("a")
        self.form.add_or_update_hint("h", 1)
        self.form.edit_file(0)
        self.assertIsInstance(self.form.hint_cursor, Idle)
        self.form.add_or_update_hint("h2", 2)
        self.assertEqual(len(self.form.hints), 2)
        self.assertEqual(self.form.file_cursor, EditingAt(0))
        self.form.cancel_file_edit()
        self.assertIsInstance(self.form.file_cursor, Idle)


if __name__ == "__main__":
    unittest.main()
