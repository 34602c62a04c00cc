"""
Tests for Logic: parse, execute and persist in one step.

Uses a temporary data file so real user data is never touched.
"""

import json
import tempfile
import unittest
from pathlib import Path

from module_fixtures import ADD_LINE_CS3219, CS3219, typical_modules
from moduletracker.commands import MESSAGE_INVALID_MODULE_DISPLAYED_INDEX, MESSAGE_UNKNOWN_COMMAND, ListCommand
from moduletracker.errors import CommandError, ParseError
from moduletracker.logic import Logic, load_tracker
from moduletracker.storage import module_to_dict, save_modules
from moduletracker.tracker import Model, ModuleTracker


class TestLoadTracker(unittest.TestCase):
    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            self.assertEqual(load_tracker(Path(d) / "none.json"), ModuleTracker())

    def test_invalid_file_gives_empty_tracker(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "moduletracker.json"
            p.write_text("{broken", encoding="utf-8")
            with self.assertLogs("moduletracker.logic", level="WARNING"):
                self.assertEqual(load_tracker(p), ModuleTracker())

    def test_duplicate_modules_give_empty_tracker(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "moduletracker.json"
            record = module_to_dict(CS3219)
            p.write_text(json.dumps({"modules": [record, record]}), encoding="utf-8")
            with self.assertLogs("moduletracker.logic", level="WARNING"):
                self.assertEqual(load_tracker(p), ModuleTracker())

    def test_valid_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "moduletracker.json"
            save_modules(typical_modules(), p)
            self.assertEqual(load_tracker(p), ModuleTracker(typical_modules()))


class TestLogic(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.data_path = Path(self._tmp.name) / "moduletracker.json"
        save_modules(typical_modules(), self.data_path)
        self.logic = Logic.from_file(self.data_path)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _stored_names(self) -> list:
        data = json.loads(self.data_path.read_text(encoding="utf-8"))
        return [m["name"] for m in data["modules"]]

    def test_unknown_command(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            self.logic.execute("uicfhmowqewca")
        self.assertEqual(str(ctx.exception), MESSAGE_UNKNOWN_COMMAND)

    def test_command_error_leaves_file_alone(self) -> None:
        before = self.data_path.read_text(encoding="utf-8")
        with self.assertRaises(CommandError) as ctx:
            self.logic.execute("delete 9")
        self.assertEqual(str(ctx.exception), MESSAGE_INVALID_MODULE_DISPLAYED_INDEX)
        self.assertEqual(self.data_path.read_text(encoding="utf-8"), before)

    def test_list(self) -> None:
        result = self.logic.execute("list")
        self.assertEqual(result.feedback, ListCommand.MESSAGE_SUCCESS)
        self.assertEqual(self.logic.displayed_modules(), tuple(typical_modules()))

    def test_add_is_saved(self) -> None:
        self.logic.execute(ADD_LINE_CS3219)
        self.assertEqual(self._stored_names()[-1], "CS3219")
        self.assertEqual(Logic.from_file(self.data_path).model.tracker.modules[-1], CS3219)

    def test_delete_and_clear_are_saved(self) -> None:
        self.logic.execute("delete 1")
        self.assertEqual(self._stored_names(), ["CS2103T", "CS2101", "CS1231S", "CS1101S"])

        self.logic.execute("clear")
        self.assertEqual(self._stored_names(), [])

    def test_view_commands_do_not_rewrite_file(self) -> None:
        self.data_path.unlink()
        self.logic.execute("find CS2106")
        self.logic.execute("sort name")
        self.logic.execute("list")
        self.assertFalse(self.data_path.exists())

    def test_failed_save_leaves_model_unchanged(self) -> None:
        logic = Logic(Model(), Path(self._tmp.name))
        with self.assertLogs("moduletracker.logic", level="ERROR"):
            with self.assertRaises(CommandError) as ctx:
                logic.execute(ADD_LINE_CS3219)
        self.assertTrue(str(ctx.exception).startswith("Could not save data file: "))
        self.assertEqual(logic.model.tracker, ModuleTracker())

    def test_failed_save_restores_view(self) -> None:
        logic = Logic(Model(ModuleTracker(typical_modules())), Path(self._tmp.name))
        logic.model.update_sort("name")
        with self.assertLogs("moduletracker.logic", level="ERROR"):
            with self.assertRaises(CommandError):
                logic.execute("delete 1")
        self.assertEqual(logic.model.tracker.modules, tuple(typical_modules()))
        self.assertEqual(logic.model.sort_key, "name")

    def test_without_data_path(self) -> None:
        logic = Logic(Model())
        logic.execute(ADD_LINE_CS3219)
        self.assertEqual(logic.displayed_modules(), (CS3219,))


if __name__ == "__main__":
    unittest.main()
