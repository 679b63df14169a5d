from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from git_ignore.core.errors import UserConfigCorrupt, UserTemplateUnreadable
from git_ignore.io.user_config import UserConfigStore, UserData
from git_ignore.utils.paths import ProjectPaths


class UserConfigTestBase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.paths = ProjectPaths.under(Path(self._tmp.name))
        self.store = UserConfigStore(self.paths)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write_config(self, body: str) -> None:
        self.paths.config_dir.mkdir(parents=True, exist_ok=True)
        self.paths.config_file.write_text(body, encoding="utf-8")


class LoadSaveTests(UserConfigTestBase):
    def test_missing_config_is_empty(self) -> None:
        data = self.store.load()
        self.assertEqual(data.aliases, {})
        self.assertEqual(data.templates, {})
        self.assertFalse(self.paths.config_file.exists())

    def test_save_then_load_keeps_keys_and_values(self) -> None:
        data = UserData(
            aliases={"web": ["node", "yarn"], "editors": ["vim"]},
            templates={"mine": "mine.gitignore", "rust": "my-rust.gitignore"},
        )
        self.store.save(data)
        again = self.store.load()
        self.assertEqual(again.aliases, data.aliases)
        self.assertEqual(again.templates, data.templates)

    def test_partial_config(self) -> None:
        self._write_config('[aliases]\nweb = ["node"]\n')
        data = self.store.load()
        self.assertEqual(data.aliases, {"web": ["node"]})
        self.assertEqual(data.templates, {})

    def test_unparsable_config(self) -> None:
        self._write_config("[aliases\nweb = \n")
        with self.assertRaises(UserConfigCorrupt) as ctx:
            self.store.load()
        self.assertEqual(ctx.exception.path, self.paths.config_file)

    def test_wrong_shapes(self) -> None:
        for body in (
            'aliases = "web"\n',
            '[aliases]\nweb = "node"\n',
            '[aliases]\nweb = [1, 2]\n',
            '[templates]\nmine = 3\n',
        ):
            self._write_config(body)
            with self.assertRaises(UserConfigCorrupt, msg=body):
                self.store.load()


class InitTests(UserConfigTestBase):
    def test_init_creates_config_and_templates_dir(self) -> None:
        self.assertTrue(self.store.init())
        self.assertTrue(self.paths.config_file.is_file())
        self.assertTrue(self.paths.templates_dir.is_dir())
        self.assertEqual(self.store.load().aliases, {})

    def test_init_keeps_existing_config(self) -> None:
        self.store.add_alias("web", ["node"])
        self.assertFalse(self.store.init())
        self.assertEqual(self.store.load().aliases, {"web": ["node"]})

    def test_init_force_overwrites(self) -> None:
        self.store.add_alias("web", ["node"])
        with self.assertLogs("git_ignore.io.user_config", level="WARNING"):
            self.assertTrue(self.store.init(force=True))
        self.assertEqual(self.store.load().aliases, {})

    def test_corrupt_config_is_not_overwritten_without_force(self) -> None:
        self._write_config("not = [valid\n")
        self.assertFalse(self.store.init())
        self.assertEqual(self.paths.config_file.read_text(encoding="utf-8"), "not = [valid\n")
        with self.assertRaises(UserConfigCorrupt):
            self.store.add_alias("web", ["node"])
        self.assertEqual(self.paths.config_file.read_text(encoding="utf-8"), "not = [valid\n")


class AliasTests(UserConfigTestBase):
    def test_add_and_replace(self) -> None:
        self.store.add_alias("web", ["node"])
        self.store.add_alias("web", ["node", "yarn"])
        self.assertEqual(self.store.load().aliases, {"web": ["node", "yarn"]})

    def test_remove(self) -> None:
        self.store.add_alias("web", ["node"])
        self.assertTrue(self.store.remove_alias("web"))
        self.assertFalse(self.store.remove_alias("web"))
        self.assertEqual(self.store.load().aliases, {})


class TemplateTests(UserConfigTestBase):
    def test_add_creates_file_with_header(self) -> None:
        path = self.store.add_template("mine", "mine.gitignore")
        self.assertEqual(path, self.paths.templates_dir / "mine.gitignore")
        self.assertEqual(path.read_text(encoding="utf-8"), "### mine ###\n")
        self.assertEqual(self.store.load().templates, {"mine": "mine.gitignore"})

    def test_add_keeps_existing_file(self) -> None:
        self.paths.templates_dir.mkdir(parents=True)
        (self.paths.templates_dir / "mine.gitignore").write_text("*.bak\n", encoding="utf-8")
        self.store.add_template("mine", "mine.gitignore")
        self.assertEqual(self.store.read_template("mine.gitignore"), "*.bak\n")

    def test_remove_keeps_file(self) -> None:
        path = self.store.add_template("mine", "mine.gitignore")
        self.assertTrue(self.store.remove_template("mine"))
        self.assertFalse(self.store.remove_template("mine"))
        self.assertTrue(path.exists())
        self.assertEqual(self.store.load().templates, {})

    def test_missing_template_file(self) -> None:
        with self.assertRaises(UserTemplateUnreadable) as ctx:
            self.store.read_named_template("ghost", "ghost.gitignore")
        self.assertEqual(ctx.exception.name, "ghost")
        self.assertEqual(ctx.exception.path, self.paths.templates_dir / "ghost.gitignore")

    def test_undecodable_template_file(self) -> None:
        path = self.store.add_template("mine", "mine.gitignore")
        path.write_bytes(b"\xff\xfe bad")
        with self.assertRaises(UserTemplateUnreadable) as ctx:
            self.store.read_named_template("mine", "mine.gitignore")
        self.assertEqual(ctx.exception.path, path)


if __name__ == "__main__":
    unittest.main()
