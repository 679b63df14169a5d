from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from git_ignore.core.models import DirEntry, extension_of
from git_ignore.detection.detector import Detector, detect_directory, merge_names
from git_ignore.detection.rules import (
    DEFAULT_RULES,
    PredicateKind,
    by_dir_name,
    by_file_extension,
    by_file_name,
    rule,
    rules_from_mapping,
)
from git_ignore.io.scanner import DirectoryScanner


F = DirEntry.file
D = DirEntry.directory


class SingleSignatureTests(unittest.TestCase):
    """One marker file, one expected answer."""

    def setUp(self) -> None:
        self.detector = Detector()

    def _check(self, entry: DirEntry, expected: list) -> None:
        self.assertEqual(self.detector.detect([entry]), expected, entry.name)

    def test_known_markers(self) -> None:
        self._check(F("package.json"), ["node"])
        self._check(F("requirements.txt"), ["python"])
        self._check(F("foo.cabal"), ["haskell"])
        self._check(F("stack.yaml"), ["haskell"])
        self._check(F("composer.json"), ["php"])
        self._check(F("foo.gemspec"), ["ruby"])
        self._check(F("Gemfile"), ["ruby"])
        self._check(F("Cargo.toml"), ["rust"])

    def test_independent_rules_all_fire(self) -> None:
        self._check(F("build.gradle"), ["java", "gradle"])
        self._check(F("pom.xml"), ["java", "maven"])

    def test_file_predicates_ignore_directories(self) -> None:
        self._check(D("Cargo.toml"), [])
        self._check(D("package.json"), [])
        self._check(D("lib.rs"), [])

    def test_dir_predicates_ignore_files(self) -> None:
        self._check(D(".metals"), ["scala"])
        self._check(F(".metals"), [])
        self._check(D("node_modules"), ["node"])
        self._check(F("node_modules"), [])

    def test_unrelated_entries(self) -> None:
        self._check(F("README.md"), [])
        self._check(D("src"), [])


class DetectorTests(unittest.TestCase):
    def test_table_order_and_no_duplicates(self) -> None:
        entries = [F("main.rs"), F("Cargo.toml"), F("index.js"), F("package.json")]
        self.assertEqual(Detector().detect(entries), ["node", "rust"])

    def test_detect_is_idempotent(self) -> None:
        entries = [F("pom.xml"), F("build.gradle"), D(".gradle")]
        detector = Detector()
        self.assertEqual(detector.detect(entries), detector.detect(entries))

    def test_empty_listing(self) -> None:
        self.assertEqual(Detector().detect([]), [])

    def test_custom_rules(self) -> None:
        detector = Detector([rule("docs", folders=("docs",)), rule("tex", extensions=("tex",))])
        self.assertEqual(detector.detect([F("paper.tex"), D("docs")]), ["docs", "tex"])
        self.assertEqual(len(detector.rules), 2)

    def test_same_template_twice_reported_once(self) -> None:
        detector = Detector([rule("x", files=("a",)), rule("x", files=("b",))])
        self.assertEqual(detector.detect([F("a"), F("b")]), ["x"])


class RuleConstructionTests(unittest.TestCase):
    def test_predicate_builders(self) -> None:
        self.assertIs(by_file_name("a").kind, PredicateKind.FILE_NAME)
        self.assertIs(by_file_extension("rs").kind, PredicateKind.FILE_EXTENSION)
        self.assertIs(by_dir_name(".git").kind, PredicateKind.DIR_NAME)

    def test_extension_is_exact_suffix(self) -> None:
        self.assertTrue(by_file_extension("rs").matches(F("main.rs")))
        self.assertFalse(by_file_extension("rs").matches(F("main.rsx")))
        self.assertFalse(by_file_extension("gz").matches(F("archive.tar")))
        self.assertTrue(by_file_extension("gz").matches(F("archive.tar.gz")))

    def test_extension_of(self) -> None:
        self.assertEqual(extension_of("a.b.c"), "c")
        self.assertIsNone(extension_of("Makefile"))
        self.assertIsNone(extension_of(".bashrc"))
        self.assertIsNone(extension_of("trailing."))

    def test_rules_from_mapping(self) -> None:
        table = rules_from_mapping({
            "rust": {"detect_files": ["Cargo.toml"], "detect_extensions": ["rs"]},
            "empty": {},
            "dart": {"detect_folders": [".dart_tool"]},
        })
        self.assertEqual([r.template for r in table], ["rust", "dart"])
        self.assertEqual(Detector(table).detect([D(".dart_tool"), F("x.rs")]), ["rust", "dart"])

    def test_default_table_has_no_empty_rules(self) -> None:
        for r in DEFAULT_RULES:
            self.assertTrue(r.predicates, r.template)


class DirectoryScanTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
        (self.root / "package.json").mkdir()
        (self.root / "src").mkdir()
        (self.root / "src" / "main.py").write_text("", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_scan_is_one_level_and_sorted(self) -> None:
        entries = DirectoryScanner().scan(self.root)
        self.assertEqual([e.name for e in entries], ["Cargo.toml", "package.json", "src"])
        by_name = {e.name: e for e in entries}
        self.assertTrue(by_name["Cargo.toml"].is_file)
        self.assertEqual(by_name["Cargo.toml"].extension, "toml")
        self.assertTrue(by_name["package.json"].is_dir)
        self.assertFalse(by_name["package.json"].is_file)

    def test_detect_directory(self) -> None:
        self.assertEqual(detect_directory(self.root), ["rust"])

    def test_missing_directory_raises(self) -> None:
        with self.assertRaises(OSError):
            DirectoryScanner().scan(self.root / "nope")


class MergeNamesTests(unittest.TestCase):
    def test_requested_first_then_new_detected(self) -> None:
        self.assertEqual(merge_names(["rust", "vim"], ["node", "rust"]), ["rust", "vim", "node"])

    def test_duplicates_in_requested_collapse(self) -> None:
        self.assertEqual(merge_names(["a", "a"], []), ["a"])

    def test_only_detected(self) -> None:
        self.assertEqual(merge_names([], ["java", "gradle"]), ["java", "gradle"])


if __name__ == "__main__":
    unittest.main()
