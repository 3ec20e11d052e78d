"""Integration tests against the host `file` utility."""

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

from mimesorter.classifier import ClassifierError, FileCommandClassifier, sanitize_label
from mimesorter.config import DIRECTORY_SENTINEL
from mimesorter.executor import apply_plan
from mimesorter.scanner import build_plan
from mimesorter.utils import console

FILE_AVAILABLE = shutil.which("file") is not None


@unittest.skipUnless(FILE_AVAILABLE, "`file` utility not installed")
class TestFileCommand(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        self.classifier = FileCommandClassifier(command="file")

    def test_plain_text(self):
        path = self.root / "plaintext.txt"
        path.write_text("Just some plain words on a line.\n")
        self.assertEqual(sanitize_label(self.classifier.classify(path)), "text_plain")

    def test_pdf(self):
        path = self.root / "doc.pdf"
        path.write_bytes(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n")
        self.assertEqual(sanitize_label(self.classifier.classify(path)), "application_pdf")

    def test_directory_maps_to_sentinel(self):
        self.assertEqual(sanitize_label(self.classifier.classify(self.root)), DIRECTORY_SENTINEL)

    def test_missing_command(self):
        classifier = FileCommandClassifier(command=os.path.join(self._tmp.name, "no-such-file-cmd"))
        with self.assertRaises(ClassifierError):
            classifier.classify(self.root)

    def test_option_like_names(self):
        for name in ["-v", "-z", "-", "--help"]:
            path = self.root / name
            path.write_text("Just some plain words on a line.\n")
            self.assertEqual(sanitize_label(self.classifier.classify(path)), "text_plain", name)

    def test_names_with_spaces_and_quotes(self):
        for name in ["with space.txt", "it's \"quoted\".txt", " leading-space"]:
            path = self.root / name
            path.write_text("Just some plain words on a line.\n")
            self.assertEqual(sanitize_label(self.classifier.classify(path)), "text_plain", name)

    @unittest.skipUnless(sys.platform.startswith("linux"), "needs a filesystem that accepts raw bytes")
    def test_non_utf8_name(self):
        name = os.fsdecode(b"caf\xe9-notes.txt")
        path = self.root / name
        path.write_text("Just some plain words on a line.\n")

        self.assertEqual(sanitize_label(self.classifier.classify(path)), "text_plain")

    def test_relative_scan_of_option_like_names(self):
        for name in ["-v", "-z", "plain.txt"]:
            (self.root / name).write_text("Just some plain words on a line.\n")

        cwd = os.getcwd()
        os.chdir(self.root)
        self.addCleanup(os.chdir, cwd)

        with console.capture() as capture:
            plan = build_plan(Path("."), self.classifier)
            apply_plan(Path("."), plan, dry_run=False)

        self.assertEqual(plan, {"text_plain": [Path("-v"), Path("-z"), Path("plain.txt")]})
        self.assertNotIn("WARNING", capture.get())
        self.assertEqual(
            sorted(p.name for p in (self.root / "text_plain").iterdir()),
            ["-v", "-z", "plain.txt"],
        )

    def test_sort_directory(self):
        (self.root / "a.txt").write_text("Just some plain words on a line.\n")
        (self.root / "b.pdf").write_bytes(b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\n%%EOF\n")

        with console.capture():
            plan = build_plan(self.root, self.classifier)
            apply_plan(self.root, plan, dry_run=False)

        self.assertTrue((self.root / "text_plain" / "a.txt").is_file())
        self.assertTrue((self.root / "application_pdf" / "b.pdf").is_file())


if __name__ == "__main__":
    unittest.main()
