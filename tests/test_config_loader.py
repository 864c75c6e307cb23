import json
import os
import tempfile
import unittest
from pathlib import Path

from config.config_loader import DEFAULT_CONFIG, load_config, validate_config


class ConfigLoaderTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write_config(self, overrides):
        path = Path(self.tmp.name) / "runtime_config.json"
        overrides.setdefault("output_directory", os.path.join(self.tmp.name, "logs"))
        path.write_text(json.dumps(overrides), encoding="utf-8")
        return path

    def test_defaults_are_valid(self):
        validate_config(DEFAULT_CONFIG.copy())

    def test_overrides_merge_over_defaults(self):
        path = self.write_config({"max_steps": 5000, "duplicate_rules": "reject"})

        config = load_config(str(path), verbose=False)

        self.assertEqual(config["max_steps"], 5000)
        self.assertEqual(config["duplicate_rules"], "reject")
        self.assertEqual(config["rules_file"], DEFAULT_CONFIG["rules_file"])
        self.assertTrue(os.path.isdir(config["output_directory"]))

    def test_wrong_type(self):
        path = self.write_config({"max_steps": "lots"})

        with self.assertRaises(TypeError):
            load_config(str(path), verbose=False)

    def test_missing_key(self):
        config = DEFAULT_CONFIG.copy()
        del config["rules_file"]

        with self.assertRaises(ValueError):
            validate_config(config)

    def test_bad_values(self):
        for overrides in ({"blank_symbol": "EE"}, {"blank_symbol": "0"}, {"blank_symbol": "1"}, {"duplicate_rules": "newest"}, {"max_steps": -1}):
            config = DEFAULT_CONFIG.copy()
            config.update(overrides)
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValueError):
                    validate_config(config)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(os.path.join(self.tmp.name, "nope.json"))

    def test_shipped_config(self):
        path = Path(__file__).resolve().parent.parent / "config" / "runtime_config.json"
        with open(path, "r", encoding="utf-8") as f:
            shipped = json.load(f)

        self.assertEqual(set(shipped), set(DEFAULT_CONFIG))


if __name__ == "__main__":
    unittest.main()
