from __future__ import annotations

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml

from indexdir.config import (
    ENV_INDEX_BASE,
    ConfigError,
    IndexDirectorySettings,
    SourceDirectorySettings,
    dump_example_config,
    load_properties,
)
from tests.helpers import INDEX_NAME, write_config


class LoadPropertiesTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.dict(os.environ, {ENV_INDEX_BASE: ""}, clear=False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_packaged_defaults(self) -> None:
        properties = load_properties(INDEX_NAME)

        self.assertEqual(properties, {"indexBase": ".", "locking_strategy": "simple"})

    def test_index_section_overrides_defaults(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = write_config(
                Path(tmpdir) / "indexdir.yaml",
                {
                    "default": {"indexBase": "~/indexes", "locking_strategy": "native"},
                    "indexes": {INDEX_NAME: {"indexName": "books_v2", "locking_strategy": "single"}},
                },
            )
            books = load_properties(INDEX_NAME, path)
            authors = load_properties("Authors", path)

        self.assertEqual(
            books, {"indexBase": "~/indexes", "locking_strategy": "single", "indexName": "books_v2"}
        )
        self.assertEqual(authors, {"indexBase": "~/indexes", "locking_strategy": "native"})

    def test_overrides_flat_and_dotted(self) -> None:
        overrides = {
            "locking_strategy": "none",
            f"indexes.{INDEX_NAME}.indexName": "custom",
            "default.indexBase": "/var/indexes",
        }

        properties = load_properties(INDEX_NAME, overrides=overrides)

        self.assertEqual(properties["locking_strategy"], "none")
        self.assertEqual(properties["indexName"], "custom")
        self.assertEqual(properties["indexBase"], "/var/indexes")

    def test_null_values_stay_unconfigured(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = write_config(Path(tmpdir) / "c.yaml", {"default": {"locking_strategy": None}})
            properties = load_properties(INDEX_NAME, path)

        self.assertIsNone(properties["locking_strategy"])
        self.assertIsNone(IndexDirectorySettings.from_properties(properties).locking_strategy)

    def test_scalars_are_stringified(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "c.toml"
            path.write_text('[default]\nindexName = 42\nflag = true\n', encoding="utf-8")
            properties = load_properties(INDEX_NAME, path)

        self.assertEqual(properties["indexName"], "42")
        self.assertEqual(properties["flag"], "true")

    def test_json_config(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "c.json"
            path.write_text(json.dumps({"indexes": {INDEX_NAME: {"indexBase": "/data"}}}), encoding="utf-8")
            properties = load_properties(INDEX_NAME, path)

        self.assertEqual(properties["indexBase"], "/data")

    def test_environment_overrides_index_base(self) -> None:
        with patch.dict(os.environ, {ENV_INDEX_BASE: "/mnt/indexes"}, clear=False):
            properties = load_properties(INDEX_NAME, overrides={"default.indexBase": "/ignored"})

        self.assertEqual(properties["indexBase"], "/mnt/indexes")

    def test_missing_file_raises(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                load_properties(INDEX_NAME, Path(tmpdir) / "missing.yaml")

    def test_unsupported_suffix_raises(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "c.ini"
            path.write_text("[default]\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_properties(INDEX_NAME, path)

    def test_malformed_file_raises(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "c.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_properties(INDEX_NAME, path)

    def test_non_mapping_section_raises(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = write_config(Path(tmpdir) / "c.yaml", {"indexes": ["Books"]})
            with self.assertRaises(ConfigError):
                load_properties(INDEX_NAME, path)

    def test_nested_property_value_raises(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = write_config(Path(tmpdir) / "c.yaml", {"default": {"indexBase": ["a", "b"]}})
            with self.assertRaises(ConfigError):
                load_properties(INDEX_NAME, path)


class SettingsViewTests(unittest.TestCase):
    def test_index_settings_defaults(self) -> None:
        settings = IndexDirectorySettings.from_properties({})

        self.assertEqual(settings.index_base, ".")
        self.assertIsNone(settings.index_name)
        self.assertIsNone(settings.locking_strategy)
        self.assertEqual(settings.effective_index_name("Books"), "Books")

    def test_index_settings_read_aliases(self) -> None:
        settings = IndexDirectorySettings.from_properties(
            {"indexBase": "/data", "indexName": "", "locking_strategy": "native", "other": "x"}
        )

        self.assertEqual(settings.index_base, "/data")
        self.assertEqual(settings.effective_index_name("Books"), "")
        self.assertEqual(settings.locking_strategy, "native")

    def test_source_settings_use_caller_keys(self) -> None:
        settings = SourceDirectorySettings.from_properties(
            {"master": "/srv", "copy": None}, root_key="master", relative_key="copy"
        )

        self.assertEqual(settings.root, "/srv")
        self.assertIsNone(settings.relative)


class DumpExampleConfigTests(unittest.TestCase):
    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertIn("default", data)
        self.assertIn("indexes", data)

    def test_dump_example_config_json(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "nested" / "example.json"
            dump_example_config(dest)
            data = json.loads(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["default"]["locking_strategy"], "simple")

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()
