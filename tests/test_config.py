import os
import tempfile
import unittest
from datetime import timedelta

from shopzap.config import (
    load_config, get_directory, get_context_store,
    DirectoryConfig, ContextConfig, CONFIG_ENV
)
from shopzap.context import MemoryContextStore
from shopzap.directory import MemoryDirectory, PickleDirectory, RestDirectory

CONFIG = """
[directory]
backend = "rest"
url = "https://project.supabase.co"
api_key = "anon-key"
timeout = 3.5

[context]
ttl_seconds = 600

[api]
name = "Test Routing"
origin = "https://shopzap.io"
allowed_origins = ["https://shopzap.io"]
"""


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "shopzap.toml")

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, content):
        with open(self.path, 'w') as f:
            f.write(content)

    def test_missing_file_gives_defaults(self):
        config = load_config(os.path.join(self.tmp.name, "missing.toml"))

        self.assertEqual(config.directory.backend, 'memory')
        self.assertEqual(config.context.backend, 'memory')
        self.assertEqual(config.context.ttl, timedelta(hours=24))
        self.assertEqual(config.api.allowed_origins, [])

    def test_load(self):
        self.write(CONFIG)

        config = load_config(self.path)

        self.assertEqual(config.directory.backend, 'rest')
        self.assertEqual(config.directory.timeout, 3.5)
        self.assertEqual(config.context.ttl, timedelta(minutes=10))
        self.assertEqual(config.api.name, "Test Routing")
        self.assertEqual(config.api.origin, "https://shopzap.io")

    def test_env_path(self):
        self.write(CONFIG)
        old = os.environ.get(CONFIG_ENV)
        os.environ[CONFIG_ENV] = self.path
        try:
            config = load_config()
        finally:
            if old is None:
                os.environ.pop(CONFIG_ENV)
            else:
                os.environ[CONFIG_ENV] = old

        self.assertEqual(config.directory.backend, 'rest')

    def test_invalid_toml(self):
        self.write("[directory\nbackend = ")

        with self.assertRaises(ValueError):
            load_config(self.path)

    def test_invalid_values(self):
        self.write('[directory]\nbackend = "mongo"\n')

        with self.assertRaises(ValueError):
            load_config(self.path)

    def test_get_directory(self):
        self.assertIsInstance(get_directory(DirectoryConfig()), MemoryDirectory)

        pickle_directory = get_directory(
            DirectoryConfig(
                backend='pickle',
                path=os.path.join(self.tmp.name, "stores")
            )
        )
        self.assertIsInstance(pickle_directory, PickleDirectory)

        rest_directory = get_directory(
            DirectoryConfig(backend='rest', url="https://x.supabase.co", api_key="k")
        )
        self.assertIsInstance(rest_directory, RestDirectory)
        self.assertEqual(rest_directory.table, "stores")

    def test_rest_directory_needs_credentials(self):
        with self.assertRaises(ValueError):
            get_directory(DirectoryConfig(backend='rest'))

    def test_get_context_store(self):
        self.assertIsInstance(
            get_context_store(ContextConfig()), MemoryContextStore
        )
