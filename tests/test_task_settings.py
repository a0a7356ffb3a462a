import os
import unittest
from unittest.mock import patch

from task_settings import Settings, load_settings


class LoadSettingsTestCase(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_match_settings(self):
        self.assertEqual(load_settings(), Settings())

    @patch.dict(os.environ, {}, clear=True)
    def test_api_url_follows_port(self):
        self.assertEqual(Settings().api_url, "http://localhost:3000/tasks")
        with patch.dict(os.environ, {"TASKS_PORT": "8080"}):
            self.assertEqual(load_settings().api_url, "http://localhost:8080/tasks")

    @patch.dict(os.environ, {
        "TASKS_FILE": "data/todos.json",
        "TASKS_PORT": "not-a-number",
        "TASKS_DEBUG": "yes",
        "TASKS_LOG_LEVEL": "debug",
        "TASKS_API_URL": "http://tasks.test/tasks",
        "TASKS_CLIENT_TIMEOUT": "2.5",
    }, clear=True)
    def test_environment_overrides(self):
        settings = load_settings()
        self.assertEqual(settings.tasks_file, "data/todos.json")
        self.assertEqual(settings.port, 3000)
        self.assertTrue(settings.debug)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.api_url, "http://tasks.test/tasks")
        self.assertEqual(settings.client_timeout, 2.5)


if __name__ == '__main__':
    unittest.main()
