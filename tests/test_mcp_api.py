import unittest
from unittest.mock import patch
from mcp_server import list_tasks, add_task, complete_task


class TestMcpTools(unittest.TestCase):

    @patch("task_client.requests.get")
    def test_list_tasks(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = {"Items": [{"id": 1, "description": "Mock Task"}]}

        tasks = list_tasks()
        self.assertIsInstance(tasks, list)
        self.assertEqual(tasks[0]["description"], "Mock Task")

    @patch("task_client.requests.post")
    def test_add_task(self, mock_post):
        mock_post.return_value.status_code = 200
        mock_post.return_value.json.return_value = {"success": True, "message": "Task added."}

        result = add_task("New Task")
        self.assertTrue(result["success"])
        self.assertEqual(mock_post.call_args.kwargs["json"], {"description": "New Task"})

    @patch("task_client.requests.delete")
    def test_complete_task(self, mock_delete):
        mock_delete.return_value.status_code = 200
        mock_delete.return_value.json.return_value = {"message": "Task not found."}

        result = complete_task(9)
        self.assertEqual(result["message"], "Task not found.")
        self.assertEqual(mock_delete.call_args.kwargs["json"], {"id": 9})


if __name__ == "__main__":
    unittest.main()
