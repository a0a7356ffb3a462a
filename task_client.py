"""
Python client for the task list API, with a small console front end.
"""

import logging
from typing import Dict, List

import requests

import task_settings
from task_store import ValidationError, validate_description

logger = logging.getLogger(__name__)


class TaskClient:
    def __init__(self, base_url: str = task_settings.API_URL, timeout: float = task_settings.CLIENT_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout

    def list_tasks(self) -> List[Dict]:
        """Fetch all tasks in the order the server stores them."""
        response = requests.get(self.base_url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()["Items"]

    def add_task(self, description: str) -> Dict:
        """Create a task. Blank descriptions are rejected before any request is sent."""
        validate_description(description)
        response = requests.post(
            self.base_url,
            json={"description": description},
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def delete_task(self, task_id: int) -> Dict:
        """Mark a task done, which removes it."""
        response = requests.delete(
            self.base_url,
            json={"id": task_id},
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()


def render_task_list(tasks: List[Dict]) -> str:
    lines = ["Task List"]
    for task in tasks:
        lines.append(f"[Done] {task['id']}. {task['description']}")
    return "\n".join(lines)


def handle_command(client: TaskClient, command: str) -> str:
    """Run one console command and return the text to show."""
    name, _, argument = command.partition(" ")
    name = name.lower()

    if name == "add":
        result = client.add_task(argument)
    elif name == "done":
        try:
            task_id = int(argument)
        except ValueError:
            return "Usage: done <id>"
        result = client.delete_task(task_id)
    elif name == "list":
        return render_task_list(client.list_tasks())
    else:
        return "Commands: list, add <description>, done <id>, exit"

    if not result.get("success"):
        return result.get("message", "")
    return render_task_list(client.list_tasks())


def main():
    logging.basicConfig(level=task_settings.LOG_LEVEL)
    client = TaskClient()

    print("Type 'list', 'add <description>', 'done <id>' (type 'exit' to quit):")
    while True:
        try:
            command = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if command.lower() in ("exit", "quit"):
            break
        if not command:
            continue
        try:
            print(handle_command(client, command))
        except ValidationError as e:
            print(e)
        except requests.RequestException as e:
            logger.error(f"Request to {client.base_url} failed: {e}")


if __name__ == "__main__":
    main()
