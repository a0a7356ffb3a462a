"""
Task storage: the authoritative ordered list of tasks.

A task is a plain dict ``{"id": int, "description": str}``. Stores keep tasks
in insertion order and hand out new ids as "last id + 1" (1 for an empty list).
"""

import json
import logging
import os
import stat
import tempfile
import threading
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


class TaskError(Exception):
    """Base class for task errors."""


class ValidationError(TaskError):
    """The task description is missing or blank."""


class NotFoundError(TaskError):
    """No task carries the requested id."""


class StorageError(TaskError):
    """The backing file is missing, unreadable or does not hold a task list."""


def validate_description(description) -> str:
    if not isinstance(description, str) or not description.strip():
        raise ValidationError("Task description cannot be empty.")
    return description


def next_task_id(tasks: List[Dict]) -> int:
    """Id for the next task, derived from the last task in stored order."""
    if not tasks:
        return 1
    return tasks[-1]["id"] + 1


class TaskStore:
    """Storage capability used by the API: load, append and remove tasks."""

    def load_all(self) -> List[Dict]:
        raise NotImplementedError

    def append(self, description: str) -> Dict:
        raise NotImplementedError

    def remove_by_id(self, task_id: int) -> bool:
        raise NotImplementedError


class InMemoryTaskStore(TaskStore):
    """List-backed store with the same semantics as the file store."""

    def __init__(self, tasks: Optional[List[Dict]] = None):
        self._tasks = [dict(task) for task in (tasks or [])]

    def load_all(self) -> List[Dict]:
        return [dict(task) for task in self._tasks]

    def append(self, description: str) -> Dict:
        validate_description(description)
        task = {"id": next_task_id(self._tasks), "description": description}
        self._tasks.append(task)
        return dict(task)

    def remove_by_id(self, task_id: int) -> bool:
        for index, task in enumerate(self._tasks):
            if task["id"] == task_id:
                del self._tasks[index]
                return True
        return False


class JsonFileTaskStore(TaskStore):
    """
    Tasks persisted as a JSON array in a single file.

    Every mutation reloads the file, changes the list in memory and rewrites
    the whole file. The rewrite goes through a temporary file in the same
    directory followed by os.replace, so readers never see a partial list.
    The lock only serialises callers inside this process.
    """

    def __init__(self, path):
        self.path = os.fspath(path)
        self._lock = threading.Lock()

    def ensure_exists(self) -> bool:
        """Create the file with an empty list if it is missing. Returns True if created."""
        with self._lock:
            if os.path.exists(self.path):
                return False
            self._write(self.path, [])
            logger.info(f"Created empty task file at {self.path}")
            return True

    def load_all(self) -> List[Dict]:
        with self._lock:
            return self._read()

    def append(self, description: str) -> Dict:
        validate_description(description)
        with self._lock:
            tasks = self._read()
            task = {"id": next_task_id(tasks), "description": description}
            tasks.append(task)
            self._write(self.path, tasks)
        logger.info(f"Task {task['id']} added")
        return task

    def remove_by_id(self, task_id: int) -> bool:
        with self._lock:
            tasks = self._read()
            for index, task in enumerate(tasks):
                if task["id"] == task_id:
                    del tasks[index]
                    break
            else:
                return False
            self._write(self.path, tasks)
        logger.info(f"Task {task_id} deleted")
        return True

    def _read(self) -> List[Dict]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise StorageError(f"Task file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"Task file {self.path} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read task file {self.path}: {e}") from e

        if not isinstance(data, list) or not all(_is_task(item) for item in data):
            raise StorageError(f"Task file {self.path} does not contain a list of tasks")
        return data

    @staticmethod
    def _write(path, tasks):
        directory = os.path.dirname(os.path.abspath(path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tasks-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(tasks, f)
            # mkstemp creates 0600; keep the mode the task file already had
            os.chmod(tmp_path, _file_mode(path))
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Cannot write task file {path}: {e}") from e


def _file_mode(path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return DEFAULT_FILE_MODE


def _is_task(item) -> bool:
    return (
        isinstance(item, dict)
        and isinstance(item.get("id"), int)
        and not isinstance(item.get("id"), bool)
        and isinstance(item.get("description"), str)
    )
