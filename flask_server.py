"""
Flask app serving the task list API and the browser client.

GET, POST and DELETE on /tasks always answer 200; whether a change happened is
carried by the payload. Storage failures are the exception and answer 500.
"""

import logging
import os

from flask import Flask, request, jsonify

import task_settings
from task_store import JsonFileTaskStore, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(store=None, settings=None):
    """App factory. Pass a store to replace the JSON file named in settings."""
    if settings is None:
        settings = task_settings.load_settings()
    if store is None:
        store = JsonFileTaskStore(settings.tasks_file)

    app = Flask(__name__, static_folder=STATIC_DIR, static_url_path="")
    app.config["TASK_STORE"] = store
    app.config["TASKS_FILE"] = settings.tasks_file

    @app.route("/")
    def index():
        return app.send_static_file("index.html")

    @app.route("/tasks", methods=["GET"])
    def get_tasks():
        return jsonify({"Items": store.load_all()})

    @app.route("/tasks", methods=["POST"])
    def create_task():
        description = _json_body().get("description")
        store.append(description)
        return jsonify({"success": True, "message": "Task added."})

    @app.route("/tasks", methods=["DELETE"])
    def delete_task():
        task_id = _json_body().get("id")
        # JSON true/false would otherwise match ids 1 and 0
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise NotFoundError(f"Invalid task id: {task_id!r}")
        if not store.remove_by_id(task_id):
            raise NotFoundError(f"No task with id {task_id}")
        return jsonify({"success": True, "message": "Task deleted."})

    @app.errorhandler(ValidationError)
    def task_not_added(e):
        return jsonify({"message": "Task not added."})

    @app.errorhandler(NotFoundError)
    def task_not_found(e):
        logger.debug(f"Delete missed: {e}")
        return jsonify({"message": "Task not found."})

    @app.errorhandler(StorageError)
    def storage_unavailable(e):
        logger.error(f"Task storage error: {e}", exc_info=True)
        return jsonify({"message": "Task storage unavailable."}), 500

    return app


def main():
    settings = task_settings.load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = JsonFileTaskStore(settings.tasks_file)
    store.ensure_exists()
    app = create_app(store=store, settings=settings)

    logger.info(f"Server is running on http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=settings.debug, use_reloader=False)


if __name__ == "__main__":
    main()
