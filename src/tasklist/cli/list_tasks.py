"""Non-interactive listing of tasks."""

import logging

from ..config import Settings, build_storage
from ..models import View
from ..repositories import KeyValueTaskRepository
from ..services import TaskListController
from .output import detail, done, error, pending

logger = logging.getLogger(__name__)


def run_list(settings: Settings, view: View, search: str = "") -> int:
    """Print the tasks of one view, optionally narrowed by a search term.

    Returns:
        Process exit code.
    """
    try:
        storage = build_storage(settings)
    except ValueError as e:
        error(str(e))
        return 1

    controller = TaskListController(KeyValueTaskRepository(storage, settings.namespace))
    controller.initialize()

    tasks = list(controller.filtered_view(search, view))
    if not tasks:
        pending("No tasks found.")
        return 0

    for task in tasks:
        line = f"[{task.id}] {task.title}"
        if task.completed:
            done(line)
        else:
            pending(line)
        if task.description:
            detail(task.description)
        if task.date_created:
            detail(task.date_created)

    logger.debug("Listed %d %s tasks", len(tasks), view.value)
    return 0
