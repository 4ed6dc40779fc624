"""Snapshot storage for the task list"""
import json
from pathlib import Path
from typing import List, Optional
from datetime import datetime
import shutil

from core.exceptions import StorageError
from core.models import Task
from config import Config
from utils.logging_config import get_logger, LogTimer

logger = get_logger('storage')


class TaskStorage:
    """Loads and saves the task list as a JSON snapshot"""

    def __init__(self, data_dir: str = None, max_backups: int = None):
        if data_dir:
            self.data_dir = Path(data_dir)
        else:
            self.data_dir = Config.DATA_DIR

        self.data_dir.mkdir(parents=True, exist_ok=True)

        self.tasks_file = self.data_dir / "tasks.json"
        self.max_backups = Config.MAX_BACKUPS if max_backups is None else max_backups

    def save_tasks(self, tasks: List[Task]):
        """Save the task list, keeping a backup of the previous snapshot"""
        data = {
            'version': '1.0',
            'updated_at': datetime.now().isoformat(),
            'tasks': [task.to_dict() for task in tasks]
        }

        with LogTimer(logger, f"save_tasks: {len(tasks)} tasks"):
            try:
                self.backup()
                with open(self.tasks_file, 'w', encoding='utf-8') as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
            except OSError as e:
                raise StorageError(f"Could not save tasks to {self.tasks_file}: {e}") from e

    def load_tasks(self) -> List[Task]:
        """Load the task list; a missing or unreadable snapshot yields no tasks"""
        if not self.tasks_file.exists():
            return []

        try:
            with open(self.tasks_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            return [Task.from_dict(t) for t in data.get('tasks', [])]
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Error loading tasks from {self.tasks_file}: {e}")
            return []

    def backup(self) -> Optional[Path]:
        """Copy the current snapshot aside and prune old backups"""
        if not self.tasks_file.exists() or self.max_backups == 0:
            return None

        backup_path = self.data_dir / f"tasks_backup_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"
        shutil.copy(self.tasks_file, backup_path)

        backups = sorted(self.data_dir.glob("tasks_backup_*.json"))
        if len(backups) > self.max_backups:
            for old_backup in backups[:-self.max_backups]:
                old_backup.unlink()

        return backup_path
