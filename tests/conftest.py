"""Pytest configuration and fixtures"""
import pytest
import os
import sys
import json
import logging
from datetime import date

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.models import Task
from core.task_store import TaskStore


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers a test attached to the application logger"""
    yield
    logger = logging.getLogger('task_tracker')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    import tempfile
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def sample_tasks():
    """A mix of to-dos, deadlines and events in insertion order"""
    return [
        Task.todo("read book"),
        Task.deadline("return book", date(2024, 3, 1)),
        Task.event("project meeting", date(2024, 2, 14)),
        Task.todo("buy milk"),
    ]


@pytest.fixture
def store(sample_tasks):
    return TaskStore(sample_tasks)


@pytest.fixture
def sample_tasks_data():
    """Sample tasks.json data for testing"""
    return {
        "version": "1.0",
        "updated_at": "2024-01-15T10:00:00",
        "tasks": [
            {
                "description": "read book",
                "done": False,
                "kind": "TODO",
                "when": None
            },
            {
                "description": "return book",
                "done": True,
                "kind": "DEADLINE",
                "when": "2024-03-01"
            },
            {
                "description": "project meeting",
                "done": False,
                "kind": "E",
                "when": "2024-02-14"
            }
        ]
    }


@pytest.fixture
def temp_tasks_file(temp_dir, sample_tasks_data):
    """Create a temporary tasks.json file"""
    file_path = os.path.join(temp_dir, "tasks.json")
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(sample_tasks_data, f, ensure_ascii=False, indent=2)
    return file_path


@pytest.fixture
def temp_storage(temp_dir):
    """Create a TaskStorage with temporary directory"""
    from core.storage import TaskStorage
    return TaskStorage(data_dir=temp_dir)
