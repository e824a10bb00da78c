import os

# Keep the module-level app away from the working directory's data folder
os.environ.setdefault("SQLITE_DB_PATH", ":memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from todo_agenda.db import SQLiteRepository  # noqa: E402
from todo_agenda.main import create_app  # noqa: E402
from todo_agenda.settings import Settings  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    return Settings(sqlite_db_path=str(tmp_path / "todoApplication.db"))


@pytest.fixture
def client(settings):
    # Entering the client runs the lifespan, which opens the store
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def repo(tmp_path):
    repository = SQLiteRepository(str(tmp_path / "repo.db"))
    yield repository
    repository.close()


def todo_payload(
    id=1,
    todo="Buy milk",
    category="HOME",
    priority="LOW",
    status="TO DO",
    due_date="2021-01-01",
):
    payload = {
        "id": id,
        "todo": todo,
        "category": category,
        "priority": priority,
        "status": status,
    }
    if due_date is not None:
        payload["dueDate"] = due_date
    return payload
