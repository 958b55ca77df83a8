import time
from datetime import datetime

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def test_list_boards_empty(client):
    res = client.get("/boards")
    assert res.status_code == 200
    assert res.json() == []


def test_list_boards_newest_first(client, make_board):
    first = make_board("Board 1")
    second = make_board("Board 2")
    third = make_board("Board 3")

    res = client.get("/boards")
    assert res.status_code == 200
    assert [b["id"] for b in res.json()] == [third["id"], second["id"], first["id"]]


def test_create_board(client):
    res = client.post("/boards", json={"name": "New Board", "description": "A test board"})
    assert res.status_code == 201

    board = res.json()
    assert board["name"] == "New Board"
    assert board["description"] == "A test board"
    assert board["id"]
    assert board["createdAt"]
    assert board["updatedAt"]
    assert board["updatedAt"] == board["createdAt"]
    assert "statuses" not in board


def test_create_board_without_description_defaults_to_null(client):
    res = client.post("/boards", json={"name": "Plain"})
    assert res.status_code == 201
    assert res.json()["description"] is None


def test_create_board_rejects_empty_name(client):
    res = client.post("/boards", json={"name": ""})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation failed"
    assert any(d["field"] == "body.name" for d in body["details"])


def test_create_board_rejects_missing_name(client):
    res = client.post("/boards", json={"description": "No name"})
    assert res.status_code == 400


def test_create_board_rejects_long_fields(client):
    assert client.post("/boards", json={"name": "x" * 101}).status_code == 400
    assert client.post("/boards", json={"name": "ok", "description": "x" * 501}).status_code == 400
    assert client.post("/boards", json={"name": "x" * 100, "description": "x" * 500}).status_code == 201


def test_get_board_with_nested_tree(client, make_board, make_status, make_task, make_subtask):
    board = make_board("Test Board")
    status = make_status(board["id"], "To Do", 0)
    task = make_task(status["id"], "Write docs", 0)
    make_subtask(task["id"], "Outline")

    res = client.get(f"/boards/{board['id']}")
    assert res.status_code == 200

    result = res.json()
    assert result["name"] == "Test Board"
    assert len(result["statuses"]) == 1
    assert result["statuses"][0]["name"] == "To Do"
    assert result["statuses"][0]["tasks"][0]["title"] == "Write docs"
    assert result["statuses"][0]["tasks"][0]["subTasks"][0]["description"] == "Outline"


def test_get_board_orders_statuses_and_tasks_by_position(client, make_board, make_status, make_task):
    board = make_board()
    done = make_status(board["id"], "Done", 2)
    make_status(board["id"], "To Do", 0)
    make_status(board["id"], "In Progress", 1)
    make_task(done["id"], "Third", 5)
    make_task(done["id"], "First", 0)
    make_task(done["id"], "Second", 3)

    result = client.get(f"/boards/{board['id']}").json()
    assert [s["name"] for s in result["statuses"]] == ["To Do", "In Progress", "Done"]
    assert [t["title"] for t in result["statuses"][2]["tasks"]] == ["First", "Second", "Third"]


def test_get_board_breaks_position_ties_like_the_lists(client, make_board, make_status, make_task):
    board = make_board()
    for name in ["Twin A", "Twin B", "Twin C"]:
        make_status(board["id"], name, 1)
    status = make_status(board["id"], "Tasks", 0)
    for title in ["One", "Two", "Three"]:
        make_task(status["id"], title, 4)

    tree = client.get(f"/boards/{board['id']}").json()
    listed_statuses = client.get(f"/boards/{board['id']}/statuses").json()
    listed_tasks = client.get("/tasks", params={"boardStatusId": status["id"]}).json()

    assert [s["name"] for s in tree["statuses"]] == ["Tasks", "Twin A", "Twin B", "Twin C"]
    assert [s["id"] for s in tree["statuses"]] == [s["id"] for s in listed_statuses]
    assert [t["title"] for t in tree["statuses"][0]["tasks"]] == ["One", "Two", "Three"]
    assert [t["id"] for t in tree["statuses"][0]["tasks"]] == [t["id"] for t in listed_tasks]

def test_get_board_not_found(client, make_board):
    make_board("Other 1")
    make_board("Other 2")
    res = client.get(f"/boards/{MISSING_ID}")
    assert res.status_code == 404
    assert res.json() == {"error": "Board not found"}


def test_get_board_rejects_malformed_id(client):
    res = client.get("/boards/not-a-uuid")
    assert res.status_code == 400


def test_update_board(client, make_board):
    board = make_board("Original")
    time.sleep(0.01)

    res = client.put(f"/boards/{board['id']}", json={"name": "Updated", "description": "New description"})
    assert res.status_code == 200

    updated = res.json()
    assert updated["name"] == "Updated"
    assert updated["description"] == "New description"
    assert updated["createdAt"] == board["createdAt"]
    assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(board["updatedAt"])


def test_update_board_with_empty_body_touches_updated_at(client, make_board):
    board = make_board("Untouched", description="Same")
    time.sleep(0.01)

    res = client.put(f"/boards/{board['id']}", json={})
    assert res.status_code == 200
    updated = res.json()
    assert updated["name"] == "Untouched"
    assert updated["description"] == "Same"
    assert updated["createdAt"] == board["createdAt"]
    assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(board["updatedAt"])


def test_update_board_is_partial(client, make_board):
    board = make_board("Keep me", description="Old")

    res = client.put(f"/boards/{board['id']}", json={"description": None})
    assert res.status_code == 200
    assert res.json()["name"] == "Keep me"
    assert res.json()["description"] is None


def test_update_board_rejects_null_name(client, make_board):
    board = make_board()
    res = client.put(f"/boards/{board['id']}", json={"name": None})
    assert res.status_code == 400


def test_update_board_not_found(client):
    res = client.put(f"/boards/{MISSING_ID}", json={"name": "Updated"})
    assert res.status_code == 404


def test_delete_board(client, make_board):
    board = make_board("To Delete")

    res = client.delete(f"/boards/{board['id']}")
    assert res.status_code == 204
    assert res.content == b""

    assert client.get(f"/boards/{board['id']}").status_code == 404


def test_delete_board_not_found(client):
    res = client.delete(f"/boards/{MISSING_ID}")
    assert res.status_code == 404


def test_delete_board_cascades_to_whole_subtree(client, make_board, make_status, make_task, make_subtask):
    board = make_board()
    other = make_board("Survivor")
    status_ids, task_ids, subtask_ids = [], [], []
    for i in range(3):
        status = make_status(board["id"], f"Column {i}", i)
        status_ids.append(status["id"])
        for j in range(2):
            task = make_task(status["id"], f"Task {i}.{j}", j)
            task_ids.append(task["id"])
            subtask_ids.append(make_subtask(task["id"], "step")["id"])
    other_status = make_status(other["id"])
    other_task = make_task(other_status["id"])

    assert client.delete(f"/boards/{board['id']}").status_code == 204

    for task_id in task_ids:
        assert client.get(f"/tasks/{task_id}").status_code == 404
    for subtask_id in subtask_ids:
        assert client.get(f"/subtasks/{subtask_id}").status_code == 404
    for status_id in status_ids:
        assert client.get("/tasks", params={"boardStatusId": status_id}).json() == []

    assert [t["id"] for t in client.get("/tasks").json()] == [other_task["id"]]
    assert client.get(f"/boards/{other['id']}/statuses").json()[0]["id"] == other_status["id"]


def test_delete_board_removes_rows(client, db, make_board, make_status, make_task):
    from taskboard.db.models import BoardStatus, Task

    board = make_board()
    status = make_status(board["id"])
    make_task(status["id"])
    make_task(status["id"], position=1)

    client.delete(f"/boards/{board['id']}")

    assert db.query(BoardStatus).count() == 0
    assert db.query(Task).count() == 0
