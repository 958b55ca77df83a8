# taskboard/db/models/__init__.py
from .board import Board
from .board_status import BoardStatus
from .task import Task
from .sub_task import SubTask
