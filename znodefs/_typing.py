import enum
from typing import TypedDict


class ZNodeStat(TypedDict):
    version: int
    cversion: int
    num_children: int
    data_length: int
    ephemeral: bool
    created_at: float
    modified_at: float


class CreateOutcome(enum.Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


class DeleteOutcome(enum.Enum):
    DELETED = "deleted"
    NOT_EMPTY = "not_empty"
    NO_NODE = "no_node"
