from studio.domains.documents.entities import (
    DocumentStats, Node, NodeKind, OperationResult, OperationStatus
)
from studio.domains.documents.schemas import (
    NodeCreate, NodeUpdate, NodeMove, NodeResponse, ForestResponse,
    DocumentStatsResponse, SnapshotResponse
)
from studio.domains.documents.services import DocumentService
from studio.domains.documents.store import DocumentStore, generate_node_id

__all__ = [
    "DocumentStats", "Node", "NodeKind", "OperationResult", "OperationStatus",
    "NodeCreate", "NodeUpdate", "NodeMove", "NodeResponse", "ForestResponse",
    "DocumentStatsResponse", "SnapshotResponse",
    "DocumentService",
    "DocumentStore", "generate_node_id"
]
