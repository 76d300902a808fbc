from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


DOCUMENT_FIELDS = ("content", "title", "notes", "word_count")
UPDATABLE_FIELDS = ("name",) + DOCUMENT_FIELDS
TEXT_FIELDS = ("name", "title", "content", "notes")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NodeKind(str, Enum):
    """Вид узла дерева проекта"""
    DOCUMENT = "document"
    FOLDER = "folder"


class Node:
    """Узел дерева проекта: документ или папка.

    Внутри хранилища ``children`` у папки всегда пуст, порядок детей задаёт
    индекс хранилища. Заполненный ``children`` бывает только у копий,
    которые хранилище отдаёт наружу.
    """

    def __init__(
        self,
        id: str,
        name: str,
        kind: NodeKind,
        content: Optional[str] = None,
        title: Optional[str] = None,
        notes: Optional[str] = None,
        word_count: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        parent_id: Optional[str] = None,
        children: Optional[List["Node"]] = None,
    ):
        self.id = id
        self.name = name
        self.kind = NodeKind(kind)
        self.created_at = created_at or utcnow()
        self.updated_at = max(updated_at or self.created_at, self.created_at)
        self.parent_id = parent_id

        if self.kind == NodeKind.DOCUMENT:
            self.content = content if content is not None else ""
            self.title = title if title is not None else name
            self.notes = notes if notes is not None else ""
            self.word_count = word_count if word_count is not None else 0
            self.children = None
        else:
            self.content = None
            self.title = None
            self.notes = None
            self.word_count = None
            self.children = children if children is not None else []

    @property
    def is_folder(self) -> bool:
        return self.kind == NodeKind.FOLDER

    def touch(self, now: Optional[datetime] = None) -> None:
        """Обновление метки изменения (никогда не уходит назад)"""
        now = now or utcnow()
        if now > self.updated_at:
            self.updated_at = now

    def apply(self, fields: Dict[str, Any]) -> None:
        """Перезапись переданных полей и обновление метки изменения"""
        for key, value in fields.items():
            setattr(self, key, value)
        self.touch()

    def copy(
        self,
        parent_id: Optional[str] = None,
        children: Optional[List["Node"]] = None,
    ) -> "Node":
        """Отсоединённая копия узла"""
        return Node(
            id=self.id,
            name=self.name,
            kind=self.kind,
            content=self.content,
            title=self.title,
            notes=self.notes,
            word_count=self.word_count,
            created_at=self.created_at,
            updated_at=self.updated_at,
            parent_id=parent_id,
            children=children,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
        if self.is_folder:
            data["children"] = [child.to_dict() for child in self.children or []]
        else:
            data.update(
                content=self.content,
                title=self.title,
                notes=self.notes,
                word_count=self.word_count,
            )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """Узел без детей из словаря снимка"""
        return cls(
            id=data["id"],
            name=data["name"],
            kind=NodeKind(data["kind"]),
            content=data.get("content"),
            title=data.get("title"),
            notes=data.get("notes"),
            word_count=data.get("word_count"),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
        )

    @classmethod
    def create_node(cls, node_id: str, name: str, kind: NodeKind) -> "Node":
        """Создание нового пустого узла"""
        now = utcnow()
        return cls(id=node_id, name=name, kind=kind, created_at=now, updated_at=now)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Node(id={self.id}, name={self.name}, kind={self.kind.value})"


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class OperationStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_OPERATION = "invalid_operation"


class OperationResult:
    """Результат изменяющей операции хранилища"""

    def __init__(
        self,
        status: OperationStatus,
        node_id: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        self.status = status
        self.node_id = node_id
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, node_id: Optional[str] = None) -> "OperationResult":
        return cls(OperationStatus.OK, node_id=node_id)

    @classmethod
    def not_found(cls, node_id: Optional[str], reason: str = "Node not found") -> "OperationResult":
        return cls(OperationStatus.NOT_FOUND, node_id=node_id, reason=reason)

    @classmethod
    def invalid(cls, node_id: Optional[str], reason: str) -> "OperationResult":
        return cls(OperationStatus.INVALID_OPERATION, node_id=node_id, reason=reason)

    def __repr__(self) -> str:
        return f"OperationResult(status={self.status.value}, node_id={self.node_id}, reason={self.reason})"


@dataclass
class DocumentStats:
    document_count: int = 0
    folder_count: int = 0
    total_word_count: int = 0
