import itertools
import logging
import threading
import time
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from studio.domains.documents.entities import (
    DOCUMENT_FIELDS,
    TEXT_FIELDS,
    UPDATABLE_FIELDS,
    DocumentStats,
    Node,
    NodeKind,
    OperationResult,
)

logger = logging.getLogger(__name__)

_id_counter = itertools.count(1)


def generate_node_id(kind: NodeKind) -> str:
    """Идентификатор вида ``<kind>-<epoch ms>-<counter>``"""
    return f"{kind.value}-{int(time.time() * 1000)}-{next(_id_counter)}"


class DocumentStore:
    """Хранилище дерева документов проекта.

    Узлы лежат в плоском словаре ``id -> Node``; у каждой папки есть
    упорядоченный список идентификаторов детей, у каждого узла - ссылка на
    родителя в индексе. Корни леса хранятся отдельным списком.

    Все операции выполняются под одной блокировкой: изменения
    сериализованы, а чтения (``stats``, ``filtered_view``) видят
    согласованное состояние. Наружу отдаются только копии узлов.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._nodes: Dict[str, Node] = {}
        self._children: Dict[str, List[str]] = {}
        self._parents: Dict[str, Optional[str]] = {}
        self._roots: List[str] = []

    # ------------------------------------------------------------------
    # Чтение
    # ------------------------------------------------------------------

    def find(self, node_id: str) -> Optional[Node]:
        """Поиск узла по id на любой глубине"""
        with self._lock:
            if node_id not in self._nodes:
                return None
            return self._materialize(node_id)

    def forest(self) -> List[Node]:
        """Копия всего леса"""
        with self._lock:
            return [self._materialize(root_id) for root_id in self._roots]

    def parent_of(self, node_id: str) -> Optional[str]:
        with self._lock:
            return self._parents.get(node_id)

    def filtered_view(self, query: Optional[str] = None) -> List[Node]:
        """Лес, отфильтрованный по подстроке в имени.

        Папка остаётся, если совпало её имя или хотя бы один потомок;
        у оставшейся папки остаются только совпавшие дети.
        """
        with self._lock:
            if not query:
                return [self._materialize(root_id) for root_id in self._roots]
            return self._filter(self._roots, query.lower())

    def stats(self) -> DocumentStats:
        """Количество документов, папок и сумма слов по всему лесу"""
        stats = DocumentStats()
        with self._lock:
            for node in self._walk(self._roots):
                if node.is_folder:
                    stats.folder_count += 1
                else:
                    stats.document_count += 1
                    stats.total_word_count += node.word_count or 0
        return stats

    # ------------------------------------------------------------------
    # Изменение
    # ------------------------------------------------------------------

    def create(
        self,
        name: str,
        kind: NodeKind,
        parent_id: Optional[str] = None,
    ) -> OperationResult:
        """Создание пустого узла в корне или внутри папки"""
        kind = NodeKind(kind)
        with self._lock:
            if parent_id is not None:
                parent = self._nodes.get(parent_id)
                if parent is None:
                    return OperationResult.not_found(parent_id, "Parent not found")
                if not parent.is_folder:
                    return OperationResult.invalid(parent_id, "Documents cannot have children")

            node_id = generate_node_id(kind)
            while node_id in self._nodes:
                node_id = generate_node_id(kind)

            node = Node.create_node(node_id, name, kind)
            self._attach(node, parent_id)
            if parent_id is not None:
                self._nodes[parent_id].touch(node.created_at)

        logger.debug(f"Created {kind.value} {node_id} under {parent_id or '<root>'}")
        return OperationResult.success(node_id)

    def update(self, node_id: str, fields: Mapping[str, Any]) -> Optional[Node]:
        """Перезапись переданных полей узла; ``None`` если узла нет"""
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")
        for key in TEXT_FIELDS:
            if key in fields and not isinstance(fields[key], str):
                raise ValueError(f"{key} must be a string")
        if "word_count" in fields:
            word_count = fields["word_count"]
            if isinstance(word_count, bool) or not isinstance(word_count, int) or word_count < 0:
                raise ValueError("word_count must be a non-negative integer")

        with self._lock:
            node = self._nodes.get(node_id)
            if node is None:
                return None

            changes = dict(fields)
            if node.is_folder:
                dropped = [key for key in changes if key in DOCUMENT_FIELDS]
                for key in dropped:
                    del changes[key]
                if dropped:
                    logger.debug(f"Ignored document fields {dropped} for folder {node_id}")

            node.apply(changes)
            logger.debug(f"Updated {node_id}: {sorted(changes)}")
            return self._materialize(node_id)

    def delete(self, node_id: str) -> OperationResult:
        """Удаление узла вместе со всем поддеревом"""
        with self._lock:
            if node_id not in self._nodes:
                return OperationResult.not_found(node_id)

            parent_id = self._detach(node_id)
            removed = 0
            for node in list(self._walk([node_id])):
                self._nodes.pop(node.id, None)
                self._children.pop(node.id, None)
                self._parents.pop(node.id, None)
                removed += 1

        logger.debug(f"Deleted {node_id} with {removed} node(s) from {parent_id or '<root>'}")
        return OperationResult.success(node_id)

    def move(self, node_id: str, new_parent_id: Optional[str] = None) -> OperationResult:
        """Перенос узла (с поддеревом) в папку или в корень"""
        with self._lock:
            node = self._nodes.get(node_id)
            if node is None:
                return OperationResult.not_found(node_id)

            if new_parent_id is not None:
                new_parent = self._nodes.get(new_parent_id)
                if new_parent is None:
                    return OperationResult.not_found(new_parent_id, "Target folder not found")
                if not new_parent.is_folder:
                    return OperationResult.invalid(node_id, "Target is not a folder")
                if new_parent_id == node_id or self._is_descendant(new_parent_id, node_id):
                    return OperationResult.invalid(node_id, "Cannot move a folder into itself")

            old_parent_id = self._detach(node_id)
            self._attach(node, new_parent_id)
            node.touch()
            if new_parent_id is not None:
                self._nodes[new_parent_id].touch()

        logger.debug(f"Moved {node_id} from {old_parent_id or '<root>'} to {new_parent_id or '<root>'}")
        return OperationResult.success(node_id)

    # ------------------------------------------------------------------
    # Снимки
    # ------------------------------------------------------------------

    def to_dict(self) -> List[Dict[str, Any]]:
        """Снимок всего леса вложенными словарями"""
        with self._lock:
            return [self._materialize(root_id).to_dict() for root_id in self._roots]

    def load(self, data: Iterable[Mapping[str, Any]]) -> None:
        """Замена леса содержимым снимка"""
        nodes: Dict[str, Node] = {}
        children: Dict[str, List[str]] = {}
        parents: Dict[str, Optional[str]] = {}

        def collect(items: Iterable[Mapping[str, Any]], parent_id: Optional[str]) -> List[str]:
            ids = []
            for item in items:
                node = Node.from_dict(item)
                if node.id in nodes:
                    raise ValueError(f"Duplicate node id in snapshot: {node.id}")
                nodes[node.id] = node
                parents[node.id] = parent_id
                if node.is_folder:
                    children[node.id] = collect(item.get("children") or [], node.id)
                elif item.get("children"):
                    raise ValueError(f"Document {node.id} cannot have children")
                ids.append(node.id)
            return ids

        roots = collect(data, None)

        with self._lock:
            self._nodes = nodes
            self._children = children
            self._parents = parents
            self._roots = roots
        logger.info(f"Loaded {len(nodes)} node(s) into document store")

    def __contains__(self, node_id: object) -> bool:
        with self._lock:
            return node_id in self._nodes

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    # ------------------------------------------------------------------
    # Внутреннее
    # ------------------------------------------------------------------

    def _siblings(self, parent_id: Optional[str]) -> List[str]:
        return self._roots if parent_id is None else self._children[parent_id]

    def _attach(self, node: Node, parent_id: Optional[str]) -> None:
        self._nodes[node.id] = node
        self._parents[node.id] = parent_id
        if node.is_folder:
            self._children.setdefault(node.id, [])
        self._siblings(parent_id).append(node.id)

    def _detach(self, node_id: str) -> Optional[str]:
        parent_id = self._parents.get(node_id)
        self._siblings(parent_id).remove(node_id)
        if parent_id is not None:
            self._nodes[parent_id].touch()
        return parent_id

    def _is_descendant(self, node_id: str, ancestor_id: str) -> bool:
        current = self._parents.get(node_id)
        while current is not None:
            if current == ancestor_id:
                return True
            current = self._parents.get(current)
        return False

    def _walk(self, ids: Iterable[str]) -> Iterator[Node]:
        for node_id in ids:
            node = self._nodes[node_id]
            yield node
            if node.is_folder:
                yield from self._walk(self._children[node_id])

    def _materialize(self, node_id: str) -> Node:
        node = self._nodes[node_id]
        children = None
        if node.is_folder:
            children = [self._materialize(child_id) for child_id in self._children[node_id]]
        return node.copy(parent_id=self._parents.get(node_id), children=children)

    def _filter(self, ids: Iterable[str], needle: str) -> List[Node]:
        result = []
        for node_id in ids:
            node = self._nodes[node_id]
            matches = needle in node.name.lower()
            if node.is_folder:
                kept = self._filter(self._children[node_id], needle)
                if matches or kept:
                    result.append(node.copy(parent_id=self._parents.get(node_id), children=kept))
            elif matches:
                result.append(node.copy(parent_id=self._parents.get(node_id)))
        return result
