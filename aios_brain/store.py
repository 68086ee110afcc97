# aios_brain/store.py
import logging
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .config import Config
from .system_kb import get_system_entries
from .text_utils import extract_assertion

logger = logging.getLogger(__name__)

INACTIVE_ANSWER = "AIosBrain is not active"
NOT_FOUND_PREFIX = "Knowledge not found: "
INACTIVE_STATE = "INACTIVE"


# --- Query results ---
class QueryStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class QueryResult:
    status: QueryStatus
    question: str
    value: Optional[str] = None

    def render(self) -> str:
        """Caller-visible text for this outcome."""
        if self.status is QueryStatus.FOUND:
            return self.value
        if self.status is QueryStatus.INACTIVE:
            return INACTIVE_ANSWER
        return NOT_FOUND_PREFIX + self.question


# --- Thought log ---
class ThoughtLog:
    """Bounded FIFO of submitted thoughts. Append and eviction happen under one lock."""

    def __init__(self, capacity: int = None):
        if capacity is None:
            capacity = Config.brain.THOUGHT_CAPACITY
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._lock = threading.Lock()
        self._thoughts = deque()

    def append(self, thought: str):
        with self._lock:
            self._thoughts.append(thought)
            if len(self._thoughts) > self.capacity:
                self._thoughts.popleft()

    def recent(self, limit: Optional[int] = None) -> List[str]:
        with self._lock:
            thoughts = list(self._thoughts)
        if limit is not None:
            thoughts = thoughts[-limit:] if limit > 0 else []
        return thoughts

    def __len__(self) -> int:
        with self._lock:
            return len(self._thoughts)


# --- Core store ---
class KnowledgeStore:
    """
    Shared knowledge base for the host process:
    - entry table of string keys to string values
    - bounded log of submitted thoughts
    - one-way activation gate checked by every public operation

    None of the public operations raise; degraded outcomes come back as
    sentinel strings.
    """

    def __init__(self, thought_capacity: int = None):
        self._entries: Dict[str, str] = {}
        self._entries_lock = threading.RLock()
        self.thoughts = ThoughtLog(thought_capacity)
        self._shutdown = threading.Event()

        logger.info("KnowledgeStore initialized")
        self._seed()

    def _seed(self):
        with self._entries_lock:
            self._entries.update(get_system_entries())
        logger.info(f"Knowledge base initialized with {self.knowledge_count} entries")

    # --- Activation gate ---
    @property
    def is_active(self) -> bool:
        return not self._shutdown.is_set()

    def shutdown(self):
        """Deactivate permanently. Repeated calls are harmless."""
        if self._shutdown.is_set():
            return
        self._shutdown.set()
        logger.info("KnowledgeStore shutting down")

    # --- Entry table ---
    def store(self, key: str, value: str):
        if not self.is_active:
            logger.warning("KnowledgeStore is not active, cannot store knowledge")
            return
        self._put(key, value)
        logger.debug(f"Stored knowledge: {key} = {value}")

    def _put(self, key: str, value: str):
        with self._entries_lock:
            self._entries[key] = value

    def resolve(self, question: str) -> QueryResult:
        """Exact key first, then the first key related to the question by containment."""
        if not self.is_active:
            return QueryResult(QueryStatus.INACTIVE, question)

        logger.debug(f"Knowledge query: {question}")

        with self._entries_lock:
            answer = self._entries.get(question)
            if answer is not None:
                return QueryResult(QueryStatus.FOUND, question, answer)
            candidates = list(self._entries.items())

        # Scan order is unspecified; any qualifying key is an acceptable answer.
        for key, value in candidates:
            if key in question or question in key:
                return QueryResult(QueryStatus.FOUND, question, value)

        return QueryResult(QueryStatus.NOT_FOUND, question)

    def query(self, question: str) -> str:
        return self.resolve(question).render()

    def snapshot(self) -> Dict[str, str]:
        with self._entries_lock:
            return dict(self._entries)

    @property
    def knowledge_count(self) -> int:
        with self._entries_lock:
            return len(self._entries)

    # --- Thought stream ---
    def submit(self, thought: str):
        if not self.is_active:
            logger.warning("KnowledgeStore is not active, ignoring thought")
            return

        logger.debug(f"Processing thought: {thought}")
        self.thoughts.append(thought)
        self._learn(thought)

    def _learn(self, thought: str):
        assertion = extract_assertion(thought)
        if assertion is None:
            return
        key, value = assertion
        self._put(key, value)
        logger.debug(f"Learned from thought: {key} = {value}")

    def recent_thoughts(self, limit: Optional[int] = None) -> List[str]:
        return self.thoughts.recent(limit)

    @property
    def thought_count(self) -> int:
        return len(self.thoughts)

    # --- Status ---
    def get_status(self) -> str:
        if not self.is_active:
            return INACTIVE_STATE
        return f"ACTIVE - Thoughts: {self.thought_count}, Knowledge: {self.knowledge_count}"
