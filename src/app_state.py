"""
Application State
Chat history and current results for one explorer session
"""

from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import List, Optional, Tuple

from profile_generator import FloatProfile
from query_processor import QueryResult


def resolve_location(lat: Optional[float], lon: Optional[float],
                     default: Tuple[float, float]) -> Tuple[Tuple[float, float], bool]:
    """Return (location, used_default); invalid coordinates fall back to the default."""
    if lat is None or lon is None:
        return default, True
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return default, True
    return (float(lat), float(lon)), False


@dataclass
class ChatMessage:
    id: int
    message: str
    type: str  # "user" or "assistant"
    timestamp: str
    data: Optional[QueryResult] = None

    @property
    def role(self) -> str:
        return self.type


@dataclass
class AppState:
    """Everything the UI keeps between reruns, updated only through its methods."""
    user_location: Tuple[float, float] = (10.0, 75.0)
    chat_history: List[ChatMessage] = field(default_factory=list)
    query_results: Optional[QueryResult] = None
    reference_profiles: List[FloatProfile] = field(default_factory=list)
    loading: bool = False  # true only while handle_query runs; never seen by a render
    error: Optional[str] = None
    _ids: count = field(default_factory=lambda: count(1), repr=False, compare=False)

    def _append(self, text: str, kind: str, data: Optional[QueryResult] = None) -> ChatMessage:
        message = ChatMessage(
            id=next(self._ids),
            message=text,
            type=kind,
            timestamp=datetime.now().isoformat(),
            data=data
        )
        self.chat_history.append(message)
        return message

    def add_user_message(self, text: str) -> ChatMessage:
        return self._append(text, 'user')

    def add_assistant_message(self, text: str, data: Optional[QueryResult] = None) -> ChatMessage:
        return self._append(text, 'assistant', data)

    def start_query(self):
        self.loading = True
        self.error = None

    def finish_query(self):
        self.loading = False

    def set_results(self, result: QueryResult, response: str):
        """Replace the previous results and record the assistant reply"""
        self.query_results = result
        self.error = None
        self.add_assistant_message(response, data=result)

    def set_error(self, message: str):
        self.error = message

    def set_reference_profiles(self, profiles: List[FloatProfile]):
        self.reference_profiles = list(profiles)

    def set_user_location(self, lat: float, lon: float):
        self.user_location = (lat, lon)

    def clear(self):
        self.chat_history = []
        self.query_results = None
        self.error = None
        self.loading = False

    @property
    def has_results(self) -> bool:
        return self.query_results is not None

    @property
    def has_reference_data(self) -> bool:
        return bool(self.reference_profiles)
