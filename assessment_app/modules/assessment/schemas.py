from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class SanitizedQuestion:
    """Client-visible view of a question: no answer key, no explanation."""
    id: Any
    topic: str
    text: str
    code: str
    options: Tuple[str, ...]
    multiple: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'topic': self.topic,
            'text': self.text,
            'code': self.code,
            'options': list(self.options),
            'multiple': self.multiple,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SanitizedQuestion':
        return cls(
            id=data.get('id'),
            topic=data.get('topic') or '',
            text=data.get('text') or '',
            code=data.get('code') or '',
            options=tuple(str(option) for option in data.get('options') or ()),
            multiple=bool(data.get('multiple')),
        )


@dataclass(frozen=True)
class Question:
    """Canonical question, server-only. ``correct`` is sorted and de-duplicated."""
    text: str
    options: Tuple[str, ...]
    correct: Tuple[int, ...]
    multiple: bool = False
    id: Any = None
    topic: str = ''
    code: str = ''
    explanation: str = ''

    def sanitized(self) -> SanitizedQuestion:
        return SanitizedQuestion(
            id=self.id,
            topic=self.topic,
            text=self.text,
            code=self.code,
            options=self.options,
            multiple=self.multiple,
        )


@dataclass(frozen=True)
class GradingDetail:
    question: str
    code: str
    options: Tuple[str, ...]
    user: Tuple[int, ...]
    correct: Tuple[int, ...]
    is_correct: bool
    explanation: str
    topic: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'question': self.question,
            'code': self.code,
            'options': list(self.options),
            'user': list(self.user),
            'correct': list(self.correct),
            'isCorrect': self.is_correct,
            'explanation': self.explanation,
            'topic': self.topic,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GradingDetail':
        return cls(
            question=data.get('question') or '',
            code=data.get('code') or '',
            options=tuple(data.get('options') or ()),
            user=tuple(data.get('user') or ()),
            correct=tuple(data.get('correct') or ()),
            is_correct=bool(data.get('isCorrect')),
            explanation=data.get('explanation') or '',
            topic=data.get('topic') or '',
        )


@dataclass(frozen=True)
class SubmissionResult:
    score: int
    total: int
    percent: float
    detail: Tuple[GradingDetail, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'total': self.total,
            'percent': self.percent,
            'detail': [item.to_dict() for item in self.detail],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SubmissionResult':
        return cls(
            score=int(data['score']),
            total=int(data['total']),
            percent=float(data['percent']),
            detail=tuple(GradingDetail.from_dict(item) for item in data.get('detail') or ()),
        )


@dataclass(frozen=True)
class ClientInfo:
    """Request metadata attached to the email report."""
    ip: str
    user_agent: str
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class QuestionBank:
    """Immutable, process-wide question set loaded once at startup."""
    questions: Tuple[Question, ...]
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)
