"""Likert-scale survey: configuration loading, answer collection and saving."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

__all__ = [
    "Response",
    "Gender",
    "SurveyError",
    "SurveyConfig",
    "load_config",
    "write_default_config",
    "SurveySession",
    "DEFAULT_QUESTIONS",
    "THANK_YOU",
]

DEFAULT_ROW_HEIGHT = 30.0
THANK_YOU = "Thank you for participating!"

DEFAULT_QUESTIONS = (
    "Making GUIs with mahikit is easy",
    "I found it difficult to make GUIs with mahikit",
    "Jelly beans are the best candy",
    "Jelly beans are disgusting",
    "I like turtles",
    "Turtles are disappointing",
    "These questions are ridiculous",
    "These questions are thought provoking",
)


class Response(enum.IntEnum):
    """An answer on the five-point agreement scale."""

    NO_RESPONSE = -3
    STRONGLY_DISAGREE = -2
    DISAGREE = -1
    NEUTRAL = 0
    AGREE = 1
    STRONGLY_AGREE = 2

    @property
    def text(self) -> str:
        """Return the label shown for this answer ("" when unanswered)."""
        return _RESPONSE_TEXT.get(self, "")


_RESPONSE_TEXT = {
    Response.STRONGLY_DISAGREE: "Strongly Disagree",
    Response.DISAGREE: "Disagree",
    Response.NEUTRAL: "Neutral",
    Response.AGREE: "Agree",
    Response.STRONGLY_AGREE: "Strongly Agree",
}


class Gender(enum.Enum):
    """The gender a subject selects."""

    NONE = 0
    MALE = 1
    FEMALE = 2


class SurveyError(Exception):
    """Raised when a survey cannot be loaded or a response is incomplete."""


@dataclass
class SurveyConfig:
    """The survey title, its questions and layout options."""

    title: str
    questions: list[str] = field(default_factory=list)
    auto_close: bool = False
    row_height: float = DEFAULT_ROW_HEIGHT

    def window_size(self) -> tuple[float, float]:
        """Return the (width, height) of a window that fits every question."""
        question_width = max((7 * len(q) for q in self.questions), default=0) + 75
        width = question_width + 385
        height = 85 + self.row_height * len(self.questions)
        return float(width), float(height)


def _require(data: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    if key not in data:
        raise SurveyError(f"survey config is missing {key!r}")
    value = data[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise SurveyError(f"survey config entry {key!r} has the wrong type")
    return value


def load_config(path: str | Path) -> SurveyConfig:
    """Read a survey configuration from a JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SurveyError(f"no survey config at {path}") from exc
    except (OSError, ValueError) as exc:
        raise SurveyError(f"cannot read survey config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SurveyError("survey config must be a JSON object")

    title = _require(data, "title", str)
    questions = _require(data, "questions", list)
    if not all(isinstance(q, str) for q in questions):
        raise SurveyError("survey questions must all be strings")
    auto_close = _require(data, "autoClose", bool)
    row_height = (
        _require(data, "rowHeight", (int, float))
        if "rowHeight" in data
        else DEFAULT_ROW_HEIGHT
    )
    return SurveyConfig(title, list(questions), auto_close, float(row_height))


def write_default_config(path: str | Path) -> SurveyConfig:
    """Write the built-in example survey to ``path`` and return it."""
    config = SurveyConfig(
        title="My Likert Survey",
        questions=list(DEFAULT_QUESTIONS),
        auto_close=True,
        row_height=DEFAULT_ROW_HEIGHT,
    )
    document = {
        "title": config.title,
        "questions": config.questions,
        "autoClose": config.auto_close,
        "rowHeight": int(config.row_height),
    }
    Path(path).write_text(json.dumps(document, indent=4, sort_keys=True), encoding="utf-8")
    return config


class SurveySession:
    """Collects one subject's details and answers for a survey."""

    def __init__(self, config: SurveyConfig) -> None:
        self.config = config
        self.reset()

    def reset(self) -> None:
        """Clear the subject details and every answer."""
        self.subject = ""
        self.age: int | None = None
        self.gender = Gender.NONE
        self.responses = [Response.NO_RESPONSE] * len(self.config.questions)

    def answer(self, index: int, response: Response | int) -> None:
        """Record the answer to question ``index`` (counted from 0)."""
        if not 0 <= index < len(self.responses):
            raise IndexError(f"no question {index}")
        self.responses[index] = Response(response)

    def validate(self) -> None:
        """Raise SurveyError describing the first missing piece of information."""
        if not self.subject:
            raise SurveyError("Please enter your subject identifier")
        if self.age is None:
            raise SurveyError("Please enter your age")
        if self.gender is Gender.NONE:
            raise SurveyError("Please enter your gender")
        for number, response in enumerate(self.responses, start=1):
            if response is Response.NO_RESPONSE:
                raise SurveyError(f"Please respond to Question {number}")

    def to_record(self) -> dict[str, Any]:
        """Return the completed response as a JSON-ready dictionary."""
        self.validate()
        return {
            "subject": self.subject,
            "age": self.age,
            "gender": "Male" if self.gender is Gender.MALE else "Female",
            "responses": [int(r) for r in self.responses],
            "responsesText": [r.text for r in self.responses],
        }

    def submit(self, directory: str | Path = ".") -> Path:
        """Save the response as ``<subject>.json`` in ``directory`` and reset.

        Returns the path written.
        """
        record = self.to_record()
        target = Path(directory) / f"{self.subject}.json"
        target.write_text(json.dumps(record, indent=4, sort_keys=True) + "\n", encoding="utf-8")
        self.reset()
        return target