"""Pydantic schemas for quiz topics, questions and scoring."""

from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

OPTION_COUNT = 4

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]


class Topic(BaseModel):
    title: NonEmptyStr
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, v):
        return "" if v is None else v


class CatalogTopic(Topic):
    id: str
    icon: str


class QuizQuestion(BaseModel):
    """A single four-option question as produced by the model.

    Input is accepted under the wire names only (``correctAnswer``);
    Python code reads ``correct_answer``.
    """

    model_config = ConfigDict(frozen=True)

    question: NonEmptyStr
    options: List[NonEmptyStr] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_answer: int = Field(alias="correctAnswer", strict=True, ge=0, le=OPTION_COUNT - 1)
    explanation: NonEmptyStr

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class AnswerResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_correct: bool = Field(alias="isCorrect")
    correct_answer: int = Field(alias="correctAnswer")
    explanation: str
    user_answer: int = Field(alias="userAnswer")


class ScoreResult(BaseModel):
    correct: int
    total: int
    percentage: int


class ScoreRequest(BaseModel):
    questions: List[QuizQuestion]
    answers: List[int]


class AnswerRequest(BaseModel):
    question: QuizQuestion
    answer: int = Field(strict=True)
