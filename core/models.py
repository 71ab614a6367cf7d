"""Pydantic models for typetrainer data structures."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExitReason(str, Enum):
    """Why a run finished."""

    NATURAL = "natural"
    TIMEOUT = "timeout"
    QUIT = "quit"


class EngineSettings(BaseModel):
    """Typing engine settings, fixed for the lifetime of an engine."""

    skip_word: bool = Field(
        default=True, description="Space mid-word skips to the next word"
    )
    timeout_sec: Optional[float] = Field(
        default=None, gt=0, description="Time limit per attempt (None = unlimited)"
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def timeout_ns(self) -> Optional[int]:
        if self.timeout_sec is None:
            return None
        return int(self.timeout_sec * 1e9)


class RunResult(BaseModel):
    """Outcome of one finished run as returned by the engine."""

    nerrs: int = Field(..., ge=0, description="Incorrect keystrokes")
    ncorrect: int = Field(..., ge=0, description="Correct keystrokes")
    elapsed_ns: int = Field(..., ge=1, description="Attempt duration in nanoseconds")
    exit_reason: ExitReason = Field(..., description="How the run ended")

    model_config = ConfigDict(frozen=True)

    @property
    def reports_stats(self) -> bool:
        """Natural completion and timeout produce stats, quit does not."""
        return self.exit_reason in (ExitReason.NATURAL, ExitReason.TIMEOUT)


class RunStats(BaseModel):
    """Speed and accuracy derived from a RunResult."""

    wpm: int = Field(..., description="Words per minute (5 characters per word)")
    cpm: int = Field(..., description="Correct characters per minute")
    accuracy: float = Field(..., ge=0, le=100, description="Accuracy in percent")

    model_config = ConfigDict(extra="ignore")
