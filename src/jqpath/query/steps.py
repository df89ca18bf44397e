"""Navigation step models produced by the path parser."""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class _PathStep(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class FieldStep(_PathStep):
    op: Literal["field"] = "field"
    name: str = Field(min_length=1)

    def render(self) -> str:
        return f".{self.name}"


class IndexStep(_PathStep):
    op: Literal["index"] = "index"
    index: int = Field(ge=0)

    def render(self) -> str:
        return f"[{self.index}]"


PathStep: TypeAlias = Annotated[FieldStep | IndexStep, Field(discriminator="op")]
PathSteps: TypeAlias = tuple[PathStep, ...]


def render_steps(steps: PathSteps) -> str:
    """Render ``steps`` back to canonical path text (``.`` for the root)."""

    text = "".join(step.render() for step in steps)
    if not text.startswith("."):
        text = f".{text}"
    return text


__all__ = ["FieldStep", "IndexStep", "PathStep", "PathSteps", "render_steps"]
