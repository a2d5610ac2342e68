"""Pydantic models for taxonomy nodes and comparison results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NodeLevel(str, Enum):
    """Kind of taxonomy node."""

    LANGUAGE = "language"
    DIALECT = "dialect"
    FAMILY = "family"

    @classmethod
    def parse(cls, raw: str) -> "NodeLevel":
        """Read a level column value; empty or unknown values are treated as families."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.FAMILY


class TaxonomyNode(BaseModel):
    """One language or family entry in the taxonomy."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    external_code: str | None = None  # ISO 639-3; family nodes usually have none
    level: NodeLevel = NodeLevel.FAMILY
    parent_id: str | None = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


class FamilyComparisonResult(BaseModel):
    """Closeness of a guessed language to the correct one."""

    model_config = ConfigDict(frozen=True)

    common_ancestor_name: str | None = None
    distance_score: int = Field(default=0, ge=0, le=100)
    guess_ancestry: tuple[str, ...] = ()  # leaf -> root
    correct_ancestry: tuple[str, ...] = ()  # leaf -> root


class ComparisonStatus(str, Enum):
    READY = "ready"
    NOT_READY = "not_ready"
    UNRESOLVABLE = "unresolvable"


class ComparisonOutcome(BaseModel):
    """
    Tagged result of a comparison call.

    `result` is always populated. When `status` is not READY it holds the empty
    result (score 0, no ancestor), so callers must branch on `status` rather than
    on the score to tell "unrelated" apart from "unavailable".
    """

    model_config = ConfigDict(frozen=True)

    status: ComparisonStatus
    result: FamilyComparisonResult = Field(default_factory=FamilyComparisonResult)
    unresolved_tags: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is ComparisonStatus.READY

    @classmethod
    def ready(cls, result: FamilyComparisonResult) -> "ComparisonOutcome":
        return cls(status=ComparisonStatus.READY, result=result)

    @classmethod
    def not_ready(cls) -> "ComparisonOutcome":
        return cls(status=ComparisonStatus.NOT_READY)

    @classmethod
    def unresolvable(cls, *tags: str) -> "ComparisonOutcome":
        return cls(status=ComparisonStatus.UNRESOLVABLE, unresolved_tags=tuple(tags))


class AncestryDiff(BaseModel):
    """Shared root-down prefix of two ancestry chains plus each side's divergent branch."""

    model_config = ConfigDict(frozen=True)

    shared_prefix: tuple[str, ...] = ()  # root -> common ancestor
    guess_branch: tuple[str, ...] = ()  # after common ancestor -> guessed language
    correct_branch: tuple[str, ...] = ()  # after common ancestor -> correct language

    @property
    def steps(self) -> int:
        """Number of branch rows to render (the longer branch wins, no padding)."""
        return max(len(self.guess_branch), len(self.correct_branch))


class DisplayEntry(BaseModel):
    """Human-readable name for an external language code."""

    model_config = ConfigDict(frozen=True)

    name: str
    external_code: str
    node_id: str
