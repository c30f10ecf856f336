"""One entry of a ranking pass."""

from pydantic import BaseModel, ConfigDict

from models.schemas.score_result import ScoreResult


class RankedMatch(BaseModel):
    """A scored counterpart, identified by its record id.

    ``record_id`` is the candidate id when ranking candidates for a job,
    and the requester id when ranking jobs for a specialist.
    """
    model_config = ConfigDict(frozen=True)

    record_id: str
    result: ScoreResult
