"""Why a match produced no loss result."""
from enum import Enum


class SkipReason(Enum):
    MATCH_NOT_FOUND = "match-not-found"
    PARTICIPANT_MISSING = "participant-missing"
    PARTICIPANT_DETAIL_MISSING = "participant-detail-missing"
    TEAM_OUTCOME_MISSING = "team-outcome-missing"
    NOT_A_LOSS = "not-a-loss"
    QUEUE_MISMATCH = "queue-mismatch"
    CHAMPION_UNRESOLVED = "champion-unresolved"
    TIMESTAMP_INVALID = "timestamp-invalid"
