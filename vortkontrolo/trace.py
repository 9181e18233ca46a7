"""
A record of how the segmenter searched for a decomposition.

Tracing is optional. When a SearchTrace is passed to Segmenter.segment(),
every morpheme the search tries is recorded, with the zone it was tried in
and what became of it, so a surprising analysis can be inspected step by step.
"""
import json
import uuid
from datetime import datetime, timezone


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class SearchTrace:
    """
    Represents a single search for the decomposition of one token.
    """
    def __init__(self, token: str):
        self.trace_id = str(uuid.uuid4())
        self.start_time = _now()
        self.end_time = None
        self.token = token
        self.steps = []
        self.result = None
        self.candidates = 0

    def add_step(self, zone: str, kind: str, morpheme: str, remaining: str, event: str):
        """
        Adds a step to the trace.

        Args:
            zone: The grammar zone the morpheme was tried in (e.g. "radiko").
            kind: The morpheme class (e.g. "sufikso").
            morpheme: The morpheme text.
            remaining: The text left to analyse after this morpheme.
            event: What happened: "tried", "rejected", "complete" or "elided".
        """
        self.steps.append({
            "step_id": len(self.steps) + 1,
            "zone": zone,
            "kind": kind,
            "morpheme": morpheme,
            "remaining": remaining,
            "event": event,
        })
        if event in ("complete", "elided"):
            self.candidates += 1

    def set_result(self, result: str):
        """Sets the rendered result (or None on failure) and concludes the trace."""
        self.result = result
        self.end_time = _now()

    def to_json(self, indent=2):
        """Serializes the trace to a JSON string."""
        return json.dumps(self, default=lambda o: o.__dict__, indent=indent, ensure_ascii=False)
