"""
Tests for structured logging helpers.
"""

import json
import logging

from deep_research.shared.logging.config import (
    log_state_transition,
    setup_logging,
    summarize_state,
)


class TestStructuredLogging:
    """Tests for setup_logging and log_state_transition."""

    def test_state_transition_written_as_json(self, tmp_path):
        """A transition should be written as one JSON line with a state summary."""
        log_file = tmp_path / "research.log"
        logger = setup_logging(
            level=logging.INFO, log_file=str(log_file), logger_name="deep_research.test"
        )
        state = {
            "session_id": "abc",
            "research_iterations": 2,
            "notes": ["n1", "n2"],
            "raw_notes": ["r1"],
            "research_brief": "brief",
        }

        log_state_transition("supervision_complete", state, extra={"reason": "x"}, logger=logger)
        for handler in logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "State transition: supervision_complete"
        assert entry["level"] == "INFO"
        assert entry["extra"]["event"] == "supervision_complete"
        assert entry["extra"]["extra"] == {"reason": "x"}
        assert entry["extra"]["state_summary"]["notes"] == 2
        assert entry["extra"]["state_summary"]["session_id"] == "abc"

    def test_summarize_state_tolerates_missing_fields(self):
        summary = summarize_state({})

        assert summary["notes"] == 0
        assert summary["raw_notes"] == 0
        assert summary["has_brief"] is False
