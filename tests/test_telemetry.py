from __future__ import annotations

import threading
from pathlib import Path
from typing import List

from telemetry.logger import TelemetryLogger, read_records
from wrap_sim.actions import MOVE_UP, Attach, TurnClockwise
from wrap_sim.geometry_utils import Point
from wrap_sim.state import State


def test_state_logs_one_record_per_action(tmp_path: Path) -> None:
    path = tmp_path / "runs" / "steps.jsonl"
    with TelemetryLogger(str(path)) as logger:
        state = State.parse("(0,0),(5,0),(5,5),(0,5)#(2,2)##", telemetry=logger)
        state.apply(MOVE_UP)
        state.apply(TurnClockwise())
        state.apply(Attach(Point(2, 0)))

    records = read_records(str(path))
    assert [r["step"] for r in records] == [1, 2, 3]
    assert [r["action"] for r in records] == ["Move", "TurnClockwise", "Attach"]
    assert records[0]["delta"] == [0, 1]
    assert records[0]["robot"]["y"] == 3
    assert records[2]["location"] == [2, 0]
    assert records[2]["wrapped"] == 0
    assert records[-1]["remaining"] == state.remaining


def test_clone_does_not_log(tmp_path: Path) -> None:
    path = tmp_path / "steps.jsonl"
    with TelemetryLogger(str(path)) as logger:
        state = State.parse("(0,0),(5,0),(5,5),(0,5)#(2,2)##", telemetry=logger)
        branch = state.clone()
        branch.apply(MOVE_UP)
    assert read_records(str(path)) == []


def test_closed_logger_ignores_records(tmp_path: Path) -> None:
    path = tmp_path / "steps.jsonl"
    logger = TelemetryLogger(str(path))
    logger.close()
    logger.log_step({"step": 1})
    assert read_records(str(path)) == []


def test_close_while_logging_from_threads(tmp_path: Path) -> None:
    path = tmp_path / "steps.jsonl"
    logger = TelemetryLogger(str(path))
    errors: List[Exception] = []

    def writer() -> None:
        try:
            for i in range(200):
                logger.log_step({"step": i})
        except ValueError as e:
            errors.append(e)

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    logger.close()
    for t in threads:
        t.join()

    assert errors == []
    assert all(set(r) == {"step"} for r in read_records(str(path)))
