"""History database of search runs and the loops they accepted."""

import json
import sqlite3
from datetime import datetime
from typing import Optional

from .planner import LoopResult


class ResultsDB:
    """SQLite database of search runs and accepted loops"""

    def __init__(self, db_path: str = "labyrinth_results.db"):
        self.conn = sqlite3.connect(db_path)
        self.run_id: Optional[int] = None
        self._init_schema()

    def _init_schema(self):
        """Create database tables"""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS runs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                started_at TEXT,
                ended_at TEXT,
                start_corner TEXT,
                min_length INTEGER,
                max_length INTEGER,
                beam_width INTEGER,
                high_score INTEGER,
                loops_found INTEGER
            )
        """)
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS loops (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                run_id INTEGER REFERENCES runs(id),
                recorded_at TEXT,
                score INTEGER,
                crossings INTEGER,
                uturns INTEGER,
                unique_segments INTEGER,
                length INTEGER,
                instructions TEXT
            )
        """)
        self.conn.commit()

    def start_run(self, start_corner: str, min_length: int, max_length: int,
                  beam_width: Optional[int]) -> int:
        """Start a new run, return run ID"""
        now = datetime.now().isoformat()
        cursor = self.conn.execute(
            "INSERT INTO runs (started_at, start_corner, min_length, max_length, beam_width) "
            "VALUES (?, ?, ?, ?, ?)",
            (now, start_corner, min_length, max_length, beam_width)
        )
        self.conn.commit()
        self.run_id = cursor.lastrowid
        return self.run_id

    def end_run(self, high_score: Optional[int], loops_found: int):
        """End the current run with stats"""
        now = datetime.now().isoformat()
        self.conn.execute(
            "UPDATE runs SET ended_at = ?, high_score = ?, loops_found = ? WHERE id = ?",
            (now, high_score, loops_found, self.run_id)
        )
        self.conn.commit()

    def record(self, result: LoopResult):
        """Record an accepted loop against the current run"""
        now = datetime.now().isoformat()
        self.conn.execute("""
            INSERT INTO loops (run_id, recorded_at, score, crossings, uturns,
                               unique_segments, length, instructions)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """, (self.run_id, now, result.score, result.crossings, result.uturns,
              result.unique_segments, result.length, json.dumps(result.instructions)))
        self.conn.commit()

    def best_loops(self, limit: int = 10) -> list[dict]:
        """Highest scoring loops across all runs"""
        cursor = self.conn.execute(
            "SELECT run_id, score, crossings, uturns, length, instructions "
            "FROM loops ORDER BY score DESC, id ASC LIMIT ?",
            (limit,)
        )
        loops = []
        for row in cursor.fetchall():
            loops.append({
                "run_id": row[0],
                "score": row[1],
                "crossings": row[2],
                "uturns": row[3],
                "length": row[4],
                "instructions": json.loads(row[5]),
            })
        return loops

    def close(self):
        self.conn.close()
