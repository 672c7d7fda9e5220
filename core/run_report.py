"""
RunReport - ustrukturyzowany wynik runu (scenariusz → status, czas, załączniki).
Renderowanie HTML to zadanie zewnętrznego narzędzia - tu tylko JSON.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PASSED = 'passed'
FAILED = 'failed'
SKIPPED = 'skipped'


@dataclass
class ScenarioResult:
    name: str
    feature: str = ""
    status: str = PASSED
    duration: float = 0.0
    attachments: list[str] = field(default_factory=list)  # ścieżki do screenshotów
    error: Optional[str] = None
    # kategoria, waluta, wyekstrahowane dane, nagrana fixture
    details: dict = field(default_factory=dict)


class RunReport:
    def __init__(self, report_dir: Path, metadata: Optional[dict] = None):
        self.report_dir = Path(report_dir)
        self.metadata = metadata or {}
        self.started_at = datetime.now(timezone.utc)
        self.scenarios: list[ScenarioResult] = []

    def add(self, result: ScenarioResult):
        self.scenarios.append(result)
        logger.info(f"[RunReport] {result.status.upper()}: {result.name} ({result.duration:.1f}s)")

    def totals(self) -> dict[str, int]:
        counts = {PASSED: 0, FAILED: 0, SKIPPED: 0}
        for s in self.scenarios:
            counts[s.status] = counts.get(s.status, 0) + 1
        counts['total'] = len(self.scenarios)
        return counts

    def to_dict(self) -> dict:
        return {
            'started_at': self.started_at.isoformat(),
            'finished_at': datetime.now(timezone.utc).isoformat(),
            'metadata': self.metadata,
            'totals': self.totals(),
            'scenarios': [asdict(s) for s in self.scenarios],
        }

    def write(self, filename: str = 'run-report.json') -> Path:
        self.report_dir.mkdir(parents=True, exist_ok=True)
        path = self.report_dir / filename
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding='utf-8')
        logger.info(f"[RunReport] Raport zapisany: {path} | {self.totals()}")
        return path
