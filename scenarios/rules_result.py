from dataclasses import dataclass, field


@dataclass
class AlertResult:
    business_rule: str
    description: str = ""
    alert_type: str = "bug"


@dataclass
class RulesResult:
    alerts: list[AlertResult] = field(default_factory=list)
    matches: list[str] = field(default_factory=list)
    expected_count: int = 0
    failed: bool = False
    fail_reason: str = ""

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def summary(self) -> str:
        return f"{self.match_count}/{self.expected_count}"
