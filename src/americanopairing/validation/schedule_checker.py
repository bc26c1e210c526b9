"""Schedule Checker - validation of Americano schedules.

This module verifies the structural rules every schedule must satisfy and
reports how many partnerships and opponent pairings repeat.

Absolute checks (must never fail for a generated schedule):

- S1: each team has exactly two distinct players
- S2: the two teams of a match share no player
- S3: no player appears twice in one round
- S4: every participant is on the roster
- S5: rounds are numbered 1..n in order
- S6: courts are numbered 1..k in order within a round
- S7: no more rounds than the roster size allows
- S8: completed matches have non-negative scores

Quality checks (warnings, repeats are expected for small rosters):

- Q1: repeated partnerships
- Q2: repeated opponent pairings
"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from americanopairing.constants import PLAYERS_PER_TEAM
from americanopairing.models.player import Player
from americanopairing.models.tournament import Round
from americanopairing.pairing import calculate_total_rounds
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class CheckStatus(Enum):
    """Status of a single schedule check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of schedule check violations."""

    ABSOLUTE = "ABSOLUTE"  # S1-S8: Must not violate
    QUALITY = "QUALITY"  # Q1-Q2: Should minimize


@dataclass
class CheckResult:
    """Result of one schedule check."""

    check: str
    status: CheckStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def check_id(self) -> str:
        """Extract check ID from check string."""
        return self.check.split(":")[0].strip()

    @property
    def is_violation(self) -> bool:
        return self.status == CheckStatus.VIOLATION

    def to_dict(self) -> Dict[str, object]:
        return {
            "check": self.check,
            "status": self.status.value,
            "violation_type": self.violation_type.value if self.violation_type else None,
            "description": self.description,
            "details": self.details,
        }


@dataclass
class ValidationReport:
    """Complete validation report for a schedule."""

    total_checks: int
    compliant_count: int
    violations: List[CheckResult]
    overall_status: CheckStatus
    summary: str
    quality_warnings: List[CheckResult] = field(default_factory=list)
    check_results: List[CheckResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no absolute check failed."""
        return not self.violations

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_checks == 0:
            return 100.0
        return (self.compliant_count / self.total_checks) * 100.0

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary,
            "overall_status": self.overall_status.value,
            "compliance_percentage": self.compliance_percentage,
            "violations": [v.to_dict() for v in self.violations],
            "quality_warnings": [w.to_dict() for w in self.quality_warnings],
        }


def _repeated_pairs(counts: Counter) -> List[Dict[str, object]]:
    """List pairs seen more than once, in order of first appearance."""
    # Ids may mix str and int, so order members by text then type
    return [
        {
            "players": sorted(pair, key=lambda pid: (str(pid), type(pid).__name__)),
            "count": n,
        }
        for pair, n in counts.items()
        if n > 1
    ]


class ScheduleChecker:
    """Runs every schedule check and builds a report."""

    def check_schedule(
        self, players: Sequence[Player], rounds: Sequence[Round]
    ) -> ValidationReport:
        """Validate a schedule against the roster.

        Args:
            players: Tournament roster
            rounds: Schedule to check

        Returns:
            ValidationReport with one result per check
        """
        roster_ids = {p.id for p in players}
        absolute_checks: List[Callable[[], CheckResult]] = [
            lambda: self._check_s1_team_shape(rounds),
            lambda: self._check_s2_disjoint_teams(rounds),
            lambda: self._check_s3_once_per_round(rounds),
            lambda: self._check_s4_known_players(rounds, roster_ids),
            lambda: self._check_s5_round_numbers(rounds),
            lambda: self._check_s6_courts(rounds),
            lambda: self._check_s7_round_count(rounds, len(players)),
            lambda: self._check_s8_scores(rounds),
        ]
        results = [check() for check in absolute_checks]
        results.append(self._check_q1_repeat_partners(rounds))
        results.append(self._check_q2_repeat_opponents(rounds))

        violations = [
            r
            for r in results
            if r.is_violation and r.violation_type == ViolationType.ABSOLUTE
        ]
        quality_warnings = [
            r
            for r in results
            if r.is_violation and r.violation_type == ViolationType.QUALITY
        ]
        applicable = [r for r in results if r.status != CheckStatus.NOT_APPLICABLE]
        compliant = [r for r in applicable if r.status == CheckStatus.COMPLIANT]

        overall = CheckStatus.VIOLATION if violations else CheckStatus.COMPLIANT
        summary = (
            f"{len(rounds)} rounds checked: {len(violations)} violations, "
            f"{len(quality_warnings)} quality warnings"
        )
        if violations:
            logger.warning(f"Schedule check failed: {summary}")
        else:
            logger.debug(f"Schedule check passed: {summary}")

        return ValidationReport(
            total_checks=len(applicable),
            compliant_count=len(compliant),
            violations=violations,
            overall_status=overall,
            summary=summary,
            quality_warnings=quality_warnings,
            check_results=results,
        )

    # ========== Absolute checks ==========

    def _check_s1_team_shape(self, rounds: Sequence[Round]) -> CheckResult:
        bad = [
            match.id
            for round_data in rounds
            for match in round_data.matches
            for team in (match.team1, match.team2)
            if len(team) != PLAYERS_PER_TEAM or len(set(team)) != PLAYERS_PER_TEAM
        ]
        return self._result(
            "S1: Team shape",
            bad,
            ViolationType.ABSOLUTE,
            "Teams must have exactly two distinct players",
            {"matches": bad},
        )

    def _check_s2_disjoint_teams(self, rounds: Sequence[Round]) -> CheckResult:
        bad = [
            match.id
            for round_data in rounds
            for match in round_data.matches
            if set(match.team1) & set(match.team2)
        ]
        return self._result(
            "S2: Disjoint teams",
            bad,
            ViolationType.ABSOLUTE,
            "A player cannot be on both teams of a match",
            {"matches": bad},
        )

    def _check_s3_once_per_round(self, rounds: Sequence[Round]) -> CheckResult:
        duplicates: Dict[int, List[str]] = {}
        for round_data in rounds:
            counts = Counter(round_data.player_ids)
            repeated = sorted((str(pid) for pid, n in counts.items() if n > 1))
            if repeated:
                duplicates[round_data.round_number] = repeated
        return self._result(
            "S3: One match per player per round",
            duplicates,
            ViolationType.ABSOLUTE,
            "Players scheduled more than once in a round",
            {"rounds": duplicates},
        )

    def _check_s4_known_players(self, rounds: Sequence[Round], roster_ids: set) -> CheckResult:
        unknown = sorted(
            {
                str(pid)
                for round_data in rounds
                for pid in round_data.player_ids
                if pid not in roster_ids
            }
        )
        return self._result(
            "S4: Known players",
            unknown,
            ViolationType.ABSOLUTE,
            "Schedule references players not on the roster",
            {"players": unknown},
        )

    def _check_s5_round_numbers(self, rounds: Sequence[Round]) -> CheckResult:
        numbers = [r.round_number for r in rounds]
        expected = list(range(1, len(rounds) + 1))
        bad = numbers != expected
        return self._result(
            "S5: Round numbering",
            bad,
            ViolationType.ABSOLUTE,
            "Rounds must be numbered 1..n in order",
            {"found": numbers, "expected": expected},
        )

    def _check_s6_courts(self, rounds: Sequence[Round]) -> CheckResult:
        bad = [
            round_data.round_number
            for round_data in rounds
            if [m.court for m in round_data.matches]
            != list(range(1, len(round_data.matches) + 1))
        ]
        return self._result(
            "S6: Court numbering",
            bad,
            ViolationType.ABSOLUTE,
            "Courts must be numbered 1..k in order within each round",
            {"rounds": bad},
        )

    def _check_s7_round_count(self, rounds: Sequence[Round], num_players: int) -> CheckResult:
        limit = calculate_total_rounds(num_players) if num_players else 0
        return self._result(
            "S7: Round count",
            len(rounds) > limit,
            ViolationType.ABSOLUTE,
            f"At most {limit} rounds for {num_players} players",
            {"rounds": len(rounds), "limit": limit},
        )

    def _check_s8_scores(self, rounds: Sequence[Round]) -> CheckResult:
        completed = [
            match for round_data in rounds for match in round_data.matches if match.is_completed
        ]
        if not completed:
            return CheckResult("S8: Scores", CheckStatus.NOT_APPLICABLE)
        bad = [m.id for m in completed if m.score.team1 < 0 or m.score.team2 < 0]
        return self._result(
            "S8: Scores",
            bad,
            ViolationType.ABSOLUTE,
            "Completed matches must have non-negative scores",
            {"matches": bad},
        )

    # ========== Quality checks ==========

    def _check_q1_repeat_partners(self, rounds: Sequence[Round]) -> CheckResult:
        counts: Counter = Counter()
        for round_data in rounds:
            for match in round_data.matches:
                for team in (match.team1, match.team2):
                    if len(team) == PLAYERS_PER_TEAM:
                        counts[frozenset(team)] += 1
        repeats = _repeated_pairs(counts)
        return self._result(
            "Q1: Repeated partnerships",
            repeats,
            ViolationType.QUALITY,
            f"{len(repeats)} partnerships played more than once",
            {"pairs": repeats},
        )

    def _check_q2_repeat_opponents(self, rounds: Sequence[Round]) -> CheckResult:
        counts: Counter = Counter()
        for round_data in rounds:
            for match in round_data.matches:
                for p1 in match.team1:
                    for p2 in match.team2:
                        counts[frozenset((p1, p2))] += 1
        repeats = _repeated_pairs(counts)
        return self._result(
            "Q2: Repeated opponents",
            repeats,
            ViolationType.QUALITY,
            f"{len(repeats)} opponent pairings met more than once",
            {"pairs": repeats},
        )

    @staticmethod
    def _result(
        check: str,
        failed: object,
        violation_type: ViolationType,
        description: str,
        details: Dict[str, object],
    ) -> CheckResult:
        if failed:
            return CheckResult(check, CheckStatus.VIOLATION, violation_type, description, details)
        return CheckResult(check, CheckStatus.COMPLIANT)


def create_schedule_checker() -> ScheduleChecker:
    """Factory function to create a schedule checker."""
    return ScheduleChecker()
