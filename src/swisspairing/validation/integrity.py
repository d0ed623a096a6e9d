"""Tournament integrity checker.

Audits an engine's pairing log, results and standings against the properties
every Swiss tournament run by this engine must keep.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

from swisspairing.constants import POINTS_PER_PAIRING
from swisspairing.models.pairing import Pairing
from swisspairing.models.snapshot import EngineSnapshot
from swisspairing.models.standing import StandingEntry
from swisspairing.tournament.engine import SwissEngine
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

SCORE_TOLERANCE = 1e-9


class CriterionStatus(Enum):
    """Status of a single integrity check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class Severity(Enum):
    """How bad a violation is."""

    ERROR = "ERROR"  # engine invariant broken
    WARNING = "WARNING"  # allowed by policy, worth reporting


@dataclass
class CriterionResult:
    """Result of one integrity check."""

    criterion: str
    status: CriterionStatus
    severity: Optional[Severity] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return self.description


@dataclass
class ValidationReport:
    """Complete integrity report for a tournament."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    warnings: List[CriterionResult] = field(default_factory=list)
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.overall_status != CriterionStatus.VIOLATION

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0


def _pair_id(pairing: Pairing) -> FrozenSet[PlayerId]:
    return frozenset({pairing.player1, pairing.player2})


def _rounds(pairings: Sequence[Pairing]) -> Dict[int, List[Pairing]]:
    by_round: Dict[int, List[Pairing]] = defaultdict(list)
    for pairing in pairings:
        by_round[pairing.round].append(pairing)
    return dict(by_round)


class IntegrityChecker:
    """Checks engine invariants on exported state."""

    def check_no_repeats(self, pairings: Sequence[Pairing]) -> CriterionResult:
        """Competitors must not meet twice unless the rematch was forced and flagged."""
        seen = set()
        unflagged = []
        flagged = []
        for pairing in pairings:
            if pairing.is_bye:
                continue
            pair_id = _pair_id(pairing)
            if pair_id in seen:
                target = flagged if pairing.is_rematch else unflagged
                target.append(pairing)
            seen.add(pair_id)

        if unflagged:
            first = unflagged[0]
            return CriterionResult(
                criterion="no_repeats",
                status=CriterionStatus.VIOLATION,
                severity=Severity.ERROR,
                description=(
                    f"Repeat pairing: {first.player1} vs {first.player2} "
                    f"in round {first.round}"
                ),
                details={"repeats": [p.to_dict() for p in unflagged]},
            )
        if flagged:
            return CriterionResult(
                criterion="no_repeats",
                status=CriterionStatus.VIOLATION,
                severity=Severity.WARNING,
                description=f"{len(flagged)} forced rematches",
                details={"repeats": [p.to_dict() for p in flagged]},
            )
        return CriterionResult(
            criterion="no_repeats",
            status=CriterionStatus.COMPLIANT,
            description="No repeat pairings found",
        )

    def check_bye_cardinality(
        self, pairings: Sequence[Pairing], num_competitors: int
    ) -> CriterionResult:
        """One bye per round for an odd field, none for an even one."""
        by_round = _rounds(pairings)
        if not by_round:
            return CriterionResult(
                criterion="bye_cardinality",
                status=CriterionStatus.NOT_APPLICABLE,
                description="No rounds paired",
            )

        expected = num_competitors % 2
        bad = {
            round_number: count
            for round_number, count in (
                (r, sum(1 for p in ps if p.is_bye)) for r, ps in by_round.items()
            )
            if count != expected
        }
        if bad:
            return CriterionResult(
                criterion="bye_cardinality",
                status=CriterionStatus.VIOLATION,
                severity=Severity.ERROR,
                description=f"Expected {expected} byes per round, got {bad}",
                details={"rounds": bad},
            )
        return CriterionResult(
            criterion="bye_cardinality",
            status=CriterionStatus.COMPLIANT,
            description=f"{expected} bye per round as expected",
        )

    def check_single_appearance(
        self, pairings: Sequence[Pairing], competitor_ids: Sequence[PlayerId]
    ) -> CriterionResult:
        """Every competitor appears exactly once in every round."""
        problems: Dict[int, Dict[str, List[PlayerId]]] = {}
        for round_number, round_pairings in _rounds(pairings).items():
            counts = Counter(
                pid
                for pairing in round_pairings
                for pid in (pairing.player1, pairing.player2)
                if pid is not None
            )
            missing = [pid for pid in competitor_ids if counts[pid] == 0]
            doubled = [pid for pid, count in counts.items() if count > 1]
            if missing or doubled:
                problems[round_number] = {"missing": missing, "doubled": doubled}

        if problems:
            return CriterionResult(
                criterion="single_appearance",
                status=CriterionStatus.VIOLATION,
                severity=Severity.ERROR,
                description=f"Competitors unpaired or paired twice in rounds {sorted(problems)}",
                details={"rounds": problems},
            )
        return CriterionResult(
            criterion="single_appearance",
            status=CriterionStatus.COMPLIANT,
            description="Every competitor paired exactly once per round",
        )

    def check_point_conservation(self, snapshot: EngineSnapshot) -> CriterionResult:
        """Each recorded pairing distributes exactly one point."""
        total = sum(state.score for _, state in snapshot.players)
        expected = len(snapshot.results) * POINTS_PER_PAIRING
        if abs(total - expected) > SCORE_TOLERANCE:
            return CriterionResult(
                criterion="point_conservation",
                status=CriterionStatus.VIOLATION,
                severity=Severity.ERROR,
                description=(
                    f"{total} points held for {len(snapshot.results)} results"
                ),
                details={"total": total, "expected": expected},
            )
        return CriterionResult(
            criterion="point_conservation",
            status=CriterionStatus.COMPLIANT,
            description=f"{total} points for {len(snapshot.results)} results",
        )

    def check_standings_permutation(
        self, standings: Sequence[StandingEntry], num_competitors: int
    ) -> CriterionResult:
        """Positions must be exactly 1..N."""
        positions = sorted(entry.position for entry in standings)
        if positions != list(range(1, num_competitors + 1)):
            return CriterionResult(
                criterion="standings_permutation",
                status=CriterionStatus.VIOLATION,
                severity=Severity.ERROR,
                description="Standing positions are not 1..N",
                details={"positions": positions},
            )
        return CriterionResult(
            criterion="standings_permutation",
            status=CriterionStatus.COMPLIANT,
            description=f"Positions 1..{num_competitors}",
        )

    def validate(
        self,
        snapshot: EngineSnapshot,
        standings: Optional[Sequence[StandingEntry]] = None,
    ) -> ValidationReport:
        """Run every check against a snapshot and, if given, its standings."""
        competitor_ids = [pid for pid, _ in snapshot.players]
        logger.info(
            f"Checking integrity of {len(competitor_ids)} competitors over "
            f"{snapshot.current_round} rounds"
        )

        results = [
            self.check_no_repeats(snapshot.pairings),
            self.check_bye_cardinality(snapshot.pairings, len(competitor_ids)),
            self.check_single_appearance(snapshot.pairings, competitor_ids),
            self.check_point_conservation(snapshot),
        ]
        if standings is not None:
            results.append(
                self.check_standings_permutation(standings, len(competitor_ids))
            )

        return self._build_report(results)

    def validate_engine(self, engine: SwissEngine) -> ValidationReport:
        """Check a live engine against one consistent view of its state."""
        with engine.lock:
            snapshot = engine.snapshot()
            standings = engine.get_standings()
        return self.validate(snapshot, standings)

    def _build_report(self, results: List[CriterionResult]) -> ValidationReport:
        compliant_count = sum(
            1 for r in results if r.status == CriterionStatus.COMPLIANT
        )
        errors = [
            r
            for r in results
            if r.status == CriterionStatus.VIOLATION and r.severity == Severity.ERROR
        ]
        warnings = [
            r
            for r in results
            if r.status == CriterionStatus.VIOLATION and r.severity == Severity.WARNING
        ]

        overall_status = (
            CriterionStatus.VIOLATION if errors else CriterionStatus.COMPLIANT
        )
        if errors:
            summary = (
                f"Integrity violations detected - {len(errors)} checks failed; "
                f"{len(warnings)} warnings"
            )
            logger.warning(f"Integrity check failed: {summary}")
        else:
            summary = f"All invariants hold; {len(warnings)} warnings"
            logger.info(f"Integrity check complete: {summary}")

        return ValidationReport(
            total_criteria=len(results),
            compliant_count=compliant_count,
            violations=errors,
            warnings=warnings,
            overall_status=overall_status,
            summary=summary,
            criteria_results=results,
        )


def create_integrity_checker() -> IntegrityChecker:
    """Create integrity checker instance."""
    return IntegrityChecker()
