# attack_sim/engine/resolver.py
import random
from typing import Callable, List, Optional, Tuple

from .models import TrialParameters, TrialRecord, BatchReport
from .dice import d6, fresh_rng, roll_dice
from ..content.balance import DIE_SIDES
from .rules import is_success, save_passes

StageFilter = Callable[[int, int, random.Random], int]


def count_successes(count: int, difficulty: int, r: random.Random) -> int:
    """Roll `count` d6 and keep the ones at or above `difficulty`."""
    return sum(1 for face in roll_dice(count, DIE_SIDES, r) if is_success(face, difficulty))


def apply_save(count: int, save: int, r: random.Random) -> int:
    """
    One save roll per incoming wound; the wound survives when the roll is
    under `save`. A save of 0 skips the stage and passes every wound through.
    """
    if save < 1:
        return count
    survived = 0
    for _ in range(count):
        if save_passes(d6(r), save):
            survived += 1
    return survived


# fixed resolution order: touch -> hurt -> armor -> invulnerability
STAGES: List[Tuple[str, StageFilter, str]] = [
    ("touch", count_successes, "touch_difficulty"),
    ("hurt", count_successes, "hurt_difficulty"),
    ("armor", apply_save, "armor_save"),
    ("invu", apply_save, "invu_save"),
]


def resolve_trial(params: TrialParameters, r: random.Random) -> TrialRecord:
    """
    Runs the stage pipeline once. Each stage's output count is the dice
    count handed to the next one, starting from params.dice_number.
    """
    counts = {}
    count = params.dice_number
    for name, stage, attr in STAGES:
        count = stage(count, getattr(params, attr), r)
        counts[name] = count
    return TrialRecord(
        touches=counts["touch"],
        hurts=counts["hurt"],
        after_armor=counts["armor"],
        wounds=counts["invu"],
    )


def run_trial(params: TrialParameters, r: random.Random) -> int:
    return resolve_trial(params, r).wounds


def run_batch(params: TrialParameters, r: Optional[random.Random] = None) -> List[int]:
    """
    Runs exactly params.run_number independent trials, in order.
    No aggregation here; see report.summarize for that.
    """
    if r is None:
        r = fresh_rng()
    return [run_trial(params, r) for _ in range(params.run_number)]


def run_batch_report(params: TrialParameters, r: Optional[random.Random] = None) -> BatchReport:
    """Same draws as run_batch, but keeps the per-stage counts and a text log."""
    if r is None:
        r = fresh_rng()
    report = BatchReport(params=params)
    for n in range(1, params.run_number + 1):
        rec = resolve_trial(params, r)
        report.records.append(rec)
        report.batch_log.append(
            f"Trial {n}: touches {rec.touches}, hurts {rec.hurts}, "
            f"after armor {rec.after_armor}, wounds {rec.wounds}"
        )
    return report
