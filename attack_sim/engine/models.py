# attack_sim/engine/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .report import summarize

@dataclass(frozen=True)
class TrialParameters:
    dice_number: int
    touch_difficulty: int                  # 2..6
    hurt_difficulty: int                   # 2..6, derived from strength/endurance
    armor_save: int = 0                    # 0 = no armor save
    invu_save: int = 0                     # 0 = no invulnerability save
    run_number: int = 1

    def as_dict(self) -> Dict[str, int]:
        return {
            "diceNumber": self.dice_number,
            "touchDifficulty": self.touch_difficulty,
            "hurtDifficulty": self.hurt_difficulty,
            "armorSave": self.armor_save,
            "invuSave": self.invu_save,
            "runNumber": self.run_number,
        }

@dataclass(frozen=True)
class TrialRecord:
    touches: int
    hurts: int
    after_armor: int
    wounds: int                            # final outcome of the trial

@dataclass
class BatchReport:
    params: TrialParameters
    records: List[TrialRecord] = field(default_factory=list)
    batch_log: List[str] = field(default_factory=list)

    @property
    def results(self) -> List[int]:
        return [rec.wounds for rec in self.records]

    def summary(self) -> Dict[str, Any]:
        return summarize(self.results)
