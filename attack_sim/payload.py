# attack_sim/payload.py
from typing import Any, Dict, Optional

from flask import json
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .content.balance import BOUNDS, DEFAULTS
from .engine.models import TrialParameters
from .engine.rules import wound_difficulty


class PayloadError(ValueError):
    """Rejected request input; `field` is None when the body itself is unusable."""

    def __init__(self, field: Optional[str], message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def _bounded(name: str, default: Any = ...) -> Any:
    lo, hi = BOUNDS[name]
    return Field(default, alias=name, ge=lo, le=hi)


class AttackRequest(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    strength: int = _bounded("strength")
    endurance: int = _bounded("endurance")
    dice_number: int = _bounded("diceNumber")
    touch_difficulty: int = _bounded("touchDifficulty")
    armor_save: int = _bounded("armorSave", DEFAULTS["armorSave"])
    invu_save: int = _bounded("invuSave", DEFAULTS["invuSave"])
    run_number: int = _bounded("runNumber")
    seed: Optional[int] = _bounded("seed", None)


def format_validation_error(err: ValidationError) -> PayloadError:
    for error in err.errors():
        loc = error.get("loc") or ("?",)
        field = str(loc[0])
        kind = error.get("type")
        ctx = error.get("ctx") or {}
        value = error.get("input")
        if kind == "missing":
            return PayloadError(field, f"field '{field}' is required")
        if kind == "greater_than_equal":
            return PayloadError(field, f"field '{field}' must be at least {ctx.get('ge')}, got {value}")
        if kind == "less_than_equal":
            return PayloadError(field, f"field '{field}' must be at most {ctx.get('le')}, got {value}")
        return PayloadError(field, f"field '{field}' failed validation: {error.get('msg')}")
    return PayloadError(None, f"validation failed: {err}")


def decode_body(raw: bytes) -> Any:
    # read the body as JSON whatever Content-Type the client sent
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise PayloadError(None, f"invalid JSON body: {exc}") from exc


def parse_payload(data: Any) -> AttackRequest:
    if not isinstance(data, dict):
        raise PayloadError(None, "invalid JSON body: expected an object")
    try:
        return AttackRequest.model_validate(data)
    except ValidationError as exc:
        raise format_validation_error(exc) from exc


def to_params(req: AttackRequest) -> TrialParameters:
    return TrialParameters(
        dice_number=req.dice_number,
        touch_difficulty=req.touch_difficulty,
        hurt_difficulty=wound_difficulty(req.strength, req.endurance),
        armor_save=req.armor_save,
        invu_save=req.invu_save,
        run_number=req.run_number,
    )


def params_from_payload(data: Dict[str, Any]) -> TrialParameters:
    return to_params(parse_payload(data))
