# attack_sim/content/balance.py
DIE_SIDES = 6

DEFAULTS = {
    "armorSave": 0,
    "invuSave": 0,
}

# payload field -> (min, max); None means unbounded
BOUNDS = {
    "strength": (1, None),
    "endurance": (1, None),
    "diceNumber": (1, None),
    "touchDifficulty": (2, 6),
    "armorSave": (0, 6),
    "invuSave": (0, 6),
    "runNumber": (1, 1000),
    "seed": (0, None),
}

LOG_TAIL = 30
