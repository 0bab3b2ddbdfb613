# attack_sim/engine/rules.py

def wound_difficulty(strength: int, endurance: int) -> int:
    # first matching row wins
    if strength >= endurance * 2:
        return 2
    if strength > endurance:
        return 3
    if strength * 2 <= endurance:
        return 6
    if strength < endurance:
        return 5
    # strength == endurance
    return 4

def is_success(face: int, difficulty: int) -> bool:
    return face >= difficulty

def save_passes(face: int, save: int) -> bool:
    # the wound gets through when the save roll is under the threshold
    return face < save
