# attack_sim/engine/report.py
from collections import Counter
from typing import Any, Dict, List

def summarize(results: List[int]) -> Dict[str, Any]:
    runs = len(results)
    total = sum(results)
    counts = Counter(results)
    return {
        "runs": runs,
        "total": total,
        "mean": round(total / runs, 3) if runs else 0.0,
        "min": min(results) if results else None,
        "max": max(results) if results else None,
        "distribution": {k: counts[k] for k in sorted(counts)},
    }
