
from __future__ import annotations
from typing import Any, Dict, List

# Routine builder — turns the goal lists into a simple day plan.
# Policy:
# - At most 3 daily goals and 2 habits are placed; weekly goals only count toward the total.
# - Raise ValueError when there is nothing to plan (caller maps it to 400).

MAX_DAILY = 3
MAX_HABITS = 2

def generate_routine(goals: Dict[str, List[Dict[str, Any]]]) -> Dict[str, Any]:
    daily = goals.get("daily") or []
    weekly = goals.get("weekly") or []
    habits = goals.get("habits") or []
    total = len(daily) + len(weekly) + len(habits)
    if total == 0:
        raise ValueError("Add some goals first!")

    items = ["🌅 Morning: Start with reflection and set daily intentions"]
    items.extend(f"✓ {g.get('text', '')}" for g in daily[:MAX_DAILY])
    items.append("☀️ Midday: Focus time for important tasks")
    items.extend(f"🔁 Practice: {g.get('text', '')}" for g in habits[:MAX_HABITS])
    items.append("🌙 Evening: Review progress and journal")
    items.append("💤 Before bed: Gratitude practice and tomorrow planning")

    motivation = (
        f"You have {total} active goals. Consistency beats perfection. Take it one day at a time! 💪"
    )
    return {"routine": items, "motivation": motivation}
