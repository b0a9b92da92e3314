"""
Exam Registry Core Package

Shared data models and utilities used by the registry, the ranking tree
and the session driver.

**OWNERSHIP:**

1. **Participants are owned by the Registry**
   - Created once on first registration, never destroyed during a run
   - Every other component holds the same instance, never a copy

2. **Leaderboard rows are snapshots**
   - `RankedEntry` carries the name as it was when the score was inserted
   - Rebuilt from the ranking tree on every enumeration

3. **Questions are fixed content**
   - Frozen, validated on construction
   - Loadable from a JSON question bank
"""

from .models import Participant, Question, RankedEntry

__all__ = [
    "Participant",
    "Question",
    "RankedEntry",
]
