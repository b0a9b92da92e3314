"""
Core Models Package

Data models shared by the registry, the ranking tree and the session
driver.

**MUTABILITY:**

| Model | Frozen | Why it changes |
|-------|--------|----------------|
| `Question` | yes | never, exam content is fixed |
| `RankedEntry` | yes | never, rebuilt on each enumeration |
| `Participant` | no | score and attempt log grow per session |
"""

from .participant import Participant
from .questions import Question
from .ranking import RankedEntry

__all__ = [
    "Participant",
    "Question",
    "RankedEntry",
]
