from __future__ import annotations

from typing import FrozenSet, Mapping

# Date key ('YYYY-MM-DD', local) -> ids of employees scheduled that day.
Schedule = Mapping[str, FrozenSet[str]]
