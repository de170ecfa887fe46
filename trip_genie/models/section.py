# trip_genie/models/section.py
from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class Section:
    title: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
