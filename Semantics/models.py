from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Section:
    """One argument block: a label, its premises and the conclusion they support."""

    label: str = ""
    premises: List[str] = field(default_factory=list)
    conclusion: str = ""


@dataclass
class Document:
    """Header values and sections handed to the LaTeX template."""

    title: str
    author: str
    date: str
    sections: List[Section] = field(default_factory=list)

    def as_template_params(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "date": self.date,
            "sections": [
                {"label": s.label, "premises": list(s.premises), "conclusion": s.conclusion} for s in self.sections
            ],
        }
