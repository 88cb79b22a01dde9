"""
Arbre de présentation : sortie du renderer, peinte par le shell (HTML, UI…).
"""
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, Field


class Node(BaseModel):
    """Nœud de présentation. `kind` identifie le rôle (header, title, day, row…)."""
    kind: str
    text: Optional[str] = None
    style: Dict[str, Any] = Field(default_factory=dict)
    props: Dict[str, Any] = Field(default_factory=dict)
    attrs: Dict[str, str] = Field(default_factory=dict)
    children: List["Node"] = Field(default_factory=list)

    def walk(self) -> Iterator["Node"]:
        """Parcours en profondeur (self inclus)."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, kind: str) -> List["Node"]:
        return [n for n in self.walk() if n.kind == kind]

    def find(self, kind: str) -> Optional["Node"]:
        return next((n for n in self.walk() if n.kind == kind), None)


Node.model_rebuild()
