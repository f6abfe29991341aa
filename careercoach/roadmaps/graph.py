## Roadmap -> diagram graph (nodes stacked vertically, one edge per step)
from dataclasses import dataclass, field
from typing import Any, Dict, List

from careercoach.agents.schemas import Roadmap, RoadmapNode

NODE_X = 300
NODE_WIDTH = 300
VERTICAL_SPACING = 160
PADDING_TOP = 24

EDGE_STROKE = "#60a5fa"

CATEGORY_COLORS = {
    "foundation": "#6366f1",
    "intermediate": "#f59e0b",
    "advanced": "#0ea5e9",
    "specialization": "#10b981",
}
DEFAULT_CATEGORY_COLOR = "#94a3b8"


@dataclass
class FlowNode:
    id: str
    position: Dict[str, int]
    data: RoadmapNode
    color: str
    type: str = "roadmapNode"
    style: Dict[str, Any] = field(default_factory=lambda: {"width": NODE_WIDTH})
    draggable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": dict(self.position),
            "data": self.data.model_dump(),
            "color": self.color,
            "style": dict(self.style),
            "draggable": self.draggable,
        }


@dataclass
class FlowEdge:
    id: str
    source: str
    target: str
    type: str = "smoothstep"
    animated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "type": self.type,
            "style": {
                "stroke": EDGE_STROKE,
                "strokeWidth": 2,
                "strokeLinecap": "round",
                "strokeLinejoin": "round",
            },
            "markerEnd": {
                "type": "arrowclosed",
                "color": EDGE_STROKE,
                "width": 18,
                "height": 18,
            },
            "animated": self.animated,
        }


@dataclass
class RoadmapGraph:
    nodes: List[FlowNode] = field(default_factory=list)
    edges: List[FlowEdge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def node_position(index: int) -> Dict[str, int]:
    return {"x": NODE_X, "y": index * VERTICAL_SPACING + PADDING_TOP}


def edge_id(source: str, target: str) -> str:
    return f"e{source}-{target}"


def project_roadmap(roadmap: Roadmap | None) -> RoadmapGraph:
    """
    Lay the roadmap out as a vertical chain: node i sits below node i-1 and
    there is exactly one edge node[i] -> node[i+1]. No branching is modelled.
    """
    if roadmap is None or not roadmap.nodes:
        return RoadmapGraph()

    nodes = [
        FlowNode(
            id=node.id,
            position=node_position(i),
            data=node,
            color=CATEGORY_COLORS.get(node.category, DEFAULT_CATEGORY_COLOR),
        )
        for i, node in enumerate(roadmap.nodes)
    ]

    edges = [
        FlowEdge(id=edge_id(a.id, b.id), source=a.id, target=b.id)
        for a, b in zip(nodes, nodes[1:])
    ]

    return RoadmapGraph(nodes=nodes, edges=edges)
