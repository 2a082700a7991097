"""State snapshot dataclasses for the cave steering simulation."""

from dataclasses import dataclass
from typing import List, Dict, Tuple


@dataclass(frozen=True)
class AgentSnapshot:
    """Immutable snapshot of an agent's state at a given time step."""
    agent_id: int
    x: float
    y: float
    state: str  # "moving", "waiting", "arrived"
    distance: float  # to target
    weights: Tuple[float, ...]


@dataclass
class SimulationState:
    """Complete snapshot of simulation state at a given time step."""
    step: int
    agents: List[AgentSnapshot]
    metrics: Dict[str, float]   # arrived, mean distance, etc.

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format."""
        return [
            {
                "step": self.step,
                "agent_id": a.agent_id,
                "x": round(a.x, 4),
                "y": round(a.y, 4),
                "state": a.state,
                "distance": round(a.distance, 4),
                "weights": ";".join(f"{w:.6f}" for w in a.weights)
            }
            for a in self.agents
        ]
