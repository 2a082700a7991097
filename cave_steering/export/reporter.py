"""Summary report generation for the cave steering simulation."""

from typing import List, Dict, Optional, Tuple, TYPE_CHECKING
from pathlib import Path
import numpy as np

from ..model.cave import solid_fraction

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: str, seed: Optional[int]):
        self.config_path = config_path
        self.seed = seed
        self.step_metrics: List[Dict] = []
        self.closest_distance = float('inf')
        self.stalled_steps = 0

    def update(self, state: "SimulationState") -> None:
        """Accumulate metrics per step."""
        self.step_metrics.append(state.metrics.copy())

        mean_distance = state.metrics.get('mean_distance', 0.0)
        if mean_distance < self.closest_distance:
            self.closest_distance = mean_distance

        # Stalled: agents remain but none of them moved this tick
        active = [a for a in state.agents if a.state != 'arrived']
        if active and all(a.state == 'waiting' for a in active):
            self.stalled_steps += 1

    def generate_summary(self, final_state: "SimulationState",
                         grid: np.ndarray,
                         start: Optional[Tuple[int, int]],
                         output_dir: Path,
                         csv_enabled: bool,
                         grid_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        total_agents = int(metrics.get('total_agents', 0))
        arrived = int(metrics.get('arrived', 0))
        avg_travel_time = metrics.get('avg_travel_time', 0)
        arrived_pct = (arrived / total_agents * 100) if total_agents > 0 else 0

        height, width = grid.shape
        closest = self.closest_distance if np.isfinite(self.closest_distance) else 0.0

        lines = [
            "",
            "=" * 80,
            "                    CAVE STEERING SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "CAVE",
            "-" * 40,
            f"Dimensions:            {width} x {height}",
            f"Solid Fraction:        {solid_fraction(grid):.3f}",
            f"Start Cell:            {start if start is not None else '(none)'}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Total Steps:           {final_state.step}",
            f"Agents Arrived:        {arrived} / {total_agents} ({arrived_pct:.1f}%)",
            f"Average Travel Time:   {avg_travel_time:.1f} steps",
            f"Closest Mean Distance: {closest:.4f} cells",
            f"Stalled Steps:         {self.stalled_steps}",
            "",
            "FINAL WEIGHTS",
            "-" * 40,
        ]

        for agent in final_state.agents:
            weights = ", ".join(f"{w:+.4f}" for w in agent.weights)
            lines.append(f"Agent {agent.agent_id:<4} [{agent.state:<8}] {weights}")

        lines += [
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'simulation_log.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if grid_enabled:
            lines.append(f"Cave Grid:  {output_dir / 'cave.txt'}")
        else:
            lines.append("Cave Grid:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
