"""Summary report generation for the SIR meeple simulation."""

from typing import List, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Accumulates per-tick metrics and renders a formatted text report."""

    def __init__(self, config_path: Optional[str], seed: Optional[int]):
        self.config_path = config_path
        self.seed = seed
        self.step_metrics: List[Dict] = []
        self.peak_infected = 0
        self.peak_step = 0
        self.saturation_step: Optional[int] = None
        self._outside_total = 0.0

    def update(self, state: "SimulationState") -> None:
        """Accumulate metrics per step."""
        self.step_metrics.append(state.metrics.copy())

        infected = int(state.metrics.get('infected', 0))
        if infected > self.peak_infected:
            self.peak_infected = infected
            self.peak_step = state.step

        # First tick at which nobody is left to infect
        if self.saturation_step is None and state.metrics.get('susceptible', 0) == 0:
            self.saturation_step = state.step

        self._outside_total += state.metrics.get('outside_fraction', 0.0)

    @property
    def mean_outside_fraction(self) -> float:
        if not self.step_metrics:
            return 0.0
        return self._outside_total / len(self.step_metrics)

    def generate_summary(self, final_state: "SimulationState",
                         run_summary: Optional[Dict] = None) -> str:
        """Returns formatted text report.

        `run_summary` is SimulationEngine.get_summary(); its totals cover the
        whole run, including ticks this reporter did not see.
        """
        counts = final_state.status_counts()
        population = sum(counts.values())
        infected = counts['infected']
        run_summary = run_summary or {}
        new_infections = run_summary.get(
            'new_infections',
            sum(int(m.get('new_infections', 0)) for m in self.step_metrics))
        initial = run_summary.get('initial_infected')

        attack_pct = (infected / population * 100) if population > 0 else 0
        saturation = (f"step {self.saturation_step}" if self.saturation_step is not None
                      else "not reached")

        lines = [
            "",
            "=" * 80,
            "                    SIR MEEPLE SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path or '(built-in defaults)'}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Total Steps:           {final_state.step}",
            f"Simulated Time:        {final_state.time:.2f}",
            f"Population:            {population}",
            f"Initially Infected:    {initial if initial is not None else 'unknown'}",
            f"Susceptible:           {counts['susceptible']}",
            f"Infected:              {infected} ({attack_pct:.1f}%)",
            f"Recovered:             {counts['recovered']}",
            f"New Infections:        {new_infections}",
            "",
            "EPIDEMIC CURVE",
            "-" * 40,
            f"Peak Infected:         {self.peak_infected} at step {self.peak_step}",
            f"Full Saturation:       {saturation}",
            f"Mean Outside Arena:    {self.mean_outside_fraction:.4f} of population",
            "=" * 80,
        ]

        return "\n".join(lines)
