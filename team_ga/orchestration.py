"""
Orchestration module for team building.

Implements match and benchmark mode workflows.
"""

import csv
from typing import Dict
from pathlib import Path
import numpy as np

from .config import load_ga_config, DEFAULT_CONFIG_PATH
from .engine import TeamBuilder, build_problem
from .io_utils import (
    load_participants_csv,
    load_wishlists_csv,
    save_teams_csv,
    save_metadata
)
from .benchmark import run_benchmark, print_benchmark_report


def _prepare_output(run_config: Dict) -> tuple[Path, bool]:
    """Create the output directory, refusing to reuse one unless overwrite is set."""
    output_root = Path(run_config['output']['root'])
    overwrite = run_config['output'].get('overwrite', False)

    if output_root.exists() and not overwrite:
        raise FileExistsError(
            f"Output directory already exists: {output_root}\n"
            f"Set 'output.overwrite: true' in config to overwrite"
        )

    output_root.mkdir(parents=True, exist_ok=overwrite)
    print(f"Output directory: {output_root}\n")
    return output_root, overwrite


def _load_run_ga_config(run_config: Dict) -> Dict:
    """Load GA config and apply the run's random_seed override."""
    ga_config_path = run_config.get('ga_config', DEFAULT_CONFIG_PATH)
    print(f"Loading GA config from: {ga_config_path}")
    ga_config = load_ga_config(ga_config_path)

    if run_config.get('random_seed') is not None:
        ga_config['random_seed'] = run_config['random_seed']

    return ga_config


def run_match_mode(run_config: Dict) -> None:
    """
    Build teams from CSV inputs.

    Args:
        run_config: Run configuration dict from YAML

    Algorithm:
        1. Load GA config
        2. Load participants and wishlists from run_config['input']
        3. Create output directory: run_config['output']['root']
        4. Run the genetic search
        5. Save teams.csv and run_metadata.yaml (and plots if requested)
        6. Print summary report

    Returns:
        None (writes to disk)
    """
    print("=" * 70)
    print("MATCH MODE")
    print("=" * 70)

    ga_config = _load_run_ga_config(run_config)

    inputs = run_config['input']
    leads = load_participants_csv(inputs['leads'])
    juniors = load_participants_csv(inputs['juniors'])
    lead_wishlists = load_wishlists_csv(inputs['lead_wishlists'])
    junior_wishlists = load_wishlists_csv(inputs['junior_wishlists'])
    print(f"Team leads: {len(leads)}")
    print(f"Juniors: {len(juniors)}")

    problem = build_problem(leads, juniors, lead_wishlists, junior_wishlists)

    output_root, overwrite = _prepare_output(run_config)

    builder = TeamBuilder(ga_config)
    print(f"Random seed: {builder.seed}")
    print(f"Running {ga_config['generations']} generations "
          f"(population {ga_config['population_size']})...")
    result = builder.search_problem(problem)

    teams_path = save_teams_csv(
        result.teams,
        output_root / 'teams.csv',
        problem.lead_prefs,
        problem.junior_prefs,
        overwrite=overwrite
    )
    metadata_path = save_metadata(result.to_dict(), output_root / 'run_metadata.yaml', overwrite=overwrite)

    if run_config['output'].get('plots', False):
        import matplotlib
        matplotlib.use('Agg')
        from .visualization import plot_convergence, plot_satisfaction_matrix

        plot_convergence([result.history], output_root / 'convergence.png')
        plot_satisfaction_matrix(problem, result.permutation, output_root / 'satisfaction.png')

    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"Teams: {len(result.teams)}")
    print(f"Best harmonic mean (search): {result.best_score:.4f}")
    print(f"Harmonic mean (report): {result.report_score:.4f}")
    print(f"Valid pairing: {'yes' if result.is_valid else 'NO'}")
    print(f"Teams file: {teams_path}")
    print(f"Metadata: {metadata_path}")


def run_benchmark_mode(run_config: Dict) -> None:
    """
    Run the strategy repeatedly on random problems.

    Args:
        run_config: Run configuration dict from YAML

    Algorithm:
        1. Load GA config
        2. Create output directory
        3. Run run_config['generation']['runs'] searches of size
           run_config['generation']['size']
        4. Save benchmark_runs.csv and benchmark.yaml (and plot if requested)
        5. Print summary report

    Returns:
        None (writes to disk)
    """
    print("=" * 70)
    print("BENCHMARK MODE")
    print("=" * 70)

    ga_config = _load_run_ga_config(run_config)
    output_root, overwrite = _prepare_output(run_config)

    generation = run_config['generation']
    seed = ga_config['random_seed']
    if seed is None:
        seed = int(np.random.randint(0, 2**31))
    print(f"Random seed: {seed}")
    rng = np.random.default_rng(seed)

    report = run_benchmark(
        size=generation['size'],
        runs=generation['runs'],
        config=ga_config,
        rng=rng,
        progress_every=generation.get('progress_every', 0)
    )

    runs_path = output_root / 'benchmark_runs.csv'
    if runs_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {runs_path}")
    with open(runs_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['run', 'harmonic_mean', 'final_best_fitness'])
        for i, (score, history) in enumerate(zip(report['scores'], report['histories'])):
            writer.writerow([i, score, history[-1] if history else 0.0])

    summary = {k: v for k, v in report.items() if k not in ('scores', 'histories')}
    summary['random_seed'] = seed
    save_metadata(summary, output_root / 'benchmark.yaml', overwrite=overwrite)

    if run_config['output'].get('plots', False):
        import matplotlib
        matplotlib.use('Agg')
        from .visualization import plot_convergence

        plot_convergence(report['histories'], output_root / 'convergence.png')

    print()
    print_benchmark_report(report)
    print(f"Runs file: {runs_path}")
