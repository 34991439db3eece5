"""
Visualization for team building results.

Plots the best score per generation and the satisfaction matrix with the
chosen pairing marked.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union
import matplotlib.pyplot as plt
import numpy as np

from .data_models import MatchingProblem


def plot_convergence(
    histories: List[List[float]],
    save_path: Optional[Union[str, Path]] = None,
    figsize: Tuple[int, int] = (10, 6)
):
    """
    Plot best fitness per generation.

    Args:
        histories: One best-score history per run
        save_path: Optional path to save the figure (PNG)
        figsize: Figure size (width, height)

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    for history in histories:
        ax.plot(range(len(history)), history, color="steelblue", alpha=0.3, linewidth=1)

    lengths = {len(h) for h in histories}
    if len(lengths) == 1 and histories and histories[0]:
        mean_history = np.mean(np.array(histories), axis=0)
        ax.plot(range(len(mean_history)), mean_history, color="darkred", linewidth=2, label="Mean")
        ax.legend()

    ax.set_xlabel("Generation")
    ax.set_ylabel("Best harmonic mean")
    ax.set_title("Convergence of the genetic search")
    ax.grid(True, alpha=0.3)

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"  Saved visualization: {save_path}")
        plt.close(fig)

    return fig


def plot_satisfaction_matrix(
    problem: MatchingProblem,
    permutation: np.ndarray,
    save_path: Optional[Union[str, Path]] = None,
    figsize: Tuple[int, int] = (8, 8)
):
    """
    Heatmap of combined satisfaction with the chosen teams outlined.

    Args:
        problem: Matching problem (rows = leads, columns = juniors)
        permutation: Chosen junior index per lead
        save_path: Optional path to save the figure (PNG)
        figsize: Figure size (width, height)

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(problem.satisfaction, cmap="YlGn", origin="upper")
    plt.colorbar(im, ax=ax, label="Combined satisfaction")

    rows = np.arange(len(permutation))
    ax.scatter(permutation, rows, marker="s", s=120, facecolors="none", edgecolors="red", linewidths=2)

    ax.set_xticks(range(len(problem.juniors)))
    ax.set_xticklabels([j.name for j in problem.juniors], rotation=90)
    ax.set_yticks(range(len(problem.leads)))
    ax.set_yticklabels([l.name for l in problem.leads])
    ax.set_xlabel("Junior")
    ax.set_ylabel("Team lead")
    ax.set_title("Satisfaction matrix and chosen teams")

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"  Saved visualization: {save_path}")
        plt.close(fig)

    return fig
