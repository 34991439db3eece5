"""
I/O utilities for team building.

Handles CSV parsing of participants and wishlists, team export, metadata
sidecars and random problem generation.
"""

import csv
from pathlib import Path
from typing import Dict, Optional, Union
import numpy as np
import yaml

from .data_models import Participant, Wishlist, Team
from .preferences import team_satisfaction


def load_participants_csv(csv_path: Union[str, Path]) -> list[Participant]:
    """
    Load participants from CSV file.

    Expected CSV format:
        id,name
        1,TeamLead_1
        2,TeamLead_2

    Args:
        csv_path: Path to CSV file

    Returns:
        Participants in file order

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV format is invalid
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    participants = []

    with open(csv_path, 'r', newline='') as f:
        reader = csv.DictReader(f)

        if not {'id', 'name'}.issubset(set(reader.fieldnames or [])):
            raise ValueError(f"Invalid CSV format in {csv_path}. Expected columns: id,name")

        for line_no, row in enumerate(reader, start=2):
            try:
                participant_id = int(row['id'])
            except (TypeError, ValueError):
                raise ValueError(f"Invalid participant id in {csv_path}, line {line_no}: {row['id']!r}")
            participants.append(Participant(participant_id, (row['name'] or '').strip()))

    return participants


def load_wishlists_csv(csv_path: Union[str, Path]) -> list[Wishlist]:
    """
    Load wishlists from CSV file.

    Expected CSV format (desired IDs space-separated, most preferred first):
        owner_id,desired_ids
        1,7 5 6 8
        2,5 8 7 6

    Args:
        csv_path: Path to CSV file

    Returns:
        Wishlists in file order

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV format is invalid
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    wishlists = []

    with open(csv_path, 'r', newline='') as f:
        reader = csv.DictReader(f)

        if not {'owner_id', 'desired_ids'}.issubset(set(reader.fieldnames or [])):
            raise ValueError(f"Invalid CSV format in {csv_path}. Expected columns: owner_id,desired_ids")

        for line_no, row in enumerate(reader, start=2):
            try:
                owner_id = int(row['owner_id'])
                desired = [int(token) for token in (row['desired_ids'] or '').split()]
            except ValueError:
                raise ValueError(f"Invalid wishlist row in {csv_path}, line {line_no}")
            wishlists.append(Wishlist(owner_id, tuple(desired)))

    return wishlists


def save_teams_csv(
    teams: list[Team],
    output_path: Union[str, Path],
    lead_prefs: Optional[Dict[int, Wishlist]] = None,
    junior_prefs: Optional[Dict[int, Wishlist]] = None,
    overwrite: bool = False
) -> Path:
    """
    Save teams to CSV file.

    Args:
        teams: Teams to save
        output_path: Path for output CSV
        lead_prefs: Lead wishlists, used for the satisfaction column
        junior_prefs: Junior wishlists, used for the satisfaction column
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    lead_prefs = lead_prefs or {}
    junior_prefs = junior_prefs or {}

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['lead_id', 'lead_name', 'junior_id', 'junior_name', 'satisfaction'])

        for team in teams:
            writer.writerow([
                team.team_lead.id,
                team.team_lead.name,
                team.junior.id,
                team.junior.name,
                team_satisfaction(team, lead_prefs, junior_prefs),
            ])

    return output_path


def save_metadata(
    metadata: dict,
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save metadata to YAML sidecar file.

    Args:
        metadata: Metadata dictionary
        output_path: Path for output YAML
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved metadata file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Metadata file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        yaml.dump(metadata, f, default_flow_style=False, sort_keys=False)

    return output_path


def generate_random_problem(
    size: int,
    rng: np.random.Generator
) -> tuple[list[Participant], list[Participant], list[Wishlist], list[Wishlist]]:
    """
    Generate random participants with full shuffled wishlists.

    Team leads get IDs 1..size, juniors get IDs size+1..2*size.

    Args:
        size: Number of team leads (and of juniors)
        rng: Random number generator

    Returns:
        Tuple of (leads, juniors, lead_wishlists, junior_wishlists)
    """
    leads = [Participant(i + 1, f"TeamLead_{i + 1}") for i in range(size)]
    juniors = [Participant(size + j + 1, f"Junior_{j + 1}") for j in range(size)]

    junior_ids = np.array([j.id for j in juniors])
    lead_ids = np.array([l.id for l in leads])

    lead_wishlists = [
        Wishlist(lead.id, tuple(int(x) for x in rng.permutation(junior_ids)))
        for lead in leads
    ]
    junior_wishlists = [
        Wishlist(junior.id, tuple(int(x) for x in rng.permutation(lead_ids)))
        for junior in juniors
    ]

    return leads, juniors, lead_wishlists, junior_wishlists
