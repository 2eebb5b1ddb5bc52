#!/usr/bin/env python3
"""Generate demo student profiles for local matching runs."""

import argparse
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, get_args

import pandas as pd
import shortuuid

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from synthetic_generation.synth_models import Interest, Role, Skill, SyntheticProfile


FIRST_NAMES = [
    "Adaeze", "Kwame", "Amina", "Tariq", "Fatou", "Tendai", "Chiamaka", "Samuel",
    "Zainab", "Ahmed", "Nomsa", "Kofi", "Wanjiru", "Yusuf", "Abena", "Thabo",
]
LAST_NAMES = [
    "Okonkwo", "Asante", "Moyo", "Hassan", "Diallo", "Eze", "Okello", "Wanjiku",
    "Ibrahim", "Mensah", "Dlamini", "Kamau", "Bello", "Ndlovu", "Owusu", "Sow",
]
UNIVERSITIES = [
    "University of Lagos",
    "University of Ghana",
    "University of Cape Town",
    "Cairo University",
    "Université Cheikh Anta Diop",
    "University of Zimbabwe",
    "University of Ibadan",
    "Makerere University",
    "University of Nairobi",
    "University of Khartoum",
]
BIOS = [
    "Final year Computer Science student passionate about using technology to solve African problems.",
    "MBA candidate with consulting experience, keen to build in agriculture and supply chains.",
    "Digital marketing specialist focused on growth for early-stage startups.",
    "Backend engineer interested in payment infrastructure and scalable systems.",
    "Product designer building inclusive experiences for low-bandwidth environments.",
    "Finance graduate working on financial inclusion for small businesses.",
    "Student founder",
]


def generate_profile_id() -> str:
    """Generate a short UUID for a demo profile."""
    return shortuuid.uuid()


def generate_timestamped_filename(prefix: str, extension: str) -> str:
    """Generate a timestamped filename, e.g. "profiles_20241220_143022.csv"."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}.{extension}"


def generate_profile(rng: random.Random) -> Dict[str, Any]:
    """Build one validated profile record with randomly sparse optional sections."""
    first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
    handle = f"{first}.{last}".lower()
    record = SyntheticProfile(
        id=generate_profile_id(),
        full_name=f"{first} {last}",
        email=f"{handle}@example.com",
        university=rng.choice(UNIVERSITIES),
        bio=rng.choice(BIOS) if rng.random() < 0.9 else None,
        skills=rng.sample(list(get_args(Skill)), k=rng.randint(0, 5)),
        interests=rng.sample(list(get_args(Interest)), k=rng.randint(0, 4)),
        role=rng.choice(list(get_args(Role))) if rng.random() < 0.85 else None,
        linkedin_url=f"https://www.linkedin.com/in/{handle.replace('.', '-')}" if rng.random() < 0.6 else None,
        avatar_url=f"https://avatars.example.com/{handle}.png" if rng.random() < 0.5 else None,
        is_onboarded=rng.random() < 0.9,
    )
    return record.model_dump()


def generate_profiles(total: int, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    return [generate_profile(rng) for _ in range(total)]


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Generate demo student profiles.")
    parser.add_argument("--total", type=int, required=True, help="Number of profiles to generate")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for the profile contents")
    parser.add_argument("--out-dir", type=Path, default=Path("data"), help="Output directory")
    return parser.parse_args()


def main() -> None:
    """Entry point for CLI execution."""
    args = parse_args()
    if args.total <= 0:
        raise ValueError("--total must be positive")

    args.out_dir.mkdir(parents=True, exist_ok=True)
    output_path = args.out_dir / generate_timestamped_filename("profiles", "csv")

    print(f"Generating {args.total} profiles (seed={args.seed})...")
    records = generate_profiles(args.total, args.seed)
    df = pd.DataFrame(records)
    for col in ["skills", "interests"]:
        df[col] = df[col].map(lambda v: "; ".join(v))
    df.to_csv(output_path, index=False)
    print(f"Saved {len(df)} profiles to {output_path}")


if __name__ == "__main__":
    main()
