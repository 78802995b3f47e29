"""
Write a synthetic cities CSV for load testing the browser.

Usage: python scripts/mock_cities.py [n_cities] [output_path]
Point 'data_file' in config/global.json at the output to browse it.
"""
import sys
from pathlib import Path

import numpy as np
import pandas as pd

n_cities = int(sys.argv[1]) if len(sys.argv) > 1 else 5000
out_path = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("data/mock_cities.csv")

rng = np.random.default_rng(0)

countries = [
    ("Brazil", "BRA"),
    ("Côte d'Ivoire", "CIV"),
    ("France", "FRA"),
    ("Germany", "DEU"),
    ("Japan", "JPN"),
    ("Norway", "NOR"),
    ("United States", "USA"),
]
capitals = ["primary", "admin", "minor", ""]
syllables = ["san", "to", "ber", "lin", "mü", "ko", "é", "ville", "burg", "ø", "ra", "na"]

country_idx = rng.integers(0, len(countries), size=n_cities)
names = [
    "".join(rng.choice(syllables, size=rng.integers(2, 4))).capitalize()
    for _ in range(n_cities)
]

cities = pd.DataFrame(
    {
        "id": np.arange(1_000_000_000, 1_000_000_000 + n_cities),
        "name": names,
        "country": [countries[i][0] for i in country_idx],
        "country_iso3": [countries[i][1] for i in country_idx],
        "capital": rng.choice(capitals, size=n_cities, p=[0.02, 0.18, 0.3, 0.5]),
        "population": pd.array(
            rng.lognormal(mean=11.0, sigma=1.5, size=n_cities).astype(int), dtype="Int64"
        ),
    }
)

# Some cities have no known population
cities.loc[rng.random(n_cities) < 0.05, "population"] = pd.NA
cities.insert(
    2,
    "name_ascii",
    cities["name"].str.normalize("NFKD").str.encode("ascii", "ignore").str.decode("ascii"),
)

out_path.parent.mkdir(parents=True, exist_ok=True)
cities.to_csv(out_path, index=False)
print(f"wrote {out_path}", cities.shape)
