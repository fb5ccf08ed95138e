from __future__ import annotations

from typing import List

import pandas as pd

from airnet.models import Itinerary, itinerary_cities, itinerary_distance, itinerary_price


def itineraries_frame(itineraries: List[Itinerary]) -> pd.DataFrame:
    """One row per itinerary, cheapest first (stable for equal prices)."""
    rows = []
    for i, trip in enumerate(itineraries, start=1):
        rows.append({
            "trip_id": f"trip_{i}",
            "origin": trip[0].source if trip else "",
            "destination": trip[-1].destination if trip else "",
            "stops": " -> ".join(itinerary_cities(trip)),
            "hops": len(trip),
            "distance": itinerary_distance(trip),
            "price": round(itinerary_price(trip), 2),
        })
    columns = ["trip_id", "origin", "destination", "stops", "hops", "distance", "price"]
    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values("price", kind="stable").reset_index(drop=True)


def write_itineraries_csv(itineraries: List[Itinerary], out_csv: str) -> int:
    df = itineraries_frame(itineraries)
    df.to_csv(out_csv, index=False)
    return len(df)
