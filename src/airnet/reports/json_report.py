import json
from typing import Any, Dict, FrozenSet, List

from airnet.models import Itinerary, Route, itinerary_distance, itinerary_price


def _itinerary_dict(trip: Itinerary) -> Dict[str, Any]:
    return {
        "hops": len(trip),
        "distance": itinerary_distance(trip),
        "price": round(itinerary_price(trip), 2),
        "routes": [r.to_dict() for r in trip],
    }


class JSONReporter:
    """Writes query results as JSON"""

    def itineraries(self, query: str, itineraries: List[Itinerary], output_path: str) -> Dict[str, Any]:
        report = {
            "query": query,
            "total": len(itineraries),
            "itineraries": [_itinerary_dict(t) for t in itineraries],
        }
        self._write(report, output_path)
        return report

    def forest(self, forest: List[FrozenSet[Route]], output_path: str) -> Dict[str, Any]:
        trees = []
        for tree in forest:
            edges = sorted(tree, key=lambda r: (r.distance, r.source, r.destination))
            trees.append({
                "edges": len(edges),
                "distance": sum(r.distance for r in edges),
                "routes": [r.to_dict() for r in edges],
            })
        report = {"query": "mst", "total": len(trees), "trees": trees}
        self._write(report, output_path)
        return report

    def _write(self, report: Dict[str, Any], output_path: str) -> None:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
