"""GeoJSON assembly of the generated map."""

from typing import Any, Dict, List, Optional, Sequence

from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from .hydrology import MajorRiver, Tributary
from .regions import MergedRegion


def to_feature(geom: BaseGeometry, properties: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a geometry and its properties as a GeoJSON feature."""
    return {"type": "Feature", "geometry": mapping(geom), "properties": dict(properties)}


def assemble_feature_collection(
    regions: Sequence[MergedRegion],
    tributaries: Sequence[Tributary],
    major_river: Optional[MajorRiver],
) -> Dict[str, Any]:
    """
    Compose the output FeatureCollection.

    Order is biome polygons, then tributary lines, then the major river.
    The major river sits in the base layer, it is not an overlay.
    """
    features: List[Dict[str, Any]] = [to_feature(r.geometry, r.properties) for r in regions]
    features.extend(to_feature(t.geometry, t.properties) for t in tributaries)
    if major_river is not None:
        features.append(to_feature(major_river.geometry, major_river.properties))

    return {"type": "FeatureCollection", "features": features}
