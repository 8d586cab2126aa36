#!/usr/bin/env python3
"""
Demo script showing how to re-project and convert geometry text.

This example demonstrates:
1. Re-projecting GeoJSON between EPSG codes
2. Batch re-projection of WKT, one geometry per line
3. Converting between GeoJSON and WKT
4. Querying the EPSG registry
"""

from geoconvert.core.crs import is_valid_epsg_code, supported_epsg_count
from geoconvert.core.detection import detect_format
from geoconvert.core.orchestrator import convert, transform
from geoconvert.models.conversion import Conversion, Indentation, InputFormat
from geoconvert.models.crs import EPSG_PRESETS


def main():
    """Run transform demo."""
    print("=" * 70)
    print("geoconvert Demo")
    print("=" * 70)

    # Example 1: GeoJSON from WGS 84 to the Dutch national grid
    print("\n1. Re-projecting GeoJSON (EPSG:4326 -> EPSG:28992)...")
    print("-" * 70)

    geojson = '{"type": "Point", "coordinates": [4.9041, 52.3676]}'
    result = transform(geojson, InputFormat.GEOJSON, 4326, 28992, Indentation.TWO_SPACES)
    print(f"succeeded={result.succeeded}")
    print(result.data)

    # Example 2: WKT batch with one bad line
    print("\n2. Re-projecting a WKT batch (EPSG:4326 -> EPSG:3857)...")
    print("-" * 70)

    batch = "POINT (4.9 52.3)\nPOINT (not a point)\nLINESTRING (5.0 52.4, 5.1 52.5)"
    print(f"Detected format: {detect_format(batch).value}")
    result = transform(batch, InputFormat.WKT, 4326, 3857)
    print(result.data)

    # Example 3: Format conversion without re-projection
    print("\n3. Converting between GeoJSON and WKT...")
    print("-" * 70)

    print(convert('{"type":"Point","coordinates":[30,10]}', Conversion.GEOJSON_TO_WKT).data)
    print(convert("POINT (30 10)", Conversion.WKT_TO_GEOJSON).data)

    # Example 4: Registry queries
    print("\n4. EPSG registry...")
    print("-" * 70)

    print(f"Supported EPSG codes: {supported_epsg_count()}")
    print(f"EPSG:99999 valid: {is_valid_epsg_code(99999)}")
    print("\nPresets:")
    for preset in EPSG_PRESETS:
        print(f"  - {preset}")

    print("\n" + "=" * 70)
    print("Demo complete! See the test files for more examples.")
    print("=" * 70)


if __name__ == "__main__":
    main()
