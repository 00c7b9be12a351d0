"""Export JSON schemas for Trip and CostRollup."""

import json
from pathlib import Path

from wandermint.models import CostRollup, Trip


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    # Trip schema uses the stored document's camelCase keys
    trip_schema = Trip.model_json_schema(by_alias=True)
    trip_path = schemas_dir / "Trip.schema.json"
    with open(trip_path, "w") as f:
        json.dump(trip_schema, f, indent=2)
    print(f"Exported Trip schema to {trip_path}")

    rollup_schema = CostRollup.model_json_schema()
    rollup_path = schemas_dir / "CostRollup.schema.json"
    with open(rollup_path, "w") as f:
        json.dump(rollup_schema, f, indent=2)
    print(f"Exported CostRollup schema to {rollup_path}")


if __name__ == "__main__":
    main()
