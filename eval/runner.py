"""Eval runner - parses stored trip documents and checks expected outcomes."""

import sys
from pathlib import Path
from typing import Any

import yaml

from wandermint.costs import rollup_trip
from wandermint.parsing import TripParseResult, parse_trip

SCENARIOS_PATH = Path(__file__).parent / "scenarios.yaml"


def load_scenarios(path: Path = SCENARIOS_PATH) -> dict[str, Any]:
    """Load scenarios from YAML."""
    with open(path) as f:
        result: dict[str, Any] = yaml.safe_load(f)
        return result


def build_env(result: TripParseResult) -> dict[str, Any]:
    """Names available to predicates."""
    trip = result.trip
    return {
        "result": result,
        "trip": trip,
        "rollup": rollup_trip(trip) if trip is not None else None,
        "kinds": [diagnostic.kind.value for diagnostic in result.diagnostics],
        "len": len,
        "round": round,
    }


def evaluate_predicates(
    result: TripParseResult, predicates: list[dict[str, str]]
) -> tuple[int, int]:
    """Evaluate predicates; return (passed, total)."""
    passed = 0
    total = len(predicates)
    env = build_env(result)

    for pred_data in predicates:
        predicate = pred_data["predicate"]
        description = pred_data.get("description", predicate)
        try:
            ok = eval(predicate, {"__builtins__": {}}, env)
        except Exception as e:
            print(f"  ✗ ERROR: {description} - {e}")
            continue
        if ok:
            passed += 1
            print(f"  ✓ PASS: {description}")
        else:
            print(f"  ✗ FAIL: {description}")

    return passed, total


def main() -> int:
    """Run eval scenarios."""
    scenarios = load_scenarios()["scenarios"]

    total_passed = 0
    total_predicates = 0

    for scenario in scenarios:
        print(f"\n=== Scenario: {scenario['scenario_id']} ===")
        print(f"Description: {scenario['description']}")

        result = parse_trip(scenario["document"])
        expected = scenario["expected_outcome"]
        predicates = [
            {
                "predicate": f"result.outcome.value == {expected!r}",
                "description": f"outcome is {expected}",
            },
            *scenario.get("must_satisfy", []),
        ]
        passed, total = evaluate_predicates(result, predicates)
        total_passed += passed
        total_predicates += total

        print(f"Result: {passed}/{total} predicates passed")

    print("\n=== Summary ===")
    print(f"Total: {total_passed}/{total_predicates} predicates passed")

    if total_passed < total_predicates:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
