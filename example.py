#!/usr/bin/env python3
"""
Example usage of pygron.

This script demonstrates flattening a JSON document into greppable
statements, filtering them like grep would, and reassembling the result.
"""

import json
from src.pygron import GronTransformer, GronOptions


def main():
    """Main example function."""
    print("pygron Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "users": [
            {
                "name": "Alice Johnson",
                "email": "alice@example.com",
                "company": {"name": "Initech", "catchPhrase": "Synergy"},
            },
            {
                "name": "Bob Smith",
                "email": "bob@example.com",
                "company": {"name": "Globex", "catchPhrase": "Scale"},
            },
        ],
        "meta": {"content-type": "application/json", "count": 2},
    }

    transformer = GronTransformer()

    # Forward direction
    result = transformer.gron(json.dumps(sample_data))
    print(f"\n📄 {result.statement_count} statements:")
    print(result.output)

    # Unsorted output keeps the document order
    unsorted = transformer.gron(json.dumps(sample_data), GronOptions(sort=False))
    print("📄 Unsorted:")
    print(unsorted.output)

    # Keep only the company lines, as `grep company` would
    filtered = "\n".join(line for line in result.output.splitlines() if "company" in line)
    print("🔍 Filtered statements:")
    print(filtered)

    # Reverse direction
    reassembled = transformer.ungron(filtered)
    if reassembled.success:
        print("\n✅ Reassembled JSON:")
        print(reassembled.json_string)
    else:
        print("\n❌ Ungron failed:")
        for error in reassembled.errors or []:
            print(f"   • {error}")


if __name__ == "__main__":
    main()
