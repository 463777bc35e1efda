"""Pure narrative derivation: conditions, framing, comparison, assembly."""
