"""Domain layer - contracts, qualifiers and ports with no infrastructure dependencies."""
