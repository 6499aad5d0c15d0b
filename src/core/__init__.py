"""Core of the pathfinder client: domain models, contracts and the executor."""
