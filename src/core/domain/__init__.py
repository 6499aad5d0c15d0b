"""Domain models for the pathfinder client.

Pure data structures (Pydantic v2): wire types, the timestamp codec and the
catalog entities. Nothing here knows about HTTP or the CLI.
"""
