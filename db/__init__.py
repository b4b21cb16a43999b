"""
db/ - Database Layer
====================
Opens the PostgreSQL connection at startup (with bounded retry) and creates the schema.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
