"""
High-level use cases for the VitaApp API.

Each service orchestrates JsonFileStore instances to implement the resource
rules (create/update/delete records, merge the profile, build the dashboard).

Routers (FastAPI endpoints) call these services instead of reading or
writing the JSON files directly.
"""
