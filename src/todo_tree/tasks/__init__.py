"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskRef)
- task_tree.py: ordered two-level tree + index-based mutations
- identifier.py: "N" / "N.M" token parsing and bounds validation
- task_store.py: JSON file storage
- errors.py: user-facing error kinds
"""
