"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and the JSON wire codec
- task_store.py: in-memory ordered task list persisted to one preferences slot
"""
