"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, Weekday, template, snapshot)
- task_store.py: in-memory list + merge of template and snapshot
- persistence.py: JSON files for the template and the daily snapshot
"""
