"""
Task subsystem.

Components:
- task_models.py: data structures (Task, User, Priority, TaskStatus)
- task_manager.py: per-user CRUD over the task store
"""
