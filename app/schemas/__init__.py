"""Pydantic schemas package.

Folder intent:
  common.py        — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  auth.py          — register/login, current user, API tokens
  organization.py  — organization profile and member management
  device.py        — devices, sensors, readings, images
  waste_point.py   — waste points and their location data
  initiative.py    — initiatives, tasks, milestones, Kanban board, Gantt events
  goal.py, vendor.py, data_model.py, alert.py — plain CRUD schemas
  metric.py        — metric samples and dashboard read models (summary, trends, Sankey)
  layout.py        — per-user layout slots and app mode
  insight.py       — AI / curated sustainability insights
"""
