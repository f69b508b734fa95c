"""Services package — all business logic lives here, never in routers.

Files:
  auth.py           — registration, login sessions, cookie / bearer resolution
  organization.py   — organization profile and members
  api_token.py      — issue / list / revoke API tokens
  device.py         — devices, sensors, images, readings, device ingestion
  waste_point.py    — waste points and their volume audits
  schedule.py       — pickup schedules per waste point
  initiative.py     — initiatives, tasks, milestones, Kanban board, Gantt timeline
  goal.py, data_model.py, alert.py — plain CRUD services
  vendor.py         — vendor scorecards and contracts, name search
  metrics.py        — metric samples, sustainability summary, disposal trends, Sankey
  layout.py         — per-user layout slots and app mode
  insights.py       — OpenAI / curated sustainability insights

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
