"""v1 router package — all /api/v1/* endpoints live here.

Files:
  auth.py, organization.py, api_tokens.py   — accounts and tenancy
  devices.py, sensors.py, images.py, ingest.py — IoT devices and their data
  waste_points.py, schedules.py, initiatives.py, goals.py, data_models.py, alerts.py
  vendors.py      — vendors, with name search
  metrics.py      — metric samples, sustainability summary, disposal trends, Sankey
  layouts.py      — per-user layout slots and app mode
  insights.py     — sustainability insights

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
